import pytest

from rbseq.exceptions import (
    RbseqError,
    ConfigurationError,
    InvalidArgumentError,
    NullCallbackError,
    SinglePassSourceError,
)


class TestRbseqError:
    """Test the base exception."""

    def test_configuration_error_is_not_a_value_error(self):
        err = ConfigurationError("bad")
        assert isinstance(err, RbseqError)
        assert not isinstance(err, ValueError)

    def test_context_and_suggestions_are_chainable(self):
        err = ConfigurationError("bad value").add_context("source", "env").add_suggestion("Fix it")
        assert err.context["source"] == "env"
        assert err.suggestions == ["Fix it"]
        assert str(err) == "bad value -- Suggestions: Fix it"

    def test_empty_context_key_and_suggestion_ignored(self):
        err = ConfigurationError("x").add_context("", 1).add_suggestion("")
        assert err.context == {}
        assert err.suggestions == []

    def test_custom_error_code(self):
        assert ConfigurationError("x", error_code="CUSTOM").error_code == "CUSTOM"


class TestConfigurationError:
    """Test ConfigurationError formatting."""

    def test_field_prefix(self):
        err = ConfigurationError("must be positive", config_field="chunking.emit_empty_group")
        assert str(err) == "[chunking.emit_empty_group] must be positive"
        assert err.context["config_field"] == "chunking.emit_empty_group"
        assert err.error_code == "CONFIGURATION_ERROR"


class TestArgumentErrors:
    """Test the argument validation errors."""

    def test_invalid_argument_message(self):
        err = InvalidArgumentError("size", 0, expected="an integer >= 1")
        assert str(err) == "Invalid parameter 'size': 0 (expected an integer >= 1)"
        assert err.context == {
            "parameter_name": "size",
            "parameter_value": "0",
            "expected": "an integer >= 1",
        }

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            raise InvalidArgumentError("size", -1)

    def test_null_callback_is_type_error(self):
        err = NullCallbackError("action")
        assert isinstance(err, TypeError)
        assert isinstance(err, InvalidArgumentError)
        assert err.message == "Callback 'action' is required but was None"
        assert "Pass a function or lambda as 'action'" in str(err)

    def test_null_callback_for_non_callable(self):
        err = NullCallbackError("key", "name")
        assert err.message == "Callback 'key' must be callable, got str"

    def test_single_pass_source(self):
        err = SinglePassSourceError(iter([]), passes=3)
        assert err.error_code == "SINGLE_PASS_SOURCE"
        assert err.parameter_name == "source"
        assert "3 passes" in err.message
        assert err.context["passes"] == 3
