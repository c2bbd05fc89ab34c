import itertools
from unittest.mock import Mock

import pytest

from rbseq.sequences import reject, compact
from rbseq.exceptions import NullCallbackError, InvalidArgumentError


class TestReject:
    """Test reject()."""

    def test_drops_matching_elements(self):
        assert list(reject([1, 2, 3, 4, 5, 6], lambda x: x % 2 == 0)) == [1, 3, 5]

    def test_reject_and_filter_partition_source(self):
        """Kept and rejected elements together rebuild the source in order."""
        source = [5, 8, 1, 12, 7, 3, 10]
        pred = lambda x: x > 6
        kept = list(reject(source, pred))
        dropped = list(filter(pred, source))

        assert sorted(kept + dropped) == sorted(source)
        assert not any(pred(x) for x in kept)
        assert kept == [x for x in source if not pred(x)]

    def test_truthiness_of_predicate_result(self):
        assert list(reject(["", "a", None, "b"], lambda s: s)) == ["", None]

    def test_is_lazy(self):
        pred = Mock(return_value=False)
        result = reject([1, 2, 3], pred)
        pred.assert_not_called()

        assert next(result) == 1
        assert pred.call_count == 1

    def test_infinite_source(self):
        evens = reject(itertools.count(), lambda x: x % 2)
        assert list(itertools.islice(evens, 4)) == [0, 2, 4, 6]

    def test_empty_source(self):
        assert list(reject([], lambda x: True)) == []

    def test_missing_predicate_fails_on_call(self):
        with pytest.raises(NullCallbackError) as exc_info:
            reject([1, 2], None)
        assert exc_info.value.parameter_name == "predicate"
        assert isinstance(exc_info.value, InvalidArgumentError)
        assert isinstance(exc_info.value, TypeError)

    def test_non_callable_predicate(self):
        with pytest.raises(NullCallbackError) as exc_info:
            reject([1, 2], 42)
        assert "must be callable" in str(exc_info.value)

    def test_predicate_error_propagates_after_earlier_elements(self):
        def pred(x):
            if x == 3:
                raise RuntimeError("boom")
            return False

        result = reject([1, 2, 3, 4], pred)
        assert next(result) == 1
        assert next(result) == 2
        with pytest.raises(RuntimeError, match="boom"):
            next(result)


class TestCompact:
    """Test compact()."""

    def test_removes_none(self):
        assert list(compact(["a", None, "b", None, None, "c"])) == ["a", "b", "c"]

    def test_keeps_falsy_values(self):
        assert list(compact([0, None, "", False, [], None])) == [0, "", False, []]

    def test_count_matches(self):
        source = [None, 1, None, 2, 3, None]
        result = list(compact(source))
        assert len(result) == len(source) - source.count(None)

    def test_all_none(self):
        assert list(compact([None, None])) == []

    def test_infinite_source(self):
        source = itertools.cycle([None, 1])
        assert list(itertools.islice(compact(source), 3)) == [1, 1, 1]

    def test_is_lazy(self):
        def source():
            yield 1
            raise AssertionError("pulled too far")

        result = compact(source())
        assert next(result) == 1
