import itertools
from unittest.mock import Mock

import pytest

from rbseq import Chain, NOT_FOUND
from rbseq.exceptions import NullCallbackError, SinglePassSourceError


class TestChain:
    """Test the fluent Chain wrapper."""

    def test_compact_then_reject(self):
        assert Chain([1, None, 2, 3, 4]).compact().reject(lambda x: x % 2).to_list() == [2, 4]

    def test_building_a_chain_pulls_nothing(self):
        action = Mock()
        chain = Chain([1, 2, 3]).for_each(action).distinct(lambda x: x)
        action.assert_not_called()

        assert list(chain) == [1, 2, 3]
        assert action.call_count == 3

    def test_chunk_then_assoc(self):
        groups = Chain(range(1, 8)).chunk(3)
        assert groups.assoc_first_or_default(5) == [4, 5, 6]

    def test_assoc_not_found(self):
        assert Chain([[1], [2]]).assoc_first_or_default(3) is NOT_FOUND

    def test_indexed_for_each(self):
        seen = []
        Chain("abc").for_each_with_index(lambda e, i: seen.append((e, i))).to_list()
        assert seen == [("a", 0), ("b", 1), ("c", 2)]

    def test_first(self):
        assert Chain(itertools.count(5)).reject(lambda x: x < 8).first() == 8
        assert Chain([]).first() is NOT_FOUND
        assert Chain([]).first(default=0) == 0

    def test_cycle_over_collection(self):
        action = Mock()
        Chain([1, 2]).cycle(action, 3)
        assert action.call_count == 6

    def test_cycle_after_lazy_step_is_single_pass(self):
        with pytest.raises(SinglePassSourceError):
            Chain([1, 2]).compact().cycle(lambda x: None, 2)

    def test_empty_chunk_follows_argument(self):
        assert Chain([]).chunk(2).to_list() == [[]]
        assert Chain([]).chunk(2, emit_empty=False).to_list() == []

    def test_validation_happens_when_step_is_added(self):
        with pytest.raises(NullCallbackError):
            Chain([1]).reject(None)

    def test_repr(self):
        assert repr(Chain([1])) == "Chain([1])"
