"""
Tests for the bet vector entries.
"""

import pytest
from holdem.core.rules import BetKind, BetState


class TestBetState:
    """Tests for BetState."""

    def test_sentinels(self):
        assert BetState.from_sentinel(-1) == BetState.folded()
        assert BetState.from_sentinel(-2) == BetState.not_yet_acted()
        assert BetState.from_sentinel(0) == BetState.bet(0)
        assert BetState.from_sentinel(75).amount == 75

    def test_to_sentinel(self):
        assert BetState.folded().to_sentinel() == -1
        assert BetState.not_yet_acted().to_sentinel() == -2
        assert BetState.bet(30).to_sentinel() == 30

    def test_invalid_sentinel(self):
        with pytest.raises(ValueError):
            BetState.from_sentinel(-3)

    def test_negative_bet(self):
        with pytest.raises(ValueError):
            BetState.bet(-5)

    def test_folded_has_no_amount(self):
        with pytest.raises(ValueError):
            BetState(BetKind.FOLDED, 10)

    def test_coerce(self):
        state = BetState.bet(10)
        assert BetState.coerce(state) is state
        assert BetState.coerce(-1).is_folded

    def test_coerce_rejects_other_types(self):
        with pytest.raises(TypeError):
            BetState.coerce(True)
        with pytest.raises(TypeError):
            BetState.coerce("10")

    def test_flags(self):
        assert BetState.folded().is_folded
        assert not BetState.not_yet_acted().has_acted
        assert BetState.bet(0).has_acted

    def test_matches(self):
        assert BetState.bet(20).matches(20)
        assert not BetState.bet(10).matches(20)
        assert not BetState.not_yet_acted().matches(0)
        assert not BetState.folded().matches(0)
