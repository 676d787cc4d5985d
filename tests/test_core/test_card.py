"""
Tests for Card and Deck classes.
"""

import random

import pytest
from holdem.core.card import Card, Deck, DeckExhaustedError, Rank, Suit, parse_cards


class TestCard:
    """Tests for Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_rank_and_suit_indices(self):
        """Rank and suit ordinals are the scoring weights."""
        assert int(Rank.TWO) == 0
        assert int(Rank.ACE) == 12
        assert len(Rank) == 13
        assert [int(s) for s in (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)] == [0, 1, 2, 3]

    def test_card_from_string(self):
        """Test creating cards from string notation."""
        card1 = Card.from_string("As")
        assert card1.rank == Rank.ACE
        assert card1.suit == Suit.SPADES

        card2 = Card.from_string("K♥")
        assert card2.rank == Rank.KING
        assert card2.suit == Suit.HEARTS

        card3 = Card.from_string("10d")
        assert card3.rank == Rank.TEN
        assert card3.suit == Suit.DIAMONDS

    def test_card_from_bad_string(self):
        with pytest.raises(ValueError):
            Card.from_string("Zs")
        with pytest.raises(ValueError):
            Card.from_string("Ax")
        with pytest.raises(ValueError):
            Card.from_string("A")

    def test_card_is_immutable(self):
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING
        with pytest.raises(AttributeError):
            card.suit = Suit.HEARTS

    def test_card_equality(self):
        """Test card equality."""
        card1 = Card(Rank.ACE, Suit.SPADES)
        card2 = Card(Rank.ACE, Suit.SPADES)
        card3 = Card(Rank.KING, Suit.SPADES)

        assert card1 == card2
        assert card1 != card3

    def test_card_hash(self):
        """Test card hashing (for use in sets/dicts)."""
        card_set = {Card(Rank.ACE, Suit.SPADES)}
        assert Card(Rank.ACE, Suit.SPADES) in card_set

    def test_card_comparison(self):
        """Test card comparison (by rank)."""
        ace = Card(Rank.ACE, Suit.SPADES)
        king = Card(Rank.KING, Suit.HEARTS)
        two = Card(Rank.TWO, Suit.CLUBS)

        assert two < king < ace

    def test_card_str(self):
        """Test card string representation."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert str(card) == "A♠"
        assert card.short_str == "As"
        assert card.long_name == "Ace of Spades"


class TestDeck:
    """Tests for Deck class."""

    def test_deck_has_52_unique_cards(self, deck):
        """A new deck holds every (suit, rank) pair exactly once."""
        assert len(deck) == 52
        assert deck.remaining == 52
        pairs = {(c.suit, c.rank) for c in deck.cards}
        assert len(pairs) == 52

    def test_deck_construction_order(self, deck):
        """Spades are built first, Clubs last; deal takes from the end."""
        cards = deck.cards
        assert cards[0] == Card(Rank.TWO, Suit.SPADES)
        assert cards[12] == Card(Rank.ACE, Suit.SPADES)
        assert cards[-1] == Card(Rank.ACE, Suit.CLUBS)

        assert deck.deal() == Card(Rank.ACE, Suit.CLUBS)
        assert deck.deal() == Card(Rank.KING, Suit.CLUBS)

    def test_deck_deal(self, shuffled_deck):
        """Test dealing cards."""
        card = shuffled_deck.deal()
        assert isinstance(card, Card)
        assert shuffled_deck.remaining == 51

    def test_deck_burn(self, shuffled_deck):
        """Test burning a card."""
        burned = shuffled_deck.burn()
        assert isinstance(burned, Card)
        assert shuffled_deck.remaining == 51

    def test_deal_52_then_exhausted(self, shuffled_deck):
        """52 deals empty the deck, the 53rd signals exhaustion."""
        dealt = [shuffled_deck.deal() for _ in range(52)]
        assert len(set(dealt)) == 52
        assert shuffled_deck.remaining == 0

        with pytest.raises(DeckExhaustedError):
            shuffled_deck.deal()

    def test_exhaustion_is_a_value_error(self, deck):
        for _ in range(52):
            deck.deal()
        with pytest.raises(ValueError):
            deck.burn()

    def test_deck_reset(self, deck):
        """Test resetting the deck."""
        for _ in range(10):
            deck.deal()
        assert deck.remaining == 42

        deck.reset()
        assert deck.remaining == 52
        assert deck.dealt_cards == []

    def test_shuffle_keeps_cards(self, deck):
        before = set(deck.cards)
        deck.shuffle()
        assert set(deck.cards) == before

    def test_seeded_shuffle_is_reproducible(self):
        deck1 = Deck(shuffle=True, rng=random.Random(42))
        deck2 = Deck(shuffle=True, rng=random.Random(42))
        assert deck1.cards == deck2.cards

    def test_deck_dealt_cards_tracked(self, deck):
        """Test that dealt cards are tracked."""
        dealt = [deck.deal() for _ in range(3)]
        assert deck.dealt_cards == dealt


class TestParseCards:
    """Tests for parse_cards function."""

    def test_parse_space_separated(self):
        cards = parse_cards("As Kh Qd")
        assert [c.rank for c in cards] == [Rank.ACE, Rank.KING, Rank.QUEEN]

    def test_parse_no_separator(self):
        assert len(parse_cards("AsKhQd")) == 3

    def test_parse_with_symbols(self):
        assert len(parse_cards("A♠ K♥ Q♦")) == 3

    def test_parse_empty(self):
        assert parse_cards("") == []
