"""Tests for the Card, Rank, Suit and Color models."""

import pytest

from deckcraft.errors import ParseError
from deckcraft.models.card import (
    ALL_SUITS, BLACK_SUITS, RED_SUITS, STANDARD_RANKS, Card, Color, Rank, Suit,
    MAX_CARD_INDEX,
)


class TestSuit:
    """Tests for the Suit enum."""

    def test_all_suits(self):
        assert ALL_SUITS == (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)
        assert len(set(ALL_SUITS)) == 4

    def test_colors(self):
        assert Suit.HEARTS.color is Color.RED
        assert Suit.DIAMONDS.color is Color.RED
        assert Suit.CLUBS.color is Color.BLACK
        assert Suit.SPADES.color is Color.BLACK
        assert set(RED_SUITS) == {s for s in ALL_SUITS if s.is_red}
        assert set(BLACK_SUITS) == {s for s in ALL_SUITS if s.is_black}

    def test_symbols(self):
        assert [s.symbol for s in ALL_SUITS] == ["♥", "♦", "♣", "♠"]
        assert str(Suit.SPADES) == "♠"

    def test_ordinal(self):
        assert [s.ordinal for s in ALL_SUITS] == [0, 1, 2, 3]

    @pytest.mark.parametrize("token", ["s", "S", "Spades", "spade", "♠", "♤", " SPADES "])
    def test_from_symbol(self, token):
        assert Suit.from_symbol(token) is Suit.SPADES

    def test_from_symbol_unknown(self):
        with pytest.raises(ParseError):
            Suit.from_symbol("x")


class TestRank:
    """Tests for the Rank enum."""

    def test_thirteen_ranks(self):
        assert len(STANDARD_RANKS) == 13
        assert STANDARD_RANKS[0] is Rank.TWO
        assert STANDARD_RANKS[-1] is Rank.ACE

    def test_symbols(self):
        assert Rank.TEN.symbol == "10"
        assert Rank.KING.symbol == "K"
        assert str(Rank.ACE) == "A"

    @pytest.mark.parametrize("token,rank", [
        ("10", Rank.TEN), ("T", Rank.TEN), ("ten", Rank.TEN),
        ("k", Rank.KING), ("King", Rank.KING), ("ACE", Rank.ACE), ("2", Rank.TWO),
    ])
    def test_from_char(self, token, rank):
        assert Rank.from_char(token) is rank

    def test_from_char_unknown(self):
        with pytest.raises(ParseError):
            Rank.from_char("1")

    def test_face_and_ace(self):
        assert Rank.JACK.is_face and Rank.QUEEN.is_face and Rank.KING.is_face
        assert not Rank.ACE.is_face
        assert Rank.ACE.is_ace


class TestCardConstruction:
    """Tests for building cards and their predicates."""

    def test_new(self):
        card = Card(Suit.HEARTS, Rank.ACE)
        assert card.suit is Suit.HEARTS
        assert card.rank is Rank.ACE
        assert card.color is Color.RED

    def test_rejects_bad_types(self):
        with pytest.raises(TypeError):
            Card("hearts-ish", Rank.ACE)
        with pytest.raises(TypeError):
            Card(Suit.HEARTS, 14)
        with pytest.raises(TypeError):
            Card(None, Rank.ACE)

    def test_immutable(self):
        card = Card(Suit.HEARTS, Rank.ACE)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_predicates(self):
        assert Card(Suit.SPADES, Rank.ACE).is_ace
        assert Card(Suit.SPADES, Rank.KING).is_face_card
        assert Card(Suit.SPADES, Rank.TEN).is_value_card
        assert not Card(Suit.SPADES, Rank.ACE).is_value_card
        joker = Card.joker()
        assert joker.is_joker
        assert not joker.is_ace and not joker.is_face_card and not joker.is_value_card

    def test_same_rank_suit_color(self):
        ah, ad, kh = Card(Suit.HEARTS, Rank.ACE), Card(Suit.DIAMONDS, Rank.ACE), Card(Suit.HEARTS, Rank.KING)
        assert ah.is_same_rank(ad)
        assert not ah.is_same_rank(kh)
        assert ah.is_same_suit(kh)
        assert not ah.is_same_suit(ad)
        assert ah.is_same_color(ad)
        assert not ah.is_same_color(Card(Suit.CLUBS, Rank.ACE))


class TestCardEquality:
    """Tests for card equality, hashing and ordering."""

    def test_structural_equality(self):
        assert Card(Suit.HEARTS, Rank.ACE) == Card(Suit.HEARTS, Rank.ACE)
        assert Card(Suit.HEARTS, Rank.ACE) != Card(Suit.SPADES, Rank.ACE)
        assert Card(Suit.HEARTS, Rank.ACE) != Card(Suit.HEARTS, Rank.KING)

    def test_hashable(self):
        cards = {Card(Suit.HEARTS, Rank.ACE), Card(Suit.HEARTS, Rank.ACE), Card(Suit.SPADES, Rank.KING)}
        assert len(cards) == 2

    def test_all_jokers_equal(self):
        """Joker tags are for display only."""
        assert Card.joker() == Card.joker(Suit.HEARTS) == Card.joker(Suit.SPADES)
        assert len({Card.joker(), Card.joker(Suit.HEARTS)}) == 1

    def test_joker_keeps_tag(self):
        joker = Card.joker(Suit.DIAMONDS)
        assert joker.suit is Suit.DIAMONDS
        assert joker.color is Color.RED
        assert Card.joker().color is None

    def test_ordering(self):
        two = Card(Suit.SPADES, Rank.TWO)
        king = Card(Suit.HEARTS, Rank.KING)
        ace = Card(Suit.HEARTS, Rank.ACE)
        assert sorted([ace, Card.joker(), two, king]) == [two, king, ace, Card.joker()]
        assert Card(Suit.HEARTS, Rank.ACE) < Card(Suit.SPADES, Rank.ACE)


class TestCardText:
    def test_short_form(self):
        assert str(Card(Suit.SPADES, Rank.ACE)) == "A♠"
        assert str(Card(Suit.HEARTS, Rank.KING)) == "K♥"
        assert str(Card(Suit.CLUBS, Rank.TWO)) == "2♣"
        assert Card(Suit.DIAMONDS, Rank.TEN).to_short() == "10♦"

    def test_joker_short_form(self):
        assert Card.joker().to_short() == "🃏"
        assert Card.joker(Suit.SPADES).to_short() == "🃏♠"

    def test_repr(self):
        assert repr(Card(Suit.SPADES, Rank.ACE)) == "Card(Suit.SPADES, Rank.ACE)"
        assert repr(Card.joker(Suit.HEARTS)) == "Card.joker(Suit.HEARTS)"


class TestCardIndex:
    """Tests for the integer card encoding."""

    def test_known_indices(self):
        assert Card(Suit.HEARTS, Rank.TWO).to_index() == 0
        assert Card.joker(Suit.HEARTS).to_index() == 13
        assert Card(Suit.DIAMONDS, Rank.TWO).to_index() == 14
        assert Card(Suit.HEARTS, Rank.ACE).to_index() == 12
        assert Card(Suit.SPADES, Rank.KING).to_index() == 53
        assert Card.joker(Suit.SPADES).to_index() == 55
        assert Card.joker().to_index() == 56

    def test_every_index_round_trips(self):
        for index in range(MAX_CARD_INDEX + 1):
            card = Card.from_index(index)
            assert card.to_index() == index

    @pytest.mark.parametrize("bad", [-1, MAX_CARD_INDEX + 1, 255])
    def test_out_of_range(self, bad):
        with pytest.raises(ParseError):
            Card.from_index(bad)

    def test_rejects_non_int(self):
        with pytest.raises(ParseError):
            Card.from_index("3")
