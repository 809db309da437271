import logging
import warnings

import pytest

from playingcard.card import (CardIdentity, Suit, compare, rank_name, suit_glyph,
                              suit_name)
from playingcard.errors import InvalidRank, InvalidSuitOrdinal, ValidationError

ALL_CARDS = [CardIdentity(s, r) for s in Suit for r in range(1, 14)]


@pytest.mark.parametrize("suit", list(Suit))
@pytest.mark.parametrize("rank", range(1, 14))
def test_every_suit_and_rank_is_constructible(suit, rank):
    card = CardIdentity.create(suit, rank)
    if suit is Suit.NONE:
        assert card.display_string() == "鬼牌"
    else:
        assert card.display_string() == rank_name(rank) + suit_name(suit)


def test_display_string_examples():
    assert CardIdentity(Suit.SPADE, 1).display_string() == "A黑桃"
    assert CardIdentity(Suit.HEART, 10).display_string() == "10紅心"
    assert CardIdentity(Suit.DIAMOND, 12).display_string() == "Q方塊"
    assert str(CardIdentity(Suit.CLUB, 13)) == "K梅花"
    assert str(CardIdentity(Suit.JOKER)) == "鬼牌"


def test_display_string_custom_template():
    card = CardIdentity(Suit.HEART, 11)
    assert card.display_string("{0}{1}") == "紅心J"
    assert card.display_string("[{0}]") == "[紅心]"


def test_display_string_bad_template_returns_none(caplog):
    card = CardIdentity(Suit.SPADE, 3)
    with caplog.at_level(logging.WARNING):
        assert card.display_string("{0}{1}{2}") is None
        assert card.display_string("{suit}") is None
        assert card.display_string("{0") is None
    assert "Could not format card" in caplog.text


def test_lookup_tables():
    assert suit_glyph(Suit.SPADE) == "♠"
    assert suit_glyph(Suit.HEART) == "♥"
    assert suit_glyph(Suit.CLUB) == "♣"
    assert suit_glyph(Suit.DIAMOND) == "♦"
    assert suit_glyph(Suit.NONE) == "♨"
    assert [suit_name(s) for s in Suit] == ["鬼牌", "黑桃", "紅心", "梅花", "方塊"]
    assert Suit.HEART.display_name == "紅心"
    assert [rank_name(r) for r in (1, 10, 11, 12, 13)] == ["A", "10", "J", "Q", "K"]


def test_rank_name_out_of_range():
    with pytest.raises(InvalidRank):
        rank_name(0)
    with pytest.raises(InvalidRank):
        rank_name(14)


def test_suit_colors():
    assert Suit.SPADE.is_black and Suit.CLUB.is_black
    assert Suit.HEART.is_red and Suit.DIAMOND.is_red
    assert not Suit.NONE.is_black and not Suit.NONE.is_red
    assert Suit.JOKER is Suit.NONE


def test_card_predicates():
    assert CardIdentity(Suit.NONE).is_joker
    assert CardIdentity(Suit.HEART, 12).is_face
    assert CardIdentity(Suit.HEART, 7).is_numeral
    assert not CardIdentity(Suit.HEART, 1).is_numeral
    assert not CardIdentity(Suit.HEART, 1).is_face


@pytest.mark.parametrize("rank", [0, -1, 14, 100])
def test_invalid_rank_is_rejected(rank, caplog):
    with caplog.at_level(logging.WARNING):
        with pytest.raises(InvalidRank) as exc:
            CardIdentity.create(Suit.SPADE, rank)
    assert exc.value.rank == rank
    assert isinstance(exc.value, ValidationError)
    assert "Rejected card" in caplog.text


def test_non_integer_rank_is_rejected():
    with pytest.raises(InvalidRank):
        CardIdentity(Suit.SPADE, 2.5)
    with pytest.raises(InvalidRank):
        CardIdentity(Suit.SPADE, True)


def test_cards_are_immutable():
    card = CardIdentity(Suit.SPADE, 5)
    with pytest.raises(AttributeError):
        card.rank = 6


def test_from_ordinal_maps_suits():
    assert CardIdentity.from_ordinal(1, 5).suit is Suit.SPADE
    assert CardIdentity.from_ordinal(2, 5).suit is Suit.HEART
    assert CardIdentity.from_ordinal(3, 5).suit is Suit.CLUB
    assert CardIdentity.from_ordinal(4, 5).suit is Suit.DIAMOND


@pytest.mark.parametrize("ordinal", [0, 5, -3])
def test_from_ordinal_unknown_becomes_joker(ordinal):
    with pytest.warns(InvalidSuitOrdinal):
        card = CardIdentity.from_ordinal(ordinal, 7)
    assert card.is_joker
    assert card.rank == 7


def test_from_ordinal_strict_raises():
    with pytest.raises(InvalidSuitOrdinal):
        CardIdentity.from_ordinal(9, 1, strict=True)


def test_from_ordinal_still_checks_rank():
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        with pytest.raises(InvalidRank):
            CardIdentity.from_ordinal(0, 14)


def test_weight_and_compare():
    ace_spades = CardIdentity(Suit.SPADE, 1)
    king_spades = CardIdentity(Suit.SPADE, 13)
    two_hearts = CardIdentity(Suit.HEART, 2)
    assert ace_spades.weight == 101
    assert two_hearts.weight == 202
    assert compare(ace_spades, king_spades) == -1
    assert compare(two_hearts, king_spades) == 1
    assert compare(two_hearts, CardIdentity(Suit.HEART, 2)) == 0


def test_compare_is_antisymmetric_and_consistent_with_equality():
    for a in ALL_CARDS:
        assert compare(a, a) == 0
        for b in ALL_CARDS:
            assert compare(a, b) == -compare(b, a)
            assert (compare(a, b) == 0) == (a == b)
            assert (a < b) == (compare(a, b) < 0)


def test_sorting_orders_by_suit_then_rank():
    shuffled = list(reversed(ALL_CARDS))
    assert sorted(shuffled) == ALL_CARDS


def test_hash_matches_equality():
    assert len({CardIdentity(Suit.CLUB, 4), CardIdentity(Suit.CLUB, 4)}) == 1
    assert len(set(ALL_CARDS)) == 65
