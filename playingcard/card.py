"""
card.py: Card identity: suit, rank, display names and ordering.

A card is an immutable (suit, rank) pair. Cards sort by weight:

    weight = suit ordinal * 100 + rank

so every joker sorts before every spade, spades before hearts, and so on.
"""

import logging
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import FormatFailure, InvalidRank, InvalidSuitOrdinal

logger = logging.getLogger(__name__)


# ── Suits & Ranks ────────────────────────────────────────────────────────────

class Suit(Enum):
    NONE = 0        # joker
    SPADE = 1
    HEART = 2
    CLUB = 3
    DIAMOND = 4

    JOKER = 0       # alias of NONE

    @property
    def glyph(self) -> str:
        return SUIT_GLYPHS[self.value]

    @property
    def display_name(self) -> str:
        return SUIT_NAMES[self.value]

    @property
    def is_black(self) -> bool:
        return self in (Suit.SPADE, Suit.CLUB)

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEART, Suit.DIAMOND)


SUIT_GLYPHS = ("♨", "♠", "♥", "♣", "♦")
SUIT_NAMES = ("鬼牌", "黑桃", "紅心", "梅花", "方塊")     # joker, spade, heart, club, diamond
RANK_NAMES = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")

MIN_RANK = 1
MAX_RANK = 13

# Integer suit codes accepted by CardIdentity.from_ordinal
_ORDINAL_SUITS = {
    1: Suit.SPADE,
    2: Suit.HEART,
    3: Suit.CLUB,
    4: Suit.DIAMOND,
}

DEFAULT_TEMPLATE = "{1}{0}"     # {0} = suit name, {1} = rank name
JOKER_TEMPLATE = "{0}"


def suit_glyph(suit: Suit) -> str:
    return SUIT_GLYPHS[suit.value]


def suit_name(suit: Suit) -> str:
    return SUIT_NAMES[suit.value]


def rank_name(rank: int) -> str:
    _check_rank(rank)
    return RANK_NAMES[rank - 1]


def _check_rank(rank) -> None:
    if isinstance(rank, bool) or not isinstance(rank, int) or not MIN_RANK <= rank <= MAX_RANK:
        raise InvalidRank(rank)


# ── Card Identity ────────────────────────────────────────────────────────────

@dataclass(frozen=True, eq=True)
class CardIdentity:
    suit: Suit
    rank: int = MIN_RANK

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {type(self.suit).__name__}")
        _check_rank(self.rank)

    # ── construction ──

    @classmethod
    def create(cls, suit: Suit, rank: int) -> "CardIdentity":
        """Build a card, logging and re-raising InvalidRank for a bad rank."""
        try:
            return cls(suit, rank)
        except InvalidRank as e:
            logger.warning("Rejected card %s/%r: %s", suit.name, rank, e)
            raise

    @classmethod
    def from_ordinal(cls, ordinal: int, rank: int, strict: bool = False) -> "CardIdentity":
        """
        Build a card from an integer suit code (1=spade, 2=heart, 3=club,
        4=diamond). Any other code becomes a joker and an InvalidSuitOrdinal
        warning is issued, or raised when ``strict`` is set.
        """
        suit = _ORDINAL_SUITS.get(ordinal)
        if suit is None:
            problem = InvalidSuitOrdinal(ordinal)
            if strict:
                logger.warning("Rejected suit ordinal %r", ordinal)
                raise problem
            logger.warning("Unknown suit ordinal %r, using a joker instead", ordinal)
            warnings.warn(problem, stacklevel=2)
            suit = Suit.NONE
        return cls.create(suit, rank)

    # ── predicates ──

    @property
    def is_joker(self) -> bool:
        return self.suit is Suit.NONE

    @property
    def is_black(self) -> bool:
        return self.suit.is_black

    @property
    def is_red(self) -> bool:
        return self.suit.is_red

    @property
    def is_face(self) -> bool:
        return self.rank >= 11

    @property
    def is_numeral(self) -> bool:
        return 2 <= self.rank <= 10

    @property
    def weight(self) -> int:
        return self.suit.value * 100 + self.rank

    @property
    def glyph(self) -> str:
        return suit_glyph(self.suit)

    @property
    def rank_name(self) -> str:
        return RANK_NAMES[self.rank - 1]

    # ── display ──

    def display_string(self, template: Optional[str] = None) -> Optional[str]:
        """
        Format the card for labels and lists.

        The template is a ``str.format`` string given the suit name as ``{0}``
        and the rank name as ``{1}``. When that fails the suit name alone is
        tried; when that fails too, None is returned.
        """
        if template is None:
            template = JOKER_TEMPLATE if self.is_joker else DEFAULT_TEMPLATE
        name = suit_name(self.suit)
        try:
            return template.format(name, self.rank_name)
        except (IndexError, KeyError, ValueError, AttributeError, TypeError):
            pass
        try:
            return template.format(name)
        except (IndexError, KeyError, ValueError, AttributeError, TypeError) as e:
            logger.warning("%s", FormatFailure(template, e))
        return None

    def __str__(self):
        return self.display_string() or ""

    # ── ordering ──

    def __lt__(self, other):
        if not isinstance(other, CardIdentity):
            return NotImplemented
        return self.weight < other.weight

    def __le__(self, other):
        if not isinstance(other, CardIdentity):
            return NotImplemented
        return self.weight <= other.weight

    def __gt__(self, other):
        if not isinstance(other, CardIdentity):
            return NotImplemented
        return self.weight > other.weight

    def __ge__(self, other):
        if not isinstance(other, CardIdentity):
            return NotImplemented
        return self.weight >= other.weight

    def __hash__(self):
        return self.weight


def compare(a: CardIdentity, b: CardIdentity) -> int:
    """-1, 0 or 1 depending on the sign of weight(a) - weight(b)."""
    diff = a.weight - b.weight
    return (diff > 0) - (diff < 0)
