"""Playing card implementation."""
from enum import Enum
from dataclasses import dataclass
from typing import Any


class InvalidArgument(ValueError):
    """Raised when a card or deck is constructed from out-of-domain input."""
    pass


class Suit(str, Enum):
    """Card suits."""
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"

    def __str__(self) -> str:
        return self.value


class Rank(int, Enum):
    """Card ranks (1-13, where 11-13 are the face cards)."""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        # Ace renders as its numeral
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K"}[self.value]


SUITS = frozenset(suit.value for suit in Suit)
RANKS = tuple(Rank)


def _to_rank(rank: Any) -> Rank:
    if isinstance(rank, bool) or not isinstance(rank, int):
        raise InvalidArgument(f"Invalid rank: {rank!r}")
    if not Rank.ACE <= rank <= Rank.KING:
        raise InvalidArgument(f"Invalid rank: {rank}")
    return Rank(rank)


def _to_suit(suit: Any) -> Suit:
    if not isinstance(suit, str) or len(suit) != 1:
        raise InvalidArgument(f"Invalid suit: {suit!r}")
    letter = suit.upper()
    if letter not in SUITS:
        raise InvalidArgument(f"Invalid suit: {suit!r}")
    return Suit(letter)


@dataclass(frozen=True)
class Card:
    """A playing card.

    Ranks 1-10 are numerals and 11, 12, 13 are Jack, Queen and King. Suits
    are given by their first letter in either case and stored uppercase, so
    ``Card(11, "d") == Card(11, "D")``.

    Raises:
        InvalidArgument: If rank is outside 1-13 or suit is not one of H, D, C, S.
    """
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        object.__setattr__(self, "rank", _to_rank(self.rank))
        object.__setattr__(self, "suit", _to_suit(self.suit))

    def render(self) -> str:
        """Render as rank token plus suit letter, e.g. '3S', 'JD', '10H'."""
        return f"{self.rank}{self.suit}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return str(self)
