"""Card and deck model."""
from .card import Card, Rank, Suit, SUITS, RANKS, InvalidArgument
from .deck import Deck, STANDARD_NUM_PACKS, PACK_SIZE

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "SUITS",
    "RANKS",
    "InvalidArgument",
    "Deck",
    "STANDARD_NUM_PACKS",
    "PACK_SIZE",
]
