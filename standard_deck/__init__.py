"""Standard playing cards and a multi-pack, self-reshuffling deck."""
from .game import Card, Deck, Rank, Suit, InvalidArgument

__all__ = ["Card", "Deck", "Rank", "Suit", "InvalidArgument"]
