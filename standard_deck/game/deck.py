"""Multi-pack card deck implementation."""
import random
from collections import Counter
from typing import Optional

from standard_deck.config import config
from standard_deck.game.card import Card, InvalidArgument, RANKS, Suit
from standard_deck.utils.logger import get_logger

logger = get_logger(__name__)

STANDARD_NUM_PACKS = 6
PACK_SIZE = 52


class Deck:
    """A shuffled deck of one or more 52-card packs.

    Cards are drawn in order from a cursor. Once every card has been drawn
    the whole deck is reshuffled and drawing starts over, so a deck never
    runs dry.

    Not thread-safe; callers sharing a deck must serialize access.
    """

    def __init__(
        self,
        num_packs: int = STANDARD_NUM_PACKS,
        rng: Optional[random.Random] = None,
        check_invariants: Optional[bool] = None,
    ):
        """Build and shuffle a new deck.

        Args:
            num_packs: Number of 52-card packs, at least 1.
            rng: Random source used for every shuffle. Defaults to a fresh
                OS-seeded ``random.Random``.
            check_invariants: Re-validate the deck around every draw and
                shuffle. Defaults to ``config.deck_debug_checks``.

        Raises:
            InvalidArgument: If num_packs is not an integer of at least 1.
        """
        if isinstance(num_packs, bool) or not isinstance(num_packs, int):
            raise InvalidArgument(f"Invalid number of packs: {num_packs!r}")
        if num_packs < 1:
            raise InvalidArgument(f"Number of packs must be at least 1, got {num_packs}")

        self._num_packs = num_packs
        self._rng = rng if rng is not None else random.Random()
        self._check_invariants = (
            config.deck_debug_checks if check_invariants is None else check_invariants
        )
        self._cards: list[Card] = [
            Card(rank=rank, suit=suit)
            for _ in range(num_packs)
            for rank in RANKS
            for suit in Suit
        ]
        self._cursor = 0
        self._rng.shuffle(self._cards)

        logger.debug(f"Built deck of {num_packs} pack(s), {len(self._cards)} cards")
        self._debug_check()

    def shuffle(self) -> None:
        """Shuffle every card in the deck and start drawing from the top."""
        self._debug_check()
        self._rng.shuffle(self._cards)
        self._cursor = 0
        logger.debug(f"Reshuffled deck of {len(self._cards)} cards")
        self._debug_check()

    def draw_next(self) -> Card:
        """Draw the next card, reshuffling first if the deck is exhausted.

        Returns:
            A copy of the drawn card, independent of the deck's own storage.
        """
        self._debug_check()
        if self._cursor == len(self._cards):
            self.shuffle()

        card = self._cards[self._cursor]
        self._cursor += 1
        self._debug_check()
        return Card(rank=card.rank, suit=card.suit)

    @property
    def num_packs(self) -> int:
        """Number of 52-card packs in the deck."""
        return self._num_packs

    @property
    def remaining(self) -> int:
        """Number of cards left before the next reshuffle."""
        return len(self._cards) - self._cursor

    def __len__(self) -> int:
        return len(self._cards)

    def check_rep(self) -> None:
        """Check the deck invariant.

        Raises:
            AssertionError: If the deck no longer holds exactly num_packs
                copies of every card or the cursor is out of range.
        """
        assert self._num_packs >= 1
        assert len(self._cards) == self._num_packs * PACK_SIZE
        assert 0 <= self._cursor <= len(self._cards)

        counts = Counter((card.rank, card.suit) for card in self._cards)
        assert len(counts) == PACK_SIZE, f"Expected {PACK_SIZE} distinct cards, found {len(counts)}"
        for (rank, suit), count in counts.items():
            assert count == self._num_packs, (
                f"Card {rank}{suit} appears {count} times, expected {self._num_packs}"
            )

    def _debug_check(self) -> None:
        if self._check_invariants:
            self.check_rep()
