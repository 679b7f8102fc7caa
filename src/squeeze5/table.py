"""Table-side collaborators: dealing and the card counter.

The decision engine never calls these; they supply the hands it is given and
the counter shown to a human player.
"""
from __future__ import annotations

import random

from .cards import full_deck, sort_cards


class Deck:
    """A standard 52-card deck."""

    def __init__(self) -> None:
        # Generate cards in canonical order so tests can seed ``random`` and
        # reproduce deals deterministically.
        self.cards = full_deck()

    def shuffle(self) -> None:
        """Shuffle the deck in place."""

        random.shuffle(self.cards)

    def deal(self, n: int = 4):
        """Deal the deck round-robin into ``n`` hands sorted by rank order."""

        hands = [[] for _ in range(n)]
        for i, card in enumerate(self.cards):
            hands[i % n].append(card)
        return [sort_cards(h) for h in hands]


def cards_left_count(hands, rank: str, seat: int = 0) -> int:
    """Return how many cards of ``rank`` are held by seats other than ``seat``."""

    return sum(
        sum(1 for c in hand if c.rank == rank)
        for i, hand in enumerate(hands)
        if i != seat
    )
