"""Inference of hidden game state from public information.

Nothing here looks at another seat's hand.  The functions only receive the
play history, the public banker flags and the deciding seat's own hand, so
their results cannot depend on how the unseen cards are distributed.
"""
from __future__ import annotations

from collections import Counter

from .cards import GUARD_RANKS, Card, full_deck
from .rules import is_valid_play


class Play:
    """A move recorded in the public history.

    ``cards`` is empty when the seat passed.
    """

    __slots__ = ('owner', 'cards', 'sequence')

    def __init__(self, owner: int, cards, sequence: int = 0) -> None:
        self.owner = owner
        self.cards = list(cards)
        self.sequence = sequence

    def __repr__(self) -> str:
        return f"Play({self.owner}, {self.cards}, {self.sequence})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Play):
            return NotImplemented
        return (self.owner, self.cards, self.sequence) == (other.owner, other.cards, other.sequence)

    @property
    def is_pass(self) -> bool:
        return not self.cards

    def to_dict(self) -> dict:
        return {
            "owner": self.owner,
            "cards": [c.to_dict() for c in self.cards],
            "sequence": self.sequence,
        }

    @staticmethod
    def from_dict(d: dict) -> "Play":
        return Play(
            d["owner"],
            [Card.from_dict(c) for c in d.get("cards", [])],
            d.get("sequence", 0),
        )


def infer_teammates(seat: int, history, is_banker) -> set[int]:
    """Return the seats believed to be on ``seat``'s team.

    Bankers are always teammates.  Once the black five has been played its
    owner joins them.  ``seat`` itself is never included.
    """

    mates = {i for i, flag in enumerate(is_banker or []) if flag}
    for play in history or []:
        if any(c.is_marker for c in play.cards):
            mates.add(play.owner)
            break
    mates.discard(seat)
    return mates


def unseen_cards(hand, history) -> list[Card]:
    """Return every card neither played so far nor held in ``hand``."""

    seen = set(hand or [])
    for play in history or []:
        seen.update(play.cards)
    return [c for c in full_deck() if c not in seen]


class CardTracker:
    """Summary of the cards still hidden from the deciding seat."""

    def __init__(self, hand, history) -> None:
        self.unseen = unseen_cards(hand, history)
        self.counts = Counter(c.rank for c in self.unseen)

    def unseen_count(self, rank: str) -> int:
        return self.counts.get(rank, 0)

    @property
    def guard_unseen(self) -> dict[str, int]:
        return {r: self.counts.get(r, 0) for r in GUARD_RANKS}

    @property
    def live_triple_ranks(self) -> list[str]:
        """Ranks of which at least three copies are still hidden."""

        return [r for r, n in self.counts.items() if n >= 3]

    @property
    def live_bomb_ranks(self) -> list[str]:
        return [r for r, n in self.counts.items() if n >= 4]


def last_nonempty_play(history):
    for play in reversed(history or []):
        if play.cards:
            return play
    return None


def won_last_trick(seat: int, history) -> bool:
    """``True`` if ``seat`` made the latest play and nobody covered it."""

    play = last_nonempty_play(history)
    return play is not None and play.owner == seat


def last_own_play(seat: int, history):
    """Return the cards of ``seat``'s most recent play, or ``[]``."""

    for play in reversed(history or []):
        if play.owner == seat and play.cards:
            return play.cards
    return []


def filter_safe(combos, own_last):
    """Drop every combination that would beat ``own_last``.

    After winning a trick the seat leads with something no stronger than what
    just won it, keeping its bigger holdings back.
    """

    if not own_last:
        return list(combos)
    return [c for c in combos if not is_valid_play(c, own_last)]


def table_owner(history, last_cards, seat: int, seats: int = 4) -> int:
    """Return the seat whose play is on the table.

    Falls back to the previous seat when the history does not record it.
    """

    if last_cards:
        target = set(last_cards)
        for play in reversed(history or []):
            if play.cards and set(play.cards) == target:
                return play.owner
    return (seat - 1) % seats
