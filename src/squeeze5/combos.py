"""Greedy partition of a hand into playable combinations.

The finder claims cards in a fixed order: bombs, triples, straights, double
straights, pairs and finally singles.  Each card is claimed at most once so
the resulting groups never overlap.  This is a heuristic: once a window is
claimed it is never reconsidered.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .cards import Card, sort_cards
from .rules import is_double_straight, is_straight

# Rounds during which triples and bombs are kept back from the offered list
EARLY_ROUNDS = 3
# Hand size at or below which everything is offered regardless of the round
ENDGAME_HAND = 5


@dataclass
class ComboSet:
    """Disjoint combinations found in a hand, grouped by type."""

    straights: list[list[Card]] = field(default_factory=list)
    double_straights: list[list[Card]] = field(default_factory=list)
    pairs: list[list[Card]] = field(default_factory=list)
    singles: list[list[Card]] = field(default_factory=list)
    triples: list[list[Card]] = field(default_factory=list)
    bombs: list[list[Card]] = field(default_factory=list)
    # ``False`` while triples and bombs are being held back
    heavy_offered: bool = True

    @property
    def offered(self) -> list[list[Card]]:
        """Candidates in priority order for the decision engine."""

        combos = [*self.straights, *self.double_straights, *self.pairs, *self.singles]
        if self.heavy_offered:
            combos += [*self.triples, *self.bombs]
        return combos

    @property
    def offered_triples(self) -> list[list[Card]]:
        return self.triples if self.heavy_offered else []

    @property
    def offered_bombs(self) -> list[list[Card]]:
        return self.bombs if self.heavy_offered else []

    def all_groups(self) -> list[list[Card]]:
        """Every group the finder formed, including withheld ones."""

        return [*self.straights, *self.double_straights, *self.pairs,
                *self.singles, *self.triples, *self.bombs]


def has_repeated_suit(cards) -> bool:
    suits = [c.suit for c in cards]
    return len(set(suits)) != len(suits)


def _runs_of(hand, size, used):
    """Claim every group of ``size`` unused adjacent cards sharing a rank."""

    found = []
    for i in range(len(hand) - size + 1):
        group = hand[i:i + size]
        if len({c.rank for c in group}) != 1:
            continue
        if any(c in used for c in group):
            continue
        found.append(group)
        used.update(group)
    return found


def _windows(hand, lengths, accept, used):
    found = []
    for length in lengths:
        for i in range(len(hand) - length + 1):
            window = hand[i:i + length]
            if not accept(window) or has_repeated_suit(window):
                continue
            if any(c in used for c in window):
                continue
            found.append(window)
            used.update(window)
    return found


def find_straights(hand, used) -> list[list[Card]]:
    return _windows(hand, range(3, len(hand) + 1), is_straight, used)


def find_double_straights(hand, used) -> list[list[Card]]:
    return _windows(hand, range(4, len(hand) + 1, 2), is_double_straight, used)


def find_combinations(hand, round_no: int = 1, hand_size: int | None = None) -> ComboSet:
    """Partition ``hand`` greedily into disjoint combinations.

    Parameters
    ----------
    hand : list[Card]
        The cards to partition.  They are sorted by rank order first.
    round_no : int
        Current round of the hand, starting at ``1``.  Triples and bombs are
        only offered once ``round_no`` exceeds ``EARLY_ROUNDS``.
    hand_size : int, optional
        Size of the full hand; defaults to ``len(hand)``.  A hand of
        ``ENDGAME_HAND`` cards or fewer is offered everything.
    """

    hand = sort_cards(hand)
    if hand_size is None:
        hand_size = len(hand)
    used: set[Card] = set()

    result = ComboSet()
    result.bombs = _runs_of(hand, 4, used)
    result.triples = _runs_of(hand, 3, used)
    result.straights = find_straights(hand, used)
    result.double_straights = find_double_straights(hand, used)
    result.pairs = _runs_of(hand, 2, used)
    result.singles = [[c] for c in hand if c not in used]
    result.heavy_offered = round_no > EARLY_ROUNDS or hand_size <= ENDGAME_HAND
    return result
