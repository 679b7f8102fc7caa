from __future__ import annotations

from .cards import RANKS, STRAIGHT_POSITION, sort_cards

# Combination types
SINGLE = 'single'
PAIR = 'pair'
TRIPLE = 'triple'
BOMB = 'bomb'
STRAIGHT = 'straight'
DOUBLE_STRAIGHT = 'double_straight'
INVALID = 'invalid'

COMBO_TYPES = (SINGLE, PAIR, TRIPLE, BOMB, STRAIGHT, DOUBLE_STRAIGHT)


def compare_cards(a, b) -> int:
    """Return a positive number if ``a`` is stronger than ``b``, negative if
    weaker and ``0`` for equal ranks."""

    return RANKS.index(a.rank) - RANKS.index(b.rank)


def strongest_card(cards):
    """Return the highest ranked card of ``cards``."""

    return max(cards, key=lambda c: RANKS.index(c.rank))


def _same_rank(cards) -> bool:
    return len({c.rank for c in cards}) == 1


def _adjacent(ranks) -> bool:
    """Return ``True`` if every rank in ``ranks`` follows the previous one."""

    if any(r not in STRAIGHT_POSITION for r in ranks):
        return False
    pos = [STRAIGHT_POSITION[r] for r in ranks]
    return all(pos[i] + 1 == pos[i + 1] for i in range(len(pos) - 1))


def is_single(cards) -> bool:
    return len(cards) == 1


def is_pair(cards) -> bool:
    return len(cards) == 2 and cards[0].rank == cards[1].rank


def is_triple(cards) -> bool:
    return len(cards) == 3 and _same_rank(cards)


def is_bomb(cards) -> bool:
    return len(cards) == 4 and _same_rank(cards)


def is_straight(cards) -> bool:
    """Return ``True`` if ``cards`` form a run of three or more ranks."""

    if len(cards) < 3:
        return False
    ranks = sorted((c.rank for c in cards), key=lambda r: STRAIGHT_POSITION.get(r, -1))
    # Ranks must be unique and consecutive
    if len(set(ranks)) != len(ranks):
        return False
    return _adjacent(ranks)


def is_double_straight(cards) -> bool:
    """Return ``True`` for two or more consecutive pairs, e.g. ``6 6 7 7``."""

    if len(cards) < 4 or len(cards) % 2:
        return False
    ordered = sort_cards(cards)
    pairs = [ordered[i:i + 2] for i in range(0, len(ordered), 2)]
    if not all(is_pair(p) for p in pairs):
        return False
    return _adjacent([p[0].rank for p in pairs])


def detect_combo(cards) -> str:
    """Return the combo type for ``cards``; ``INVALID`` if none applies."""

    if not cards:
        return INVALID
    if is_single(cards):
        return SINGLE
    if is_pair(cards):
        return PAIR
    if is_triple(cards):
        return TRIPLE
    if is_bomb(cards):
        return BOMB
    if is_straight(cards):
        return STRAIGHT
    if is_double_straight(cards):
        return DOUBLE_STRAIGHT
    return INVALID


def is_valid_play(cards, current) -> bool:
    """Return ``True`` if ``cards`` may be played on top of ``current``.

    Parameters
    ----------
    cards : list[Card]
        The cards a player proposes to play.  An empty list never beats
        anything.
    current : list[Card] | None
        The combination on the table.  ``None`` or an empty list is a free
        lead where any valid combination is accepted.
    """

    if not cards:
        return False
    combo = detect_combo(cards)
    if combo == INVALID:
        return False
    if not current:
        return True

    prev = detect_combo(current)

    # Bombs beat everything except a bomb, triples everything but bombs and triples
    if combo == BOMB and prev != BOMB:
        return True
    if combo == TRIPLE and prev not in (BOMB, TRIPLE):
        return True

    # Otherwise combos must match type and length and be higher in rank
    if combo != prev or len(cards) != len(current):
        return False
    return compare_cards(strongest_card(cards), strongest_card(current)) > 0


beats = is_valid_play
