"""Decision engine for a computer controlled seat.

``decide_play`` is the single entry point.  Every call rebuilds its view of
the game from the inputs: the hand is partitioned by
:func:`squeeze5.combos.find_combinations`, public history is summarised by
:mod:`squeeze5.inference`, and a play style is chosen.  Each style is a small
strategy object with a ``respond`` method (cards on the table) and a ``lead``
method (free lead).

Styles, checked in order:

``team``
    a teammate is about to go out; stay out of their way.
``aggressive``
    our own hand is short or the next seat is about to go out.
``conservative``
    one of the opening rounds; heavy combinations stay in hand.
``normal``
    everything else.
"""
from __future__ import annotations

from itertools import combinations

from .cards import RANKS, Card, sort_cards
from .combos import EARLY_ROUNDS, ENDGAME_HAND, find_combinations
from .inference import (
    CardTracker,
    filter_safe,
    infer_teammates,
    last_own_play,
    table_owner,
    won_last_trick,
)
from .log import logger
from .rules import (
    BOMB,
    DOUBLE_STRAIGHT,
    PAIR,
    SINGLE,
    STRAIGHT,
    TRIPLE,
    detect_combo,
    is_valid_play,
    strongest_card,
)

SEATS = 4
# A seat holding this many cards or fewer is about to go out
DANGER_HAND = 2
# Runs at least this long may be answered with a triple in the opening rounds
LONG_STRAIGHT = 5
LONG_DOUBLE_STRAIGHT = 6
# Hand count assumed for seats missing from ``hand_counts``
UNKNOWN_COUNT = 99

TEAM = 'team'
AGGRESSIVE = 'aggressive'
CONSERVATIVE = 'conservative'
NORMAL = 'normal'


def round_number(play_number: int) -> int:
    """Return the 1-based round for ``play_number`` plays made so far."""

    return max(play_number or 0, 0) // SEATS + 1


def combo_strength(cards) -> tuple[int, int]:
    return (strongest_card(cards).strength, len(cards))


def smallest(candidates):
    return min(candidates, key=combo_strength) if candidates else []


def largest(candidates):
    return max(candidates, key=combo_strength) if candidates else []


def beating(candidates, table):
    return [c for c in candidates if is_valid_play(c, table)]


def has_guard(cards) -> bool:
    return any(c.is_guard for c in cards)


def without_guards(candidates):
    return [c for c in candidates if not has_guard(c)]


def first_nonempty(*buckets):
    for bucket in buckets:
        if bucket:
            return bucket[0]
    return []


def same_rank_groups(hand, size: int):
    """Every ``size``-card group of equal rank in ``hand``, reserved or not."""

    if size == 1:
        return [[c] for c in hand]
    groups = []
    for combo in combinations(hand, size):
        if len({c.rank for c in combo}) == 1:
            groups.append(list(combo))
    return groups


class Context:
    """Everything a strategy needs for one decision."""

    def __init__(self, hand, last_cards, play_number, seat, history, hand_counts, is_banker):
        self.hand = sort_cards(hand)
        self.last_cards = list(last_cards or [])
        self.round_no = round_number(play_number)
        self.seat = seat
        self.history = list(history or [])
        self.hand_counts = list(hand_counts or [])
        self.is_banker = list(is_banker or [])
        self.seats = max(len(self.hand_counts), len(self.is_banker), SEATS)

        self.combos = find_combinations(self.hand, self.round_no, len(self.hand))
        self.teammates = infer_teammates(seat, self.history, self.is_banker)
        self.tracker = CardTracker(self.hand, self.history)
        self.just_won = won_last_trick(seat, self.history)
        self.own_last = last_own_play(seat, self.history) if self.just_won else []

    def count(self, idx: int) -> int:
        if 0 <= idx < len(self.hand_counts) and self.hand_counts[idx] is not None:
            return self.hand_counts[idx]
        return UNKNOWN_COUNT

    def next_seat(self) -> int:
        """Return the next seat still holding cards."""

        for step in range(1, self.seats):
            idx = (self.seat + step) % self.seats
            if self.count(idx) > 0:
                return idx
        return (self.seat + 1) % self.seats

    def safe(self, candidates):
        """Candidates that would not beat our own winning play."""

        return filter_safe(candidates, self.own_last) if self.just_won else list(candidates)

    def lowest_card(self) -> list[Card]:
        """Fallback lead: the weakest card outside any triple or bomb."""

        heavy = {c for group in self.combos.triples + self.combos.bombs for c in group}
        for card in self.hand:
            if card not in heavy:
                return [card]
        return first_nonempty(self.combos.triples, self.combos.bombs) or self.hand[:1]


def select_style(ctx: Context) -> str:
    if any(0 < ctx.count(i) <= DANGER_HAND for i in ctx.teammates):
        return TEAM
    if len(ctx.hand) <= ENDGAME_HAND or ctx.count(ctx.next_seat()) <= DANGER_HAND:
        return AGGRESSIVE
    if ctx.round_no <= EARLY_ROUNDS:
        return CONSERVATIVE
    return NORMAL


def _is_long_run(cards) -> bool:
    kind = detect_combo(cards)
    if kind == STRAIGHT:
        return len(cards) >= LONG_STRAIGHT
    if kind == DOUBLE_STRAIGHT:
        return len(cards) >= LONG_DOUBLE_STRAIGHT
    return False


def standard_response(ctx: Context) -> list[Card]:
    """Answer the combination on the table, or ``[]`` to pass."""

    table = ctx.last_cards
    kind = detect_combo(table)
    found = ctx.combos

    if kind == BOMB:
        return smallest(beating(found.bombs, table))

    if kind == TRIPLE:
        if ctx.round_no <= EARLY_ROUNDS:
            return smallest(beating(found.bombs, table))
        return (smallest(beating(found.offered_triples, table))
                or smallest(beating(found.offered_bombs, table)))

    # Long runs may be stopped early even with withheld triples and bombs
    if ctx.round_no <= EARLY_ROUNDS and _is_long_run(table):
        move = smallest(beating(found.triples, table)) or smallest(beating(found.bombs, table))
        if move:
            return move

    if kind in (STRAIGHT, DOUBLE_STRAIGHT):
        runs = found.straights if kind == STRAIGHT else found.double_straights
        return (smallest(beating(ctx.safe(runs), table))
                or smallest(beating(runs, table))
                or smallest(beating(found.offered_bombs, table)))

    if kind in (SINGLE, PAIR):
        size = len(table)
        # Clean answers first, then ones that break a reserved group
        bucket = found.singles if kind == SINGLE else found.pairs
        move = smallest(beating(bucket, table))
        if move:
            return move
        move = smallest(beating(same_rank_groups(ctx.hand, size), table))
        if move:
            return move

    for combo in found.offered:
        if is_valid_play(combo, table):
            return combo
    return []


class Strategy:
    """Base play style: standard answers and conservative leads.

    Subclasses list their lead preferences in :meth:`lead_buckets`.  After
    winning a trick the buckets are first filtered through
    :meth:`Context.safe`; the unfiltered buckets are only used when no safe
    candidate is left.
    """

    name = NORMAL

    def respond(self, ctx: Context) -> list[Card]:
        return standard_response(ctx)

    def lead_buckets(self, ctx: Context):
        found = ctx.combos
        if len(ctx.hand) <= ENDGAME_HAND:
            return (found.singles, found.pairs, found.offered_triples,
                    found.straights, found.double_straights, found.offered_bombs)
        tracker = ctx.tracker
        # A guard single can be topped while copies of it are still out
        singles = [s for s in found.singles
                   if not (s[0].is_guard and tracker.unseen_count(s[0].rank))]
        # Singles a live bomb rank outranks go after the ones it does not
        top = max((RANKS.index(r) for r in tracker.live_bomb_ranks), default=-1)
        clear = [s for s in singles if s[0].strength > top]
        return (found.pairs, found.straights, found.double_straights,
                clear, singles, found.offered_triples, found.offered_bombs)

    def pick(self, buckets) -> list[Card]:
        return first_nonempty(*buckets)

    def lead(self, ctx: Context) -> list[Card]:
        buckets = self.lead_buckets(ctx)
        if ctx.just_won:
            move = self.pick([ctx.safe(b) for b in buckets])
            if move:
                return move
        return self.pick(buckets) or ctx.lowest_card()


class NormalStrategy(Strategy):
    name = NORMAL


class ConservativeStrategy(Strategy):
    """Opening rounds.  Leads as in normal play; the finder withholds
    triples and bombs, which is what keeps this style careful."""

    name = CONSERVATIVE


class TeamStrategy(Strategy):
    name = TEAM

    def respond(self, ctx: Context) -> list[Card]:
        owner = table_owner(ctx.history, ctx.last_cards, ctx.seat, ctx.seats)
        if owner in ctx.teammates and ctx.count(owner) <= DANGER_HAND:
            # Let the teammate's play stand
            return []
        return standard_response(ctx)

    def lead(self, ctx: Context) -> list[Card]:
        found = ctx.combos
        if ctx.just_won:
            pool = (ctx.safe(found.singles) + ctx.safe(found.pairs)
                    + ctx.safe(found.straights) + ctx.safe(found.double_straights))
            move = smallest(without_guards(pool)) or smallest(pool)
            if move:
                return move
        buckets = (found.singles, found.pairs, found.straights,
                   found.double_straights, found.offered_triples)
        move = (first_nonempty(*(without_guards(b) for b in buckets))
                or first_nonempty(*buckets)
                or first_nonempty(found.offered_bombs))
        return move or ctx.lowest_card()


class AggressiveStrategy(Strategy):
    name = AGGRESSIVE

    def respond(self, ctx: Context) -> list[Card]:
        table = ctx.last_cards
        kind = detect_combo(table)
        same = [c for c in ctx.combos.offered
                if detect_combo(c) == kind and len(c) == len(table)]
        return largest(beating(same, table)) or standard_response(ctx)

    def lead_buckets(self, ctx: Context):
        found = ctx.combos
        return (found.straights, found.double_straights, found.offered_triples,
                found.pairs, found.singles, found.offered_bombs)

    def pick(self, buckets) -> list[Card]:
        # Bombs come last, after every guard-containing candidate
        *rest, bombs = buckets
        return (first_nonempty(*(without_guards(b) for b in rest))
                or first_nonempty(*rest)
                or first_nonempty(bombs))


STRATEGIES = {
    TEAM: TeamStrategy(),
    AGGRESSIVE: AggressiveStrategy(),
    CONSERVATIVE: ConservativeStrategy(),
    NORMAL: NormalStrategy(),
}


def decide_play(hand, last_cards=None, play_number: int = 0, seat: int = 0,
                history=None, hand_counts=None, is_banker=None) -> list[Card]:
    """Choose the cards ``seat`` plays.

    Parameters
    ----------
    hand : list[Card]
        The deciding seat's own cards.
    last_cards : list[Card] | None
        Combination currently on the table; empty or ``None`` for a free lead.
    play_number : int
        Number of plays made so far in this hand.  Four plays make a round.
    seat : int
        Index of the deciding seat.
    history : list[Play]
        Public log of plays, oldest first.  Passes may be recorded as plays
        with no cards.
    hand_counts : list[int]
        Number of cards each seat still holds.
    is_banker : list[bool]
        Public banker flag of each seat.

    Returns
    -------
    list[Card]
        A legal combination taken from ``hand`` or ``[]`` to pass.  A free
        lead with a non-empty hand never passes.
    """

    if not hand:
        return []
    ctx = Context(hand, last_cards, play_number, seat, history, hand_counts, is_banker)
    style = select_style(ctx)
    strategy = STRATEGIES[style]
    logger.debug("Seat %d round %d style %s", seat, ctx.round_no, style)

    if ctx.last_cards:
        move = strategy.respond(ctx)
    else:
        move = strategy.lead(ctx)

    held = set(ctx.hand)
    if move and (not is_valid_play(move, ctx.last_cards) or any(c not in held for c in move)):
        logger.info('Invalid AI move %s, %s', move, 'passing' if ctx.last_cards else 'leading lowest card')
        move = [] if ctx.last_cards else ctx.hand[:1]

    if move:
        logger.info("Seat %d plays %s (%s)", seat, move, detect_combo(move))
    else:
        logger.info("Seat %d passes", seat)
    return list(move)
