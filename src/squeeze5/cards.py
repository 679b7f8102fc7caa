"""Card model for squeeze-the-5.

The game uses a single 52-card deck without jokers.  Two orders matter:

* ``RANKS`` is the strength order used for every comparison and for sorting
  hands.  ``5`` is the strongest rank and ``2``/``3`` sit above the ace.
* ``STRAIGHT_POSITION`` decides which ranks are consecutive inside straights
  and double straights.  The guard ranks ``2``, ``3`` and ``5`` have no
  position, so they can never appear in a run.
"""
from __future__ import annotations

# Mapping from suit symbol to its full name.  The order of ``SUITS`` is the
# tie breaker used when sorting cards of equal rank.
SUIT_SYMBOLS = {'♠': 'Spades', '♥': 'Hearts', '♣': 'Clubs', '♦': 'Diamonds'}
SUITS = list(SUIT_SYMBOLS.values())

# ASCII shortcuts accepted by ``parse_cards`` for terminals without the symbols
SUIT_LETTERS = {'S': 'Spades', 'H': 'Hearts', 'C': 'Clubs', 'D': 'Diamonds'}

RANKS = ['4', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A', '2', '3', '5']

# Natural positions of the ranks that may form runs.  ``4`` keeps its natural
# value, so the missing ``5`` leaves a gap between ``4`` and ``6``.
STRAIGHT_POSITION = {
    '4': 4, '6': 6, '7': 7, '8': 8, '9': 9, '10': 10,
    'J': 11, 'Q': 12, 'K': 13, 'A': 14,
}

GUARD_RANKS = ('2', '3', '5')

# Rank and suit of the black five.  Whoever plays it reveals their team.
MARKER_RANK = '5'
MARKER_SUIT = 'Spades'


class Card:
    """A playing card identified by ``(suit, rank)``."""

    __slots__ = ('suit', 'rank')

    def __init__(self, suit: str, rank: str):
        """Initialise a card from ``(suit, rank)``.

        Arguments are provided in this order so they mirror the short
        notation used throughout the codebase.
        """

        if suit not in SUITS:
            raise ValueError(f"Unknown suit {suit!r}")
        if rank not in RANKS:
            raise ValueError(f"Unknown rank {rank!r}")
        self.suit = suit
        self.rank = rank

    def __repr__(self) -> str:
        """Return the short form ``<rank><symbol>`` used throughout the game."""

        symbol = next((s for s, r in SUIT_SYMBOLS.items() if r == self.suit), '?')
        return f"{self.rank}{symbol}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.suit == other.suit and self.rank == other.rank

    def __hash__(self) -> int:
        return hash((self.suit, self.rank))

    @property
    def strength(self) -> int:
        return RANKS.index(self.rank)

    @property
    def is_guard(self) -> bool:
        return self.rank in GUARD_RANKS

    @property
    def is_marker(self) -> bool:
        """``True`` for the black five that reveals a team."""

        return self.rank == MARKER_RANK and self.suit == MARKER_SUIT

    def sort_key(self) -> tuple[int, int]:
        return (RANKS.index(self.rank), SUITS.index(self.suit))

    def to_dict(self) -> dict:
        """Return a ``dict`` representation of this card."""

        return {"suit": self.suit, "rank": self.rank}

    @staticmethod
    def from_dict(d: dict) -> "Card":
        """Create a :class:`Card` from ``d``."""

        return Card(d["suit"], d["rank"])


MARKER_CARD = Card(MARKER_SUIT, MARKER_RANK)


def full_deck() -> list[Card]:
    """Return the 52 cards in canonical suit-major order."""

    return [Card(s, r) for s in SUITS for r in RANKS]


def sort_cards(cards) -> list[Card]:
    """Return ``cards`` sorted weakest first."""

    return sorted(cards, key=Card.sort_key)


def parse_card(token: str) -> Card:
    """Parse ``<rank><suit>`` notation such as ``10♥`` or ``10H``."""

    token = token.strip()
    if len(token) < 2:
        raise ValueError(f"Invalid card '{token}'")
    rank, sym = token[:-1].upper(), token[-1]
    suit = SUIT_SYMBOLS.get(sym) or SUIT_LETTERS.get(sym.upper())
    if suit is None or rank not in RANKS:
        raise ValueError(f"Invalid card '{token}'")
    return Card(suit, rank)


def parse_cards(text: str, hand=None) -> list[Card]:
    """Parse a whitespace separated list of cards.

    Each token is either card notation (``3♠``, ``QH``) or, when ``hand`` is
    given, a 1-based index into ``hand``.  Cards named by notation must be
    present in ``hand`` if one is supplied.  Raises ``ValueError`` with a
    message suitable for showing to a user.
    """

    cards: list[Card] = []
    for part in text.replace(',', ' ').split():
        if hand is not None and part.isdigit():
            idx = int(part) - 1
            if idx < 0 or idx >= len(hand):
                raise ValueError('Invalid index')
            card = hand[idx]
        else:
            card = parse_card(part)
            if hand is not None and card not in hand:
                raise ValueError(f"Card {part} not in hand")
        if card in cards:
            raise ValueError('Duplicate card')
        cards.append(card)
    return cards


def format_cards(cards) -> str:
    return ' '.join(repr(c) for c in cards)
