from .cards import (
    Card, SUIT_SYMBOLS, SUITS, RANKS, STRAIGHT_POSITION, GUARD_RANKS, MARKER_CARD,
    full_deck, sort_cards, parse_card, parse_cards, format_cards,
)
from .rules import (
    SINGLE, PAIR, TRIPLE, BOMB, STRAIGHT, DOUBLE_STRAIGHT, INVALID,
    is_single, is_pair, is_triple, is_bomb, is_straight, is_double_straight,
    detect_combo, is_valid_play, beats, strongest_card,
)
from .combos import ComboSet, find_combinations
from .inference import (
    Play, CardTracker, infer_teammates, unseen_cards, won_last_trick, filter_safe,
)
from .ai import decide_play, select_style, TEAM, AGGRESSIVE, CONSERVATIVE, NORMAL
from .table import Deck, cards_left_count
from .log import logger, log_action, configure_logging

__all__ = [
    'Card', 'SUIT_SYMBOLS', 'SUITS', 'RANKS', 'STRAIGHT_POSITION', 'GUARD_RANKS', 'MARKER_CARD',
    'full_deck', 'sort_cards', 'parse_card', 'parse_cards', 'format_cards',
    'SINGLE', 'PAIR', 'TRIPLE', 'BOMB', 'STRAIGHT', 'DOUBLE_STRAIGHT', 'INVALID',
    'is_single', 'is_pair', 'is_triple', 'is_bomb', 'is_straight', 'is_double_straight',
    'detect_combo', 'is_valid_play', 'beats', 'strongest_card',
    'ComboSet', 'find_combinations',
    'Play', 'CardTracker', 'infer_teammates', 'unseen_cards', 'won_last_trick', 'filter_safe',
    'decide_play', 'select_style', 'TEAM', 'AGGRESSIVE', 'CONSERVATIVE', 'NORMAL',
    'Deck', 'cards_left_count',
    'logger', 'log_action', 'configure_logging',
]
