"""Command line interface: ask the AI what to play for a given position."""

import argparse
import json
import logging

from .ai import decide_play
from .cards import format_cards, parse_cards
from .inference import Play
from .log import configure_logging, log_action


def _int_list(text: str) -> list[int]:
    try:
        return [int(x) for x in text.split(',') if x.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma separated numbers, got {text!r}")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='squeeze5',
        description='Suggest a play for a squeeze-the-5 position',
    )
    parser.add_argument('--hand', required=True,
                        help="cards held, e.g. '4♠ 6H 10♦'")
    parser.add_argument('--table', default='',
                        help='combination currently on the table (empty for a lead)')
    parser.add_argument('--play-number', type=int, default=0,
                        help='number of plays made so far this hand')
    parser.add_argument('--seat', type=int, default=0, help='seat of the deciding player')
    parser.add_argument('--counts', type=_int_list, default=None,
                        help='cards held by each seat, e.g. 13,12,13,13')
    parser.add_argument('--banker', type=_int_list, default=[],
                        help='seats flagged as banker, e.g. 0 or 0,2')
    parser.add_argument('--history', default=None,
                        help='JSON file with the list of plays so far')
    parser.add_argument('--log-file', default=None, help='append decisions to this file')
    parser.add_argument('--verbose', action='store_true', help='log at debug level')
    return parser


def load_history(path: str) -> list[Play]:
    with open(path, encoding='utf-8') as f:
        return [Play.from_dict(d) for d in json.load(f)]


def main(argv=None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.log_file:
        configure_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)

    try:
        hand = parse_cards(args.hand)
        table = parse_cards(args.table)
    except ValueError as exc:
        parser.error(str(exc))

    history = load_history(args.history) if args.history else []
    counts = args.counts
    if counts is None:
        counts = [13, 13, 13, 13]
        counts[args.seat % 4] = len(hand)
    banker = [i in args.banker for i in range(max(4, len(counts)))]

    move = decide_play(hand, table, args.play_number, args.seat, history, counts, banker)
    result = format_cards(move) if move else 'pass'
    log_action(f"Suggested for seat {args.seat}: {result}")
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
