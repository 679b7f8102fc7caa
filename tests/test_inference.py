import random

from squeeze5 import Card, Deck, Play, decide_play, parse_cards
from squeeze5.ai import Context, select_style
from squeeze5.inference import (
    CardTracker,
    filter_safe,
    infer_teammates,
    last_own_play,
    table_owner,
    unseen_cards,
    won_last_trick,
)


def test_teammates_default_to_bankers():
    assert infer_teammates(1, [], [True, False, False, False]) == {0}
    assert infer_teammates(0, [], [True, False, False, False]) == set()


def test_marker_play_reveals_teammate():
    history = [
        Play(2, parse_cards('4♥'), 0),
        Play(3, parse_cards('5♠'), 1),
    ]
    assert infer_teammates(1, history, [True, False, False, False]) == {0, 3}
    # The marker owner never lists itself
    assert infer_teammates(3, history, [True, False, False, False]) == {0}


def test_marker_inside_a_larger_play():
    history = [Play(2, parse_cards('5♠ 5♥'), 0)]
    assert infer_teammates(0, history, [False, True, False, False]) == {1, 2}


def test_unseen_cards_excludes_history_and_hand():
    hand = parse_cards('4♠ 6♥')
    history = [Play(1, parse_cards('7♣ 7♦'), 0), Play(2, [], 1)]
    unseen = unseen_cards(hand, history)
    assert len(unseen) == 48
    for c in hand + history[0].cards:
        assert c not in unseen


def test_card_tracker_counts():
    hand = parse_cards('5♥ 2♠ 2♥')
    history = [Play(1, parse_cards('5♣'), 0), Play(2, parse_cards('K♠ K♥ K♣'), 1)]
    tracker = CardTracker(hand, history)
    assert tracker.guard_unseen == {'2': 2, '3': 4, '5': 2}
    assert tracker.unseen_count('K') == 1
    assert 'K' not in tracker.live_triple_ranks
    assert '3' in tracker.live_bomb_ranks
    assert '2' not in tracker.live_triple_ranks


def test_won_last_trick():
    history = [
        Play(1, parse_cards('6♠'), 0),
        Play(2, parse_cards('9♠'), 1),
        Play(3, [], 2),
        Play(0, [], 3),
        Play(1, [], 4),
    ]
    assert won_last_trick(2, history)
    assert not won_last_trick(1, history)
    assert not won_last_trick(2, history + [Play(3, parse_cards('J♥'), 5)])
    assert not won_last_trick(0, [])


def test_last_own_play_and_safe_filter():
    history = [Play(2, parse_cards('9♠'), 0), Play(3, [], 1)]
    own = last_own_play(2, history)
    assert own == parse_cards('9♠')
    singles = [[Card('Hearts', '6')], [Card('Hearts', 'Q')], [Card('Hearts', '5')]]
    assert filter_safe(singles, own) == [[Card('Hearts', '6')]]
    # Different shapes cannot beat a single and stay available
    pair = parse_cards('A♠ A♥')
    assert filter_safe([pair], own) == [pair]
    assert filter_safe(singles, []) == singles


def test_table_owner():
    history = [Play(1, parse_cards('6♠'), 0), Play(2, parse_cards('9♠'), 1)]
    assert table_owner(history, parse_cards('9♠'), 3) == 2
    assert table_owner([], parse_cards('9♠'), 3) == 2
    assert table_owner([], parse_cards('9♠'), 0) == 3


def test_play_json_round_trip():
    play = Play(3, parse_cards('10♦ J♠ Q♥'), 7)
    data = play.to_dict()
    assert data['cards'][0] == {'suit': 'Diamonds', 'rank': '10'}
    assert Play.from_dict(data) == play
    assert Play.from_dict({'owner': 1}).is_pass


def redeal_hidden(hands, seat):
    """Return ``hands`` with every card outside ``seat`` shuffled between the
    other seats, keeping each seat's count."""

    hidden = [c for i, h in enumerate(hands) if i != seat for c in h]
    random.shuffle(hidden)
    result, pos = [], 0
    for i, h in enumerate(hands):
        if i == seat:
            result.append(list(h))
        else:
            result.append(hidden[pos:pos + len(h)])
            pos += len(h)
    return result


def test_inference_ignores_hidden_hands():
    """Two deals that differ only in cards seat 0 cannot see give the same
    inferences and the same decision."""
    random.seed(3)
    deck = Deck()
    deck.shuffle()
    hands = deck.deal(4)
    flags = [False, True, False, False]

    history = []
    table = []
    for n, seat in enumerate((1, 2, 3)):
        counts = [len(h) for h in hands]
        move = decide_play(hands[seat], table, n, seat, history, counts, flags)
        history.append(Play(seat, move, n))
        for c in move:
            hands[seat].remove(c)
        if move:
            table = move

    other = redeal_hidden(hands, 0)
    assert other[0] == hands[0]
    assert other[1:] != hands[1:]
    assert [len(h) for h in other] == [len(h) for h in hands]

    results = []
    for deal in (hands, other):
        own = deal[0]
        counts = [len(h) for h in deal]
        opponents = {c for h in deal[1:] for c in h}
        unseen = unseen_cards(own, history)
        # The unseen cards are exactly what the opponents hold in either deal
        assert set(unseen) == opponents
        ctx = Context(own, table, 3, 0, history, counts, flags)
        results.append((
            infer_teammates(0, history, flags),
            sorted(unseen, key=Card.sort_key),
            CardTracker(own, history).counts,
            won_last_trick(0, history),
            select_style(ctx),
            decide_play(own, table, 3, 0, history, counts, flags),
        ))
    assert results[0] == results[1]
