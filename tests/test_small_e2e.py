import numpy as np

from spoilerguard.codec.progress import percentage, segment
from spoilerguard.codec.router import decode_position, encode_position
from spoilerguard.positions import Half, HalfInningPosition, TimeClockPosition
from spoilerguard.rules.sports import get_sport_rules
from spoilerguard.scoring.events import ScoringEvent
from spoilerguard.scoring.reconstruct import score_at


def _random_clock_position(rng, sport):
    rules = get_sport_rules(sport)
    period = int(rng.integers(1, rules.regulation_periods + 3))
    remaining = int(rng.integers(0, rules.period_length + 1))
    return TimeClockPosition(period, remaining // 60, remaining % 60)


def _gameplay_key(pos):
    # later period first, then less time on the clock
    return (pos.period, -pos.seconds_remaining)


def test_e2e_monotonic_encoding():
    rng = np.random.default_rng(0)
    for sport in ("nfl", "nba", "nhl"):
        for _ in range(300):
            a, b = _random_clock_position(rng, sport), _random_clock_position(rng, sport)
            if _gameplay_key(a) > _gameplay_key(b):
                a, b = b, a
            assert encode_position(a, sport) <= encode_position(b, sport)


def test_e2e_monotonic_baseball():
    rng = np.random.default_rng(1)
    for _ in range(300):
        a = HalfInningPosition(int(rng.integers(1, 13)), Half.TOP if rng.random() < 0.5 else Half.BOTTOM, int(rng.integers(0, 4)))
        b = HalfInningPosition(int(rng.integers(1, 13)), Half.TOP if rng.random() < 0.5 else Half.BOTTOM, int(rng.integers(0, 4)))
        key = lambda p: (p.inning, p.half is Half.BOTTOM, p.outs)
        if key(a) > key(b):
            a, b = b, a
        assert encode_position(a, "mlb") <= encode_position(b, "mlb")


def test_e2e_decode_segment_percentage_agree():
    rng = np.random.default_rng(2)
    for sport in ("nfl", "nba", "nhl", "mlb"):
        prev_pct = 0.0
        for value in np.sort(rng.integers(0, 6000, size=200)):
            value = int(value)
            pos = decode_position(value, sport)
            seg = pos.period if isinstance(pos, TimeClockPosition) else pos.inning
            assert segment(value, sport) == seg
            assert encode_position(pos, sport) == value
            pct = percentage(value, sport)
            assert prev_pct <= pct <= 100.0
            prev_pct = pct


def test_e2e_score_monotonic():
    rng = np.random.default_rng(3)
    away = home = 0
    events = []
    for t in np.sort(rng.choice(3600, size=25, replace=False)):
        if rng.random() < 0.5:
            away += int(rng.integers(1, 4))
        else:
            home += int(rng.integers(1, 4))
        events.append((int(t), away, home))
    # running totals follow game time; feed order is shuffled
    feed = [ScoringEvent(period=1, elapsed=t, away_score=a, home_score=h) for t, a, h in events]
    rng.shuffle(feed)

    totals = [score_at(v, feed, "nfl").total for v in range(0, 3700, 25)]
    assert all(x <= y for x, y in zip(totals, totals[1:]))
    assert totals[-1] == away + home
