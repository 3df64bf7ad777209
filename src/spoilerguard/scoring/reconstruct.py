"""
Rebuild the scoreboard at any encoded position from a feed of scoring events.

Every event and the target are mapped onto one elapsed axis (game seconds, or
outs recorded for baseball). The answer is the running total carried by the
latest event at or before the target; on equal elapsed values the event that
comes later in feed order wins.
"""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from spoilerguard.codec.half_inning import HalfInningCodec
from spoilerguard.codec.router import codec_for, elapsed_for_value
from spoilerguard.rules.sports import Sport
from spoilerguard.scoring.events import ZERO_SCORE, Score, ScoringEvent


def event_elapsed(event: ScoringEvent, sport: Sport | str) -> int:
    if event.elapsed is not None:
        return event.elapsed
    codec = codec_for(sport)
    if isinstance(codec, HalfInningCodec):
        # all runs in a half-inning land on its first out slot
        return codec.elapsed_at(event.period, event.half)
    # unknown clock: place the event at the end of its period
    remaining = event.clock_seconds_remaining or 0
    return codec.elapsed_at(event.period, remaining)


def events_elapsed(events: Iterable[ScoringEvent], sport: Sport | str) -> np.ndarray:
    return np.asarray([event_elapsed(e, sport) for e in events], dtype=np.int64)


def score_at(
    encoded: int, events: Optional[Iterable[ScoringEvent]], sport: Sport | str
) -> Score:
    """Score on the board at an encoded position. (0, 0) when nothing has been scored yet."""
    codec = codec_for(sport)
    plays = list(events or ())
    if not plays:
        return ZERO_SCORE

    target = elapsed_for_value(encoded, sport)
    elapsed = events_elapsed(plays, sport)
    # a period-boundary value belongs to the earlier period
    periods = np.asarray([p.period for p in plays], dtype=np.int64)

    qualifying = np.flatnonzero((elapsed <= target) & (periods <= codec.segment(encoded)))
    if qualifying.size == 0:
        return ZERO_SCORE

    latest = elapsed[qualifying].max()
    idx = int(qualifying[elapsed[qualifying] == latest][-1])
    play = plays[idx]
    return Score(away=play.away_score, home=play.home_score)


def score_progression(
    values: Iterable[int], events: Optional[Iterable[ScoringEvent]], sport: Sport | str
) -> list[Score]:
    """score_at() for each value, sharing one snapshot of the events."""
    plays = list(events or ())
    return [score_at(v, plays, sport) for v in values]
