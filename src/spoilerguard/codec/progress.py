"""
Slider helpers built on the encoded value: percent complete, segment, overtime
extent and labels for notable boundaries.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

import numpy as np

from spoilerguard.codec.router import codec_for
from spoilerguard.format import ordinal
from spoilerguard.rules.sports import Sport, get_sport_rules
from spoilerguard.scoring.events import ScoringEvent


def percentage(encoded: int, sport: Sport | str) -> float:
    """Percent of regulation complete. Overtime clamps to 100."""
    rmax = get_sport_rules(sport).regulation_max
    if encoded <= 0:
        return 0.0
    return float(np.clip(encoded / rmax * 100.0, 0.0, 100.0))


def percentage_to_value(pct: float, sport: Sport | str) -> int:
    """Inverse of percentage(); rounds half up to the nearest encoded value."""
    if math.isnan(pct):
        pct = 0.0
    clamped = float(np.clip(pct, 0.0, 100.0))
    rmax = get_sport_rules(sport).regulation_max
    return int(math.floor(clamped / 100.0 * rmax + 0.5))


def segment(encoded: int, sport: Sport | str) -> int:
    return codec_for(sport).segment(encoded)


def segment_start_value(segment_no: int, sport: Sport | str) -> int:
    return codec_for(sport).segment_start(segment_no)


def segment_end_value(segment_no: int, sport: Sport | str) -> int:
    """Last value belonging to a segment (the boundary itself for clocked sports)."""
    return codec_for(sport).segment_end(segment_no)


def is_segment_boundary(encoded: int, sport: Sport | str) -> bool:
    """True at the end of a regulation period short of the final one. Baseball has none."""
    rules = get_sport_rules(sport)
    if not rules.is_time_clock or encoded <= 0:
        return False
    return encoded % rules.period_length == 0 and encoded < rules.regulation_max


def _max_period(events: Optional[Iterable[ScoringEvent]]) -> int:
    periods = [e.period for e in events or ()]
    return max(periods) if periods else 0


def has_overtime(events: Optional[Iterable[ScoringEvent]], sport: Sport | str) -> bool:
    return overtime_period_count(events, sport) > 0


def overtime_period_count(events: Optional[Iterable[ScoringEvent]], sport: Sport | str) -> int:
    rules = get_sport_rules(sport)
    return max(0, _max_period(events) - rules.regulation_periods)


def max_value_with_overtime(sport: Sport | str, ot_periods: int = 0) -> int:
    rules = get_sport_rules(sport)
    return rules.regulation_max + max(0, ot_periods) * rules.period_length


def boundary_label(encoded: int, sport: Sport | str) -> str | None:
    """Human label when the value sits exactly on a notable boundary, else None."""
    rules = get_sport_rules(sport)
    if encoded == 0:
        return "Start of Game"
    if encoded == rules.regulation_max:
        return "End of Game"

    label = rules.label_for(encoded)
    if label is not None:
        return label

    if rules.is_time_clock:
        if encoded > rules.regulation_max and encoded % rules.period_length == 0:
            ot = (encoded - rules.regulation_max) // rules.period_length
            return "End of OT" if ot == 1 else f"End of OT{ot}"
        return None

    # baseball: last slot of the bottom half closes the inning
    if encoded > 0 and encoded % rules.period_length == rules.period_length - 1:
        return f"End of {ordinal(encoded // rules.period_length + 1)}"
    return None
