from __future__ import annotations

from spoilerguard.positions import Half, HalfInningPosition, Position, TimeClockPosition
from spoilerguard.rules.sports import Sport, get_sport_rules


def ordinal(n: int) -> str:
    """1 -> "1st", 2 -> "2nd", 11 -> "11th", 23 -> "23rd"."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def period_name(period: int, sport: Sport | str) -> str:
    """Short period name: "Q3", "P2", "OT", "OT2", "7th"."""
    rules = get_sport_rules(sport)
    if not rules.is_time_clock:
        return ordinal(period)
    if period > rules.regulation_periods:
        ot = period - rules.regulation_periods
        return "OT" if ot == 1 else f"OT{ot}"
    return f"{rules.period_prefix}{period}"


def format_position(position: Position, sport: Sport | str) -> str:
    """
    Display text for a structured position.

    Examples: "Q3 08:02", "P2 12:30", "OT 04:11", "Top 5th • 2 outs", "Bottom 9th • end".
    """
    if isinstance(position, TimeClockPosition):
        name = period_name(position.period, sport)
        return f"{name} {position.minutes:02d}:{position.seconds:02d}"
    if isinstance(position, HalfInningPosition):
        half = "Top" if position.half is Half.TOP else "Bottom"
        if position.outs >= 3:
            outs = "end"
        else:
            outs = f"{position.outs} {'out' if position.outs == 1 else 'outs'}"
        return f"{half} {ordinal(position.inning)} • {outs}"
    raise TypeError(f"Unknown position type: {type(position).__name__}")
