from __future__ import annotations

import math

import structlog

from spoilerguard.constants import SECONDS_PER_MINUTE

logger = structlog.get_logger(__name__)


def parse_clock(clock: str | None) -> tuple[int, int]:
    """
    Parse a displayed game clock ("8:14", "0:45", "45.2") into (minutes, seconds).

    Feeds drop the minutes inside the last minute of a period, so a bare number is
    read as seconds. Anything unparseable becomes (0, 0) rather than an error.
    """
    if clock is None or not str(clock).strip():
        return 0, 0
    text = str(clock).strip()
    try:
        if ":" in text:
            mins_part, secs_part = text.split(":", 1)
            mins = int(mins_part) if mins_part.strip() else 0
            secs = int(math.floor(float(secs_part))) if secs_part.strip() else 0
        else:
            mins = 0
            secs = int(math.floor(float(text)))
    except (ValueError, OverflowError):
        logger.warning("clock_parse_failed", clock=text)
        return 0, 0

    total = max(0, mins * SECONDS_PER_MINUTE + secs)
    return divmod(total, SECONDS_PER_MINUTE)


def clock_to_seconds(clock: str | None) -> int:
    """Seconds remaining shown on a clock string."""
    mins, secs = parse_clock(clock)
    return mins * SECONDS_PER_MINUTE + secs
