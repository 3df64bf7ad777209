"""
"Jump to live": turn a broadcast status into the encoded position of the live game.
"""

from __future__ import annotations

import re
from typing import Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field

from spoilerguard.clock import parse_clock
from spoilerguard.codec.router import encode_position
from spoilerguard.config import StatusCfg
from spoilerguard.constants import MLB_END_OF_HALF_OUTS
from spoilerguard.positions import Half, HalfInningPosition, Position, TimeClockPosition
from spoilerguard.rules.sports import Sport, get_sport_rules

logger = structlog.get_logger(__name__)


class GameStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str                               # "STATUS_IN_PROGRESS", "STATUS_FINAL", ...
    display_clock: Optional[str] = None     # "8:14"
    period: Optional[int] = Field(default=None, ge=0)
    detail: Optional[str] = None            # "Top 5th", "Halftime"
    outs: Optional[int] = Field(default=None, ge=0, le=3)


def _matches(status_type: str, tags: list[str]) -> bool:
    wanted = status_type.strip().upper()
    return any(wanted == tag.upper() for tag in tags)


def is_game_live(status: GameStatus, statuses: StatusCfg | None = None) -> bool:
    statuses = statuses or StatusCfg()
    return _matches(status.type, statuses.in_progress)

    """Between-half statuses: "Mid 5th" closes the top, "End 5th" the bottom."""
def _between_halves(text: str | None) -> Half | None:
    """"Mid 5th" closes the top half, "End 5th" closes the bottom half."""
    if not text:
        return None
    words = re.findall(r"[a-z]+", text.lower())
    if not words:
        return None
    if words[0] in ("mid", "middle"):
        return Half.TOP
    if words[0] == "end":
        return Half.BOTTOM
    return None


def _live_structured_position(status: GameStatus, sport: Sport | str) -> Position:
    rules = get_sport_rules(sport)
    if rules.is_time_clock:
        minutes, seconds = parse_clock(status.display_clock)
        return TimeClockPosition(period=status.period, minutes=minutes, seconds=seconds)
    for text in (status.display_clock, status.detail):
        between = _between_halves(text)
        if between is not None:
            return HalfInningPosition(inning=status.period, half=between, outs=MLB_END_OF_HALF_OUTS)
    half = Half.from_text(status.display_clock) or Half.from_text(status.detail) or Half.TOP
    return HalfInningPosition(inning=status.period, half=half, outs=status.outs or 0)


def live_position(
    status: GameStatus, sport: Sport | str, statuses: StatusCfg | None = None
) -> int | None:
    """
    Encoded position of the live broadcast.

    Scheduled games sit at 0 and finished games at the end of regulation. An
    in-progress game without a period or clock, or a status tag we do not know,
    gives None so callers never mistake "unknown" for the opening whistle.
    """
    rules = get_sport_rules(sport)
    statuses = statuses or StatusCfg()

    if _matches(status.type, statuses.scheduled):
        return 0
    if _matches(status.type, statuses.final):
        return rules.regulation_max
    if not _matches(status.type, statuses.in_progress):
        logger.debug("live_position_unknown_status", status=status.type, sport=rules.sport.value)
        return None
    if not status.period or status.display_clock is None:
        logger.debug(
            "live_position_insufficient_data",
            status=status.type,
            period=status.period,
            clock=status.display_clock,
        )
        return None

    return encode_position(_live_structured_position(status, sport), sport)
