"""Adapters from ESPN-shaped JSON to engine models.

Accepts both the raw site API objects (nested "type"/"period"/"clock" objects)
and the flattened shape that gets stored alongside a room's game data.
"""

from __future__ import annotations

from typing import Any, Iterable

import structlog
from pydantic import ValidationError

from spoilerguard.live.tracker import GameStatus
from spoilerguard.positions import Half
from spoilerguard.scoring.events import ScoringEvent

logger = structlog.get_logger(__name__)


def _to_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def parse_status(payload: dict) -> GameStatus:
    """Build a GameStatus from an ESPN status object."""
    status_type = payload.get("type")
    detail = payload.get("detail")
    if isinstance(status_type, dict):
        detail = detail or status_type.get("detail") or status_type.get("shortDetail")
        status_type = status_type.get("name") or status_type.get("state") or ""
    return GameStatus(
        type=status_type or "",
        display_clock=payload.get("displayClock"),
        period=_to_int(payload.get("period")),
        detail=detail,
        outs=_to_int(payload.get("outs")),
    )


def _scoring_play_fields(play: dict) -> dict:
    period = play.get("period")
    half = None
    if isinstance(period, dict):
        half = Half.from_text(period.get("type"))
        period = period.get("number")

    clock = play.get("clock")
    clock_value = play.get("clockValue")
    if isinstance(clock, dict):
        clock_value = clock.get("value", clock_value)
        clock = clock.get("displayValue")

    if half is None:
        half = Half.from_text(clock) or Half.from_text(play.get("text"))

    team = play.get("team")
    return {
        "event_id": str(play["id"]) if play.get("id") is not None else None,
        "period": _to_int(period),
        "clock": clock,
        "clock_seconds_remaining": _to_int(clock_value),
        "half": half,
        "away_score": _to_int(play.get("awayScore")),
        "home_score": _to_int(play.get("homeScore")),
        "description": play.get("text") or play.get("description"),
        "team_id": str(team.get("id")) if isinstance(team, dict) and team.get("id") else play.get("teamId"),
    }


def parse_scoring_plays(payloads: Iterable[dict] | None) -> list[ScoringEvent]:
    """ESPN scoringPlays -> ScoringEvents, in feed order. Malformed plays are skipped."""
    events: list[ScoringEvent] = []
    for idx, play in enumerate(payloads or ()):
        try:
            events.append(ScoringEvent.model_validate(_scoring_play_fields(play)))
        except (ValidationError, KeyError, AttributeError) as exc:
            logger.warning("scoring_play_skipped", index=idx, error=str(exc))
    return events
