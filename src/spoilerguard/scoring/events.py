from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from spoilerguard.clock import clock_to_seconds
from spoilerguard.positions import Half


class ScoringEvent(BaseModel):
    """One score change from the upstream feed, carrying the running totals after it."""

    model_config = ConfigDict(frozen=True)

    period: int = Field(ge=0)                       # quarter / period / inning
    clock: Optional[str] = None                     # "8:14" as displayed
    clock_seconds_remaining: Optional[int] = Field(default=None, ge=0)
    half: Optional[Half] = None                     # baseball only
    elapsed: Optional[int] = Field(default=None, ge=0)
    away_score: int = Field(default=0, ge=0)
    home_score: int = Field(default=0, ge=0)
    description: Optional[str] = None
    team_id: Optional[str] = None
    event_id: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _derive_clock(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        clock = data.get("clock")
        if clock is None:
            return data
        data = dict(data)
        if data.get("clock_seconds_remaining") is None:
            data["clock_seconds_remaining"] = clock_to_seconds(clock)
        if data.get("half") is None:
            data["half"] = Half.from_text(clock)
        return data

    @field_validator("half", mode="before")
    @classmethod
    def _parse_half(cls, value: Any) -> Any:
        if value is None or isinstance(value, Half):
            return value
        half = Half.from_text(str(value))
        if half is None:
            raise ValueError(f"Unrecognized half-inning marker: {value!r}")
        return half


@dataclass(frozen=True, slots=True)
class Score:
    away: int = 0
    home: int = 0

    @property
    def total(self) -> int:
        return self.away + self.home


ZERO_SCORE = Score(0, 0)
