"""
Static per-sport rules: the closed sport set and the constants each codec needs.

These are facts about how each sport is played, not configuration. Look rules up
through get_sport_rules() instead of re-deriving constants in other modules.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from spoilerguard.constants import (
    MLB_MAX,
    MLB_REGULATION_INNINGS,
    MLB_SLOTS_PER_INNING,
    NBA_MAX,
    NBA_PERIOD_SECONDS,
    NBA_REGULATION_PERIODS,
    NFL_MAX,
    NFL_PERIOD_SECONDS,
    NFL_REGULATION_PERIODS,
    NHL_MAX,
    NHL_PERIOD_SECONDS,
    NHL_REGULATION_PERIODS,
)
from spoilerguard.errors import UnsupportedSportError


class Sport(str, Enum):
    NFL = "nfl"
    CFB = "cfb"     # college football, same clock as NFL
    NBA = "nba"
    NHL = "nhl"
    MLB = "mlb"

    @classmethod
    def parse(cls, value: Sport | str) -> Sport:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedSportError(value)


class CodecKind(str, Enum):
    TIME_CLOCK = "time_clock"
    HALF_INNING = "half_inning"


@dataclass(frozen=True, slots=True)
class SportRules:
    """Configuration for a single sport's position codec."""

    sport: Sport
    kind: CodecKind
    period_length: int          # seconds per period, or slots per inning for baseball
    regulation_periods: int     # quarters / periods / innings
    regulation_max: int         # encoded value at the end of regulation
    period_prefix: str          # "Q", "P"; empty for innings
    boundary_labels: tuple[tuple[int, str], ...] = ()

    @property
    def is_time_clock(self) -> bool:
        return self.kind is CodecKind.TIME_CLOCK

    def label_for(self, value: int) -> str | None:
        for boundary, label in self.boundary_labels:
            if boundary == value:
                return label
        return None


_FOOTBALL = dict(
    kind=CodecKind.TIME_CLOCK,
    period_length=NFL_PERIOD_SECONDS,
    regulation_periods=NFL_REGULATION_PERIODS,
    regulation_max=NFL_MAX,
    period_prefix="Q",
    boundary_labels=(
        (NFL_PERIOD_SECONDS, "End of Q1"),
        (2 * NFL_PERIOD_SECONDS, "Halftime"),
        (3 * NFL_PERIOD_SECONDS, "End of Q3"),
    ),
)

SPORT_RULES: dict[Sport, SportRules] = {
    Sport.NFL: SportRules(sport=Sport.NFL, **_FOOTBALL),
    Sport.CFB: SportRules(sport=Sport.CFB, **_FOOTBALL),
    Sport.NBA: SportRules(
        sport=Sport.NBA,
        kind=CodecKind.TIME_CLOCK,
        period_length=NBA_PERIOD_SECONDS,
        regulation_periods=NBA_REGULATION_PERIODS,
        regulation_max=NBA_MAX,
        period_prefix="Q",
        boundary_labels=(
            (NBA_PERIOD_SECONDS, "End of Q1"),
            (2 * NBA_PERIOD_SECONDS, "Halftime"),
            (3 * NBA_PERIOD_SECONDS, "End of Q3"),
        ),
    ),
    Sport.NHL: SportRules(
        sport=Sport.NHL,
        kind=CodecKind.TIME_CLOCK,
        period_length=NHL_PERIOD_SECONDS,
        regulation_periods=NHL_REGULATION_PERIODS,
        regulation_max=NHL_MAX,
        period_prefix="P",
        boundary_labels=(
            (NHL_PERIOD_SECONDS, "End of P1"),
            (2 * NHL_PERIOD_SECONDS, "End of P2"),
        ),
    ),
    Sport.MLB: SportRules(
        sport=Sport.MLB,
        kind=CodecKind.HALF_INNING,
        period_length=MLB_SLOTS_PER_INNING,
        regulation_periods=MLB_REGULATION_INNINGS,
        regulation_max=MLB_MAX,
        period_prefix="",
        # end of the top of the 7th
        boundary_labels=((6 * MLB_SLOTS_PER_INNING + 3, "7th Inning Stretch"),),
    ),
}


def get_sport_rules(sport: Sport | str) -> SportRules:
    """
    Get the rules for a sport tag.

    Raises:
        UnsupportedSportError: If the tag is outside the supported sport set
    """
    return SPORT_RULES[Sport.parse(sport)]


def regulation_max(sport: Sport | str) -> int:
    return get_sport_rules(sport).regulation_max


def period_length(sport: Sport | str) -> int:
    return get_sport_rules(sport).period_length
