"""
Codec for sports played against a period clock (football, basketball, hockey).

The encoded value is seconds elapsed since the opening whistle:

    Q1 15:00 = 0, Q1 10:00 = 300, Q1 0:00 = Q2 15:00 = 900, Q4 0:00 = 3600

Overtime periods continue with the regulation period length. A value that falls
exactly on a period boundary decodes to "0:00 of the earlier period".
"""

from __future__ import annotations

from dataclasses import dataclass

from spoilerguard.constants import SECONDS_PER_MINUTE
from spoilerguard.errors import PositionTypeError
from spoilerguard.positions import TimeClockPosition


@dataclass(frozen=True, slots=True)
class TimeClockCodec:
    period_length: int      # seconds

    def encode(self, pos: TimeClockPosition) -> int:
        if not isinstance(pos, TimeClockPosition):
            raise PositionTypeError(f"Expected TimeClockPosition, got {type(pos).__name__}")
        remaining = max(0, min(self.period_length, pos.seconds_remaining))
        period_base = (max(1, pos.period) - 1) * self.period_length
        return period_base + (self.period_length - remaining)

    def decode(self, encoded: int) -> TimeClockPosition:
        encoded = max(0, int(encoded))
        into_period = encoded % self.period_length
        if into_period == 0 and encoded > 0:
            return TimeClockPosition(period=encoded // self.period_length, minutes=0, seconds=0)
        minutes, seconds = divmod(self.period_length - into_period, SECONDS_PER_MINUTE)
        return TimeClockPosition(
            period=encoded // self.period_length + 1, minutes=minutes, seconds=seconds
        )

    def segment(self, encoded: int) -> int:
        """Period containing the value; a period's final second belongs to that period."""
        encoded = max(0, int(encoded))
        if encoded > 0 and encoded % self.period_length == 0:
            return encoded // self.period_length
        return encoded // self.period_length + 1

    def elapsed(self, pos: TimeClockPosition) -> int:
        """Game seconds elapsed at a position; identical to the encoded value."""
        return self.encode(pos)

    def elapsed_at(self, period: int, seconds_remaining: int) -> int:
        remaining = max(0, min(self.period_length, seconds_remaining))
        return (max(1, period) - 1) * self.period_length + (self.period_length - remaining)

    def segment_start(self, segment: int) -> int:
        return (max(1, segment) - 1) * self.period_length

    def segment_end(self, segment: int) -> int:
        return max(1, segment) * self.period_length

    def is_valid(self, pos: TimeClockPosition) -> bool:
        return (
            pos.period >= 1
            and pos.minutes >= 0
            and 0 <= pos.seconds < SECONDS_PER_MINUTE
            and pos.seconds_remaining <= self.period_length
        )
