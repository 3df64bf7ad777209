"""
Codec for baseball. No clock, so each inning is split into 8 slots:

    Top 1st 0 outs = 0, 1 out = 1, 2 outs = 2, end = 3
    Bottom 1st 0 outs = 4 ... end = 7
    Top 2nd 0 outs = 8 ... Bottom 9th end = 71

Extra innings keep counting in steps of 8.
"""

from __future__ import annotations

from dataclasses import dataclass

from spoilerguard.constants import (
    MLB_END_OF_HALF_OUTS,
    MLB_OUTS_PER_HALF,
    MLB_OUTS_PER_INNING,
    MLB_SLOTS_PER_HALF,
    MLB_SLOTS_PER_INNING,
)
from spoilerguard.errors import PositionTypeError
from spoilerguard.positions import Half, HalfInningPosition


@dataclass(frozen=True, slots=True)
class HalfInningCodec:
    period_length: int = MLB_SLOTS_PER_INNING

    def encode(self, pos: HalfInningPosition) -> int:
        if not isinstance(pos, HalfInningPosition):
            raise PositionTypeError(f"Expected HalfInningPosition, got {type(pos).__name__}")
        inning_base = (max(1, pos.inning) - 1) * MLB_SLOTS_PER_INNING
        half_offset = MLB_SLOTS_PER_HALF if pos.half is Half.BOTTOM else 0
        outs = max(0, min(MLB_END_OF_HALF_OUTS, pos.outs))
        return inning_base + half_offset + outs

    def decode(self, encoded: int) -> HalfInningPosition:
        encoded = max(0, int(encoded))
        inning, slot = divmod(encoded, MLB_SLOTS_PER_INNING)
        half = Half.BOTTOM if slot >= MLB_SLOTS_PER_HALF else Half.TOP
        return HalfInningPosition(inning=inning + 1, half=half, outs=slot % MLB_SLOTS_PER_HALF)

    def segment(self, encoded: int) -> int:
        return max(0, int(encoded)) // MLB_SLOTS_PER_INNING + 1

    def elapsed(self, pos: HalfInningPosition) -> int:
        """Outs recorded since the first pitch; stands in for elapsed time."""
        return self.elapsed_at(pos.inning, pos.half) + max(0, min(MLB_END_OF_HALF_OUTS, pos.outs))

    def elapsed_at(self, inning: int, half: Half | None) -> int:
        half_offset = MLB_OUTS_PER_HALF if half is Half.BOTTOM else 0
        return (max(1, inning) - 1) * MLB_OUTS_PER_INNING + half_offset

    def segment_start(self, segment: int) -> int:
        return (max(1, segment) - 1) * MLB_SLOTS_PER_INNING

    def segment_end(self, segment: int) -> int:
        return max(1, segment) * MLB_SLOTS_PER_INNING - 1

    def is_valid(self, pos: HalfInningPosition) -> bool:
        return pos.inning >= 1 and isinstance(pos.half, Half) and 0 <= pos.outs <= MLB_END_OF_HALF_OUTS
