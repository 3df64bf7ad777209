from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Half(str, Enum):
    TOP = "TOP"
    BOTTOM = "BOTTOM"

    @classmethod
    def from_text(cls, text: str | None) -> Half | None:
        """Read a half-inning marker out of feed text ("Bot 5th", "Top", "bottom")."""
        if not text:
            return None
        for word in re.findall(r"[a-z]+", text.lower()):
            if word in ("bot", "bottom"):
                return cls.BOTTOM
            if word == "top":
                return cls.TOP
        return None


@dataclass(frozen=True, slots=True)
class TimeClockPosition:
    period: int             # 1..regulation, higher = overtime
    minutes: int            # remaining in period
    seconds: int            # 0..59

    @property
    def seconds_remaining(self) -> int:
        return self.minutes * 60 + self.seconds


@dataclass(frozen=True, slots=True)
class HalfInningPosition:
    inning: int             # 1..9, higher = extra innings
    half: Half
    outs: int = 0           # 0..2, 3 = end of half-inning


Position = Union[TimeClockPosition, HalfInningPosition]
