from __future__ import annotations


class SpoilerGuardError(Exception):
    """Base class for engine errors."""


class UnsupportedSportError(SpoilerGuardError, ValueError):
    def __init__(self, sport: object):
        super().__init__(f"Unsupported sport: {sport!r}")
        self.sport = sport


class PositionTypeError(SpoilerGuardError, TypeError):
    """A structured position was handed to the codec of a different sport."""
