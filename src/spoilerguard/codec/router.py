"""
Unified encode/decode that dispatches on the sport tag.

Stored messages and member records keep only the encoded integer; the structured
positions produced here are for display and input.
"""

from __future__ import annotations

from typing import Union

from spoilerguard.codec.half_inning import HalfInningCodec
from spoilerguard.codec.timeclock import TimeClockCodec
from spoilerguard.positions import Half, HalfInningPosition, Position, TimeClockPosition
from spoilerguard.rules.sports import SPORT_RULES, Sport, SportRules, get_sport_rules

Codec = Union[TimeClockCodec, HalfInningCodec]


def _build_codec(rules: SportRules) -> Codec:
    if rules.is_time_clock:
        return TimeClockCodec(period_length=rules.period_length)
    return HalfInningCodec(period_length=rules.period_length)


_CODECS: dict[Sport, Codec] = {sport: _build_codec(rules) for sport, rules in SPORT_RULES.items()}


def codec_for(sport: Sport | str) -> Codec:
    return _CODECS[Sport.parse(sport)]


def encode_position(position: Position, sport: Sport | str) -> int:
    return codec_for(sport).encode(position)


def decode_position(encoded: int, sport: Sport | str) -> Position:
    return codec_for(sport).decode(encoded)


def elapsed_for_value(encoded: int, sport: Sport | str) -> int:
    """Elapsed game time at an encoded value: seconds, or outs for baseball."""
    codec = codec_for(sport)
    return codec.elapsed(codec.decode(encoded))


def initial_position(sport: Sport | str) -> Position:
    rules = get_sport_rules(sport)
    if rules.is_time_clock:
        minutes, seconds = divmod(rules.period_length, 60)
        return TimeClockPosition(period=1, minutes=minutes, seconds=seconds)
    return HalfInningPosition(inning=1, half=Half.TOP, outs=0)


def is_valid_position(position: object, sport: Sport | str) -> bool:
    codec = codec_for(sport)
    if isinstance(codec, TimeClockCodec):
        return isinstance(position, TimeClockPosition) and codec.is_valid(position)
    return isinstance(position, HalfInningPosition) and codec.is_valid(position)


def compare_positions(a: Position, b: Position, sport: Sport | str) -> int:
    """-1 if a happens before b, 1 if after, 0 if they are the same moment."""
    ea, eb = encode_position(a, sport), encode_position(b, sport)
    return (ea > eb) - (ea < eb)
