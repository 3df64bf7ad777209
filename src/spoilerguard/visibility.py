"""
The spoiler rule: a message is visible when its encoded position is at or
before the viewer's. Works on encoded integers only, so it is sport-agnostic.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")


def is_visible(message_position: int, viewer_position: int) -> bool:
    return message_position <= viewer_position


def _position_encoded(message: Any) -> int:
    if isinstance(message, int):
        return message
    if isinstance(message, dict):
        return message["position_encoded"]
    return message.position_encoded


def filter_visible(
    messages: Iterable[T],
    viewer_position: int,
    key: Callable[[T], int] = _position_encoded,
) -> list[T]:
    """
    Keep the messages the viewer may see, in their original order.

    By default a message is a bare encoded int, a dict with "position_encoded",
    or any object with a position_encoded attribute; pass key for other shapes.
    """
    return [m for m in messages if is_visible(key(m), viewer_position)]
