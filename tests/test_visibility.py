from dataclasses import dataclass

import numpy as np

from spoilerguard.visibility import filter_visible, is_visible


@dataclass
class Message:
    body: str
    position_encoded: int


def test_is_visible_matches_ordering():
    rng = np.random.default_rng(7)
    for x, y in rng.integers(0, 5000, size=(500, 2)):
        assert is_visible(int(x), int(y)) == (x <= y)
    assert is_visible(100, 100)


def test_filter_visible_preserves_order():
    assert filter_visible([10, 50, 100, 150], 100) == [10, 50, 100]
    assert filter_visible([150, 10, 100, 50], 100) == [10, 100, 50]


def test_filter_visible_on_records():
    msgs = [Message("kickoff", 0), Message("td!", 1300), Message("half", 1800)]
    assert [m.body for m in filter_visible(msgs, 1500)] == ["kickoff", "td!"]

    rows = [{"id": 1, "position_encoded": 40}, {"id": 2, "position_encoded": 41}]
    assert filter_visible(rows, 40) == [{"id": 1, "position_encoded": 40}]

    pairs = [("a", 5), ("b", 1)]
    assert filter_visible(pairs, 3, key=lambda p: p[1]) == [("b", 1)]


def test_filter_visible_empty():
    assert filter_visible([], 100) == []
