import pytest

from spoilerguard.format import format_position, ordinal, period_name
from spoilerguard.positions import Half, HalfInningPosition, TimeClockPosition


@pytest.mark.parametrize(
    "position,sport,text",
    [
        (TimeClockPosition(3, 8, 2), "nfl", "Q3 08:02"),
        (TimeClockPosition(2, 12, 30), "nhl", "P2 12:30"),
        (TimeClockPosition(4, 5, 0), "nhl", "OT 05:00"),
        (TimeClockPosition(6, 0, 41), "nba", "OT2 00:41"),
        (HalfInningPosition(5, Half.TOP, 2), "mlb", "Top 5th • 2 outs"),
        (HalfInningPosition(1, Half.TOP, 1), "mlb", "Top 1st • 1 out"),
        (HalfInningPosition(9, Half.BOTTOM, 3), "mlb", "Bottom 9th • end"),
    ],
)
def test_format_position(position, sport, text):
    assert format_position(position, sport) == text


def test_ordinal():
    assert [ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 101, 113)] == [
        "1st", "2nd", "3rd", "4th", "11th", "12th", "13th", "21st", "22nd", "101st", "113th",
    ]


def test_period_name():
    assert period_name(4, "nfl") == "Q4"
    assert period_name(5, "cfb") == "OT"
    assert period_name(10, "mlb") == "10th"


def test_half_marker_matches_whole_words():
    assert Half.from_text("Bot 7th") is Half.BOTTOM
    assert Half.from_text("Bottom 6th: Judge homered") is Half.BOTTOM
    assert Half.from_text("TOP") is Half.TOP
    assert Half.from_text("reached on a topped ball") is None
    assert Half.from_text("bottomed out, robot swing") is None
