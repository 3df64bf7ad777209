import pytest

from spoilerguard.codec.router import encode_position
from spoilerguard.config import StatusCfg
from spoilerguard.errors import UnsupportedSportError
from spoilerguard.live.tracker import GameStatus, is_game_live, live_position
from spoilerguard.positions import TimeClockPosition


@pytest.mark.parametrize("status_type", ["STATUS_SCHEDULED", "PRE", "pre"])
def test_scheduled_is_start(status_type):
    assert live_position(GameStatus(type=status_type), "nba") == 0


@pytest.mark.parametrize("sport,expected", [("nfl", 3600), ("cfb", 3600), ("nba", 2880), ("nhl", 3600), ("mlb", 71)])
def test_final_is_regulation_max(sport, expected):
    assert live_position(GameStatus(type="STATUS_FINAL", period=5, display_clock="0:00"), sport) == expected


def test_in_progress_basketball():
    status = GameStatus(type="STATUS_IN_PROGRESS", period=2, display_clock="8:14")
    expected = encode_position(TimeClockPosition(2, 8, 14), "nba")
    assert live_position(status, "nba") == expected == 946


def test_halftime_status_counts_as_live():
    status = GameStatus(type="STATUS_HALFTIME", period=2, display_clock="0:00")
    assert live_position(status, "nfl") == 1800


def test_in_progress_overtime_hockey():
    status = GameStatus(type="STATUS_IN_PROGRESS", period=4, display_clock="15:00")
    assert live_position(status, "nhl") == 3600 + 300


@pytest.mark.parametrize(
    "status",
    [
        GameStatus(type="STATUS_IN_PROGRESS", period=2),
        GameStatus(type="STATUS_IN_PROGRESS", display_clock="8:14"),
        GameStatus(type="STATUS_IN_PROGRESS", period=0, display_clock="8:14"),
    ],
)
def test_insufficient_data_is_none(status):
    assert live_position(status, "nfl") is None


def test_unknown_status_is_none():
    assert live_position(GameStatus(type="STATUS_POSTPONED", period=1, display_clock="1:00"), "nfl") is None


def test_baseball_half_from_clock_or_detail():
    bottom = GameStatus(type="STATUS_IN_PROGRESS", period=5, display_clock="Bot")
    top = GameStatus(type="STATUS_IN_PROGRESS", period=5, display_clock="0:00", detail="Top 5th")
    with_outs = GameStatus(type="STATUS_IN_PROGRESS", period=5, display_clock="0:00", detail="Top 5th", outs=2)
    assert live_position(bottom, "mlb") == 36
    assert live_position(top, "mlb") == 32
    assert live_position(with_outs, "mlb") == 34



@pytest.mark.parametrize(
    "period,detail,expected",
    [(5, "Mid 5th", 35), (5, "Middle 5th", 35), (5, "End 5th", 39), (9, "End of 9th", 71)],
)
def test_baseball_between_halves(period, detail, expected):
    status = GameStatus(type="STATUS_IN_PROGRESS", period=period, display_clock="0:00", detail=detail)
    assert live_position(status, "mlb") == expected


def test_custom_status_tags():
    statuses = StatusCfg(scheduled=["UPCOMING"], in_progress=["RUNNING"], final=["DONE"])
    assert live_position(GameStatus(type="UPCOMING"), "nhl", statuses) == 0
    assert live_position(GameStatus(type="RUNNING", period=1, display_clock="10:00"), "nhl", statuses) == 600
    assert live_position(GameStatus(type="DONE"), "nhl", statuses) == 3600
    assert live_position(GameStatus(type="STATUS_FINAL"), "nhl", statuses) is None


def test_is_game_live():
    assert is_game_live(GameStatus(type="STATUS_IN_PROGRESS"))
    assert is_game_live(GameStatus(type="live"))
    assert not is_game_live(GameStatus(type="STATUS_FINAL"))


def test_unknown_sport_raises():
    with pytest.raises(UnsupportedSportError):
        live_position(GameStatus(type="STATUS_SCHEDULED"), "cricket")
