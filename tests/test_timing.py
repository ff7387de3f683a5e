import calendar
import datetime
import time

import pytest
from freezegun import freeze_time

from ncutools.timing import (
    CountdownTimer,
    CurrentTime,
    ReservationInfo,
    UTCTimer,
    string_to_timestamp,
)


def test_reservation_info_fields():
    info = ReservationInfo("2024-05-06", 3, 19, 1700000000)
    assert info.date == "2024-05-06"
    assert info.hall_id == 3
    assert info.r_time == 19
    assert info.enable_timestamp == 1700000000


def test_string_to_timestamp_is_local_time():
    ts = string_to_timestamp("2024-01-02 03:04:05")
    assert time.localtime(ts)[:6] == (2024, 1, 2, 3, 4, 5)


def test_string_to_timestamp_ignores_trailing_text():
    assert string_to_timestamp("2024-01-02 03:04:05 extra") == string_to_timestamp(
        "2024-01-02 03:04:05"
    )


@pytest.mark.parametrize(
    "text", ["", "garbage", "2024-13-01 00:00:00", "2024-01-01 25:00:00", "2024-01-01"]
)
def test_string_to_timestamp_failure_gives_zero(text):
    assert string_to_timestamp(text) == 0


@freeze_time("2024-01-01 00:00:00")
def test_current_time_seconds():
    assert CurrentTime().seconds() == calendar.timegm((2024, 1, 1, 0, 0, 0))


@freeze_time("2024-06-15 12:34:56")
def test_current_time_formatted_round_trip():
    ct = CurrentTime()
    formatted = ct.formatted_time()
    assert string_to_timestamp(formatted) == ct.seconds()
    assert formatted.startswith(ct.formatted_date())
    assert ct.hour() == int(formatted[11:13])
    assert ct.minute() == int(formatted[14:16])
    assert ct.second() == int(formatted[17:19])


@freeze_time("2024-06-15 12:00:00")
def test_formatted_date_after():
    ct = CurrentTime()
    today = datetime.date.fromisoformat(ct.formatted_date())
    after = datetime.date.fromisoformat(ct.formatted_date_after(1))
    assert after - today == datetime.timedelta(days=1)
    assert ct.formatted_date_after(0) == ct.formatted_date()


@freeze_time("2024-01-01 00:00:00.250")
def test_current_time_millisecond():
    assert CurrentTime().millisecond() == 250


@freeze_time("2024-03-05 10:20:30")
def test_utc_timer_current_strings():
    timer = UTCTimer()
    assert timer.current_time_string() == "2024-03-05 10:20:30"
    assert timer.current_date_string() == "2024-03-05"
    assert timer.current_clock_string() == "10:20:30"


def test_utc_timer_specific_time_and_offset():
    timer = UTCTimer()
    timer.set_timezone_offset(8)
    assert timer.timezone_offset_hours == 8
    assert timer.specific_time_string(0) == "1970-01-01 00:00:00"


@freeze_time("2024-03-05 10:20:30")
def test_countdown_remaining_time_string():
    timer = CountdownTimer(int(time.time()) + 3661)
    assert timer.remaining_seconds() == 3661
    assert not timer.is_finished()
    assert timer.remaining_time_string() == "1:01:01"


@freeze_time("2024-03-05 10:20:30")
def test_countdown_finished_when_past():
    timer = CountdownTimer(int(time.time()) - 5)
    assert timer.is_finished()
    assert timer.remaining_seconds() == 0
    assert timer.remaining_time_string() == "0:00:00"


def test_countdown_default_is_finished():
    timer = CountdownTimer()
    assert timer.end_time == 0
    assert timer.is_finished()


def test_countdown_from_strings():
    full = CountdownTimer("2030-01-02 03:04:05")
    split = CountdownTimer("2030-01-02", "03:04:05")
    assert full.end_time == string_to_timestamp("2030-01-02 03:04:05")
    assert split.end_time == full.end_time


def test_countdown_rejects_bad_strings():
    with pytest.raises(ValueError):
        CountdownTimer("not a time")
    with pytest.raises(ValueError):
        CountdownTimer("2030-01-02", "xx:yy")


def test_countdown_clock_requires_date_string():
    with pytest.raises(TypeError):
        CountdownTimer(5, "03:04:05")


@freeze_time("2024-06-15 12:34:56")
def test_countdown_begin_records_now():
    timer = CountdownTimer()
    timer.begin()
    assert timer.start_time == CurrentTime().seconds()


@freeze_time("2024-06-15 12:34:56")
def test_countdown_compare_with_current_time():
    now_text = CurrentTime().formatted_time()
    date_part, clock_part = now_text.split(" ")
    timer = CountdownTimer()
    assert timer.compare(now_text)
    assert timer.compare(date_part, clock_part)
    assert not timer.compare("2000-01-01", "00:00:00")