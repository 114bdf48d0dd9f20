import pytest

from clubdesk.validation import InputError, check_event, check_working_time, to_minutes


def test_to_minutes_midnight_is_zero():
    assert to_minutes("00:00") == 0


def test_to_minutes_is_one_apart_across_the_hour():
    assert to_minutes("10:00") - to_minutes("09:59") == 1


def test_to_minutes_hour_is_sixty_minutes():
    assert to_minutes("13:45") - to_minutes("12:45") == 60


@pytest.mark.parametrize(
    ("time", "minutes"),
    [
        ("00:01", 1),
        ("09:00", 540),
        ("12:30", 750),
        ("19:00", 1140),
        ("23:59", 1439),
    ],
)
def test_to_minutes_pinned_values(time, minutes):
    assert to_minutes(time) == minutes


def test_check_working_time_returns_times():
    assert check_working_time("09:00 19:00") == ("09:00", "19:00")


def test_check_working_time_ignores_extra_tokens():
    assert check_working_time("  08:15\t20:45 trailing") == ("08:15", "20:45")


@pytest.mark.parametrize(
    "line",
    [
        "",
        "09:00",
        "9:00 19:00",
        "09:00 19:0",
        "19:00 09:00",
        "10:00 10:00",
        "24:00 23:00",
        "09:60 10:00",
        "ab:cd 10:00",
    ],
)
def test_check_working_time_rejects(line):
    with pytest.raises(InputError):
        check_working_time(line)


def test_check_event_returns_tokens():
    assert check_event("08:48 1 client1") == ["08:48", "1", "client1"]


def test_check_event_seating_takes_table():
    assert check_event("09:54 2 Client_1-x 1") == ["09:54", "2", "Client_1-x", "1"]


@pytest.mark.parametrize("event_id", ["1", "3", "4"])
def test_check_event_accepts_plain_ids(event_id):
    assert check_event(f"10:00 {event_id} guest")[1] == event_id


@pytest.mark.parametrize(
    "line",
    [
        "08:48 1",
        "8:48 1 client1",
        "24:00 1 client1",
        "08:48 0 client1",
        "08:48 01 client1",
        "08:48 5 client1",
        "08:48 11 client1",
        "08:48 1 cli.ent",
        "08:48 2 client1",
        "08:48 1 client1 2",
        "08:48 2 client1 0",
        "08:48 2 client1 x",
        "08:48 3 client1 1",
    ],
)
def test_check_event_rejects(line):
    with pytest.raises(InputError):
        check_event(line)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        check_event("bad")