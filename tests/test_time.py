from datetime import datetime, timezone

import pytest

from bugtracker.utils.time import format_distance_to_now, now_iso, parse_iso, to_iso

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_to_iso_matches_stored_format():
    assert to_iso(NOW) == "2024-05-01T12:00:00.000Z"


def test_now_iso_round_trips():
    assert parse_iso(now_iso()).tzinfo is not None


def test_parse_iso_rejects_garbage():
    assert parse_iso("yesterday") is None
    assert parse_iso(None) is None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-05-01T11:59:30.000Z", "less than a minute"),
        ("2024-05-01T11:59:00.000Z", "1 minute"),
        ("2024-05-01T09:00:00.000Z", "3 hours"),
        ("2024-04-30T12:00:00.000Z", "1 day"),
        ("2024-03-01T12:00:00.000Z", "2 months"),
        ("2022-05-01T12:00:00.000Z", "2 years"),
    ],
)
def test_format_distance_to_now(value, expected):
    assert format_distance_to_now(value, now=NOW) == expected


def test_format_distance_of_unparseable_value():
    assert format_distance_to_now("??", now=NOW) == ""
