"""Tests for the ttl duration grammar."""

from datetime import timedelta

import pytest

from dosatag.exceptions import DosaTagError, ErrKind
from dosatag.util.duration import parse_ttl


class TestValidDurations:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("90s", timedelta(seconds=90)),
            ("80m", timedelta(minutes=80)),
            ("90h", timedelta(hours=90)),
            ("1h30m", timedelta(hours=1, minutes=30)),
            ("1h1m1s", timedelta(hours=1, minutes=1, seconds=1)),
            ("+5s", timedelta(seconds=5)),
        ],
    )
    def test_parse(self, value: str, expected: timedelta) -> None:
        assert parse_ttl(value) == expected


class TestInvalidDurations:
    @pytest.mark.parametrize(
        "value",
        ["", "-80m", "0s", "0h0m", "912ms", "1us", "5ns", "1.5h", "abc",
         "90", "-", "h"],
    )
    def test_invalid_duration(self, value: str) -> None:
        with pytest.raises(DosaTagError) as exc_info:
            parse_ttl(value)
        assert exc_info.value.kind == ErrKind.INVALID_DURATION
        assert "invalid ttl tag" in str(exc_info.value)

    @pytest.mark.parametrize("value,unit", [("912d", "d"), ("2w", "w"),
                                            ("1h2y", "y")])
    def test_unknown_unit(self, value: str, unit: str) -> None:
        with pytest.raises(DosaTagError) as exc_info:
            parse_ttl(value)
        assert exc_info.value.kind == ErrKind.UNKNOWN_DURATION_UNIT
        assert exc_info.value.fragment == unit
        assert "unknown unit {0} in duration".format(unit) \
            in str(exc_info.value)

    def test_sub_second_unit_is_named(self) -> None:
        with pytest.raises(DosaTagError) as exc_info:
            parse_ttl("912ms")
        assert "ms" in str(exc_info.value)

    @pytest.mark.parametrize(
        "value", ["99999999999999999999h", "999999999999h", "1h99999999999999s"]
    )
    def test_out_of_range(self, value: str) -> None:
        with pytest.raises(DosaTagError) as exc_info:
            parse_ttl(value)
        assert exc_info.value.kind == ErrKind.INVALID_DURATION
        assert "out of range" in str(exc_info.value)
