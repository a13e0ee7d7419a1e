"""Tests for finding name=... in free text."""

import pytest

from dosatag.exceptions import DosaTagError, ErrKind
from dosatag.tags.name_tag import parse_name_tag


DEFAULT_NAME = "default"


class TestNameTag:
    @pytest.mark.parametrize(
        "tag,full_name,name",
        [
            ("name=ji", "name=ji", "ji"),
            ("name=ji,", "name=ji,", "ji"),
            ("name=ji,,,,", "name=ji,,,,", "ji"),
            ("name=ji12830", "name=ji12830", "ji12830"),
            ("name=ji12830 primaryKey=", "name=ji12830", "ji12830"),
            ("xxx name=ji12830 yyy", "name=ji12830", "ji12830"),
            ("primaryKey=ok, name = t1", "name = t1", "t1"),
        ],
    )
    def test_found(self, tag: str, full_name: str, name: str) -> None:
        assert parse_name_tag(tag, DEFAULT_NAME) == (full_name, name)

    @pytest.mark.parametrize("tag", ["", "primaryKey=ok", "tablename=x"])
    def test_default(self, tag: str) -> None:
        assert parse_name_tag(tag, DEFAULT_NAME) == ("", DEFAULT_NAME)

    def test_invalid_name(self) -> None:
        with pytest.raises(DosaTagError) as exc_info:
            parse_name_tag("name=ji^&*", DEFAULT_NAME)
        assert exc_info.value.kind == ErrKind.INVALID_NAME
        assert "invalid" in str(exc_info.value)
