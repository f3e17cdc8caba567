"""Tests for date and identifier utilities."""

from datetime import date
from uuid import UUID

import pytest

from library_api.core.exceptions import InvalidIdentifierListError
from library_api.utils import format_id_list, get_current_age, parse_id_list

FIRST = UUID("25320c5e-f58a-4b1f-b63a-8ee07a840bdf")
SECOND = UUID("412c3012-d891-4f5e-9613-ff7aa63e6bb3")


class TestGetCurrentAge:
    """Tests for age calculation."""

    def test_before_and_after_birthday(self):
        """Test the birthday decides whether a year is complete."""
        born = date(1947, 9, 21)
        assert get_current_age(born, today=date(2020, 9, 20)) == 72
        assert get_current_age(born, today=date(2020, 9, 21)) == 73

    def test_never_negative(self):
        """Test future birth dates give zero."""
        assert get_current_age(date(2030, 1, 1), today=date(2020, 1, 1)) == 0


class TestIdList:
    """Tests for id list parsing and formatting."""

    @pytest.mark.parametrize(
        "raw",
        [
            f"({FIRST},{SECOND})",
            f"{FIRST}, {SECOND}",
            f"( {FIRST} ,{SECOND},{FIRST} )",
        ],
    )
    def test_parse(self, raw):
        """Test parentheses are optional and duplicates are dropped."""
        assert parse_id_list(raw) == [FIRST, SECOND]

    @pytest.mark.parametrize("raw", ["", "()", " , ", f"({FIRST},nope)"])
    def test_parse_invalid(self, raw):
        """Test empty and malformed lists are rejected."""
        with pytest.raises(InvalidIdentifierListError):
            parse_id_list(raw)

    def test_format_is_parsed_back(self):
        """Test formatted lists are read back in order."""
        formatted = format_id_list([SECOND, FIRST])

        assert formatted == f"{SECOND},{FIRST}"
        assert parse_id_list(formatted) == [SECOND, FIRST]
