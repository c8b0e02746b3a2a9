"""Tests for the title/content policies and date styles."""

from datetime import datetime

import pytest

from models import Note
from policies import DateStyle, TitlePolicy, first_line

WHEN = datetime(2026, 10, 18, 9, 30)


def make_note(title: str, content: str, checked: bool = False) -> Note:
    return Note(id="n1", title=title, content=content, date=WHEN, is_checked=checked)


def round_trip(policy: TitlePolicy, text: str) -> str:
    title, content = policy.split_text(text)
    return policy.compose(make_note(title, content))


class TestFirstLine:
    @pytest.mark.parametrize("text,expected", [
        ("", ""),
        ("one", "one"),
        ("one\ntwo", "one"),
        ("one\r\ntwo", "one"),
        ("one\rtwo", "one"),
        ("\nsecond", ""),
    ])
    def test_first_line(self, text, expected):
        assert first_line(text) == expected


# ---------------------------------------------------------------------------
# Single field
# ---------------------------------------------------------------------------


class TestSingleField:
    policy = TitlePolicy.SINGLE_FIELD

    def test_title_is_first_line_content_is_everything(self):
        assert self.policy.split_text("Buy milk\nand eggs") == (
            "Buy milk", "Buy milk\nand eggs"
        )

    def test_round_trip_is_verbatim(self):
        for text in ["Buy milk", "L1\nL2\nL3", "L1\n", "a\r\nb"]:
            assert round_trip(self.policy, text) == text

    def test_list_shows_first_line_only(self):
        note = make_note("ignored", "Groceries\nmilk\neggs")
        assert self.policy.list_title(note) == "Groceries"
        assert self.policy.preview(note) == ""


# ---------------------------------------------------------------------------
# Title + body
# ---------------------------------------------------------------------------


class TestTitleBody:
    policy = TitlePolicy.TITLE_BODY

    def test_splits_at_first_break(self):
        assert self.policy.split_text("L1\nL2\nL3") == ("L1", "L2\nL3")

    def test_single_line_has_empty_content(self):
        assert self.policy.split_text("L1") == ("L1", "")

    def test_leading_blank_lines_are_skipped(self):
        assert self.policy.split_text("\nbody") == ("body", "")
        assert self.policy.split_text("  \n\r\nTrip\npack") == ("Trip", "pack")

    def test_windows_line_break(self):
        assert self.policy.split_text("L1\r\nL2") == ("L1", "L2")

    def test_round_trip_multi_line(self):
        assert round_trip(self.policy, "L1\nL2\nL3") == "L1\nL2\nL3"

    def test_round_trip_single_line_adds_no_break(self):
        assert round_trip(self.policy, "L1") == "L1"

    def test_trailing_break_after_lone_title_is_lost(self):
        assert round_trip(self.policy, "L1\n") == "L1"

    def test_list_shows_title_and_preview(self):
        note = make_note("Trip", "pack\nbook hotel")
        assert self.policy.list_title(note) == "Trip"
        assert self.policy.preview(note) == "pack book hotel"

    def test_preview_is_truncated(self):
        note = make_note("Long", "x" * 60)
        assert self.policy.preview(note) == "x" * 40 + "…"

    def test_parses_from_string(self):
        assert TitlePolicy("title_body") is TitlePolicy.TITLE_BODY


class TestDateStyle:
    def test_calendar(self):
        assert DateStyle.CALENDAR.render(WHEN) == "Oct 18, 2026"

    def test_calendar_single_digit_day(self):
        assert DateStyle.CALENDAR.render(datetime(2026, 3, 5)) == "Mar 5, 2026"

    def test_weekday(self):
        assert DateStyle.WEEKDAY.render(WHEN) == "Sunday"
