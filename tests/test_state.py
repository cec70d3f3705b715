"""Tests for calculator state."""

from datetime import date

import pytest

from duedate.core.gestation import AnchorKind, KnownDueDate, LastMenstrualPeriod
from duedate.state import CalculatorState, parse_date, parse_method


@pytest.fixture
def today():
    return date(2025, 4, 9)


class TestParseDate:
    def test_iso_date(self):
        assert parse_date("2025-01-01") == date(2025, 1, 1)

    def test_strips_whitespace(self):
        assert parse_date("  2025-01-01\n") == date(2025, 1, 1)

    @pytest.mark.parametrize("value", [None, "", "   ", "2025-02-30", "01/01/2025", "tomorrow", "20250101", "2025-W02-3"])
    def test_invalid_is_none(self, value):
        assert parse_date(value) is None


class TestParseMethod:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("lmp", AnchorKind.LMP),
            ("LMP", AnchorKind.LMP),
            ("dueDate", AnchorKind.DUE_DATE),
            ("due-date", AnchorKind.DUE_DATE),
            ("due_date", AnchorKind.DUE_DATE),
        ],
    )
    def test_known(self, value, expected):
        assert parse_method(value) is expected

    def test_unknown(self):
        assert parse_method("ultrasound") is None
        assert parse_method("") is None


class TestCalculatorState:
    def test_defaults_to_lmp_with_no_result(self, today):
        state = CalculatorState()

        assert state.method is AnchorKind.LMP
        assert state.anchor() is None
        assert state.results(today) is None

    def test_transitions_return_new_state(self):
        state = CalculatorState()
        updated = state.with_input("2025-01-01")

        assert state.lmp_input == ""
        assert updated.lmp_input == "2025-01-01"

    def test_inputs_are_kept_per_method(self):
        state = (
            CalculatorState()
            .with_input("2025-01-01")
            .select_method(AnchorKind.DUE_DATE)
            .with_input("2025-12-25")
        )

        assert state.lmp_input == "2025-01-01"
        assert state.due_date_input == "2025-12-25"
        assert state.active_input == "2025-12-25"
        assert state.anchor() == KnownDueDate(date(2025, 12, 25))

        back = state.select_method(AnchorKind.LMP)
        assert back.anchor() == LastMenstrualPeriod(date(2025, 1, 1))

    def test_results(self, today):
        result = CalculatorState().with_input("2025-01-01").results(today)

        assert result.current_week == 14
        assert result.due_date == date(2025, 10, 8)

    def test_invalid_input_has_no_result(self, today):
        state = CalculatorState().with_input("2025-13-01")

        assert state.anchor() is None
        assert state.results(today) is None

    def test_lmp_at_end_of_calendar_has_no_result(self, today):
        state = CalculatorState().with_input("9999-12-31")

        assert state.anchor() is None
        assert state.results(today) is None

    def test_due_date_at_start_of_calendar_has_no_result(self, today):
        state = CalculatorState().select_method(AnchorKind.DUE_DATE).with_input("0001-01-01")

        assert state.anchor() is None
        assert state.results(today) is None

    def test_extremes_that_stay_on_the_calendar(self, today):
        assert CalculatorState().with_input("0001-01-01").results(today).due_date == date(1, 10, 8)

        assert CalculatorState().with_input("9999-03-27").anchor() is None

        latest = CalculatorState().with_input("9999-03-26").results(today)
        assert latest.due_date == date(9999, 12, 31)

        due = CalculatorState().select_method(AnchorKind.DUE_DATE).with_input("9999-12-31")
        assert due.results(today).conception_date == date(9999, 4, 9)
