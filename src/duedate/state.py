"""Calculator application state.

Immutable snapshot of what the user has entered. Every transition returns a new
state; results are derived on demand by handing the parsed anchor to the engine.
"""

import re
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta

from .core.gestation import GESTATION_DAYS, Anchor, AnchorKind, GestationResult, anchor_for, compute

ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")

# Anchors past these would push the derived LMP or due date off the calendar
LATEST_LMP = date.max - timedelta(days=GESTATION_DAYS)
EARLIEST_DUE_DATE = date.min + timedelta(days=GESTATION_DAYS)

_METHOD_ALIASES = {
    "lmp": AnchorKind.LMP,
    "duedate": AnchorKind.DUE_DATE,
    "due-date": AnchorKind.DUE_DATE,
    "due_date": AnchorKind.DUE_DATE,
}


def parse_date(value: str | None) -> date | None:
    """Parse a YYYY-MM-DD string. Returns None for blank or malformed input."""
    if not value or not ISO_DATE.fullmatch(value.strip()):
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def parse_method(value: str | None) -> AnchorKind | None:
    """Parse a calculation method name ('lmp', 'dueDate', 'due-date', 'due_date')."""
    if not value:
        return None
    return _METHOD_ALIASES.get(value.strip().lower())


@dataclass(frozen=True)
class CalculatorState:
    """What the user has selected and typed so far."""

    method: AnchorKind = AnchorKind.LMP
    lmp_input: str = ""
    due_date_input: str = ""

    def select_method(self, method: AnchorKind) -> "CalculatorState":
        return replace(self, method=method)

    def with_input(self, value: str) -> "CalculatorState":
        """Set the date input for the active method."""
        if self.method is AnchorKind.DUE_DATE:
            return replace(self, due_date_input=value)
        return replace(self, lmp_input=value)

    @property
    def active_input(self) -> str:
        if self.method is AnchorKind.DUE_DATE:
            return self.due_date_input
        return self.lmp_input

    def anchor(self) -> Anchor | None:
        """Anchor for the active input, or None if it doesn't parse or is out of range."""
        anchor_date = parse_date(self.active_input)
        if anchor_date is None:
            return None
        if self.method is AnchorKind.LMP and anchor_date > LATEST_LMP:
            return None
        if self.method is AnchorKind.DUE_DATE and anchor_date < EARLIEST_DUE_DATE:
            return None
        return anchor_for(self.method, anchor_date)

    def results(self, now: date | datetime) -> GestationResult | None:
        return compute(self.anchor(), now)
