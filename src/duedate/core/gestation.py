"""Pure gestational date logic - no I/O dependencies."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum, IntEnum

logger = logging.getLogger(__name__)

GESTATION_DAYS = 280  # Naegele's rule
CONCEPTION_OFFSET_DAYS = 14  # average ovulation after LMP


class AnchorKind(Enum):
    """Which date the user supplied."""

    LMP = "lmp"
    DUE_DATE = "dueDate"


@dataclass(frozen=True)
class LastMenstrualPeriod:
    """First day of the last menstrual period."""

    date: date

    @property
    def kind(self) -> AnchorKind:
        return AnchorKind.LMP


@dataclass(frozen=True)
class KnownDueDate:
    """A due date the user already knows."""

    date: date

    @property
    def kind(self) -> AnchorKind:
        return AnchorKind.DUE_DATE


Anchor = LastMenstrualPeriod | KnownDueDate


def anchor_for(kind: AnchorKind, anchor_date: date) -> Anchor:
    """Build the anchor variant for a calculation method."""
    if kind is AnchorKind.DUE_DATE:
        return KnownDueDate(anchor_date)
    return LastMenstrualPeriod(anchor_date)


class Trimester(IntEnum):
    """Gestational stage."""

    FIRST = 1
    SECOND = 2
    THIRD = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def week_range(self) -> str:
        ranges = {1: "Weeks 1-12", 2: "Weeks 13-27", 3: "Weeks 28-40"}
        return ranges[self.value]


@dataclass(frozen=True)
class GestationResult:
    """Milestones derived from a single anchor date and a reference day."""

    due_date: date
    conception_date: date
    current_week: int
    days_remaining: int
    trimester: Trimester


def trimester_for_week(week: int) -> Trimester:
    """Weeks 0-12 first, 13-27 second, 28+ third."""
    if week <= 12:
        return Trimester.FIRST
    if week <= 27:
        return Trimester.SECOND
    return Trimester.THIRD


def _as_date(value: date | datetime) -> date:
    # datetime is a date subclass, so check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def _lmp_for(anchor: Anchor) -> date:
    match anchor:
        case LastMenstrualPeriod(date=lmp):
            return _as_date(lmp)
        case KnownDueDate(date=due):
            return _as_date(due) - timedelta(days=GESTATION_DAYS)
    raise TypeError(f"Unsupported anchor: {anchor!r}")


def compute(anchor: Anchor | None, now: date | datetime) -> GestationResult | None:
    """
    Derive due date, conception date and progress from an anchor date.

    Pure function - no I/O. The caller supplies "now"; a datetime is reduced to
    its calendar day so the hour never changes the result. Week and day counts
    are floor-clamped at zero.

    Args:
        anchor: LMP or known due date, or None when no valid input exists yet
        now: Reference day for the progress fields

    Returns:
        GestationResult, or None if anchor is None
    """
    if anchor is None:
        return None

    today = _as_date(now)
    lmp = _lmp_for(anchor)
    due_date = lmp + timedelta(days=GESTATION_DAYS)
    conception_date = lmp + timedelta(days=CONCEPTION_OFFSET_DAYS)

    # Floor division keeps pre-LMP days negative before clamping
    current_week = max(0, (today - lmp).days // 7)
    days_remaining = max(0, (due_date - today).days)

    result = GestationResult(
        due_date=due_date,
        conception_date=conception_date,
        current_week=current_week,
        days_remaining=days_remaining,
        trimester=trimester_for_week(current_week),
    )
    logger.debug(f"Computed {result} from {anchor.kind.value} anchor as of {today}")
    return result


def days_overdue(result: GestationResult, now: date | datetime) -> int:
    """Days past the due date as of now, 0 if not yet due."""
    return max(0, (_as_date(now) - result.due_date).days)
