"""Functional core - pure business logic with no I/O."""

from .gestation import (
    Anchor,
    AnchorKind,
    GestationResult,
    KnownDueDate,
    LastMenstrualPeriod,
    Trimester,
    anchor_for,
    compute,
    days_overdue,
    trimester_for_week,
)
from .share import SHARE_TITLE, format_long_date, format_result_lines, format_share_text

__all__ = [
    # Gestation
    "Anchor",
    "AnchorKind",
    "GestationResult",
    "KnownDueDate",
    "LastMenstrualPeriod",
    "Trimester",
    "anchor_for",
    "compute",
    "days_overdue",
    "trimester_for_week",
    # Share
    "SHARE_TITLE",
    "format_long_date",
    "format_result_lines",
    "format_share_text",
]
