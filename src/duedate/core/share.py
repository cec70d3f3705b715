"""Pure result formatting - no I/O dependencies."""

from datetime import date, datetime

from .gestation import GestationResult, days_overdue

SHARE_TITLE = "My Pregnancy Calculator Results"
DEFAULT_HASHTAGS = ("pregnancy", "duedate", "expecting", "babycalculator")


def format_long_date(d: date) -> str:
    """Format as e.g. 'Wednesday, October 8, 2025'."""
    return f"{d.strftime('%A')}, {d.strftime('%B')} {d.day}, {d.year}"


def format_share_text(
    result: GestationResult | None,
    site_url: str = "",
    hashtags: tuple[str, ...] | list[str] = DEFAULT_HASHTAGS,
) -> str:
    """
    Format a result as shareable text.

    Pure function - no I/O. Only projects fields of the result; nothing is
    recomputed. Returns an empty string when there is no result.
    """
    if result is None:
        return ""

    text = f"""🤱 {SHARE_TITLE}:

📅 Estimated Due Date: {format_long_date(result.due_date)}
💝 Estimated Conception Date: {format_long_date(result.conception_date)}
🗓️ Current Week: {result.current_week} weeks pregnant
⏰ Days Remaining: {result.days_remaining} days
🌸 Trimester: {result.trimester.label} Trimester"""

    if site_url:
        text += f"\n\nCalculate your pregnancy dates at: {site_url}"
    if hashtags:
        text += "\n\n" + " ".join(f"#{tag}" for tag in hashtags)
    return text


def format_result_lines(result: GestationResult, now: date | datetime | None = None) -> list[str]:
    """Plain display lines for a terminal."""
    lines = [
        f"Estimated Due Date:       {format_long_date(result.due_date)}",
        f"Estimated Conception Date: {format_long_date(result.conception_date)}",
        f"Current Week:             {result.current_week} weeks pregnant",
        f"Days Remaining:           {result.days_remaining} days",
        f"Trimester:                {result.trimester.label} Trimester ({result.trimester.week_range})",
    ]
    if now is not None:
        overdue = days_overdue(result, now)
        if overdue:
            lines.append(f"Overdue by {overdue} days")
    return lines
