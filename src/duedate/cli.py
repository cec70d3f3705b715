"""duedate CLI - Pregnancy due date calculator."""

import json
import logging
import sys
from datetime import date
from pathlib import Path

import click

from .config import Config, load_config
from .core.gestation import GestationResult, days_overdue
from .core.share import format_result_lines, format_share_text
from .state import CalculatorState, parse_date, parse_method

logger = logging.getLogger(__name__)

METHOD_CHOICES = ["lmp", "due-date"]


def log_level(config: Config, debug: bool = False) -> int:
    """Logging level from --debug or the configured LOG_LEVEL name."""
    if debug:
        return logging.DEBUG
    level = getattr(logging, config.log_level, None)
    if not isinstance(level, int):
        logger.warning(f"Unknown LOG_LEVEL {config.log_level!r}, using WARNING")
        return logging.WARNING
    return level


@click.group()
@click.version_option(package_name="duedate")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """duedate - Pregnancy due date calculator."""
    config = load_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=log_level(config, debug),
    )
    ctx.obj = config


def _calculate(config: Config, anchor_input: str, method: str | None, today: str | None) -> tuple[GestationResult, date]:
    """Shared input validation and engine call. Exits on invalid input."""
    kind = parse_method(method) if method else config.default_method

    now = date.today()
    if today is not None:
        now = parse_date(today)
        if now is None:
            click.echo(f"Error: invalid --today date {today!r}, expected YYYY-MM-DD", err=True)
            sys.exit(1)

    state = CalculatorState().select_method(kind).with_input(anchor_input)
    result = state.results(now)
    if result is None:
        click.echo(f"Error: invalid date {anchor_input!r}, expected YYYY-MM-DD within the calendar range", err=True)
        sys.exit(1)

    logger.debug(f"{kind.value} {anchor_input} as of {now} -> {result}")
    return result, now


@main.command()
@click.argument("anchor_date")
@click.option("--method", "-m", type=click.Choice(METHOD_CHOICES), default=None,
              help="Treat DATE as last menstrual period or known due date (default from config)")
@click.option("--today", default=None, help="Calculate as of this date (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def calc(config: Config, anchor_date: str, method: str | None, today: str | None, as_json: bool):
    """Calculate due date, conception date and progress from DATE."""
    result, now = _calculate(config, anchor_date, method, today)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "due_date": result.due_date.isoformat(),
                    "conception_date": result.conception_date.isoformat(),
                    "current_week": result.current_week,
                    "days_remaining": result.days_remaining,
                    "days_overdue": days_overdue(result, now),
                    "trimester": result.trimester.label,
                },
                indent=2,
            )
        )
        return

    for line in format_result_lines(result, now):
        click.echo(line)


@main.command()
@click.argument("anchor_date")
@click.option("--method", "-m", type=click.Choice(METHOD_CHOICES), default=None,
              help="Treat DATE as last menstrual period or known due date (default from config)")
@click.option("--today", default=None, help="Calculate as of this date (YYYY-MM-DD), defaults to today")
@click.option("--url", default=None, help="Link to include in the text (default from config)")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write the text to a file instead of stdout")
@click.pass_obj
def share(config: Config, anchor_date: str, method: str | None, today: str | None,
          url: str | None, output: Path | None):
    """Print shareable results for DATE."""
    result, _ = _calculate(config, anchor_date, method, today)
    text = format_share_text(
        result,
        site_url=config.share_url if url is None else url,
        hashtags=config.hashtags,
    )

    if output:
        output.write_text(text + "\n", encoding="utf-8")
        click.echo(f"Saved to {output}")
        return

    click.echo(text)


@main.command()
def methods():
    """Explain the calculation methods."""
    click.echo("Last Menstrual Period (lmp)")
    click.echo("  - Due Date = LMP + 280 days")
    click.echo("  - Conception Date = LMP + 14 days (average ovulation)")
    click.echo("  - Current Week = Days since LMP / 7")
    click.echo()
    click.echo("Known Due Date (due-date)")
    click.echo("  - LMP = Due Date - 280 days")
    click.echo("  - Conception Date = LMP + 14 days")
    click.echo("  - Progress calculated from estimated LMP")


if __name__ == "__main__":
    main()
