"""Console rendering of validation reports."""

import typer

from commerce_validator_cli.models import (
    ItemStatus,
    TextColor,
    get_status_color,
)
from commerce_validator_cli.schemas import Report

REPORT_BANNER = "==== Validation Report ===="
REPORT_FOOTER = "=" * len(REPORT_BANNER)
STATUS_SEPARATOR = " | "
# PASS/FAIL are padded to the width of NOT TESTED when both can appear
STATUS_PADDING = " " * (len(ItemStatus.NOT_TESTED) - len(ItemStatus.PASS))


def _paint(text: str, color: TextColor, enabled: bool) -> str:
    return typer.style(text, fg=color.value) if enabled else text


def format_status(status: ItemStatus, has_untested: bool, color: bool = True) -> str:
    token = status.value
    if status is not ItemStatus.NOT_TESTED and has_untested:
        token += STATUS_PADDING
    return _paint(token, get_status_color(status), color)


def format_report(report: Report, color: bool = True) -> list[str]:
    """
    Render a report into aligned console lines.

    Names are right-aligned so every colon, and so every status token,
    lines up at column ``2 + longest name``. Item order is preserved.

    Args:
        report: Report to render.
        color: Apply ANSI styling.

    Returns:
        list[str]: Banner, one line per item, footer.
    """
    longest_name_length = report.longest_name_length
    has_untested = report.has_untested

    lines = [_paint(REPORT_BANNER, TextColor.BANNER, color)]
    for item in report.items:
        lines.append(
            item.name.rjust(longest_name_length)
            + ": "
            + format_status(item.status, has_untested, color)
            + STATUS_SEPARATOR
            + _paint(item.message, TextColor.NEUTRAL, color)
        )
    lines.append(_paint(REPORT_FOOTER, TextColor.BANNER, color))
    return lines


def print_report(report: Report) -> None:
    for line in format_report(report):
        typer.echo(line)


def format_welcome(version: str, color: bool = True) -> list[str]:
    return [
        _paint("-- 3D COMMERCE VALIDATOR --", TextColor.SUCCESS, color),
        _paint(f"* Version: {version}", TextColor.INFO, color),
    ]


def print_welcome(version: str) -> None:
    for line in format_welcome(version):
        typer.echo(line)


def print_error(message: str) -> None:
    typer.echo(_paint(f"ERROR: {message}", TextColor.FAILURE, True))
