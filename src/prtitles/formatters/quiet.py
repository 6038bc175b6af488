"""Quiet output formatter - one-line summary."""

from prtitles.models import ProjectReport


def format_quiet(report: ProjectReport) -> str:
    """Format a report as a one-line summary.

    Format: filename | N titles | M warnings
    """
    parts = [
        report.filename,
        f"{report.title_count} titles",
        f"{report.warning_count} warnings",
    ]
    return " | ".join(parts)
