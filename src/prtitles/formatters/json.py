"""JSON output formatter."""

from typing import Any

from prtitles.models import ProjectReport


def format_json(report: ProjectReport, indent: int = 2) -> str:
    """Format a report as JSON string.

    Title contents are left out; only their sizes are included.

    Args:
        report: ProjectReport object
        indent: JSON indentation level

    Returns:
        JSON formatted string
    """
    return report.model_dump_json(indent=indent)


def to_dict(report: ProjectReport) -> dict[str, Any]:
    """Convert a report to dictionary."""
    return report.model_dump(mode="json")
