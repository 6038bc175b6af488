"""Default output formatter - run summary."""

from pathlib import Path

from prtitles.models import ProjectReport


def format_default(report: ProjectReport) -> str:
    """Format a report as a short summary.

    Shows the project file, every title with its source media entry and
    output file, skipped entries that raised a warning, and the final count.
    """
    lines = []
    info = report.file_info

    lines.append("=" * 70)
    lines.append(f"Project: {info.filename}")
    lines.append("=" * 70)
    compressed = " (gzip)" if info.compressed else ""
    lines.append(f"  Size:         {info.size_human}{compressed}")

    lines.append("")
    lines.append("## TITLES")
    for i, title in enumerate(report.result.titles):
        line = f"  #{title.index:03d}  media {title.media_index:<4}  {title.size} bytes"
        if i < len(report.output_paths):
            line += f"  -> {report.output_paths[i]}"
        lines.append(line)

    warned = report.result.warnings
    if warned:
        lines.append("")
        lines.append("## SKIPPED")
        for item in warned:
            lines.append(f"  media {item.media_index:<4}  {item.reason.value}: {item.error}")

    lines.append("")
    if report.output_paths:
        output_dir = Path(report.output_paths[0]).parent
        if output_dir == Path(info.path).parent:
            where = "next to your project file"
        else:
            where = f"in {output_dir}"
        lines.append(f"Done! {report.title_count} titles has been saved as XML files {where}")
    else:
        lines.append(f"Found {report.title_count} titles (nothing written)")

    return "\n".join(lines)
