"""Write decoded titles next to their project file."""

from __future__ import annotations

from pathlib import Path

from prtitles.models import ProjectReport


def title_path(project_path: str | Path, index: int, output_dir: str | Path | None = None) -> Path:
    """Build the output path of the index-th title (1-based).

    ``/work/edit.prproj`` gives ``/work/edit.prproj-title-001.xml``.
    """
    project_path = Path(project_path)
    directory = Path(output_dir) if output_dir else project_path.parent
    return directory / f"{project_path.name}-title-{index:03d}.xml"


def save_titles(report: ProjectReport, output_dir: str | Path | None = None) -> list[Path]:
    """Write every title of the report as an XML file.

    The title bytes are written as decoded, without re-validation.
    Written paths are also recorded on the report.

    Args:
        report: Report returned by extract_file
        output_dir: Target directory (default: the project's directory)

    Returns:
        List of written file paths, in title order
    """
    if output_dir:
        Path(output_dir).mkdir(parents=True, exist_ok=True)

    paths = []
    for title in report.result.titles:
        path = title_path(report.file_info.path, title.index, output_dir)
        path.write_bytes(title.data)
        paths.append(path)

    report.output_paths = [str(p) for p in paths]
    return paths
