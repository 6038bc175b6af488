"""Core extraction functions."""

from __future__ import annotations

import os
from datetime import datetime

from prtitles.config import PrtitlesConfig, get_config
from prtitles.errors import DocumentError, NoTitlesFoundError
from prtitles.extractor import TitleBlobExtractor
from prtitles.models import FileInfo, ProjectReport
from prtitles.parser import ProjectDocumentParser, is_gzipped


def get_file_info(path: str) -> FileInfo:
    """Get basic project file information.

    Args:
        path: Path to the project file

    Returns:
        FileInfo object with file details
    """
    stat = os.stat(path)

    with open(path, "rb") as f:
        compressed = is_gzipped(f.read(2))

    return FileInfo(
        path=os.path.abspath(path),
        filename=os.path.basename(path),
        extension=os.path.splitext(path)[1].lower(),
        size_bytes=stat.st_size,
        compressed=compressed,
        modified=datetime.fromtimestamp(stat.st_mtime),
    )


def extract_file(path: str, config: PrtitlesConfig | None = None) -> ProjectReport:
    """Extract all titles embedded in a Premiere Pro project.

    This is the main entry point. It:
    1. Gets basic file information
    2. Parses and validates the project document
    3. Decodes every title payload, skipping bad ones with a warning
    4. Fails if no title was found at all

    Nothing is written to disk; see :func:`prtitles.writer.save_titles`.

    Skipped titles are reported with
    :class:`~prtitles.errors.TitleFormatWarning`. Under the default warning
    filters an identical warning from a repeated call in the same process is
    shown only once; use ``warnings.simplefilter("always", TitleFormatWarning)``
    to see each of them, or read ``report.result.warnings``.

    Args:
        path: Path to the .prproj file
        config: Settings to use (default: global configuration)

    Returns:
        ProjectReport holding the decoded titles

    Raises:
        FileNotFoundError: If the file does not exist
        DocumentError: If the file is not a readable project
        ConfigError: If the global configuration is invalid
        NoTitlesFoundError: If the project holds no decodable title
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")

    config = config or get_config()
    settings = config.extraction

    try:
        file_info = get_file_info(path)
    except OSError as e:
        raise DocumentError.load_failed() from e

    parser = ProjectDocumentParser(root_tag=settings.project_root)
    document = parser.load(path)

    extractor = TitleBlobExtractor(
        marker=settings.title_marker,
        header_size=settings.header_size,
        encoding=settings.encoding,
    )
    result = extractor.extract_titles(document)

    if result.is_empty:
        raise NoTitlesFoundError()

    return ProjectReport(file_info=file_info, result=result)


# Short alias
extract = extract_file
