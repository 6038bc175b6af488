"""prtitles - Premiere Pro title extractor.

Recover the titles (text and graphics overlays) embedded in Adobe
Premiere Pro project files as standalone XML documents.

Usage:
    from prtitles import extract_file, save_titles

    # Decode every title of a project
    report = extract_file("edit.prproj")
    print(f"{report.title_count} titles found")

    # Write them next to the project (edit.prproj-title-001.xml, ...)
    save_titles(report)

    # Lower level: parse then extract
    doc = ProjectDocumentParser().parse(raw_bytes)
    result = TitleBlobExtractor().extract_titles(doc)
"""

from prtitles._version import __version__
from prtitles.analyze import extract, extract_file, get_file_info
from prtitles.config import PrtitlesConfig, get_config, load_config
from prtitles.errors import (
    ConfigError,
    DocumentError,
    ErrorKind,
    NoTitlesFoundError,
    PrtitlesError,
    TitleFormatWarning,
)
from prtitles.extractor import TitleBlobExtractor, decode_payload, inflate_title
from prtitles.formatters import format_default, format_json, format_quiet, to_dict
from prtitles.models import (
    Element,
    EncodedPayload,
    ExtractionResult,
    FileInfo,
    ImporterPrefs,
    MediaEntry,
    ProjectDocument,
    ProjectReport,
    SkippedItem,
    SkipReason,
    TitleDocument,
)
from prtitles.parser import ProjectDocumentParser
from prtitles.writer import save_titles, title_path

__all__ = [
    # Version
    "__version__",
    # Main functions
    "extract_file",
    "extract",
    "get_file_info",
    "save_titles",
    "title_path",
    # Components
    "ProjectDocumentParser",
    "TitleBlobExtractor",
    "decode_payload",
    "inflate_title",
    # Models
    "Element",
    "ProjectDocument",
    "MediaEntry",
    "ImporterPrefs",
    "EncodedPayload",
    "TitleDocument",
    "ExtractionResult",
    "SkippedItem",
    "SkipReason",
    "FileInfo",
    "ProjectReport",
    # Errors
    "ErrorKind",
    "PrtitlesError",
    "DocumentError",
    "NoTitlesFoundError",
    "ConfigError",
    "TitleFormatWarning",
    # Formatters
    "format_default",
    "format_quiet",
    "format_json",
    "to_dict",
    # Config
    "PrtitlesConfig",
    "get_config",
    "load_config",
]
