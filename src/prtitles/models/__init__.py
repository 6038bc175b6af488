"""Pydantic models for prtitles."""

from .element import Element
from .file import FileInfo, format_size
from .project import (
    ENCODING_ATTRIBUTE,
    IMPORTER_PREFS_TAG,
    MEDIA_TAG,
    PROJECT_ROOT_TAG,
    ImporterPrefs,
    MediaEntry,
    ProjectDocument,
)
from .report import ProjectReport
from .title import (
    HEADER_SIZE,
    TITLE_MARKER,
    EncodedPayload,
    ExtractionResult,
    SkippedItem,
    SkipReason,
    TitleDocument,
)

__all__ = [
    # XML tree
    "Element",
    # Project
    "ProjectDocument",
    "MediaEntry",
    "ImporterPrefs",
    "PROJECT_ROOT_TAG",
    "MEDIA_TAG",
    "IMPORTER_PREFS_TAG",
    "ENCODING_ATTRIBUTE",
    # Titles
    "EncodedPayload",
    "TitleDocument",
    "ExtractionResult",
    "SkippedItem",
    "SkipReason",
    "TITLE_MARKER",
    "HEADER_SIZE",
    # File / report
    "FileInfo",
    "ProjectReport",
    "format_size",
]
