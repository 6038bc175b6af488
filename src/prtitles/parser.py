"""Premiere Pro project file parser.

A ``.prproj`` file is an XML document, usually gzip-compressed on disk.
The parser turns it into a :class:`~prtitles.models.ProjectDocument` and
checks the root element before anything else looks at it.
"""

from __future__ import annotations

import gzip
import zlib
from pathlib import Path
from xml.etree import ElementTree as ET

from prtitles.errors import DocumentError
from prtitles.models import PROJECT_ROOT_TAG, Element, ProjectDocument

GZIP_MAGIC = b"\x1f\x8b"


def is_gzipped(raw: bytes) -> bool:
    """Check if raw file content is a gzip stream."""
    return raw[:2] == GZIP_MAGIC


class ProjectDocumentParser:
    """Parse project file bytes into a validated ProjectDocument."""

    def __init__(self, root_tag: str = PROJECT_ROOT_TAG) -> None:
        self.root_tag = root_tag

    def parse(self, raw: bytes) -> ProjectDocument:
        """Parse raw project bytes.

        Args:
            raw: File content, plain or gzip-compressed XML

        Returns:
            ProjectDocument rooted at the project element

        Raises:
            DocumentError: LOAD_FAILED if the content is not readable XML,
                NOT_A_PROJECT if the root element is not the project marker
        """
        if is_gzipped(raw):
            try:
                raw = gzip.decompress(raw)
            except (OSError, EOFError, zlib.error) as e:
                raise DocumentError.load_failed() from e

        try:
            root = ET.fromstring(raw)
        except ET.ParseError as e:
            raise DocumentError.load_failed() from e

        if root.tag != self.root_tag:
            raise DocumentError.not_a_project()

        return ProjectDocument(root=Element.from_etree(root))

    def load(self, path: str | Path) -> ProjectDocument:
        """Read and parse a project file from disk."""
        try:
            raw = Path(path).read_bytes()
        except OSError as e:
            raise DocumentError.load_failed() from e
        return self.parse(raw)
