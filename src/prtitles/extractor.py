"""Title blob extraction.

Titles live in ``<ImporterPrefs Encoding="base64">`` nodes of ``<Media>``
entries. Once base64-decoded, a title payload is a 32-byte header that
mentions ``CompressedTitle`` followed by a zlib stream holding the title XML.
The same node type carries settings for many other importers, so most
candidates are not titles and are skipped without a word.
"""

from __future__ import annotations

import base64
import warnings
import zlib

from prtitles.errors import TitleFormatWarning
from prtitles.models import (
    HEADER_SIZE,
    TITLE_MARKER,
    EncodedPayload,
    ExtractionResult,
    MediaEntry,
    ProjectDocument,
    SkipReason,
)

BAD_FORMAT_MESSAGE = "unexpected title data format, skipping"


def decode_payload(text: str, header_size: int = HEADER_SIZE) -> EncodedPayload:
    """Base64-decode importer text into a payload.

    Whitespace and line breaks in the text are ignored.

    Raises:
        ValueError: If the text is not valid base64 (binascii.Error)
    """
    return EncodedPayload(raw=base64.b64decode(text), header_size=header_size)


def inflate_title(payload: EncodedPayload) -> bytes:
    """Inflate the zlib body that follows the payload header.

    Raises:
        zlib.error: If the body is not a complete zlib stream
    """
    return zlib.decompress(payload.body)


class TitleBlobExtractor:
    """Find and decode the titles embedded in a project's media entries.

    Per-entry problems never raise: they are recorded in the result and
    reported with :class:`TitleFormatWarning` when the data looked like a
    title but could not be decoded.
    """

    def __init__(
        self,
        marker: str | bytes = TITLE_MARKER,
        header_size: int = HEADER_SIZE,
        encoding: str = "base64",
    ) -> None:
        if header_size < 1:
            raise ValueError(f"header_size must be a positive number of bytes, got {header_size}")
        self.marker = marker.encode() if isinstance(marker, str) else marker
        self.header_size = header_size
        self.encoding = encoding

    def extract_titles(self, doc: ProjectDocument) -> ExtractionResult:
        """Decode every title of the document, in document order."""
        result = ExtractionResult()
        for entry in doc.media_entries:
            self._extract_entry(entry, result)
        return result

    def _extract_entry(self, entry: MediaEntry, result: ExtractionResult) -> None:
        prefs = entry.importer_prefs
        if prefs is None:
            result.skip(entry.index, SkipReason.NO_IMPORTER_PREFS)
            return
        if not prefs.is_candidate(self.encoding):
            if prefs.encoding != self.encoding:
                result.skip(entry.index, SkipReason.NOT_BASE64)
            else:
                result.skip(entry.index, SkipReason.EMPTY_PAYLOAD)
            return

        try:
            payload = decode_payload(prefs.text or "", self.header_size)
        except ValueError as e:
            self._warn(entry, e)
            result.skip(entry.index, SkipReason.BAD_ENCODING, str(e))
            return

        if not payload.has_marker(self.marker):
            result.skip(entry.index, SkipReason.NO_TITLE_MARKER)
            return

        try:
            title = inflate_title(payload)
        except zlib.error as e:
            self._warn(entry, e)
            result.skip(entry.index, SkipReason.BAD_COMPRESSED_DATA, str(e))
            return

        result.add_title(entry.index, title)

    def _warn(self, entry: MediaEntry, error: Exception) -> None:
        warnings.warn(
            f"{BAD_FORMAT_MESSAGE} (media entry {entry.index}): {error}",
            TitleFormatWarning,
            stacklevel=4,
        )
