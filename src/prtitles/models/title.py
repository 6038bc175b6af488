"""Decoded payload and title models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field

TITLE_MARKER = b"CompressedTitle"
HEADER_SIZE = 0x20


class SkipReason(str, Enum):
    """Why a media entry did not produce a title."""

    NO_IMPORTER_PREFS = "no_importer_prefs"
    NOT_BASE64 = "not_base64"
    EMPTY_PAYLOAD = "empty_payload"
    NO_TITLE_MARKER = "no_title_marker"
    BAD_ENCODING = "bad_encoding"
    BAD_COMPRESSED_DATA = "bad_compressed_data"


# Reasons reported to the user; the others are the normal case.
WARNED_REASONS = frozenset({SkipReason.BAD_ENCODING, SkipReason.BAD_COMPRESSED_DATA})


class EncodedPayload(BaseModel):
    """Raw bytes of a base64 importer payload: a fixed header then a zlib body."""

    raw: bytes = Field(repr=False)
    header_size: int = HEADER_SIZE

    @property
    def header(self) -> bytes:
        return self.raw[: self.header_size]

    @property
    def body(self) -> bytes:
        return self.raw[self.header_size :]

    def has_marker(self, marker: bytes = TITLE_MARKER) -> bool:
        """Check if the header mentions the marker.

        The rest of the header is opaque and not validated.
        """
        return marker in self.header


class TitleDocument(BaseModel):
    """An inflated title, itself a standalone XML document."""

    index: int
    media_index: int
    data: bytes = Field(repr=False, exclude=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def size(self) -> int:
        return len(self.data)


class SkippedItem(BaseModel):
    """A media entry that was skipped, and why."""

    media_index: int
    reason: SkipReason
    error: str | None = None

    @property
    def warned(self) -> bool:
        return self.reason in WARNED_REASONS


class ExtractionResult(BaseModel):
    """Titles found in a project, in encounter order."""

    titles: list[TitleDocument] = Field(default_factory=list)
    skipped: list[SkippedItem] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.titles)

    @property
    def is_empty(self) -> bool:
        return not self.titles

    @property
    def data(self) -> list[bytes]:
        return [title.data for title in self.titles]

    @property
    def warnings(self) -> list[SkippedItem]:
        return [item for item in self.skipped if item.warned]

    def add_title(self, media_index: int, data: bytes) -> TitleDocument:
        title = TitleDocument(index=self.count + 1, media_index=media_index, data=data)
        self.titles.append(title)
        return title

    def skip(self, media_index: int, reason: SkipReason, error: str | None = None) -> SkippedItem:
        item = SkippedItem(media_index=media_index, reason=reason, error=error)
        self.skipped.append(item)
        return item
