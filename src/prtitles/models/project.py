"""Premiere Pro project document models."""

from __future__ import annotations

from pydantic import BaseModel

from .element import Element

PROJECT_ROOT_TAG = "PremiereData"
MEDIA_TAG = "Media"
IMPORTER_PREFS_TAG = "ImporterPrefs"
ENCODING_ATTRIBUTE = "Encoding"


class ImporterPrefs(BaseModel):
    """Importer settings attached to a media entry.

    Many importers store unrelated settings here; only some of the
    base64-encoded ones hold a compressed title.
    """

    encoding: str | None = None
    text: str | None = None

    @classmethod
    def from_element(cls, element: Element) -> ImporterPrefs:
        return cls(encoding=element.attribute(ENCODING_ATTRIBUTE), text=element.text)

    @property
    def has_payload(self) -> bool:
        return bool(self.text and self.text.strip())

    def is_candidate(self, encoding: str = "base64") -> bool:
        """Check if the node may carry an encoded payload.

        The encoding comparison is case-sensitive.
        """
        return self.encoding == encoding and self.has_payload


class MediaEntry(BaseModel):
    """One item of the project's media list."""

    index: int
    element: Element

    @property
    def importer_prefs(self) -> ImporterPrefs | None:
        node = self.element.child(IMPORTER_PREFS_TAG)
        if node is None:
            return None
        return ImporterPrefs.from_element(node)


class ProjectDocument(BaseModel):
    """Parsed project file.

    Only built by the parser once the root element has been validated.
    """

    root: Element

    @property
    def media_entries(self) -> list[MediaEntry]:
        """Media entries in document order, numbered from 1."""
        return [
            MediaEntry(index=i, element=element)
            for i, element in enumerate(self.root.children_named(MEDIA_TAG), start=1)
        ]
