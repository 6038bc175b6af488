"""Generic XML element tree."""

from __future__ import annotations

from xml.etree import ElementTree as ET

from pydantic import BaseModel, Field


class Element(BaseModel):
    """An XML element with its attributes, text and ordered children.

    Sibling elements may share the same tag; document order is kept.
    """

    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    text: str | None = None
    children: list[Element] = Field(default_factory=list)

    @classmethod
    def from_etree(cls, node: ET.Element) -> Element:
        """Convert an ElementTree node (and its subtree) into an Element."""
        return cls(
            tag=node.tag,
            attributes=dict(node.attrib),
            text=node.text,
            children=[cls.from_etree(child) for child in node],
        )

    def attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def child(self, tag: str) -> Element | None:
        """Return the first child with the given tag, if any."""
        for element in self.children:
            if element.tag == tag:
                return element
        return None

    def children_named(self, tag: str) -> list[Element]:
        return [element for element in self.children if element.tag == tag]


Element.model_rebuild()
