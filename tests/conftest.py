"""Pytest configuration and fixtures."""

import base64
import zlib

import pytest

from prtitles import config

TITLE_XML = b'<?xml version="1.0" encoding="UTF-8"?>\n<Title><Text>Opening credits</Text></Title>'


def build_header(marker: bytes = b"CompressedTitle", size: int = 32) -> bytes:
    """Build a fixed-size header mentioning the marker."""
    header = b"\x00\x01" + marker
    return header.ljust(size, b"\x00")[:size]


def build_blob(title: bytes = TITLE_XML, marker: bytes = b"CompressedTitle") -> str:
    """Build the base64 text of a title payload."""
    raw = build_header(marker) + zlib.compress(title)
    return base64.b64encode(raw).decode("ascii")


def build_project(*media: str, root: str = "PremiereData") -> bytes:
    """Build a project document from <Media> inner XML snippets."""
    body = "".join(f"<Media>{m}</Media>" for m in media)
    return f'<?xml version="1.0" encoding="UTF-8"?>\n<{root} Version="3">{body}</{root}>'.encode()


def prefs(text: str, encoding: str | None = "base64") -> str:
    """Build an <ImporterPrefs> node."""
    attr = f' Encoding="{encoding}"' if encoding is not None else ""
    return f"<ImporterPrefs{attr}>{text}</ImporterPrefs>"


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep user config files and PRTITLES_* variables out of tests."""
    monkeypatch.setattr(config, "CONFIG_LOCATIONS", [])
    for key in ("PROJECT_ROOT", "TITLE_MARKER", "HEADER_SIZE", "ENCODING", "OUTPUT_DIR"):
        monkeypatch.delenv(f"PRTITLES_{key}", raising=False)
    config.reset_config()
    yield
    config.reset_config()


@pytest.fixture
def title_blob() -> str:
    """Base64 text of a valid title payload."""
    return build_blob()


@pytest.fixture
def corrupt_blob() -> str:
    """Base64 text with a title header but a broken zlib body."""
    raw = build_header() + b"this is not a zlib stream"
    return base64.b64encode(raw).decode("ascii")


@pytest.fixture
def project_file(tmp_path, title_blob):
    """A project file with two titles."""
    path = tmp_path / "edit.prproj"
    path.write_bytes(build_project(prefs(title_blob), prefs(build_blob(b"<Title>2</Title>"))))
    return path
