"""Errors and warnings raised while extracting titles."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Why a project or one of its entries could not be processed."""

    LOAD_FAILED = "load_failed"
    NOT_A_PROJECT = "not_a_project"
    BAD_ENCODING = "bad_encoding"
    NO_TITLES_FOUND = "no_titles_found"
    BAD_CONFIG = "bad_config"


class PrtitlesError(Exception):
    """Base class for terminal prtitles errors."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class DocumentError(PrtitlesError):
    """The project file cannot be loaded or is not a Premiere Pro project."""

    @classmethod
    def load_failed(cls) -> DocumentError:
        return cls("Cannot load project file", ErrorKind.LOAD_FAILED)

    @classmethod
    def not_a_project(cls) -> DocumentError:
        return cls("Invalid Premiere Pro project file", ErrorKind.NOT_A_PROJECT)


class NoTitlesFoundError(PrtitlesError):
    """Extraction finished without a single title."""

    def __init__(self, message: str = "There is no title in this Premiere Pro project") -> None:
        super().__init__(message, ErrorKind.NO_TITLES_FOUND)


class ConfigError(PrtitlesError):
    """A configuration value is missing its expected shape or range."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.BAD_CONFIG)


class TitleFormatWarning(UserWarning):
    """A title candidate had unexpected data and was skipped."""

    kind = ErrorKind.BAD_ENCODING
