"""Output formatters for prtitles."""

from .default import format_default
from .json import format_json, to_dict
from .quiet import format_quiet

__all__ = [
    "format_default",
    "format_json",
    "format_quiet",
    "to_dict",
]
