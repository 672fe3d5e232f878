"""
inliner — jednoprzebiegowe wstawianie lokalnych nagłówków #include "...".

Użycie:
  from inliner import Inliner, inline_file

Moduły:
  types  — LineKind, IncludeStatus, Side, IncludeRecord, InlineReport,
           FileOpenError
  engine — Inliner, inline_file, split_lines, extract_include_path,
           classify, error_marker, read_text
"""

from .types import (
    Document,
    LineKind,
    IncludeStatus,
    Side,
    FileOpenError,
    IncludeRecord,
    InlineReport,
)
from .engine import (
    INCLUDE_MARKER,
    Inliner,
    inline_file,
    split_lines,
    extract_include_path,
    classify,
    error_marker,
    read_text,
)

__all__ = [
    # types
    "Document",
    "LineKind",
    "IncludeStatus",
    "Side",
    "FileOpenError",
    "IncludeRecord",
    "InlineReport",
    # engine
    "INCLUDE_MARKER",
    "Inliner",
    "inline_file",
    "split_lines",
    "extract_include_path",
    "classify",
    "error_marker",
    "read_text",
]
