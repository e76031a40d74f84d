"""Strings escaping, models and Apple .strings export."""

from .escape import StringLiteralEscaper, escape
from .exporter import AppleStringsExporter
from .models import StringEntry
from .parser import StringsParser

__all__ = [
    "AppleStringsExporter",
    "StringEntry",
    "StringLiteralEscaper",
    "StringsParser",
    "escape",
]
