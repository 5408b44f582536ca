"""
errors.py

Exceptions raised by the processing pipeline.

- InputFileError and ParseError are fatal: the whole run stops.
- ConversionError only affects one conversation; the pipeline logs it and
  moves on to the next record.
"""

from __future__ import annotations


class ExportError(Exception):
    """Base class for everything the converter raises on purpose."""


class InputFileError(ExportError):
    """The export file is missing or could not be read."""


class ParseError(ExportError):
    """The export file is not a JSON array of conversations."""


class ConversionError(ExportError):
    """A single conversation record is malformed."""
