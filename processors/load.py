"""
load.py

Stage: EXPORT FILE -> RAW RECORDS

Reads conversations.json into memory and checks the top-level shape.
Individual records are validated later by conversation.parse_conversation,
so one bad record never prevents the others from loading.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from .errors import InputFileError, ParseError

logger = logging.getLogger(__name__)


def load_export(input_path: Union[str, Path]) -> List[Any]:
    """
    Load the raw conversation records from an export file.

    Raises:
      InputFileError: the file is missing or unreadable
      ParseError: the content is not valid JSON, or not a JSON array
    """
    input_path = Path(input_path)

    try:
        raw_text = input_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"{input_path} is not UTF-8 encoded: {exc}") from exc
    except OSError as exc:
        raise InputFileError(f"Cannot read {input_path}: {exc.strerror or exc}") from exc

    try:
        raw_data = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"{input_path} is not valid JSON: {exc}") from exc

    if not isinstance(raw_data, list):
        raise ParseError("Expected the top-level JSON to be a list of conversations.")

    logger.debug("Loaded %d raw records from %s", len(raw_data), input_path)
    return raw_data
