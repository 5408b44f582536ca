"""
Formatting helpers for the Markdown renderer.

These turn raw export values (ISO timestamps, titles, byte sizes) into
display strings and safe filenames. Missing values produce "" instead of
raising.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Iterable, Optional

from model import Attachment

FORBIDDEN_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')
WHITESPACE_RUN = re.compile(r"\s+")
CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")

# Fractional seconds; fromisoformat before 3.11 only takes 3 or 6 digits.
FRACTION = re.compile(r"\.(\d+)(?=[+-]\d{2}:?\d{2}$|$)")

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def sanitize_filename(name: str, max_len: int = 100) -> str:
    # Forbidden Windows characters become "-", whitespace runs become "_".
    name = FORBIDDEN_FILENAME_CHARS.sub("-", name or "")
    name = WHITESPACE_RUN.sub("_", name)
    name = CONTROL_CHARS.sub("", name)
    return name[:max_len]


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an export timestamp like "2025-01-05T15:04:05.123456Z".

    Naive timestamps are taken to be UTC. Returns a UTC datetime, or None
    if the value is missing or not ISO 8601.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = FRACTION.sub(lambda m: "." + m.group(1).ljust(6, "0")[:6], text)
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_date_human(value: Optional[str]) -> str:
    """
    Convert an ISO timestamp to: "Jan 5, 2025, 3:04 PM" (UTC).

    Returns "" if missing/invalid.
    """
    dt = parse_timestamp(value)
    if dt is None:
        return ""
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{MONTHS[dt.month - 1]} {dt.day}, {dt.year}, {hour}:{dt.minute:02d} {meridiem}"


def date_part(value: str) -> str:
    # "2025-01-05T15:04:05Z" -> "2025-01-05", taken from the string as written.
    return value.split("T")[0]


def format_attachments(attachments: Iterable[Attachment]) -> str:
    lines = []
    for att in attachments:
        # Half-up rounding to whole KB.
        size_kb = int(att.file_size / 1024 + 0.5)
        lines.append(f"📎 {att.file_name} ({att.file_type}, {size_kb}KB)")
    return "\n".join(lines)


def quote_block(text: str) -> str:
    return "\n".join(f"> {line}" for line in text.split("\n"))
