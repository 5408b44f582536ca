"""
Settings for the Markdown renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

UNKNOWN_SENDER_POLICIES = ("drop", "render")


@dataclass(frozen=True)
class MarkdownConfig:
    # Heading used when a conversation has no name.
    default_title: str = "Claude Conversation"

    # Front matter "source" link; {uuid} is the full conversation uuid.
    source_url_template: str = "https://claude.ai/chat/{uuid}"

    # Front matter "author" entry (wiki-link style for note apps).
    author_tag: str = "[[Claude]]"

    # Front matter tags.
    tags: Tuple[str, ...] = ("claude conversation",)

    # Max length of a sanitized title before the uuid suffix is added.
    filename_max_len: int = 100

    # What to do with messages whose sender is not in sender_labels:
    # - "drop": leave them out of the Markdown body
    # - "render": label them with the capitalised sender name
    unknown_senders: str = "drop"

    # Bold label printed above each message, keyed by export sender value.
    sender_labels: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({"human": "Human", "assistant": "Claude"})
    )

    def __post_init__(self) -> None:
        if self.unknown_senders not in UNKNOWN_SENDER_POLICIES:
            raise ValueError(
                f"unknown_senders must be one of {UNKNOWN_SENDER_POLICIES}, "
                f"got {self.unknown_senders!r}"
            )
