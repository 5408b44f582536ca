"""
model.py

Internal data shapes used by the program.

This file defines: Conversation, ChatMessage, the ContentItem variants,
Attachment and Artifact.
It does NOT load JSON and it does NOT write output files.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass(frozen=True)
class TextItem:
    """
    A plain text block inside a message.

    - text: the text as written
    - citations: raw citation dicts (kept for future renderers)
    """

    text: str
    citations: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class ToolUseItem:
    """
    A tool call made by the assistant.

    - name: tool name, e.g. "artifacts"
    - input: the raw tool input payload
    """

    name: str
    input: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ToolResultItem:
    """
    The result of a tool call.

    - content: raw result content (string or list of result blocks)
    - is_error: True if the tool reported a failure
    """

    name: str
    content: Any = None
    is_error: bool = False


# Closed set of content item kinds. Anything else is dropped by the loader.
ContentItem = Union[TextItem, ToolUseItem, ToolResultItem]


@dataclass(frozen=True)
class Attachment:
    # Display-only file info; attachments are never written to disk.
    file_name: str
    file_type: str = ""
    file_size: int = 0


@dataclass(frozen=True)
class Artifact:
    """
    A code or document artifact pulled out of an "artifacts" tool call.

    - id: artifact id from the tool input
    - title: human-readable title (used for the output filename)
    - type: MIME type, e.g. "text/markdown" or "application/vnd.ant.code"
    - language: programming language for code artifacts
    - command: "create" or "update"
    - content: the artifact body
    """

    id: str = ""
    title: str = ""
    type: str = ""
    language: str = ""
    command: str = ""
    content: str = ""

    @classmethod
    def from_tool_input(cls, payload: Optional[Dict[str, Any]]) -> "Artifact":
        payload = payload or {}

        def pick(key: str) -> str:
            value = payload.get(key)
            return "" if value is None else str(value)

        return cls(
            id=pick("id"),
            title=pick("title"),
            type=pick("type"),
            language=pick("language"),
            command=pick("command"),
            content=pick("content"),
        )


@dataclass
class ChatMessage:
    """
    A single message in a conversation.

    - sender: "human" or "assistant" (other values are kept as-is)
    - created_at: ISO 8601 timestamp string ("" if missing)
    - text: the plain-text rendition the export stores next to `content`
    - content: ordered content items
    - attachments: files the user attached to this message
    """

    uuid: str
    sender: str
    created_at: str = ""
    text: str = ""
    content: List[ContentItem] = field(default_factory=list)
    attachments: List[Attachment] = field(default_factory=list)


@dataclass
class Conversation:
    """
    Represents a full conversation thread.

    - uuid/name/created_at/updated_at: from the export
    - messages: ordered chat messages (export field "chat_messages")
    """

    uuid: str
    name: str
    created_at: str
    updated_at: str
    messages: List[ChatMessage] = field(default_factory=list)

    @property
    def short_id(self) -> str:
        # First UUID segment; scopes artifact folders and filenames.
        return self.uuid.split("-")[0]
