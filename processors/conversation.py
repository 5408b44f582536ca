from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from model import (
    Attachment,
    ChatMessage,
    ContentItem,
    Conversation,
    TextItem,
    ToolResultItem,
    ToolUseItem,
)
from .errors import ConversionError

logger = logging.getLogger(__name__)


def safe_str(value: Any) -> str:
    # Converts any value to a string; None becomes "".
    return "" if value is None else str(value)


def _require_str(raw: Dict[str, Any], key: str, where: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str):
        raise ConversionError(f"{where}: missing or invalid '{key}'")
    return value


def _optional_list(raw: Dict[str, Any], key: str, where: str) -> List[Any]:
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConversionError(f"{where}: '{key}' must be a list")
    return value


def parse_content_item(raw: Any, where: str) -> Optional[ContentItem]:
    """
    Convert one raw content dict into its typed variant.

    Returns None for item types this converter does not know about
    (e.g. "thinking" blocks in newer exports).
    """
    if not isinstance(raw, dict):
        raise ConversionError(f"{where}: content item must be an object")

    item_type = raw.get("type")

    if item_type == "text":
        citations = raw.get("citations") or []
        if not isinstance(citations, list):
            raise ConversionError(f"{where}: 'citations' must be a list")
        return TextItem(
            text=safe_str(raw.get("text")),
            citations=[c for c in citations if isinstance(c, dict)],
        )

    if item_type == "tool_use":
        payload = raw.get("input")
        return ToolUseItem(
            name=safe_str(raw.get("name")),
            input=payload if isinstance(payload, dict) else {},
        )

    if item_type == "tool_result":
        return ToolResultItem(
            name=safe_str(raw.get("name")),
            content=raw.get("content"),
            is_error=bool(raw.get("is_error")),
        )

    logger.debug("%s: skipping content item of type %r", where, item_type)
    return None


def parse_attachment(raw: Any, where: str) -> Attachment:
    if not isinstance(raw, dict):
        raise ConversionError(f"{where}: attachment must be an object")

    size = raw.get("file_size") or 0
    try:
        file_size = int(size)
    except (TypeError, ValueError):
        raise ConversionError(f"{where}: invalid file_size {size!r}") from None

    return Attachment(
        file_name=safe_str(raw.get("file_name")),
        file_type=safe_str(raw.get("file_type")),
        file_size=file_size,
    )


def parse_message(raw: Any, position: int) -> ChatMessage:
    where = f"message {position}"
    if not isinstance(raw, dict):
        raise ConversionError(f"{where}: must be an object")

    content: List[ContentItem] = []
    for item_raw in _optional_list(raw, "content", where):
        item = parse_content_item(item_raw, where)
        if item is not None:
            content.append(item)

    attachments = [
        parse_attachment(a, where) for a in _optional_list(raw, "attachments", where)
    ]

    return ChatMessage(
        uuid=safe_str(raw.get("uuid")),
        sender=safe_str(raw.get("sender")),
        created_at=safe_str(raw.get("created_at")),
        text=safe_str(raw.get("text")),
        content=content,
        attachments=attachments,
    )


def parse_conversation(raw: Any) -> Conversation:
    """
    Parse one raw conversation record from the export into our model.

    Required: uuid, created_at, updated_at (strings) and chat_messages (list).
    A missing name is treated as an empty title.

    Raises ConversionError when the record does not have that shape.
    """
    if not isinstance(raw, dict):
        raise ConversionError("conversation record must be an object")

    where = "conversation"
    uuid = _require_str(raw, "uuid", where)
    created_at = _require_str(raw, "created_at", where)
    updated_at = _require_str(raw, "updated_at", where)

    raw_messages = raw.get("chat_messages")
    if not isinstance(raw_messages, list):
        raise ConversionError(f"{where} {uuid}: missing or invalid 'chat_messages'")

    return Conversation(
        uuid=uuid,
        name=safe_str(raw.get("name")),
        created_at=created_at,
        updated_at=updated_at,
        messages=[parse_message(m, i) for i, m in enumerate(raw_messages, start=1)],
    )
