"""
Markdown rendering for one conversation.

Produces a document laid out as:
- YAML front matter
- a header block (title, created/updated dates, conversation id)
- one block per message, separated by "---" rules
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import List, Optional

from model import Artifact, ChatMessage, Conversation
from processors.content import extract_message_content
from processors.errors import ConversionError
from .config import MarkdownConfig
from .extract import (
    date_part,
    format_attachments,
    format_date_human,
    parse_timestamp,
    quote_block,
    sanitize_filename,
)
from .frontmatter import build_front_matter

MESSAGE_SEPARATOR = "---\n\n"


@dataclass
class RenderedConversation:
    # Output of the converter stage for one conversation.
    filename: str
    content: str
    artifacts: List[Artifact] = field(default_factory=list)


def conversation_filename(conversation: Conversation, cfg: MarkdownConfig) -> str:
    """
    "<sanitized name>_<short id>.md", or "conversation_<date>_<short id>.md"
    when the conversation has no name.
    """
    if conversation.name.strip():
        base = sanitize_filename(conversation.name, cfg.filename_max_len)
    else:
        base = f"conversation_{date_part(conversation.created_at)}"
    return f"{base}_{conversation.short_id}.md"


def sender_label(sender: str, cfg: MarkdownConfig) -> Optional[str]:
    # None means "do not render this message".
    label = cfg.sender_labels.get(sender)
    if label is not None:
        return label
    if cfg.unknown_senders == "render":
        return sender.capitalize() or "Unknown"
    return None


def render_message(message: ChatMessage, text: str, cfg: MarkdownConfig) -> Optional[str]:
    """
    Render one message block, or return None if the message is skipped
    (nothing to show, or an unknown sender under the "drop" policy).
    """
    attachment_info = format_attachments(message.attachments)
    if not text.strip() and not attachment_info:
        return None

    label = sender_label(message.sender, cfg)
    if label is None:
        return None

    when = format_date_human(message.created_at)
    block = f"**{label}** ({when}):\n\n" if when else f"**{label}**:\n\n"

    if attachment_info:
        block += f"{attachment_info}\n\n"

    if text.strip():
        # User prompts are shown as block quotes; everything else verbatim.
        body = quote_block(text) if message.sender == "human" else text
        block += f"{body}\n\n"

    return block


def render_header(conversation: Conversation, cfg: MarkdownConfig) -> str:
    title = conversation.name if conversation.name.strip() else cfg.default_title
    return (
        f"# {title}\n\n"
        f"**Created:** {format_date_human(conversation.created_at)}  \n"
        f"**Updated:** {format_date_human(conversation.updated_at)}  \n"
        f"**ID:** {conversation.uuid}\n\n"
        f"{MESSAGE_SEPARATOR}"
    )


def render_conversation(
    conversation: Conversation,
    cfg: Optional[MarkdownConfig] = None,
    today: Optional[date] = None,
) -> RenderedConversation:
    """
    Convert a Conversation into Markdown text plus its extracted artifacts.

    today:
      - the front matter "created" date; defaults to the current UTC date

    Raises ConversionError if created_at is not ISO 8601 (it feeds the
    "published" date). A bad updated_at only leaves the header value empty.
    """
    cfg = cfg or MarkdownConfig()

    created = parse_timestamp(conversation.created_at)
    if created is None:
        raise ConversionError(f"invalid created_at {conversation.created_at!r}")

    if today is None:
        today = datetime.now(timezone.utc).date()

    blocks: List[str] = []
    artifacts: List[Artifact] = []

    for message in conversation.messages:
        text, found = extract_message_content(message)
        # Artifacts are kept even when the message itself is not rendered.
        artifacts.extend(found)

        block = render_message(message, text, cfg)
        if block is not None:
            blocks.append(block)

    content = (
        build_front_matter(conversation, created.date(), today, cfg)
        + render_header(conversation, cfg)
        + MESSAGE_SEPARATOR.join(blocks)
    )

    return RenderedConversation(
        filename=conversation_filename(conversation, cfg),
        content=content,
        artifacts=artifacts,
    )
