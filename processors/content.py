from __future__ import annotations

from typing import List, Tuple

from model import Artifact, ChatMessage, TextItem, ToolUseItem

ARTIFACTS_TOOL = "artifacts"


def extract_message_content(message: ChatMessage) -> Tuple[str, List[Artifact]]:
    """
    Convert a message's content items into readable text plus artifacts.

    - text items are appended in order, one per line
    - an "artifacts" tool call adds an "[Artifact: <title or id>]" marker
      line and yields an Artifact
    - other tool calls and tool results add nothing

    If no text came out of the content items, the message's plain `text`
    field is used instead.
    """
    text = ""
    artifacts: List[Artifact] = []

    for item in message.content:
        if isinstance(item, TextItem):
            text += item.text + "\n"
        elif isinstance(item, ToolUseItem) and item.name == ARTIFACTS_TOOL:
            artifact = Artifact.from_tool_input(item.input)
            artifacts.append(artifact)
            text += f"\n[Artifact: {artifact.title or artifact.id}]\n"

    if not text.strip():
        text = message.text or ""

    return text.strip(), artifacts
