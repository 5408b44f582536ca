"""
Markdown Renderer (Obsidian-style notes)

Public API:
- MarkdownConfig
- RenderedConversation
- render_conversation
"""

from .config import MarkdownConfig
from .render import RenderedConversation, render_conversation

__all__ = ["MarkdownConfig", "RenderedConversation", "render_conversation"]
