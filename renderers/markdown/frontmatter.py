"""
YAML front matter for exported conversations.

Example output:

---
title: Building a Senior Developer GitHub Portfolio
source: https://claude.ai/chat/1ddfddbf-ec3f-47c6-8cee-3a60e7cdb0e4
author:
- '[[Claude]]'
published: 2025-04-27
created: 2025-06-02
description: ''
tags:
- claude conversation
---
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict

import yaml

from model import Conversation
from .config import MarkdownConfig

# Keep long titles on one line.
YAML_LINE_WIDTH = 4096


def front_matter_fields(
    conversation: Conversation,
    published: date,
    today: date,
    cfg: MarkdownConfig,
) -> Dict[str, Any]:
    title = conversation.name if conversation.name.strip() else ""
    return {
        "title": title,
        "source": cfg.source_url_template.format(uuid=conversation.uuid),
        "author": [cfg.author_tag],
        "published": published,
        "created": today,
        "description": "",
        "tags": list(cfg.tags),
    }


def build_front_matter(
    conversation: Conversation,
    published: date,
    today: date,
    cfg: MarkdownConfig,
) -> str:
    """
    Render the front matter block, including both "---" fences and a
    trailing blank line.

    Values go through yaml.safe_dump, so quotes, colons and other special
    characters in titles are escaped.
    """
    body = yaml.safe_dump(
        front_matter_fields(conversation, published, today, cfg),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=YAML_LINE_WIDTH,
    )
    return f"---\n{body}---\n\n"
