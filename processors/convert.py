"""
convert.py

Processing pipeline entry point.

Goal:
- Load a Claude export JSON file (conversations.json)
- For each conversation:
    - parse it into the typed model (processors.conversation)
    - render it to Markdown + collect artifacts (renderers.markdown)
    - write the document and its artifacts (processors.write)
- Keep going when one conversation is malformed; report succeeded/total.

Conversations are processed one at a time, in export order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional, Union

from renderers.markdown import MarkdownConfig, render_conversation
from .conversation import parse_conversation
from .errors import ConversionError
from .load import load_export
from .write import ArtifactConfig, write_conversation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConvertSummary:
    succeeded: int
    total: int
    output_dir: Path

    @property
    def line(self) -> str:
        return f"{self.succeeded}/{self.total} conversations converted."


def convert_file(
    input_path: Union[str, Path],
    output_dir: Union[str, Path],
    markdown_cfg: Optional[MarkdownConfig] = None,
    artifact_cfg: Optional[ArtifactConfig] = None,
    today: Optional[date] = None,
) -> ConvertSummary:
    """
    Convert every conversation in an export file to Markdown files.

    Raises InputFileError / ParseError if the export itself cannot be
    loaded. Per-conversation failures are logged and counted instead.
    """
    markdown_cfg = markdown_cfg or MarkdownConfig()
    artifact_cfg = artifact_cfg or ArtifactConfig()
    output_dir = Path(output_dir)

    records = load_export(input_path)
    output_dir.mkdir(parents=True, exist_ok=True)

    logger.info("Processing %d conversations...", len(records))

    succeeded = 0
    for index, raw_convo in enumerate(records, start=1):
        try:
            convo = parse_conversation(raw_convo)
            rendered = render_conversation(convo, markdown_cfg, today=today)
            write_conversation(rendered, convo.short_id, output_dir, artifact_cfg)
        except (ConversionError, OSError, ValueError) as exc:
            logger.error("✗ Error processing conversation %d: %s", index, exc)
            continue
        succeeded += 1

    return ConvertSummary(succeeded=succeeded, total=len(records), output_dir=output_dir)
