"""
write.py

Stage: RENDERED CONVERSATION -> FILES ON DISK

Output layout:
  <output_dir>/<filename>.md
  <output_dir>/artifacts/<short_id>/<artifact title or artifact_N><ext>

Existing files with the same name are overwritten.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Sequence

from model import Artifact
from renderers.markdown.extract import sanitize_filename
from renderers.markdown.render import RenderedConversation

logger = logging.getLogger(__name__)


LANGUAGE_EXTENSIONS: Mapping[str, str] = MappingProxyType({
    "javascript": ".js",
    "typescript": ".ts",
    "python": ".py",
    "html": ".html",
    "css": ".css",
    "json": ".json",
    "yaml": ".yml",
    "dockerfile": ".dockerfile",
    "markdown": ".md",
    "sql": ".sql",
    "bash": ".sh",
    "powershell": ".ps1",
})

MIME_EXTENSIONS: Mapping[str, str] = MappingProxyType({
    "text/html": ".html",
    "text/markdown": ".md",
    "application/json": ".json",
    "image/svg+xml": ".svg",
})


@dataclass(frozen=True)
class ArtifactConfig:
    # Folder under the output directory that holds per-conversation artifacts.
    artifacts_dirname: str = "artifacts"

    # Lookup by artifact language (matched lower-cased).
    language_extensions: Mapping[str, str] = field(default_factory=lambda: LANGUAGE_EXTENSIONS)

    # Fallback lookup by artifact MIME type.
    mime_extensions: Mapping[str, str] = field(default_factory=lambda: MIME_EXTENSIONS)

    # Used when neither table matches.
    default_extension: str = ".txt"

    # Max length of a sanitized artifact title.
    filename_max_len: int = 100


def artifact_extension(artifact: Artifact, cfg: ArtifactConfig) -> str:
    """
    Pick a file extension for an artifact:
      1. language table (case-insensitive)
      2. MIME type table
      3. cfg.default_extension
    """
    if artifact.language:
        ext = cfg.language_extensions.get(artifact.language.lower())
        if ext:
            return ext
    if artifact.type:
        ext = cfg.mime_extensions.get(artifact.type)
        if ext:
            return ext
    return cfg.default_extension


def artifact_filename(artifact: Artifact, index: int, cfg: ArtifactConfig) -> str:
    # index is 1-based over all artifacts of the conversation.
    # A title that already ends in an extension still gets one appended.
    if artifact.title:
        base = sanitize_filename(artifact.title, cfg.filename_max_len)
    else:
        base = f"artifact_{index}"
    return f"{base}{artifact_extension(artifact, cfg)}"


def save_artifacts(
    artifacts: Sequence[Artifact],
    short_id: str,
    output_dir: Path,
    cfg: ArtifactConfig,
) -> List[Path]:
    """
    Write each artifact with content to <output_dir>/artifacts/<short_id>/.

    A failed write is logged and does not stop the remaining artifacts.
    Returns the paths that were written.
    """
    if not artifacts:
        return []

    artifacts_dir = Path(output_dir) / cfg.artifacts_dirname / short_id
    artifacts_dir.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for index, artifact in enumerate(artifacts, start=1):
        if not artifact.content:
            logger.debug("  Skipping empty artifact %d (%s)", index, artifact.title or artifact.id)
            continue

        filename = artifact_filename(artifact, index, cfg)
        path = artifacts_dir / filename

        try:
            path.write_text(artifact.content, encoding="utf-8", errors="replace")
        except (OSError, ValueError) as exc:
            logger.error("  ✗ Error saving artifact %s: %s", filename, exc)
            continue

        logger.info("  ✓ Saved artifact: %s", filename)
        written.append(path)

    return written


def write_conversation(
    rendered: RenderedConversation,
    short_id: str,
    output_dir: Path,
    cfg: ArtifactConfig,
) -> Path:
    """
    Write the Markdown document, then its artifacts.

    Returns the path of the Markdown file. An OSError or ValueError while
    writing the document itself propagates to the caller. Characters that
    cannot be encoded (lone surrogates) are written as "?".
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    md_path = output_dir / rendered.filename
    md_path.write_text(rendered.content, encoding="utf-8", errors="replace")
    logger.info("✓ Created: %s", rendered.filename)

    save_artifacts(rendered.artifacts, short_id, output_dir, cfg)
    return md_path
