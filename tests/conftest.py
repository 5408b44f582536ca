"""Pytest configuration and shared fixtures."""
import json
from datetime import date
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def sample_export_path():
    """Return the bundled sample export."""
    return Path(__file__).parent.parent / "examples" / "conversations_sample.json"


@pytest.fixture
def today():
    """Fixed 'created' date so rendered documents are deterministic."""
    return date(2025, 6, 2)


@pytest.fixture
def make_message():
    """Build a raw chat message dict in export shape."""
    def _make(sender="human", text="", content=None, attachments=None,
              created_at="2025-01-05T15:04:05.000000Z", uuid="msg-1"):
        if content is None:
            content = [{"type": "text", "text": text, "citations": []}] if text else []
        return {
            "uuid": uuid,
            "text": text,
            "content": content,
            "sender": sender,
            "created_at": created_at,
            "updated_at": created_at,
            "attachments": attachments or [],
            "files": [],
        }
    return _make


@pytest.fixture
def make_record():
    """Build a raw conversation dict in export shape."""
    def _make(messages=None, name="Test Chat",
              uuid="abcd1234-5678-4def-9abc-0123456789ab",
              created_at="2025-01-05T15:04:05.000000Z",
              updated_at="2025-01-05T15:10:00.000000Z"):
        return {
            "uuid": uuid,
            "name": name,
            "created_at": created_at,
            "updated_at": updated_at,
            "account": {"uuid": "00000000-0000-4000-8000-000000000000"},
            "chat_messages": messages if messages is not None else [],
        }
    return _make


@pytest.fixture
def artifact_item():
    """Build a raw 'artifacts' tool_use content item."""
    def _make(title="script.py", content="print(1)", language="python",
              type="application/vnd.ant.code", id="artifact-1", command="create"):
        return {
            "type": "tool_use",
            "name": "artifacts",
            "input": {
                "id": id,
                "type": type,
                "title": title,
                "command": command,
                "content": content,
                "language": language,
            },
        }
    return _make


@pytest.fixture
def write_export(tmp_path):
    """Write a list of raw records to an export file and return its path."""
    def _write(records, name="conversations.json"):
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path
    return _write
