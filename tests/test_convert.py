"""End-to-end tests for the conversion pipeline and the CLI."""
import logging
import sys

import pytest

import convert
from processors.convert import convert_file
from processors.errors import InputFileError, ParseError


def read_tree(root):
    """Map relative path -> file content for every file under root."""
    return {
        str(p.relative_to(root)): p.read_text(encoding="utf-8")
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


class TestConvertFile:
    """Tests for convert_file."""

    def test_sample_export(self, sample_export_path, tmp_path, today):
        out = tmp_path / "out"

        summary = convert_file(sample_export_path, out, today=today)

        assert summary.line == "2/2 conversations converted."
        assert sorted(read_tree(out)) == [
            "Python_helper_5f2e9c1b.md",
            "Test_Chat_abcd1234.md",
            "artifacts/5f2e9c1b/script.py.py",
        ]

        chat = (out / "Test_Chat_abcd1234.md").read_text(encoding="utf-8")
        assert "**Human** (Jan 5, 2025, 3:04 PM):\n\n> Hello\n\n---\n\n**Claude**" in chat
        assert chat.endswith("Hi there\n\n")

        helper = (out / "Python_helper_5f2e9c1b.md").read_text(encoding="utf-8")
        assert "📎 notes.txt (text/plain, 2KB)" in helper
        assert "Here you go:\n\n[Artifact: script.py]\nRun it with python." in helper

    def test_artifact_round_trip(self, write_export, make_record, make_message, artifact_item, tmp_path):
        items = [
            artifact_item(title="index", language="html", content="<h1>hi</h1>", id="a1"),
            artifact_item(title="", language="", type="text/markdown", content="# Doc", id="a2"),
            artifact_item(title="empty", content="", id="a3"),
        ]
        export = write_export([make_record(messages=[make_message(sender="assistant", content=items)])])
        out = tmp_path / "out"

        convert_file(export, out)

        files = {k: v for k, v in read_tree(out).items() if k.startswith("artifacts/")}
        assert files == {
            "artifacts/abcd1234/index.html": "<h1>hi</h1>",
            "artifacts/abcd1234/artifact_2.md": "# Doc",
        }

    def test_malformed_conversation_is_skipped(
        self, write_export, make_record, make_message, tmp_path, caplog
    ):
        broken = make_record(uuid="bbbbbbbb-0000-4000-8000-000000000000", name="Broken")
        del broken["chat_messages"]
        export = write_export([
            make_record(uuid="aaaaaaaa-0000-4000-8000-000000000000", name="First",
                        messages=[make_message(text="one")]),
            broken,
            make_record(uuid="cccccccc-0000-4000-8000-000000000000", name="Third",
                        messages=[make_message(text="three")]),
        ])
        out = tmp_path / "out"

        with caplog.at_level(logging.INFO):
            summary = convert_file(export, out)

        assert (summary.succeeded, summary.total) == (2, 3)
        assert summary.line == "2/3 conversations converted."
        assert (out / "First_aaaaaaaa.md").exists()
        assert (out / "Third_cccccccc.md").exists()
        assert not (out / "Broken_bbbbbbbb.md").exists()
        assert "Error processing conversation 2" in caplog.text
        assert "Processing 3 conversations..." in caplog.text

    def test_nul_in_name_is_stripped_from_filename(self, write_export, make_record, make_message, tmp_path):
        export = write_export([
            make_record(uuid="aaaaaaaa-0000-4000-8000-000000000000", name="bad\x00name",
                        messages=[make_message(text="one")]),
            make_record(uuid="cccccccc-0000-4000-8000-000000000000", name="Fine",
                        messages=[make_message(text="two")]),
        ])
        out = tmp_path / "out"

        summary = convert_file(export, out)

        assert summary.line == "2/2 conversations converted."
        assert (out / "badname_aaaaaaaa.md").exists()
        assert (out / "Fine_cccccccc.md").exists()

    def test_lone_surrogate_in_text_is_written(self, write_export, make_record, make_message, tmp_path):
        export = write_export([
            make_record(messages=[make_message(text="hi \ud800 there")]),
        ])
        out = tmp_path / "out"

        summary = convert_file(export, out)

        assert summary.line == "1/1 conversations converted."
        assert "> hi ? there" in (out / "Test_Chat_abcd1234.md").read_text(encoding="utf-8")

    def test_bad_citations_skip_only_that_conversation(
        self, write_export, make_record, make_message, tmp_path, caplog
    ):
        export = write_export([
            make_record(uuid="aaaaaaaa-0000-4000-8000-000000000000", name="Broken",
                        messages=[make_message(content=[{"type": "text", "text": "x", "citations": 5}])]),
            make_record(uuid="cccccccc-0000-4000-8000-000000000000", name="Fine",
                        messages=[make_message(text="two")]),
        ])
        out = tmp_path / "out"

        with caplog.at_level(logging.INFO):
            summary = convert_file(export, out)

        assert summary.line == "1/2 conversations converted."
        assert (out / "Fine_cccccccc.md").exists()
        assert "Error processing conversation 1" in caplog.text

    def test_rerun_is_idempotent(self, sample_export_path, tmp_path, today):
        out = tmp_path / "out"

        convert_file(sample_export_path, out, today=today)
        first = read_tree(out)
        convert_file(sample_export_path, out, today=today)

        assert read_tree(out) == first

    def test_creates_output_dir_for_empty_export(self, write_export, tmp_path):
        out = tmp_path / "a" / "b"
        summary = convert_file(write_export([]), out)
        assert out.is_dir()
        assert summary.line == "0/0 conversations converted."

    def test_fatal_errors_propagate(self, tmp_path):
        with pytest.raises(InputFileError):
            convert_file(tmp_path / "missing.json", tmp_path / "out")

        bad = tmp_path / "bad.json"
        bad.write_text("nope", encoding="utf-8")
        with pytest.raises(ParseError):
            convert_file(bad, tmp_path / "out")


class TestCli:
    """Tests for convert.main."""

    def test_no_arguments_prints_usage(self, capsys):
        with pytest.raises(SystemExit) as exc:
            convert.main([])
        assert exc.value.code == 1
        out = capsys.readouterr().out
        assert "usage:" in out
        assert "Example:" in out

    def test_missing_input_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            convert.main([str(tmp_path / "missing.json")])
        assert "not found" in str(exc.value.code)

    def test_unparseable_input(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            convert.main([str(bad), str(tmp_path / "out")])
        assert "Error processing export file" in str(exc.value.code)

    def test_successful_run(self, sample_export_path, tmp_path, capsys):
        out = tmp_path / "out"

        convert.main([str(sample_export_path), str(out)])

        printed = capsys.readouterr().out
        assert "Completed! 2/2 conversations converted." in printed
        assert f"Files saved to: {out.resolve()}" in printed
        assert (out / "Test_Chat_abcd1234.md").exists()

    def test_unknown_senders_flag(self, write_export, make_record, make_message, tmp_path):
        export = write_export([make_record(messages=[make_message(sender="system", text="Be nice")])])
        out = tmp_path / "out"

        convert.main([str(export), str(out), "--unknown-senders", "render"])

        assert "**System**" in (out / "Test_Chat_abcd1234.md").read_text(encoding="utf-8")

    def test_progress_lines_go_to_stdout(self, sample_export_path, tmp_path, monkeypatch):
        calls = []
        monkeypatch.setattr(convert.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        convert.main([str(sample_export_path), str(tmp_path / "out")])

        assert calls[0]["stream"] is sys.stdout

    def test_default_output_dir(self, sample_export_path, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        convert.main([str(sample_export_path)])
        assert (tmp_path / "conversations" / "Test_Chat_abcd1234.md").exists()
