"""Tests for the shared workflow layer."""

from unittest.mock import MagicMock

import pytest

from patternbook.config import Config
from patternbook.workflows import (
    build_html,
    run_builder_demo,
    run_journal_demo,
    write_journal,
)


@pytest.fixture
def config(tmp_path):
    return Config(journal_title="Test Journal", journal_file=str(tmp_path / "out" / "journal.txt"))


class TestWriteJournal:
    def test_saves_to_configured_file(self, tmp_path):
        config = Config(journal_file=str(tmp_path / "j.txt"))

        journal = write_journal(config, ["a", "b"])

        assert journal.title == "My Journal"
        assert (tmp_path / "j.txt").read_text() == "1: a\n2: b\n"

    def test_title_and_destination_override(self, config, tmp_path):
        dest = tmp_path / "other.txt"

        journal = write_journal(config, ["x"], title="Override", destination=dest)

        assert journal.title == "Override"
        assert dest.read_text() == "1: x\n"

    def test_uses_injected_store(self, config, tmp_path):
        store = MagicMock()
        dest = tmp_path / "j.txt"

        journal = write_journal(config, ["x"], destination=dest, store=store)

        store.save.assert_called_once_with(journal, dest)
        assert not dest.exists()

    def test_propagates_write_errors(self, config):
        store = MagicMock()
        store.save.side_effect = PermissionError("denied")

        with pytest.raises(PermissionError, match="denied"):
            write_journal(config, ["x"], store=store)

    def test_empty_title_is_kept(self, config):
        journal = write_journal(config, ["x"], title="")
        assert journal.title == ""

    def test_creates_missing_default_directory(self, tmp_path):
        config = Config(journal_file=str(tmp_path / "a" / "b" / "journal.txt"))

        write_journal(config, ["x"])

        assert (tmp_path / "a" / "b" / "journal.txt").read_text() == "1: x\n"

    def test_explicit_destination_directory_not_created(self, config, tmp_path):
        with pytest.raises(OSError):
            write_journal(config, ["x"], destination=tmp_path / "missing" / "j.txt")
        assert not (tmp_path / "missing").exists()


class TestRunJournalDemo:
    def test_writes_demo_entries(self, config):
        path = run_journal_demo(config)

        assert path == config.journal_path
        assert path.read_text().splitlines() == ["1: I cried today.", "2: I ate a bug."]


class TestBuildHtml:
    def test_serializes_children(self):
        out = build_html("ul", [("li", "Hello"), ("li", "World")])
        assert out == "<ul>\n  <li>\n    Hello\n  </li>\n  <li>\n    World\n  </li>\n</ul>\n"

    def test_no_children(self):
        assert build_html("div", []) == "<div>\n</div>\n"


class TestRunBuilderDemo:
    def test_has_three_approaches_in_order(self):
        out = run_builder_demo()
        first = out.index("=== Approach 1: Traditional Builder ===")
        second = out.index("=== Approach 2: Fluent Interface ===")
        third = out.index("=== Approach 3: Static Factory + Fluent ===")
        assert first < second < third

    def test_renders_each_tree(self):
        out = run_builder_demo()
        for text in ["Hello", "World", "hello", "world", "First", "Second"]:
            assert f"    {text}\n" in out
        assert out.count("<ul>") == 3
        assert out.count("</ul>") == 3
