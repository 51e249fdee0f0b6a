"""Unit tests for candidate file discovery."""

import io

import pytest

from localelint.config import DiscoveryConfig
from localelint.discovery import discover_candidates, read_candidate, read_changed_files


@pytest.fixture
def locale_tree(tmp_path):
    """Create a small repository layout with locale files."""
    (tmp_path / "locales").mkdir()
    (tmp_path / "locales" / "en.json").write_text("{}", encoding="utf-8")
    (tmp_path / "locales" / "de.json").write_text("{}", encoding="utf-8")
    (tmp_path / "locales" / "README.md").write_text("docs", encoding="utf-8")
    (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
    (tmp_path / "node_modules" / "pkg" / "package.json").write_text("{}", encoding="utf-8")
    (tmp_path / "top.json").write_text("{}", encoding="utf-8")
    return tmp_path


class TestDiscoverCandidates:
    """Test discover_candidates."""

    def test_directory_walk_is_sorted_and_filtered(self, locale_tree):
        candidates = discover_candidates([locale_tree])

        assert candidates == [
            str(locale_tree / "locales" / "de.json"),
            str(locale_tree / "locales" / "en.json"),
            str(locale_tree / "top.json"),
        ]

    def test_explicit_files_keep_input_order(self, locale_tree):
        en = str(locale_tree / "locales" / "en.json")
        de = str(locale_tree / "locales" / "de.json")

        assert discover_candidates([en, de]) == [en, de]

    def test_non_json_files_dropped(self, locale_tree):
        readme = str(locale_tree / "locales" / "README.md")
        assert discover_candidates([readme]) == []

    def test_missing_json_file_kept(self, tmp_path):
        missing = str(tmp_path / "gone.json")
        assert discover_candidates([missing]) == [missing]

    def test_duplicates_dropped(self, locale_tree):
        en = str(locale_tree / "locales" / "en.json")
        candidates = discover_candidates([en, locale_tree / "locales", en])

        assert candidates == [en, str(locale_tree / "locales" / "de.json")]

    def test_custom_patterns(self, locale_tree):
        config = DiscoveryConfig(include=["locales/*.json"], exclude=["locales/de.json"])
        candidates = discover_candidates([locale_tree], config)

        assert candidates == [str(locale_tree / "locales" / "en.json")]

    def test_empty_input(self):
        assert discover_candidates([]) == []


class TestReadChangedFiles:
    """Test read_changed_files."""

    def test_from_file(self, tmp_path):
        listing = tmp_path / "changed.txt"
        listing.write_text("locales/en.json\n\n  locales/de.json  \nREADME.md\n", encoding="utf-8")

        assert read_changed_files(listing) == ["locales/en.json", "locales/de.json", "README.md"]

    def test_from_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("a.json\nb.json\n"))
        assert read_changed_files("-") == ["a.json", "b.json"]


class TestReadCandidate:
    """Test read_candidate."""

    def test_read_bytes(self, tmp_path):
        path = tmp_path / "en.json"
        path.write_bytes(b'{"a": "b"}')

        candidate = read_candidate(str(path))
        assert candidate.content == b'{"a": "b"}'
        assert candidate.read_error is None

    def test_read_error_captured(self, tmp_path):
        candidate = read_candidate(str(tmp_path / "missing.json"))

        assert candidate.content is None
        assert "No such file or directory" in candidate.read_error

    def test_directory_read_error_captured(self, tmp_path):
        folder = tmp_path / "folder.json"
        folder.mkdir()

        candidate = read_candidate(str(folder))
        assert candidate.content is None
        assert candidate.read_error
