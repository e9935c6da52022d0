"""
test_fs_utils.py
----------------
Unit tests for quire.utils.fs.
"""
import pytest

from quire.utils.fs import html_name, is_document_name, list_documents, scan_documents


class TestScanDocuments:
    """Test scan_documents and list_documents."""

    @pytest.fixture
    def directory(self, tmp_path):
        (tmp_path / "b.md").write_text("b")
        (tmp_path / "a.md").write_text("a")
        (tmp_path / "notes.txt").write_text("n")
        (tmp_path / "readme.md.bak").write_text("r")
        (tmp_path / "drafts.md").mkdir()
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "nested.md").write_text("x")
        return tmp_path

    def test_only_top_level_markdown_files(self, directory):
        documents, skipped = scan_documents(directory)
        assert sorted(p.name for p in documents) == ["a.md", "b.md"]
        assert sorted(p.name for p in skipped) == [
            "drafts.md",
            "notes.txt",
            "readme.md.bak",
            "sub",
        ]

    def test_sorted(self, directory):
        documents, _ = scan_documents(directory, sort=True)
        assert [p.name for p in documents] == ["a.md", "b.md"]

    def test_list_documents_matches_scan(self, directory):
        documents, _ = scan_documents(directory)
        assert list(list_documents(directory)) == documents

    def test_empty_directory(self, tmp_path):
        assert scan_documents(tmp_path) == ([], [])

    def test_missing_directory(self, tmp_path):
        with pytest.raises(OSError):
            scan_documents(tmp_path / "missing")


class TestNames:
    """Test is_document_name and html_name."""

    @pytest.mark.parametrize("name, expected", [("a.md", True), ("a.MD", False), ("a.txt", False), ("md", False)])
    def test_is_document_name(self, name, expected):
        assert is_document_name(name) is expected

    @pytest.mark.parametrize(
        "name, expected",
        [("a.md", "a.html"), ("2020-01-02.md", "2020-01-02.html"), ("x.md.md", "x.md.html")],
    )
    def test_html_name(self, name, expected):
        assert html_name(name) == expected
