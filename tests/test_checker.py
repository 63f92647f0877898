"""
Tests cho check_file(): vi tri finding, suggestions, encoding va loi doc file.
"""

import pytest

from core.checker import check_file
from core.dictionary import Dictionary
from core.errors import FileCheckError
from core.types import Finding


class TestCheckFile:
    def test_single_typo(self, tmp_path):
        """Mot typo voi line, column va suggestion."""
        path = tmp_path / "a.txt"
        path.write_text("hello wrld", encoding="utf-8")
        findings = check_file(path, Dictionary(["hello", "world"]))
        assert findings == [Finding("wrld", 1, 7, ("world",))]

    def test_no_typos(self, tmp_path):
        """File sach -> khong co finding."""
        path = tmp_path / "b.txt"
        path.write_text("hello world this is a test", encoding="utf-8")
        dictionary = Dictionary(["hello", "world", "this", "is", "a", "test"])
        assert check_file(path, dictionary) == []

    def test_apostrophe_word(self, tmp_path, small_dictionary):
        """Tu co apostrophe duoc tra nguyen."""
        path = tmp_path / "c.txt"
        path.write_text("they're a test", encoding="utf-8")
        assert check_file(path, small_dictionary) == []

    def test_hyphenated_dictionary_entry(self, tmp_path, small_dictionary):
        """Tu co gach noi khop entry trong dictionary."""
        path = tmp_path / "d.txt"
        path.write_text("a state-of-the-art test", encoding="utf-8")
        assert check_file(path, small_dictionary) == []

    def test_hyphenated_typo(self, tmp_path, small_dictionary):
        """Tu gach noi sai la mot finding duy nhat."""
        path = tmp_path / "e.txt"
        path.write_text("a state-of-the-artt test", encoding="utf-8")
        findings = check_file(path, small_dictionary)
        assert len(findings) == 1
        assert findings[0].word == "state-of-the-artt"
        assert findings[0].column == 3
        assert findings[0].suggestions == ("state-of-the-art",)

    def test_case_is_preserved_in_finding(self, tmp_path):
        """Finding giu nguyen hoa thuong cua van ban."""
        path = tmp_path / "f.txt"
        path.write_text("Hello Wrld", encoding="utf-8")
        findings = check_file(path, Dictionary(["hello", "world"]))
        assert findings == [Finding("Wrld", 1, 7, ("world",))]

    def test_document_order_across_lines(self, tmp_path):
        """Findings theo thu tu line roi column."""
        path = tmp_path / "g.txt"
        path.write_text("wrld hello\r\nhello\n\nhelo wrld\n", encoding="utf-8")
        findings = check_file(path, Dictionary(["hello", "world"]))
        positions = [(f.line, f.column, f.word) for f in findings]
        assert positions == [(1, 1, "wrld"), (4, 1, "helo"), (4, 6, "wrld")]

    def test_repeated_typo_shares_suggestions(self, tmp_path):
        """Typo lap lai co cung suggestions."""
        path = tmp_path / "h.txt"
        path.write_text("wrld wrld\nWRLD\n", encoding="utf-8")
        findings = check_file(path, Dictionary(["world"]))
        assert len(findings) == 3
        assert all(f.suggestions == ("world",) for f in findings)

    def test_invalid_utf8_bytes_are_not_words(self, tmp_path):
        """Bytes UTF-8 hong khong tao ra tu."""
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"hello \xff\xfe world\n")
        assert check_file(path, Dictionary(["hello", "world"])) == []

    def test_empty_file(self, tmp_path):
        """File rong -> khong co finding."""
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")
        assert check_file(path, Dictionary(["hello"])) == []

    def test_missing_file_raises_file_check_error(self, tmp_path):
        """File khong mo duoc -> FileCheckError."""
        missing = tmp_path / "missing.txt"
        with pytest.raises(FileCheckError) as exc_info:
            check_file(missing, Dictionary(["hello"]))
        assert exc_info.value.path == str(missing)
        assert "Error reading file" in str(exc_info.value)
