"""
Tests cho tokenizer: tach tu, vi tri dong/cot, dau nhay va gach noi.
"""

from core.tokenizer import tokenize
from core.types import Token


class TestTokenize:
    def test_simple_words_with_columns(self):
        """Column bat dau tu 1."""
        tokens = tokenize("hello wrld", 1)
        assert tokens == [Token("hello", 1, 1), Token("wrld", 1, 7)]

    def test_line_number_is_attached(self):
        """Token mang line number."""
        tokens = tokenize("abc", 42)
        assert tokens[0].line == 42

    def test_empty_line(self):
        """Dong rong -> khong co token."""
        assert tokenize("") == []
        assert tokenize("  \t ... !!") == []

    def test_punctuation_is_not_part_of_token(self):
        """Dau cau khong thuoc token."""
        tokens = tokenize("Hello, world!")
        assert [t.text for t in tokens] == ["Hello", "world"]
        assert tokens[1].column == 8

    def test_apostrophe_inside_word(self):
        """Apostrophe giua tu giu trong token."""
        tokens = tokenize("they're here")
        assert [t.text for t in tokens] == ["they're", "here"]

    def test_hyphenated_word_is_single_token(self):
        """Tu gach noi la mot token."""
        tokens = tokenize("a state-of-the-artt test")
        assert [t.text for t in tokens] == ["a", "state-of-the-artt", "test"]
        assert tokens[1].column == 3

    def test_leading_and_trailing_quotes_stripped(self):
        """Quote dau va cuoi bi bo."""
        tokens = tokenize("'quoted' -- text-")
        assert [t.text for t in tokens] == ["quoted", "text"]

    def test_double_hyphen_splits(self):
        """Hai gach noi lien tiep tach tu."""
        tokens = tokenize("well--known")
        assert [t.text for t in tokens] == ["well", "known"]

    def test_unicode_columns_are_code_points(self):
        """Column tinh theo code point."""
        tokens = tokenize("café naïve")
        assert [t.text for t in tokens] == ["café", "naïve"]
        assert tokens[1].column == 6

    def test_digits_and_underscores_are_word_characters(self):
        """So va underscore la ky tu cua tu."""
        tokens = tokenize("snake_case v2")
        assert [t.text for t in tokens] == ["snake_case", "v2"]

    def test_tokens_are_left_to_right_without_overlap(self):
        """Token trai sang phai, khong chong len nhau."""
        tokens = tokenize("one two three four")
        columns = [t.column for t in tokens]
        assert columns == sorted(columns)
        for prev, nxt in zip(tokens, tokens[1:]):
            assert prev.column + len(prev.text) <= nxt.column
