"""
Tokenizer - Tach mot dong text thanh cac word tokens.

Word = run cac Unicode word characters (chu, so, underscore), co the noi voi
nhau bang mot dau nhay don hoac gach noi o giua:
    "they're"          -> 1 token
    "state-of-the-art" -> 1 token
    "'quoted' -- text" -> "quoted", "text"

Dictionary co the chua entry co gach noi ("state-of-the-art"), nen token cung
phai giu nguyen gach noi de suggestion engine so sanh dung.
"""

import re

from core.types import Token

WORD_PATTERN = re.compile(r"\w+(?:['-]\w+)*")


def tokenize(line: str, line_number: int = 1) -> list[Token]:
    """
    Tach dong thanh tokens theo thu tu trai sang phai, khong overlap.

    Args:
        line: Noi dung mot dong (khong can bo newline)
        line_number: So dong (1-based) gan vao moi token

    Returns:
        List Token, column la offset 1-based cua ky tu dau tien
    """
    return [
        Token(text=match.group(0), line=line_number, column=match.start() + 1)
        for match in WORD_PATTERN.finditer(line)
    ]
