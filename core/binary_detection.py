"""
Binary Detection - Phat hien file binary dua tren byte analysis cua prefix.

Module chua cac ham:
- read_prefix(): Doc toi da PREFIX_SIZE bytes dau tien cua file
- looks_binary(): Phan loai prefix (null byte hoac > 30% non-printable)
- is_likely_binary(): read_prefix() + looks_binary()
- describe_binary(): Nhan dang format (PNG, ZIP...) cho log message

Chi doc prefix, khong bao gio doc toan bo file.
"""

import codecs
from os import PathLike
from typing import Union

import filetype

from core.errors import ClassificationError

# So bytes doc tu dau file de phan loai
PREFIX_SIZE = 512

# > 30% non-printable characters -> binary
NON_PRINTABLE_THRESHOLD = 0.3

# Tab, LF, VT, FF, CR
_WHITESPACE_BYTES = frozenset((9, 10, 11, 12, 13))


def read_prefix(path: Union[str, PathLike], size: int = PREFIX_SIZE) -> bytes:
    """
    Doc toi da `size` bytes dau tien cua file.

    Raises:
        ClassificationError: Neu khong mo/doc duoc file
    """
    try:
        with open(path, "rb") as f:
            return f.read(size)
    except OSError as e:
        raise ClassificationError(str(path), e) from e


def looks_binary(chunk: bytes) -> bool:
    """
    Kiem tra prefix co phai binary khong.

    Tieu chi:
    - Co bat ky null byte nao -> binary
    - > 30% non-printable (khong tinh whitespace) -> binary
    - Chunk rong (file rong) -> text

    Args:
        chunk: Du lieu bytes can kiem tra

    Returns:
        True neu co ve la binary
    """
    if len(chunk) == 0:
        return False

    if b"\x00" in chunk:
        return True

    return _non_printable_ratio(chunk) > NON_PRINTABLE_THRESHOLD


def _non_printable_ratio(chunk: bytes) -> float:
    """
    Ty le ky tu non-printable trong chunk.

    Neu chunk la UTF-8 hop le thi dem tren ky tu da decode (text tieng Viet,
    Cyrillic, CJK... khong bi nham la binary). Neu khong thi dem tren raw bytes.
    """
    try:
        # final=False: cho phep multi-byte sequence bi cat o cuoi prefix
        text = codecs.getincrementaldecoder("utf-8")().decode(chunk, final=False)
    except UnicodeDecodeError:
        text = ""

    if text:
        non_printable = sum(
            1 for ch in text if not ch.isprintable() and not ch.isspace()
        )
        return non_printable / len(text)

    non_printable = sum(
        1 for b in chunk if (b < 32 and b not in _WHITESPACE_BYTES) or b > 126
    )
    return non_printable / len(chunk)


def is_likely_binary(path: Union[str, PathLike]) -> bool:
    """
    Phan loai file dua tren PREFIX_SIZE bytes dau tien.

    Raises:
        ClassificationError: Neu khong doc duoc prefix (khong tra ve False im lang)
    """
    return looks_binary(read_prefix(path))


def describe_binary(chunk: bytes) -> str:
    """
    Mo ta ngan gon loai binary (dung trong log khi skip file).

    Returns:
        MIME type neu nhan dang duoc signature, nguoc lai "binary data"
    """
    kind = filetype.guess(chunk)
    if kind is not None:
        return kind.mime
    return "binary data"
