"""
Error Classes - Phan loai loi cua spellscan.

- ConfigError / DictionaryError: loi cau hinh, dung ca lan chay truoc khi traverse
- TraversalError: root path khong truy cap duoc
- FileCheckError: khong mo/doc duoc mot file (chi file do bi bo qua)
- ClassificationError: khong doc duoc prefix de phan loai binary/text
"""

from typing import Optional


class SpellScanError(Exception):
    """Base error cho tat ca loi cua spellscan."""

    pass


class ConfigError(SpellScanError):
    """Cau hinh khong hop le (exclude pattern sai, worker count sai...)."""

    pass


class DictionaryError(ConfigError):
    """Khong load duoc dictionary."""

    pass


class TraversalError(SpellScanError):
    """Root path khong ton tai hoac khong stat duoc."""

    pass


class FileCheckError(SpellScanError):
    """Mo hoac doc file that bai trong luc check."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Error reading file {path}{detail}")


class ClassificationError(SpellScanError):
    """Khong doc duoc prefix cua file de kiem tra binary."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Cannot classify file {path}{detail}")
