"""
Check Types - Cac kieu du lieu dung chung cho pipeline check chinh ta.

Cung cap:
- Token: Mot tu tim thay tren mot dong, kem vi tri
- Finding: Mot token khong co trong dictionary, kem goi y sua
- CheckResult: Message worker gui ve collector sau khi check xong 1 file
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Token:
    """
    Mot run lien tuc cac word characters tren mot dong.

    Attributes:
        text: Noi dung token (giu nguyen hoa thuong)
        line: So dong, bat dau tu 1
        column: Vi tri ky tu dau tien, bat dau tu 1 (tinh theo code point)
    """

    text: str
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Finding:
    """
    Mot tu sai chinh ta trong file.

    Immutable (frozen) de co the chuyen an toan giua worker threads va collector.

    Attributes:
        word: Tu nhu xuat hien trong file (giu nguyen hoa thuong)
        line: So dong (1-based)
        column: So cot (1-based)
        suggestions: Cac tu trong dictionary co edit distance <= nguong
    """

    word: str
    line: int
    column: int
    suggestions: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CheckResult:
    """
    Ket qua check mot file, gui tu worker ve collector qua result queue.

    Attributes:
        path: Duong dan file
        findings: Findings theo thu tu dong roi cot
        error: Ly do that bai (None neu check thanh cong)
    """

    path: str
    findings: tuple[Finding, ...] = ()
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None
