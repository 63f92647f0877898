"""
Result Aggregate - Ket qua cuoi cung cua mot lan check.

ResultAggregate la mapping read-only: file path -> findings (theo thu tu dong,
cot). Chi co entry cho file co it nhat 1 finding. Duoc tao boi collector sau
khi tat ca workers da xong, nen khong bao gio bi doc khi dang do dang.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Tuple

from core.types import Finding


@dataclass(frozen=True)
class RunStats:
    """
    Thong ke cua mot lan check.

    Attributes:
        files_discovered: So file thuong tim thay (truoc khi filter)
        files_checked: So file da duoc worker check (thanh cong)
        files_with_typos: So file co it nhat 1 finding
        total_findings: Tong so findings
        excluded_files: So file bi exclude theo pattern
        excluded_dirs: So directory bi prune theo pattern
        binary_skipped: So file bi skip vi binary
        unclassified: So file khong doc duoc prefix (bi skip)
        errored: So file check that bai (open/read error)
        traversal_errors: So loi khi duyet cay (permission denied, broken symlink)
    """

    files_discovered: int = 0
    files_checked: int = 0
    files_with_typos: int = 0
    total_findings: int = 0
    excluded_files: int = 0
    excluded_dirs: int = 0
    binary_skipped: int = 0
    unclassified: int = 0
    errored: int = 0
    traversal_errors: int = 0


class ResultAggregate(Mapping):
    """
    Mapping read-only tu file path den tuple findings.

    Usage:
        aggregate = check_tree(root, dictionary)
        if aggregate.has_typos:
            for path, findings in aggregate.sorted_items():
                ...
    """

    def __init__(
        self,
        entries: Optional[Dict[str, Tuple[Finding, ...]]] = None,
        stats: Optional[RunStats] = None,
    ):
        # Copy de caller khong the sua aggregate qua dict goc
        self._entries = MappingProxyType(
            {path: tuple(findings) for path, findings in (entries or {}).items() if findings}
        )
        self.stats = stats or RunStats()

    def __getitem__(self, path: str) -> Tuple[Finding, ...]:
        return self._entries[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ResultAggregate(files={len(self)}, findings={self.total_findings})"

    @property
    def has_typos(self) -> bool:
        """True neu co it nhat 1 finding (CLI tra ve exit status loi)."""
        return len(self._entries) > 0

    @property
    def total_findings(self) -> int:
        return sum(len(findings) for findings in self._entries.values())

    def sorted_items(self) -> List[Tuple[str, Tuple[Finding, ...]]]:
        """Cac entry sap xep theo path (cho report on dinh)."""
        return sorted(self._entries.items())
