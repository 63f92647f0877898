"""
Base Formatter Protocol - Interface chung cho tat ca report formatters.
"""

from typing import Protocol, runtime_checkable

from core.results import ResultAggregate


@runtime_checkable
class ReportFormatter(Protocol):
    """
    Protocol cho cac report formatters.

    Formatter khong duoc gia dinh thu tu file trong aggregate; aggregate rong
    nghia la "khong co typo".
    """

    def __call__(self, aggregate: ResultAggregate) -> str:
        """Render aggregate thanh string theo format cu the."""
        ...
