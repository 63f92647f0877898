"""
Reporting Package - Render ResultAggregate thanh report cho nguoi doc.

Modules:
- base: ReportFormatter protocol
- plain: Text report cho terminal / file .txt
- html_fmt: HTML report (1 trang hoac thu muc nhieu trang)
"""

from core.reporting.base import ReportFormatter
from core.reporting.html_fmt import (
    format_report_html,
    sanitize_report_name,
    write_html_report_dir,
)
from core.reporting.plain import format_report_plain

__all__ = [
    "ReportFormatter",
    "format_report_plain",
    "format_report_html",
    "sanitize_report_name",
    "write_html_report_dir",
]
