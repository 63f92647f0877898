"""
Config Package - Chứa các constants và cấu hình của ứng dụng

Bao gồm:
- paths: Đường dẫn app data, log, settings
- app_settings: Typed settings cho một lần check
- output_format: Registry các định dạng report
"""

from config.app_settings import AppSettings, DEFAULT_QUEUE_SIZE
from config.output_format import (
    ReportFormat,
    ReportFormatConfig,
    REPORT_FORMATS,
    DEFAULT_REPORT_FORMAT,
    get_format_by_id,
    resolve_report_format,
)

__all__ = [
    "AppSettings",
    "DEFAULT_QUEUE_SIZE",
    "ReportFormat",
    "ReportFormatConfig",
    "REPORT_FORMATS",
    "DEFAULT_REPORT_FORMAT",
    "get_format_by_id",
    "resolve_report_format",
]
