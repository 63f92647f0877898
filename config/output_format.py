"""
Report Format Configuration - Registry cho các định dạng report

Thiết kế extensible: Thêm format mới chỉ cần thêm entry vào REPORT_FORMATS dict
và formatter tương ứng trong core/reporting.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from core.errors import ConfigError


class ReportFormat(Enum):
    """
    Enum các định dạng report được hỗ trợ.
    """

    TEXT = "txt"
    HTML = "html"


@dataclass(frozen=True)
class ReportFormatConfig:
    """
    Cấu hình cho một report format.

    Attributes:
        id: ID duy nhất (trùng với enum value, cũng là giá trị của --format)
        name: Tên hiển thị
        description: Mô tả ngắn 1 dòng
        file_extension: Extension file khi ghi report ra disk
    """

    id: str
    name: str
    description: str
    file_extension: str


# ============================================================================
# REPORT FORMAT REGISTRY
# Thêm format mới: Thêm entry vào dict này + thêm enum value ở trên
# ============================================================================

REPORT_FORMATS: Dict[ReportFormat, ReportFormatConfig] = {
    ReportFormat.TEXT: ReportFormatConfig(
        id="txt",
        name="Plain Text",
        description="Danh sách typo theo từng file, dễ đọc trên terminal",
        file_extension=".txt",
    ),
    ReportFormat.HTML: ReportFormatConfig(
        id="html",
        name="HTML",
        description="Trang HTML với bảng typo và gợi ý cho từng file",
        file_extension=".html",
    ),
}

DEFAULT_REPORT_FORMAT = ReportFormat.TEXT


def get_all_format_ids() -> List[str]:
    """Danh sách id hợp lệ cho --format."""
    return [cfg.id for cfg in REPORT_FORMATS.values()]


def get_format_by_id(format_id: str) -> ReportFormat:
    """
    Tìm ReportFormat từ string id (không phân biệt hoa thường).

    Args:
        format_id: ID string (VD: "txt", "html")

    Returns:
        ReportFormat enum value

    Raises:
        ConfigError: Nếu format_id không hợp lệ
    """
    wanted = format_id.strip().lower()
    for report_format, config in REPORT_FORMATS.items():
        if config.id == wanted:
            return report_format
    raise ConfigError(
        f"Unknown report format: {format_id!r} (expected one of: "
        f"{', '.join(get_all_format_ids())})"
    )


def resolve_report_format(
    format_id: Optional[str] = None,
    output_path: Optional[Path] = None,
) -> ReportFormat:
    """
    Quyết định format của report.

    Thứ tự ưu tiên:
    1. format_id tường minh (--format)
    2. Extension của output file (.html -> HTML)
    3. DEFAULT_REPORT_FORMAT

    Raises:
        ConfigError: Nếu format_id không hợp lệ
    """
    if format_id:
        return get_format_by_id(format_id)

    if output_path is not None:
        suffix = Path(output_path).suffix.lower()
        for report_format, config in REPORT_FORMATS.items():
            if config.file_extension == suffix:
                return report_format

    return DEFAULT_REPORT_FORMAT
