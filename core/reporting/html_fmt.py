"""
HTML Formatter - Render ResultAggregate thanh HTML report.

Bao gom:
- format_report_html(): Mot trang HTML self-contained cho toan bo aggregate
- write_html_report_dir(): Thu muc report gom index.html + 1 trang cho moi file
- sanitize_report_name(): Ten file report an toan tu path cua file nguon

Moi text (path, word, suggestions) deu duoc HTML-escape.
"""

import html
import os
from pathlib import Path
from typing import List, Sequence, Union

from core.logging_config import log_info
from core.results import ResultAggregate
from core.types import Finding

HTML_HEADER = (
    "<!DOCTYPE html>\n"
    '<html lang="en"><head><meta charset="UTF-8"><title>Spell Check Report</title>\n'
    "<style>"
    "body{font-family:sans-serif;max-width:960px;margin:20px auto}"
    "h1,h2{border-bottom:2px solid #eee}"
    "table{width:100%;border-collapse:collapse}"
    "th,td{padding:12px;border:1px solid #ddd}"
    "th{background-color:#3498db;color:white}"
    "td:nth-child(3){font-weight:bold;color:#c0392b}"
    "td:nth-child(4){color:#27ae60}"
    "ul{list-style-type:none;padding:0}"
    "li{padding:8px;border-bottom:1px solid #eee}"
    "a{text-decoration:none;color:#3498db}"
    "</style>\n"
    "</head><body>"
)
HTML_FOOTER = "</body></html>\n"

NO_TYPOS_PARAGRAPH = "<p>No typos found.</p>"
INDEX_FILE_NAME = "index.html"


def sanitize_report_name(path: str) -> str:
    """
    Chuyen path cua file nguon thanh ten file report.

    >>> sanitize_report_name("docs/guide.md")
    'docs_guide.md.html'
    """
    for char in ("/", "\\", ":"):
        path = path.replace(char, "_")
    return f"{path}.html"


def _format_file_table(path: str, findings: Sequence[Finding]) -> str:
    rows = [
        f"<h2>Typos in: {html.escape(os.path.basename(path))}</h2>",
        "<table><tr><th>Line</th><th>Column</th><th>Word</th><th>Suggestions</th></tr>",
    ]
    for finding in findings:
        rows.append(
            f"<tr><td>{finding.line}</td><td>{finding.column}</td>"
            f"<td>{html.escape(finding.word)}</td>"
            f"<td>{html.escape(', '.join(finding.suggestions))}</td></tr>"
        )
    rows.append("</table>")
    return "".join(rows)


def format_report_html(aggregate: ResultAggregate) -> str:
    """
    Render toan bo aggregate thanh mot trang HTML.

    Args:
        aggregate: Ket qua cua mot lan check

    Returns:
        HTML document string
    """
    parts = [HTML_HEADER, "<h1>Spell Check Report</h1>"]
    if not aggregate:
        parts.append(NO_TYPOS_PARAGRAPH)
    else:
        for path, findings in aggregate.sorted_items():
            parts.append(_format_file_table(path, findings))
    parts.append(HTML_FOOTER)
    return "".join(parts)


def _format_index(aggregate: ResultAggregate) -> str:
    parts = [HTML_HEADER, "<h1>Spell Check Summary</h1>"]
    if not aggregate:
        parts.append(NO_TYPOS_PARAGRAPH)
    else:
        parts.append("<ul>")
        for path, findings in aggregate.sorted_items():
            href = html.escape(sanitize_report_name(path), quote=True)
            parts.append(
                f'<li><a href="{href}">{html.escape(path)}</a> ({len(findings)} typos)</li>'
            )
        parts.append("</ul>")
    parts.append(HTML_FOOTER)
    return "".join(parts)


def write_html_report_dir(
    output_dir: Union[str, os.PathLike], aggregate: ResultAggregate
) -> List[Path]:
    """
    Ghi multi-file HTML report: index.html + mot trang cho moi file co typo.

    Args:
        output_dir: Thu muc dich (tu tao neu chua co)
        aggregate: Ket qua cua mot lan check

    Returns:
        List cac file da ghi, index.html dau tien

    Raises:
        OSError: Neu khong tao duoc thu muc hoac ghi file
    """
    target = Path(output_dir)
    target.mkdir(parents=True, exist_ok=True)

    index_path = target / INDEX_FILE_NAME
    index_path.write_text(_format_index(aggregate), encoding="utf-8")
    written = [index_path]

    for path, findings in aggregate.sorted_items():
        page_path = target / sanitize_report_name(path)
        page_path.write_text(
            HTML_HEADER + _format_file_table(path, findings) + HTML_FOOTER,
            encoding="utf-8",
        )
        written.append(page_path)

    log_info(f"Wrote {len(written)} report files to {target}")
    return written
