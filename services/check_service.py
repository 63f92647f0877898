"""
Check Service - Orchestrate mot lan check: settings -> dictionary -> scheduler -> report.

Tach logic khoi main.py de CLI chi lo parse arguments va exit code.

Usage:
    settings = load_app_settings().with_overrides(verbose=True)
    aggregate = run_spell_check("docs/", settings)
    report = write_report(aggregate, resolve_report_format("html"))
"""

import os
from pathlib import Path
from typing import Dict, Optional, Union

from config.app_settings import AppSettings
from config.output_format import ReportFormat
from core.dictionary import Dictionary, load_dictionary
from core.exclude_engine import build_exclude_patterns
from core.logging_config import log_debug, log_info
from core.reporting import ReportFormatter, format_report_html, format_report_plain
from core.results import ResultAggregate
from core.scheduler import check_tree

_RENDERERS: Dict[ReportFormat, ReportFormatter] = {
    ReportFormat.TEXT: format_report_plain,
    ReportFormat.HTML: format_report_html,
}


def load_settings_dictionary(settings: AppSettings) -> Dictionary:
    """
    Load dictionary theo settings (dictionary_path, personal_dictionaries,
    use_system_word_list).

    Raises:
        DictionaryError: Neu khong load duoc dictionary
    """
    return load_dictionary(
        settings.dictionary_path or None,
        personal=settings.personal_dictionaries,
        include_system=settings.use_system_word_list,
    )


def run_spell_check(
    root: Union[str, os.PathLike],
    settings: AppSettings,
    dictionary: Optional[Dictionary] = None,
) -> ResultAggregate:
    """
    Chay mot lan check day du tren root.

    Args:
        root: File hoac directory can check
        settings: Settings da merge voi command line overrides
        dictionary: Dictionary da load (None = load theo settings)

    Returns:
        ResultAggregate cua lan check

    Raises:
        ConfigError: Pattern, dictionary hoac worker settings khong hop le
        TraversalError: Root path khong truy cap duoc
    """
    if dictionary is None:
        dictionary = load_settings_dictionary(settings)

    patterns = build_exclude_patterns(
        settings.get_excluded_patterns_list(),
        use_default_excludes=settings.use_default_excludes,
    )
    log_debug(f"Exclude patterns: {patterns}")
    log_info(f"Checking {root} against {len(dictionary)} dictionary words")

    return check_tree(
        root,
        dictionary,
        patterns,
        verbose=settings.verbose,
        max_workers=settings.max_workers or None,
        queue_size=settings.queue_size,
    )


def render_report(aggregate: ResultAggregate, report_format: ReportFormat) -> str:
    """Render aggregate theo format da chon."""
    return _RENDERERS[report_format](aggregate)


def write_report(
    aggregate: ResultAggregate,
    report_format: ReportFormat,
    output_path: Optional[Union[str, os.PathLike]] = None,
) -> str:
    """
    Render report va ghi ra output_path (neu co).

    Format duoc resolve truoc khi check (resolve_report_format) de --format sai
    bao loi ngay, khong phai doi traversal chay xong.

    Returns:
        Report string

    Raises:
        OSError: Neu khong ghi duoc output file
    """
    report = render_report(aggregate, report_format)

    if output_path:
        target = Path(output_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(report, encoding="utf-8")
        log_info(f"Report written to {target}")

    return report
