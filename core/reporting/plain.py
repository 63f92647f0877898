"""
Plain Text Formatter - Render ResultAggregate thanh text report.
"""

from core.results import ResultAggregate
from core.types import Finding

NO_TYPOS_MESSAGE = "No typos found."


def format_finding_plain(finding: Finding) -> str:
    """
    Mot dong cho mot finding.

    >>> format_finding_plain(Finding("errror", 1, 5, ("error",)))
    '- Line 1, Col 5: "errror" appears to be a typo. Did you mean: error?'
    """
    message = (
        f'- Line {finding.line}, Col {finding.column}: '
        f'"{finding.word}" appears to be a typo.'
    )
    if finding.suggestions:
        message += f" Did you mean: {', '.join(finding.suggestions)}?"
    return message


def format_report_plain(aggregate: ResultAggregate) -> str:
    """
    Render aggregate thanh plain text.

    Format:
        Typos found:

        --- In file path/to/file ---
        - Line 1, Col 7: "wrld" appears to be a typo. Did you mean: world?

    Files duoc sap xep theo path de report on dinh giua cac lan chay.

    Returns:
        Report text, ket thuc bang newline
    """
    if not aggregate:
        return f"{NO_TYPOS_MESSAGE}\n"

    lines: list[str] = ["Typos found:"]
    for path, findings in aggregate.sorted_items():
        lines.append("")
        lines.append(f"--- In file {path} ---")
        lines.extend(format_finding_plain(finding) for finding in findings)

    return "\n".join(lines) + "\n"
