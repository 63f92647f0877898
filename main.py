"""
spellscan - Command line entry point.

Check chinh ta cho mot file hoac ca mot cay thu muc, in report ra stdout
(hoac ghi ra file) va tra ve exit status:

    0 - khong co typo
    1 - co it nhat 1 typo
    2 - loi cau hinh / loi fatal (dictionary, pattern, root path...)

Usage:
    spellscan docs/ --dict words.csv --exclude "*.log,node_modules"
    spellscan README.md -p team-words.txt --output report.html
"""

from pathlib import Path
from typing import List, Optional

import typer

from config.output_format import get_all_format_ids, resolve_report_format
from core.errors import SpellScanError
from core.exclude_engine import split_pattern_arguments
from core.logging_config import flush_logs, set_debug_mode
from core.reporting import write_html_report_dir
from services.check_service import run_spell_check, write_report
from services.settings_manager import load_app_settings

EXIT_OK = 0
EXIT_TYPOS_FOUND = 1
EXIT_ERROR = 2

app = typer.Typer(
    help="Concurrent spell checker for text files and directory trees.",
    add_completion=False,
)


@app.command()
def check(
    path: Path = typer.Argument(..., help="File or directory to check"),
    dictionary: Optional[Path] = typer.Option(
        None, "--dict", "-d", help="Dictionary file (.csv with header, or one word per line)"
    ),
    personal: Optional[List[Path]] = typer.Option(
        None, "--personal-dict", "-p", help="Personal word list merged into the dictionary"
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        "-e",
        help=(
            "Comma-separated gitignore-style patterns matched against base names "
            "(an unclosed \"[\" is matched literally)"
        ),
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the report to this file instead of stdout"
    ),
    report_format: Optional[str] = typer.Option(
        None, "--format", "-f", help=f"Report format: {', '.join(get_all_format_ids())}"
    ),
    html_dir: Optional[Path] = typer.Option(
        None, "--html-dir", help="Also write a multi-page HTML report into this directory"
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", min=1, help="Number of worker threads (default: CPU count)"
    ),
    system_words: bool = typer.Option(
        False, "--system-words", help="Also merge the system word list (/usr/share/dict/words)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log skipped files"),
    no_default_excludes: bool = typer.Option(
        False, "--no-default-excludes", help="Do not skip .git, .hg and .svn directories"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Check spelling of PATH and report words missing from the dictionary."""

    if debug:
        set_debug_mode(True)

    try:
        settings = load_app_settings()

        # Command line patterns duoc noi sau patterns tu settings file
        excluded = settings.get_excluded_patterns_list()
        excluded.extend(split_pattern_arguments(exclude or []))

        settings = settings.with_overrides(
            dictionary_path=str(dictionary) if dictionary else None,
            personal_dictionaries=(
                settings.personal_dictionaries + [str(p) for p in personal]
                if personal
                else None
            ),
            excluded_patterns="\n".join(excluded),
            use_system_word_list=True if system_words else None,
            use_default_excludes=False if no_default_excludes else None,
            max_workers=workers,
            verbose=True if verbose else None,
            output_format=report_format,
        )

        # Format sai phai bao loi truoc khi bat dau duyet cay thu muc
        resolved_format = resolve_report_format(settings.output_format or None, output)

        aggregate = run_spell_check(path, settings)
        report = write_report(aggregate, resolved_format, output)
        if output is None:
            typer.echo(report, nl=False)

        if html_dir is not None:
            write_html_report_dir(html_dir, aggregate)
    except (SpellScanError, OSError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_ERROR)
    finally:
        flush_logs()

    raise typer.Exit(code=EXIT_TYPOS_FOUND if aggregate.has_typos else EXIT_OK)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
