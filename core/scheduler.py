"""
Traversal Scheduler - Duyet cay thu muc va check chinh ta song song.

Mo hinh producer / consumer voi 3 vai tro:

    walker (1 thread) --work_queue--> workers (N threads) --result_queue--> collector

- Walker: os.walk, prune directory bi exclude, skip file bi exclude hoac binary,
  day path vao work_queue. Queue co gioi han nen walker bi block khi queue day
  (backpressure), memory khong tang theo kich thuoc cay.
- Workers: lay path, goi check_file(), gui CheckResult (immutable) vao result_queue.
  Workers KHONG ghi truc tiep vao aggregate.
- Collector: chinh thread goi run(), la noi DUY NHAT ghi vao aggregate.

Barrier hoan thanh (khong dung sleep/poll):
1. Walker luon (finally) day mot _END_OF_WORK cho moi worker
2. Moi worker luon (finally) gui _WORKER_DONE sau result cuoi cung cua no
3. Collector dung khi nhan du N _WORKER_DONE -> moi result da duoc doc,
   sau do doi chieu so result voi so path da dispatch

Vong doi mot path:
    Discovered -> Excluded | BinarySkipped | Queued -> Checked -> Merged
                                                    -> Errored
"""

import os
import queue
import stat
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from os import PathLike
from typing import Dict, Optional, Sequence, Tuple, Union

from config.app_settings import DEFAULT_QUEUE_SIZE
from core.binary_detection import describe_binary, looks_binary, read_prefix
from core.checker import check_file
from core.dictionary import Dictionary
from core.errors import ClassificationError, ConfigError, FileCheckError, TraversalError
from core.exclude_engine import ExcludeRules, compile_exclude_rules
from core.logging_config import log_debug, log_error, log_info, log_warning
from core.results import ResultAggregate, RunStats
from core.types import CheckResult, Finding

# Sentinels tren cac queue
_END_OF_WORK = object()
_WORKER_DONE = object()


def get_worker_count() -> int:
    """
    So worker mac dinh = so CPU cores (toi thieu 1).
    """
    return max(1, os.cpu_count() or 4)


@dataclass
class _WalkSummary:
    """Counters cua walker. Chi walker thread ghi, doc sau khi walker xong."""

    discovered: int = 0
    dispatched: int = 0
    excluded_files: int = 0
    excluded_dirs: int = 0
    binary_skipped: int = 0
    unclassified: int = 0
    traversal_errors: int = 0


@dataclass
class _Collected:
    """Ket qua collector thu duoc tu result_queue."""

    entries: Dict[str, Tuple[Finding, ...]] = field(default_factory=dict)
    workers_done: int = 0
    received: int = 0
    checked: int = 0
    errored: int = 0


class TraversalScheduler:
    """
    Scheduler cho mot (hoac nhieu) lan check mot cay thu muc.

    Usage:
        rules = compile_exclude_rules(["*.log", "node_modules"])
        scheduler = TraversalScheduler(dictionary, rules, max_workers=4)
        aggregate = scheduler.run("/path/to/project")

        # Tu thread khac: dung discover them file (file da queue van duoc check)
        scheduler.cancel()
    """

    def __init__(
        self,
        dictionary: Dictionary,
        exclude_rules: Optional[ExcludeRules] = None,
        max_workers: Optional[int] = None,
        queue_size: int = DEFAULT_QUEUE_SIZE,
        verbose: bool = False,
    ):
        """
        Args:
            dictionary: Dictionary da load (read-only, share cho moi worker)
            exclude_rules: Rules da compile (None = khong exclude gi)
            max_workers: So worker threads (None = so CPU cores)
            queue_size: Kich thuoc toi da cua work queue va result queue
            verbose: Log cac file/folder bi skip o muc INFO thay vi DEBUG

        Raises:
            ConfigError: Neu max_workers hoac queue_size < 1
        """
        if max_workers is not None and max_workers < 1:
            raise ConfigError(f"max_workers must be >= 1, got {max_workers}")
        if queue_size < 1:
            raise ConfigError(f"queue_size must be >= 1, got {queue_size}")

        self.dictionary = dictionary
        self.exclude_rules = exclude_rules or compile_exclude_rules()
        self.max_workers = max_workers or get_worker_count()
        self.queue_size = queue_size
        self.verbose = verbose
        self._cancel_event = threading.Event()

    def cancel(self) -> None:
        """Dung walker. Cac path da vao queue van duoc check va collect."""
        self._cancel_event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def run(self, root: Union[str, PathLike]) -> ResultAggregate:
        """
        Check toan bo file text duoi root (file hoac directory).

        Chi return sau khi walker da duyet het, moi path da dispatch va moi
        result da duoc collector doc.

        Raises:
            TraversalError: Neu root path khong stat duoc
        """
        root_path = os.fspath(root)
        try:
            root_stat = os.stat(root_path)
        except OSError as e:
            raise TraversalError(f"Cannot access root path {root_path}: {e}") from e

        self._cancel_event.clear()
        work_queue: queue.Queue = queue.Queue(maxsize=self.queue_size)
        result_queue: queue.Queue = queue.Queue(maxsize=self.queue_size)

        with ThreadPoolExecutor(
            max_workers=self.max_workers + 1,
            thread_name_prefix="spellscan",
        ) as executor:
            walker = executor.submit(
                self._walk, root_path, stat.S_ISDIR(root_stat.st_mode), work_queue
            )
            workers = [
                executor.submit(self._work, work_queue, result_queue)
                for _ in range(self.max_workers)
            ]

            collected = _Collected()
            try:
                self._collect(result_queue, collected)
            except BaseException:
                # Collector bi ngat: dung walker va rut not result_queue (chi doi
                # cac _WORKER_DONE con thieu) de khong worker nao bi block vinh vien
                self.cancel()
                self._collect(result_queue, collected)
                raise

            summary = walker.result()
            for worker in workers:
                worker.result()

        if collected.received != summary.dispatched:
            raise RuntimeError(
                f"Dispatched {summary.dispatched} files but collected "
                f"{collected.received} results"
            )

        aggregate = ResultAggregate(
            collected.entries,
            stats=RunStats(
                files_discovered=summary.discovered,
                files_checked=collected.checked,
                files_with_typos=len(collected.entries),
                total_findings=sum(len(f) for f in collected.entries.values()),
                excluded_files=summary.excluded_files,
                excluded_dirs=summary.excluded_dirs,
                binary_skipped=summary.binary_skipped,
                unclassified=summary.unclassified,
                errored=collected.errored,
                traversal_errors=summary.traversal_errors,
            ),
        )
        log_info(
            f"Checked {aggregate.stats.files_checked} files with "
            f"{self.max_workers} workers: {aggregate.total_findings} typos "
            f"in {len(aggregate)} files"
        )
        return aggregate

    # ------------------------------------------------------------------
    # Walker (producer)
    # ------------------------------------------------------------------

    def _walk(self, root_path: str, is_dir: bool, work_queue: queue.Queue) -> _WalkSummary:
        summary = _WalkSummary()
        try:
            if is_dir:
                self._walk_directory(root_path, summary, work_queue)
            else:
                # Root do user chi dinh khong bao gio bi exclude
                self._offer_file(root_path, None, summary, work_queue)
        finally:
            # Dong work queue: moi worker nhan dung 1 sentinel
            for _ in range(self.max_workers):
                work_queue.put(_END_OF_WORK)
        return summary

    def _walk_directory(
        self, root_path: str, summary: _WalkSummary, work_queue: queue.Queue
    ) -> None:
        def on_error(error: OSError) -> None:
            summary.traversal_errors += 1
            log_warning(f"Cannot read directory {error.filename}: {error.strerror or error}")

        # followlinks=False: khong di vao symlinked directories (tranh vong lap)
        for dirpath, dirnames, filenames in os.walk(root_path, onerror=on_error):
            if self.is_cancelled:
                return

            # Prune in-place: os.walk se khong visit cac directory bi loai
            kept = []
            for name in sorted(dirnames):
                if self.exclude_rules.matches(name, is_dir=True):
                    summary.excluded_dirs += 1
                    self._log_skip(
                        f"Skipping excluded directory: {os.path.join(dirpath, name)}"
                    )
                else:
                    kept.append(name)
            dirnames[:] = kept

            for name in sorted(filenames):
                if self.is_cancelled:
                    return
                self._offer_file(os.path.join(dirpath, name), name, summary, work_queue)

    def _offer_file(
        self,
        path: str,
        name: Optional[str],
        summary: _WalkSummary,
        work_queue: queue.Queue,
    ) -> None:
        """Ap dung exclusion + binary policy, roi dispatch path vao work queue."""
        summary.discovered += 1

        if name is not None and self.exclude_rules.matches(name):
            summary.excluded_files += 1
            self._log_skip(f"Skipping excluded file: {path}")
            return

        if not os.path.isfile(path):
            if os.path.islink(path):
                summary.traversal_errors += 1
                log_warning(f"Skipping broken symlink: {path}")
            else:
                log_debug(f"Skipping non-regular file: {path}")
            return

        try:
            prefix = read_prefix(path)
        except ClassificationError as e:
            # Fail-safe: file khong doc duoc prefix thi cung khong check duoc
            summary.unclassified += 1
            log_warning(f"{e} (skipped)")
            return

        if looks_binary(prefix):
            summary.binary_skipped += 1
            self._log_skip(f"Skipping likely binary file: {path} ({describe_binary(prefix)})")
            return

        # Block khi queue day (backpressure)
        work_queue.put(path)
        summary.dispatched += 1

    def _log_skip(self, message: str) -> None:
        if self.verbose:
            log_info(message)
        else:
            log_debug(message)

    # ------------------------------------------------------------------
    # Workers (consumers)
    # ------------------------------------------------------------------

    def _work(self, work_queue: queue.Queue, result_queue: queue.Queue) -> None:
        try:
            while True:
                path = work_queue.get()
                if path is _END_OF_WORK:
                    return
                result_queue.put(self._check_one(path))
        finally:
            result_queue.put(_WORKER_DONE)

    def _check_one(self, path: str) -> CheckResult:
        """Check 1 file. Loi chi anh huong file do, khong lam dung ca lan chay."""
        try:
            findings = check_file(path, self.dictionary)
        except FileCheckError as e:
            log_error(str(e))
            return CheckResult(path=path, error=str(e))
        except Exception as e:
            log_error(f"Unexpected error checking {path}", e)
            return CheckResult(path=path, error=f"{type(e).__name__}: {e}")
        return CheckResult(path=path, findings=tuple(findings))

    # ------------------------------------------------------------------
    # Collector
    # ------------------------------------------------------------------

    def _collect(self, result_queue: queue.Queue, collected: _Collected) -> None:
        """
        Doc result_queue cho den khi du max_workers marker _WORKER_DONE.

        State nam trong `collected`, nen co the goi lai sau khi bi ngat giua chung.
        """
        while collected.workers_done < self.max_workers:
            item = result_queue.get()
            if item is _WORKER_DONE:
                collected.workers_done += 1
                continue

            collected.received += 1
            if item.failed:
                collected.errored += 1
                continue

            collected.checked += 1
            if item.findings:
                collected.entries[item.path] = item.findings


def check_tree(
    root: Union[str, PathLike],
    dictionary: Dictionary,
    exclude_patterns: Sequence[str] = (),
    *,
    verbose: bool = False,
    max_workers: Optional[int] = None,
    queue_size: int = DEFAULT_QUEUE_SIZE,
) -> ResultAggregate:
    """
    Convenience function: compile patterns roi chay TraversalScheduler.

    Patterns duoc compile truoc khi traverse, nen pattern sai cu phap
    raise ConfigError ma khong co file nao bi doc.

    Args:
        root: File hoac directory can check
        dictionary: Dictionary da load
        exclude_patterns: Glob patterns (match theo base name)
        verbose: Log cac skip events o muc INFO
        max_workers: So worker threads (None = so CPU cores)
        queue_size: Kich thuoc work queue

    Returns:
        ResultAggregate hoan chinh (read-only)
    """
    rules = compile_exclude_rules(exclude_patterns)
    scheduler = TraversalScheduler(
        dictionary,
        rules,
        max_workers=max_workers,
        queue_size=queue_size,
        verbose=verbose,
    )
    return scheduler.run(root)
