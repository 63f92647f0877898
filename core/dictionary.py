"""
Dictionary - Tap hop tu dung chinh ta, immutable va share giua cac workers.

Cung cap:
- Dictionary: frozenset cac tu lowercase + index theo do dai tu
- load_csv_dictionary(): CSV co header, tu nam o cot dau tien
- load_word_list(): Moi dong mot tu, bo qua dong trong va comment (#)
- load_default_dictionary(): Dictionary dong goi san (core/data/dictionary.csv)
- load_dictionary(): Chon loader theo extension, merge personal + system word list

Dictionary chi duoc tao mot lan truoc khi traverse va khong bao gio bi ghi
sau do, nen cac worker threads doc dong thoi ma khong can lock.
"""

import csv
from importlib import resources
from os import PathLike
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Sequence, TextIO, Tuple, Union

from config.paths import SYSTEM_WORD_LISTS
from core.errors import DictionaryError
from core.logging_config import log_info, log_warning

PathType = Union[str, PathLike]

# Dictionary mac dinh dong goi kem package
DEFAULT_DICTIONARY_PACKAGE = "core.data"
DEFAULT_DICTIONARY_RESOURCE = "dictionary.csv"


class Dictionary:
    """
    Tap tu hop le cho mot lan check.

    Moi entry duoc strip + lowercase luc tao. Membership test khong phan biet
    hoa thuong: `"Hello" in dictionary` tuong duong `"hello" in dictionary`.

    Usage:
        dictionary = Dictionary(["Hello", "world"])
        "hello" in dictionary            # True
        list(dictionary.candidates(5, 2))  # cac tu dai 3..7 ky tu
    """

    __slots__ = ("_words", "_by_length")

    def __init__(self, words: Iterable[str] = ()):
        normalized = frozenset(w.strip().lower() for w in words if w and w.strip())
        self._words = normalized

        by_length: Dict[int, list] = {}
        for word in normalized:
            by_length.setdefault(len(word), []).append(word)
        self._by_length: Dict[int, Tuple[str, ...]] = {
            length: tuple(sorted(bucket)) for length, bucket in by_length.items()
        }

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words)"

    @property
    def words(self) -> frozenset:
        return self._words

    def candidates(self, length: int, max_delta: int) -> Iterator[str]:
        """
        Cac tu co do dai trong [length - max_delta, length + max_delta].

        Edit distance luon >= chenh lech do dai, nen cac tu ngoai khoang nay
        khong bao gio la suggestion hop le.
        """
        for size in range(max(0, length - max_delta), length + max_delta + 1):
            yield from self._by_length.get(size, ())

    def merged(self, words: Iterable[str]) -> "Dictionary":
        """Tao Dictionary moi gom cac tu hien tai va `words`."""
        return Dictionary([*self._words, *words])


def _read_csv_words(f: TextIO, source: str) -> Dictionary:
    reader = csv.reader(f)
    try:
        next(reader)
    except StopIteration:
        raise DictionaryError(
            f"Could not read dictionary header: {source} is empty"
        ) from None
    return Dictionary(row[0] for row in reader if row)


def _read_word_list(f: TextIO) -> Dictionary:
    return Dictionary(
        word
        for word in (line.strip() for line in f)
        if word and not word.startswith("#")
    )


def load_csv_dictionary(path: PathType) -> Dictionary:
    """
    Load dictionary tu CSV: dong dau la header, tu nam o cot dau tien.

    File phai la UTF-8.

    Raises:
        DictionaryError: File khong mo duoc, rong (khong co header),
                         khong phai UTF-8 hoac CSV loi
    """
    try:
        with open(path, newline="", encoding="utf-8") as f:
            return _read_csv_words(f, str(path))
    except OSError as e:
        raise DictionaryError(f"Could not open dictionary {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DictionaryError(f"Dictionary {path} is not valid UTF-8: {e}") from e
    except csv.Error as e:
        raise DictionaryError(f"Error reading dictionary record in {path}: {e}") from e


def load_word_list(path: PathType) -> Dictionary:
    """
    Load word list: moi dong mot tu, bo qua dong trong va dong bat dau bang #.

    Raises:
        DictionaryError: File khong mo/doc duoc hoac khong phai UTF-8
    """
    try:
        with open(path, encoding="utf-8") as f:
            return _read_word_list(f)
    except OSError as e:
        raise DictionaryError(f"Could not open word list {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DictionaryError(f"Word list {path} is not valid UTF-8: {e}") from e


def load_default_dictionary() -> Dictionary:
    """
    Load dictionary mac dinh duoc dong goi kem package (core/data/dictionary.csv).

    Raises:
        DictionaryError: Neu package data bi thieu hoac hong
    """
    resource = resources.files(DEFAULT_DICTIONARY_PACKAGE).joinpath(
        DEFAULT_DICTIONARY_RESOURCE
    )
    try:
        with resource.open("r", encoding="utf-8", newline="") as f:
            return _read_csv_words(f, DEFAULT_DICTIONARY_RESOURCE)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise DictionaryError(f"Could not load bundled dictionary: {e}") from e


def find_system_word_list() -> Optional[Path]:
    """Tim system word list dau tien ton tai (vd: /usr/share/dict/words)."""
    for candidate in SYSTEM_WORD_LISTS:
        if candidate.is_file():
            return candidate
    return None


def load_dictionary(
    path: Optional[PathType] = None,
    personal: Sequence[PathType] = (),
    *,
    include_system: bool = False,
) -> Dictionary:
    """
    Load dictionary chinh va merge cac dictionary bo sung.

    Args:
        path: File .csv (CSV co header) hoac word list. None -> dictionary dong goi san
        personal: Cac word list bo sung (tu rieng cua project)
        include_system: Merge them system word list (neu may co)

    Returns:
        Dictionary hoan chinh cho lan check

    Raises:
        DictionaryError: Khong load duoc bat ky file nao
    """
    if path:
        source = Path(path)
        if source.suffix.lower() == ".csv":
            dictionary = load_csv_dictionary(source)
        else:
            dictionary = load_word_list(source)
        log_info(f"Loaded {len(dictionary)} words from {source}")
    else:
        dictionary = load_default_dictionary()
        log_info(f"Loaded {len(dictionary)} words from bundled dictionary")

    if include_system:
        system_list = find_system_word_list()
        if system_list is None:
            log_warning(
                "No system word list found "
                f"(looked in: {', '.join(str(p) for p in SYSTEM_WORD_LISTS)})"
            )
        else:
            extra = load_word_list(system_list)
            dictionary = dictionary.merged(extra)
            log_info(f"Loaded {len(extra)} system words from {system_list}")

    for extra_path in personal:
        extra = load_word_list(extra_path)
        dictionary = dictionary.merged(extra)
        log_info(f"Loaded {len(extra)} personal words from {extra_path}")

    return dictionary
