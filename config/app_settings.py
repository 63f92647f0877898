"""
AppSettings - Typed settings dataclass cho spellscan.

Thay the Dict[str, Any] bang dataclass co type hints, validation va default values.
Tat ca settings duoc truy cap qua typed fields thay vi string keys.

Modules:
- AppSettings: Dataclass chua toan bo settings cua mot lan check
- from_dict(): Tao AppSettings tu dict (doc tu settings.json)
- with_overrides(): Ghi de cac field bang gia tri tu command line

Su dung:
    settings = load_app_settings()
    patterns = settings.get_excluded_patterns_list()
"""

import typing
from dataclasses import dataclass, field, fields, replace
from typing import Any


# So path toi da nam cho trong work queue (backpressure cho walker)
DEFAULT_QUEUE_SIZE = 100


@dataclass
class AppSettings:
    """
    Typed settings cho spellscan.

    Moi field tuong ung voi mot key trong settings.json.
    Default values duoc su dung khi settings.json chua co key tuong ung.
    """

    # --- Dictionary Settings ---
    # Duong dan dictionary chinh (.csv hoac word list). Rong = dictionary dong goi san
    dictionary_path: str = ""
    # Cac personal dictionaries (word list, moi dong mot tu)
    personal_dictionaries: list[str] = field(default_factory=list)
    # Merge them system word list (/usr/share/dict/words) neu may co
    use_system_word_list: bool = False

    # --- Traversal Settings ---
    # Exclude patterns, moi dong mot pattern (match theo base name)
    excluded_patterns: str = ""
    # Co tu dong exclude .git/.hg/.svn hay khong
    use_default_excludes: bool = True
    # So worker threads, 0 = tu dong theo so CPU
    max_workers: int = 0
    # Kich thuoc work queue
    queue_size: int = DEFAULT_QUEUE_SIZE

    # --- Output Settings ---
    # Log cac file bi skip o muc INFO
    verbose: bool = False
    # "txt", "html" hoac rong (tu suy ra tu output path)
    output_format: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppSettings":
        """
        Tao AppSettings tu dict, chi lay cac keys trung voi field names.

        Value co type khong khop voi field declaration se bi bo qua
        va dung default thay the.

        Args:
            data: Dict settings (thuong tu settings.json)

        Returns:
            AppSettings instance voi values tu dict, fallback ve defaults
        """
        field_types: dict[str, Any] = {
            f.name: f.type for f in cls.__dataclass_fields__.values()
        }

        filtered: dict[str, Any] = {}
        for key, value in data.items():
            if key not in field_types:
                continue

            expected_type = field_types[key]

            # Type annotation dang string (forward ref)
            if isinstance(expected_type, str):
                type_map = {"str": str, "bool": bool, "int": int, "list[str]": list}
                expected_type = type_map.get(expected_type, str)

            # isinstance(True, int) == True, nhung o day bool khong phai int hop le
            if expected_type is int and isinstance(value, bool):
                continue

            origin = typing.get_origin(expected_type)
            check_type = origin if origin is not None else expected_type

            if not isinstance(value, check_type):
                continue

            if check_type is list and not all(isinstance(v, str) for v in value):
                continue

            filtered[key] = value

        return cls(**filtered)

    def get_excluded_patterns_list(self) -> list[str]:
        """
        Parse excluded_patterns string thanh list cac patterns.

        Loai bo dong trong va comments (bat dau bang #).

        Returns:
            List patterns da normalize
        """
        return [
            line.strip()
            for line in self.excluded_patterns.splitlines()
            if line.strip() and not line.strip().startswith("#")
        ]

    def with_overrides(self, **overrides: Any) -> "AppSettings":
        """
        Tra ve ban sao voi cac field duoc override (vd: tu command line).

        Value None duoc hieu la "khong override".
        """
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items() if k in known and v is not None}
        return replace(self, **changes)
