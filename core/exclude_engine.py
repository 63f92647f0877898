"""
Exclude Engine - Single source of truth cho logic exclude file/folder.

Cung cap:
- build_exclude_patterns(): Tap hop patterns tu VCS dirs + user patterns
- compile_exclude_rules(): Compile patterns thanh ExcludeRules (validate som)
- ExcludeRules.matches(): Quyet dinh "file/folder nay co bi exclude khong"

Patterns dung cu phap gitignore (pathspec "gitwildmatch") nhung chi match
voi BASE NAME cua path, khong phai full path:
- "*.log"          -> exclude moi file .log o bat ky dau
- "node_modules"   -> prune ca subtree node_modules
- "build/"         -> chi match directory ten build, khong match file ten build
- "!keep.log"      -> negation, theo thu tu patterns

Directory bi match se bi prune: noi dung ben trong khong bao gio duoc visit.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import pathspec

from core.errors import ConfigError


# === Cac VCS directories luon bi exclude (tru khi tat default excludes) ===
VCS_DIRS = [".git", ".hg", ".svn"]


def build_exclude_patterns(
    excluded_patterns: Optional[Sequence[str]] = None,
    *,
    use_default_excludes: bool = True,
) -> List[str]:
    """
    Tap hop tat ca exclude patterns.

    Thu tu: VCS dirs > User patterns. User patterns dung sau nen co the
    override (vd: "!.git").

    Args:
        excluded_patterns: Danh sach patterns tu user
        use_default_excludes: Co them VCS_DIRS khong (default: True)

    Returns:
        List patterns theo thu tu uu tien
    """
    patterns: List[str] = []

    if use_default_excludes:
        patterns.extend(VCS_DIRS)

    if excluded_patterns:
        patterns.extend(p.strip() for p in excluded_patterns if p and p.strip())

    return patterns


def split_pattern_arguments(values: Sequence[str]) -> List[str]:
    """
    Tach cac gia tri dang "a,b,c" (tu command line) thanh list patterns.

    >>> split_pattern_arguments(["*.log,*.bin", "node_modules"])
    ['*.log', '*.bin', 'node_modules']
    """
    patterns: List[str] = []
    for value in values:
        patterns.extend(part.strip() for part in value.split(",") if part.strip())
    return patterns


@dataclass(frozen=True)
class ExcludeRules:
    """
    Exclude patterns da compile. Immutable, dung chung giua cac threads.

    Attributes:
        patterns: Patterns goc (theo thu tu)
        spec: pathspec.PathSpec da compile tu patterns
    """

    patterns: tuple
    spec: pathspec.PathSpec

    def matches(self, name: str, is_dir: bool = False) -> bool:
        """
        Kiem tra base name co bi exclude khong.

        Directory duoc match duoi dang "name/" de pattern "build/" chi
        prune directory, con pattern "build" match ca file lan directory.
        """
        if not self.patterns:
            return False
        candidate = f"{name}/" if is_dir else name
        return self.spec.match_file(candidate)


def compile_exclude_rules(patterns: Sequence[str] = ()) -> ExcludeRules:
    """
    Compile patterns thanh ExcludeRules.

    Goi truoc khi bat dau traverse: pattern sai cu phap la loi cau hinh,
    khong phai loi co the recover giua chung.

    Raises:
        ConfigError: Neu co pattern khong hop le
    """
    cleaned = tuple(p for p in patterns if p)
    try:
        spec = pathspec.PathSpec.from_lines("gitwildmatch", cleaned)
    except ValueError as e:
        raise ConfigError(f"Invalid exclude pattern: {e}") from e
    return ExcludeRules(patterns=cleaned, spec=spec)
