"""
File Checker - Check chinh ta mot file.

Doc file theo tung dong (streaming, khong load ca file vao memory),
tokenize, kiem tra membership trong dictionary va tao Finding cho moi tu
khong co trong dictionary.
"""

from os import PathLike
from typing import Dict, List, Union

from core.dictionary import Dictionary
from core.errors import FileCheckError
from core.suggestions import suggest
from core.tokenizer import tokenize
from core.types import Finding


def check_file(path: Union[str, PathLike], dictionary: Dictionary) -> List[Finding]:
    """
    Check mot file va tra ve findings theo thu tu dong, roi cot.

    Bytes khong decode duoc (UTF-8) thanh U+FFFD, khong bao gio la word character.

    Args:
        path: Duong dan file text
        dictionary: Dictionary da load (read-only)

    Returns:
        List Finding (rong neu khong co typo)

    Raises:
        FileCheckError: Neu mo hoac doc file that bai
    """
    findings: List[Finding] = []
    # Cung mot typo lap lai trong file chi tinh suggestions mot lan
    suggestion_cache: Dict[str, tuple] = {}

    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line_number, line in enumerate(f, start=1):
                for token in tokenize(line.rstrip("\r\n"), line_number):
                    lowered = token.text.lower()
                    if lowered in dictionary:
                        continue

                    suggestions = suggestion_cache.get(lowered)
                    if suggestions is None:
                        suggestions = tuple(suggest(lowered, dictionary))
                        suggestion_cache[lowered] = suggestions

                    findings.append(
                        Finding(
                            word=token.text,
                            line=token.line,
                            column=token.column,
                            suggestions=suggestions,
                        )
                    )
    except OSError as e:
        raise FileCheckError(str(path), e) from e

    return findings
