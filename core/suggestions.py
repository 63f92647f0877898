"""
Suggestion Engine - Tim cac tu trong dictionary gan voi mot tu sai chinh ta.

"Gan" = Levenshtein edit distance (insert, delete, substitute, moi phep ton 1)
<= MAX_EDIT_DISTANCE giua tu da lowercase va entry cua dictionary.

Chi chay khi token khong co trong dictionary, khong chay cho moi token.
"""

from typing import Optional

from core.dictionary import Dictionary

# Nguong edit distance co dinh
MAX_EDIT_DISTANCE = 2


def levenshtein_distance(a: str, b: str, limit: Optional[int] = None) -> int:
    """
    Tinh Levenshtein edit distance bang dynamic programming.

    So sanh tren code points (str cua Python), khong phai bytes, nen dung voi
    ky tu multi-byte. Chi giu 2 hang cua bang DP (len(a)+1) x (len(b)+1).

    Args:
        a: Chuoi thu nhat
        b: Chuoi thu hai
        limit: Neu co, dung som va tra ve limit + 1 khi moi o cua mot hang
               deu > limit (distance chac chan > limit)

    Returns:
        Edit distance, hoac limit + 1 neu vuot limit
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous_row = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current_row = [i]
        for j, char_b in enumerate(b, start=1):
            deletion = previous_row[j] + 1
            insertion = current_row[j - 1] + 1
            substitution = previous_row[j - 1] + (char_a != char_b)
            current_row.append(min(deletion, insertion, substitution))

        if limit is not None and min(current_row) > limit:
            return limit + 1
        previous_row = current_row

    return previous_row[-1]


def suggest(word: str, dictionary: Dictionary) -> list[str]:
    """
    Tra ve tat ca entry cua dictionary co edit distance <= MAX_EDIT_DISTANCE.

    Cac entry co do dai chenh lech > nguong bi loai truoc khi tinh distance
    (edit distance luon >= chenh lech do dai).

    Args:
        word: Tu can goi y (hoa thuong bat ky)
        dictionary: Dictionary da load

    Returns:
        List sap xep theo (distance, tu). Khong bao gio tra ve None.
    """
    lowered = word.lower()
    if not lowered:
        return []

    scored: list[tuple[int, str]] = []
    for entry in dictionary.candidates(len(lowered), MAX_EDIT_DISTANCE):
        distance = levenshtein_distance(lowered, entry, limit=MAX_EDIT_DISTANCE)
        if distance <= MAX_EDIT_DISTANCE:
            scored.append((distance, entry))

    scored.sort()
    return [entry for _, entry in scored]
