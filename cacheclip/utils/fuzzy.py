"""Fuzzy subsequence matching.

Smith-Waterman style scoring in the spirit of skim/fzf: every query
character must appear in the candidate in order; matches score higher
when they are contiguous or start a word (after whitespace, punctuation,
or on a camelCase / digit transition), and gaps between matched
characters are penalised.

Matching is smart-case: case-insensitive unless the query contains an
uppercase character. An empty query matches anything with score 0.
"""

from typing import List, Optional

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1

BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_NON_WORD = SCORE_MATCH // 2
BONUS_CAMEL = BONUS_BOUNDARY + SCORE_GAP_EXTENSION
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2

_NO_MATCH = float("-inf")

# Character classes
_WHITE = 0
_NON_WORD = 1
_LOWER = 2
_UPPER = 3
_NUMBER = 4


def _char_class(ch: str) -> int:
    if ch.isspace():
        return _WHITE
    if ch.isdigit():
        return _NUMBER
    if ch.isupper():
        return _UPPER
    if ch.isalpha():
        return _LOWER
    return _NON_WORD


def _bonus(prev_class: int, cur_class: int) -> int:
    if cur_class in (_WHITE, _NON_WORD):
        return BONUS_NON_WORD
    if prev_class in (_WHITE, _NON_WORD):
        return BONUS_BOUNDARY
    if prev_class == _LOWER and cur_class == _UPPER:
        return BONUS_CAMEL
    if prev_class != _NUMBER and cur_class == _NUMBER:
        return BONUS_CAMEL
    return 0


def _position_bonuses(choice: str) -> List[int]:
    bonuses = []
    prev_class = _WHITE
    for ch in choice:
        cur_class = _char_class(ch)
        bonuses.append(_bonus(prev_class, cur_class))
        prev_class = cur_class
    return bonuses


def _is_subsequence(choice: str, pattern: str) -> bool:
    it = iter(choice)
    return all(ch in it for ch in pattern)


class FuzzyMatcher:
    """Scores a pattern against candidate strings.

    ``fuzzy_match`` returns ``None`` when the pattern is not a subsequence
    of the candidate, otherwise an integer score (higher is better).
    """

    def __init__(self, smart_case: bool = True):
        self.smart_case = smart_case

    def _case_sensitive(self, pattern: str) -> bool:
        if not self.smart_case:
            return False
        return any(ch.isupper() for ch in pattern)

    def fuzzy_match(self, choice: str, pattern: str) -> Optional[int]:
        if not pattern:
            return 0

        if self._case_sensitive(pattern):
            haystack, needle = choice, pattern
        else:
            haystack, needle = choice.lower(), pattern.lower()

        # Cheap rejection before the quadratic pass
        if len(needle) > len(haystack) or not _is_subsequence(haystack, needle):
            return None

        # lower() changes the length of a few code points
        bonuses = _position_bonuses(choice if len(choice) == len(haystack) else haystack)
        m = len(haystack)

        # prev_row[j]: best score with needle[:i] matched and needle[i-1] at j
        prev_row: List[float] = []
        for i, pc in enumerate(needle):
            row = [_NO_MATCH] * m
            # best of prev_row[k] for k < j - 1, with the gap k+1..j-1 penalised
            gapped = _NO_MATCH
            for j in range(m):
                if i > 0 and j >= 2:
                    gapped = max(gapped + SCORE_GAP_EXTENSION, prev_row[j - 2] + SCORE_GAP_START)

                if haystack[j] != pc:
                    continue

                if i == 0:
                    row[j] = SCORE_MATCH + bonuses[j] * BONUS_FIRST_CHAR_MULTIPLIER
                    continue

                best = _NO_MATCH
                if j >= 1 and prev_row[j - 1] != _NO_MATCH:
                    best = prev_row[j - 1] + SCORE_MATCH + max(bonuses[j], BONUS_CONSECUTIVE)
                if gapped != _NO_MATCH:
                    best = max(best, gapped + SCORE_MATCH + bonuses[j])
                row[j] = best
            prev_row = row

        score = max(prev_row)
        if score == _NO_MATCH:
            return None
        return int(score)

    def is_match(self, choice: str, pattern: str) -> bool:
        """Same verdict as ``fuzzy_match(...) is not None`` without scoring."""
        if not pattern:
            return True
        if self._case_sensitive(pattern):
            return _is_subsequence(choice, pattern)
        return _is_subsequence(choice.lower(), pattern.lower())
