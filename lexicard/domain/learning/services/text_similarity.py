"""
Text normalization and edit-distance similarity.

Pure functions shared by answer grading and synonym relevance filtering.
"""

import re

_PUNCTUATION_RE = re.compile(r"[.,!?;:]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Normalize text for comparison.

    Lowercases, trims, deletes ``. , ! ? ; :`` and collapses whitespace runs
    to a single space.
    """
    text = text.lower().strip()
    text = _PUNCTUATION_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text)


def levenshtein_distance(first: str, second: str) -> int:
    """
    Levenshtein edit distance with unit costs for insert, delete and substitute.

    Full dynamic-programming table, kept to two rows.
    """
    if len(first) < len(second):
        first, second = second, first

    previous = list(range(len(second) + 1))
    for i, first_char in enumerate(first, start=1):
        current = [i]
        for j, second_char in enumerate(second, start=1):
            if first_char == second_char:
                current.append(previous[j - 1])
            else:
                current.append(
                    min(
                        previous[j] + 1,  # deletion
                        current[j - 1] + 1,  # insertion
                        previous[j - 1] + 1,  # substitution
                    )
                )
        previous = current

    return previous[-1]


def calculate_similarity(first: str, second: str) -> float:
    """
    Similarity percentage (0-100) between two strings.

    ``100 * (max_len - distance) / max_len``; two empty strings are 100.
    """
    max_len = max(len(first), len(second))
    if max_len == 0:
        return 100.0

    distance = levenshtein_distance(first, second)
    return 100 * (max_len - distance) / max_len


def length_ratio(first: str, second: str) -> float:
    """Ratio of the shorter length to the longer length (1.0 for two empty strings)."""
    longest = max(len(first), len(second))
    if longest == 0:
        return 1.0
    return min(len(first), len(second)) / longest


def contains_either(first: str, second: str) -> bool:
    """Whether either string contains the other."""
    return first in second or second in first
