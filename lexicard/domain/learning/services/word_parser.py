"""
Domain service for splitting pasted text into vocabulary items.

Handles several input formats:
- Newline separated: "word1\\nword2\\nword3"
- Comma separated: "word1, word2, word3"
- Space separated: "word1 word2 word3"
- Dot separated: "word1. word2. word3"
- Phrases: "good morning, how are you"
- Any mix of the above, one format per line
"""

import re
from typing import Final

INPUT_EXAMPLES: Final[dict[str, str]] = {
    "newline": "hello\nworld\ncomputer",
    "comma": "hello, world, computer",
    "space": "hello world computer",
    "dot": "hello. world. computer",
    "phrases": "good morning, how are you, thank you very much",
    "mixed": "hello, world\ncomputer\ngood morning",
}

_TRAILING_PERIOD_RE = re.compile(r"\.\s*$")
_SENTENCE_SPLIT_RE = re.compile(r"\.\s+")

# A line with more words than this is always a phrase
_MAX_LIST_WORDS = 4
# A line splits into single words only up to this many words...
_MAX_SPLIT_WORDS = 3
# ...and only when the words are shorter than this on average
_SHORT_WORD_LENGTH = 8


class WordParser:
    """
    Splits free-form text into an ordered, deduplicated list of tokens.

    Each line is handled by exactly one rule, in priority order:
    1. Comma separated parts
    2. Period separated parts (unless the only period ends the line)
    3. Whitespace separated words or a single phrase, by heuristic
    4. The whole line
    """

    def parse(self, text: str) -> list[str]:
        """
        Parse text into tokens.

        Args:
            text: Raw text, possibly multi-line

        Returns:
            Trimmed, non-empty tokens in first-seen order without duplicates
        """
        if not text or not text.strip():
            return []

        lines = [line.strip() for line in text.split("\n")]

        words: list[str] = []
        for line in lines:
            if line:
                words.extend(self._parse_line(line))

        seen: set[str] = set()
        tokens: list[str] = []
        for word in words:
            token = word.strip()
            if token and token not in seen:
                seen.add(token)
                tokens.append(token)
        return tokens

    def _parse_line(self, line: str) -> list[str]:
        if "," in line:
            return [part.strip() for part in line.split(",") if part.strip()]

        if "." in line and not _TRAILING_PERIOD_RE.search(line):
            parts = (part.strip().removesuffix(".") for part in _SENTENCE_SPLIT_RE.split(line))
            return [part for part in parts if part]

        if " " in line:
            return self._split_words_or_phrase(line)

        return [line]

    def _split_words_or_phrase(self, line: str) -> list[str]:
        parts = line.split()
        if len(parts) > _MAX_LIST_WORDS:
            return [line]

        average_length = sum(len(part) for part in parts) / len(parts)
        if len(parts) <= _MAX_SPLIT_WORDS and average_length < _SHORT_WORD_LENGTH:
            return parts

        return [line]


def parse_words(text: str) -> list[str]:
    """Split pasted text into vocabulary tokens."""
    return WordParser().parse(text)
