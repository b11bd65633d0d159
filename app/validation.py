# app/validation.py
from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum

MAX_WORD_LENGTH = 6
MAX_SENTENCE_LENGTH = 200

# C0 and C1 control characters
_CONTROL_CHARS = re.compile(r"[\x00-\x1F\x7F-\x9F]")


class WordCategory(str, Enum):
    GENERAL = "general"
    SENTENCE = "sentence"


@dataclass(frozen=True)
class Word:
    text: str
    category: WordCategory = WordCategory.GENERAL

    @property
    def length(self) -> int:
        return len(self.text)

    def is_valid(self) -> bool:
        limit = MAX_SENTENCE_LENGTH if self.category is WordCategory.SENTENCE else MAX_WORD_LENGTH
        return 0 < self.length <= limit


def sanitize_input(typed: str) -> str:
    """Strip control characters from raw typed text, keeping spaces."""
    if not typed:
        return ""
    return _CONTROL_CHARS.sub("", typed)
