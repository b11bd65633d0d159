# services/text_generator.py
from __future__ import annotations
import logging
import operator
import random
from enum import IntEnum
from typing import Iterable, Optional, Tuple

from app.catalog import SENTENCES, WORDS
from app.errors import ConfigError
from app.validation import Word, WordCategory

logger = logging.getLogger(__name__)


class GeneratorKind(IntEnum):
    RANDOM_WORDS = 0
    SENTENCES = 1
    MIXED_CASE = 2

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value) -> "GeneratorKind":
        """Accept a member, its int value or its name ("mixed-case", "Sentences")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ConfigError(f"Unknown generator kind: {value}") from None
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_").replace(" ", "_")
            if key in cls.__members__:
                return cls[key]
        raise ConfigError(f"Unknown generator kind: {value!r}")


_LABELS = {
    GeneratorKind.RANDOM_WORDS: "Random Words",
    GeneratorKind.SENTENCES: "Sentences",
    GeneratorKind.MIXED_CASE: "Mixed Case",
}


def _as_count(count) -> int:
    try:
        return operator.index(count)
    except TypeError:
        return 0


class TextGenerator:
    """
    Draws `count` catalog entries uniformly, with replacement, and joins them
    with single spaces. Subclasses pick the catalog/category and may reshape
    each emitted token via `_emit`.

    Each instance seeds its own `random.Random` once; pass `rng` to make the
    output reproducible.
    """

    kind = GeneratorKind.RANDOM_WORDS
    category = WordCategory.GENERAL

    def __init__(self, entries: Iterable[str] = (), rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.catalog: Tuple[str, ...] = self._build_catalog(entries)
        logger.debug("%s ready with %d entries", type(self).__name__, len(self.catalog))

    def _build_catalog(self, entries: Iterable[str]) -> Tuple[str, ...]:
        kept = []
        for text in entries:
            word = Word(text, self.category)
            if word.is_valid():
                kept.append(word.text)
            else:
                logger.debug("Dropping %s entry %r", self.category.value, text)
        return tuple(kept)

    def _emit(self, entry: str) -> str:
        return entry

    def generate_text(self, count) -> str:
        n = _as_count(count)
        if n <= 0 or not self.catalog:
            return ""
        return " ".join(self._emit(self.rng.choice(self.catalog)) for _ in range(n))


class RandomWordGenerator(TextGenerator):
    def __init__(self, words: Iterable[str] = WORDS, rng: Optional[random.Random] = None):
        super().__init__(words, rng)


class SentenceGenerator(TextGenerator):
    kind = GeneratorKind.SENTENCES
    category = WordCategory.SENTENCE

    def __init__(self, sentences: Iterable[str] = SENTENCES, rng: Optional[random.Random] = None):
        super().__init__(sentences, rng)


class MixedCaseGenerator(TextGenerator):
    kind = GeneratorKind.MIXED_CASE

    def __init__(self, words: Iterable[str] = WORDS, rng: Optional[random.Random] = None):
        super().__init__(words, rng)

    def _emit(self, entry: str) -> str:
        # every character flips a fair coin, whatever its original case
        return "".join(
            ch.upper() if self.rng.getrandbits(1) else ch.lower() for ch in entry
        )


_VARIANTS = {
    GeneratorKind.RANDOM_WORDS: RandomWordGenerator,
    GeneratorKind.SENTENCES: SentenceGenerator,
    GeneratorKind.MIXED_CASE: MixedCaseGenerator,
}


def make_generator(kind, rng: Optional[random.Random] = None) -> TextGenerator:
    """Build the generator for `kind`; unknown kinds fall back to random words."""
    try:
        kind = GeneratorKind.parse(kind)
    except ConfigError:
        logger.warning("Unknown generator kind %r, using random words", kind)
        kind = GeneratorKind.RANDOM_WORDS
    return _VARIANTS[kind](rng=rng)
