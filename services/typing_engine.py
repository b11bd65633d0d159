# services/typing_engine.py
from dataclasses import dataclass

from app.calculation import accuracy_percent, round_half_up, words_per_minute


@dataclass
class TypingStats:
    total_chars: int = 0
    correct_chars: int = 0

    @property
    def errors(self) -> int:
        return self.total_chars - self.correct_chars


def count_correct(target: str, typed: str) -> int:
    """Positions where `typed` matches `target`, up to the shorter length."""
    return sum(1 for a, b in zip(target, typed) if a == b)


class TypingSession:
    """
    Target text plus the latest snapshot of what the user typed.

    Every `update_input` recomputes the counts from scratch, so backspaces and
    other edits need no special handling; callers must feed snapshots in
    keystroke order.
    """

    def __init__(self):
        self.reset()

    @property
    def target_text(self) -> str:
        return self._target

    @property
    def user_input(self) -> str:
        return self._typed

    @property
    def correct_chars(self) -> int:
        return self.stats.correct_chars

    @property
    def total_chars(self) -> int:
        return self.stats.total_chars

    @property
    def errors(self) -> int:
        return self.stats.errors

    @property
    def is_active(self) -> bool:
        return self._active

    def start_session(self, text: str):
        self._target = text or ""
        self._typed = ""
        self.stats = TypingStats()
        self._active = True

    def update_input(self, typed: str):
        typed = typed or ""
        self._typed = typed
        self.stats = TypingStats(
            total_chars=len(typed),
            correct_chars=count_correct(self._target, typed),
        )

    def accuracy(self) -> float:
        return accuracy_percent(self.stats.correct_chars, self.stats.total_chars)

    def wpm(self, seconds_elapsed: float) -> int:
        if not seconds_elapsed > 0:
            return 0
        return round_half_up(words_per_minute(self.stats.correct_chars, seconds_elapsed))

    def reset(self):
        self._target = ""
        self._typed = ""
        self.stats = TypingStats()
        self._active = False
