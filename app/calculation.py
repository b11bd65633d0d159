from typing import List, Sequence
import math

CHARS_PER_WORD = 5.0


def accuracy_percent(correct: int, total: int) -> float:
    """Share of correct characters as a percentage; nothing typed counts as 100."""
    if total <= 0:
        return 100.0
    return (correct / total) * 100.0


def words_per_minute(correct: int, seconds: float) -> float:
    # WPM = (correct_chars / 5) / (seconds / 60)
    if not seconds > 0:
        return 0.0
    return (correct / CHARS_PER_WORD) / (seconds / 60.0)


def round_half_up(value: float) -> int:
    """Round to the nearest int, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def smooth(values: Sequence[float], factor: float = 0.25) -> List[float]:
    out, last = [], None
    for v in values:
        last = v if last is None else last + factor * (v - last)
        out.append(last)
    return out
