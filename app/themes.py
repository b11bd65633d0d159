# app/themes.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Theme:
    name: str
    background: str
    primary: str
    secondary: str
    accent: str
    correct: str = "#22c55e"
    error: str = "#ef4444"


# -------- Built-in themes --------
THEMES: List[Theme] = [
    Theme(
        name="Monkeytype Dark",
        background="#0f1115",
        primary="#e5e7eb",
        secondary="#6b7280",
        accent="#eab308",
    ),
    Theme(
        name="Monkeytype Light",
        background="#fafafa",
        primary="#111111",
        secondary="#6b6b6b",
        accent="#eab308",
        correct="#16a34a",
        error="#dc2626",
    ),
    Theme(
        name="Nord",
        background="#2e3440",
        primary="#eceff4",
        secondary="#88c0d0",
        accent="#ebcb8b",
        correct="#a3be8c",
        error="#bf616a",
    ),
]

DEFAULT_THEME_INDEX = 0


def theme_index(name: str) -> int:
    """Index of the theme called `name` (case-insensitive), or the default."""
    wanted = (name or "").strip().lower()
    for i, t in enumerate(THEMES):
        if t.name.lower() == wanted:
            return i
    return DEFAULT_THEME_INDEX
