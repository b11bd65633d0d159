# ui/session_summary.py
from __future__ import annotations
from typing import Sequence

from PySide6.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton
import pyqtgraph as pg

from app.state import SessionResult
from utils.graph_helper import setup_wpm_plot, update_curve


class SessionSummary(QDialog):
    """Final stats plus a smoothed WPM-over-time curve."""

    def __init__(
        self,
        result: SessionResult,
        times: Sequence[float],
        wpms: Sequence[float],
        line_color: str = "#eab308",
        parent=None,
    ):
        super().__init__(parent)
        self.setWindowTitle("Session Summary")
        self.resize(720, 420)

        root = QVBoxLayout(self)
        root.addWidget(QLabel(f"WPM: {result.wpm}"))
        root.addWidget(QLabel(f"Accuracy: {result.accuracy:.1f}%"))
        root.addWidget(QLabel(f"Time: {result.elapsed:.1f}s"))
        root.addWidget(QLabel(
            f"Characters: {result.correct_chars} correct / {result.total_chars} typed"
            f"  ({result.generator.label})"
        ))

        plot = pg.PlotWidget()
        curve = setup_wpm_plot(plot, line_color)
        update_curve(curve, times, wpms)
        root.addWidget(plot, stretch=1)

        btn = QPushButton("OK", self)
        btn.clicked.connect(self.accept)
        root.addWidget(btn)
