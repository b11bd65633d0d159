# core/chrono.py
from PySide6.QtCore import QObject, QTimer, Signal

from app.state import LiveStats, PracticeController


class RealtimeTicker(QObject):
    """Polls the controller on a fixed interval while a run is being timed."""

    ticked = Signal(object)          # LiveStats
    elapsedChanged = Signal(float)   # seconds

    def __init__(self, controller: PracticeController, tick_ms: int = 100, parent=None):
        super().__init__(parent)
        self.controller = controller
        self._tick = QTimer(self)
        self._tick.setInterval(tick_ms)
        self._tick.timeout.connect(self._on_tick)

    def start(self):
        if not self._tick.isActive():
            self._tick.start()

    def stop(self):
        if self._tick.isActive():
            self._tick.stop()

    def _on_tick(self):
        stats: LiveStats = self.controller.tick()
        self.elapsedChanged.emit(stats.elapsed)
        self.ticked.emit(stats)
