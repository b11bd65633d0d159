# ui/main_window.py
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QMenu, QToolButton, QPushButton
)
from PySide6.QtGui import QAction
from PySide6.QtCore import Qt

from app.state import PracticeController, SessionResult
from app.themes import THEMES, theme_index
from services.text_generator import GeneratorKind
from ui.session_summary import SessionSummary
from ui.test_ui import TestUI


class MainWindow(QMainWindow):
    def __init__(self, controller: PracticeController):
        super().__init__()
        self.setWindowTitle("Typetutor")
        self.resize(1200, 720)
        self.controller = controller
        self.theme_idx = theme_index(controller.settings.theme)

        root = QWidget(self)
        root_v = QVBoxLayout(root)
        root_v.setContentsMargins(16, 40, 16, 16)
        root_v.setSpacing(24)
        self._build_top_bar(root_v)

        self.test = TestUI(controller, self)
        self.test.finished.connect(self._on_test_finished)
        self.test.restartRequested.connect(self._restart)

        test_h = QHBoxLayout()
        test_h.addStretch(1)
        test_h.addWidget(self.test, 1)
        test_h.addStretch(1)
        root_v.addLayout(test_h, 1)
        self.setCentralWidget(root)

        # TestUI must stay the keyboard focus receiver
        self.setFocusPolicy(Qt.NoFocus)
        self.menuBar().setVisible(False)
        self._apply_theme(self.theme_idx)
        self._new_test(controller.kind)

    # ---------------- Top Bar ----------------
    def _build_top_bar(self, parent_layout):
        bar = QWidget(self)
        bar.setObjectName("TopBar")
        h = QHBoxLayout(bar)
        h.setContentsMargins(14, 16, 14, 16)
        h.setSpacing(10)

        self.theme_menu = QMenu(self)
        for i, t in enumerate(THEMES):
            act = QAction(t.name, self)
            act.triggered.connect(lambda _=False, idx=i: self._apply_theme(idx))
            self.theme_menu.addAction(act)
        theme_btn = QToolButton(bar)
        theme_btn.setText("Theme")
        theme_btn.setObjectName("TopBtn")
        theme_btn.setMenu(self.theme_menu)
        theme_btn.setPopupMode(QToolButton.InstantPopup)
        theme_btn.setFocusPolicy(Qt.NoFocus)
        h.addWidget(theme_btn)

        h.addStretch(1)

        # one checkable button per generator variant
        self.kind_buttons = {}
        for kind in GeneratorKind:
            btn = QPushButton(kind.label, bar)
            btn.setCheckable(True)
            btn.setObjectName("TopBtn")
            btn.setFocusPolicy(Qt.NoFocus)
            btn.clicked.connect(lambda _=False, k=kind: self._new_test(k))
            self.kind_buttons[kind] = btn
            h.addWidget(btn)

        h.addStretch(1)

        btn_restart = QPushButton("Restart", bar)
        btn_restart.setObjectName("TopBtn")
        btn_restart.setFocusPolicy(Qt.NoFocus)
        btn_restart.clicked.connect(self._restart)
        h.addWidget(btn_restart)

        parent_layout.addWidget(bar)

        self._topbar_qss = """
        QWidget#TopBar {
            background: rgba(255,255,255,0.04);
            border: 1px solid rgba(255,255,255,0.08);
            border-radius: 14px;
        }
        QPushButton#TopBtn, QToolButton#TopBtn {
            background: transparent;
            border: 1px solid rgba(255,255,255,0.10);
            border-radius: 9px;
            padding: 6px 12px;
        }
        QPushButton#TopBtn:hover, QToolButton#TopBtn:hover {
            border-color: rgba(255,255,255,0.32);
            background: rgba(255,255,255,0.06);
        }
        QPushButton#TopBtn:checked {
            border-color: rgba(234,179,8,0.8);
        }
        QToolButton::menu-indicator { image: none; width: 0px; height: 0px; }
        """

    # ---------------- Theme ----------------
    def _apply_theme(self, idx):
        theme = THEMES[idx]
        self.theme_idx = idx
        if hasattr(self, "test"):
            self.test.set_theme(theme)
        self.setStyleSheet(
            f"""
            QWidget {{ background: {theme.background}; color: {theme.primary}; }}
            QLabel#lblLine {{ color: {theme.primary}; }}
            QLabel#lblTimer, QLabel#lblAcc, QLabel#lblHint {{ color: {theme.secondary}; }}
            QLabel#lblWPM   {{ color: {theme.accent}; }}
            {self._topbar_qss}
            """
        )

    # ---------------- Runs ----------------
    def _new_test(self, kind):
        text = self.controller.new_test(kind)
        for k, btn in self.kind_buttons.items():
            btn.setChecked(k is self.controller.kind)
        self.test.load_test(text)
        self.setWindowTitle(f"Typetutor - {self.controller.kind.label}")

    def _restart(self):
        self._new_test(self.controller.kind)

    def _on_test_finished(self, result: SessionResult):
        self.setWindowTitle(f"Typetutor - {result.wpm} WPM, {result.accuracy:.1f}%")
        SessionSummary(
            result,
            times=list(self.test.wpm_times),
            wpms=list(self.test.wpm_values),
            line_color=THEMES[self.theme_idx].accent,
            parent=self,
        ).exec()
        self.test.setFocus()
