"""
Qt GUI for the password generator.

Single window: length slider, character class toggles, output field,
Generate / Copy buttons and a short-lived notification banner.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont, QGuiApplication, QKeySequence, QShortcut, QShowEvent
from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QLineEdit,
    QCheckBox,
    QGroupBox,
)

from .clipboard import ClipboardUnavailable, Notification, copy_with_fallback
from .config import (
    GenerationConfig,
    DEFAULT_LENGTH,
    MIN_UI_LENGTH,
    MAX_UI_LENGTH,
)
from .logging_config import setup_logging
from .session import GeneratorSession

logger = logging.getLogger(__name__)

NOTIFICATION_TIMEOUT_MS = 3000
COPY_FLASH_MS = 500


class PasswordWindow(QMainWindow):
    """
    Main window: controls + password display.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Password Generator")
        self._shown_once = False

        self.session = GeneratorSession(
            notify=self.show_notification,
            copier=self._copy_text,
        )

        self._notification_timer = QTimer(self)
        self._notification_timer.setSingleShot(True)
        self._notification_timer.timeout.connect(self._hide_notification)

        self._copy_flash_timer = QTimer(self)
        self._copy_flash_timer.setSingleShot(True)
        self._copy_flash_timer.timeout.connect(self._end_copy_flash)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        layout.addWidget(self._build_password_group())
        layout.addWidget(self._build_config_group())
        layout.addWidget(self._build_notification_label())
        self.setCentralWidget(central)

        # Enter generates, except while the output field has focus.
        for key in ("Return", "Enter"):
            shortcut = QShortcut(QKeySequence(key), self)
            shortcut.activated.connect(self._on_enter_pressed)

        self._apply_style()

    # -- groups --

    def _build_password_group(self) -> QGroupBox:
        group = QGroupBox("Password")
        layout = QHBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self.password_field = QLineEdit()
        self.password_field.setReadOnly(True)
        pw_font = QFont("Consolas")
        pw_font.setPointSize(14)
        self.password_field.setFont(pw_font)
        self.password_field.setPlaceholderText("Click Generate to create a password...")

        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(self.on_copy_clicked)

        layout.addWidget(self.password_field, 1)
        layout.addWidget(self.copy_button)
        group.setLayout(layout)
        return group

    def _build_config_group(self) -> QGroupBox:
        group = QGroupBox("Options")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        length_row = QHBoxLayout()
        length_row.addWidget(QLabel("Password length"))
        self.length_slider = QSlider(Qt.Horizontal)
        self.length_slider.setRange(MIN_UI_LENGTH, MAX_UI_LENGTH)
        self.length_slider.setValue(DEFAULT_LENGTH)
        self.length_value_label = QLabel(str(DEFAULT_LENGTH))
        self.length_value_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.length_value_label.setMinimumWidth(28)
        self.length_slider.valueChanged.connect(
            lambda v: self.length_value_label.setText(str(v))
        )
        length_row.addWidget(self.length_slider, 1)
        length_row.addWidget(self.length_value_label)
        layout.addLayout(length_row)

        self.uppercase_check = QCheckBox("Uppercase (A-Z)")
        self.lowercase_check = QCheckBox("Lowercase (a-z)")
        self.numbers_check = QCheckBox("Numbers (0-9)")
        self.symbols_check = QCheckBox("Symbols (!@#$...)")
        for check in (
            self.uppercase_check,
            self.lowercase_check,
            self.numbers_check,
            self.symbols_check,
        ):
            check.setChecked(True)
            layout.addWidget(check)

        self.avoid_similar_check = QCheckBox("Avoid similar characters (0/O, 1/l/I, ...)")
        layout.addWidget(self.avoid_similar_check)

        self.generate_button = QPushButton("Generate Password")
        gen_font = self.generate_button.font()
        gen_font.setPointSize(13)
        gen_font.setBold(True)
        self.generate_button.setFont(gen_font)
        self.generate_button.setCursor(Qt.PointingHandCursor)
        self.generate_button.clicked.connect(self.on_generate_clicked)
        layout.addWidget(self.generate_button)

        group.setLayout(layout)
        return group

    def _build_notification_label(self) -> QLabel:
        self.notification_label = QLabel("")
        self.notification_label.setObjectName("notification")
        self.notification_label.setAlignment(Qt.AlignCenter)
        self.notification_label.hide()
        return self.notification_label

    # -- actions --

    def current_config(self) -> GenerationConfig:
        """Snapshot the widgets into a fresh config."""
        return GenerationConfig.from_flags(
            length=self.length_slider.value(),
            uppercase=self.uppercase_check.isChecked(),
            lowercase=self.lowercase_check.isChecked(),
            numbers=self.numbers_check.isChecked(),
            symbols=self.symbols_check.isChecked(),
            avoid_similar=self.avoid_similar_check.isChecked(),
        )

    def on_generate_clicked(self) -> None:
        password = self.session.generate(self.current_config())
        if password is not None:
            self.password_field.setText(password)

    def on_copy_clicked(self) -> None:
        self.session.copy()

    def _on_enter_pressed(self) -> None:
        if self.focusWidget() is self.password_field:
            return
        self.on_generate_clicked()

    # -- clipboard --

    def _copy_text(self, text: str) -> Notification:
        notification = copy_with_fallback(
            text, self._write_system_clipboard, self._write_via_selection
        )
        if not notification.is_error:
            self._flash_copy_button()
        return notification

    def _flash_copy_button(self) -> None:
        self._set_copy_flash(True)
        self._copy_flash_timer.start(COPY_FLASH_MS)

    def _end_copy_flash(self) -> None:
        self._set_copy_flash(False)

    def _set_copy_flash(self, on: bool) -> None:
        self.copy_button.setProperty("flash", on)
        self.copy_button.style().unpolish(self.copy_button)
        self.copy_button.style().polish(self.copy_button)

    def _write_system_clipboard(self, text: str) -> None:
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            raise ClipboardUnavailable("No system clipboard available")
        clipboard.setText(text)
        # Another application can hold the clipboard lock; read back to
        # find out whether the write actually landed.
        if clipboard.text() != text:
            raise ClipboardUnavailable("System clipboard rejected the text")

    def _write_via_selection(self, text: str) -> None:
        if self.password_field.text() != text:
            self.password_field.setText(text)
        self.password_field.selectAll()
        self.password_field.copy()
        clipboard = QGuiApplication.clipboard()
        if clipboard is None or clipboard.text() != text:
            raise ClipboardUnavailable("Copy from the output field failed")

    # -- notifications --

    def show_notification(self, notification: Notification) -> None:
        self.notification_label.setText(notification.message)
        self.notification_label.setProperty("kind", notification.kind)
        # Re-polish so the [kind=...] style selector picks up the change.
        self.notification_label.style().unpolish(self.notification_label)
        self.notification_label.style().polish(self.notification_label)
        self.notification_label.show()
        self._notification_timer.start(NOTIFICATION_TIMEOUT_MS)

    def _hide_notification(self) -> None:
        self.notification_label.hide()

    # -- window --

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        if not self._shown_once:
            self._shown_once = True
            QTimer.singleShot(0, self.on_generate_clicked)

    def _apply_style(self) -> None:
        self.setStyleSheet(
            """
            QWidget {
                color: #e5e7eb;
                background-color: #05070c;
                font-family: Segoe UI, Arial, sans-serif;
            }
            QGroupBox {
                border: 1px solid #1f2933;
                border-radius: 10px;
                margin-top: 16px;
                background-color: #080b12;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                subcontrol-position: top left;
                padding: 2px 8px;
                color: #7dd3fc;
                font-weight: 600;
            }
            QLineEdit {
                border: 1px solid #1f2933;
                border-radius: 6px;
                padding: 6px 8px;
                background-color: #050810;
                selection-background-color: #38bdf8;
            }
            QPushButton {
                border-radius: 8px;
                padding: 6px 14px;
                background-color: #0b1120;
                border: 1px solid #38bdf8;
            }
            QPushButton:pressed {
                background-color: #000000;
            }
            QPushButton[flash="true"] {
                background-color: #14532d;
            }
            QLabel#notification {
                border-radius: 6px;
                padding: 6px;
            }
            QLabel#notification[kind="success"] {
                background-color: #14532d;
            }
            QLabel#notification[kind="error"] {
                background-color: #7f1d1d;
            }
            """
        )


def main() -> None:
    setup_logging()
    app = QApplication(sys.argv)
    window = PasswordWindow()
    window.show()
    sys.exit(app.exec())
