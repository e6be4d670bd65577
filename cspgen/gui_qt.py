"""
Qt GUI for the secure password generator.

Thin presentation layer: reads options from the widgets, calls the
generator and scorer, and shows the results. Only the theme choice is
persisted (through SettingsStore).
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont, QGuiApplication, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from .config import (
    CharClass,
    GenerationConfig,
    DEFAULT_CONFIG,
    MAX_LENGTH,
    MIN_LENGTH,
    PRESETS,
    get_preset,
    validate_config,
)
from .errors import PasswordGeneratorError
from .generator import generate_password_with_meta
from .logging_config import LoggingConfig
from .settings import SettingsStore
from .strength import StrengthLevel, character_stats, score_password

logger = logging.getLogger(__name__)

CLIPBOARD_CLEAR_MS = 15000
PLACEHOLDER = "Click Generate to create a password..."

LEVEL_COLORS = {
    StrengthLevel.WEAK: "#ef4444",
    StrengthLevel.MEDIUM: "#f59e0b",
    StrengthLevel.STRONG: "#22c55e",
    StrengthLevel.VERY_STRONG: "#0ea5e9",
}

THEME_STYLES = {
    "light": """
        QWidget {
            color: #111827;
            background-color: #f9fafb;
            font-family: Segoe UI, Arial, sans-serif;
        }
        QGroupBox {
            border: 1px solid #d1d5db;
            border-radius: 10px;
            margin-top: 16px;
        }
        QGroupBox::title {
            subcontrol-origin: margin;
            padding: 2px 8px;
            color: #0369a1;
            font-weight: 600;
        }
        QLineEdit, QSpinBox {
            border: 1px solid #d1d5db;
            border-radius: 6px;
            padding: 4px 6px;
            background-color: #ffffff;
        }
        QPushButton {
            border-radius: 8px;
            padding: 6px 14px;
            background-color: #e0f2fe;
            border: 1px solid #0ea5e9;
        }
        """,
    "dark": """
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
            padding: 2px 8px;
            color: #7dd3fc;
            font-weight: 600;
        }
        QLineEdit, QSpinBox {
            border: 1px solid #1f2933;
            border-radius: 6px;
            padding: 4px 6px;
            background-color: #050810;
        }
        QPushButton {
            border-radius: 8px;
            padding: 6px 14px;
            background-color: #0b1120;
            color: #e5e7eb;
            border: 1px solid #38bdf8;
        }
        """,
}


class GeneratorWindow(QMainWindow):
    """
    Main window: options, presets, password display and strength meter.
    """

    def __init__(
        self,
        settings: SettingsStore | None = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Secure Password Generator")
        self.settings = settings or SettingsStore()
        self._applying_preset = False

        # Clipboard auto-clear
        self._clipboard_token: str | None = None
        self._clipboard_timer = QTimer(self)
        self._clipboard_timer.setSingleShot(True)
        self._clipboard_timer.timeout.connect(self._on_clipboard_timeout)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        layout.addLayout(self._build_header())
        layout.addWidget(self._build_config_group())
        layout.addWidget(self._build_password_group())
        layout.addWidget(self._build_status_label())
        self.setCentralWidget(central)

        self._install_shortcuts()
        self.apply_theme(self.settings.load_theme())
        self._load_config(DEFAULT_CONFIG)

    # -- building --

    def _build_header(self) -> QHBoxLayout:
        row = QHBoxLayout()
        title = QLabel("Secure Password Generator")
        title_font = title.font()
        title_font.setPointSize(14)
        title_font.setBold(True)
        title.setFont(title_font)

        self.theme_button = QPushButton()
        self.theme_button.clicked.connect(self.on_theme_toggled)

        row.addWidget(title)
        row.addStretch()
        row.addWidget(self.theme_button)
        return row

    def _build_config_group(self) -> QGroupBox:
        group = QGroupBox("Options")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        length_row = QHBoxLayout()
        length_row.addWidget(QLabel("Password length (characters)"))
        self.length_spin = QSpinBox()
        self.length_spin.setRange(MIN_LENGTH, MAX_LENGTH)
        length_row.addWidget(self.length_spin)
        layout.addLayout(length_row)

        self.class_checks: dict[CharClass, QCheckBox] = {
            CharClass.UPPERCASE: QCheckBox("Uppercase (A-Z)"),
            CharClass.LOWERCASE: QCheckBox("Lowercase (a-z)"),
            CharClass.DIGITS: QCheckBox("Digits (0-9)"),
            CharClass.SYMBOLS: QCheckBox("Symbols (!@#$...)"),
        }
        for check in self.class_checks.values():
            layout.addWidget(check)

        self.exclude_similar_check = QCheckBox("Exclude similar characters (0 O 1 l I)")
        self.exclude_ambiguous_check = QCheckBox(
            "Exclude ambiguous characters ({ } [ ] ( ) / \\ ' \" ` ~ , ; : . < >)"
        )
        layout.addWidget(self.exclude_similar_check)
        layout.addWidget(self.exclude_ambiguous_check)

        # Any option change regenerates once a password is on screen.
        self.length_spin.valueChanged.connect(self._on_option_changed)
        for check in self._all_checks():
            check.toggled.connect(self._on_option_changed)

        presets_row = QHBoxLayout()
        presets_row.addWidget(QLabel("Presets:"))
        self.preset_buttons: dict[str, QPushButton] = {}
        for name in PRESETS:
            button = QPushButton(name.capitalize())
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, n=name: self.apply_preset(n))
            presets_row.addWidget(button)
            self.preset_buttons[name] = button
        presets_row.addStretch()
        layout.addLayout(presets_row)

        group.setLayout(layout)
        return group

    def _build_password_group(self) -> QGroupBox:
        group = QGroupBox("Password")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self.password_field = QLineEdit()
        self.password_field.setReadOnly(True)
        pw_font = QFont("Consolas")
        pw_font.setPointSize(14)
        self.password_field.setFont(pw_font)
        self.password_field.setPlaceholderText(PLACEHOLDER)
        self.password_field.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.password_field)

        buttons_row = QHBoxLayout()
        buttons_row.addStretch()
        self.generate_button = QPushButton("Generate")
        gen_font = self.generate_button.font()
        gen_font.setBold(True)
        self.generate_button.setFont(gen_font)
        self.generate_button.setCursor(Qt.PointingHandCursor)
        self.generate_button.clicked.connect(self.on_generate_clicked)

        self.visibility_button = QPushButton("Hide")
        self.visibility_button.clicked.connect(self.toggle_visibility)
        self.copy_button = QPushButton("Copy to Clipboard")
        self.copy_button.clicked.connect(self.copy_to_clipboard)

        buttons_row.addWidget(self.generate_button)
        buttons_row.addWidget(self.visibility_button)
        buttons_row.addWidget(self.copy_button)
        buttons_row.addStretch()
        layout.addLayout(buttons_row)

        strength_row = QHBoxLayout()
        strength_row.addWidget(QLabel("Strength:"))
        self.strength_bar = QProgressBar()
        self.strength_bar.setRange(0, 100)
        self.strength_bar.setTextVisible(False)
        self.strength_label = QLabel("–")
        self.score_label = QLabel("0")
        strength_row.addWidget(self.strength_bar, 1)
        strength_row.addWidget(self.strength_label)
        strength_row.addWidget(self.score_label)
        layout.addLayout(strength_row)

        self.stats_label = QLabel("")
        self.stats_label.setAlignment(Qt.AlignCenter)
        self.stats_label.setVisible(False)
        layout.addWidget(self.stats_label)

        group.setLayout(layout)
        return group

    def _build_status_label(self) -> QLabel:
        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignCenter)
        return self.status_label

    def _install_shortcuts(self) -> None:
        generate = QShortcut(QKeySequence("Ctrl+Return"), self)
        generate.activated.connect(self.on_generate_clicked)
        copy = QShortcut(QKeySequence("Ctrl+Shift+C"), self)
        copy.activated.connect(self.copy_to_clipboard)
        self._shortcuts = [generate, copy]

    def _all_checks(self) -> list[QCheckBox]:
        return [
            *self.class_checks.values(),
            self.exclude_similar_check,
            self.exclude_ambiguous_check,
        ]

    # -- config <-> widgets --

    def current_config(self) -> GenerationConfig:
        return GenerationConfig(
            length=self.length_spin.value(),
            classes=frozenset(c for c, check in self.class_checks.items() if check.isChecked()),
            exclude_similar=self.exclude_similar_check.isChecked(),
            exclude_ambiguous=self.exclude_ambiguous_check.isChecked(),
        )

    def _load_config(self, config: GenerationConfig) -> None:
        self.length_spin.setValue(config.length)
        for char_class, check in self.class_checks.items():
            check.setChecked(config.has(char_class))
        self.exclude_similar_check.setChecked(config.exclude_similar)
        self.exclude_ambiguous_check.setChecked(config.exclude_ambiguous)

    # -- actions --

    def apply_preset(self, name: str) -> None:
        config = get_preset(name)
        self._applying_preset = True
        try:
            self._load_config(config)
        finally:
            self._applying_preset = False

        for preset_name, button in self.preset_buttons.items():
            button.setChecked(preset_name == name)
        self.on_generate_clicked()

    def _on_option_changed(self, *_args) -> None:
        if self._applying_preset:
            return
        for button in self.preset_buttons.values():
            button.setChecked(False)
        if self.password_field.text():
            self.on_generate_clicked()

    def on_generate_clicked(self) -> None:
        try:
            config = validate_config(self.current_config())
            meta = generate_password_with_meta(config)
        except PasswordGeneratorError as exc:
            logger.info("Generation refused: %s", exc)
            self.password_field.clear()
            self.password_field.setPlaceholderText(str(exc))
            self.status_label.setText(str(exc))
            self._show_strength("")
            return

        self.password_field.setText(meta.password)
        self.password_field.setPlaceholderText(PLACEHOLDER)
        self.status_label.setText(
            f"Generated {len(meta.password)} characters "
            f"from a {len(meta.alphabet)}-character alphabet."
        )
        self._show_strength(meta.password, meta.entropy_bits)

    def _show_strength(self, password: str, entropy_bits: float = 0.0) -> None:
        report = score_password(password)
        self.strength_bar.setValue(report.score)
        self.strength_label.setText(report.label)
        self.score_label.setText(str(report.score))

        color = LEVEL_COLORS.get(report.level, "transparent")
        self.strength_bar.setStyleSheet(
            f"QProgressBar::chunk {{ background-color: {color}; }}"
        )

        if not password:
            self.stats_label.setVisible(False)
            return
        stats = character_stats(password)
        self.stats_label.setText(
            f"Length {stats.length}  |  Upper {stats.uppercase}  |  "
            f"Lower {stats.lowercase}  |  Digits {stats.digits}  |  "
            f"Symbols {stats.symbols}  |  ~{entropy_bits:.1f} bits"
        )
        self.stats_label.setVisible(True)

    def toggle_visibility(self) -> None:
        if self.password_field.echoMode() == QLineEdit.EchoMode.Password:
            self.password_field.setEchoMode(QLineEdit.EchoMode.Normal)
            self.visibility_button.setText("Hide")
        else:
            self.password_field.setEchoMode(QLineEdit.EchoMode.Password)
            self.visibility_button.setText("Show")

    def _arm_secure_clipboard(self, password: str, timeout_ms: int = CLIPBOARD_CLEAR_MS) -> None:
        """
        Start a timer to clear the clipboard after a short interval.
        """
        self._clipboard_token = password
        self._clipboard_timer.start(timeout_ms)

    def _on_clipboard_timeout(self) -> None:
        """
        Clear clipboard only if it still holds the password we placed.
        """
        if not self._clipboard_token:
            return

        cb = QGuiApplication.clipboard()
        if cb.text() == self._clipboard_token:
            cb.clear()
            self.status_label.setText("Clipboard cleared for safety.")
        self._clipboard_token = None

    def copy_to_clipboard(self) -> None:
        password = self.password_field.text()
        if not password:
            self.status_label.setText("No password to copy. Generate one first.")
            return

        QGuiApplication.clipboard().setText(password)
        self._arm_secure_clipboard(password)
        self.status_label.setText(
            "Password copied to clipboard (auto-clear in a few seconds)."
        )

    # -- theme --

    def apply_theme(self, theme: str) -> None:
        self.theme = theme
        self.setStyleSheet(THEME_STYLES[theme])
        self.theme_button.setText("Light mode" if theme == "dark" else "Dark mode")

    def on_theme_toggled(self) -> None:
        try:
            theme = self.settings.toggle_theme()
        except OSError as exc:
            # Could not persist; still switch for this session.
            logger.warning("Could not save theme preference: %s", exc)
            theme = "light" if self.theme == "dark" else "dark"
        self.apply_theme(theme)


def main() -> None:
    LoggingConfig.setup_logging()
    app = QApplication(sys.argv)
    window = GeneratorWindow()
    window.show()
    window.on_generate_clicked()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
