"""
Theme preferences dialog for OverlayTheme.

Lets users pick a discovered theme and adjust the live presentation
settings, then save the result as their theme.
"""

import logging
from typing import List, Optional

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QComboBox, QCheckBox, QDoubleSpinBox, QLabel,
    QPushButton, QGroupBox, QWidget,
)

from ...theming import (
    ComponentTheme, LayoutMode, RendererType, ThemeManager, ThemeMeta,
)

logger = logging.getLogger(__name__)


class ThemeDialog(QDialog):
    """Theme selection and appearance dialog."""

    def __init__(self, manager: ThemeManager, engine=None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.manager = manager
        self.engine = engine
        self._themes: List[ThemeMeta] = []
        self._refreshing = False  # guard against signal loops
        self._init_ui()
        self.refresh_themes()
        self._load_values()

    def _init_ui(self):
        """Build the dialog UI."""
        self.setWindowTitle("Theme")
        self.setMinimumWidth(420)

        layout = QVBoxLayout(self)

        # Installed themes
        themes_group = QGroupBox("Installed themes")
        themes_layout = QHBoxLayout()

        self.theme_combo = QComboBox()
        self.theme_combo.setMinimumWidth(200)
        themes_layout.addWidget(self.theme_combo, 1)

        self.load_button = QPushButton("Load")
        self.load_button.setToolTip("Replace the current theme with the selected one")
        self.load_button.clicked.connect(self._on_load_clicked)
        themes_layout.addWidget(self.load_button)

        themes_group.setLayout(themes_layout)
        layout.addWidget(themes_group)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        # Appearance
        appearance_group = QGroupBox("Appearance")
        form = QFormLayout()

        self.renderer_combo = self._enum_combo(RendererType)
        self.renderer_combo.currentIndexChanged.connect(self._on_renderer_changed)
        form.addRow("Renderer:", self.renderer_combo)

        self.layout_combo = self._enum_combo(LayoutMode)
        self.layout_combo.currentIndexChanged.connect(self._on_layout_changed)
        form.addRow("Layout:", self.layout_combo)

        self.style_combo = self._enum_combo(ComponentTheme)
        self.style_combo.currentIndexChanged.connect(self._on_style_changed)
        form.addRow("Style:", self.style_combo)

        self.font_combo = QComboBox()
        self.font_combo.addItems(self.manager.get_font_names())
        self.font_combo.currentIndexChanged.connect(self._on_font_changed)
        form.addRow("Font:", self.font_combo)

        self.font_size_spin = QDoubleSpinBox()
        self.font_size_spin.setRange(6.0, 72.0)
        self.font_size_spin.setSingleStep(1.0)
        self.font_size_spin.valueChanged.connect(self._on_font_size_changed)
        form.addRow("Font size:", self.font_size_spin)

        self.scale_spin = QDoubleSpinBox()
        self.scale_spin.setRange(0.25, 4.0)
        self.scale_spin.setSingleStep(0.05)
        self.scale_spin.valueChanged.connect(self._on_scale_changed)
        form.addRow("UI scale:", self.scale_spin)

        self.blur_check = QCheckBox("Blur background")
        self.blur_check.toggled.connect(self._on_blur_toggled)
        form.addRow("", self.blur_check)

        appearance_group.setLayout(form)
        layout.addWidget(appearance_group)

        # Buttons
        button_layout = QHBoxLayout()
        button_layout.addStretch()

        self.save_button = QPushButton("Save")
        self.save_button.clicked.connect(self._on_save)
        button_layout.addWidget(self.save_button)

        self.close_button = QPushButton("Close")
        self.close_button.clicked.connect(self.reject)
        button_layout.addWidget(self.close_button)

        layout.addLayout(button_layout)

    @staticmethod
    def _enum_combo(enum_type) -> QComboBox:
        combo = QComboBox()
        for member in enum_type:
            combo.addItem(member.name.replace("_", " ").title(), int(member))
        return combo

    def refresh_themes(self):
        """Re-scan theme directories and repopulate the theme list."""
        self._themes = self.manager.scanner.list_available_themes()
        self.theme_combo.clear()
        for meta in self._themes:
            self.theme_combo.addItem(meta.name, str(meta.path))
        self.load_button.setEnabled(bool(self._themes))

    def _load_values(self):
        """Load the live theme into form fields."""
        theme = self.manager.get_theme()
        self._refreshing = True
        try:
            self.renderer_combo.setCurrentIndex(self.renderer_combo.findData(int(theme.renderer)))
            self.layout_combo.setCurrentIndex(self.layout_combo.findData(int(theme.layout_mode)))
            self.style_combo.setCurrentIndex(self.style_combo.findData(int(theme.component_theme)))
            self.font_combo.setCurrentIndex(self.font_combo.findText(theme.selected_font))
            self.font_size_spin.setValue(theme.font_size)
            self.scale_spin.setValue(theme.ui_scale)
            self.blur_check.setChecked(theme.enable_blur)
        finally:
            self._refreshing = False

    def _on_load_clicked(self):
        index = self.theme_combo.currentIndex()
        if index < 0 or index >= len(self._themes):
            return

        meta = self._themes[index]
        if not self.manager.load_theme(meta.path):
            logger.warning(f"Could not load theme from {meta.path}")
            self.status_label.setText(f"Could not load theme '{meta.name}'.")
            return

        report = self.manager.last_report
        if report is not None and report.warnings:
            self.status_label.setText(
                f"Loaded '{meta.name}'; {len(report.warnings)} setting(s) kept their defaults."
            )
        else:
            self.status_label.setText(f"Loaded '{meta.name}'.")

        if self.engine is not None:
            self.engine.apply_palette(self.manager.get_theme())
        self._load_values()

    def _on_renderer_changed(self, index: int):
        if self._refreshing or index < 0:
            return
        self.manager.set_renderer(RendererType(self.renderer_combo.itemData(index)))

    def _on_layout_changed(self, index: int):
        if self._refreshing or index < 0:
            return
        self.manager.set_layout_mode(LayoutMode(self.layout_combo.itemData(index)))

    def _on_style_changed(self, index: int):
        if self._refreshing or index < 0:
            return
        self.manager.set_component_theme(ComponentTheme(self.style_combo.itemData(index)))

    def _on_font_changed(self, index: int):
        if self._refreshing:
            return
        self.manager.set_selected_font(index)

    def _on_font_size_changed(self, value: float):
        if self._refreshing:
            return
        self.manager.set_font_size(value)

    def _on_scale_changed(self, value: float):
        if self._refreshing:
            return
        self.manager.get_theme().ui_scale = value

    def _on_blur_toggled(self, checked: bool):
        if self._refreshing:
            return
        self.manager.get_theme().enable_blur = checked

    def _on_save(self):
        """Persist the live theme as the user's theme."""
        self.manager.save_theme()
        self.accept()
