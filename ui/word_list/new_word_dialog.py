# ui/word_list/new_word_dialog.py
from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QLabel, QLineEdit, QDialogButtonBox
)

from ui.styles import LINE_EDIT_STYLE


class NewWordDialog(QDialog):
    """Prompt for a new word: one text field, Guardar / Cancelar."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Nueva Palabra")
        self.resize(320, 140)
        self._build_ui()

    # ------------------------------------------------------------
    def _build_ui(self):
        lay = QVBoxLayout(self)

        lay.addWidget(QLabel("Por favor ingrese la nueva palabra"))

        self.word_edit = QLineEdit()
        self.word_edit.setStyleSheet(LINE_EDIT_STYLE)
        lay.addWidget(self.word_edit)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        self.buttons.button(QDialogButtonBox.Save).setText("Guardar")
        self.buttons.button(QDialogButtonBox.Cancel).setText("Cancelar")
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)
        lay.addWidget(self.buttons)

    # ------------------------------------------------------------
    def word(self) -> str:
        # no strip, no empty check: the text is stored exactly as typed
        return self.word_edit.text()

    @classmethod
    def get_word(cls, parent=None) -> str | None:
        """Show the dialog modally. Returns the typed text, or None on Cancelar."""
        dlg = cls(parent)
        if dlg.exec() != QDialog.Accepted:
            return None
        return dlg.word()
