from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QPlainTextEdit
from FrontEnd.styles.design_tokens import COLORS, FONTS

class Notepad(QWidget):
    """Scratch notes for the current sitting. Nothing is saved."""

    def __init__(self):
        super().__init__()
        layout = QVBoxLayout()
        layout.setContentsMargins(32, 32, 32, 32)
        title = QLabel("Notes")
        title.setStyleSheet(f"font-size: {FONTS['text_strong']}px; font-weight: 600; color: {COLORS['text_strong']};")
        self.edit = QPlainTextEdit()
        self.edit.setObjectName("NotesEdit")
        self.edit.setPlaceholderText("Jot down your thoughts...")
        layout.addWidget(title)
        layout.addWidget(self.edit, stretch=1)
        self.setLayout(layout)

    def text(self):
        return self.edit.toPlainText()
