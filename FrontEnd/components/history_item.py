from PySide6.QtCore import Signal
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QPushButton
from BackEnd.core.clock import fmt_clock, fmt_day, fmt_hm
from FrontEnd.styles.design_tokens import COLORS, FONTS

class SessionHistoryItem(QWidget):
    """One row of the session history: date, task, times, duration, actions."""

    rename_requested = Signal(str)
    delete_requested = Signal(str)

    def __init__(self, record):
        super().__init__()
        self.record_id = record.id
        self.setObjectName("HistoryItem")

        text_col = QVBoxLayout()
        text_col.setSpacing(2)
        self.date_label = QLabel(fmt_day(record.started_at))
        self.date_label.setStyleSheet(f"font-weight: 600; color: {COLORS['text_strong']};")
        self.task_label = QLabel(record.task_name or "(No task name)")
        self.task_label.setStyleSheet(f"color: {COLORS['primary']}; font-size: {FONTS['text']}px;")
        self.times_label = QLabel(f"{fmt_clock(record.started_at)} - {fmt_clock(record.ended_at)}")
        self.times_label.setStyleSheet(f"color: {COLORS['text_muted']}; font-size: {FONTS['text_small']}px;")
        self.duration_label = QLabel(f"Duration: {fmt_hm(record.duration_seconds)}")
        for label in (self.date_label, self.task_label, self.times_label, self.duration_label):
            text_col.addWidget(label)

        self.rename_btn = QPushButton("Rename")
        self.delete_btn = QPushButton("Delete")
        for btn in (self.rename_btn, self.delete_btn):
            btn.setObjectName("ItemBtn")

        layout = QHBoxLayout()
        layout.setContentsMargins(16, 10, 12, 10)
        layout.addLayout(text_col, stretch=1)
        layout.addWidget(self.rename_btn)
        layout.addWidget(self.delete_btn)
        self.setLayout(layout)

        self.rename_btn.clicked.connect(lambda: self.rename_requested.emit(self.record_id))
        self.delete_btn.clicked.connect(lambda: self.delete_requested.emit(self.record_id))
