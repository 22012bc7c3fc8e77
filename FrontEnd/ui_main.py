import logging
from pathlib import Path
from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QListWidget,
	QStackedWidget, QListWidgetItem, QLineEdit, QScrollArea, QInputDialog, QMessageBox
)
from PySide6.QtCore import Qt
from BackEnd.core.clock import fmt_hms
from BackEnd.models.session import SessionState
from FrontEnd.components.history_item import SessionHistoryItem
from FrontEnd.components.notepad import Notepad
from FrontEnd.styles.design_tokens import COLORS, FONTS

logger = logging.getLogger(__name__)

STYLESHEET_PATH = Path(__file__).parent / "styles" / "worktracker.qss"


class MainWindow(QMainWindow):
	def __init__(self, timer_service):
		super().__init__()
		self.setWindowTitle("Work Time Tracker")
		self.resize(1000, 650)
		self.timer_service = timer_service

		try:
			self.setStyleSheet(STYLESHEET_PATH.read_text(encoding="utf-8"))
		except OSError as e:
			logger.warning("Stylesheet not loaded: %s", e)

		# --- Sidebar ---
		self.sidebar = QListWidget()
		self.sidebar.setObjectName("Sidebar")
		self.sidebar.setFixedWidth(220)
		self.sidebar.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
		self.sidebar.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
		for name in ("Timer", "Session History", "Notes"):
			self.sidebar.addItem(QListWidgetItem(name))
		self.sidebar.setCurrentRow(0)

		# --- Pages ---
		self.stack = QStackedWidget()
		self.timer_tab = self._build_timer_tab()
		self.history_tab = self._build_history_tab()
		self.notes_tab = Notepad()
		self.stack.addWidget(self.timer_tab)
		self.stack.addWidget(self.history_tab)
		self.stack.addWidget(self.notes_tab)

		main_layout = QHBoxLayout()
		main_layout.setContentsMargins(0, 0, 0, 0)
		main_layout.setSpacing(0)
		main_layout.addWidget(self.sidebar)
		main_layout.addWidget(self.stack)
		container = QWidget()
		container.setLayout(main_layout)
		self.setCentralWidget(container)

		self.sidebar.currentRowChanged.connect(self.stack.setCurrentIndex)

		self.timer_service.tick.connect(self._on_tick)
		self.timer_service.state_changed.connect(self._on_state)
		self.timer_service.history_changed.connect(self._refresh_history)
		self.timer_service.persistence_failed.connect(self._on_persistence_failed)

		self._set_buttons(self.timer_service.state.value)
		self._refresh_history()

	def closeEvent(self, event):
		# A session still open on close is finalized so its time is kept.
		self.timer_service.shutdown()
		super().closeEvent(event)

	def _build_timer_tab(self):
		w = QWidget()
		outer = QVBoxLayout()
		outer.setContentsMargins(32, 32, 32, 32)
		outer.setSpacing(0)
		outer.addStretch()

		timer_card = QWidget()
		timer_card.setObjectName("TimerCard")
		timer_card_layout = QVBoxLayout()
		timer_card_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
		timer_card_layout.setContentsMargins(48, 32, 48, 32)
		timer_card.setLayout(timer_card_layout)

		self.timer_label = QLabel("00:00:00")
		self.timer_label.setObjectName("TimerLabel")
		self.timer_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		timer_card_layout.addWidget(self.timer_label)

		self.task_input = QLineEdit()
		self.task_input.setObjectName("TaskNameInput")
		self.task_input.setPlaceholderText("What are you working on?")
		self.task_input.returnPressed.connect(self._start_pause)
		timer_card_layout.addSpacing(16)
		timer_card_layout.addWidget(self.task_input)

		self.state_label = QLabel("")
		self.state_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.state_label.setStyleSheet(f"color: {COLORS['pause_dot']}; font-weight: 600;")
		timer_card_layout.addWidget(self.state_label)

		btn_layout = QHBoxLayout()
		btn_layout.setSpacing(24)
		self.start_pause_btn = QPushButton("Start")
		self.start_pause_btn.setObjectName("StartBtn")
		self.end_btn = QPushButton("Stop")
		self.end_btn.setObjectName("EndBtn")
		for btn in (self.start_pause_btn, self.end_btn):
			btn.setMinimumHeight(56)
			btn_layout.addWidget(btn)
		timer_card_layout.addSpacing(24)
		timer_card_layout.addLayout(btn_layout)

		outer.addWidget(timer_card, alignment=Qt.AlignmentFlag.AlignHCenter)
		outer.addStretch()
		w.setLayout(outer)

		self.start_pause_btn.clicked.connect(self._start_pause)
		self.end_btn.clicked.connect(self._end)
		return w

	def _build_history_tab(self):
		w = QWidget()
		layout = QVBoxLayout()
		layout.setAlignment(Qt.AlignmentFlag.AlignTop)
		layout.setContentsMargins(32, 32, 32, 32)
		layout.setSpacing(12)

		title = QLabel("Session History")
		title.setStyleSheet(f"font-size: {FONTS['text_strong']}px; font-weight: 600; color: {COLORS['text_strong']};")
		layout.addWidget(title)

		scroll = QScrollArea()
		scroll.setWidgetResizable(True)
		scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
		scroll.setFrameShape(QScrollArea.NoFrame)
		content = QWidget()
		self.history_layout = QVBoxLayout()
		self.history_layout.setContentsMargins(0, 0, 0, 0)
		self.history_layout.setSpacing(8)
		self.history_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
		content.setLayout(self.history_layout)
		scroll.setWidget(content)
		layout.addWidget(scroll, stretch=1)

		self.history_empty_label = QLabel("No sessions recorded yet")
		self.history_empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.history_empty_label.setStyleSheet(f"color: {COLORS['text_muted']};")
		w.setLayout(layout)
		return w

	def _on_tick(self, elapsed):
		self.timer_label.setText(fmt_hms(elapsed))

	def _on_state(self, state):
		self._set_buttons(state)
		if state == SessionState.IDLE.value:
			self.timer_label.setText("00:00:00")

	def _set_buttons(self, state):
		if state == SessionState.RUNNING.value:
			self.start_pause_btn.setText("Pause")
			self.end_btn.setEnabled(True)
			self.task_input.setEnabled(False)
			self.state_label.setText("")
		elif state == SessionState.PAUSED.value:
			self.start_pause_btn.setText("Resume")
			self.end_btn.setEnabled(True)
			self.task_input.setEnabled(False)
			self.state_label.setText("Paused")
		else:
			self.start_pause_btn.setText("Start")
			self.end_btn.setEnabled(False)
			self.task_input.setEnabled(True)
			self.state_label.setText("")

	def _start_pause(self):
		if not self.timer_service.running:
			self.timer_service.start(self.task_input.text())
			self.task_input.clear()
		else:
			self.timer_service.pause_resume()

	def _end(self):
		if self.timer_service.running:
			self.timer_service.stop()

	def _refresh_history(self):
		while self.history_layout.count():
			item = self.history_layout.takeAt(0)
			widget = item.widget()
			if widget is not None and widget is not self.history_empty_label:
				widget.deleteLater()
		records = self.timer_service.history.records
		if not records:
			self.history_layout.addWidget(self.history_empty_label)
			self.history_empty_label.show()
			return
		self.history_empty_label.hide()
		for record in records:
			row = SessionHistoryItem(record)
			row.rename_requested.connect(self._rename_session)
			row.delete_requested.connect(self._delete_session)
			self.history_layout.addWidget(row)

	def _rename_session(self, record_id):
		record = self.timer_service.history.get(record_id)
		if record is None:
			return
		new_name, ok = QInputDialog.getText(self, "Rename Task", "Task:", text=record.task_name)
		if ok:
			self.timer_service.rename(record_id, new_name.strip())

	def _delete_session(self, record_id):
		answer = QMessageBox.question(
			self, "Delete Session",
			"Are you sure you want to delete this session? This action cannot be undone.",
			QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
			QMessageBox.StandardButton.No,
		)
		if answer == QMessageBox.StandardButton.Yes:
			self.timer_service.delete(record_id)

	def _on_persistence_failed(self, message):
		answer = QMessageBox.warning(
			self, "History Not Saved",
			f"Your session history could not be saved to disk:\n{message}\n\nRetry now?",
			QMessageBox.StandardButton.Retry | QMessageBox.StandardButton.Ignore,
			QMessageBox.StandardButton.Retry,
		)
		if answer == QMessageBox.StandardButton.Retry:
			self.timer_service.retry_save()
