import logging
import sys
from PySide6.QtWidgets import QApplication
from BackEnd.core.logging_setup import setup_logging
from BackEnd.core.paths import db_path
from BackEnd.services.history_store import HistoryStore
from BackEnd.services.session_manager import SessionManager
from BackEnd.services.timer_service import TimerService
from FrontEnd.ui_main import MainWindow

logger = logging.getLogger(__name__)

def main():
	setup_logging()
	app = QApplication(sys.argv)
	history = HistoryStore(db_path())
	history.load()
	timer_service = TimerService(SessionManager(history))
	win = MainWindow(timer_service)
	win.show()
	logger.info("Work Time Tracker started with %d session(s)", len(history))
	sys.exit(app.exec())

if __name__ == "__main__":
	main()
