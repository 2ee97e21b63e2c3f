import sys
from PySide6.QtWidgets import QApplication
from BackEnd.core.logs import setup_logger
from FrontEnd.ui_main import MainWindow

logger = setup_logger("planner")

def main():
	app = QApplication(sys.argv)
	app.setApplicationName("Lock-In Planner")
	win = MainWindow()
	win.show()
	logger.info("Planner window opened")
	sys.exit(app.exec())

if __name__ == "__main__":
	main()
