from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from BackEnd.core.clock import fmt_minutes
from FrontEnd.styles.design_tokens import COLORS

class FooterToday(QWidget):
	"""Bottom strip with the selected day's and week's study totals."""
	def __init__(self):
		super().__init__()
		layout = QHBoxLayout()
		layout.addStretch()
		self.label = QLabel("")
		self.label.setObjectName("TodayLabel")
		layout.addWidget(self.label)
		self.setLayout(layout)
		self.setStyleSheet(f"background: {COLORS['footer_bg']}; border-radius: 12px; padding: 6px 20px; color: {COLORS['footer_text']}; font-size: 14px; font-weight: 500;")

	def set_totals(self, day_minutes, week_minutes):
		self.label.setText(f"Today: {fmt_minutes(day_minutes)}   •   This week: {fmt_minutes(week_minutes)}")
