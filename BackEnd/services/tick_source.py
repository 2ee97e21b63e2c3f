from PySide6.QtCore import QObject, QTimer, Signal

from BackEnd.core import settings

class TickSource(QObject):
	"""One-per-second tick delivery behind a start/cancel interface.

	A single QTimer backs the source, and QTimer.start() on an active timer
	restarts it, so there is never more than one live tick channel.
	"""
	ticked = Signal()

	def __init__(self, interval_ms=settings.TICK_INTERVAL_MS, parent=None):
		super().__init__(parent)
		self._timer = QTimer(self)
		self._timer.setInterval(interval_ms)
		self._timer.timeout.connect(self.ticked)

	def start(self):
		self._timer.start()

	def cancel(self):
		self._timer.stop()

	def is_active(self):
		return self._timer.isActive()
