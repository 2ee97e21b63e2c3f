from PySide6.QtCore import QObject, Signal

from BackEnd.core.logs import setup_logger
from BackEnd.repos import study_log_repo
from BackEnd.services.focus_timer import FocusTimer, Phase
from BackEnd.services.study_ledger import StudyLedger
from BackEnd.services.tick_source import TickSource

logger = setup_logger(__name__)

class TimerService(QObject):
	tick = Signal(int)  # emits remaining seconds
	phase_changed = Signal(str)  # emits 'idle', 'focus', 'break'
	state_changed = Signal(str)  # emits 'idle', 'running', 'paused'
	focus_completed = Signal(str, str, int)  # course, date, minutes

	def __init__(self, ledger=None, courses=None, date_provider=None, persist=True,
			tick_source=None, parent=None):
		super().__init__(parent)
		self.ledger = ledger if ledger is not None else StudyLedger()
		self.persist = persist
		self.timer = FocusTimer(
			courses=courses,
			date_provider=date_provider,
			on_focus_completed=self._credit,
		)
		self._source = tick_source or TickSource(parent=self)
		self._source.ticked.connect(self._on_tick)

	@property
	def state(self):
		return self.timer.state

	@property
	def clock_active(self):
		return self._source.is_active()

	def start(self):
		phase = self.timer.phase
		self.timer.start()
		self._sync_clock()
		self._emit_changes(phase)

	def pause(self):
		self.timer.pause()
		self._sync_clock()
		self.state_changed.emit(self._run_state())

	def reset(self):
		phase = self.timer.phase
		self.timer.reset()
		self._sync_clock()
		self._emit_changes(phase)

	def set_mode(self, mode):
		"""Switch mode and return to idle; a countdown never carries across modes."""
		self.timer.set_mode(mode)
		self.reset()

	def _on_tick(self):
		phase = self.timer.phase
		self.timer.tick()
		# a finished custom session stops running inside tick()
		self._sync_clock()
		self._emit_changes(phase)

	def _sync_clock(self):
		# cancel before anything else so no stale tick lands after pause/reset
		if not self.timer.running:
			if self._source.is_active():
				self._source.cancel()
		elif not self._source.is_active():
			self._source.start()

	def _emit_changes(self, previous_phase):
		self.tick.emit(self.timer.remaining_seconds)
		if self.timer.phase != previous_phase:
			self.phase_changed.emit(self.timer.phase.value)
		self.state_changed.emit(self._run_state())

	def _run_state(self):
		if self.timer.running:
			return 'running'
		if self.timer.phase == Phase.IDLE:
			return 'idle'
		return 'paused'

	def _credit(self, course, day, minutes):
		self.ledger.accumulate(day, course, minutes)
		if self.persist:
			try:
				study_log_repo.save_ledger(self.ledger)
			except Exception:
				# keep the in-memory credit; next successful save writes it
				logger.exception("Failed to save study log after crediting %s", course)
		self.focus_completed.emit(course, day, minutes)
