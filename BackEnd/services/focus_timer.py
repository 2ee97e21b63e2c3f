from dataclasses import asdict, dataclass
from enum import Enum

from BackEnd.core import settings
from BackEnd.core.clock import fmt_mmss, local_today_str
from BackEnd.core.coerce import non_negative_int
from BackEnd.core.logs import setup_logger

logger = setup_logger(__name__)

class TimerMode(str, Enum):
	POMODORO = "Pomodoro"
	CUSTOM = "Custom"

class Phase(str, Enum):
	IDLE = "idle"
	FOCUS = "focus"
	BREAK = "break"

@dataclass
class TimerState:
	mode: TimerMode = TimerMode.POMODORO
	phase: Phase = Phase.IDLE
	remaining_seconds: int = 0
	running: bool = False
	focus_minutes: int = settings.FOCUS_MINUTES
	break_minutes: int = settings.BREAK_MINUTES
	custom_minutes: int = settings.CUSTOM_MINUTES
	active_course: str = settings.FALLBACK_COURSE

class FocusTimer:
	"""Idle/Focus/Break countdown driven one tick at a time.

	The timer never waits on wall-clock time itself; something else (see
	TimerService) calls tick() once a second while running is True. When a
	focus phase reaches zero, on_focus_completed(course, day, minutes) is
	called with the minutes configured when that phase began. Durations
	edited mid-phase apply from the next phase; switching mode is expected
	to be followed by reset().
	"""

	def __init__(self, courses=None, date_provider=None, on_focus_completed=None):
		self.state = TimerState()
		self.date_provider = date_provider or local_today_str
		self.on_focus_completed = on_focus_completed
		# minutes to credit when the current focus phase completes
		self._phase_minutes = 0
		self._courses = []
		self.sync_courses(courses or [])

	# --- configuration -------------------------------------------------

	def set_mode(self, mode):
		self.state.mode = TimerMode(mode)

	def set_focus_minutes(self, minutes):
		self.state.focus_minutes = non_negative_int(minutes, settings.FOCUS_MINUTES)

	def set_break_minutes(self, minutes):
		self.state.break_minutes = non_negative_int(minutes, settings.BREAK_MINUTES)

	def set_custom_minutes(self, minutes):
		self.state.custom_minutes = non_negative_int(minutes, settings.CUSTOM_MINUTES)

	def set_active_course(self, course):
		"""Select the course credited on focus completion.

		Only a course from the last sync_courses() list is accepted, or the
		fallback course while that list is empty. Anything else is ignored.
		"""
		allowed = self._courses or [settings.FALLBACK_COURSE]
		if course not in allowed:
			logger.warning("Ignoring unregistered course %r", course)
			return
		self.state.active_course = course

	def sync_courses(self, courses):
		"""Remember the registered courses and re-point the active one if it was removed."""
		self._courses = list(courses)
		if self.state.active_course in courses:
			return
		new_course = courses[0] if courses else settings.FALLBACK_COURSE
		if new_course != self.state.active_course:
			logger.info("Active course %r unavailable; using %r", self.state.active_course, new_course)
		self.state.active_course = new_course

	# --- controls ------------------------------------------------------

	def start(self):
		s = self.state
		if s.phase == Phase.IDLE:
			minutes = s.custom_minutes if s.mode == TimerMode.CUSTOM else s.focus_minutes
			self._enter(Phase.FOCUS, minutes)
		s.running = True
		self._check_completion()

	def pause(self):
		self.state.running = False

	def reset(self):
		s = self.state
		if s.phase == Phase.FOCUS and s.remaining_seconds > 0:
			logger.info("Focus reset with %s left; nothing credited", fmt_mmss(s.remaining_seconds))
		s.running = False
		s.phase = Phase.IDLE
		s.remaining_seconds = 0
		self._phase_minutes = 0

	def tick(self):
		"""Advance one second. Does nothing unless running."""
		s = self.state
		if not s.running:
			return
		s.remaining_seconds = max(0, s.remaining_seconds - 1)
		self._check_completion()

	# --- internals -----------------------------------------------------

	def _enter(self, phase, minutes):
		self.state.phase = phase
		self.state.remaining_seconds = minutes * 60
		self._phase_minutes = minutes
		logger.info("Entering %s phase (%d min)", phase.value, minutes)

	def _check_completion(self):
		s = self.state
		if not s.running or s.remaining_seconds > 0:
			return
		if s.phase == Phase.FOCUS:
			minutes_done = self._phase_minutes
			course = s.active_course
			day = self.date_provider()
			logger.info("Focus complete: %d min to %s on %s", minutes_done, course, day)
			if self.on_focus_completed is not None:
				self.on_focus_completed(course, day, minutes_done)
			if s.mode == TimerMode.POMODORO:
				self._enter(Phase.BREAK, s.break_minutes)
			else:
				s.phase = Phase.IDLE
				s.running = False
				self._phase_minutes = 0
		elif s.phase == Phase.BREAK:
			self._enter(Phase.FOCUS, s.focus_minutes)

	# --- views ---------------------------------------------------------

	@property
	def phase(self):
		return self.state.phase

	@property
	def running(self):
		return self.state.running

	@property
	def remaining_seconds(self):
		return self.state.remaining_seconds

	def label(self):
		return fmt_mmss(self.state.remaining_seconds)

	def snapshot(self):
		data = asdict(self.state)
		data["mode"] = self.state.mode.value
		data["phase"] = self.state.phase.value
		return data
