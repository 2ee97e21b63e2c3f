from BackEnd.core.clock import week_days
from BackEnd.core.coerce import non_negative_int
from BackEnd.core.logs import setup_logger

logger = setup_logger(__name__)

class StudyLedger:
	"""Minutes studied, keyed by local date (YYYY-MM-DD) and then course name.

	Entries appear on first credit for a date/course pair. Only additive
	changes are made, apart from remove_course(), which drops a course from
	every date but leaves the (possibly empty) dates in place.
	"""

	def __init__(self, entries=None):
		self._days = {}
		if entries:
			for day, courses in entries.items():
				self._days[day] = dict(courses)

	@classmethod
	def from_dict(cls, data):
		"""Build a ledger from its stored form, dropping anything malformed."""
		ledger = cls()
		if not isinstance(data, dict):
			return ledger
		for day, courses in data.items():
			if not isinstance(courses, dict):
				logger.warning("Ignoring study log entry for %s: not a mapping", day)
				continue
			ledger._days[str(day)] = {
				str(course): non_negative_int(minutes)
				for course, minutes in courses.items()
			}
		return ledger

	def to_dict(self):
		return {day: dict(courses) for day, courses in self._days.items()}

	def accumulate(self, day, course, minutes):
		"""Add minutes to day/course. Negative minutes count as 0; 0 is a no-op."""
		minutes = non_negative_int(minutes)
		if minutes == 0:
			return
		courses = self._days.setdefault(day, {})
		courses[course] = courses.get(course, 0) + minutes
		logger.debug("Ledger %s / %s += %d (now %d)", day, course, minutes, courses[course])

	def remove_course(self, course):
		for courses in self._days.values():
			courses.pop(course, None)

	def days(self):
		return list(self._days)

	def courses_on(self, day):
		"""Copy of the course->minutes mapping for day ({} if absent)."""
		return dict(self._days.get(day, {}))

	def total_for_date(self, day) -> int:
		return sum(self._days.get(day, {}).values())

	def total_for_course_on_date(self, day, course) -> int:
		return self._days.get(day, {}).get(course, 0)

	def weekly_total(self, anchor_day) -> int:
		"""Sum over the Monday-to-Sunday week containing anchor_day."""
		return sum(self.total_for_date(d) for d in week_days(anchor_day))

	def __contains__(self, day):
		return day in self._days

	def __eq__(self, other):
		if not isinstance(other, StudyLedger):
			return NotImplemented
		return self._days == other._days

	def __repr__(self):
		return f"StudyLedger({self._days!r})"
