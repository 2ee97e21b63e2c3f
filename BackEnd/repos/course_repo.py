from BackEnd.core.logs import setup_logger
from BackEnd.core.settings import COURSES_KEY, DEFAULT_COURSES
from BackEnd.repos import store_repo, study_log_repo
from BackEnd.services.study_ledger import StudyLedger

logger = setup_logger(__name__)

def list_courses():
	"""Return the ordered course list (defaults on first run)."""
	data = store_repo.load(COURSES_KEY, list(DEFAULT_COURSES))
	if not isinstance(data, list):
		return list(DEFAULT_COURSES)
	courses = []
	for name in data:
		if isinstance(name, str) and name.strip() and name not in courses:
			courses.append(name)
	return courses

def save_courses(courses):
	store_repo.save(COURSES_KEY, list(courses))

def add_course(name):
	"""Append a course. Blank and duplicate names are ignored.

	Returns the resulting course list.
	"""
	courses = list_courses()
	name = (name or "").strip()
	if not name or name in courses:
		return courses
	courses.append(name)
	save_courses(courses)
	logger.info("Added course %r", name)
	return courses

def remove_course(name, ledger=None):
	"""Remove a course and every study-log entry recorded for it.

	ledger is the in-memory StudyLedger in use, if any; it is pruned and
	persisted in place of the stored copy. The pruned log is written before
	the course list, and ledger is only touched once both writes succeed.
	A failed log write changes nothing; a failed course-list write can only
	leave a registered course with no stored minutes, never minutes for an
	unregistered course. Returns the resulting course list.
	"""
	courses = [c for c in list_courses() if c != name]
	source = ledger if ledger is not None else study_log_repo.load_ledger()
	pruned = StudyLedger(source.to_dict())
	pruned.remove_course(name)
	study_log_repo.save_ledger(pruned)
	save_courses(courses)
	if ledger is not None:
		ledger.remove_course(name)
	logger.info("Removed course %r and its study log entries", name)
	return courses
