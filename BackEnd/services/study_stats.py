"""Read-only study totals computed from a StudyLedger.

Everything is recomputed on each call; a date with no entries reads as zero.
"""
from BackEnd.core.clock import week_days, week_start

def today_total(ledger, day) -> int:
	return ledger.total_for_date(day)

def week_total(ledger, day) -> int:
	return ledger.weekly_total(day)

def course_breakdown(ledger, day):
	"""[(course, minutes), ...] for day, largest first, ties by name."""
	items = ledger.courses_on(day).items()
	return sorted(items, key=lambda item: (-item[1], item[0]))

def week_series(ledger, day):
	"""Seven (YYYY-MM-DD, minutes) pairs, Monday first, for the week holding day."""
	return [(d, ledger.total_for_date(d)) for d in week_days(day)]

def week_label(day):
	return f"Week of {week_start(day)}"
