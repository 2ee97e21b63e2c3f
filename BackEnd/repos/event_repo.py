import re
import uuid

from BackEnd.core.coerce import non_negative_int
from BackEnd.core.settings import (
	DEFAULT_EVENT_MINUTES, DEFAULT_START_TIME, EVENT_TEMPLATES, EVENT_TYPES, EVENTS_KEY
)
from BackEnd.repos import store_repo

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

def list_events():
	data = store_repo.load(EVENTS_KEY, [])
	if not isinstance(data, list):
		return []
	# stored records may carry durationMin as text
	return [dict(e, durationMin=non_negative_int(e.get("durationMin")))
		for e in data if isinstance(e, dict) and "id" in e]

def save_events(events):
	store_repo.save(EVENTS_KEY, list(events))

def add_event(day, type="Class", title="", start_time=DEFAULT_START_TIME,
		duration_min=DEFAULT_EVENT_MINUTES, notes=""):
	"""Create an event on day and return it, or None when the title is blank."""
	title = (title or "").strip()
	if not title:
		return None
	if type not in EVENT_TYPES:
		type = "Other"
	start_time = (start_time or "").strip()
	if not _TIME_RE.match(start_time):
		start_time = DEFAULT_START_TIME
	event = {
		"id": str(uuid.uuid4()),
		"date": day,
		"type": type,
		"title": title,
		"startTime": start_time,
		"durationMin": non_negative_int(duration_min),
		"notes": (notes or "").strip(),
	}
	events = list_events()
	events.append(event)
	save_events(events)
	return event

def delete_event(event_id):
	"""Delete by id. Returns True if something was removed."""
	events = list_events()
	kept = [e for e in events if e.get("id") != event_id]
	if len(kept) == len(events):
		return False
	save_events(kept)
	return True

def events_for_day(day):
	"""Events on day ordered by start time."""
	day_events = [e for e in list_events() if e.get("date") == day]
	return sorted(day_events, key=lambda e: e.get("startTime", ""))

def scheduled_minutes(day):
	return sum(non_negative_int(e.get("durationMin")) for e in events_for_day(day))

def template(event_type):
	"""(title, duration) preset for the quick-add buttons."""
	return EVENT_TEMPLATES.get(event_type, EVENT_TEMPLATES["Other"])
