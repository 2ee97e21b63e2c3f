from BackEnd.core.coerce import clamp, to_float, to_int
from BackEnd.core.settings import WELLNESS_DEFAULTS, WELLNESS_KEY, WELLNESS_SCALE
from BackEnd.repos import store_repo

SCALE_FIELDS = ("soreness", "stress", "energy")

def _load_all():
	data = store_repo.load(WELLNESS_KEY, {})
	return data if isinstance(data, dict) else {}

def normalize(record):
	"""Coerce a wellness record into its stored shape.

	Non-numeric values fall back to the field default; sleep hours are
	floored at 0 and the 1-10 scales are clamped.
	"""
	record = record if isinstance(record, dict) else {}
	low, high = WELLNESS_SCALE
	clean = {
		"sleepHours": max(0.0, to_float(record.get("sleepHours"), WELLNESS_DEFAULTS["sleepHours"])),
		"notes": str(record.get("notes") or ""),
	}
	for field in SCALE_FIELDS:
		clean[field] = clamp(to_int(record.get(field), WELLNESS_DEFAULTS[field]), low, high)
	return clean

def get_wellness(day):
	"""Record for day, or the defaults when nothing was saved."""
	record = _load_all().get(day)
	if record is None:
		return dict(WELLNESS_DEFAULTS)
	return normalize(record)

def save_wellness(day, record):
	clean = normalize(record)
	data = _load_all()
	data[day] = clean
	store_repo.save(WELLNESS_KEY, data)
	return clean
