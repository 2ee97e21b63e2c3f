from datetime import date, datetime, timedelta

def local_today_str():
	"""Return local date as YYYY-MM-DD string."""
	return datetime.now().date().isoformat()

def parse_day(day_str) -> date:
	return date.fromisoformat(day_str)

def add_days(day_str: str, days: int) -> str:
	return (parse_day(day_str) + timedelta(days=days)).isoformat()

def week_start(day_str: str) -> str:
	"""Return the Monday of the week containing day_str (weeks start Monday)."""
	d = parse_day(day_str)
	# date.weekday(): Monday == 0 ... Sunday == 6, so Sunday goes back 6 days
	return (d - timedelta(days=d.weekday())).isoformat()

def week_days(day_str: str):
	"""The seven YYYY-MM-DD strings of the Monday-based week containing day_str."""
	start = week_start(day_str)
	return [add_days(start, i) for i in range(7)]

def fmt_mmss(seconds: int) -> str:
	"""Format seconds as MM:SS (minutes may exceed 59)."""
	m = seconds // 60
	s = seconds % 60
	return f"{m:02}:{s:02}"

def fmt_minutes(minutes: int) -> str:
	"""Format minutes as '45m' or '1h 5m'."""
	h = minutes // 60
	m = minutes % 60
	if h <= 0:
		return f"{m}m"
	return f"{h}h {m}m"
