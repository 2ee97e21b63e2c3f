# Defaults for the planner. Values here are what a fresh install starts with.

APP_NAME = "LockInPlanner"

# Focus timer (minutes)
FOCUS_MINUTES = 25
BREAK_MINUTES = 5
CUSTOM_MINUTES = 45
TICK_INTERVAL_MS = 1000

# Store keys
EVENTS_KEY = "events"
COURSES_KEY = "courses"
WELLNESS_KEY = "wellness"
STUDY_LOG_KEY = "studyLog"

DEFAULT_COURSES = ["BIO 212", "CHE 211", "PSY 233"]
# ledger writes go here when no course is registered
FALLBACK_COURSE = "General"

WELLNESS_DEFAULTS = {
	"sleepHours": 7,
	"soreness": 3,
	"stress": 4,
	"energy": 6,
	"notes": "",
}
WELLNESS_SCALE = (1, 10)

EVENT_TYPES = ["Class", "Lift", "Practice", "Match", "Study", "Recovery", "Other"]
DEFAULT_START_TIME = "09:00"
DEFAULT_EVENT_MINUTES = 60

# Quick-add presets: type -> (title, duration minutes)
EVENT_TEMPLATES = {
	"Class": ("Class", 75),
	"Lift": ("Lift", 60),
	"Practice": ("Practice", 120),
	"Match": ("Match", 180),
	"Study": ("Study Block", 60),
	"Recovery": ("Recovery (ice/roll/stretch)", 30),
	"Other": ("Other", 30),
}
