import json
import sqlite3
from contextlib import closing
from datetime import datetime, timezone
from pathlib import Path

from BackEnd.core.logs import setup_logger
from BackEnd.core.paths import db_path

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

logger = setup_logger(__name__)

def utc_now_iso():
	"""Return current UTC time as ISO8601 string (no microseconds)."""
	return datetime.now(timezone.utc).replace(microsecond=0).isoformat()

def connect():
	"""Open SQLite connection and ensure schema is applied."""
	conn = sqlite3.connect(db_path())
	conn.row_factory = sqlite3.Row
	try:
		with open(SCHEMA_PATH, encoding="utf-8") as f:
			conn.executescript(f.read())
	except BaseException:
		conn.close()
		raise
	return conn

def load(key, fallback):
	"""Return the JSON value stored under key, or fallback.

	A missing key, unreadable database or malformed JSON all give back
	fallback; nothing is raised to the caller.
	"""
	try:
		with closing(connect()) as conn:
			row = conn.execute("SELECT value FROM planner_kv WHERE key=?", (key,)).fetchone()
	except (sqlite3.Error, OSError) as e:
		logger.warning("Could not read %r from store: %s", key, e)
		return fallback
	if row is None or not row["value"]:
		return fallback
	try:
		return json.loads(row["value"])
	except ValueError as e:
		logger.warning("Stored value for %r is not valid JSON (%s); using default", key, e)
		return fallback

def save(key, value):
	"""Serialize value as JSON and store it under key (insert or replace)."""
	payload = json.dumps(value)
	with closing(connect()) as conn:
		with conn:
			conn.execute(
				"""
				INSERT INTO planner_kv (key, value, updated_at) VALUES (?, ?, ?)
				ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at
				""",
				(key, payload, utc_now_iso())
			)

def clear():
	"""Remove every stored key."""
	with closing(connect()) as conn:
		with conn:
			conn.execute("DELETE FROM planner_kv")
