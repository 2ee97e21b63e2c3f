import unittest
from unittest import mock

from BackEnd.repos import course_repo, event_repo, store_repo, study_log_repo, wellness_repo
from BackEnd.services.study_ledger import StudyLedger
from store_case import TempStoreCase

DAY = "2024-01-10"


class TestCourseRepo(TempStoreCase):
	def test_defaults_on_first_run(self):
		self.assertEqual(course_repo.list_courses(), ["BIO 212", "CHE 211", "PSY 233"])

	def test_add_trims_and_ignores_blank_or_duplicate(self):
		course_repo.add_course("  COM 215 ")
		course_repo.add_course("")
		course_repo.add_course("   ")
		courses = course_repo.add_course("BIO 212")
		self.assertEqual(courses, ["BIO 212", "CHE 211", "PSY 233", "COM 215"])
		self.assertEqual(course_repo.list_courses(), courses)

	def test_remove_cascades_into_study_log(self):
		stored = StudyLedger({
			"2024-01-09": {"BIO 212": 25, "CHE 211": 30},
			DAY: {"BIO 212": 50},
		})
		study_log_repo.save_ledger(stored)

		courses = course_repo.remove_course("BIO 212")
		self.assertEqual(courses, ["CHE 211", "PSY 233"])
		self.assertEqual(study_log_repo.load_ledger().to_dict(), {
			"2024-01-09": {"CHE 211": 30},
			DAY: {},
		})

	def test_remove_prunes_the_in_memory_ledger(self):
		ledger = StudyLedger({DAY: {"PSY 233": 15, "CHE 211": 45}})
		course_repo.remove_course("PSY 233", ledger=ledger)
		self.assertEqual(ledger.to_dict(), {DAY: {"CHE 211": 45}})
		self.assertEqual(study_log_repo.load_ledger(), ledger)

	def test_failed_log_save_leaves_course_and_minutes_in_place(self):
		stored = StudyLedger({DAY: {"BIO 212": 25}})
		study_log_repo.save_ledger(stored)
		ledger = study_log_repo.load_ledger()

		with mock.patch.object(study_log_repo, "save_ledger", side_effect=OSError("disk full")):
			with self.assertRaises(OSError):
				course_repo.remove_course("BIO 212", ledger=ledger)

		self.assertIn("BIO 212", course_repo.list_courses())
		self.assertEqual(study_log_repo.load_ledger().to_dict(), {DAY: {"BIO 212": 25}})
		self.assertEqual(ledger.to_dict(), {DAY: {"BIO 212": 25}})

	def test_failed_course_save_leaves_live_ledger_untouched(self):
		ledger = StudyLedger({DAY: {"BIO 212": 25}})
		with mock.patch.object(course_repo, "save_courses", side_effect=OSError("disk full")):
			with self.assertRaises(OSError):
				course_repo.remove_course("BIO 212", ledger=ledger)
		self.assertEqual(ledger.to_dict(), {DAY: {"BIO 212": 25}})

	def test_removing_every_course_leaves_empty_list(self):
		for name in list(course_repo.list_courses()):
			course_repo.remove_course(name)
		self.assertEqual(course_repo.list_courses(), [])


class TestEventRepo(TempStoreCase):
	def test_add_and_list_by_day_sorted_by_start(self):
		event_repo.add_event(DAY, type="Practice", title="Team practice", start_time="15:30", duration_min=120)
		event_repo.add_event(DAY, type="Class", title=" BIO lecture ", start_time="09:00", duration_min=75)
		event_repo.add_event("2024-01-11", type="Lift", title="Lift", start_time="07:00", duration_min=60)

		events = event_repo.events_for_day(DAY)
		self.assertEqual([e["title"] for e in events], ["BIO lecture", "Team practice"])
		self.assertEqual(event_repo.scheduled_minutes(DAY), 195)
		self.assertEqual(event_repo.scheduled_minutes("2024-01-12"), 0)

	def test_blank_title_is_rejected(self):
		self.assertIsNone(event_repo.add_event(DAY, title="   "))
		self.assertEqual(event_repo.list_events(), [])

	def test_fields_are_normalized(self):
		event = event_repo.add_event(DAY, type="Nap", title="Rest", start_time="25:99",
			duration_min="-10", notes="  ice  ")
		self.assertEqual(event["type"], "Other")
		self.assertEqual(event["startTime"], "09:00")
		self.assertEqual(event["durationMin"], 0)
		self.assertEqual(event["notes"], "ice")
		self.assertEqual(event["date"], DAY)
		self.assertTrue(event["id"])

	def test_non_numeric_stored_duration_reads_as_zero(self):
		store_repo.save("events", [
			{"id": "a", "date": DAY, "type": "Class", "title": "Lab", "startTime": "10:00", "durationMin": "abc"},
			{"id": "b", "date": DAY, "type": "Lift", "title": "Lift", "startTime": "07:00", "durationMin": "60"},
		])
		self.assertEqual([e["durationMin"] for e in event_repo.events_for_day(DAY)], [60, 0])
		self.assertEqual(event_repo.scheduled_minutes(DAY), 60)

	def test_delete_by_id(self):
		keep = event_repo.add_event(DAY, title="Match", start_time="18:00", duration_min=180)
		drop = event_repo.add_event(DAY, title="Study Block", start_time="20:00")
		self.assertTrue(event_repo.delete_event(drop["id"]))
		self.assertFalse(event_repo.delete_event("missing"))
		self.assertEqual([e["id"] for e in event_repo.list_events()], [keep["id"]])

	def test_templates(self):
		self.assertEqual(event_repo.template("Recovery"), ("Recovery (ice/roll/stretch)", 30))
		self.assertEqual(event_repo.template("Unknown"), ("Other", 30))


class TestWellnessRepo(TempStoreCase):
	def test_defaults_when_nothing_saved(self):
		record = wellness_repo.get_wellness(DAY)
		self.assertEqual(record, {"sleepHours": 7, "soreness": 3, "stress": 4, "energy": 6, "notes": ""})

	def test_save_coerces_fields(self):
		saved = wellness_repo.save_wellness(DAY, {
			"sleepHours": "-2",
			"soreness": "12",
			"stress": "abc",
			"energy": 0,
			"notes": None,
		})
		self.assertEqual(saved, {"sleepHours": 0.0, "soreness": 10, "stress": 4, "energy": 1, "notes": ""})
		self.assertEqual(wellness_repo.get_wellness(DAY), saved)

	def test_records_are_kept_per_date(self):
		wellness_repo.save_wellness(DAY, {"sleepHours": 8.5, "soreness": 2, "stress": 3, "energy": 9, "notes": "good"})
		self.assertEqual(wellness_repo.get_wellness(DAY)["energy"], 9)
		self.assertEqual(wellness_repo.get_wellness("2024-01-11")["energy"], 6)


if __name__ == "__main__":
	unittest.main(verbosity=2)
