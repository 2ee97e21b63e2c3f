import unittest

from BackEnd.services import study_stats
from BackEnd.services.study_ledger import StudyLedger

# 2024-01-08 is a Monday, 2024-01-14 the Sunday of the same week
WEEK = [f"2024-01-{d:02d}" for d in range(8, 15)]


class TestStudyLedger(unittest.TestCase):
	def test_accumulate_creates_entries_lazily(self):
		ledger = StudyLedger()
		self.assertEqual(ledger.to_dict(), {})
		ledger.accumulate("2024-01-10", "BIO 212", 25)
		ledger.accumulate("2024-01-10", "BIO 212", 25)
		ledger.accumulate("2024-01-10", "CHE 211", 45)
		self.assertEqual(ledger.to_dict(), {"2024-01-10": {"BIO 212": 50, "CHE 211": 45}})

	def test_negative_and_zero_minutes_add_nothing(self):
		ledger = StudyLedger()
		ledger.accumulate("2024-01-10", "BIO 212", -5)
		ledger.accumulate("2024-01-10", "BIO 212", 0)
		self.assertEqual(ledger.to_dict(), {})
		self.assertEqual(ledger.total_for_date("2024-01-10"), 0)

	def test_totals_for_absent_dates_are_zero(self):
		ledger = StudyLedger()
		self.assertEqual(ledger.total_for_date("2030-01-01"), 0)
		self.assertEqual(ledger.total_for_course_on_date("2030-01-01", "BIO 212"), 0)
		self.assertEqual(ledger.weekly_total("2030-01-01"), 0)

	def test_remove_course_cascades_and_keeps_dates(self):
		ledger = StudyLedger({
			"2024-01-09": {"BIO 212": 25, "CHE 211": 30},
			"2024-01-10": {"BIO 212": 50},
			"2024-01-11": {"PSY 233": 15},
		})
		ledger.remove_course("BIO 212")
		self.assertEqual(ledger.to_dict(), {
			"2024-01-09": {"CHE 211": 30},
			"2024-01-10": {},
			"2024-01-11": {"PSY 233": 15},
		})
		self.assertEqual(ledger.total_for_date("2024-01-09"), 30)
		self.assertEqual(ledger.total_for_date("2024-01-11"), 15)
		self.assertIn("2024-01-10", ledger)

	def test_weekly_total_covers_monday_to_sunday(self):
		ledger = StudyLedger()
		for i, day in enumerate(WEEK):
			ledger.accumulate(day, "BIO 212", 10 * (i + 1))
		# outside the window on both sides
		ledger.accumulate("2024-01-07", "BIO 212", 999)
		ledger.accumulate("2024-01-15", "BIO 212", 999)

		expected = sum(ledger.total_for_date(d) for d in WEEK)
		self.assertEqual(expected, 280)
		for anchor in WEEK:
			self.assertEqual(ledger.weekly_total(anchor), expected, anchor)

	def test_sunday_anchor_belongs_to_preceding_monday(self):
		ledger = StudyLedger({"2024-01-08": {"BIO 212": 20}, "2024-01-15": {"BIO 212": 5}})
		self.assertEqual(ledger.weekly_total("2024-01-14"), 20)
		self.assertEqual(ledger.weekly_total("2024-01-15"), 5)

	def test_from_dict_drops_malformed_values(self):
		ledger = StudyLedger.from_dict({
			"2024-01-10": {"BIO 212": "30", "CHE 211": -4, "PSY 233": "junk"},
			"2024-01-11": "not a mapping",
		})
		self.assertEqual(ledger.to_dict(), {"2024-01-10": {"BIO 212": 30, "CHE 211": 0, "PSY 233": 0}})
		self.assertEqual(StudyLedger.from_dict(["nope"]).to_dict(), {})

	def test_to_dict_is_a_copy(self):
		ledger = StudyLedger()
		ledger.accumulate("2024-01-10", "BIO 212", 25)
		snapshot = ledger.to_dict()
		snapshot["2024-01-10"]["BIO 212"] = 0
		self.assertEqual(ledger.total_for_course_on_date("2024-01-10", "BIO 212"), 25)


class TestStudyStats(unittest.TestCase):
	def setUp(self):
		self.ledger = StudyLedger({
			"2024-01-08": {"BIO 212": 25},
			"2024-01-10": {"BIO 212": 25, "CHE 211": 45, "PSY 233": 25},
			"2024-01-14": {"CHE 211": 60},
		})

	def test_today_and_week_totals(self):
		self.assertEqual(study_stats.today_total(self.ledger, "2024-01-10"), 95)
		self.assertEqual(study_stats.week_total(self.ledger, "2024-01-10"), 180)
		self.assertEqual(study_stats.today_total(self.ledger, "2024-01-09"), 0)

	def test_course_breakdown_sorted_by_minutes_then_name(self):
		self.assertEqual(study_stats.course_breakdown(self.ledger, "2024-01-10"), [
			("CHE 211", 45), ("BIO 212", 25), ("PSY 233", 25),
		])
		self.assertEqual(study_stats.course_breakdown(self.ledger, "2024-02-01"), [])

	def test_week_series_is_seven_days_from_monday(self):
		series = study_stats.week_series(self.ledger, "2024-01-12")
		self.assertEqual([d for d, _ in series], WEEK)
		self.assertEqual([m for _, m in series], [25, 0, 95, 0, 0, 0, 60])
		self.assertEqual(study_stats.week_label("2024-01-12"), "Week of 2024-01-08")

	def test_views_see_new_credits_immediately(self):
		self.assertEqual(study_stats.today_total(self.ledger, "2024-01-11"), 0)
		self.ledger.accumulate("2024-01-11", "BIO 212", 25)
		self.assertEqual(study_stats.today_total(self.ledger, "2024-01-11"), 25)
		self.assertEqual(study_stats.week_total(self.ledger, "2024-01-11"), 205)


if __name__ == "__main__":
	unittest.main(verbosity=2)
