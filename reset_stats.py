"""
Reset planner data.
Clears the study log (all focus minutes), and optionally everything else:
events, courses and wellness check-ins.
"""

from BackEnd.core.paths import db_path
from BackEnd.core.settings import STUDY_LOG_KEY
from BackEnd.repos import store_repo

def _confirmed(prompt):
	return input(prompt).strip().lower() in ['yes', 'y']

def reset_all_stats():
	"""Clear the study log, then offer to wipe the whole planner."""
	db_file = db_path()
	if not db_file.exists():
		print("No planner data found. Stats are already at 0.")
		return

	print(f"Found planner data at: {db_file}")
	if _confirmed("Are you sure you want to reset all study minutes? This cannot be undone. (yes/no): "):
		store_repo.save(STUDY_LOG_KEY, {})
		print("✓ Study log cleared. All study totals are back to 0.")
	else:
		print("Reset cancelled.")
		return

	if _confirmed("\nAlso delete events, courses and wellness check-ins? (yes/no): "):
		store_repo.clear()
		print("✓ Planner data deleted. Default courses come back on next start.")

if __name__ == "__main__":
	print("=" * 50)
	print("Lock-In Planner - Reset Stats")
	print("=" * 50)
	reset_all_stats()
