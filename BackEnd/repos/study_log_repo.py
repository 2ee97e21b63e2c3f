from BackEnd.core.settings import STUDY_LOG_KEY
from BackEnd.repos import store_repo
from BackEnd.services.study_ledger import StudyLedger

def load_ledger():
	"""Load the persisted study log ({} -> empty ledger on any read problem)."""
	return StudyLedger.from_dict(store_repo.load(STUDY_LOG_KEY, {}))

def save_ledger(ledger):
	store_repo.save(STUDY_LOG_KEY, ledger.to_dict())
