import os
import tempfile

# Keep logs and any stray database writes out of the real user data dir,
# and let Qt objects be created without a display.
os.environ.setdefault("LOCKIN_DATA_DIR", tempfile.mkdtemp(prefix="lockin-tests-"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
