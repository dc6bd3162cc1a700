import os
import tempfile

SECRET_KEY = "test-secret"

STORAGE_PATH = os.getenv("STORAGE_PATH", os.path.join(tempfile.gettempdir(), "hr_portal_test_storage.json"))
STORAGE_QUOTA_BYTES = None

DEBUG = False
TESTING = True
