import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# All portal data (the JSON document) lives in this one file.
STORAGE_PATH = os.getenv("STORAGE_PATH", "instance/hr_portal_storage.json")
STORAGE_QUOTA_BYTES = int(os.getenv("STORAGE_QUOTA_BYTES", str(5 * 1024 * 1024)))

DEBUG = True
