"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

# Storage keys
STORAGE_KEY = "ipt_demo_v1"
# Unreadable data found under STORAGE_KEY is copied here before reseeding.
CORRUPT_BACKUP_KEY = "ipt_demo_v1_corrupt"
AUTH_TOKEN_KEY = "auth_token"
UNVERIFIED_EMAIL_KEY = "unverified_email"
EMAIL_VERIFIED_KEY = "email_verified"

MIN_PASSWORD_LENGTH = 6

# Roughly what browsers grant a single origin for local storage.
DEFAULT_STORAGE_QUOTA_BYTES = 5 * 1024 * 1024

SEED_ADMIN_EMAIL = "admin@example.com"
SEED_ADMIN_PASSWORD = "Password123!"
