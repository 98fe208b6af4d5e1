"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"
ADMIN_NAME = "Administrator"
ADMIN_EMAIL = "admin@example.com"

DEFAULT_UPLOAD_DIR = "uploads"
DEFAULT_CORS_ORIGIN = "http://localhost:3000"

AUTH_SUCCESS = "success"
