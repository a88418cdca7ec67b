import os

SECRET_KEY = "test-secret"

STORE_BACKEND = "memory"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_portal_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = True

# The assistant stays disabled unless a test injects a text generator.
API_KEY = None
AI_MODEL = "gemini-2.5-flash"
AI_TIMEOUT = 5.0

TIMEZONE = None

CORS_ORIGIN = "*"
MAX_CONTENT_LENGTH = 5 * 1024 * 1024
