import os

SECRET_KEY = "test-secret"

DOC_STORE = "memory"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "staffing_portal_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False

DEFAULT_CANDIDATE_PASSWORD = "password123"
DIRECT_CLIENT_REVENUE = 10000
DEFAULT_TEAM_SALARY = 30000
SESSION_DAYS = 7
