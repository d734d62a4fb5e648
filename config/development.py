import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# 'memory' keeps everything in process; 'mysql' persists to the documents table.
DOC_STORE = os.getenv("DOC_STORE", "memory")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "staffing_portal"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
# Demo accounts and settings
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))

DEFAULT_CANDIDATE_PASSWORD = os.getenv("DEFAULT_CANDIDATE_PASSWORD", "password123")
DIRECT_CLIENT_REVENUE = float(os.getenv("DIRECT_CLIENT_REVENUE", "10000"))
DEFAULT_TEAM_SALARY = float(os.getenv("DEFAULT_TEAM_SALARY", "30000"))
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))
