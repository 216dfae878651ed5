import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "event_manager"),
}
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "15"))
DB_POOL_TIMEOUT = float(os.getenv("DB_POOL_TIMEOUT", "30"))

# "mysql" keeps sessions across restarts, "memory" is per process
SESSION_BACKEND = os.getenv("SESSION_BACKEND", "mysql")
SESSION_TTL_HOURS = 24

LOG_FILE = os.getenv("LOG_FILE", "action.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

TRUST_PROXY = bool(int(os.getenv("TRUST_PROXY", "0")))

DEBUG = True
PORT = int(os.getenv("PORT", "3000"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
