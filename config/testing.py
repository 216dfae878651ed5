import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "event_manager_test"),
}
DB_POOL_SIZE = 2
DB_POOL_TIMEOUT = 1

SESSION_BACKEND = "memory"
SESSION_TTL_HOURS = 24

LOG_FILE = None
LOG_LEVEL = "WARNING"

TRUST_PROXY = False

DEBUG = False
TESTING = True
PORT = 3000

AUTO_INIT_DB = False
