import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "event_manager"),
}
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "15"))
DB_POOL_TIMEOUT = float(os.getenv("DB_POOL_TIMEOUT", "30"))

SESSION_BACKEND = os.getenv("SESSION_BACKEND", "mysql")
SESSION_TTL_HOURS = 24
SESSION_COOKIE_SECURE = bool(int(os.getenv("SESSION_COOKIE_SECURE", "1")))

LOG_FILE = os.getenv("LOG_FILE", "action.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Behind a reverse proxy the client IP comes from X-Forwarded-For
TRUST_PROXY = bool(int(os.getenv("TRUST_PROXY", "1")))

DEBUG = False
PORT = int(os.getenv("PORT", "3000"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
