import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workforce_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Used when the company has not saved its own settings yet
DEFAULT_PERMISSION_MINUTES = int(os.getenv("DEFAULT_PERMISSION_MINUTES", "15"))
DEFAULT_BATCH_NAME = os.getenv("DEFAULT_BATCH_NAME", "Full Time")
