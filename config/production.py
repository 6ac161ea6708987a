import os

STORE_CONFIG = {
    "backend": os.getenv("STORAGE_BACKEND", "json"),
    "path": os.getenv("USERS_DB_PATH", "data/users_db.json"),
    "seed_default_users": bool(int(os.getenv("SEED_DEFAULT_USERS", "0"))),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
