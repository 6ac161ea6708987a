import os

STORE_CONFIG = {
    "backend": os.getenv("STORAGE_BACKEND", "memory"),
    "path": os.getenv("USERS_DB_PATH", "data/users_db.test.json"),
    "seed_default_users": True,
}

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
