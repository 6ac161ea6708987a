import os

STORE_CONFIG = {
    # "json" keeps users in a single JSON file, "memory" keeps them in-process only
    "backend": os.getenv("STORAGE_BACKEND", "json"),
    "path": os.getenv("USERS_DB_PATH", "data/users_db.json"),
    # Seed Anna/Bob/Charlie when the database file does not exist yet
    "seed_default_users": bool(int(os.getenv("SEED_DEFAULT_USERS", "1"))),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
