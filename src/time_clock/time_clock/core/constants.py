"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

# Query-string format for report date bounds, e.g. "2026-01-31 08:30".
INPUT_DATE_FORMAT = "%Y-%m-%d %H:%M"

DEFAULT_USERS_DB_PATH = "data/users_db.json"
