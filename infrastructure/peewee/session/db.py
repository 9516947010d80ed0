import os

from playhouse.db_url import connect

# Default to SQLite
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

db = connect(DATABASE_URL)
