import os

# Must run before any application module opens the database.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["TASK_STORE"] = "memory"
os.environ.setdefault("BCRYPT_ROUNDS", "4")
