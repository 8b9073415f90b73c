import os

# db.py refuses to import without a database URL; tests run on in-memory SQLite
os.environ.setdefault("DATABASE_URL", "sqlite://")
