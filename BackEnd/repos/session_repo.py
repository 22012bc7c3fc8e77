import sqlite3
from BackEnd.core.paths import db_path
from BackEnd.core.clock import utc_now_iso

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
	key TEXT PRIMARY KEY,
	value TEXT NOT NULL,
	updated_at TEXT NOT NULL
);
"""

def connect(dbfile=None):
	"""Open SQLite connection and ensure schema is applied."""
	dbfile = dbfile if dbfile is not None else db_path()
	conn = sqlite3.connect(dbfile)
	conn.row_factory = sqlite3.Row
	conn.executescript(SCHEMA)
	return conn

def read_blob(key, dbfile=None):
	"""Return the stored text for key, or None if nothing is stored."""
	conn = connect(dbfile)
	try:
		row = conn.execute("SELECT value FROM kv_store WHERE key=?", (key,)).fetchone()
		return row["value"] if row else None
	finally:
		conn.close()

def write_blob(key, value, dbfile=None):
	"""Insert or replace the text stored under key."""
	now_utc = utc_now_iso()
	conn = connect(dbfile)
	try:
		with conn:
			conn.execute(
				"""
				INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
				ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at
				""",
				(key, value, now_utc)
			)
	finally:
		conn.close()
