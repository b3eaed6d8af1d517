"""jobly: job board REST API (FastAPI + SQLite)."""
