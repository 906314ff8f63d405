"""URL shortener service: FastAPI + SQLAlchemy over SQLite."""

__version__ = "1.0.0"
