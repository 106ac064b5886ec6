"""Product CRUD service with pluggable in-memory and SQL storage."""

__version__ = "0.1.0"
