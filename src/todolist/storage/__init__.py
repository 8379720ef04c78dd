"""
Durable storage.

Components:
- backends.py: key-value slot backends (JSON file, SQLite)
- persistence.py: task list <-> stored value, load/save with safe fallbacks
"""
