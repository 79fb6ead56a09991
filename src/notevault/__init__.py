"""
NoteVault Backend - Multi-user note taking API

Accounts, session tokens, owner-only note CRUD, full-text search and
per-note sharing over an async SQL database.

Version: 1.0.0
"""

__version__ = "1.0.0"
