"""Warrior API: an in-memory CRUD service for warrior game characters."""

__version__ = "0.1.0"
