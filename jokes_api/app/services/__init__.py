"""
Service layer.  ``joke_service`` owns the in‑memory joke collection.
"""
