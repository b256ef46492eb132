"""
Tests for the taskboard_service package.

Covers:

- password hashing and JWT issuing/verification (`auth.py`)
- the credential store and the auth gate (`credentials.py`, `dependencies.py`)
- the ownership-scoped project/todo store (`resources.py`)
- the HTTP routes of the FastAPI application (`main.py`, `routes/`)
"""
