"""Entities organized by business concept.

Each entity package colocates its domain model (entity.py), persistence
model (table.py), data access (repository.py) and API models (schemas.py).
"""

from .core.user import User, UserRepository, UserStatus, UserTable

__all__ = [
    "User",
    "UserStatus",
    "UserTable",
    "UserRepository",
]
