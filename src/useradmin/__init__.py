"""User administration HTTP API.

A FastAPI service exposing CRUD operations over users, backed by SQLModel,
with a placeholder login endpoint.
"""

__version__ = "0.1.0"
