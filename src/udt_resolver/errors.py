"""
udt_resolver.errors

Exceptions raised by the resolver and its metadata sources.

Responsibilities:
- Signal invalid construction arguments.
- Name the database error family that metadata lookups propagate.
"""

from __future__ import annotations

from sqlalchemy.exc import DatabaseError

__all__ = ["DatabaseError", "InvalidArgument"]


class InvalidArgument(ValueError):
    """
    Raised when a required collaborator (connection, metadata source) is missing.
    """


# --- Module Notes -----------------------------------------------------------
# DatabaseError is SQLAlchemy's own class: driver failures reach callers unwrapped.
