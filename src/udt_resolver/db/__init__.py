"""
udt_resolver.db

Persistence package (SQLAlchemy).

Responsibilities:
- Provide the catalog mapping, engine/connection setup and dev/test bootstrap.
"""

# Package marker.
