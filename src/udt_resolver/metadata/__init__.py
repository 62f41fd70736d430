"""
udt_resolver.metadata

Metadata capability consumed by the resolver.

Responsibilities:
- Define the type descriptor record and the source protocol.
- Provide the SQLAlchemy-backed `information_schema` source.
"""

# Package marker; import from submodules.
