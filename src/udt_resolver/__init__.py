"""
udt_resolver

Top-level package for the user-defined type (UDT) resolver.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal; callers import `udt_resolver.resolver` directly.
