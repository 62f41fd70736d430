"""
udt_resolver.classification

Result codes returned by `UdtResolver.classify`.
"""

from __future__ import annotations

import enum


class UdtClassification(enum.IntEnum):
    # SQL CLI type code for a user-defined type.
    IS_UDT = 17
    # Minimum 32-bit signed integer; never a valid type code.
    NOT_UDT = -(2**31)


# --- Module Notes -----------------------------------------------------------
# IntEnum keeps the members usable wherever a numeric type code is expected.
