"""Tags stored in the first byte of every program-owned account."""

from __future__ import annotations

from enum import IntEnum


class AccountDiscriminator(IntEnum):
    """Identifies the kind of account held in account data."""

    CONFIG = 1
    OPERATOR_HISTORY = 2