"""The per-operator history account."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import ClassVar

from operator_ledger.circ_buf import CircBuf
from operator_ledger.config import HEADER_LEN, InvalidAccountDataError
from operator_ledger.discriminators import AccountDiscriminator
from operator_ledger.pubkey import PUBKEY_BYTES, Pubkey

_RESERVED_LEN = 328
_FIXED = struct.Struct(f"<{PUBKEY_BYTES}sIIB")


@dataclass
class OperatorHistory:
    """History of one restaking operator across epochs."""

    DISCRIMINATOR: ClassVar[AccountDiscriminator] = AccountDiscriminator.OPERATOR_HISTORY
    SIZE: ClassVar[int] = _FIXED.size + CircBuf.SIZE + _RESERVED_LEN

    operator_account: Pubkey = field(default_factory=Pubkey)
    struct_version: int = 0
    index: int = 0
    bump: int = 0
    history: CircBuf = field(default_factory=CircBuf)

    def __post_init__(self) -> None:
        if not (0 <= self.struct_version <= 0xFFFFFFFF and 0 <= self.index <= 0xFFFFFFFF):
            raise ValueError("struct_version and index must be unsigned 32-bit integers")
        if not 0 <= self.bump <= 0xFF:
            raise ValueError(f"bump must fit in one byte, got {self.bump}")

    def to_bytes(self) -> bytes:
        fixed = _FIXED.pack(self.operator_account.data, self.struct_version, self.index, self.bump)
        return (
            bytes([self.DISCRIMINATOR]) + bytes(HEADER_LEN - 1)
            + fixed + self.history.to_bytes() + bytes(_RESERVED_LEN)
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> OperatorHistory:
        if len(data) != HEADER_LEN + cls.SIZE:
            raise InvalidAccountDataError(
                f"operator history account needs {HEADER_LEN + cls.SIZE} bytes"
            )
        if data[0] != cls.DISCRIMINATOR:
            raise InvalidAccountDataError("OperatorHistory account discriminator is invalid")
        operator, struct_version, index, bump = _FIXED.unpack_from(data, HEADER_LEN)
        start = HEADER_LEN + _FIXED.size
        history = CircBuf.from_bytes(bytes(data[start:start + CircBuf.SIZE]))
        return cls(Pubkey(operator), struct_version, index, bump, history)