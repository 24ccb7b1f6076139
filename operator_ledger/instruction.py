"""Instructions accepted by the operator history program."""

from __future__ import annotations

from enum import Enum


class InvalidInstructionError(ValueError):
    """Instruction data could not be decoded."""


class OperatorHistoryInstruction(Enum):
    """Program instructions, encoded as a one-byte variant tag."""

    INITIALIZE_CONFIG = 0

    def pack(self) -> bytes:
        return bytes([self.value])

    @classmethod
    def unpack(cls, data: bytes) -> OperatorHistoryInstruction:
        """Decode instruction data; every byte must be consumed."""
        if len(data) != 1:
            raise InvalidInstructionError(f"expected 1 byte of instruction data, got {len(data)}")
        try:
            return cls(data[0])
        except ValueError:
            raise InvalidInstructionError(f"unknown instruction variant: {data[0]}") from None