"""Errors raised by operator history operations."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar


class ErrorCode(IntEnum):
    """Numeric codes carried by operator history errors."""

    EPOCH_OUT_OF_RANGE = 0
    DUPLICATE_EPOCH = 1
    ARITHMETIC = 3000

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorCode.EPOCH_OUT_OF_RANGE: "Epoch is out of range of history",
    ErrorCode.DUPLICATE_EPOCH: "Inserting duplicate epoch",
    ErrorCode.ARITHMETIC: "ArithmeticError",
}


class OperatorHistoryError(Exception):
    """Base class of all operator history errors."""

    code: ClassVar[ErrorCode]

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.code.message if message is None else message)

    @classmethod
    def from_code(cls, code: int) -> OperatorHistoryError:
        """Build the error that belongs to a numeric code."""
        return _BY_CODE[ErrorCode(code)]()


class EpochOutOfRangeError(OperatorHistoryError):
    code = ErrorCode.EPOCH_OUT_OF_RANGE


class DuplicateEpochError(OperatorHistoryError):
    code = ErrorCode.DUPLICATE_EPOCH


class ArithmeticOverflowError(OperatorHistoryError):
    code = ErrorCode.ARITHMETIC


_BY_CODE = {
    error.code: error
    for error in (EpochOutOfRangeError, DuplicateEpochError, ArithmeticOverflowError)
}