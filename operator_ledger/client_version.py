"""Validator client version."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class ClientVersion:
    """A major.minor.patch version, each part one byte."""

    SIZE: ClassVar[int] = 3

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must fit in one byte, got {value}")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def to_bytes(self) -> bytes:
        return bytes((self.major, self.minor, self.patch))

    @classmethod
    def from_bytes(cls, data: bytes) -> ClientVersion:
        if len(data) != cls.SIZE:
            raise ValueError(f"client version needs {cls.SIZE} bytes, got {len(data)}")
        return cls(data[0], data[1], data[2])