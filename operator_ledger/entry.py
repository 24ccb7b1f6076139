"""A single epoch's record of an operator."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from ipaddress import IPv4Address
from typing import ClassVar

from operator_ledger.client_version import ClientVersion

_RESERVED_LEN = 328
_HEAD = struct.Struct("<QIH")


@dataclass(frozen=True)
class OperatorHistoryEntry:
    """Stake, rank, client version and address of an operator for one epoch."""

    SIZE: ClassVar[int] = _HEAD.size + ClientVersion.SIZE + 4 + _RESERVED_LEN

    activated_stake_lamports: int = 0
    rank: int = 0
    epoch: int = 0
    version: ClientVersion = field(default_factory=ClientVersion)
    ip: bytes = bytes(4)

    def __post_init__(self) -> None:
        _check_range("activated_stake_lamports", self.activated_stake_lamports, 64)
        _check_range("rank", self.rank, 32)
        _check_range("epoch", self.epoch, 16)
        ip = bytes(self.ip)
        if len(ip) != 4:
            raise ValueError(f"ip must have 4 octets, got {len(ip)}")
        object.__setattr__(self, "ip", ip)

    def address(self) -> IPv4Address:
        """The IPv4 address of the operator."""
        return IPv4Address(self.ip)

    def to_bytes(self) -> bytes:
        return b"".join(
            (
                _HEAD.pack(self.activated_stake_lamports, self.rank, self.epoch),
                self.version.to_bytes(),
                self.ip,
                bytes(_RESERVED_LEN),
            )
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> OperatorHistoryEntry:
        if len(data) != cls.SIZE:
            raise ValueError(f"entry needs {cls.SIZE} bytes, got {len(data)}")
        stake, rank, epoch = _HEAD.unpack_from(data)
        version_end = _HEAD.size + ClientVersion.SIZE
        version = ClientVersion.from_bytes(bytes(data[_HEAD.size:version_end]))
        ip = bytes(data[version_end:version_end + 4])
        return cls(stake, rank, epoch, version, ip)


def _check_range(name: str, value: int, bits: int) -> None:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must be an unsigned {bits}-bit integer, got {value}")