"""The global configuration account and account loading checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from operator_ledger.discriminators import AccountDiscriminator
from operator_ledger.pubkey import PUBKEY_BYTES, Pubkey

RESERVED_SPACE_LEN = 288
HEADER_LEN = 8


class ProgramError(Exception):
    """An account failed the program's checks."""


class InvalidAccountOwnerError(ProgramError):
    pass


class InvalidAccountDataError(ProgramError):
    pass


@dataclass
class AccountInfo:
    """An account as seen by the program."""

    key: Pubkey
    owner: Pubkey
    data: bytes = b""
    is_writable: bool = False
    is_signer: bool = False

    def data_is_empty(self) -> bool:
        return not self.data


@dataclass(frozen=True)
class Config:
    """Global configuration of the operator ledger program."""

    DISCRIMINATOR: ClassVar[AccountDiscriminator] = AccountDiscriminator.CONFIG
    SIZE: ClassVar[int] = 2 * PUBKEY_BYTES + 1 + RESERVED_SPACE_LEN

    jito_vault_program_id: Pubkey
    admin: Pubkey
    bump: int

    def __post_init__(self) -> None:
        if not 0 <= self.bump <= 0xFF:
            raise ValueError(f"bump must fit in one byte, got {self.bump}")

    @classmethod
    def seeds(cls) -> list[bytes]:
        return [b"config"]

    @classmethod
    def find_program_address(cls, program_id: Pubkey) -> tuple[Pubkey, int, list[bytes]]:
        """The configuration address, its bump and its seeds."""
        seeds = cls.seeds()
        return (*Pubkey.find_program_address(seeds, program_id), seeds)

    @classmethod
    def load(cls, program_id: Pubkey, account: AccountInfo, expect_writable: bool) -> None:
        """Check that `account` is a valid configuration account; raise otherwise."""
        if account.owner != program_id:
            raise InvalidAccountOwnerError("Config account has an invalid owner")
        if account.data_is_empty():
            raise InvalidAccountDataError("Config account data is empty")
        if expect_writable and not account.is_writable:
            raise InvalidAccountDataError("Config account is not writable")
        if account.data[0] != cls.DISCRIMINATOR:
            raise InvalidAccountDataError("Config account discriminator is invalid")
        if account.key != cls.find_program_address(program_id)[0]:
            raise InvalidAccountDataError("Config account is not at the correct PDA")

    def to_bytes(self) -> bytes:
        return (
            bytes([self.DISCRIMINATOR]) + bytes(HEADER_LEN - 1)
            + self.jito_vault_program_id.data + self.admin.data
            + bytes([self.bump]) + bytes(RESERVED_SPACE_LEN)
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Config:
        if len(data) != HEADER_LEN + cls.SIZE:
            raise InvalidAccountDataError(f"config account needs {HEADER_LEN + cls.SIZE} bytes")
        if data[0] != cls.DISCRIMINATOR:
            raise InvalidAccountDataError("Config account discriminator is invalid")
        body = bytes(data[HEADER_LEN:])
        return cls(
            Pubkey(body[:PUBKEY_BYTES]),
            Pubkey(body[PUBKEY_BYTES:2 * PUBKEY_BYTES]),
            body[2 * PUBKEY_BYTES],
        )