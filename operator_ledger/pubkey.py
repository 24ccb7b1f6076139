"""Public keys and program-derived addresses."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from dataclasses import dataclass

PUBKEY_BYTES = 32
MAX_SEEDS = 16
MAX_SEED_LEN = 32

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_P = 2**255 - 19
_D = -121665 * pow(121666, _P - 2, _P) % _P


class InvalidSeedsError(ValueError):
    """Seeds cannot produce a valid program address."""


def is_on_curve(data: bytes) -> bool:
    """Whether 32 bytes decode to a point on the ed25519 curve."""
    if len(data) != PUBKEY_BYTES:
        raise ValueError(f"a curve point needs {PUBKEY_BYTES} bytes, got {len(data)}")
    y = int.from_bytes(data, "little") & ((1 << 255) - 1)
    u = (y * y - 1) % _P
    v = (_D * y * y + 1) % _P
    if v == 0:
        return u == 0
    ratio = u * pow(v, _P - 2, _P) % _P
    return ratio == 0 or pow(ratio, (_P - 1) // 2, _P) == 1


@dataclass(frozen=True)
class Pubkey:
    """A 32-byte account address."""

    data: bytes = bytes(PUBKEY_BYTES)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) != PUBKEY_BYTES:
            raise ValueError(f"pubkey needs {PUBKEY_BYTES} bytes, got {len(self.data)}")

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        number, digits = int.from_bytes(self.data, "big"), ""
        while number:
            number, remainder = divmod(number, 58)
            digits = _ALPHABET[remainder] + digits
        return "1" * (PUBKEY_BYTES - len(self.data.lstrip(b"\0"))) + digits

    @classmethod
    def from_string(cls, text: str) -> Pubkey:
        """Parse a base58-encoded address."""
        if len(text) > 44:
            raise ValueError("base58 pubkey string is too long")
        number = 0
        for char in text:
            if char not in _ALPHABET:
                raise ValueError(f"invalid base58 character: {char!r}")
            number = number * 58 + _ALPHABET.index(char)
        zeros = len(text) - len(text.lstrip("1"))
        data = bytes(zeros) + number.to_bytes((number.bit_length() + 7) // 8, "big")
        return cls(data)

    @classmethod
    def create_program_address(cls, seeds: Sequence[bytes], program_id: Pubkey) -> Pubkey:
        """Derive an off-curve address from seeds; raise InvalidSeedsError if on curve."""
        if len(seeds) > MAX_SEEDS or any(len(seed) > MAX_SEED_LEN for seed in seeds):
            raise InvalidSeedsError("too many seeds or a seed is too long")
        digest = hashlib.sha256(
            b"".join(bytes(seed) for seed in seeds) + program_id.data + b"ProgramDerivedAddress"
        ).digest()
        if is_on_curve(digest):
            raise InvalidSeedsError("derived address lies on the curve")
        return cls(digest)

    @classmethod
    def find_program_address(
        cls, seeds: Sequence[bytes], program_id: Pubkey
    ) -> tuple[Pubkey, int]:
        """Find the canonical address and the highest bump seed that yields it."""
        for bump in range(255, -1, -1):
            try:
                return cls.create_program_address([*seeds, bytes([bump])], program_id), bump
            except InvalidSeedsError:
                if len(seeds) >= MAX_SEEDS or any(len(s) > MAX_SEED_LEN for s in seeds):
                    raise
        raise InvalidSeedsError("Unable to find a viable program address bump seed")