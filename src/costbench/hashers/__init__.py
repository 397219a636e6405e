"""Hashing primitives."""

from __future__ import annotations

from costbench.exceptions import ConfigError
from costbench.hashers.base import HashPrimitive
from costbench.hashers.bcrypt_hasher import BcryptHasher
from costbench.hashers.pbkdf2 import Pbkdf2Hasher

HASHERS: dict[str, type] = {
    BcryptHasher.name: BcryptHasher,
    Pbkdf2Hasher.name: Pbkdf2Hasher,
}


def get_hasher(name: str) -> HashPrimitive:
    """Instantiate the hasher registered under *name*."""
    try:
        return HASHERS[name]()
    except KeyError:
        raise ConfigError(
            f"Unknown hasher {name!r} (choose from: {', '.join(sorted(HASHERS))})"
        ) from None


__all__ = ["HASHERS", "BcryptHasher", "HashPrimitive", "Pbkdf2Hasher", "get_hasher"]
