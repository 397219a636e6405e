"""PBKDF2-SHA256 hashing primitive (stdlib, zero dependencies)."""

from __future__ import annotations

import hashlib
import os

from costbench.core.types import MIN_COST

_SALT_LENGTH = 32
_HASH_LENGTH = 32


class Pbkdf2Hasher:
    """PBKDF2-HMAC-SHA256 run for ``2 ** cost`` iterations."""

    name = "pbkdf2"
    min_cost = MIN_COST
    max_cost = 30  # 2**31 iterations overflows hashlib's int limit

    def hash(self, payload: bytes, cost: int) -> bytes:
        salt = os.urandom(_SALT_LENGTH)
        dk = hashlib.pbkdf2_hmac("sha256", payload, salt, 2**cost, dklen=_HASH_LENGTH)
        return salt + dk
