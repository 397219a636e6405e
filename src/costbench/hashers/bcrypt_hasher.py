"""bcrypt hashing primitive."""

from __future__ import annotations

import bcrypt

from costbench.core.types import MAX_COST, MIN_COST

# bcrypt only reads this many bytes of the password
MAX_PAYLOAD = 72


class BcryptHasher:
    """Wraps :func:`bcrypt.hashpw`; ``cost`` is the log2 round count."""

    name = "bcrypt"
    min_cost = MIN_COST
    max_cost = MAX_COST

    def hash(self, payload: bytes, cost: int) -> bytes:
        if len(payload) > MAX_PAYLOAD:
            raise ValueError(f"password cannot be longer than {MAX_PAYLOAD} bytes")
        return bcrypt.hashpw(payload, bcrypt.gensalt(rounds=cost))
