"""Benchmark payloads: the configured password or a random one."""

from __future__ import annotations

import secrets

from costbench.config import BenchConfig

CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789!@#$%^&*"


def generate_password(length: int) -> bytes:
    """Random password of *length* characters from :data:`CHARSET`."""
    return "".join(secrets.choice(CHARSET) for _ in range(length)).encode()


def resolve_password(config: BenchConfig) -> bytes:
    if config.generated:
        return generate_password(config.generate_length)
    return config.password.encode("utf-8")
