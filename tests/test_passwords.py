"""Tests for benchmark payload selection."""

from costbench.config import BenchConfig
from costbench.passwords import CHARSET, generate_password, resolve_password


class TestGeneratePassword:
    def test_length_and_charset(self):
        pw = generate_password(40)
        assert len(pw) == 40
        assert set(pw.decode()) <= set(CHARSET)

    def test_zero_length(self):
        assert generate_password(0) == b""


class TestResolvePassword:
    def test_provided(self):
        cfg = BenchConfig(password="pässword", hasher="bcrypt")
        assert resolve_password(cfg) == "pässword".encode("utf-8")

    def test_generated_overrides_password(self):
        cfg = BenchConfig(password="ignored", generate_length=16, hasher="bcrypt")
        pw = resolve_password(cfg)
        assert len(pw) == 16
        assert pw != b"ignored"
