"""Pytest configuration and fixtures."""

import json

import pytest
from pathlib import Path

from hashstring.config import get_settings
from hashstring.phc.models import ParsedRecord

KAT_PATH = Path(__file__).parent / "fixtures" / "kat.json"


def _load_kat() -> dict:
    with KAT_PATH.open(encoding="utf-8") as f:
        return json.load(f)


KAT = _load_kat()


def pytest_generate_tests(metafunc):
    """Parametrize tests that ask for known-answer vectors."""
    if "good_hash_string" in metafunc.fixturenames:
        metafunc.parametrize("good_hash_string", KAT["good"])
    if "bad_vector" in metafunc.fixturenames:
        metafunc.parametrize(
            "bad_vector", KAT["bad"], ids=[v["reason"] for v in KAT["bad"]]
        )


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch, tmp_path):
    """Make every test read settings from its own environment.

    Settings also read `.env` from the working directory, so each test runs
    from an empty temporary directory.
    """
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def salt() -> bytes:
    """The 20-byte salt from the '4fXXG0spB92WPB1NitT8/OH0VKI' vector."""
    return bytes.fromhex("e1f5d71b4b2907dd963c1d4d8ad4fcfce1f454a2")


@pytest.fixture
def key_id() -> bytes:
    """The 6-byte key identifier encoded as 'Hj5+dsK0'."""
    return bytes.fromhex("1e3e7e76c2b4")


@pytest.fixture
def params_record() -> ParsedRecord:
    return ParsedRecord(m=120, t=5000, p=2)


@pytest.fixture
def salted_record(salt: bytes) -> ParsedRecord:
    return ParsedRecord(m=120, t=5000, p=2, salt=salt)


@pytest.fixture
def full_record(salt: bytes, key_id: bytes) -> ParsedRecord:
    return ParsedRecord(
        m=120,
        t=5000,
        p=2,
        key_id=key_id,
        associated_data=bytes(range(20)),
        salt=salt,
        output=bytes(range(100, 132)),
    )


@pytest.fixture
def largest_record() -> ParsedRecord:
    """A record with every numeric field and byte field at its maximum."""
    return ParsedRecord(
        m=4294967295,
        t=4294967295,
        p=255,
        key_id=b"\xff" * 8,
        associated_data=b"\xff" * 32,
        salt=b"\xff" * 48,
        output=b"\xff" * 64,
    )
