"""
Shared pytest fixtures for hashcorpus tests.

This module provides:
- isolated_environment: clean env, no log file, fresh DI container, cwd in tmp_path
- registry: the verified default algorithm registry
- empty_digests: well-known digests of the empty input
"""

import os
from pathlib import Path

import pytest

from hashcorpus.core.bootstrap import reset
from hashcorpus.hashing import AlgorithmRegistry, create_registry

EMPTY_INPUT_DIGESTS = {
    "SHA1": "da39a3ee5e6b4b0d3255bfef95601890afd80709",
    "SHA256": "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
    "SHA224": "d14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f",
    "SHA512": (
        "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
        "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
    ),
    "SHA384": (
        "38b060a751ac96384cd9327eb1b1e36a21fdb71114be07434c0cc7bf63f6e1da"
        "274edebfe76f65fbd51ad2f14898b95b"
    ),
    "SHA512/224": "6ed0dd02806fa89e25de060c19d3ac86cabb87d6a0ddd05c333b84f4",
    "SHA512/256": "c672b8d1ef56ed28ab87c3622c5114069bdd3ad7b8f9737498d0c01ecef0967a",
}


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    Isolate every test from the developer's environment.

    - Removes HASHCORPUS_* environment variables
    - Disables the rotating log file under the home directory
    - Runs the test with tmp_path as the working directory
    - Resets the DI container before and after the test
    """
    for key in list(os.environ):
        if key.startswith("HASHCORPUS_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("HASHCORPUS_LOGGING__FILE", "false")
    monkeypatch.chdir(tmp_path)

    reset()
    yield
    reset()


@pytest.fixture
def registry() -> AlgorithmRegistry:
    """The verified default registry."""
    return create_registry()


@pytest.fixture
def empty_digests() -> dict[str, str]:
    """Hex digests of b'' keyed by algorithm name."""
    return dict(EMPTY_INPUT_DIGESTS)
