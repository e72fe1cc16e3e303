"""Integration test fixtures for running hashcorpus as a subprocess."""

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def python_exe() -> str:
    """Return the absolute path to the Python executable."""
    return sys.executable


@pytest.fixture
def run_hashcorpus(python_exe: str, tmp_path: Path) -> Callable[..., subprocess.CompletedProcess]:
    """Run `python -m hashcorpus` in tmp_path with binary stdin/stdout.

    The environment is inherited from the test, so the isolated_environment
    fixture's HASHCORPUS_* settings apply.
    """

    def _run(*args: str, input: bytes | None = None, env: dict | None = None):
        full_env = dict(os.environ)
        if env:
            full_env.update(env)
        return subprocess.run(
            [python_exe, "-m", "hashcorpus", *args],
            cwd=tmp_path,
            input=input,
            capture_output=True,
            env=full_env,
            timeout=120,
        )

    return _run
