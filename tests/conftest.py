from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest  # noqa: E402

from randhelper import GeneratorState, RandomHelper  # noqa: E402
from randhelper.sim import determinism  # noqa: E402


@pytest.fixture
def rnd() -> RandomHelper:
    return RandomHelper(GeneratorState(seed=1234))


@pytest.fixture
def fresh_global(monkeypatch):
    """Run with a brand-new (uninitialized) process-wide generator."""
    monkeypatch.setattr(determinism, "_GLOBAL_GENERATOR", None)
    yield
