"""
Determinism helpers.

Goals:
- Provide a single seeded generator that every sampling call draws from
- Provide stable sub-streams derived from a base seed (avoid hidden coupling between systems)

Non-goals:
- Cryptographic security
- Thread safety (callers must serialize access to a shared generator)
- Perfect cross-language reproducibility (this is Python's Mersenne Twister)
"""

from __future__ import annotations

import numbers
import random
import zlib
from typing import Any, Optional

from .. import config
from randhelper.errors import InvalidArgument
from randhelper.sim.timebase import default_seed


def debug_log(msg: str) -> None:
    if not config.DEBUG_RNG:
        return
    print(f"[rng] {msg}")


def to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    v = int(value) & 0xFFFFFFFF
    return v - 0x100000000 if v >= 0x80000000 else v


class GeneratorState:
    """
    One reproducible uniform bit stream.

    Created without a seed, the state stays uninitialized until the first draw,
    which seeds it from the startup tick count (see `timebase.default_seed`).
    `reseed()` throws the old bit source away and builds a fresh one.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed: int = 0
        self._random: Optional[random.Random] = None
        if seed is not None:
            self.reseed(seed)

    def __repr__(self) -> str:
        if self._random is None:
            return "GeneratorState(<uninitialized>)"
        return f"GeneratorState(seed={self._seed})"

    @property
    def initialized(self) -> bool:
        return self._random is not None

    @property
    def seed(self) -> int:
        self.default_init()
        return self._seed

    def reseed(self, seed: int) -> None:
        """Discard all prior state and reinitialize the bit source from `seed`."""
        self._seed = to_int32(seed)
        # Seed with the unsigned view: random.Random(-n) and random.Random(n) are the same stream.
        self._random = random.Random(self._seed & 0xFFFFFFFF)
        debug_log(f"reseed seed={self._seed}")

    def default_init(self) -> None:
        """Seed from the default seed source, unless already initialized."""
        if self._random is not None:
            return
        seed = default_seed()
        self.reseed(seed)
        debug_log(f"default init from startup ticks seed={self._seed}")

    def _source(self) -> random.Random:
        if self._random is None:
            self.default_init()
        return self._random

    def next_uniform_int(self, bound: int) -> int:
        """Return an int in [0, bound)."""
        if isinstance(bound, bool) or not isinstance(bound, numbers.Integral):
            raise InvalidArgument(f"bound must be an int, got {type(bound).__name__}")
        bound = int(bound)
        if bound <= 0:
            raise InvalidArgument(f"bound must be >= 1, got {bound}")
        return self._source().randrange(bound)

    def next_uniform_float(self) -> float:
        """Return a float in [0.0, 1.0) (53 bits of precision)."""
        return self._source().random()

    def derive(self, tag: str) -> "GeneratorState":
        """
        Return an independent generator for a specific system.

        The derived seed depends only on this generator's seed and `tag`,
        never on how many draws have been made.
        """
        # Use stable hashing (NEVER Python's built-in hash(), which is randomized per process).
        crc = zlib.crc32(str(tag).encode("utf-8")) & 0xFFFFFFFF
        return GeneratorState((self.seed & 0xFFFFFFFF) ^ crc)

    def getstate(self) -> tuple[int, Any]:
        """Snapshot the seed and bit source position (for replays)."""
        return self.seed, self._source().getstate()

    def setstate(self, state: tuple[int, Any]) -> None:
        seed, inner = state
        self.reseed(seed)
        self._random.setstate(inner)


_GLOBAL_GENERATOR: Optional[GeneratorState] = None


def get_generator() -> GeneratorState:
    """Return the process-wide generator (uninitialized until first draw or set_seed)."""
    global _GLOBAL_GENERATOR
    if _GLOBAL_GENERATOR is None:
        _GLOBAL_GENERATOR = GeneratorState()
    return _GLOBAL_GENERATOR


def set_seed(seed: int) -> None:
    """Reseed the process-wide generator."""
    get_generator().reseed(seed)


def get_seed() -> int:
    """Seed of the process-wide generator (initializing it if nothing was drawn yet)."""
    return get_generator().seed


def get_rng(tag: Optional[str] = None) -> GeneratorState:
    """
    Get the process-wide generator, or a deterministic sub-generator for a specific system.

    - If `tag` is None: returns the shared generator (sequence depends on call order).
    - If `tag` is provided: returns an independent stream derived from the shared seed.
    """
    if tag is None:
        return get_generator()
    return get_generator().derive(tag)
