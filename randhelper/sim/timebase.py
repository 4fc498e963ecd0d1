"""
Default seed source.

The only non-deterministic input of the library: a tick count read once, when a
generator is drawn from without ever being given a seed.
"""

from __future__ import annotations

import time

import pygame

from .. import config


def startup_ticks() -> int:
    """Return pygame's ticks (ms since init) if pygame is running, otherwise monotonic ms."""
    if pygame.get_init():
        return int(pygame.time.get_ticks())
    return int(time.monotonic() * 1000)


def default_seed() -> int:
    """Seed used by an uninitialized generator on first draw."""
    if config.RANDHELPER_SEED is not None:
        return int(config.RANDHELPER_SEED)
    return startup_ticks()
