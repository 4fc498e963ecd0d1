"""
Small value types filled by the sampling layer.

Vectors come straight from pygame (`pygame.Vector2` / `pygame.Vector3` are float based).
`pygame.Color` only holds 0..255 ints, so colours are sampled as floats here and
converted at the render boundary.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

import pygame


def _to_byte(channel: float) -> int:
    return max(0, min(255, int(channel * 255)))


@dataclass(frozen=True, slots=True)
class SampledColor:
    """RGBA colour with float channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_pygame_color(self) -> pygame.Color:
        return pygame.Color(_to_byte(self.r), _to_byte(self.g), _to_byte(self.b), _to_byte(self.a))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
