"""
Sampling helpers built on a GeneratorState.

Every method is a pure function of the generator's two primitives
(`next_uniform_int` / `next_uniform_float`); the helper keeps no state of its own
beyond the generator handle.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence
from itertools import islice
from typing import Any, Iterable, Optional, TypeVar, Union

import pygame

from .config import PERCENT_SCALE, TAU
from randhelper.errors import EmptyCollectionError, InvalidArgument
from randhelper.sim.determinism import GeneratorState, get_generator
from randhelper.values import SampledColor

T = TypeVar("T")
Number = Union[int, float]


class RandomHelper:
    """
    Uniform sampling of scalars, angles, directions, colours, ranges and collection elements.

    Usage:
      rnd = RandomHelper(GeneratorState(seed=123))
      rnd.next_float()          # float in [0.0, 1.0)
      rnd.chance(0.25)          # 25% chance
      rnd.chance(25)            # also 25% chance (percent overload)
      rnd.next_vector2(4.0)     # pygame.Vector2 of length 4 in a random direction
      rnd.choose(["a", "b"])

    Without a generator, the process-wide one (`determinism.get_generator()`) is used,
    looked up on every call so `set_seed()` always applies.
    """

    def __init__(self, generator: Optional[GeneratorState] = None):
        self._generator = generator

    @property
    def generator(self) -> GeneratorState:
        if self._generator is not None:
            return self._generator
        return get_generator()

    # -- scalars --------------------------------------------------------

    def next_bool(self) -> bool:
        """True or False, 50/50."""
        return self.generator.next_uniform_int(2) == 0

    def next_float(self, max: Optional[Number] = None) -> float:
        """
        Float in [0, 1), or scaled by `max`.

        With max > 0 the result is in [0, max); with max < 0 it is in (max, 0].
        """
        value = self.generator.next_uniform_float()
        if max is None:
            return value
        return value * max

    def next_int(self, max: int) -> int:
        """Int in [0, max). Raises InvalidArgument when max <= 0."""
        return self.generator.next_uniform_int(max)

    def next_angle(self) -> float:
        """Angle in radians, [0, 2*pi)."""
        return self.next_float(TAU)

    def minus_one_to_one(self) -> float:
        """Float in [-1, 1)."""
        return self.next_float(2.0) - 1.0

    def minus_one_or_one(self) -> int:
        """Either -1 or 1, never 0."""
        return -1 if self.next_bool() else 1

    # -- colours / directions -------------------------------------------

    def next_color(self) -> SampledColor:
        """Random r, g, b in [0, 1) (drawn in that order), fully opaque."""
        r = self.next_float()
        g = self.next_float()
        b = self.next_float()
        return SampledColor(r, g, b)

    def next_vector2(self, magnitude: float = 1.0) -> pygame.Vector2:
        """Direction uniform over the circle, scaled to `magnitude`."""
        angle = self.next_angle()
        return pygame.Vector2(math.cos(angle), math.sin(angle)) * magnitude

    def next_vector3(self, magnitude: float = 1.0) -> pygame.Vector3:
        """
        Direction on the XY plane (z is always 0), scaled to `magnitude`.

        This reuses the 2D angle construction; it is NOT a uniform sample of the sphere.
        """
        angle = self.next_angle()
        return pygame.Vector3(math.cos(angle), math.sin(angle), 0.0) * magnitude

    # -- ranges ---------------------------------------------------------

    def range(self, min: Any, max: Any) -> Any:
        """
        Value between `min` [inclusive] and `max` [exclusive].

        Scalars give `min + next_float(max - min)`. Vectors (pygame.Vector2/Vector3 or
        plain sequences) are sampled per axis, x first, giving a point in the box.
        """
        if isinstance(min, numbers.Real) and isinstance(max, numbers.Real):
            return min + self.next_float(max - min)
        lo = tuple(min)
        hi = tuple(max)
        if len(lo) != len(hi):
            raise InvalidArgument(f"range() bounds differ in dimension: {len(lo)} vs {len(hi)}")
        axes = [a + self.next_float(b - a) for a, b in zip(lo, hi)]
        if isinstance(min, pygame.Vector2) and len(axes) == 2:
            return pygame.Vector2(axes)
        if isinstance(min, pygame.Vector3) and len(axes) == 3:
            return pygame.Vector3(axes)
        return tuple(axes)

    # -- chance rolls ---------------------------------------------------

    def chance_fraction(self, p: float) -> bool:
        """True with probability p, for p in [0.0, 1.0]."""
        return self.next_float() < p

    def chance_percent(self, percent: int) -> bool:
        """True with probability percent/100, for percent in 0..100."""
        return self.next_int(PERCENT_SCALE) < percent

    def chance(self, p: Number) -> bool:
        """
        Roll a random chance.

        An integer (int, numpy.int64, ...) is a percentage (0 - 100), any other real
        number is a fraction (0.0 - 1.0): chance(25) and chance(0.25) are the same roll.
        """
        if isinstance(p, bool):
            raise InvalidArgument("chance() takes a percentage int or a fraction float, not a bool")
        if isinstance(p, numbers.Integral):
            return self.chance_percent(p)
        if isinstance(p, numbers.Real):
            return self.chance_fraction(p)
        raise InvalidArgument(f"chance() takes a number, got {type(p).__name__}")

    # -- collections ----------------------------------------------------

    def choose(self, collection: Iterable[T]) -> T:
        """
        Random element of a non-empty collection.

        The collection is only read: sequences are indexed, other sized collections
        (sets, dict views) are walked up to the drawn index.
        """
        try:
            count = len(collection)  # type: ignore[arg-type]
        except TypeError:
            raise InvalidArgument(f"choose() needs a sized collection, got {type(collection).__name__}") from None
        if count == 0:
            raise EmptyCollectionError("choose() called on an empty collection")
        index = self.next_int(count)
        if isinstance(collection, Sequence):
            return collection[index]
        return next(islice(iter(collection), index, None))
