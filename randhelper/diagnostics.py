"""
Seeded statistical self-checks for the sampling layer.

Each check runs on its own fresh generator so results depend only on (seed, samples).
Used by tools/distribution_check.py and the test suite.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Callable

from randhelper.sampling import RandomHelper
from randhelper.sim.determinism import GeneratorState

ANGLE_BUCKETS = 8


@dataclass(slots=True)
class CheckResult:
    name: str
    passed: bool
    detail: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _sigma_tolerance(samples: int, p: float, sigmas: float = 5.0) -> float:
    """Allowed deviation of a bucket count from samples * p."""
    return sigmas * math.sqrt(samples * p * (1.0 - p))


def check_float_mean(rnd: RandomHelper, samples: int) -> CheckResult:
    total = 0.0
    lo, hi = 1.0, 0.0
    for _ in range(samples):
        v = rnd.next_float()
        total += v
        lo = min(lo, v)
        hi = max(hi, v)
    mean = total / samples
    # std of a uniform [0,1) mean is 1/sqrt(12 n)
    tol = 5.0 / math.sqrt(12.0 * samples)
    ok = abs(mean - 0.5) <= tol and lo >= 0.0 and hi < 1.0
    return CheckResult("float_mean", ok, f"mean={mean:0.5f} tol={tol:0.5f} min={lo:0.5f} max={hi:0.5f}")


def check_angle_buckets(rnd: RandomHelper, samples: int) -> CheckResult:
    counts = [0] * ANGLE_BUCKETS
    arc = (math.pi * 2.0) / ANGLE_BUCKETS
    for _ in range(samples):
        a = rnd.next_angle()
        counts[min(ANGLE_BUCKETS - 1, int(a / arc))] += 1
    expected = samples / ANGLE_BUCKETS
    tol = _sigma_tolerance(samples, 1.0 / ANGLE_BUCKETS)
    ok = all(abs(c - expected) <= tol for c in counts)
    return CheckResult("angle_buckets", ok, f"counts={counts} expected={expected:0.1f} tol={tol:0.1f}")


def check_signed_one_ratio(rnd: RandomHelper, samples: int) -> CheckResult:
    neg = 0
    other = 0
    for _ in range(samples):
        v = rnd.minus_one_or_one()
        if v == -1:
            neg += 1
        elif v != 1:
            other += 1
    tol = _sigma_tolerance(samples, 0.5)
    ok = other == 0 and abs(neg - samples / 2) <= tol
    return CheckResult("signed_one_ratio", ok, f"minus_one={neg} one={samples - neg - other} other={other}")


def check_int_range(rnd: RandomHelper, samples: int, bound: int = 10) -> CheckResult:
    counts = [0] * bound
    for _ in range(samples):
        v = rnd.next_int(bound)
        if not 0 <= v < bound:
            return CheckResult("int_range", False, f"next_int({bound}) returned {v}")
        counts[v] += 1
    tol = _sigma_tolerance(samples, 1.0 / bound)
    ok = all(abs(c - samples / bound) <= tol for c in counts)
    return CheckResult("int_range", ok, f"counts={counts}")


CHECKS: list[Callable[[RandomHelper, int], CheckResult]] = [
    check_float_mean,
    check_angle_buckets,
    check_signed_one_ratio,
    check_int_range,
]


def run_checks(seed: int, samples: int = 100_000) -> list[CheckResult]:
    results: list[CheckResult] = []
    for i, check in enumerate(CHECKS):
        rnd = RandomHelper(GeneratorState(seed).derive(f"check_{i}"))
        results.append(check(rnd, samples))
    return results
