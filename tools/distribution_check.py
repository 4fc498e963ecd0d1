"""
Distribution check runner (headless).

Runs the seeded statistical self-checks from randhelper.diagnostics and returns a
useful exit code, so a PRNG or sampling regression can be caught with a single command.

Examples:
  python tools/distribution_check.py
  python tools/distribution_check.py --seed 3 --samples 200000 --json
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure imports work when running as `python tools/distribution_check.py`
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from randhelper.diagnostics import run_checks  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Run seeded distribution checks")
    ap.add_argument("--seed", type=int, default=42, help="rng seed")
    ap.add_argument("--samples", type=int, default=100_000, help="draws per check")
    ap.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    ns = ap.parse_args(argv)

    if ns.samples <= 0:
        print(f"[distribution_check] ERROR: --samples must be >= 1 (got {ns.samples})")
        return 2

    results = run_checks(ns.seed, ns.samples)
    failed = [r for r in results if not r.passed]

    if ns.json:
        print(json.dumps({"seed": ns.seed, "samples": ns.samples, "results": [r.to_dict() for r in results]}, indent=2))
    else:
        print(f"[distribution_check] seed={ns.seed} samples={ns.samples}")
        for r in results:
            print(f"- {r.name}: {'PASS' if r.passed else 'FAIL'} ({r.detail})")
        print("[distribution_check] DONE:", "PASS" if not failed else f"FAIL ({len(failed)} check(s))")

    return 0 if not failed else 1


if __name__ == "__main__":
    raise SystemExit(main())
