"""
Determinism guard (static check).

Flags code that draws randomness without going through a seeded randhelper generator:
- private bit sources: random.Random(...) / Random(...) built outside randhelper/sim
- module-level RNG: random.random(), random.choice(), ...
- GeneratorState() with no seed (falls back to the startup tick count)

Examples:
  python tools/determinism_guard.py
  python tools/determinism_guard.py --paths game/ --json
"""

from __future__ import annotations

import argparse
import ast
import json
from dataclasses import asdict, dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SIM_DIR = PROJECT_ROOT / "randhelper" / "sim"


@dataclass(slots=True)
class Finding:
    kind: str
    file: str
    line: int
    detail: str


class _CallScanner(ast.NodeVisitor):
    def __init__(self, file: str):
        self.file = file
        self.findings: list[Finding] = []

    def _add(self, kind: str, node: ast.AST, detail: str) -> None:
        self.findings.append(Finding(kind, self.file, node.lineno, detail))

    def visit_Call(self, node: ast.Call) -> None:
        func = node.func
        if isinstance(func, ast.Attribute) and isinstance(func.value, ast.Name) and func.value.id == "random":
            if func.attr in ("Random", "SystemRandom"):
                self._add("private_generator", node, f"random.{func.attr}() bypasses GeneratorState; use derive(tag).")
            else:
                self._add("global_rng", node, f"random.{func.attr}() is unseeded; use a RandomHelper.")
        elif isinstance(func, ast.Name) and func.id == "Random":
            self._add("private_generator", node, "Random() bypasses GeneratorState; use derive(tag).")
        elif _callee_name(func) == "GeneratorState" and not node.args and not node.keywords:
            self._add("unseeded_generator", node, "GeneratorState() without a seed is seeded from the clock.")
        self.generic_visit(node)


def _callee_name(func: ast.expr) -> str | None:
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute):
        return func.attr
    return None


def scan_source(src: str, file: str) -> list[Finding]:
    try:
        tree = ast.parse(src, filename=file)
    except SyntaxError as e:
        return [Finding("parse_error", file, int(e.lineno or 0), f"SyntaxError: {e.msg}")]
    scanner = _CallScanner(file)
    scanner.visit(tree)
    return sorted(scanner.findings, key=lambda f: f.line)


def python_files(roots: list[Path]) -> list[Path]:
    """Python files under `roots`, skipping randhelper/sim (home of the sanctioned bit source)."""
    sim = SIM_DIR.resolve()
    files: set[Path] = set()
    for root in roots:
        candidates = [root] if root.is_file() else root.rglob("*.py")
        for p in candidates:
            if p.suffix == ".py" and sim not in p.resolve().parents:
                files.add(p)
    return sorted(files)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Flag randomness that bypasses randhelper generators")
    ap.add_argument("--paths", nargs="*", default=[], help="files or dirs to scan (default: randhelper/)")
    ap.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    ns = ap.parse_args(argv)

    roots = [Path(p) for p in ns.paths] or [PROJECT_ROOT / "randhelper"]
    findings: list[Finding] = []
    for path in python_files(roots):
        findings.extend(scan_source(path.read_text(encoding="utf-8"), str(path)))

    if ns.json:
        print(json.dumps({"findings": [asdict(f) for f in findings]}, indent=2))
    elif findings:
        print(f"[determinism_guard] FAIL: {len(findings)} finding(s)")
        for f in findings:
            print(f"- {f.file}:{f.line} [{f.kind}] {f.detail}")
    else:
        print("[determinism_guard] PASS")
    return 1 if findings else 0


if __name__ == "__main__":
    raise SystemExit(main())
