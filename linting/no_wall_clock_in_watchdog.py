#!/usr/bin/env python
"""Reject direct clock and sleep calls in the watchdog core.

The supervisor and recorder must read time only through the injected
``now_fn`` and schedule only through ``schedule_tick``; otherwise tests on
the simulated clock silently diverge from production timing.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
CORE_DIR = ROOT / "session_watchdog" / "watchdog"

# Modules allowed to touch the real clock: the default scheduler and the factory default.
ALLOWED_FILES = {"scheduler.py", "handle.py"}

FORBIDDEN_CALLS = {
    ("time", "time"),
    ("time", "monotonic"),
    ("time", "perf_counter"),
    ("time", "sleep"),
    ("asyncio", "sleep"),
    ("datetime", "now"),
    ("datetime", "utcnow"),
}


def _call_target(node: ast.Call) -> tuple[str, str] | None:
    func = node.func
    if isinstance(func, ast.Attribute) and isinstance(func.value, ast.Name):
        return func.value.id, func.attr
    return None


def _collect_violations(filepath: Path) -> list[str]:
    try:
        source = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []

    try:
        tree = ast.parse(source, filename=str(filepath))
    except SyntaxError:
        return []

    violations: list[str] = []
    rel = filepath.relative_to(ROOT)
    for node in ast.walk(tree):
        if isinstance(node, ast.Call):
            target = _call_target(node)
            if target in FORBIDDEN_CALLS:
                violations.append(f"  {rel}:{node.lineno} calls {target[0]}.{target[1]}()")
        elif isinstance(node, ast.ImportFrom) and node.module == "time":
            names = ", ".join(alias.name for alias in node.names)
            violations.append(f"  {rel}:{node.lineno} imports from time: {names}")
    return violations


def main() -> int:
    if not CORE_DIR.is_dir():
        print(f"[no-wall-clock] Missing watchdog directory: {CORE_DIR}", file=sys.stderr)
        return 1

    violations: list[str] = []
    for py_file in sorted(CORE_DIR.rglob("*.py")):
        if "__pycache__" in py_file.parts or py_file.name in ALLOWED_FILES:
            continue
        violations.extend(_collect_violations(py_file))

    if not violations:
        return 0

    print("Watchdog core reads the clock directly:", file=sys.stderr)
    for violation in violations:
        print(violation, file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
