#!/usr/bin/env python3
# =============================================================================
# WADVEC -- CI CHECKS RUNNER
# File:   scripts/run_ci_checks.py
# =============================================================================
#
# PURPOSE
# -------
# Runs the CI gate in two sequential stages:
#   Stage 1: pytest
#   Stage 2: generator smoke run -- generate a seeded document into a
#            temporary directory, then re-load and verify it from disk.
#
# Exit codes:
#   0 -- All stages passed.
#   1 -- Stage 1 (pytest) failed.
#   2 -- Stage 2 (generator smoke run) failed.
#
# Usage:
#   python scripts/run_ci_checks.py
# =============================================================================

from __future__ import annotations

import pathlib
import subprocess
import sys
import tempfile

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
_REPO_ROOT = pathlib.Path(__file__).parent.parent
_PYTHON    = sys.executable


def _separator(char: str = "=", width: int = 72) -> str:
    return char * width


def _run(cmd: list[str], label: str) -> int:
    """
    Run a subprocess command, stream stdout/stderr live, return exit code.
    """
    print(_separator())
    print(f"CI STAGE: {label}")
    print(f"CMD:      {' '.join(cmd)}")
    print(_separator("-"))
    sys.stdout.flush()

    proc = subprocess.run(
        cmd,
        cwd=str(_REPO_ROOT),
    )
    return proc.returncode


def _fail(stage: str, rc: int, message: str) -> None:
    print(_separator())
    print(f"CI RESULT: FAIL  [stage={stage}  exit_code={rc}]")
    print(message)
    print(_separator())
    sys.stdout.flush()


def main() -> int:
    print(_separator())
    print("WADVEC CI GATE -- starting")
    print(_separator())
    sys.stdout.flush()

    # ------------------------------------------------------------------
    # Stage 1: pytest
    # ------------------------------------------------------------------
    pytest_rc = _run([_PYTHON, "-m", "pytest"], "pytest")
    if pytest_rc != 0:
        _fail("pytest", pytest_rc, "Merge BLOCKED: pytest stage did not pass.")
        return 1

    print(_separator("-"))
    print("CI STAGE pytest: PASS")
    sys.stdout.flush()

    # ------------------------------------------------------------------
    # Stage 2: generate, then verify the written file.
    # ------------------------------------------------------------------
    with tempfile.TemporaryDirectory() as tmp:
        output = str(pathlib.Path(tmp) / "tests.json")
        gen_rc = _run(
            [_PYTHON, "-m", "wadvec.run_generator", "--output", output, "--seed", "0"],
            "generator (seed 0)",
        )
        if gen_rc != 0:
            _fail("generate", gen_rc, "Merge BLOCKED: generator run did not pass.")
            return 2

        verify_rc = _run(
            [_PYTHON, "-m", "wadvec.run_generator", "--verify-only", output],
            "verify written document",
        )
        if verify_rc != 0:
            _fail("verify", verify_rc, "Merge BLOCKED: written document failed verification.")
            return 2

    print(_separator("-"))
    print("CI STAGE generator: PASS")

    print(_separator())
    print("CI RESULT: PASS  [stages=pytest,generator]")
    print("Merge permitted.")
    print(_separator())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
