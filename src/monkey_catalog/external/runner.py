"""Runs one request against a tool server child process."""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from .types import Failure, FailureKind, Outcome, Success

logger = logging.getLogger(__name__)


def run_tool_process(
    argv: Sequence[str],
    request: str,
    timeout_seconds: float | None = None,
) -> Outcome[str]:
    """
    Launch ``argv``, write ``request`` to its stdin and collect stdout.

    stdin is closed after the request so the server sees end-of-input.
    The process is always reaped and its pipes closed, whichever way this
    returns. A child still running after ``timeout_seconds`` is killed.

    Returns:
        Success with the child's stdout, or a PROCESS failure
    """
    if not argv:
        return Failure(FailureKind.PROCESS, "No tool server command configured")

    logger.debug(f"Starting tool server: {' '.join(argv)}")
    try:
        process = subprocess.Popen(
            list(argv),
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        return Failure(FailureKind.PROCESS, f"Failed to start {argv[0]}: {e}")

    with process:
        try:
            stdout, stderr = process.communicate(request, timeout=timeout_seconds)
        except subprocess.TimeoutExpired:
            process.kill()
            process.communicate()
            return Failure(
                FailureKind.PROCESS,
                f"{argv[0]} did not finish within {timeout_seconds:g}s and was killed",
            )

    if process.returncode != 0:
        detail = stderr.strip() or "(no stderr output)"
        return Failure(
            FailureKind.PROCESS,
            f"{argv[0]} exited with code {process.returncode}: {detail}",
        )

    if stderr.strip():
        logger.debug(f"Tool server stderr: {stderr.strip()}")
    logger.debug(f"Tool server returned {len(stdout)} characters")
    return Success(stdout)
