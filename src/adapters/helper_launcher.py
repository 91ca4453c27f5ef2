"""Launcher for the external authentication helper.

The helper owns the actual token work; this module only starts it with the
argument vector produced by the translator and reports whether that
worked. Spawn failures surface the operating-system message.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from typing import Sequence

from core.config import AppSettings
from core.errors import HelperLaunchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LaunchResult:
    """Outcome of starting the helper."""

    executable: str
    argv: tuple[str, ...]
    pid: int
    returncode: int | None = None


def resolve_helper(settings: AppSettings | None = None) -> str | None:
    """Absolute path of the helper, or None when it is not on PATH."""

    settings = settings or AppSettings()
    return shutil.which(settings.helper_executable)


def launch_helper(
    argv: Sequence[str],
    *,
    settings: AppSettings | None = None,
) -> LaunchResult:
    """Start the helper with `argv` and (optionally) wait for it.

    Raises:
        HelperLaunchError: the process could not be spawned, or it exceeded
            `helper_timeout_seconds` and was killed.
    """

    settings = settings or AppSettings()
    executable = settings.helper_executable
    args = tuple(argv)
    logger.debug("Launching %s %s", executable, list(args))

    try:
        process = subprocess.Popen([executable, *args])
    except OSError as exc:
        raise HelperLaunchError(executable, exc.strerror or str(exc)) from exc

    if not settings.wait_for_helper:
        logger.info("Started %s (pid %s) without waiting", executable, process.pid)
        return LaunchResult(executable=executable, argv=args, pid=process.pid)

    try:
        returncode = process.wait(timeout=settings.helper_timeout_seconds)
    except subprocess.TimeoutExpired as exc:
        process.kill()
        process.wait()
        raise HelperLaunchError(
            executable,
            f"timed out after {settings.helper_timeout_seconds}s",
        ) from exc

    if returncode == 0:
        logger.info("%s exited with code 0", executable)
    else:
        logger.warning("%s exited with code %s", executable, returncode)
    return LaunchResult(executable=executable, argv=args, pid=process.pid, returncode=returncode)
