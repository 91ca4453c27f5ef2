"""Error taxonomy.

The translator itself cannot fail on a valid command; everything that can
go wrong at runtime lives in the helper launcher. The CLI is the only layer
that turns these into messages and exit codes.
"""

from __future__ import annotations


class AzureAuthCliError(Exception):
    """Base class for errors raised by azureauth-cli."""


class EmptyScopesError(AzureAuthCliError, ValueError):
    """A command without scopes reached the translator."""

    def __init__(self) -> None:
        super().__init__("a command must request at least one scope")


class HelperLaunchError(AzureAuthCliError):
    """The helper process could not be started (or did not finish in time)."""

    def __init__(self, executable: str, reason: str) -> None:
        self.executable = executable
        self.reason = reason
        super().__init__(f"failed to run {executable}: {reason}")


class ConfigError(AzureAuthCliError):
    """Settings from the environment or a .env file failed validation."""
