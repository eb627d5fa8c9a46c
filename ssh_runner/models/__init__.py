"""Data models for SSH Runner."""

from ssh_runner.models.invocation import Invocation
from ssh_runner.models.outcome import (
    Outcome,
    RemoteFailure,
    SpawnFailure,
    Success,
    TimedOut,
)
from ssh_runner.models.platform import (
    DEFAULT_WINDOWS_SSH_EXE,
    NativeClientPlatform,
    PlatformProfile,
    ShellClientPlatform,
)
from ssh_runner.models.target import ConnectionTarget

__all__ = [
    "ConnectionTarget",
    "DEFAULT_WINDOWS_SSH_EXE",
    "Invocation",
    "NativeClientPlatform",
    "Outcome",
    "PlatformProfile",
    "RemoteFailure",
    "ShellClientPlatform",
    "SpawnFailure",
    "Success",
    "TimedOut",
]
