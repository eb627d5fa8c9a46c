"""SSH Runner: run one remote command through the system SSH client."""

from ssh_runner.models import (
    ConnectionTarget,
    Invocation,
    NativeClientPlatform,
    Outcome,
    RemoteFailure,
    ShellClientPlatform,
    SpawnFailure,
    Success,
    TimedOut,
)
from ssh_runner.services import CredentialReadError, run_remote_command

__all__ = [
    "ConnectionTarget",
    "CredentialReadError",
    "Invocation",
    "NativeClientPlatform",
    "Outcome",
    "RemoteFailure",
    "ShellClientPlatform",
    "SpawnFailure",
    "Success",
    "TimedOut",
    "run_remote_command",
]
