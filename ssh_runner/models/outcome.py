"""Execution outcome data models.

Every invocation ends in exactly one of four outcomes. Exit codes follow
common shell conventions so a process-style caller can propagate them:

- Success: 0
- RemoteFailure: the remote process exit code, 128 + N if killed by
  signal N, or 1 if unavailable
- SpawnFailure: 127 (command not found)
- TimedOut: 124 (as reported by coreutils ``timeout``)
"""

from dataclasses import dataclass

SPAWN_FAILURE_EXIT_CODE = 127
TIMEOUT_EXIT_CODE = 124
SIGNAL_EXIT_BASE = 128


@dataclass(frozen=True)
class Success:
    """Process exited with status 0."""

    stdout: str

    ok = True

    @property
    def exit_code(self) -> int:
        return 0


@dataclass(frozen=True)
class RemoteFailure:
    """Process ran and exited non-zero.

    SSH client errors (auth failure, unreachable host) and failures of the
    remote command itself are indistinguishable here; only stderr is kept.
    """

    stderr: str
    returncode: int | None = None

    ok = False

    @property
    def exit_code(self) -> int:
        if not self.returncode:
            return 1
        if self.returncode < 0:
            # Killed by signal N; shells report 128 + N
            return SIGNAL_EXIT_BASE - self.returncode
        return self.returncode


@dataclass(frozen=True)
class SpawnFailure:
    """Process could not be started."""

    error: str

    ok = False

    @property
    def exit_code(self) -> int:
        return SPAWN_FAILURE_EXIT_CODE


@dataclass(frozen=True)
class TimedOut:
    """Deadline elapsed before the process completed."""

    timeout: float

    ok = False

    @property
    def exit_code(self) -> int:
        return TIMEOUT_EXIT_CODE


Outcome = Success | RemoteFailure | SpawnFailure | TimedOut
