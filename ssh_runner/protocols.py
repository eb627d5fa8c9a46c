"""Protocol interfaces for dependency inversion.

The two blocking capabilities the runner depends on, hidden terminal input
and child process spawning, are expressed as protocols so tests can pass
deterministic fakes instead of touching a real terminal or process table.

Usage Example:

    class FakeProvider:
        def display_prompt(self, user: str, host: str) -> None:
            pass

        def read_hidden_input(self) -> str:
            return "secret"

    await run_remote_command("root", "10.0.0.5", "uptime", provider=FakeProvider())
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CredentialProvider(Protocol):
    """Source of an interactively entered SSH password."""

    def display_prompt(self, user: str, host: str) -> None:
        """Show a prompt identifying the remote user and host."""
        ...

    def read_hidden_input(self) -> str:
        """Block until the user enters a secret and return it.

        Raises:
            OSError: If there is no terminal to read from.
            EOFError: If input ends before a line is entered.
        """
        ...


@runtime_checkable
class ChildProcess(Protocol):
    """Handle to a spawned child process."""

    returncode: int | None

    async def communicate(self) -> tuple[bytes, bytes]:
        """Wait for exit, returning captured (stdout, stderr)."""
        ...

    def kill(self) -> None:
        """Forcibly terminate the child."""
        ...

    async def wait(self) -> int:
        """Wait for the child to exit and return its status."""
        ...


@runtime_checkable
class ProcessSpawner(Protocol):
    """Capability to start a program with arguments."""

    async def spawn(self, program: str, *args: str) -> ChildProcess:
        """Start ``program`` with ``args``, capturing stdout and stderr.

        Raises:
            OSError: If the program cannot be started.
        """
        ...
