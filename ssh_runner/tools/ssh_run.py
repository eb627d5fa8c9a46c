"""ssh_run tool for executing a remote command via the system SSH client."""

import logging

from ssh_runner.models import (
    Outcome,
    RemoteFailure,
    SpawnFailure,
    Success,
    TimedOut,
)
from ssh_runner.services import run_remote_command

logger = logging.getLogger(__name__)


def format_outcome(outcome: Outcome) -> str:
    """Render an outcome for a human operator.

    Captured stdout and stderr are shown verbatim.
    """
    if isinstance(outcome, Success):
        return f"SSH Output:\n{outcome.stdout}"
    if isinstance(outcome, RemoteFailure):
        return f"SSH Error (exit {outcome.exit_code}):\n{outcome.stderr}"
    if isinstance(outcome, SpawnFailure):
        return f"Failed to run SSH command: {outcome.error}"
    if isinstance(outcome, TimedOut):
        return f"SSH command timed out after {outcome.timeout:g}s"
    raise TypeError(f"Unknown outcome: {outcome!r}")


async def ssh_run(
    user: str,
    host: str,
    command: str,
    password: str = "",
    ssh_exe: str | None = None,
    timeout: float | None = None,
) -> str:
    """Run a command on a remote host over SSH.

    Host key checking is disabled for every connection.

    Args:
        user: Remote user name (e.g., "root").
        host: Remote host name or IP (e.g., "10.0.0.5").
        command: Command line to run remotely (e.g., "uname -a").
        password: SSH password. Leave empty to use key or agent auth;
            passwords require sshpass and are ignored by the native
            Windows client.
        ssh_exe: Path to ssh.exe on Windows hosts running this server.
        timeout: Seconds to wait before killing the command.

    Examples:
        ssh_run("root", "10.0.0.5", "uname -a") - Key-based auth
        ssh_run("root", "10.0.0.5", "df -h", password="secret") - sshpass
        ssh_run("deploy", "web1", "systemctl status nginx", timeout=10)

    Returns:
        Captured stdout on success, otherwise the error or timeout report.
    """
    # Never prompt here: stdin belongs to the transport
    outcome = await run_remote_command(
        user,
        host,
        command,
        password=password,
        ssh_exe=ssh_exe,
        timeout=timeout,
    )
    return format_outcome(outcome)
