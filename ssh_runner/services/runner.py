"""Public entry point for running a remote command over SSH."""

import logging

from ssh_runner.config import Settings
from ssh_runner.models import ConnectionTarget, Outcome, PlatformProfile
from ssh_runner.protocols import CredentialProvider, ProcessSpawner
from ssh_runner.services.builder import build_invocation, detect_platform
from ssh_runner.services.credentials import resolve_credential
from ssh_runner.services.executor import execute
from ssh_runner.services.state import get_settings

logger = logging.getLogger(__name__)


async def run_remote_command(
    user: str,
    host: str,
    command: str,
    password: str | None = None,
    ssh_exe: str | None = None,
    timeout: float | None = None,
    *,
    platform: PlatformProfile | None = None,
    provider: CredentialProvider | None = None,
    spawner: ProcessSpawner | None = None,
    settings: Settings | None = None,
) -> Outcome:
    """Run a single command on a remote host through the system SSH client.

    Steps run strictly in order: resolve the password (prompting if none
    was given), build the invocation, execute it. The timeout bounds only
    the execution step; the password prompt is never interrupted.

    Args:
        user: Remote user name
        host: Remote host name or IP
        command: Command line to run remotely
        password: Password, "" for key-based auth, None to prompt
        ssh_exe: Native SSH executable path, used verbatim when given
        timeout: Seconds to wait for the command (default: settings)
        platform: Explicit platform profile, skipping detection
        provider: Hidden-input source for the password prompt
        spawner: Process spawning capability
        settings: Settings to use instead of the process-wide ones

    Returns:
        The outcome of the single attempt

    Raises:
        CredentialReadError: If prompting for the password fails
    """
    settings = settings or get_settings()
    target = ConnectionTarget(user=user, host=host)

    credential = await resolve_credential(target, password, provider)

    if platform is None:
        platform = detect_platform(ssh_exe or settings.ssh_exe, settings.platform)

    invocation = build_invocation(
        target,
        command,
        credential,
        platform,
        escape_quotes=settings.escape_quotes,
    )

    deadline = timeout if timeout is not None else settings.command_timeout
    logger.info(
        "Running command on %s (platform=%s, auth=%s, timeout=%s)",
        target.address,
        type(platform).__name__,
        "password" if credential else "key",
        deadline,
    )
    return await execute(invocation, deadline, spawner)
