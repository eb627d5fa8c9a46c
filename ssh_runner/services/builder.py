"""SSH command construction.

Maps (platform, credential) to a concrete process invocation:

    Platform  Credential  Invocation
    native    any         <ssh.exe> -o StrictHostKeyChecking=no user@host <command>
    shell     empty       sh -c "ssh -o StrictHostKeyChecking=no user@host '<command>'"
    shell     non-empty   sh -c "sshpass -p '<pw>' ssh -o StrictHostKeyChecking=no user@host '<command>'"

Host key checking is always disabled. This runner targets trusted or
ephemeral hosts where keys change between runs; callers that need
verification should use a client configured with known_hosts instead.
"""

import logging
import os
from typing import Final

from ssh_runner.models import (
    DEFAULT_WINDOWS_SSH_EXE,
    ConnectionTarget,
    Invocation,
    NativeClientPlatform,
    PlatformProfile,
    ShellClientPlatform,
)
from ssh_runner.utils.shell import single_quote

logger = logging.getLogger(__name__)

HOST_KEY_POLICY: Final[tuple[str, str]] = ("-o", "StrictHostKeyChecking=no")

# Stands in for the sshpass password in logged invocations
MASKED_SECRET: Final[str] = "'****'"


def detect_platform(
    ssh_exe: str | None = None,
    platform: str = "auto",
) -> PlatformProfile:
    """Choose the platform profile for this process.

    Args:
        ssh_exe: Native executable path override; verbatim when given
        platform: "native", "shell", or "auto" (native on Windows)

    Returns:
        The platform profile to build invocations for
    """
    if platform == "auto":
        platform = "native" if os.name == "nt" else "shell"

    if platform == "native":
        return NativeClientPlatform(executable_path=ssh_exe or DEFAULT_WINDOWS_SSH_EXE)
    return ShellClientPlatform()


def build_invocation(
    target: ConnectionTarget,
    command: str,
    credential: str,
    platform: PlatformProfile,
    *,
    escape_quotes: bool = False,
) -> Invocation:
    """Build the process invocation for one remote command.

    The command and password are interpolated into single quotes verbatim
    unless ``escape_quotes`` is set, in which case embedded single quotes
    are escaped. Both forms are identical for values without single quotes.

    Args:
        target: Remote user and host
        command: Command line to run remotely, not parsed
        credential: Password, or empty for key-based auth
        platform: Native or shell client profile
        escape_quotes: Escape embedded single quotes in the shell script

    Returns:
        Invocation ready for the executor
    """
    if isinstance(platform, NativeClientPlatform):
        # ssh.exe gets the command as a single argument; no password support
        return Invocation(
            program=platform.executable_path,
            args=(*HOST_KEY_POLICY, target.address, command),
        )

    if isinstance(platform, ShellClientPlatform):
        ssh = " ".join(
            ["ssh", *HOST_KEY_POLICY, target.address, single_quote(command, escape_quotes)]
        )
        if not credential:
            return Invocation(program=platform.shell, args=("-c", ssh))

        script = f"sshpass -p {single_quote(credential, escape_quotes)} {ssh}"
        masked = f"sshpass -p {MASKED_SECRET} {ssh}"
        return Invocation(
            program=platform.shell,
            args=("-c", script),
            masked_args=("-c", masked),
        )

    raise TypeError(f"Unsupported platform profile: {platform!r}")
