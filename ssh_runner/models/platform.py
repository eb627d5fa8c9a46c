"""Platform profiles that decide how the SSH client is invoked."""

from dataclasses import dataclass
from typing import Final

# Windows ships OpenSSH here since 1809
DEFAULT_WINDOWS_SSH_EXE: Final[str] = "C:\\Windows\\System32\\OpenSSH\\ssh.exe"


@dataclass(frozen=True)
class NativeClientPlatform:
    """Run an OpenSSH executable directly, without a shell.

    Password injection is not supported on this platform; the remote
    host must accept key or agent based authentication.
    """

    executable_path: str = DEFAULT_WINDOWS_SSH_EXE


@dataclass(frozen=True)
class ShellClientPlatform:
    """Run ``ssh`` (or ``sshpass ... ssh``) through ``sh -c``."""

    shell: str = "sh"


PlatformProfile = NativeClientPlatform | ShellClientPlatform
