"""Services for SSH Runner."""

from ssh_runner.services.builder import (
    HOST_KEY_POLICY,
    build_invocation,
    detect_platform,
)
from ssh_runner.services.credentials import (
    CredentialReadError,
    TerminalCredentialProvider,
    resolve_credential,
)
from ssh_runner.services.executor import SubprocessSpawner, execute
from ssh_runner.services.runner import run_remote_command
from ssh_runner.services.state import get_settings, reset_state, set_settings

__all__ = [
    "CredentialReadError",
    "HOST_KEY_POLICY",
    "SubprocessSpawner",
    "TerminalCredentialProvider",
    "build_invocation",
    "detect_platform",
    "execute",
    "get_settings",
    "reset_state",
    "resolve_credential",
    "run_remote_command",
    "set_settings",
]
