"""Credential resolution for SSH invocations."""

import asyncio
import getpass
import logging
import sys

from ssh_runner.models import ConnectionTarget
from ssh_runner.protocols import CredentialProvider

logger = logging.getLogger(__name__)


class CredentialReadError(RuntimeError):
    """Raised when a password cannot be read from the terminal."""

    pass


class TerminalCredentialProvider:
    """Prompt on stdout and read the password without echo."""

    def display_prompt(self, user: str, host: str) -> None:
        sys.stdout.write(f"Enter SSH password for {user}@{host}: ")
        sys.stdout.flush()

    def read_hidden_input(self) -> str:
        return getpass.getpass(prompt="")


async def resolve_credential(
    target: ConnectionTarget,
    password: str | None,
    provider: CredentialProvider | None = None,
) -> str:
    """Return the password to authenticate with.

    A supplied password is returned unchanged, including the empty string,
    which means "no password, rely on keys". Otherwise the provider is asked
    once. The read blocks without a timeout and runs in a worker thread so
    other tasks on the loop keep running.

    Args:
        target: Remote endpoint named in the prompt
        password: Caller-supplied password, or None to prompt
        provider: Source of the hidden input (default: the terminal)

    Returns:
        The credential, possibly empty

    Raises:
        CredentialReadError: If the provider cannot read input
    """
    if password is not None:
        return password

    provider = provider or TerminalCredentialProvider()
    logger.debug("No password supplied for %s, prompting", target.address)

    try:
        provider.display_prompt(target.user, target.host)
        return await asyncio.to_thread(provider.read_hidden_input)
    except (OSError, EOFError) as e:
        raise CredentialReadError(
            f"Failed to read password for {target.address}: {e}"
        ) from e
