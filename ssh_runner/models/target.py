"""Connection target data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConnectionTarget:
    """Remote endpoint for a single invocation."""

    user: str
    host: str

    @property
    def address(self) -> str:
        """Get the ``user@host`` form passed to the SSH client."""
        return f"{self.user}@{self.host}"
