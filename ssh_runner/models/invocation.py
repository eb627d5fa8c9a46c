"""Process invocation data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Invocation:
    """A ready-to-run process descriptor.

    Holds either a program with its argument list (native client) or a
    shell with ``-c`` and a single script argument (shell client).

    ``masked_args`` is the same argument list with any secret replaced,
    built from the same template as ``args``. It is what gets logged.
    """

    program: str
    args: tuple[str, ...] = field(default_factory=tuple)
    masked_args: tuple[str, ...] | None = field(default=None, compare=False)

    @property
    def argv(self) -> list[str]:
        """Full argument vector including the program."""
        return [self.program, *self.args]

    @property
    def script(self) -> str | None:
        """Script text for ``sh -c`` invocations, None otherwise."""
        if len(self.args) == 2 and self.args[0] == "-c":
            return self.args[1]
        return None

    def redacted(self) -> str:
        """Render the invocation for logs with secrets masked."""
        args = self.masked_args if self.masked_args is not None else self.args
        return " ".join([self.program, *args])

    def __repr__(self) -> str:
        return f"Invocation({self.redacted()!r})"
