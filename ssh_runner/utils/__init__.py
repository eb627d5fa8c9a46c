"""Utilities for SSH Runner."""

from ssh_runner.utils.console import ColorfulFormatter
from ssh_runner.utils.shell import single_quote

__all__ = [
    "ColorfulFormatter",
    "single_quote",
]
