"""MCP tools for SSH Runner."""

from ssh_runner.tools.ssh_run import format_outcome, ssh_run

__all__ = ["format_outcome", "ssh_run"]
