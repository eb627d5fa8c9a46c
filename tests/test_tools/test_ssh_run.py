"""Tests for the ssh_run tool and outcome formatting."""

from unittest.mock import AsyncMock, patch

import pytest

from ssh_runner.models import RemoteFailure, SpawnFailure, Success, TimedOut
from ssh_runner.tools import format_outcome, ssh_run


class TestFormatOutcome:
    def test_success_shows_stdout_verbatim(self) -> None:
        assert format_outcome(Success(stdout="Linux ...\n")) == "SSH Output:\nLinux ...\n"

    def test_remote_failure_shows_stderr_verbatim(self) -> None:
        text = format_outcome(RemoteFailure(stderr="Permission denied\n", returncode=255))

        assert text == "SSH Error (exit 255):\nPermission denied\n"

    def test_spawn_failure(self) -> None:
        text = format_outcome(SpawnFailure(error="[Errno 2] No such file or directory: 'sh'"))

        assert text.startswith("Failed to run SSH command: ")
        assert "No such file or directory" in text

    def test_timed_out(self) -> None:
        assert format_outcome(TimedOut(timeout=10.0)) == "SSH command timed out after 10s"
        assert format_outcome(TimedOut(timeout=0.5)) == "SSH command timed out after 0.5s"

    def test_unknown_outcome_rejected(self) -> None:
        with pytest.raises(TypeError):
            format_outcome("nope")  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_ssh_run_never_prompts() -> None:
    """The tool defaults to an empty password so no prompt is attempted."""
    mock_run = AsyncMock(return_value=Success(stdout="root\n"))

    with patch("ssh_runner.tools.ssh_run.run_remote_command", mock_run):
        result = await ssh_run("root", "10.0.0.5", "whoami")

    assert result == "SSH Output:\nroot\n"
    mock_run.assert_awaited_once_with(
        "root",
        "10.0.0.5",
        "whoami",
        password="",
        ssh_exe=None,
        timeout=None,
    )


@pytest.mark.asyncio
async def test_ssh_run_passes_options() -> None:
    mock_run = AsyncMock(return_value=TimedOut(timeout=5))

    with patch("ssh_runner.tools.ssh_run.run_remote_command", mock_run):
        result = await ssh_run(
            "root", "h", "sleep 60", password="pw", ssh_exe="C:\\ssh.exe", timeout=5
        )

    assert result == "SSH command timed out after 5s"
    assert mock_run.await_args.kwargs == {
        "password": "pw",
        "ssh_exe": "C:\\ssh.exe",
        "timeout": 5,
    }
