"""Tests for invocation and target models."""

import pytest

from ssh_runner.models import ConnectionTarget, Invocation, ShellClientPlatform
from ssh_runner.services.builder import build_invocation


def test_target_address() -> None:
    """ConnectionTarget renders user@host."""
    assert ConnectionTarget(user="root", host="10.0.0.5").address == "root@10.0.0.5"


def test_argv_includes_program() -> None:
    """argv is the program followed by its arguments."""
    invocation = Invocation(program="ssh.exe", args=("-o", "X=y", "a@b", "ls"))

    assert invocation.argv == ["ssh.exe", "-o", "X=y", "a@b", "ls"]


def test_script_for_shell_invocation() -> None:
    """script returns the -c argument of a shell invocation."""
    invocation = Invocation(program="sh", args=("-c", "ssh a@b 'ls'"))

    assert invocation.script == "ssh a@b 'ls'"


def test_script_is_none_for_direct_invocation() -> None:
    """Direct program invocations have no script."""
    invocation = Invocation(program="ssh.exe", args=("-o", "X=y", "a@b", "ls"))

    assert invocation.script is None


def _sshpass(password: str, escape_quotes: bool = False) -> Invocation:
    return build_invocation(
        ConnectionTarget(user="root", host="h"),
        "id",
        password,
        ShellClientPlatform(),
        escape_quotes=escape_quotes,
    )


def test_redacted_masks_sshpass_password() -> None:
    """Log rendering never contains the sshpass password."""
    rendered = _sshpass("hunter2").redacted()

    assert rendered == "sh -c sshpass -p '****' ssh -o StrictHostKeyChecking=no root@h 'id'"


@pytest.mark.parametrize(
    "password",
    [
        "pa\nss",
        "x ssh -o y",
        "it's",
        "tail' ssh -o StrictHostKeyChecking=no root@h 'id",
    ],
)
@pytest.mark.parametrize("escape_quotes", [False, True])
def test_redacted_never_contains_password(password: str, escape_quotes: bool) -> None:
    """Masking does not depend on what the password contains."""
    invocation = _sshpass(password, escape_quotes)

    expected = "sh -c sshpass -p '****' ssh -o StrictHostKeyChecking=no root@h 'id'"
    assert invocation.redacted() == expected
    assert invocation.redacted() != " ".join(invocation.argv)
    assert password not in repr(invocation)


def test_repr_does_not_leak_password() -> None:
    """repr() goes through redaction."""
    assert "hunter2" not in repr(_sshpass("hunter2"))


def test_redacted_without_secret_is_plain_argv() -> None:
    """Invocations with nothing to hide render their real argv."""
    invocation = _sshpass("")

    assert invocation.redacted() == " ".join(invocation.argv)


def test_masked_args_ignored_for_equality() -> None:
    """Only the program and real arguments decide equality."""
    a = Invocation(program="sh", args=("-c", "x"), masked_args=("-c", "y"))
    b = Invocation(program="sh", args=("-c", "x"))

    assert a == b


def test_invocations_compare_by_value() -> None:
    """Equal programs and args make equal invocations."""
    a = Invocation(program="sh", args=("-c", "ssh u@h 'id'"))
    b = Invocation(program="sh", args=("-c", "ssh u@h 'id'"))

    assert a == b
