"""Asynchronous execution of SSH client invocations.

Each call spawns exactly one child process and ends in one outcome:

    Idle -> Spawning -> SpawnFailure
                     -> Running -> Success | RemoteFailure | TimedOut

On timeout the child is killed and reaped before TimedOut is returned,
so no process outlives the call.
"""

import asyncio
import logging
import time
from contextlib import suppress

from ssh_runner.models import (
    Invocation,
    Outcome,
    RemoteFailure,
    SpawnFailure,
    Success,
    TimedOut,
)
from ssh_runner.protocols import ChildProcess, ProcessSpawner

logger = logging.getLogger(__name__)

# Seconds to wait for a killed child to be reaped
KILL_GRACE_PERIOD = 5.0


class SubprocessSpawner:
    """Spawn children with asyncio, capturing stdout and stderr."""

    async def spawn(self, program: str, *args: str) -> ChildProcess:
        return await asyncio.create_subprocess_exec(
            program,
            *args,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )


def _decode(data: bytes | None) -> str:
    if data is None:
        return ""
    return data.decode("utf-8", errors="replace")


async def _terminate(proc: ChildProcess) -> None:
    """Kill a still-running child and wait for it to exit."""
    with suppress(ProcessLookupError):
        proc.kill()
    try:
        await asyncio.wait_for(proc.wait(), timeout=KILL_GRACE_PERIOD)
    except TimeoutError:
        logger.warning(
            "Child process did not exit within %.1fs after kill",
            KILL_GRACE_PERIOD,
        )


async def execute(
    invocation: Invocation,
    timeout: float | None = None,
    spawner: ProcessSpawner | None = None,
) -> Outcome:
    """Run an invocation and classify how it ended.

    Args:
        invocation: Program and arguments to run
        timeout: Seconds to wait for completion, None to wait indefinitely
        spawner: Process spawning capability (default: asyncio subprocess)

    Returns:
        Success with stdout on exit status 0, RemoteFailure with stderr on
        non-zero exit, SpawnFailure if the program could not be started,
        TimedOut if the deadline elapsed first.
    """
    spawner = spawner or SubprocessSpawner()
    start = time.perf_counter()

    logger.debug("Spawning %s", invocation.redacted())
    try:
        proc = await spawner.spawn(invocation.program, *invocation.args)
    except (OSError, ValueError) as e:
        # ValueError: argument rejected by the OS layer, e.g. an embedded NUL
        logger.error("Failed to spawn %s: %s", invocation.program, e)
        return SpawnFailure(error=str(e))

    try:
        if timeout is None:
            stdout, stderr = await proc.communicate()
        else:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except TimeoutError:
        logger.warning("SSH command timed out after %ss, killing child", timeout)
        return TimedOut(timeout=timeout)
    finally:
        # Covers the timeout path and task cancellation
        if proc.returncode is None:
            await _terminate(proc)

    elapsed_ms = (time.perf_counter() - start) * 1000
    returncode = proc.returncode

    if returncode == 0:
        logger.info("SSH command completed in %.1fms", elapsed_ms)
        return Success(stdout=_decode(stdout))

    logger.warning(
        "SSH command failed with exit status %s in %.1fms",
        returncode,
        elapsed_ms,
    )
    return RemoteFailure(stderr=_decode(stderr), returncode=returncode)
