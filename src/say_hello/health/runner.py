"""
Asynchronous command runner with a hard timeout.

Runs one external command, waits for it under an absolute wall-clock limit and
returns its decoded output. Any abnormal termination is raised as a ProbeFault
subclass. On timeout (or cancellation of the awaiting task) the child process
is killed and reaped before control returns.
"""

import asyncio
import logging
import os
import signal
import subprocess
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from say_hello.health.errors import NonZeroExitFault, SpawnFault, TimeoutFault

logger = logging.getLogger(__name__)

IS_WINDOWS = os.name == "nt"


@dataclass(frozen=True)
class CompletedCommand:
    """Output of a command that exited successfully."""

    command: Sequence[str]
    returncode: int
    stdout: str
    stderr: str


def _decode(data: Optional[bytes]) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def _kill(process: asyncio.subprocess.Process) -> None:
    """Kill the process and, on POSIX, every process in its session."""
    if process.returncode is not None:
        return
    try:
        if IS_WINDOWS:
            process.kill()
        else:
            os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass


async def _kill_and_reap(process: asyncio.subprocess.Process) -> None:
    _kill(process)
    # Shielded so a second cancellation cannot leave a zombie behind.
    await asyncio.shield(process.wait())


async def run_command(
    command: Sequence[str],
    timeout: float,
    env: Optional[Mapping[str, str]] = None,
) -> CompletedCommand:
    """
    Run a command and capture its output.

    Args:
        command: The argv list to execute (no shell interpretation)
        timeout: Absolute limit in seconds for the whole run
        env: Environment for the child, or None to inherit the current one

    Returns:
        The completed command with decoded stdout and stderr

    Raises:
        SpawnFault: If the process could not be started
        TimeoutFault: If the process outlived the timeout
        NonZeroExitFault: If the process exited with a non-zero status
    """
    argv = list(command)
    logger.debug(f"Spawning process: {argv}")

    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            env=dict(env) if env is not None else None,
            start_new_session=not IS_WINDOWS,
        )
    except OSError as e:
        raise SpawnFault(argv, e) from e

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.debug(f"Process {process.pid} exceeded {timeout}s, killing it")
        await _kill_and_reap(process)
        raise TimeoutFault(argv, timeout) from None
    except asyncio.CancelledError:
        await _kill_and_reap(process)
        raise

    result = CompletedCommand(
        command=argv,
        returncode=process.returncode,
        stdout=_decode(stdout),
        stderr=_decode(stderr),
    )

    if result.returncode != 0:
        raise NonZeroExitFault(argv, result.returncode, result.stdout, result.stderr)

    return result
