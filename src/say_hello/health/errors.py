"""
Fault types raised while probing an external command.

Every fault raised by a single execution strategy derives from ProbeFault so
the prober can recover from all of them with one ``except`` clause.
"""

from typing import List, Optional, Sequence


def _render_command(command: Optional[Sequence[str]]) -> str:
    return " ".join(command) if command else ""


class ProbeFault(Exception):
    """Base class for all command probe faults."""

    def __init__(self, message: str, command: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.message = message
        self.command: List[str] = list(command) if command else []

    def __str__(self) -> str:
        return self.message


class SpawnFault(ProbeFault):
    """The program (or the shell wrapping it) could not be started."""

    def __init__(self, command: Sequence[str], error: OSError):
        reason = error.strerror or str(error)
        super().__init__(f"Failed to start '{command[0]}': {reason}", command)
        self.error = error


class TimeoutFault(ProbeFault):
    """The process did not finish within the allotted time and was killed."""

    def __init__(self, command: Sequence[str], timeout: float):
        super().__init__(f"Command timed out after {timeout:g}s: {_render_command(command)}", command)
        self.timeout = timeout


class NonZeroExitFault(ProbeFault):
    """The process ran to completion but exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, stdout: str = "", stderr: str = ""):
        message = f"Command failed: {_render_command(command)}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message, command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class DependencyMissingFault(ProbeFault):
    """Every strategy failed; the target program is most likely not installed."""

    def __init__(self, program: str, install_hint: str, last_fault: Optional[ProbeFault] = None):
        message = f"Could not run '{program}'. Make sure it is installed and on your PATH ({install_hint})."
        if last_fault is not None:
            message = f"{message}\nLast error: {last_fault}"
        super().__init__(message, last_fault.command if last_fault else None)
        self.program = program
        self.last_fault = last_fault
