"""
Execution strategies for invoking the target program.

A strategy is plain data: a name, a function that turns a ProbeRequest into an
argv list, and a predicate telling whether it applies on this machine. The
prober walks the list returned by default_strategies() in order.
"""

import os
import shlex
import subprocess
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, List, Mapping, Optional

if TYPE_CHECKING:
    from say_hello.health.probe import ProbeRequest


def _always() -> bool:
    return True


def _is_posix() -> bool:
    return os.name != "nt"


def _is_windows() -> bool:
    return os.name == "nt"


@dataclass(frozen=True)
class ExecutionStrategy:
    """One way of invoking the target program."""

    name: str
    build: Callable[["ProbeRequest"], List[str]]
    is_active: Callable[[], bool] = _always
    extra_env: Mapping[str, str] = field(default_factory=dict)

    def command_line(self, request: "ProbeRequest") -> List[str]:
        return self.build(request)

    def environment(self, base: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        env = dict(os.environ if base is None else base)
        env.update(self.extra_env)
        return env


def _direct(request: "ProbeRequest") -> List[str]:
    return request.command


def _package_runner(request: "ProbeRequest") -> List[str]:
    # npm ships npx as a .cmd shim on Windows, which CreateProcess does not find by bare name
    launcher = "npx.cmd" if _is_windows() else "npx"
    return [launcher, "--yes", request.npm_package, *request.arguments]


def _posix_shell(request: "ProbeRequest") -> List[str]:
    shell = os.environ.get("SHELL") or "/bin/sh"
    # Login shell so PATH additions from the user's profile (nvm, volta, ...) apply
    return [shell, "-lc", shlex.join(request.command)]


def _windows_shell(request: "ProbeRequest") -> List[str]:
    comspec = os.environ.get("COMSPEC") or "cmd.exe"
    return [comspec, "/d", "/s", "/c", subprocess.list2cmdline(request.command)]


DIRECT = ExecutionStrategy(name="direct", build=_direct)
PACKAGE_RUNNER = ExecutionStrategy(
    name="npx",
    build=_package_runner,
    extra_env={"NO_UPDATE_NOTIFIER": "1", "npm_config_yes": "true"},
)
POSIX_SHELL = ExecutionStrategy(name="posix-shell", build=_posix_shell, is_active=_is_posix)
WINDOWS_SHELL = ExecutionStrategy(name="windows-shell", build=_windows_shell, is_active=_is_windows)

ALL_STRATEGIES = (DIRECT, PACKAGE_RUNNER, POSIX_SHELL, WINDOWS_SHELL)


def default_strategies() -> List[ExecutionStrategy]:
    """Return the strategies that apply to the current platform, in fallback order."""
    return [strategy for strategy in ALL_STRATEGIES if strategy.is_active()]
