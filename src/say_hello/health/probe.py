"""
Command prober for the Gemini CLI health check.

The prober tries each execution strategy once, in order, and stops at the first
one whose process exits cleanly. Faults from individual strategies only advance
the loop; the caller sees a single ProbeResult.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, List, Mapping, Optional, Sequence, Tuple

from say_hello.health.errors import DependencyMissingFault, ProbeFault
from say_hello.health.runner import CompletedCommand, run_command
from say_hello.health.strategies import ExecutionStrategy, default_strategies

logger = logging.getLogger(__name__)

DEFAULT_PROGRAM = "gemini"
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_PROMPT = "say hi"
DEFAULT_TIMEOUT = 10.0
DEFAULT_NPM_PACKAGE = "@google/gemini-cli"

Runner = Callable[[Sequence[str], float, Optional[Mapping[str, str]]], Awaitable[CompletedCommand]]


class ProbeOutcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class ProbeRequest:
    """The logical command a probe runs."""

    program: str = DEFAULT_PROGRAM
    arguments: Tuple[str, ...] = ("-m", DEFAULT_MODEL, "-p", DEFAULT_PROMPT)
    timeout: float = DEFAULT_TIMEOUT
    npm_package: str = DEFAULT_NPM_PACKAGE

    @classmethod
    def for_gemini(
        cls,
        model: str = DEFAULT_MODEL,
        prompt: str = DEFAULT_PROMPT,
        timeout: float = DEFAULT_TIMEOUT,
        program: str = DEFAULT_PROGRAM,
        npm_package: str = DEFAULT_NPM_PACKAGE,
    ) -> "ProbeRequest":
        return cls(
            program=program,
            arguments=("-m", model, "-p", prompt),
            timeout=float(timeout),
            npm_package=npm_package,
        )

    @property
    def command(self) -> List[str]:
        return [self.program, *self.arguments]


@dataclass
class ProbeResult:
    """Normalized outcome of a single probe."""

    outcome: ProbeOutcome
    output: str = ""
    warnings: str = ""
    error: Optional[str] = None
    strategy: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.outcome is ProbeOutcome.SUCCESS

    @classmethod
    def succeeded(cls, completed: CompletedCommand, strategy: str) -> "ProbeResult":
        return cls(
            outcome=ProbeOutcome.SUCCESS,
            output=completed.stdout,
            warnings=completed.stderr,
            strategy=strategy,
        )

    @classmethod
    def failed(cls, error: str) -> "ProbeResult":
        return cls(outcome=ProbeOutcome.FAILURE, error=error)


@dataclass
class CommandProber:
    """Runs a ProbeRequest through an ordered list of execution strategies."""

    request: ProbeRequest = field(default_factory=ProbeRequest)
    strategies: Optional[List[ExecutionStrategy]] = None
    runner: Runner = run_command

    def __post_init__(self):
        if self.strategies is None:
            self.strategies = default_strategies()

    async def probe(self) -> ProbeResult:
        """
        Run the probe.

        Returns:
            A SUCCESS result from the first strategy that exits cleanly, or a
            FAILURE result naming the missing dependency if all of them fault
        """
        logger.info(f"Starting {self.request.program} health check")
        last_fault: Optional[ProbeFault] = None

        for strategy in self.strategies:
            command = strategy.command_line(self.request)
            logger.info(f"Trying strategy '{strategy.name}': {' '.join(command)}")

            try:
                completed = await self.runner(command, self.request.timeout, strategy.environment())
            except ProbeFault as e:
                logger.warning(f"Strategy '{strategy.name}' failed: {e}")
                last_fault = e
                continue

            if completed.stderr:
                logger.warning(f"stderr output from '{strategy.name}': {completed.stderr}")
            logger.info(f"Command executed successfully using strategy '{strategy.name}'")
            logger.debug(f"Response: {completed.stdout}")
            return ProbeResult.succeeded(completed, strategy.name)

        fault = DependencyMissingFault(
            self.request.program,
            f"npm install -g {self.request.npm_package}",
            last_fault,
        )
        logger.error(f"All {len(self.strategies)} strategies failed: {fault}")
        return ProbeResult.failed(str(fault))
