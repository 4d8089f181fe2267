"""
Resilient external command probing used by the health_check tool.
"""

from .errors import DependencyMissingFault, NonZeroExitFault, ProbeFault, SpawnFault, TimeoutFault
from .probe import CommandProber, ProbeOutcome, ProbeRequest, ProbeResult
from .report import format_probe_result
from .runner import CompletedCommand, run_command
from .strategies import ExecutionStrategy, default_strategies
