"""Models for node execution."""

import time
from dataclasses import dataclass, field

import structlog

from yt_transcript.models.transcript import DebugOverrides


@dataclass
class NodeExecutionContext:
    """
    Context object passed to node execute methods.
    Encapsulates run-specific information like correlation ID, logger and failure policy.
    """

    correlation_id: str
    logger: structlog.stdlib.BoundLogger
    continue_on_fail: bool = False
    overrides: DebugOverrides = field(default_factory=DebugOverrides)
    start_time: float = field(default_factory=time.time)
