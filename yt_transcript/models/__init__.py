"""Data models for the transcript extractor."""

from yt_transcript.models.errors import (
    BrowserLaunchError,
    ErrorCode,
    ErrorDetail,
    ExtractionError,
    InvalidInputError,
    NodeNotFoundError,
    TranscriptError,
    TranscriptUnavailableError,
)
from yt_transcript.models.node import NodeExecutionContext
from yt_transcript.models.transcript import (
    DebugConfig,
    DebugOverrides,
    ItemFailure,
    NodeOptions,
    NodeParameters,
    ResultRecord,
    TranscriptSegment,
    WorkItem,
)

__all__ = [
    "BrowserLaunchError",
    "DebugConfig",
    "DebugOverrides",
    "ErrorCode",
    "ErrorDetail",
    "ExtractionError",
    "InvalidInputError",
    "ItemFailure",
    "NodeExecutionContext",
    "NodeNotFoundError",
    "NodeOptions",
    "NodeParameters",
    "ResultRecord",
    "TranscriptError",
    "TranscriptSegment",
    "TranscriptUnavailableError",
    "WorkItem",
]
