"""Error handling data models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Standardized error codes."""

    # Input Validation
    INVALID_INPUT = "INVALID_INPUT"

    # Browser Session
    BROWSER_LAUNCH_FAILED = "BROWSER_LAUNCH_FAILED"

    # Nodes
    NODE_NOT_FOUND = "NODE_NOT_FOUND"

    # Extraction
    TRANSCRIPT_NOT_AVAILABLE = "TRANSCRIPT_NOT_AVAILABLE"
    EXTRACTION_FAILED = "EXTRACTION_FAILED"


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: ErrorCode = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(None, description="Additional error context")
    item_index: int | None = Field(None, description="Index of the work item that failed")


# Custom exception classes
class TranscriptError(Exception):
    """Base exception for transcript extraction errors."""

    def __init__(self, code: ErrorCode, message: str, details: dict[str, Any] | None = None) -> None:
        self.code = code
        self.message = message
        self.details = details
        self.item_index: int | None = None
        super().__init__(message)

    def to_detail(self) -> ErrorDetail:
        return ErrorDetail(
            code=self.code,
            message=self.message,
            details=self.details,
            item_index=self.item_index,
        )


class InvalidInputError(TranscriptError):
    """The input could not be resolved to a video identifier."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.INVALID_INPUT, message, details)


class BrowserLaunchError(TranscriptError):
    """The browser session could not be created."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.BROWSER_LAUNCH_FAILED, message, details)


class TranscriptUnavailableError(TranscriptError):
    """The transcript button never appeared on the video page."""

    def __init__(self, video_id: str) -> None:
        super().__init__(
            ErrorCode.TRANSCRIPT_NOT_AVAILABLE,
            f"The video with ID {video_id} either does not exist or does not have a transcript "
            "available. Please check the video URL or try again later.",
            {"video_id": video_id},
        )


class ExtractionError(TranscriptError):
    """Navigation or DOM interaction failed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.EXTRACTION_FAILED, message, details)


class NodeNotFoundError(TranscriptError):
    """No node is registered under the requested name."""

    def __init__(self, node_name: str) -> None:
        super().__init__(ErrorCode.NODE_NOT_FOUND, f"Node '{node_name}' is not registered.", {"node": node_name})
