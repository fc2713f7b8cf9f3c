"""Transcript and work item data models."""

from pydantic import BaseModel, ConfigDict, Field

from yt_transcript.models.errors import ErrorDetail


class TranscriptSegment(BaseModel):
    """Individual transcript segment."""

    timestamp: str = Field(..., description="Timestamp as displayed on the page, e.g. 1:23:45")
    text: str = Field(..., description="Caption text")
    seconds: int = Field(..., ge=0, description="Timestamp converted to seconds")


class NodeOptions(BaseModel):
    """Optional debug switches accepted with each input item."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    debug_mode: bool = Field(default=False, alias="debugMode")
    devtools: bool = Field(default=False)
    slow_mo: bool = Field(default=False, alias="slowMo")
    debugger_statement: bool = Field(default=False, alias="debuggerStatement")
    wait_after_transcript: bool = Field(default=False, alias="waitAfterTranscript")


class NodeParameters(BaseModel):
    """Parameters of a single input item."""

    model_config = ConfigDict(populate_by_name=True)

    youtube_id: str = Field(default="", alias="youtubeId")
    options: NodeOptions = Field(default_factory=NodeOptions)


class WorkItem(BaseModel):
    """One video to process, paired with its position in the input."""

    index: int = Field(..., ge=0)
    raw_id: str = Field(..., description="Video identifier or URL as supplied")
    options: NodeOptions = Field(default_factory=NodeOptions)


class ResultRecord(BaseModel):
    """Successful extraction for one work item."""

    model_config = ConfigDict(populate_by_name=True)

    item_index: int
    youtube_id: str = Field(..., alias="youtubeId")
    transcript: list[TranscriptSegment]


class ItemFailure(BaseModel):
    """Failed work item, recorded when failures are isolated."""

    item_index: int
    error: ErrorDetail


class DebugOverrides(BaseModel):
    """Override switches coming from the command line or environment."""

    debug_mode: bool = False
    slow_mo: bool = False
    devtools: bool = False
    wait_after: bool = False
    debugger: bool = False
    no_headless: bool = False


class DebugConfig(BaseModel):
    """
    Resolved debug and timing policy for one batch run.

    Computed once before any item is processed and shared read-only with the
    session launcher and the extractor.
    """

    model_config = ConfigDict(frozen=True)

    slow_motion_delay_ms: int = Field(default=0, ge=0)
    open_devtools: bool = False
    keep_session_alive: bool = False
    pause_before_extraction: bool = False
    headless: bool = True

    navigation_timeout_ms: int = Field(default=30_000, gt=0)
    consent_timeout_ms: int = Field(default=5_000, gt=0)
    consent_settle_ms: int = Field(default=1_000, ge=0)
    transcript_timeout_ms: int = Field(default=10_000, gt=0)
    debug_transcript_timeout_ms: int = Field(default=30_000, gt=0)
    viewport_width: int = Field(default=1920, gt=0)
    viewport_height: int = Field(default=1080, gt=0)

    @property
    def wait_timeout_ms(self) -> int:
        """Budget for the transcript button and segment container waits."""
        if self.keep_session_alive:
            return self.debug_transcript_timeout_ms
        return self.transcript_timeout_ms

    @property
    def is_debugging(self) -> bool:
        return bool(
            self.slow_motion_delay_ms
            or self.open_devtools
            or self.keep_session_alive
            or self.pause_before_extraction
        )
