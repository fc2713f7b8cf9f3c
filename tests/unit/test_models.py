import pytest
from pydantic import ValidationError

from yt_transcript.models.errors import (
    BrowserLaunchError,
    ErrorCode,
    ExtractionError,
    InvalidInputError,
    NodeNotFoundError,
    TranscriptError,
    TranscriptUnavailableError,
)
from yt_transcript.models.transcript import NodeOptions, NodeParameters, ResultRecord, TranscriptSegment


def test_segment_seconds_must_be_non_negative():
    with pytest.raises(ValidationError):
        TranscriptSegment(timestamp="0:01", text="x", seconds=-1)


def test_node_parameters_accept_aliases():
    params = NodeParameters.model_validate({"youtubeId": "abc123", "options": {"waitAfterTranscript": True}})

    assert params.youtube_id == "abc123"
    assert params.options.wait_after_transcript is True
    assert params.options.debug_mode is False


def test_node_options_default_to_false():
    assert NodeOptions.model_validate({}) == NodeOptions(
        debug_mode=False, devtools=False, slow_mo=False, debugger_statement=False, wait_after_transcript=False
    )


def test_result_record_serializes_with_youtube_id_alias():
    record = ResultRecord(item_index=0, youtube_id="abc123", transcript=[])
    assert record.model_dump(by_alias=True) == {"item_index": 0, "youtubeId": "abc123", "transcript": []}


@pytest.mark.parametrize("error, code", [
    (InvalidInputError("bad url"), ErrorCode.INVALID_INPUT),
    (BrowserLaunchError("no chromium"), ErrorCode.BROWSER_LAUNCH_FAILED),
    (TranscriptUnavailableError("abc123"), ErrorCode.TRANSCRIPT_NOT_AVAILABLE),
    (ExtractionError("detached"), ErrorCode.EXTRACTION_FAILED),
    (NodeNotFoundError("missing"), ErrorCode.NODE_NOT_FOUND),
])
def test_error_codes(error, code):
    assert isinstance(error, TranscriptError)
    assert error.code == code
    assert error.item_index is None


def test_error_to_detail_carries_item_index():
    error = TranscriptUnavailableError("abc123")
    error.item_index = 2

    detail = error.to_detail()

    assert detail.code == ErrorCode.TRANSCRIPT_NOT_AVAILABLE
    assert detail.item_index == 2
    assert detail.details == {"video_id": "abc123"}
