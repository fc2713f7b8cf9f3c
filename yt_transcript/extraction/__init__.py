"""Browser-driven transcript extraction pipeline."""

from yt_transcript.extraction.batch import BatchRunner
from yt_transcript.extraction.browser import BrowserLauncher, BrowserSession
from yt_transcript.extraction.extractor import TranscriptExtractor, parse_segments, seconds_of
from yt_transcript.extraction.normalize import normalize_video_id

__all__ = [
    "BatchRunner",
    "BrowserLauncher",
    "BrowserSession",
    "TranscriptExtractor",
    "normalize_video_id",
    "parse_segments",
    "seconds_of",
]
