"""Transcript extraction from a rendered YouTube watch page."""

import asyncio
import sys
from typing import Any

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from yt_transcript.extraction.browser import BrowserSession
from yt_transcript.models.errors import ExtractionError, TranscriptError, TranscriptUnavailableError
from yt_transcript.models.transcript import DebugConfig, TranscriptSegment
from yt_transcript.utils.logging import get_logger

logger = get_logger(__name__)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

CONSENT_BUTTON_SELECTOR = 'button[aria-label*="cookie" i]'
TRANSCRIPT_BUTTON_SELECTOR = "ytd-video-description-transcript-section-renderer button"
SEGMENTS_CONTAINER_SELECTOR = "#segments-container"

# Runs in the page; returns the raw timestamp/text pairs in document order
READ_SEGMENTS_SCRIPT = """
() => Array.from(document.querySelectorAll('ytd-transcript-segment-renderer')).map(segment => {
    const timestampElement = segment.querySelector('.segment-timestamp');
    const textElement = segment.querySelector('.segment-text');
    return {
        timestamp: timestampElement ? (timestampElement.textContent || '').trim() : '',
        text: textElement ? (textElement.textContent || '').trim() : '',
    };
})
"""


def seconds_of(timestamp: str) -> int:
    """
    Convert a displayed timestamp to seconds.

    ``S``, ``M:S`` and ``H:M:S`` are understood; anything else yields 0.
    """
    parts = [part.strip() for part in timestamp.split(":")]
    # isdigit() also accepts superscripts, which int() rejects
    if not all(part.isdecimal() for part in parts):
        return 0

    values = [int(part) for part in parts]
    if len(values) == 3:
        return values[0] * 3600 + values[1] * 60 + values[2]
    if len(values) == 2:
        return values[0] * 60 + values[1]
    if len(values) == 1:
        return values[0]
    return 0


def parse_segments(raw_segments: list[dict[str, Any]]) -> list[TranscriptSegment]:
    """Build transcript segments from raw page data, dropping blank captions."""
    segments = []
    for raw in raw_segments:
        text = (raw.get("text") or "").strip()
        if not text:
            continue
        timestamp = (raw.get("timestamp") or "").strip()
        segments.append(TranscriptSegment(timestamp=timestamp, text=text, seconds=seconds_of(timestamp)))
    return segments


def _interactive() -> bool:
    return sys.stdin is not None and sys.stdin.isatty()


class TranscriptExtractor:
    """
    Drives a watch page through the steps needed to read its transcript.

    The extractor takes ownership of the session it is given: the session is
    closed when extraction finishes unless the debug configuration asks for it
    to be kept open, in which case ``extract`` never returns.
    """

    async def extract(self, video_id: str, session: BrowserSession, config: DebugConfig) -> list[TranscriptSegment]:
        log = logger.bind(video_id=video_id)
        page: Page | None = None
        try:
            page = await session.context.new_page()

            url = WATCH_URL.format(video_id=video_id)
            log.info("transcript_extractor.navigating", url=url)
            await page.goto(url, wait_until="domcontentloaded", timeout=config.navigation_timeout_ms)

            await self._dismiss_consent(page, config, log)

            if config.pause_before_extraction:
                self._pause(log)

            log.info("transcript_extractor.waiting_for_transcript_button", timeout_ms=config.wait_timeout_ms)
            try:
                button = await page.wait_for_selector(
                    TRANSCRIPT_BUTTON_SELECTOR, timeout=config.wait_timeout_ms, state="attached"
                )
            except PlaywrightTimeoutError as e:
                log.info("transcript_extractor.transcript_button_not_found")
                raise TranscriptUnavailableError(video_id) from e
            if button is None:
                raise TranscriptUnavailableError(video_id)

            # A DOM click works even while the button is scrolled out of view
            await button.evaluate("button => button.click()")

            log.info("transcript_extractor.waiting_for_segments")
            await page.wait_for_selector(SEGMENTS_CONTAINER_SELECTOR, timeout=config.wait_timeout_ms, state="attached")

            raw_segments = await page.evaluate(READ_SEGMENTS_SCRIPT)
            transcript = parse_segments(raw_segments)

            log.info("transcript_extractor.extracted", segment_count=len(transcript))
            return transcript

        except TranscriptError:
            raise
        except Exception as e:
            log.error("transcript_extractor.failed", error=str(e))
            raise ExtractionError(f"Failed to extract transcript: {e}", {"video_id": video_id}) from e
        finally:
            if not config.keep_session_alive:
                await self._release(page, session, log)
            else:
                log.warning("transcript_extractor.holding_session_open", hint="Press Ctrl+C to exit when finished debugging.")
                await asyncio.Event().wait()

    async def _release(self, page: Page | None, session: BrowserSession, log: Any) -> None:
        """Close the page and the session; close failures are logged so the extraction outcome stands."""
        try:
            if page is not None:
                await page.close()
        except PlaywrightError as e:
            log.warning("transcript_extractor.page_close_failed", error=str(e))
        finally:
            try:
                await session.close()
            except PlaywrightError as e:
                log.warning("transcript_extractor.session_close_failed", error=str(e))

    async def _dismiss_consent(self, page: Page, config: DebugConfig, log: Any) -> None:
        """Click the cookie consent button if one shows up; its absence is not an error."""
        try:
            consent_button = await page.wait_for_selector(
                CONSENT_BUTTON_SELECTOR, timeout=config.consent_timeout_ms, state="visible"
            )
            if consent_button is None:
                return
            log.info("transcript_extractor.consent_dialog_found")
            await consent_button.evaluate("button => button.click()")
            await asyncio.sleep(config.consent_settle_ms / 1000)
        except PlaywrightError as e:
            log.info("transcript_extractor.no_consent_dialog", error=str(e))

    def _pause(self, log: Any) -> None:
        if not _interactive():
            log.info("transcript_extractor.breakpoint_skipped", reason="stdin is not a terminal")
            return
        log.info("transcript_extractor.breakpoint")
        breakpoint()
