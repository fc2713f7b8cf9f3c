"""Sequential processing of work items, one browser session per item."""

from collections.abc import Sequence

from yt_transcript.config import Config, resolve_debug_config
from yt_transcript.extraction.browser import BrowserLauncher
from yt_transcript.extraction.extractor import TranscriptExtractor
from yt_transcript.extraction.normalize import normalize_video_id
from yt_transcript.models.errors import ExtractionError, InvalidInputError, TranscriptError
from yt_transcript.models.transcript import (
    DebugConfig,
    DebugOverrides,
    ItemFailure,
    NodeOptions,
    ResultRecord,
    WorkItem,
)
from yt_transcript.utils.logging import get_logger

logger = get_logger(__name__)

BatchResult = list[ResultRecord | ItemFailure]


class BatchRunner:
    """Runs the normalize → launch → extract pipeline for each work item in order."""

    def __init__(
        self,
        launcher: BrowserLauncher | None = None,
        extractor: TranscriptExtractor | None = None,
        config: Config | None = None,
    ) -> None:
        self.launcher = launcher or BrowserLauncher()
        self.extractor = extractor or TranscriptExtractor()
        self.config = config

    def resolve(self, items: Sequence[WorkItem], overrides: DebugOverrides | None) -> DebugConfig:
        """Debug options are read from the first item and apply to the whole run."""
        options = items[0].options if items else NodeOptions()
        return resolve_debug_config(options, overrides, self.config)

    async def run(
        self,
        items: Sequence[WorkItem],
        overrides: DebugOverrides | None = None,
        continue_on_fail: bool = False,
    ) -> BatchResult:
        """
        Extract transcripts for ``items``.

        Args:
            items: Work items in input order.
            overrides: Command line or environment switches OR-ed with the item options.
            continue_on_fail: Record per-item errors and keep going instead of aborting.

        Returns:
            One entry per processed item, in input order.

        Raises:
            BrowserLaunchError: The preflight launch failed; no item was attempted.
            TranscriptError: An item failed and failures are not isolated. The
                error's ``item_index`` names the failing item.
        """
        debug_config = self.resolve(items, overrides)
        if debug_config.is_debugging or not debug_config.headless:
            logger.info("batch_runner.debug_mode_enabled", **debug_config.model_dump())

        if debug_config.keep_session_alive and len(items) > 1:
            raise InvalidInputError(
                "Keeping the browser open after extraction is only supported for a single item.",
                {"item_count": len(items)},
            )

        await self.launcher.preflight(debug_config)

        results: BatchResult = []
        for item in items:
            try:
                results.append(await self._process(item, debug_config))
            except TranscriptError as e:
                results.append(self._fail(item, e, continue_on_fail))
            except Exception as e:
                error = ExtractionError(f"Failed to extract transcript: {e}")
                error.__cause__ = e
                results.append(self._fail(item, error, continue_on_fail))

        return results

    def _fail(self, item: WorkItem, error: TranscriptError, continue_on_fail: bool) -> ItemFailure:
        """Annotate ``error`` with the item index, then re-raise it or record it."""
        error.item_index = item.index
        log = logger.bind(item_index=item.index, code=error.code.value)

        if not continue_on_fail:
            log.error("batch_runner.item_failed", error=error.message)
            raise error

        log.warning("batch_runner.item_failed_continuing", error=error.message)
        return ItemFailure(item_index=item.index, error=error.to_detail())

    async def _process(self, item: WorkItem, debug_config: DebugConfig) -> ResultRecord:
        video_id = normalize_video_id(item.raw_id)
        logger.info("batch_runner.processing", item_index=item.index, video_id=video_id)

        session = await self.launcher.launch(debug_config)
        transcript = await self.extractor.extract(video_id, session, debug_config)
        return ResultRecord(item_index=item.index, youtube_id=video_id, transcript=transcript)
