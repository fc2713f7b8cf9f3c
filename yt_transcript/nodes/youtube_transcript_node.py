"""Node for extracting YouTube video transcripts with a headless browser."""

from typing import Any

from pydantic import ValidationError

from yt_transcript.extraction.batch import BatchRunner
from yt_transcript.models.errors import InvalidInputError
from yt_transcript.models.node import NodeExecutionContext
from yt_transcript.models.transcript import ItemFailure, NodeParameters, WorkItem
from yt_transcript.nodes.base import BaseNode

_DEBUG_OPTIONS = {
    "debugMode": "Whether to enable debug mode",
    "devtools": "Whether to open Chrome DevTools automatically",
    "slowMo": "Whether to slow down browser operations for better visibility",
    "debuggerStatement": "Whether to pause at a breakpoint before transcript processing",
    "waitAfterTranscript": "Whether to keep the browser open after getting the transcript for inspection",
}


class YouTubeTranscriptNode(BaseNode):
    """Get the transcript of a YouTube video."""

    def __init__(self, runner: BatchRunner | None = None) -> None:
        self.runner = runner or BatchRunner()

    @property
    def name(self) -> str:
        return "youtube_transcript"

    @property
    def description(self) -> str:
        return "Get Transcript of a youtube video. Accepts a video ID, a youtube.com watch URL or a youtu.be short link."

    @property
    def properties(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "youtubeId": {
                    "type": "string",
                    "description": "Youtube Video ID or Url",
                    "default": "",
                },
                "options": {
                    "type": "object",
                    "properties": {
                        option: {"type": "boolean", "default": False, "description": description}
                        for option, description in _DEBUG_OPTIONS.items()
                    },
                    "additionalProperties": False,
                },
            },
            "required": ["youtubeId"],
        }

    def _to_work_items(self, items: list[dict[str, Any]]) -> list[WorkItem]:
        work_items = []
        for index, raw in enumerate(items):
            try:
                params = NodeParameters.model_validate(raw)
            except ValidationError as e:
                error = InvalidInputError(f"Invalid parameters for item {index}: {e}")
                error.item_index = index
                raise error from e
            work_items.append(WorkItem(index=index, raw_id=params.youtube_id, options=params.options))
        return work_items

    async def execute(self, items: list[dict[str, Any]], context: NodeExecutionContext) -> list[dict[str, Any]]:
        work_items = self._to_work_items(items)
        context.logger.info("youtube_transcript_node.executing", item_count=len(work_items))

        results = await self.runner.run(
            work_items,
            overrides=context.overrides,
            continue_on_fail=context.continue_on_fail,
        )

        output: list[dict[str, Any]] = []
        for result in results:
            if isinstance(result, ItemFailure):
                output.append(
                    {
                        "json": items[result.item_index],
                        "error": result.error.model_dump(mode="json"),
                        "pairedItem": result.item_index,
                    }
                )
            else:
                output.append(
                    {
                        "json": result.model_dump(by_alias=True, exclude={"item_index"}),
                        "pairedItem": result.item_index,
                    }
                )

        context.logger.info(
            "youtube_transcript_node.completed",
            succeeded=sum(1 for entry in output if "error" not in entry),
            failed=sum(1 for entry in output if "error" in entry),
        )
        return output
