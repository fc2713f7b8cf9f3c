"""Standalone tester: extract the transcript of one video from the command line."""

import argparse
import asyncio
import json
import sys
import traceback
from pathlib import Path
from typing import Any
from uuid import uuid4

from yt_transcript.config import get_config, merge_overrides
from yt_transcript.models.node import NodeExecutionContext
from yt_transcript.models.transcript import DebugOverrides
from yt_transcript.registry.node_registry import get_registry
from yt_transcript.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

DEFAULT_VIDEO = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
SAMPLE_SIZE = 5


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m yt_transcript",
        description="YouTube transcript node standalone tester",
    )
    parser.add_argument("video", nargs="?", default=DEFAULT_VIDEO, help="YouTube URL or video ID")
    parser.add_argument("--save", action="store_true", help="Save transcript to transcript-<id>.json")
    parser.add_argument("--debug-mode", action="store_true", help="Run with a visible browser")
    parser.add_argument("--slow-mo", action="store_true", help="Slow down browser operations for better visibility")
    parser.add_argument("--devtools", action="store_true", help="Open Chrome DevTools automatically")
    parser.add_argument("--debugger", action="store_true", help="Break before checking for the transcript")
    parser.add_argument("--wait-after", action="store_true", help="Keep browser open after getting transcript for inspection")
    parser.add_argument("--no-headless", action="store_true", help="Force non-headless mode even without debug flags")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    return parser


def overrides_from_args(args: argparse.Namespace) -> DebugOverrides:
    return DebugOverrides(
        debug_mode=args.debug_mode,
        slow_mo=args.slow_mo,
        devtools=args.devtools,
        wait_after=args.wait_after,
        debugger=args.debugger,
        no_headless=args.no_headless,
    )


async def run_tester(video: str, overrides: DebugOverrides) -> list[dict[str, Any]]:
    correlation_id = str(uuid4())
    context = NodeExecutionContext(
        correlation_id=correlation_id,
        logger=logger.bind(correlation_id=correlation_id),
        continue_on_fail=False,
        overrides=overrides,
    )
    return await get_registry().execute("youtube_transcript", [{"youtubeId": video}], context)


def report(output: list[dict[str, Any]], save: bool) -> None:
    """Print a sample of the transcript and optionally save it."""
    if not output or "transcript" not in output[0].get("json", {}):
        print(f"Result structure: {json.dumps(output, indent=2)}")
        return

    record = output[0]["json"]
    youtube_id = record["youtubeId"]
    transcript = record["transcript"]

    print(f"YouTube ID used: {youtube_id}")
    print("\nTranscript segments sample:")
    print("-" * 39)
    for segment in transcript[:SAMPLE_SIZE]:
        print(f"[{segment['timestamp']}] {segment['text']}")
    print("-" * 39)
    print(f"Total segments: {len(transcript)}")

    if save:
        filename = Path(f"transcript-{youtube_id}.json")
        filename.write_text(json.dumps(transcript, indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"Transcript saved to {filename}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = get_config()
    configure_logging(args.log_level or config.log_level)
    overrides = merge_overrides(config.overrides, overrides_from_args(args))

    print(f"Testing video: {args.video}")
    try:
        output = asyncio.run(run_tester(args.video, overrides))
    except Exception as e:
        print(f"\nTest failed: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1

    report(output, args.save)
    print("\nTest completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
