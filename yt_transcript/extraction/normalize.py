"""Resolve raw user input to a YouTube video identifier."""

import re
from urllib.parse import parse_qs, urlparse

from yt_transcript.models.errors import InvalidInputError

# Deliberately permissive: anything that looks like a youtube host followed by a path
YOUTUBE_URL_PATTERN = re.compile(r"^(http(s)?://)?((w){3}.)?youtu(be|.be)?(\.com)?/.+")

SHORT_LINK_HOST = "youtu.be"


def is_youtube_url(raw: str) -> bool:
    return YOUTUBE_URL_PATTERN.match(raw) is not None


def normalize_video_id(raw: str) -> str:
    """
    Return the video identifier contained in ``raw``.

    Strings that do not look like a YouTube URL are returned unchanged. Short links
    (``youtu.be/<id>``) yield their first path segment, every other URL yields its
    ``v`` query parameter.

    Raises:
        InvalidInputError: The URL does not carry a video identifier.
    """
    if not is_youtube_url(raw):
        return raw

    # Scheme-less input would otherwise be parsed as a bare path
    parsed_url = urlparse(raw if "://" in raw else f"https://{raw}")

    if parsed_url.hostname == SHORT_LINK_HOST:
        video_id = parsed_url.path[1:].split("/")[0]
    else:
        video_id = parse_qs(parsed_url.query).get("v", [""])[0]

    if not video_id:
        raise InvalidInputError(
            f"The provided URL doesn't contain a valid YouTube video identifier. URL: {raw}",
            {"url": raw},
        )
    return video_id
