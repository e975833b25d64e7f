"""YouTube URL parsing"""

import re
from typing import Optional

# youtube.com takes a watch?v=, embed/ or v/ path; youtu.be has the ID right after the slash
YOUTUBE_URL_RE = re.compile(
    r"^(?:(?:https?:)?//)?"
    r"(?:(?:www|m)\.)?"
    r"(?:youtube\.com/(?:[\w\-]+\?v=|embed/|v/|(?![\w\-]+\?v=))|youtu\.be/)"
    r"(?P<video_id>[\w\-]+)"
    r"(?:\S+)?$"
)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

class ExtractionError(ValueError):
    def __init__(self, url: str, line_number: Optional[int] = None):
        where = f" (row {line_number})" if line_number else ""
        super().__init__(f"Not a recognized YouTube URL{where}: {url!r}")
        self.url = url
        self.line_number = line_number


def extract_video_id(url: str) -> str:
    """
    Extract the video ID from a YouTube URL.

    Handles youtube.com and youtu.be hosts, with or without protocol and
    www./m. subdomain, and watch?v=, embed/ and v/ paths. Extra query
    parameters after the ID (&list=..., ?t=5) are dropped.

    Raises:
        ExtractionError: if the URL does not look like a YouTube video URL
    """
    match = YOUTUBE_URL_RE.match((url or "").strip())
    if not match:
        raise ExtractionError(url)
    return match.group("video_id")

def watch_url(video_id: str) -> str:
    return WATCH_URL.format(video_id=video_id)
