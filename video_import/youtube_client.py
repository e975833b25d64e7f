"""YouTube Data API v3 video metadata lookup"""

import logging
from typing import List

import requests

from .models import VideoMetadata

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://www.googleapis.com/youtube/v3/videos"
MAX_IDS_PER_REQUEST = 50


class YouTubeAPIError(Exception):
    pass


class YouTubeClient:
    def __init__(self, api_key: str, api_url: str = DEFAULT_API_URL, timeout: float = 60):
        if not api_key:
            raise ValueError("YouTube API key is required")

        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout

    def fetch_videos(self, video_ids: List[str]) -> List[VideoMetadata]:
        """
        Look up title, duration and embeddable status for a list of videos.

        Videos YouTube cannot find are simply absent from the result.
        """
        if len(video_ids) > MAX_IDS_PER_REQUEST:
            logger.warning(
                f"⚠️  Requesting {len(video_ids)} videos at once; "
                f"the API only accepts {MAX_IDS_PER_REQUEST} IDs per request"
            )

        params = {
            'id': ','.join(video_ids),
            'part': 'contentDetails,snippet,status',
            'key': self.api_key,
        }

        logger.info(f"Requesting Youtube info for {len(video_ids)} videos...")

        try:
            response = requests.get(self.api_url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise YouTubeAPIError(f"YouTube API request error: {exc}") from exc

        if response.status_code != 200:
            raise YouTubeAPIError(
                f"YouTube API request failed: HTTP {response.status_code}: {self._extract_error(response)}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise YouTubeAPIError(f"YouTube API returned invalid JSON: {exc}") from exc

        if 'error' in data:
            message = data['error'].get('message', 'Unknown error')
            raise YouTubeAPIError(f"YouTube API error: {message}")

        videos = [VideoMetadata.from_api_item(item) for item in data.get('items', [])]
        logger.info(f"✅ Got metadata for {len(videos)}/{len(video_ids)} videos")
        return videos

    @staticmethod
    def _extract_error(response: requests.Response) -> str:
        try:
            data = response.json()
            message = data.get('error', {}).get('message')
            return message or response.text
        except (ValueError, AttributeError):
            return response.text[:200]
