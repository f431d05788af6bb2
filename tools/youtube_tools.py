"""
YouTube Data API v3 integration for listing a channel's recent videos.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from config.settings import Settings

# Setup logging
logger = logging.getLogger(__name__)

# Custom exceptions
class YouTubeAPIError(Exception):
    """Base YouTube API error."""
    pass

class YouTubeQuotaExceededError(YouTubeAPIError):
    """YouTube API quota exceeded."""
    pass

class YouTubeChannelNotFoundError(YouTubeAPIError):
    """YouTube channel not found."""
    pass

class NoResultsError(YouTubeAPIError):
    """A lookup returned no usable items."""
    pass


EmptyResultError = NoResultsError


class YouTubeAPIClient:
    """Async YouTube Data API v3 client.

    Every call is a single GET; there is no retry, backoff or caching. Pass an
    ``httpx.AsyncClient`` to reuse a connection pool (or a mock transport in
    tests); otherwise a client is opened per request.
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self.base_url = settings.youtube_api_base_url
        self.http_client = http_client
        self.request_count = 0

    async def _make_request(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Make an authenticated GET request and return the decoded JSON body."""
        params = {**params, "key": self.settings.youtube_api_key}
        url = f"{self.base_url}/{endpoint}"

        try:
            if self.http_client is not None:
                response = await self.http_client.get(url, params=params)
            else:
                async with httpx.AsyncClient(timeout=self.settings.request_timeout_seconds) as client:
                    response = await client.get(url, params=params)
        except httpx.RequestError as e:
            logger.error(f"HTTP request to {endpoint} failed: {e}")
            raise YouTubeAPIError(f"Request failed: {e}") from e

        self.request_count += 1

        if response.status_code == 200:
            try:
                return response.json()
            except ValueError as e:
                raise YouTubeAPIError(f"Invalid JSON from {endpoint}: {e}") from e

        if response.status_code == 403:
            error_reason = self._error_reason(response)
            if "quotaExceeded" in error_reason:
                logger.error("YouTube API quota exceeded")
                raise YouTubeQuotaExceededError("Daily quota limit reached")
            raise YouTubeAPIError(f"API access forbidden: {error_reason or 'unknown reason'}")

        if response.status_code == 404:
            raise YouTubeChannelNotFoundError("Channel or video not found")

        raise YouTubeAPIError(
            f"Unexpected status {response.status_code} from {endpoint}: {self._error_reason(response)}"
        )

    @staticmethod
    def _error_reason(response: httpx.Response) -> str:
        """Pull the first error reason out of a YouTube error body."""
        try:
            error_data = response.json()
        except ValueError:
            return ""
        error = error_data.get("error") if isinstance(error_data, dict) else None
        if not isinstance(error, dict):
            return ""
        errors = error.get("errors") or [{}]
        return errors[0].get("reason", "") or error.get("message", "")

    async def search_channel_video_ids(self, channel_id: str, max_results: int) -> List[str]:
        """Get the ids of a channel's most recent videos, newest first."""
        params = {
            "channelId": channel_id,
            "part": "snippet,id",
            "order": "date",
            "maxResults": max_results,
            "type": "video"
        }

        response = await self._make_request("search", params)

        if not response.get("items"):
            raise NoResultsError("No videos returned from YouTube API.")

        video_ids = [
            item["id"]["videoId"]
            for item in response["items"]
            if isinstance(item, dict)
            and isinstance(item.get("id"), dict)
            and isinstance(item["id"].get("videoId"), str)
            and item["id"]["videoId"]
        ]

        if not video_ids:
            raise NoResultsError("No video IDs found for this channel.")

        logger.debug(f"Search returned {len(video_ids)} video ids for channel {channel_id}")
        return video_ids

    async def get_video_details(self, video_ids: List[str]) -> List[Dict[str, Any]]:
        """Get duration and snippet details for exactly these videos in one call."""
        params = {
            "id": ",".join(video_ids),
            "part": "contentDetails,snippet"
        }

        response = await self._make_request("videos", params)

        items = response.get("items") or []
        if not items:
            raise NoResultsError("No video details returned from YouTube API.")

        return items

    async def fetch_channel_videos(self, channel_id: str, max_results: int) -> List[Dict[str, Any]]:
        """
        List recent channel uploads with their details.

        The details lookup depends on the ids from the search, so the two
        requests always run one after the other.

        Args:
            channel_id: YouTube channel ID (starts with UC)
            max_results: Maximum number of videos to look up

        Returns:
            Raw ``videos`` resource items
        """
        logger.info(f"Fetching videos for channel {channel_id}, max_results={max_results}")

        video_ids = await self.search_channel_video_ids(channel_id, max_results)
        items = await self.get_video_details(video_ids)

        logger.info(f"Fetched details for {len(items)} of {len(video_ids)} videos for channel {channel_id}")
        return items
