"""
Tools for fetching, classifying and formatting channel videos.
"""

from .youtube_tools import (
    YouTubeAPIClient,
    YouTubeAPIError,
    YouTubeQuotaExceededError,
    YouTubeChannelNotFoundError,
    NoResultsError,
    EmptyResultError
)
from .classification_tools import classify_videos, sort_newest_first, video_record_from_item
from .render_tools import render_video_card, format_published_date, LOAD_ERROR_MESSAGE

__all__ = [
    "YouTubeAPIClient",
    "YouTubeAPIError",
    "YouTubeQuotaExceededError",
    "YouTubeChannelNotFoundError",
    "NoResultsError",
    "EmptyResultError",
    "classify_videos",
    "sort_newest_first",
    "video_record_from_item",
    "render_video_card",
    "format_published_date",
    "LOAD_ERROR_MESSAGE"
]
