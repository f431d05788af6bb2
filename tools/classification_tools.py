"""
Shorts / full episode classification of fetched channel videos.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from models.video import Bucket, ClassifiedVideos, VideoRecord
from utils import parse_duration_to_seconds, safe_log_text

# Setup logging
logger = logging.getLogger(__name__)


def _parse_published_at(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def video_record_from_item(item: Dict[str, Any]) -> Optional[VideoRecord]:
    """
    Build a VideoRecord from a ``videos`` resource item.

    Args:
        item: Raw item from the videos endpoint

    Returns:
        VideoRecord, or None when the item is missing its id, duration,
        snippet or a readable publish time
    """
    if not isinstance(item, dict):
        return None

    content_details = item.get("contentDetails")
    duration_iso = content_details.get("duration") if isinstance(content_details, dict) else None
    snippet = item.get("snippet")
    video_id = item.get("id")

    if not duration_iso or not isinstance(snippet, dict) or not snippet or not isinstance(video_id, str) or not video_id:
        return None

    published_at = _parse_published_at(snippet.get("publishedAt"))
    if published_at is None:
        return None

    try:
        return VideoRecord(
            video_id=video_id,
            title=snippet.get("title") or "",
            duration_seconds=parse_duration_to_seconds(duration_iso),
            published_at=published_at
        )
    except ValidationError as e:
        logger.debug(f"Skipping video {video_id}: {e}")
        return None


def classify_video(record: VideoRecord) -> Bucket:
    """Shorts run under three minutes; 180 seconds and up is a full episode."""
    return record.bucket


def sort_newest_first(records: Iterable[VideoRecord]) -> List[VideoRecord]:
    """Order records by publish time, most recent first.

    The sort is stable, so records published at the same instant keep their
    input order.
    """
    return sorted(records, key=lambda record: record.published_at, reverse=True)


def classify_videos(items: Iterable[Dict[str, Any]]) -> ClassifiedVideos:
    """
    Split raw detail items into sorted shorts and full episodes.

    Malformed items are dropped without raising.

    Args:
        items: Raw items from the videos endpoint, in API order

    Returns:
        ClassifiedVideos with both buckets sorted newest first
    """
    shorts: List[VideoRecord] = []
    episodes: List[VideoRecord] = []
    dropped = 0

    for item in items:
        record = video_record_from_item(item)
        if record is None:
            dropped += 1
            continue

        if classify_video(record) is Bucket.SHORTS:
            shorts.append(record)
        else:
            episodes.append(record)

        logger.debug(
            f"Classified {record.video_id} \"{safe_log_text(record.title)}\" "
            f"({record.duration_seconds}s) as {record.bucket.value}"
        )

    if dropped:
        logger.debug(f"Dropped {dropped} malformed video item(s)")

    return ClassifiedVideos(
        shorts=sort_newest_first(shorts),
        episodes=sort_newest_first(episodes),
        dropped=dropped
    )
