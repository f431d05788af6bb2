"""
Markup and text formatting for watch page video cards.
"""

import html
from datetime import datetime, tzinfo
from typing import Optional

from models.video import Bucket, VideoRecord
from utils import format_duration


LOAD_ERROR_MESSAGE = "Oops, we couldn’t load videos from YouTube right now. Try refreshing in a bit."

PLAYER_ALLOW = (
    "accelerometer; autoplay; clipboard-write; encrypted-media; "
    "gyroscope; picture-in-picture; web-share"
)

CARD_TYPES = {
    Bucket.SHORTS: "short",
    Bucket.EPISODES: "episode",
}


def escape_title_attribute(title: str) -> str:
    """Escape a title for a double-quoted attribute (only ``"`` is replaced)."""
    return title.replace('"', "&quot;")


def format_published_date(published_at: datetime, tz: Optional[tzinfo] = None) -> str:
    """
    Format a publish time as a short date, e.g. ``Mar 1, 2024``.

    Args:
        published_at: Timezone-aware publish timestamp
        tz: Display time zone; the timestamp's own zone when omitted

    Returns:
        Short date string
    """
    if tz is not None:
        published_at = published_at.astimezone(tz)
    return f"{published_at.strftime('%b')} {published_at.day}, {published_at.year}"


def format_shorts_note(count: int) -> str:
    if count:
        return f"Showing {count} short{'' if count == 1 else 's'} under 3 minutes."
    return "No shorts found yet — check back soon."


def format_episodes_note(count: int) -> str:
    if count:
        return f"Showing {count} full episode{'' if count == 1 else 's'}."
    return "No full episodes found yet — check back soon."


def render_video_card(video: VideoRecord, bucket: Bucket, tz: Optional[tzinfo] = None) -> str:
    """
    Render one embeddable video card.

    Args:
        video: Video to render
        bucket: Bucket the card is shown in
        tz: Display time zone for the publish date

    Returns:
        Card markup
    """
    card_type = CARD_TYPES[bucket]
    return (
        f'<article class="video-card video-card--{card_type}">\n'
        f'  <div class="video-thumb">\n'
        f'    <iframe\n'
        f'      src="{video.embed_url}"\n'
        f'      title="{escape_title_attribute(video.title)}"\n'
        f'      loading="lazy"\n'
        f'      allow="{PLAYER_ALLOW}"\n'
        f'      allowfullscreen\n'
        f'    ></iframe>\n'
        f'  </div>\n'
        f'  <div class="video-meta">\n'
        f'    <h3 class="video-title">{html.escape(video.title, quote=False)}</h3>\n'
        f'    <div class="video-extra">\n'
        f'      <span>{format_duration(video.duration_seconds)}</span>\n'
        f'      <span>{format_published_date(video.published_at, tz)}</span>\n'
        f'    </div>\n'
        f'  </div>\n'
        f'</article>'
    )
