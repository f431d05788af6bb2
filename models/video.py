"""
Video record and classification result models.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Videos shorter than this are shorts, everything else is a full episode
SHORT_MAX_SECONDS = 180


class Bucket(str, Enum):
    """Display bucket a video belongs to."""

    SHORTS = "shorts"
    EPISODES = "episodes"


class VideoRecord(BaseModel):
    """A single channel video, ready for display."""

    model_config = ConfigDict(frozen=True)

    video_id: str = Field(..., min_length=1, description="YouTube video ID")
    title: str = Field("", description="Video title")
    duration_seconds: int = Field(..., ge=0, description="Duration in whole seconds")
    published_at: datetime = Field(..., description="Video publication timestamp")

    @field_validator('published_at')
    @classmethod
    def validate_published_at(cls, v):
        """Treat naive timestamps as UTC so records always compare."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def url(self) -> str:
        """Get YouTube video URL."""
        return f"https://www.youtube.com/watch?v={self.video_id}"

    @property
    def embed_url(self) -> str:
        """Get the embeddable player URL."""
        return f"https://www.youtube.com/embed/{self.video_id}"

    @property
    def bucket(self) -> Bucket:
        if self.duration_seconds < SHORT_MAX_SECONDS:
            return Bucket.SHORTS
        return Bucket.EPISODES


class ClassifiedVideos(BaseModel):
    """Result of one classification pass."""

    shorts: List[VideoRecord] = Field(default_factory=list)
    episodes: List[VideoRecord] = Field(default_factory=list)
    dropped: int = Field(0, ge=0, description="Malformed items skipped")

    @property
    def total(self) -> int:
        return len(self.shorts) + len(self.episodes)

    def for_bucket(self, bucket: Bucket) -> List[VideoRecord]:
        """Get the ordered records of one bucket."""
        if bucket is Bucket.SHORTS:
            return self.shorts
        return self.episodes
