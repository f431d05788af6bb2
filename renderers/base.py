"""
Rendering interface used by the watch page pipeline.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from models.video import Bucket, VideoRecord


class PageRenderer(ABC):
    """Writes pipeline output into named page regions.

    Implementations skip regions that do not exist on their page.
    """

    @abstractmethod
    def render_videos(self, region_id: str, videos: Sequence[VideoRecord], bucket: Bucket) -> None:
        """Replace the region's content with one card per video, in order."""

    @abstractmethod
    def set_note(self, region_id: str, text: str) -> None:
        """Set the text of a note region."""

    @abstractmethod
    def show_error(self, region_id: str, message: str) -> None:
        """Make an error region visible with the given message."""
