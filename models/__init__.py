"""
Pydantic models for data validation and structure.
"""

from .video import Bucket, ClassifiedVideos, VideoRecord, SHORT_MAX_SECONDS
from .page import PageRegions

__all__ = [
    "Bucket",
    "ClassifiedVideos",
    "VideoRecord",
    "SHORT_MAX_SECONDS",
    "PageRegions"
]
