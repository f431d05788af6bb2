"""
Shared fixtures for the watch page tests.
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from config.settings import Settings


@pytest.fixture
def settings(tmp_path):
    """Settings that never read .env or touch the real log file."""
    return Settings(
        _env_file=None,
        youtube_api_key="test-key",
        youtube_api_base_url="https://youtube.test/v3",
        channel_id="UC1234567890123456789012",
        max_results=50,
        log_file=str(tmp_path / "watch_page.log")
    )


@pytest.fixture
def make_item():
    """Factory for raw ``videos`` resource items."""
    def _make_item(video_id, duration="PT5M", published_at="2024-01-01T00:00:00Z", title=None):
        return {
            "id": video_id,
            "contentDetails": {"duration": duration},
            "snippet": {
                "title": title if title is not None else f"Video {video_id}",
                "publishedAt": published_at
            }
        }
    return _make_item
