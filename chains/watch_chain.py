"""
Fetch -> classify -> render workflow for the channel watch page.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from config.settings import Settings
from models.page import PageRegions
from models.video import Bucket, ClassifiedVideos
from renderers.base import PageRenderer
from tools.classification_tools import classify_videos
from tools.render_tools import LOAD_ERROR_MESSAGE, format_episodes_note, format_shorts_note
from tools.youtube_tools import YouTubeAPIClient
from utils import create_result_dict

# Setup logging
logger = logging.getLogger(__name__)


class WatchPageChain:
    """Workflow chain that lists a channel's videos and renders them.

    Runs to completion with one of two outcomes: both grids and notes
    rendered, or both error regions showing the same generic message.
    """

    def __init__(
        self,
        settings: Settings,
        youtube_client: Optional[YouTubeAPIClient] = None,
        regions: Optional[PageRegions] = None
    ):
        self.settings = settings
        self.youtube_client = youtube_client or YouTubeAPIClient(settings)
        self.regions = regions or PageRegions()
        self.executions = 0
        self.successful_executions = 0

    async def build_listing(self) -> ClassifiedVideos:
        """
        Fetch the channel's recent videos and classify them.

        Returns:
            Shorts and full episodes, each sorted newest first

        Raises:
            YouTubeAPIError: The lookup failed or returned nothing
        """
        items = await self.youtube_client.fetch_channel_videos(
            channel_id=self.settings.channel_id,
            max_results=self.settings.max_results
        )
        listing = classify_videos(items)

        logger.info(
            f"Classified {listing.total} videos: {len(listing.shorts)} shorts, "
            f"{len(listing.episodes)} full episodes"
        )
        return listing

    def render_listing(self, renderer: PageRenderer, listing: ClassifiedVideos) -> None:
        """Write both buckets and their notes to the page."""
        renderer.render_videos(self.regions.shorts_grid, listing.shorts, Bucket.SHORTS)
        renderer.render_videos(self.regions.episodes_grid, listing.episodes, Bucket.EPISODES)

        renderer.set_note(self.regions.shorts_note, format_shorts_note(len(listing.shorts)))
        renderer.set_note(self.regions.episodes_note, format_episodes_note(len(listing.episodes)))

    def render_failure(self, renderer: PageRenderer) -> None:
        """Show the generic load error in both sections."""
        renderer.show_error(self.regions.shorts_error, LOAD_ERROR_MESSAGE)
        renderer.show_error(self.regions.episodes_error, LOAD_ERROR_MESSAGE)

    async def execute(self, renderer: PageRenderer) -> Dict[str, Any]:
        """
        Run the full workflow against a renderer.

        Workflow: Fetch → Classify → Render

        Errors never propagate: they are logged for developers and the
        page only shows the generic load error.

        Args:
            renderer: Page the results are written to

        Returns:
            Workflow execution result
        """
        logger.info(f"Starting watch page workflow for channel {self.settings.channel_id}")
        start_time = datetime.now(timezone.utc)
        self.executions += 1

        try:
            listing = await self.build_listing()
            self.render_listing(renderer, listing)
        except Exception as e:
            logger.exception(f"Watch page workflow failed for channel {self.settings.channel_id}: {e}")
            self.render_failure(renderer)
            return create_result_dict(
                False,
                errors=[str(e) or e.__class__.__name__],
                shorts=0,
                episodes=0,
                dropped=0,
                execution_time_seconds=(datetime.now(timezone.utc) - start_time).total_seconds()
            )

        self.successful_executions += 1
        return create_result_dict(
            True,
            shorts=len(listing.shorts),
            episodes=len(listing.episodes),
            dropped=listing.dropped,
            execution_time_seconds=(datetime.now(timezone.utc) - start_time).total_seconds()
        )


async def run_watch_pipeline(
    settings: Settings,
    renderer: PageRenderer,
    youtube_client: Optional[YouTubeAPIClient] = None
) -> Dict[str, Any]:
    """Build the watch page once with the given configuration."""
    chain = WatchPageChain(settings, youtube_client=youtube_client)
    return await chain.execute(renderer)
