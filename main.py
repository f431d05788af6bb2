"""
CLI interface for the channel watch page builder.
"""

import asyncio
import argparse
import sys
import logging
from typing import Optional

from config.settings import Settings, get_settings
from chains.watch_chain import WatchPageChain
from models.video import Bucket
from renderers.html_page import HtmlPageRenderer
from tools.render_tools import format_published_date
from tools.youtube_tools import YouTubeAPIClient
from utils import format_duration

# Setup logging
logger = logging.getLogger(__name__)


def print_success(message: str) -> None:
    """Print success message."""
    print(f"[SUCCESS] {message}")


def print_error(message: str) -> None:
    """Print error message."""
    print(f"[ERROR] {message}")


def print_info(message: str) -> None:
    """Print info message."""
    print(f"[INFO] {message}")


def print_warning(message: str) -> None:
    """Print warning message."""
    print(f"[WARNING] {message}")


def create_renderer(settings: Settings, template_path: Optional[str] = None) -> HtmlPageRenderer:
    """Create the HTML renderer for the configured template and time zone."""
    tz = settings.display_tzinfo()
    template_path = template_path or settings.page_template_path
    if template_path:
        return HtmlPageRenderer.from_file(template_path, tz=tz)
    return HtmlPageRenderer(tz=tz)


async def build_command(settings: Settings, output: Optional[str] = None, template: Optional[str] = None) -> bool:
    """Build the watch page and write it to disk."""
    output = output or settings.output_path
    print_info(f"Building watch page for channel {settings.channel_id}...")

    renderer = create_renderer(settings, template)
    result = await WatchPageChain(settings).execute(renderer)
    path = renderer.write(output)

    if result["success"]:
        print_success(
            f"Wrote {path}: {result['shorts']} short(s), {result['episodes']} full episode(s)"
        )
        if result["dropped"]:
            print_info(f"Skipped {result['dropped']} video(s) with incomplete details")
        return True

    print_warning(f"Wrote {path} with the load error message")
    print_error(f"Could not load videos: {'; '.join(result['errors'])}")
    return False


async def list_command(settings: Settings, bucket: str = "all") -> bool:
    """Print the classified video listing."""
    print_info(f"Listing videos for channel {settings.channel_id}...")

    try:
        listing = await WatchPageChain(settings).build_listing()
    except Exception as e:
        print_error(f"Error listing videos: {e}")
        return False

    tz = settings.display_tzinfo()
    buckets = list(Bucket) if bucket == "all" else [Bucket(bucket)]

    for selected in buckets:
        videos = listing.for_bucket(selected)
        print(f"\n{selected.value.capitalize()} ({len(videos)})")
        for video in videos:
            print(
                f"   {format_published_date(video.published_at, tz):>13}  "
                f"{format_duration(video.duration_seconds):>8}  {video.title[:60]}  {video.url}"
            )

    if listing.dropped:
        print_info(f"\nSkipped {listing.dropped} video(s) with incomplete details")
    return True


async def test_api_command(settings: Settings) -> bool:
    """Test API connectivity with the search step only."""
    print_info("Testing YouTube API connectivity...")

    client = YouTubeAPIClient(settings)
    try:
        video_ids = await client.search_channel_video_ids(settings.channel_id, settings.max_results)
    except Exception as e:
        print_error(f"YouTube API: {e}")
        return False

    print_success(f"YouTube API: found {len(video_ids)} video(s) for channel {settings.channel_id}")
    return True


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        description="Channel watch page builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py build                             # Write watch.html
  python main.py build --output site/watch.html    # Write to another path
  python main.py build --template page.html        # Use a custom page template
  python main.py list                              # Print shorts and full episodes
  python main.py list --bucket shorts              # Print shorts only
  python main.py test-api                          # Test API connectivity
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Build command
    build_parser = subparsers.add_parser("build", help="Build the watch page")
    build_parser.add_argument("--output", help="Output file (default: OUTPUT_PATH or watch.html)")
    build_parser.add_argument(
        "--template",
        help="Page template with $shorts_grid style placeholders; write a literal $ as $$"
    )

    # List command
    list_parser = subparsers.add_parser("list", help="Print the classified video listing")
    list_parser.add_argument(
        "--bucket",
        choices=["all"] + [bucket.value for bucket in Bucket],
        default="all",
        help="Which videos to list (default: all)"
    )

    # Test API command
    subparsers.add_parser("test-api", help="Test API connectivity")

    return parser


async def main() -> int:
    """Main CLI function."""
    parser = create_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    try:
        settings = get_settings()
    except Exception as e:
        print_error(f"Invalid configuration: {e}")
        return 1

    # Only show warnings and errors on the console; the log file keeps everything
    for handler in logging.getLogger().handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(logging.WARNING)

    try:
        if args.command == "build":
            ok = await build_command(settings, output=args.output, template=args.template)

        elif args.command == "list":
            ok = await list_command(settings, bucket=args.bucket)

        elif args.command == "test-api":
            ok = await test_api_command(settings)

        else:
            print_error(f"Unknown command: {args.command}")
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print_info("\nOperation cancelled by user")
        return 1
    except Exception as e:
        logger.exception(f"Command {args.command} failed")
        print_error(f"Unexpected error: {e}")
        return 1

    return 0 if ok else 1


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
