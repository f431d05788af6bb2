"""
ISO 8601 duration parsing and display formatting.
"""

import re


# Examples: PT59S, PT1M2S, PT10M, PT1H2M10S
ISO_DURATION_PATTERN = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def parse_duration_to_seconds(iso) -> int:
    """
    Convert a YouTube ISO 8601 duration to whole seconds.

    Parsing is lenient: anything that does not contain a ``PT`` duration
    yields 0 instead of raising.

    Args:
        iso: Duration string such as ``PT1H2M10S``

    Returns:
        Duration in seconds
    """
    if not isinstance(iso, str):
        return 0

    match = ISO_DURATION_PATTERN.search(iso)
    if not match:
        return 0

    hours, minutes, seconds = (int(part or 0) for part in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def format_duration(seconds: int) -> str:
    """Format seconds as ``45s``, ``2m`` or ``2m 5s``."""
    minutes, secs = divmod(int(seconds), 60)
    if minutes == 0:
        return f"{secs}s"
    if secs == 0:
        return f"{minutes}m"
    return f"{minutes}m {secs}s"
