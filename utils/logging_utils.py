"""
Logging helpers for video titles.
"""


def safe_log_text(text: str, max_length: int = 80) -> str:
    """
    Make a video title safe for console log handlers.

    Non-ASCII characters are replaced and long titles are truncated.

    Args:
        text: Title or other user-supplied text
        max_length: Longest string to return

    Returns:
        ASCII-safe, truncated text
    """
    if not text:
        return text
    safe = text.encode('ascii', 'replace').decode('ascii')
    if len(safe) > max_length:
        return safe[:max_length - 3] + "..."
    return safe
