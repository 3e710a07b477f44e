"""
Small text helpers for profile fields.
"""

import re
from typing import Optional

_YOUTUBE_ID = re.compile(r"(?:youtube\.com/(?:watch\?v=|embed/)|youtu\.be/)([a-zA-Z0-9_-]{11})")


def extract_youtube_id(url: str) -> Optional[str]:
    """Return the 11-character video id of a YouTube URL, or ``None``."""
    match = _YOUTUBE_ID.search(url or "")
    return match.group(1) if match else None


def youtube_embed_url(url: str) -> Optional[str]:
    """Embeddable player URL for a YouTube link, ``None`` for other links."""
    video_id = extract_youtube_id(url)
    if video_id is None:
        return None
    return f"https://www.youtube.com/embed/{video_id}"


def text_rows(text: Optional[str]) -> list[str]:
    """Split a newline-delimited field into its non-empty lines."""
    if not text:
        return []
    return [line for line in text.split("\n") if line]
