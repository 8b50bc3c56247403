"""Text helpers for turning feed values into display strings.

Every function here is total: empty or missing input gives empty output
rather than an error.
"""

import html
import math
import re
from datetime import date, datetime, timedelta
from typing import Optional

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_URL = re.compile(r"https?://[^\s<>\"']+")
_URL_TRAILING = ".,;:!?)"
_BOLD = re.compile(r"\*\*(?!\s)(.+?)(?<!\s)\*\*")
_ITALIC_STAR = re.compile(r"(?<![\*\w])\*(?![\s\*])(.+?)(?<![\s\*])\*(?![\*\w])")
_ITALIC_UNDERSCORE = re.compile(r"(?<!\w)_(?!\s)(.+?)(?<!\s)_(?!\w)")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SNAKE_SEPARATOR = re.compile(r"[_\-\s]+")


def _capitalize(word: str) -> str:
    # str.capitalize() would lowercase acronyms such as "ID".
    return word[:1].upper() + word[1:]


def insert_space_in_camel_string(value: Optional[str]) -> str:
    """'backgroundLocation' -> 'Background Location', 'FaceID' -> 'Face ID'."""
    if not value:
        return ""
    words = _CAMEL_BOUNDARY.sub(" ", value).split()
    return " ".join(_capitalize(word) for word in words)


def insert_space_in_snake_string(value: Optional[str]) -> str:
    """'photo_library' -> 'Photo Library', 'background-audio' -> 'Background Audio'."""
    if not value:
        return ""
    words = [word for word in _SNAKE_SEPARATOR.split(value) if word]
    return " ".join(_capitalize(word) for word in words)


def _format_emphasis(text: str) -> str:
    text = html.escape(text)
    text = _BOLD.sub(r"<b>\1</b>", text)
    text = _ITALIC_STAR.sub(r"<i>\1</i>", text)
    text = _ITALIC_UNDERSCORE.sub(r"<i>\1</i>", text)
    return text


def format_string(value: Optional[str]) -> str:
    """
    Convert free text from a feed into safe HTML.

    Supports a small markdown-like subset: ``**bold**``, ``*italic*`` and
    ``_italic_``, bare http(s) URLs (turned into links) and line breaks.
    Everything else is escaped.
    """
    if not value:
        return ""

    parts = []
    position = 0
    for match in _URL.finditer(value):
        url = match.group(0).rstrip(_URL_TRAILING)
        end = match.start() + len(url)
        parts.append(_format_emphasis(value[position:match.start()]))
        escaped = html.escape(url)
        parts.append(f'<a href="{escaped}" target="_blank">{escaped}</a>')
        position = end
    parts.append(_format_emphasis(value[position:]))

    text = "".join(parts)
    return text.replace("\r\n", "\n").replace("\n", "<br>")


def _parse_date(value: str) -> Optional[date]:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def format_version_date(value: Optional[str], today: Optional[date] = None) -> str:
    """
    Render a version date as 'Mar 4, 2024', 'Today' or 'Yesterday'.

    Args:
        value: ISO 8601 date or datetime string from the feed.
        today: Reference date for the relative forms. Defaults to the current date.

    Returns:
        The formatted date, the date part of an unparseable value, or ''.
    """
    if not value:
        return ""

    parsed = _parse_date(value)
    if parsed is None:
        return value.split("T")[0]

    today = today or date.today()
    if parsed == today:
        return "Today"
    if parsed == today - timedelta(days=1):
        return "Yesterday"
    return f"{_MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def normalize_tint_color(color: Optional[str]) -> Optional[str]:
    """Strip leading '#' characters and prefix exactly one. Idempotent."""
    if not color:
        return None
    stripped = color.strip().lstrip("#")
    return f"#{stripped}" if stripped else None


def estimate_line_count(value: Optional[str], chars_per_line: int) -> int:
    """Estimate how many lines `value` takes when wrapped at `chars_per_line`."""
    if not value:
        return 0
    lines = 0
    for paragraph in value.replace("\r\n", "\n").split("\n"):
        lines += max(1, math.ceil(len(paragraph) / chars_per_line))
    return lines


def overflows(content_lines: int, clamp_lines: int) -> bool:
    """True when content is taller than the clamped block, i.e. a 'more' button is needed."""
    return content_lines > clamp_lines
