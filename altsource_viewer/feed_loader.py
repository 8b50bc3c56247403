"""Fetch and parse a source feed."""

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from .config import config
from .errors import FeedLoadError
from .models import Feed

logger = logging.getLogger(__name__)


def fetch_feed_json(url: str, timeout: Optional[float] = None) -> dict:
    """Make the single GET for a source and return the decoded JSON body."""
    logger.info(f"Fetching source {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Request for {url} failed: {e}")
        raise FeedLoadError(url, str(e)) from e

    try:
        data = response.json()
    except ValueError as e:
        logger.error(f"Source {url} is not valid JSON: {e}")
        raise FeedLoadError(url, "response is not valid JSON") from e

    if not isinstance(data, dict):
        raise FeedLoadError(url, "expected a JSON object at the top level")
    return data


def load_feed(url: Optional[str] = None) -> Feed:
    """
    Load a source feed.

    Args:
        url: Source URL. Defaults to the configured ALTSOURCE_URL.

    Returns:
        The parsed Feed.

    Raises:
        FeedLoadError: The request failed, the body is not JSON, or it is not a source.
    """
    url = url or config.SOURCE_URL
    data = fetch_feed_json(url, timeout=config.FEED_TIMEOUT)

    try:
        feed = Feed.model_validate(data)
    except ValidationError as e:
        logger.error(f"Source {url} failed validation: {e}")
        raise FeedLoadError(url, f"invalid source document ({e.error_count()} errors)") from e

    logger.info(f"Loaded source '{feed.name}' with {len(feed.apps)} apps")
    return feed
