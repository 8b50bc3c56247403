"""Locate an app in a feed and settle its current version."""

import logging
from typing import Optional

from .errors import AppNotFoundError
from .models import App, Feed

logger = logging.getLogger(__name__)


def find_app(feed: Feed, bundle_identifier: str) -> Optional[App]:
    """Return the first app whose bundleIdentifier matches exactly, or None."""
    return next(
        (app for app in feed.apps if app.bundle_identifier == bundle_identifier),
        None,
    )


def with_latest_version(app: App) -> App:
    """
    Copy `app` with its version fields taken from versions[0].

    The head of the list is the current version; sources are expected to
    list versions newest first, so dates are never compared.
    """
    latest = app.latest_version
    if latest is None:
        return app

    return app.model_copy(update={
        "version": latest.version,
        "version_date": latest.date,
        "version_description": latest.localized_description,
        "download_url": latest.download_url,
        "size": latest.size,
    })


def resolve(feed: Feed, bundle_identifier: str) -> App:
    """
    Find an app by bundle identifier and normalize its version fields.

    Raises:
        AppNotFoundError: No app in the feed has that identifier.
    """
    app = find_app(feed, bundle_identifier)
    if app is None:
        logger.warning(f"No app with bundle identifier {bundle_identifier} in source '{feed.name}'")
        raise AppNotFoundError(bundle_identifier)
    return with_latest_version(app)
