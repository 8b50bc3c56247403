"""Derive everything a page displays from the query string and the source feed.

Binding is pure with respect to the page: nothing is written until a complete
page model has been built, so any abort leaves the page untouched.
"""

import logging
from datetime import date
from typing import Callable, Mapping, Optional
from urllib.parse import urlencode

from pydantic import BaseModel

from .config import config
from .errors import MissingParameterError
from .feed_loader import load_feed
from .formatting import (
    estimate_line_count,
    format_string,
    format_version_date,
    normalize_tint_color,
    overflows,
)
from .models import App, Feed
from .navigation import NavBarState
from .permissions import EntitlementsSection, PermissionItem, privacy_section
from .permissions import entitlements_section as build_entitlements_section
from .resolver import resolve, with_latest_version

logger = logging.getLogger(__name__)

FeedLoader = Callable[[str], Feed]

VERSION_HISTORY_PAGE = "Version_History"
SOURCE_PAGE = "Source"
APP_PAGE = "./"


class NavigationBar(BaseModel):
    title: str
    icon_url: Optional[str] = None
    state: NavBarState = NavBarState()


class AppHeader(BaseModel):
    icon_url: Optional[str] = None
    name: str
    developer_name: str = ""


class Preview(BaseModel):
    subtitle: str = ""
    screenshot_urls: list[str] = []
    description_html: str = ""
    description_overflows: bool = False


class VersionInfo(BaseModel):
    date: str = ""
    number: str = ""
    description_html: str = ""
    description_overflows: bool = False
    history_url: str


class PrivacyBlock(BaseModel):
    """Heading and rows of the privacy container."""

    icon: str
    title: str
    description: str
    items: list[PermissionItem] = []
    legacy: bool = False


class SourceInfo(BaseModel):
    name: str
    subtitle: str
    url: str


class AppPage(BaseModel):
    """All display values of the app page."""

    source_url: str
    reveal_scope: str
    document_title: str
    tint_color: str
    install_url: str
    download_url: str = ""
    navigation: NavigationBar
    header: AppHeader
    preview: Preview
    version: VersionInfo
    privacy: PrivacyBlock
    entitlements: Optional[EntitlementsSection] = None
    source: SourceInfo


class VersionRow(BaseModel):
    version: str
    date: str
    description_html: str = ""
    description_overflows: bool = False
    download_url: str = ""
    install_url: str = ""


class VersionHistoryPage(BaseModel):
    source_url: str
    reveal_scope: str
    document_title: str
    tint_color: str
    app_name: str
    icon_url: Optional[str] = None
    app_url: str
    versions: list[VersionRow] = []


class SourceAppRow(BaseModel):
    name: str
    developer_name: str = ""
    subtitle: str = ""
    icon_url: Optional[str] = None
    version: str = ""
    url: str


class SourcePage(BaseModel):
    source_url: str
    name: str
    subtitle: str = ""
    description_html: str = ""
    icon_url: Optional[str] = None
    website: Optional[str] = None
    tint_color: str
    apps: list[SourceAppRow] = []


def required_param(params: Mapping[str, str], name: str) -> str:
    value = params.get(name)
    if not value:
        logger.warning(f"Aborting page: query parameter '{name}' is missing")
        raise MissingParameterError(name)
    return value


def source_url_from(params: Mapping[str, str]) -> str:
    """The `source` query parameter, or the configured source."""
    return params.get("source") or config.SOURCE_URL


def tint_color_for(*colors: Optional[str]) -> str:
    """First usable colour, normalized, else the configured default."""
    for color in colors:
        normalized = normalize_tint_color(color)
        if normalized:
            return normalized
    return config.DEFAULT_TINT_COLOR


def install_url(download_url: Optional[str]) -> str:
    return f"{config.INSTALL_URL_SCHEME}://install?url={download_url or ''}"


def page_url(page: str, **params: str) -> str:
    return f"{page}?{urlencode(params)}"


def reveal_scope(source_url: str, bundle_id: str) -> str:
    """Session key prefix for "more" toggles; one per app so reveals do not carry over."""
    return f"{source_url}|{bundle_id}"


def needs_more_button(text: Optional[str]) -> bool:
    """Whether text clamped to the description height would be cut off."""
    content_lines = estimate_line_count(text, config.CHARS_PER_LINE)
    return overflows(content_lines, config.DESCRIPTION_CLAMP_LINES)


def privacy_block(app: App) -> PrivacyBlock:
    section = privacy_section(app)
    if section is None or not (section.items or section.legacy):
        return PrivacyBlock(
            icon="shield-slash-fill",
            title="No Details Provided",
            description="The developer has not provided details about what this app may access.",
        )
    return PrivacyBlock(
        icon="person-fill-lock",
        title="Privacy",
        description=f'"{app.name}" may request to access the following:',
        items=section.items,
        legacy=section.legacy,
    )


def bind_app_page(
    params: Mapping[str, str],
    load: FeedLoader = load_feed,
    today: Optional[date] = None,
) -> AppPage:
    """
    Build the app page for the `id` (and optional `source`) query parameters.

    Raises:
        MissingParameterError: `id` is absent; the feed is not fetched.
        FeedLoadError: The feed could not be loaded.
        AppNotFoundError: No app in the feed has that bundle identifier.
    """
    bundle_id = required_param(params, "id")
    source_url = source_url_from(params)

    feed = load(source_url)
    app = resolve(feed, bundle_id)

    tint_color = tint_color_for(app.tint_color)

    return AppPage(
        source_url=source_url,
        reveal_scope=reveal_scope(source_url, app.bundle_identifier),
        document_title=f"{app.name} - {feed.name}",
        tint_color=tint_color,
        install_url=install_url(app.download_url),
        download_url=app.download_url or "",
        navigation=NavigationBar(title=app.name, icon_url=app.icon_url, state=NavBarState()),
        header=AppHeader(
            icon_url=app.icon_url,
            name=app.name,
            developer_name=app.developer_name or "",
        ),
        preview=Preview(
            subtitle=app.subtitle or "",
            screenshot_urls=app.screenshot_urls,
            description_html=format_string(app.localized_description),
            description_overflows=needs_more_button(app.localized_description),
        ),
        version=VersionInfo(
            date=format_version_date(app.version_date, today=today),
            number=f"Version {app.version}" if app.version else "",
            description_html=format_string(app.version_description),
            description_overflows=needs_more_button(app.version_description),
            history_url=page_url(VERSION_HISTORY_PAGE, source=source_url, id=app.bundle_identifier),
        ),
        privacy=privacy_block(app),
        entitlements=build_entitlements_section(app),
        source=SourceInfo(
            name=feed.name,
            subtitle=feed.description or "Tap to get started",
            url=page_url(SOURCE_PAGE, source=source_url),
        ),
    )


def bind_version_history_page(
    params: Mapping[str, str],
    load: FeedLoader = load_feed,
    today: Optional[date] = None,
) -> VersionHistoryPage:
    """Build the list of every release of one app, newest first."""
    bundle_id = required_param(params, "id")
    source_url = source_url_from(params)

    feed = load(source_url)
    app = resolve(feed, bundle_id)

    if app.versions:
        rows = [
            VersionRow(
                version=entry.version or "",
                date=format_version_date(entry.date, today=today),
                description_html=format_string(entry.localized_description),
                description_overflows=needs_more_button(entry.localized_description),
                download_url=entry.download_url or "",
                install_url=install_url(entry.download_url),
            )
            for entry in app.versions
        ]
    else:
        # Sources without a versions list only describe the current release.
        rows = [
            VersionRow(
                version=app.version or "",
                date=format_version_date(app.version_date, today=today),
                description_html=format_string(app.version_description),
                description_overflows=needs_more_button(app.version_description),
                download_url=app.download_url or "",
                install_url=install_url(app.download_url),
            )
        ]

    return VersionHistoryPage(
        source_url=source_url,
        reveal_scope=reveal_scope(source_url, app.bundle_identifier),
        document_title=f"Version History - {app.name}",
        tint_color=tint_color_for(app.tint_color),
        app_name=app.name,
        icon_url=app.icon_url,
        app_url=page_url(APP_PAGE, source=source_url, id=app.bundle_identifier),
        versions=rows,
    )


def bind_source_page(params: Mapping[str, str], load: FeedLoader = load_feed) -> SourcePage:
    """Build the overview of a source and the apps it lists."""
    source_url = source_url_from(params)
    feed = load(source_url)

    apps = []
    for app in feed.apps:
        current = with_latest_version(app)
        apps.append(SourceAppRow(
            name=current.name,
            developer_name=current.developer_name or "",
            subtitle=current.subtitle or "",
            icon_url=current.icon_url,
            version=current.version or "",
            url=page_url(APP_PAGE, source=source_url, id=current.bundle_identifier),
        ))

    return SourcePage(
        source_url=source_url,
        name=feed.name,
        subtitle=feed.subtitle or "",
        description_html=format_string(feed.description),
        icon_url=feed.icon_url,
        website=feed.website,
        tint_color=tint_color_for(feed.tint_color),
        apps=apps,
    )
