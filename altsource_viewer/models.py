"""Pydantic models for AltStore-style source feeds."""

import logging
from typing import Annotated, Any, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

logger = logging.getLogger(__name__)


def coerce_size(value: Any) -> Optional[int]:
    """Byte sizes arrive as ints, floats or numeric strings; anything else is dropped."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def empty_if_null(value: Any) -> Any:
    """An explicit null in a required-text field reads as an empty string."""
    return "" if value is None else value


def string_list(value: Any) -> list[str]:
    """Null or non-list values become an empty list; non-string entries are dropped."""
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, str)]


Size = Annotated[Optional[int], BeforeValidator(coerce_size)]
Text = Annotated[str, BeforeValidator(empty_if_null)]
StringList = Annotated[list[str], BeforeValidator(string_list)]


class FeedModel(BaseModel):
    """Base for feed records: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True, frozen=True)


class VersionEntry(FeedModel):
    """One release of an app, newest first in App.versions."""

    version: Optional[str] = None
    date: Optional[str] = None
    localized_description: Optional[str] = Field(None, alias="localizedDescription")
    download_url: Optional[str] = Field(None, alias="downloadURL")
    size: Size = None


class PrivacyPermission(FeedModel):
    """A sensitive-data access category with the developer's justification."""

    name: Text = ""
    usage_description: Optional[str] = Field(None, alias="usageDescription")


class Entitlement(FeedModel):
    """A named OS capability grant."""

    name: Text = ""


class LegacyPermission(FeedModel):
    """Entry of the flat, pre-appPermissions `permissions` list."""

    type: Text = ""
    usage_description: Optional[str] = Field(None, alias="usageDescription")


def _as_named_entries(value: Any) -> Optional[list[dict]]:
    """Normalize the shapes sources use for permission lists.

    Sources write these lists as ``[{"name", "usageDescription"}]``, as a
    mapping of plist key to usage string, or as bare strings. All of them
    become ``[{"name": ..., "usageDescription": ...}]``. Entries that cannot be
    read keep whatever name they have so one bad entry never fails the feed.
    """
    if value is None:
        return None
    if isinstance(value, dict):
        return [
            {"name": str(key), "usageDescription": _text(text)}
            for key, text in value.items()
        ]
    if not isinstance(value, list):
        return []

    items = []
    for entry in value:
        if isinstance(entry, dict):
            name = entry.get("name")
            items.append({
                "name": "" if name is None else str(name),
                "usageDescription": _text(entry.get("usageDescription")),
            })
        elif isinstance(entry, str):
            items.append({"name": entry})
        elif entry is not None:
            items.append({"name": str(entry)})
    return items


class AppPermissions(FeedModel):
    """Structured permissions: privacy usage strings and entitlements.

    ``None`` means the source did not declare the list at all, which is
    different from an empty list.
    """

    privacy: Optional[list[PrivacyPermission]] = None
    entitlements: Optional[list[Entitlement]] = None

    @field_validator("privacy", "entitlements", mode="before")
    @classmethod
    def normalize_entries(cls, value):
        return _as_named_entries(value)


class App(FeedModel):
    """One catalog entry describing an installable application."""

    bundle_identifier: Text = Field("", alias="bundleIdentifier")
    name: Text = ""
    developer_name: Optional[str] = Field(None, alias="developerName")
    icon_url: Optional[str] = Field(None, alias="iconURL")
    tint_color: Optional[str] = Field(None, alias="tintColor")
    subtitle: Optional[str] = None
    localized_description: Optional[str] = Field(None, alias="localizedDescription")
    screenshot_urls: StringList = Field(default_factory=list, alias="screenshotURLs")
    download_url: Optional[str] = Field(None, alias="downloadURL")
    size: Size = None
    version: Optional[str] = None
    version_date: Optional[str] = Field(None, alias="versionDate")
    version_description: Optional[str] = Field(None, alias="versionDescription")
    permissions: Optional[list[LegacyPermission]] = None
    app_permissions: Optional[AppPermissions] = Field(None, alias="appPermissions")
    versions: Optional[list[VersionEntry]] = None

    @model_validator(mode="before")
    @classmethod
    def collect_screenshots(cls, data):
        # Newer sources use `screenshots` with either URL strings or {imageURL} objects.
        if not isinstance(data, dict) or data.get("screenshotURLs") is not None:
            return data
        screenshots = data.get("screenshots")
        if isinstance(screenshots, dict):
            # Device-keyed form: {"iphone": [...], "ipad": [...]}
            screenshots = next(iter(screenshots.values()), [])
        if not isinstance(screenshots, list):
            return data

        urls = []
        for shot in screenshots:
            if isinstance(shot, str):
                urls.append(shot)
            elif isinstance(shot, dict) and isinstance(shot.get("imageURL"), str):
                urls.append(shot["imageURL"])
        return {**data, "screenshotURLs": urls}

    @field_validator("permissions", mode="before")
    @classmethod
    def normalize_legacy_permissions(cls, value):
        if value is None:
            return None
        if not isinstance(value, list):
            return []
        return [
            {"type": str(entry.get("type") or ""), "usageDescription": _text(entry.get("usageDescription"))}
            for entry in value
            if isinstance(entry, dict)
        ]

    @field_validator("versions", mode="before")
    @classmethod
    def drop_unreadable_versions(cls, value):
        if value is None:
            return None
        if not isinstance(value, list):
            return []
        return [entry for entry in value if isinstance(entry, dict)]

    @property
    def latest_version(self) -> Optional[VersionEntry]:
        """Head of the versions list; sources list newest first."""
        return self.versions[0] if self.versions else None


class Feed(FeedModel):
    """A source: the remote JSON catalog listing one or more apps."""

    name: Text = ""
    subtitle: Optional[str] = None
    description: Optional[str] = None
    icon_url: Optional[str] = Field(None, alias="iconURL")
    tint_color: Optional[str] = Field(None, alias="tintColor")
    website: Optional[str] = None
    apps: list[App] = Field(default_factory=list)

    @field_validator("apps", mode="before")
    @classmethod
    def validate_each_app(cls, value):
        # An unreadable entry is skipped so it cannot take the other apps down with it.
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        apps = []
        for index, entry in enumerate(value):
            try:
                apps.append(App.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"Skipping unreadable app at index {index}: {e}")
        return apps
