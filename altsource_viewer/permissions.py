"""Project raw permission entries onto display names, icons and descriptions."""

from typing import Callable, Optional

from pydantic import BaseModel

from .constants import ENTITLEMENTS, FALLBACK_ICON, LEGACY_PERMISSIONS, PRIVACY
from .formatting import insert_space_in_camel_string, insert_space_in_snake_string
from .models import App


class PermissionDescriptor(BaseModel):
    """How an identifier is shown: resolved from a lookup table or formatted."""

    name: str
    icon: str
    description: Optional[str] = None


class PermissionItem(BaseModel):
    """One row of a privacy or entitlements list."""

    name: str
    icon: str
    description: Optional[str] = None


class PrivacySection(BaseModel):
    """Privacy rows from exactly one of the two permission shapes."""

    items: list[PermissionItem]
    legacy: bool = False  # True when built from the flat `permissions` list


class EntitlementsSection(BaseModel):
    items: list[PermissionItem]


def describe(
    identifier: str,
    table: dict[str, dict],
    fallback_formatter: Callable[[str], str],
) -> PermissionDescriptor:
    """
    Look up an identifier, falling back to a formatted name and the generic icon.

    Args:
        identifier: Raw permission or entitlement identifier from the feed.
        table: Lookup table of {name?, icon?, description?} entries.
        fallback_formatter: Builds a display name when the table has none.
    """
    entry = table.get(identifier) or {}
    return PermissionDescriptor(
        name=entry.get("name") or fallback_formatter(identifier) or "Unknown",
        icon=entry.get("icon") or FALLBACK_ICON,
        description=entry.get("description"),
    )


def privacy_key(name: str) -> str:
    """Reduce an Info.plist key such as NSCameraUsageDescription to 'Camera'."""
    key = name
    if key.startswith("NS") and key[2:3].isupper():
        key = key[2:]
    if key.endswith("UsageDescription") and key != "UsageDescription":
        key = key[: -len("UsageDescription")]
    return key


def entitlement_name(identifier: str) -> str:
    """Fallback entitlement name from the last component of a reverse-DNS identifier."""
    return insert_space_in_snake_string(identifier.rsplit(".", 1)[-1])


def legacy_name(permission_type: str) -> str:
    return insert_space_in_snake_string(permission_type)


def privacy_items(app: App) -> list[PermissionItem]:
    privacy = app.app_permissions.privacy if app.app_permissions else None
    items = []
    for permission in privacy or []:
        descriptor = describe(privacy_key(permission.name), PRIVACY, insert_space_in_camel_string)
        items.append(PermissionItem(
            name=descriptor.name,
            icon=descriptor.icon,
            description=permission.usage_description,
        ))
    return items


def legacy_items(app: App) -> list[PermissionItem]:
    items = []
    for permission in app.permissions or []:
        # Legacy rows keep the formatted type as their name; the table only supplies icons.
        descriptor = describe(permission.type, LEGACY_PERMISSIONS, legacy_name)
        items.append(PermissionItem(
            name=legacy_name(permission.type) or descriptor.name,
            icon=descriptor.icon,
            description=permission.usage_description,
        ))
    return items


def privacy_section(app: App) -> Optional[PrivacySection]:
    """
    Privacy rows for an app, or None when it declares no privacy information.

    A declared `appPermissions.privacy` list wins even when empty; the legacy
    `permissions` list is only used when it is absent.
    """
    if app.app_permissions and app.app_permissions.privacy is not None:
        return PrivacySection(items=privacy_items(app))
    if app.permissions is not None:
        return PrivacySection(items=legacy_items(app), legacy=True)
    return None


def entitlements_section(app: App) -> Optional[EntitlementsSection]:
    """One row per entitlement, or None when there are none to show."""
    entitlements = app.app_permissions.entitlements if app.app_permissions else None
    if not entitlements:
        return None

    items = []
    for entitlement in entitlements:
        descriptor = describe(entitlement.name, ENTITLEMENTS, entitlement_name)
        items.append(PermissionItem(
            name=descriptor.name,
            icon=descriptor.icon,
            description=descriptor.description,
        ))
    return EntitlementsSection(items=items)
