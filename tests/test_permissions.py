from altsource_viewer.constants import ENTITLEMENTS, FALLBACK_ICON, LEGACY_PERMISSIONS, PRIVACY
from altsource_viewer.formatting import insert_space_in_camel_string
from altsource_viewer.models import App
from altsource_viewer.permissions import (
    describe,
    entitlement_name,
    entitlements_section,
    privacy_key,
    privacy_section,
)


def test_describe_uses_table_entry():
    descriptor = describe("PhotoLibrary", PRIVACY, insert_space_in_camel_string)

    assert descriptor.name == "Photos"
    assert descriptor.icon == "image"
    assert descriptor.description is None


def test_describe_formats_name_when_table_has_icon_only():
    descriptor = describe("Camera", PRIVACY, insert_space_in_camel_string)

    assert descriptor.name == "Camera"
    assert descriptor.icon == "camera-fill"


def test_describe_falls_back_for_unknown_identifier():
    descriptor = describe("backgroundLocation", PRIVACY, insert_space_in_camel_string)

    assert descriptor.name == "Background Location"
    assert descriptor.icon == FALLBACK_ICON


def test_describe_empty_identifier():
    descriptor = describe("", ENTITLEMENTS, entitlement_name)

    assert descriptor.name == "Unknown"
    assert descriptor.icon == FALLBACK_ICON


def test_privacy_key():
    assert privacy_key("NSCameraUsageDescription") == "Camera"
    assert privacy_key("NSPhotoLibraryAddUsageDescription") == "PhotoLibraryAdd"
    assert privacy_key("NSFaceIDUsageDescription") == "FaceID"
    assert privacy_key("Camera") == "Camera"
    assert privacy_key("NSUsageDescription") == "UsageDescription"


def test_entitlement_name_uses_last_identifier_component():
    assert entitlement_name("com.example.custom-thing") == "Custom Thing"
    assert entitlement_name("get_task_allow") == "Get Task Allow"


def test_modern_privacy_section(feed):
    section = privacy_section(feed.apps[0])

    assert not section.legacy
    assert [(item.name, item.icon, item.description) for item in section.items] == [
        ("Camera", "camera-fill", "Scan QR codes."),
        ("Background Location", FALLBACK_ICON, "Track runs."),
    ]


def test_privacy_mapping_with_plist_keys():
    app = App.model_validate({
        "appPermissions": {"privacy": {"NSPhotoLibraryUsageDescription": "Pick a photo."}},
    })

    item = privacy_section(app).items[0]
    assert (item.name, item.icon, item.description) == ("Photos", "image", "Pick a photo.")


def test_legacy_section_when_privacy_absent(feed):
    section = privacy_section(feed.apps[1])

    assert section.legacy
    assert [(item.name, item.icon, item.description) for item in section.items] == [
        ("Photos", LEGACY_PERMISSIONS["photos"]["icon"], "Save images."),
        ("Background Audio", LEGACY_PERMISSIONS["background-audio"]["icon"], "Keep playing."),
    ]


def test_declared_empty_privacy_hides_legacy_permissions():
    app = App.model_validate({
        "appPermissions": {"privacy": []},
        "permissions": [{"type": "camera", "usageDescription": "Old shape."}],
    })

    section = privacy_section(app)

    assert not section.legacy
    assert section.items == []


def test_legacy_used_when_app_permissions_has_only_entitlements():
    app = App.model_validate({
        "appPermissions": {"entitlements": ["get-task-allow"]},
        "permissions": [{"type": "unknown-thing"}],
    })

    section = privacy_section(app)

    assert section.legacy
    assert section.items[0].name == "Unknown Thing"
    assert section.items[0].icon == FALLBACK_ICON
    assert section.items[0].description is None


def test_no_privacy_information():
    assert privacy_section(App.model_validate({"name": "Quiet"})) is None


def test_entitlements_section(feed):
    section = entitlements_section(feed.apps[0])

    assert len(section.items) == 2
    groups, custom = section.items
    assert groups.name == "App Groups"
    assert groups.icon == ENTITLEMENTS["com.apple.security.application-groups"]["icon"]
    assert groups.description == ENTITLEMENTS["com.apple.security.application-groups"]["description"]
    assert (custom.name, custom.icon, custom.description) == ("Custom Thing", FALLBACK_ICON, None)


def test_entitlements_section_absent_when_empty_or_missing(feed):
    assert entitlements_section(feed.apps[1]) is None
    assert entitlements_section(App.model_validate({"appPermissions": {"entitlements": []}})) is None
    assert entitlements_section(App.model_validate({"appPermissions": {"privacy": []}})) is None


def test_malformed_entries_fall_back_to_generic_display():
    app = App.model_validate({"appPermissions": {"privacy": [{"usageDescription": "Why"}, 42]}})

    items = privacy_section(app).items

    assert [(item.name, item.icon) for item in items] == [("Unknown", FALLBACK_ICON), ("42", FALLBACK_ICON)]
    assert items[0].description == "Why"
