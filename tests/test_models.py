from altsource_viewer.models import App, AppPermissions, Feed


def test_feed_parses_aliases(feed):
    app = feed.apps[0]

    assert feed.name == "Example Source"
    assert app.bundle_identifier == "com.example.app"
    assert app.developer_name == "Example Developer"
    assert app.screenshot_urls == ["https://example.com/shot1.png", "https://example.com/shot2.png"]
    assert app.latest_version.version == "2.0"


def test_missing_optional_fields_default_to_empty():
    app = App.model_validate({"bundleIdentifier": "com.example.bare", "name": "Bare"})

    assert app.screenshot_urls == []
    assert app.localized_description is None
    assert app.permissions is None
    assert app.app_permissions is None
    assert app.latest_version is None


def test_unknown_keys_are_ignored():
    feed = Feed.model_validate({"name": "Source", "news": [{"title": "Hi"}], "apps": []})

    assert feed.apps == []


def test_numeric_versions_and_sizes_are_coerced():
    app = App.model_validate({
        "version": 2.1,
        "size": "1048576",
        "versions": [{"version": 3, "size": 12.0}, {"version": "1", "size": "n/a"}],
    })

    assert app.version == "2.1"
    assert app.size == 1048576
    assert app.versions[0].version == "3"
    assert app.versions[0].size == 12
    assert app.versions[1].size is None


def test_screenshots_key_fills_screenshot_urls():
    app = App.model_validate({
        "screenshots": [
            "https://example.com/a.png",
            {"imageURL": "https://example.com/b.png", "width": 1290},
            {"width": 10},
        ],
    })

    assert app.screenshot_urls == ["https://example.com/a.png", "https://example.com/b.png"]


def test_device_keyed_screenshots():
    app = App.model_validate({"screenshots": {"iphone": ["https://example.com/a.png"]}})

    assert app.screenshot_urls == ["https://example.com/a.png"]


def test_privacy_mapping_is_normalized():
    permissions = AppPermissions.model_validate({
        "privacy": {"NSCameraUsageDescription": "Scan codes.", "NSMicrophoneUsageDescription": 5},
        "entitlements": ["get-task-allow", "com.apple.developer.healthkit"],
    })

    assert [p.name for p in permissions.privacy] == [
        "NSCameraUsageDescription",
        "NSMicrophoneUsageDescription",
    ]
    assert permissions.privacy[0].usage_description == "Scan codes."
    assert permissions.privacy[1].usage_description is None
    assert [e.name for e in permissions.entitlements] == ["get-task-allow", "com.apple.developer.healthkit"]


def test_empty_privacy_is_kept_distinct_from_absent():
    assert AppPermissions.model_validate({"privacy": []}).privacy == []
    assert AppPermissions.model_validate({}).privacy is None


def test_malformed_permission_entries_do_not_fail_the_app():
    app = App.model_validate({
        "permissions": [{"type": 7}, "camera", {"usageDescription": ["x"]}],
        "appPermissions": {"privacy": [{"usageDescription": "No name"}, 42, None]},
    })

    assert [p.type for p in app.permissions] == ["7", ""]
    assert app.permissions[1].usage_description is None
    assert [p.name for p in app.app_permissions.privacy] == ["", "42"]


def test_null_fields_read_as_empty():
    app = App.model_validate({
        "bundleIdentifier": "com.example.nulls",
        "name": None,
        "screenshotURLs": None,
        "versions": [None, {"version": "1.0"}],
        "permissions": [{"type": None}],
    })

    assert app.name == ""
    assert app.screenshot_urls == []
    assert [entry.version for entry in app.versions] == ["1.0"]
    assert app.permissions[0].type == ""


def test_null_screenshots_fall_back_to_screenshots_key():
    app = App.model_validate({"screenshotURLs": None, "screenshots": ["https://example.com/a.png", None]})

    assert app.screenshot_urls == ["https://example.com/a.png"]


def test_null_in_one_app_keeps_the_feed(feed_data):
    feed_data["apps"][0]["screenshotURLs"] = None
    feed_data["apps"][1]["name"] = None
    feed_data["name"] = None

    feed = Feed.model_validate(feed_data)

    assert feed.name == ""
    assert feed.apps[0].screenshot_urls == []
    assert feed.apps[1].name == ""


def test_unreadable_app_is_skipped(feed_data):
    feed_data["apps"].insert(0, {"bundleIdentifier": "com.example.broken", "appPermissions": "oops"})
    feed_data["apps"].append(42)

    feed = Feed.model_validate(feed_data)

    assert [app.bundle_identifier for app in feed.apps] == ["com.example.app", "com.example.legacy"]


def test_null_apps_is_an_empty_feed():
    assert Feed.model_validate({"name": "Source", "apps": None}).apps == []
