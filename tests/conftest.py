import copy

import pytest

from altsource_viewer.models import Feed

SOURCE_URL = "https://example.com/source.json"

SAMPLE_FEED = {
    "name": "Example Source",
    "subtitle": "Apps for testing",
    "iconURL": "https://example.com/source.png",
    "apps": [
        {
            "name": "Example App",
            "bundleIdentifier": "com.example.app",
            "developerName": "Example Developer",
            "subtitle": "Does example things.",
            "localizedDescription": "A short description.",
            "iconURL": "https://example.com/icon.png",
            "tintColor": "##AABBCC",
            "screenshotURLs": [
                "https://example.com/shot1.png",
                "https://example.com/shot2.png",
            ],
            "version": "0.1",
            "versionDate": "2020-01-01",
            "versionDescription": "Old notes.",
            "downloadURL": "https://example.com/old.ipa",
            "size": 100,
            "versions": [
                {
                    "version": "2.0",
                    "date": "2024-03-04T10:00:00Z",
                    "localizedDescription": "**New** features.",
                    "downloadURL": "https://example.com/app-2.0.ipa",
                    "size": 2048,
                },
                {
                    "version": "1.0",
                    "date": "2024-05-01",
                    "localizedDescription": "First release.",
                    "downloadURL": "https://example.com/app-1.0.ipa",
                    "size": 1024,
                },
            ],
            "appPermissions": {
                "privacy": [
                    {"name": "Camera", "usageDescription": "Scan QR codes."},
                    {"name": "backgroundLocation", "usageDescription": "Track runs."},
                ],
                "entitlements": [
                    {"name": "com.apple.security.application-groups"},
                    {"name": "com.example.custom-thing"},
                ],
            },
        },
        {
            "name": "Legacy App",
            "bundleIdentifier": "com.example.legacy",
            "developerName": "Old Developer",
            "version": "1.2",
            "versionDate": "2021-06-01",
            "downloadURL": "https://example.com/legacy.ipa",
            "permissions": [
                {"type": "photos", "usageDescription": "Save images."},
                {"type": "background-audio", "usageDescription": "Keep playing."},
            ],
        },
    ],
}


@pytest.fixture
def feed_data():
    return copy.deepcopy(SAMPLE_FEED)


@pytest.fixture
def feed(feed_data):
    return Feed.model_validate(feed_data)
