"""Display names and icons for privacy permissions and entitlements.

Icons are Bootstrap Icons names (https://icons.getbootstrap.com). Entries
without a ``name`` get one formatted from the raw identifier.
"""

FALLBACK_ICON = "gear-wide-connected"

# Keyed by the short permission name; NS...UsageDescription keys are reduced
# to this form before lookup.
PRIVACY = {
    "AppleMusic": {"name": "Apple Music", "icon": "music-note-beamed"},
    "Bluetooth": {"icon": "bluetooth"},
    "BluetoothAlways": {"name": "Bluetooth", "icon": "bluetooth"},
    "BluetoothPeripheral": {"name": "Bluetooth", "icon": "bluetooth"},
    "Calendars": {"icon": "calendar-date"},
    "CalendarsFullAccess": {"name": "Calendars", "icon": "calendar-date"},
    "CalendarsWriteOnlyAccess": {"name": "Calendars", "icon": "calendar-plus"},
    "Camera": {"icon": "camera-fill"},
    "Contacts": {"icon": "person-circle"},
    "FaceID": {"name": "Face ID", "icon": "person-bounding-box"},
    "FocusStatus": {"name": "Focus Status", "icon": "moon-fill"},
    "HealthClinicalHealthRecordsShare": {"name": "Health Records", "icon": "heart-pulse-fill"},
    "HealthShare": {"name": "Health", "icon": "heart-fill"},
    "HealthUpdate": {"name": "Health", "icon": "heart-fill"},
    "HomeKit": {"name": "HomeKit", "icon": "house-fill"},
    "LocalNetwork": {"name": "Local Network", "icon": "hdd-network-fill"},
    "Location": {"icon": "geo-alt-fill"},
    "LocationAlways": {"name": "Location", "icon": "geo-alt-fill"},
    "LocationAlwaysAndWhenInUse": {"name": "Location", "icon": "geo-alt-fill"},
    "LocationWhenInUse": {"name": "Location", "icon": "geo-alt-fill"},
    "Microphone": {"icon": "mic-fill"},
    "Motion": {"name": "Motion & Fitness", "icon": "person-walking"},
    "NearbyInteraction": {"name": "Nearby Interaction", "icon": "broadcast"},
    "PhotoLibrary": {"name": "Photos", "icon": "image"},
    "PhotoLibraryAdd": {"name": "Add to Photos", "icon": "images"},
    "Reminders": {"icon": "list-check"},
    "Siri": {"icon": "soundwave"},
    "SpeechRecognition": {"name": "Speech Recognition", "icon": "chat-square-quote-fill"},
    "UserTracking": {"name": "Tracking", "icon": "person-badge"},
}

# Keyed by the full entitlement identifier.
ENTITLEMENTS = {
    "application-identifier": {
        "name": "App Identifier",
        "icon": "fingerprint",
        "description": "Identifies the app to the system.",
    },
    "aps-environment": {
        "name": "Push Notifications",
        "icon": "bell-fill",
        "description": "Receive push notifications.",
    },
    "com.apple.developer.applesignin": {
        "name": "Sign in with Apple",
        "icon": "apple",
        "description": "Let people sign in with their Apple Account.",
    },
    "com.apple.developer.associated-domains": {
        "name": "Associated Domains",
        "icon": "link-45deg",
        "description": "Open links from specific websites directly in the app.",
    },
    "com.apple.developer.default-data-protection": {
        "name": "Data Protection",
        "icon": "shield-lock-fill",
        "description": "Encrypt the app's files while the device is locked.",
    },
    "com.apple.developer.game-center": {
        "name": "Game Center",
        "icon": "controller",
        "description": "Use Game Center leaderboards, achievements and multiplayer.",
    },
    "com.apple.developer.healthkit": {
        "name": "HealthKit",
        "icon": "heart-fill",
        "description": "Read and write health data.",
    },
    "com.apple.developer.homekit": {
        "name": "HomeKit",
        "icon": "house-fill",
        "description": "Control home accessories.",
    },
    "com.apple.developer.icloud-container-identifiers": {
        "name": "iCloud Containers",
        "icon": "cloud-fill",
        "description": "Store documents and data in iCloud.",
    },
    "com.apple.developer.icloud-services": {
        "name": "iCloud Services",
        "icon": "cloud-fill",
        "description": "Use iCloud Documents and CloudKit.",
    },
    "com.apple.developer.in-app-payments": {
        "name": "Apple Pay",
        "icon": "credit-card-fill",
        "description": "Accept payments with Apple Pay.",
    },
    "com.apple.developer.kernel.extended-virtual-addressing": {
        "name": "Extended Virtual Addressing",
        "icon": "memory",
        "description": "Use a larger virtual address space.",
    },
    "com.apple.developer.kernel.increased-memory-limit": {
        "name": "Increased Memory Limit",
        "icon": "memory",
        "description": "Use more memory than the default limit on supported devices.",
    },
    "com.apple.developer.networking.networkextension": {
        "name": "Network Extensions",
        "icon": "diagram-3-fill",
        "description": "Provide VPN, content filter or DNS proxy services.",
    },
    "com.apple.developer.networking.wifi-info": {
        "name": "Wi-Fi Information",
        "icon": "wifi",
        "description": "Read the name of the connected Wi-Fi network.",
    },
    "com.apple.developer.nfc.readersession.formats": {
        "name": "NFC Tag Reading",
        "icon": "broadcast-pin",
        "description": "Read NFC tags.",
    },
    "com.apple.developer.siri": {
        "name": "Siri",
        "icon": "soundwave",
        "description": "Handle requests from Siri and Shortcuts.",
    },
    "com.apple.developer.team-identifier": {
        "name": "Team Identifier",
        "icon": "people-fill",
        "description": "Identifies the developer team that signed the app.",
    },
    "com.apple.developer.ubiquity-kvstore-identifier": {
        "name": "iCloud Key-Value Storage",
        "icon": "cloud-fill",
        "description": "Sync small amounts of data through iCloud.",
    },
    "com.apple.developer.usernotifications.time-sensitive": {
        "name": "Time Sensitive Notifications",
        "icon": "alarm-fill",
        "description": "Deliver notifications that break through Focus.",
    },
    "com.apple.external-accessory.wireless-configuration": {
        "name": "Wireless Accessory Configuration",
        "icon": "router-fill",
        "description": "Configure wireless accessories.",
    },
    "com.apple.security.application-groups": {
        "name": "App Groups",
        "icon": "collection-fill",
        "description": "Share data with other apps from the same developer.",
    },
    "get-task-allow": {
        "name": "Debuggable",
        "icon": "bug-fill",
        "description": "Allow debuggers to attach to the app.",
    },
    "inter-app-audio": {
        "name": "Inter-App Audio",
        "icon": "music-note-list",
        "description": "Share audio with other apps.",
    },
    "keychain-access-groups": {
        "name": "Keychain Sharing",
        "icon": "key-fill",
        "description": "Share keychain items with other apps from the same developer.",
    },
}

# Keyed by the `type` field of the legacy flat `permissions` list. Names are
# always formatted from the type itself.
LEGACY_PERMISSIONS = {
    "background-audio": {"icon": "speaker-fill"},
    "background-fetch": {"icon": "arrow-repeat"},
    "bluetooth": {"icon": "bluetooth"},
    "calendars": {"icon": "calendar-date"},
    "camera": {"icon": "camera-fill"},
    "contacts": {"icon": "person-circle"},
    "faceID": {"icon": "person-bounding-box"},
    "location": {"icon": "geo-alt-fill"},
    "microphone": {"icon": "mic-fill"},
    "motion": {"icon": "person-walking"},
    "music": {"icon": "music-note-beamed"},
    "network": {"icon": "hdd-network-fill"},
    "photos": {"icon": "image"},
    "reminders": {"icon": "list-check"},
    "siri": {"icon": "soundwave"},
    "speech-recognition": {"icon": "chat-square-quote-fill"},
    "touchID": {"icon": "fingerprint"},
}
