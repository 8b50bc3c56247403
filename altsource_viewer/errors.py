"""Errors that stop a page from rendering."""


class ViewerError(Exception):
    """Base class for conditions that abort a page before anything is drawn."""


class MissingParameterError(ViewerError):
    """A required query parameter is absent from the page URL."""

    def __init__(self, param: str):
        super().__init__(f"Missing required query parameter: {param}")
        self.param = param


class FeedLoadError(ViewerError):
    """The source feed could not be fetched, parsed or validated."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Could not load source {url}: {reason}")
        self.url = url
        self.reason = reason


class AppNotFoundError(ViewerError):
    """No app in the feed has the requested bundle identifier."""

    def __init__(self, bundle_identifier: str):
        super().__init__(f"App not found: {bundle_identifier}")
        self.bundle_identifier = bundle_identifier
