"""Navigation bar visibility as an explicit state machine.

The condensed title and install button in the navigation bar are shown once
the app name in the header has scrolled up past the bar, and hidden again when
it comes back into view. Pages render the initial state, since no scroll
position reaches the server; `transition` is the rule a scroll position
applies to it.
"""

from typing import Optional

from pydantic import BaseModel

from .config import config


class NavBarState(BaseModel):
    """Whether the condensed title and install button are currently shown."""

    model_config = {"frozen": True}

    title_visible: bool = False


class VisibilityChange(BaseModel):
    """Elements to toggle after a scroll event."""

    model_config = {"frozen": True}

    title_visible: bool
    install_enabled: bool


def transition(
    state: NavBarState,
    header_offset: float,
    threshold: Optional[float] = None,
) -> tuple[NavBarState, Optional[VisibilityChange]]:
    """
    Advance the navigation bar for a new scroll position.

    Args:
        state: Current state.
        header_offset: Distance in px from the top of the viewport to the app name.
        threshold: Offset below which the app name is hidden behind the bar.

    Returns:
        The new state and the change to apply, or None when nothing changes.
    """
    if threshold is None:
        threshold = config.NAV_TITLE_THRESHOLD

    name_hidden = header_offset < threshold
    if name_hidden == state.title_visible:
        return state, None

    new_state = NavBarState(title_visible=name_hidden)
    return new_state, VisibilityChange(title_visible=name_hidden, install_enabled=name_hidden)


def css_classes(state: NavBarState) -> str:
    """Class attribute for the navigation bar's title and install button."""
    return "" if state.title_visible else "hidden"
