"""HTML fragments and Streamlit helpers shared by the pages."""

import html
from typing import Optional

import streamlit as st

from .config import config
from .formatting import format_string
from .navigation import NavBarState, css_classes
from .permissions import PermissionItem

_STYLES = """
<style>
:root {{ --app-tint-color: {tint}; }}
.hidden {{ display: none !important; }}
#nav-bar {{ position: sticky; top: 0; z-index: 10; display: flex; align-items: center; gap: .5rem; }}
#nav-bar #title img {{ width: 28px; height: 28px; border-radius: 7px; }}
.app-header {{ position: relative; display: flex; gap: 1rem; align-items: center; padding: 1rem; border-radius: 1rem; }}
.app-header .background {{ position: absolute; inset: 0; opacity: .15; border-radius: 1rem; }}
.app-header img {{ width: 96px; height: 96px; border-radius: 22px; position: relative; }}
.app-header .text {{ position: relative; }}
.app-header .title {{ font-size: 1.5rem; font-weight: 700; margin: 0; }}
.app-header .subtitle {{ color: gray; margin: 0; }}
.uibutton {{ color: white !important; padding: .25rem 1rem; border-radius: 1rem; text-decoration: none; font-weight: 600; }}
#screenshots {{ display: flex; gap: .75rem; overflow-x: auto; }}
#screenshots .screenshot {{ height: 420px; border-radius: 1rem; }}
.clamped {{ display: -webkit-box; -webkit-box-orient: vertical; overflow: hidden;
            -webkit-line-clamp: {clamp}; line-clamp: {clamp}; }}
.permission-item {{ display: flex; gap: .75rem; align-items: flex-start; margin: .5rem 0; }}
.permission-icon {{ color: var(--app-tint-color); font-size: 1.4rem; }}
.permission-name {{ font-weight: 600; margin: 0; }}
.permission-description {{ color: gray; margin: 0; }}
a.tinted {{ color: var(--app-tint-color); }}
</style>
"""


def inject_styles(tint_color: str) -> None:
    """Load the icon font and page styles, tinted with the app's colour."""
    st.markdown(
        f'<link rel="stylesheet" href="{html.escape(config.BOOTSTRAP_ICONS_CSS)}">',
        unsafe_allow_html=True,
    )
    st.markdown(
        _STYLES.format(tint=html.escape(tint_color), clamp=config.DESCRIPTION_CLAMP_LINES),
        unsafe_allow_html=True,
    )


def permission_item(name: str, icon: str, description: Optional[str] = None) -> str:
    """HTML for one permission row: icon, name and optional description."""
    parts = [
        '<div class="permission-item">',
        f'<i class="permission-icon bi-{html.escape(icon)}"></i>',
        '<div class="permission-text">',
        f'<p class="permission-name">{html.escape(name)}</p>',
    ]
    if description:
        parts.append(f'<p class="permission-description">{format_string(description)}</p>')
    parts.append("</div></div>")
    return "".join(parts)


def show_permission_items(items: list[PermissionItem]) -> None:
    """Write a permission-items list."""
    fragment = "".join(permission_item(item.name, item.icon, item.description) for item in items)
    st.markdown(f'<div class="permission-items">{fragment}</div>', unsafe_allow_html=True)


def navigation_bar(
    title: str,
    icon_url: Optional[str],
    install_url: str,
    tint_color: str,
    state: NavBarState,
    back_url: str,
) -> str:
    """HTML for the navigation bar with its condensed title and install button."""
    hidden = css_classes(state)
    icon = f'<img src="{html.escape(icon_url)}" alt="">' if icon_url else ""
    return (
        '<div id="nav-bar">'
        f'<a id="back" href="{html.escape(back_url)}" target="_self" style="color: {html.escape(tint_color)};">'
        '<i class="bi-chevron-left"></i></a>'
        f'<div id="title" class="{hidden}">{icon}<p>{html.escape(title)}</p></div>'
        f'<a class="install uibutton {hidden}" href="{html.escape(install_url)}" '
        f'style="background-color: {html.escape(tint_color)};">GET</a>'
        "</div>"
    )


def _reveal(state_key: str) -> None:
    st.session_state[state_key] = True


def show_truncated_html(key: str, body_html: str, overflowing: bool, scope: str) -> None:
    """
    Write a text block clamped to a few lines with a 'more' button.

    The button only appears when the text was measured as overflowing when the
    page was bound. Once clicked the full text stays revealed for the rest of
    the session, but only for the same `scope` (the app being shown), so
    another app's text starts clamped again.
    """
    state_key = f"reveal_{scope}_{key}"
    revealed = st.session_state.get(state_key, False)
    clamped = overflowing and not revealed
    css_class = "clamped" if clamped else ""
    st.markdown(f'<div id="{html.escape(key)}" class="{css_class}">{body_html}</div>', unsafe_allow_html=True)
    if clamped:
        st.button("more", key=f"more_{key}", on_click=_reveal, args=(state_key,), type="tertiary")
