"""App page: metadata for one app from an AltStore source."""

import html
import logging

import streamlit as st

from altsource_viewer.binder import SOURCE_PAGE, bind_app_page, page_url
from altsource_viewer.components import (
    inject_styles,
    navigation_bar,
    show_permission_items,
    show_truncated_html,
)
from altsource_viewer.config import config
from altsource_viewer.errors import ViewerError

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

params = st.query_params
missing = config.validate()
error = None

# Bind once per page view; "more" buttons rerun the script and reuse the result.
page_key = (params.get("source"), params.get("id"))
if not missing and st.session_state.get("app_page_key") != page_key:
    try:
        st.session_state.app_page = bind_app_page(params)
        st.session_state.app_page_key = page_key
    except ViewerError as e:
        error = e

page = st.session_state.get("app_page") if not (missing or error) else None

st.set_page_config(
    page_title=page.document_title if page else "AltSource Viewer",
    page_icon="📦",
    layout="centered",
)

# Check configuration
if missing:
    st.error(f"⚠️ Missing configuration: {', '.join(missing)}")
    st.stop()

if error:
    st.error(f"⚠️ {error}")
    st.stop()

tint = html.escape(page.tint_color)
inject_styles(page.tint_color)

# Navigation bar
st.markdown(
    navigation_bar(
        page.navigation.title,
        page.navigation.icon_url,
        page.install_url,
        page.tint_color,
        page.navigation.state,
        back_url=page_url(SOURCE_PAGE, source=page.source_url),
    ),
    unsafe_allow_html=True,
)

# App header
icon = f'<img src="{html.escape(page.header.icon_url)}" alt="">' if page.header.icon_url else ""
st.markdown(
    '<div class="app-header">'
    f'<div class="background" style="background-color: {tint};"></div>'
    f"{icon}"
    '<div class="text">'
    f'<p class="title">{html.escape(page.header.name)}</p>'
    f'<p class="subtitle">{html.escape(page.header.developer_name)}</p>'
    "</div></div>",
    unsafe_allow_html=True,
)

col1, col2 = st.columns(2)
with col1:
    st.link_button("GET", page.install_url, type="primary", use_container_width=True)
with col2:
    if page.download_url:
        st.link_button("⬇️ Download", page.download_url, use_container_width=True)

# Preview
st.markdown("---")
if page.preview.subtitle:
    st.markdown(f'<p id="subtitle"><b>{html.escape(page.preview.subtitle)}</b></p>', unsafe_allow_html=True)

if page.preview.screenshot_urls:
    screenshots = "".join(
        f'<img src="{html.escape(url)}" alt="" class="screenshot">'
        for url in page.preview.screenshot_urls
    )
    st.markdown(f'<div id="screenshots">{screenshots}</div>', unsafe_allow_html=True)

show_truncated_html(
    "description", page.preview.description_html, page.preview.description_overflows, scope=page.reveal_scope
)

# Version info
st.markdown("---")
st.subheader("What's New")
st.markdown(
    f'<a class="tinted" id="version-history" href="{html.escape(page.version.history_url)}" '
    'target="_self">Version History</a>',
    unsafe_allow_html=True,
)
col1, col2 = st.columns(2)
with col1:
    st.caption(page.version.number)
with col2:
    st.caption(page.version.date)
show_truncated_html(
    "version-description",
    page.version.description_html,
    page.version.description_overflows,
    scope=page.reveal_scope,
)

# Privacy
st.markdown("---")
st.subheader("App Permissions")
st.markdown(
    f'<div id="privacy"><i class="permission-icon bi-{html.escape(page.privacy.icon)}"></i> '
    f"<b>{html.escape(page.privacy.title)}</b>"
    f'<p class="description">{html.escape(page.privacy.description)}</p></div>',
    unsafe_allow_html=True,
)
if page.privacy.items:
    show_permission_items(page.privacy.items)

# Entitlements (removed entirely when the app declares none)
if page.entitlements is not None:
    st.markdown(
        '<div id="entitlements"><i class="permission-icon bi-key-fill"></i> <b>Entitlements</b></div>',
        unsafe_allow_html=True,
    )
    show_permission_items(page.entitlements.items)

# Source info
st.markdown("---")
st.markdown(
    '<div id="source">'
    f'<a class="container" href="{html.escape(page.source.url)}" target="_self">'
    f'<p class="row-title"><b>{html.escape(page.source.name)}</b></p>'
    f'<p class="row-subtitle">{html.escape(page.source.subtitle)}</p>'
    "</a></div>",
    unsafe_allow_html=True,
)
