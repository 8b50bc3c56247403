"""AltSource Viewer: Streamlit pages for browsing AltStore-style app sources."""

__version__ = "0.1.0"
