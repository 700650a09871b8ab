"""Art Explorer - Streamlit application."""

import streamlit as st
from dataclasses import replace
from datetime import datetime

from art_explorer.adapters import FetchError, get_adapter
from art_explorer.cache import CACHE_KEY, CACHE_MAX_AGE, StreamlitSessionCache, load_fresh
from art_explorer.feed import ArtworkFeed, FeedState
from art_explorer.filters import decode, encode, get_default_filters, is_default_filters, with_defaults
from art_explorer.guess import score_guess
from art_explorer.mappings import (
    get_all_artwork_types,
    get_all_cultures_or_styles,
    parse_artwork_type,
    parse_culture_or_style,
)
from art_explorer.models import Artwork, Filters, YearRange
from art_explorer.normalize import format_year

# Configuration
SOURCE = "AIC"
MIN_YEAR = -3000
MAX_YEAR = datetime.now().year
GRID_COLUMNS = 4
MAX_LOG_ENTRIES = 200
ANY_LABEL = "Any"

st.set_page_config(page_title="Art Explorer", layout="wide")


# =============================================================================
# Session State Initialization
# =============================================================================

def init_session_state():
    """Initialize all session state variables."""
    defaults = {
        "mode": "Explore",
        "debug_logs": [],
        "ssl_bypass": False,
        # Guessr
        "guess_artwork": None,
        "guess_error": None,
        "guess_result": None,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


init_session_state()


# =============================================================================
# Logging
# =============================================================================

def _append_log(level: str, message: str):
    """Append a log entry to session state."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    entry = f"{timestamp} | {level:<5} | {message}"
    st.session_state.debug_logs.append(entry)
    st.session_state.debug_logs = st.session_state.debug_logs[-MAX_LOG_ENTRIES:]


def log_event(message: str):
    _append_log("INFO", message)


def log_error(message: str):
    _append_log("ERROR", message)


def adapter_log_callback(level: str, message: str):
    """Callback for adapters to log through our system."""
    _append_log(level, message)


def make_adapter():
    adapter = get_adapter(SOURCE, ssl_bypass=st.session_state.ssl_bypass)
    adapter.set_logger(adapter_log_callback)
    return adapter


# =============================================================================
# Feed State
# =============================================================================

def current_filters() -> Filters:
    """Filters from the URL, with default paging."""
    return with_defaults(decode(st.query_params.to_dict()))


def set_filters(filters: Filters):
    """Replace the filters in the URL; the feed reloads on the next run."""
    st.query_params.from_dict(encode(filters))
    log_event(f"Filters changed: {encode(filters) or 'defaults'}")


def get_feed() -> ArtworkFeed:
    """Return the cached feed for the current filters, or a fresh one."""
    cache = StreamlitSessionCache()
    filters = current_filters()
    adapter = make_adapter()

    # The feed always starts at page 1, so the URL page does not identify it
    snapshot = load_fresh(cache, CACHE_KEY, CACHE_MAX_AGE)
    if snapshot and snapshot.get("filters") == encode(replace(filters, page=None)):
        return ArtworkFeed.from_snapshot(adapter, snapshot)

    log_event("Loading first page")
    feed = ArtworkFeed(adapter, filters)
    feed.load_first()
    save_feed(feed)
    return feed


def save_feed(feed: ArtworkFeed):
    StreamlitSessionCache().put(CACHE_KEY, feed.to_snapshot())


# =============================================================================
# UI Components
# =============================================================================

def render_sidebar():
    """Render the sidebar with mode, filters and debug console."""
    with st.sidebar:
        st.radio("Mode", ["Explore", "Guessr"], key="mode", horizontal=True)

        if st.session_state.mode == "Explore":
            render_filters()

        st.checkbox("Bypass SSL verification", key="ssl_bypass", help="Use if you encounter SSL errors")

        with st.expander("Debug Console", expanded=False):
            if st.button("Clear Logs"):
                st.session_state.debug_logs = []
            log_text = "\n".join(st.session_state.debug_logs) if st.session_state.debug_logs else "No logs yet."
            st.code(log_text, language=None)


def _clamp_year(year: int) -> int:
    return min(max(year, MIN_YEAR), MAX_YEAR)


def render_filters():
    """Filter widgets; any change resets paging to page 1."""
    filters = current_filters()
    st.subheader("Filters")

    type_options = [ANY_LABEL] + [t.value for t in get_all_artwork_types()]
    current_type = filters.artwork_type.value if filters.artwork_type else ANY_LABEL
    type_label = st.selectbox("Artwork type", type_options, index=type_options.index(current_type))

    style_options = [ANY_LABEL] + [c.value for c in get_all_cultures_or_styles()]
    current_style = filters.culture_or_style.value if filters.culture_or_style else ANY_LABEL
    style_label = st.selectbox("Culture or style", style_options, index=style_options.index(current_style))

    year_range = filters.year_range or YearRange(MIN_YEAR, MAX_YEAR)
    start, end = st.slider(
        "Year range",
        min_value=MIN_YEAR,
        max_value=MAX_YEAR,
        value=tuple(sorted(_clamp_year(y) for y in (year_range.start, year_range.end))),
        step=10,
    )
    st.caption(f"{format_year(start)} - {format_year(end)}")

    new_filters = Filters(
        artwork_type=parse_artwork_type(type_label),
        culture_or_style=parse_culture_or_style(style_label),
        # Full slider range means no year filter
        year_range=None if (start, end) == (MIN_YEAR, MAX_YEAR) else YearRange(start, end),
        page=get_default_filters().page,
        limit=filters.limit,
    )
    if encode(new_filters) != encode(filters):
        set_filters(new_filters)
        st.rerun()

    if not is_default_filters(filters) and st.button("Clear all"):
        set_filters(get_default_filters())
        st.rerun()


def render_artwork_card(artwork: Artwork):
    st.image(artwork.image_url, width="stretch")
    st.markdown(f"**{artwork.title}**")
    details = [artwork.artist, artwork.date_display, artwork.movement]
    st.caption(" · ".join(d for d in details if d) or "Unknown")


def render_explore():
    feed = get_feed()

    # First page failed: full error state
    if feed.is_initial_error:
        st.error(feed.error)
        if st.button("Try Again"):
            log_event("Retry requested")
            feed.retry()
            save_feed(feed)
            st.rerun()
        return

    if not feed.artworks and feed.state is FeedState.EXHAUSTED:
        st.warning("No artworks found matching your filters. Try adjusting the filters.")
        return

    cols = st.columns(GRID_COLUMNS)
    for index, artwork in enumerate(feed.artworks):
        with cols[index % GRID_COLUMNS]:
            render_artwork_card(artwork)

    # Later page failed: keep what we have, offer inline retry
    if feed.state is FeedState.ERRORED:
        st.error(feed.error)
        if st.button("Retry"):
            log_event("Retry requested")
            feed.retry()
            save_feed(feed)
            st.rerun()
    elif feed.state is FeedState.EXHAUSTED:
        st.caption("You've reached the end of the collection.")
    elif st.button("Load more", type="primary"):
        log_event(f"Loading page {feed.page + 1}")
        feed.load_more()
        save_feed(feed)
        st.rerun()


def load_guess_artwork():
    """Pick a new random artwork and reset the round."""
    st.session_state.guess_result = None
    st.session_state.guess_error = None
    try:
        artwork = make_adapter().fetch_random_artwork()
        st.session_state.guess_artwork = artwork.to_dict()
        log_event(f"Guessr artwork: {artwork.id}")
    except FetchError as e:
        st.session_state.guess_error = str(e)
        log_error(f"Failed to load artwork: {e}")


def render_guessr():
    if st.session_state.guess_artwork is None and st.session_state.guess_error is None:
        with st.spinner("Loading artwork..."):
            load_guess_artwork()

    if st.session_state.guess_error:
        st.error(st.session_state.guess_error)
        if st.button("Try Again"):
            load_guess_artwork()
            st.rerun()
        return

    artwork = Artwork.from_dict(st.session_state.guess_artwork)
    col_image, col_form = st.columns([3, 2], gap="large")

    with col_image:
        st.image(artwork.image_url, width="stretch")

    with col_form:
        result = st.session_state.guess_result
        with st.form("guess"):
            artist_guess = st.text_input("Artist")
            year_guess = st.text_input("Year")
            submitted = st.form_submit_button("Submit", disabled=result is not None)

        if submitted and artist_guess.strip() and year_guess.strip():
            result = score_guess(artwork, artist_guess, year_guess)
            st.session_state.guess_result = result

        if result is not None:
            artist_line = f"Artist: {artwork.artist or 'Unknown'}"
            year_line = f"Year: {artwork.date_display or result.correct_year}"
            if result.artist_correct:
                st.success(artist_line)
            else:
                st.error(artist_line)
            if result.year_correct:
                st.success(year_line)
            else:
                st.error(year_line)
            st.caption(f"{artwork.title} · {artwork.medium or ''}")

        if st.button("Next artwork"):
            load_guess_artwork()
            st.rerun()


# =============================================================================
# Main Application
# =============================================================================

def main():
    """Main application entry point."""
    render_sidebar()

    st.markdown("### Art Explorer")
    st.caption("[Art Institute of Chicago API](https://api.artic.edu/docs/)")

    if st.session_state.mode == "Explore":
        render_explore()
    else:
        render_guessr()


if __name__ == "__main__":
    main()
