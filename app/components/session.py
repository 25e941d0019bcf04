"""Session helpers shared by the dashboard pages.

Data is fetched once per script run and "now" is sampled once, so every
widget on a page sees the same snapshot and the same clock.
"""

import logging

import streamlit as st

from neighbors_light.backend import InMemoryBackend, create_sample_backend, fetch_snapshot
from neighbors_light.core.config import AppConfig, configure_logging, get_app_config
from neighbors_light.core.models import Snapshot
from neighbors_light.prefs.store import PreferencesStore, get_preferences_store
from neighbors_light.views.elapsed import now_ms

logger = logging.getLogger(__name__)


def get_config() -> AppConfig:
    if "config" not in st.session_state:
        config = get_app_config()
        configure_logging(config.log_level)
        st.session_state.config = config
    return st.session_state.config


def get_backend() -> InMemoryBackend:
    """Backend for this session: the configured data file, or sample data."""
    if "backend" not in st.session_state:
        config = get_config()
        if config.data_path is not None:
            logger.info(f"Loading data snapshot from {config.data_path}")
            st.session_state.backend = InMemoryBackend.from_json_file(config.data_path)
        else:
            st.session_state.backend = create_sample_backend(now_ms())
    return st.session_state.backend


def load_snapshot() -> tuple[Snapshot, float]:
    """Fetch all entity lists and the render time for this run."""
    return fetch_snapshot(get_backend()), now_ms()


def get_preferences() -> PreferencesStore:
    if "preferences_store" not in st.session_state:
        st.session_state.preferences_store = get_preferences_store(get_config().preferences_path)
    return st.session_state.preferences_store
