import streamlit as st
from typing import List
from models.models import Find
from utils.constants import STATE_KEYS


def ensure_state():
    """Ensure default session state values exist."""
    defaults = {
        "finds": None,
        "selected_find": None,
        "capture_form_nonce": 0,
        "map_nonce": 0,
        "magic_link_sent": False,
        "auth_error": None,
    }
    for key, value in defaults.items():
        st.session_state.setdefault(key, value)


def select_find(find: Find | None):
    st.session_state.selected_find = find


def add_created_find(find: Find):
    """Show a freshly saved find right away, ahead of the next refresh."""
    finds: List[Find] = st.session_state.finds or []
    if any(f.id == find.id for f in finds):
        return
    st.session_state.finds = [find, *finds]


def clear_session_state():
    """Drop everything tied to the signed-in user, including the container."""
    for key in STATE_KEYS:
        st.session_state.pop(key, None)
    ensure_state()
