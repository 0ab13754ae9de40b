import pytest
import streamlit as st

from ui.state import add_created_find, clear_session_state, ensure_state, select_find


class FakeSessionState(dict):
    """Dict with the attribute access Streamlit's session state allows."""

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError as e:
            raise AttributeError(key) from e

    def __setattr__(self, key, value):
        self[key] = value


@pytest.fixture
def session_state(monkeypatch):
    state = FakeSessionState()
    monkeypatch.setattr(st, "session_state", state)
    ensure_state()
    return state


def test_created_find_is_prepended(session_state, seed_finds, new_find):
    session_state.finds = list(seed_finds)
    add_created_find(new_find)
    assert session_state.finds == [new_find, *seed_finds]


def test_created_find_with_known_id_is_ignored(session_state, seed_finds):
    session_state.finds = list(seed_finds)
    add_created_find(seed_finds[2])
    assert session_state.finds == seed_finds


def test_created_find_before_first_load(session_state, new_find):
    assert session_state.finds is None
    add_created_find(new_find)
    assert session_state.finds == [new_find]


def test_clear_session_state_restores_defaults(session_state, seed_finds):
    session_state.finds = seed_finds
    session_state.map_nonce = 3
    session_state.container = object()
    select_find(seed_finds[0])

    clear_session_state()

    assert "container" not in session_state
    assert session_state.finds is None
    assert session_state.selected_find is None
    assert session_state.map_nonce == 0
