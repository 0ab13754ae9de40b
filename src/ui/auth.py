import streamlit as st
from streamlit_js_eval import streamlit_js_eval
from clients.auth_client import AuthClient
from utils.constants import Keys, Label
from utils.errors import AuthFailureError


def _restore_session_from_redirect(auth_client: AuthClient):
    """Pick up tokens left in the URL fragment by an OAuth / magic-link redirect."""
    fragment = streamlit_js_eval(
        js_expressions="window.location.hash", key=Keys.AUTH_FRAGMENT.value
    )
    if not fragment or ("access_token" not in fragment and "error" not in fragment):
        return
    try:
        if auth_client.restore_from_fragment(fragment):
            streamlit_js_eval(
                js_expressions="history.replaceState(null, '', window.location.pathname)",
                key=Keys.AUTH_FRAGMENT_CLEAR.value,
            )
    except AuthFailureError as e:
        st.session_state.auth_error = str(e)


def _send_magic_link(auth_client: AuthClient):
    st.session_state.auth_error = None
    try:
        auth_client.send_magic_link(st.session_state.get(Keys.EMAIL.value, ""))
        st.session_state.magic_link_sent = True
    except AuthFailureError as e:
        st.session_state.auth_error = str(e)


def _render_sign_in(auth_client: AuthClient):
    _, center, _ = st.columns([1, 2, 1])
    with center, st.container(border=True):
        st.header(Label.SIGN_IN_TITLE.value)
        st.caption(Label.SIGN_IN_SUBTITLE.value)

        try:
            st.link_button(
                Label.GOOGLE_BUTTON.value,
                auth_client.google_sign_in_url(),
                type="primary",
                use_container_width=True,
            )
        except AuthFailureError as e:
            st.error(str(e))

        st.caption(Label.EMAIL.value)
        email = st.text_input(
            Label.EMAIL.value,
            placeholder=Label.EMAIL_PLACEHOLDER.value,
            key=Keys.EMAIL.value,
            label_visibility="collapsed",
        )
        st.button(
            Label.MAGIC_LINK_BUTTON.value,
            disabled=not email,
            on_click=_send_magic_link,
            args=(auth_client,),
            use_container_width=True,
        )

        if st.session_state.auth_error:
            st.error(st.session_state.auth_error)
        elif st.session_state.magic_link_sent:
            st.success(Label.MAGIC_LINK_SENT.value)


def authenticate(auth_client: AuthClient) -> bool:
    """Render the sign-in screen unless a session exists."""
    auth_client.start()
    if not auth_client.is_signed_in:
        _restore_session_from_redirect(auth_client)
    if auth_client.is_signed_in:
        st.session_state.auth_error = None
        return True

    _render_sign_in(auth_client)
    return False
