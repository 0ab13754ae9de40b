import logging
import streamlit as st
from di.container import Container
from ui.auth import authenticate
from ui.state import clear_session_state, ensure_state
from utils.constants import Label
from utils.logging import setup_logging
from utils.styling import load_custom_css

logger = logging.getLogger(__name__)


def _sign_out(container: Container):
    try:
        container.auth_client().sign_out()
    except Exception as e:
        logger.warning(f"Sign-out call failed, clearing local session anyway: {e}")
    clear_session_state()


def main():
    setup_logging()
    st.set_page_config(
        page_title=Label.SIGN_IN_TITLE.value,
        page_icon=":material/landscape:",
        layout="wide",
    )
    ensure_state()
    load_custom_css()
    if "container" not in st.session_state:
        st.session_state.container = Container()
    container: Container = st.session_state.container

    if not authenticate(container.auth_client()):
        return

    title_col, sign_out_col = st.columns([5, 1])
    with title_col:
        st.title(Label.APP_TITLE.value)
    with sign_out_col:
        st.button(
            Label.SIGN_OUT_BUTTON.value,
            on_click=_sign_out,
            args=(container,),
            use_container_width=True,
        )

    feed_view = container.feed_view()
    try:
        feed_view.load_finds()
    except Exception as e:
        logger.exception("Loading finds failed")
        st.error(str(e))

    map_col, feed_col = st.columns(2)
    with map_col:
        container.map_view().safe_render()
    with feed_col:
        feed_view.safe_render()


if __name__ == "__main__":
    main()
