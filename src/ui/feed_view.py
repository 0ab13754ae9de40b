import streamlit as st
from clients.finds_client import FindsClient
from clients.s3_client import S3Client
from ui.find_card import render_find_card
from ui.net_action import net_action
from ui.Page import Page
from utils.constants import Label


class FeedView(Page):
    """Recent finds, newest first."""

    def __init__(self, finds_client: FindsClient, s3_client: S3Client):
        self.finds_client = finds_client
        self.s3_client = s3_client

    def load_finds(self):
        """Query finds once per session, or again after a refresh."""
        if st.session_state.finds is not None:
            return
        with net_action("Loading finds..."):
            st.session_state.finds = self.finds_client.fetch_recent()

    def _refresh(self):
        st.session_state.finds = None
        st.session_state.selected_find = None

    def render(self):
        title_col, refresh_col = st.columns([3, 1])
        with title_col:
            st.subheader(Label.FEED_TITLE.value)
        with refresh_col:
            st.button(
                Label.REFRESH_BUTTON.value,
                icon=":material/refresh:",
                on_click=self._refresh,
                use_container_width=True,
            )

        finds = st.session_state.finds or []
        if not finds:
            st.info(Label.FEED_EMPTY.value)
            return
        with st.container(height=640, border=False):
            for find in finds:
                render_find_card(find, self.s3_client)
