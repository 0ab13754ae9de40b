import streamlit as st
from clients.s3_client import S3Client
from models.models import Find
from utils.format_utils import format_coords, format_created_at
from utils.rocks import label, pin_color


def render_find_card(find: Find, s3_client: S3Client, show_coords: bool = True):
    """Photo thumbnail beside rock type, time, note and (optionally) coordinates."""
    with st.container(border=True):
        photo_col, body_col = st.columns([1, 3])
        with photo_col:
            st.image(s3_client.public_url(find.photo_path), use_container_width=True)
        with body_col:
            st.markdown(
                f'<span class="rock-dot" style="background:{pin_color(find.rock_type)}">'
                f"</span> **{label(find.rock_type)}**",
                unsafe_allow_html=True,
            )
            st.caption(format_created_at(find.created_at))
            if find.note:
                st.write(find.note)
            if show_coords:
                st.caption(format_coords(find.lat, find.lng))
