import streamlit as st

APP_CUSTOM_CSS = """
<style>
/* Pin color swatch next to a rock type */
.rock-dot {
    display: inline-block;
    width: 12px;
    height: 12px;
    border-radius: 50%;
    border: 2px solid #fff;
    box-shadow: 0 0 0 1px #d1d5db;
    vertical-align: middle;
    margin-right: 4px;
}

/* Rounded photo thumbnails in feed and selection cards */
div[data-testid="stImage"] img {
    border-radius: 12px;
    border: 1px solid #f3f4f6;
    object-fit: cover;
    aspect-ratio: 1 / 1;
}

/* Cards */
div[data-testid="stVerticalBlockBorderWrapper"] {
    border-radius: 16px;
}
</style>
"""

BACKGROUND_CUSTOM_CSS_DARK_MODE = """
<style>
.stApp {
    background: linear-gradient(180deg, #0e1117 0%, #111827 100%);
}
</style>
"""

BACKGROUND_CUSTOM_CSS_LIGHT_MODE = """
<style>
.stApp {
    background: linear-gradient(180deg, #eff6ff 0%, #f0fdf4 100%);
}
</style>
"""


def load_custom_css():
    st.markdown(APP_CUSTOM_CSS, unsafe_allow_html=True)
    if st.context.theme.type == "dark":
        st.markdown(BACKGROUND_CUSTOM_CSS_DARK_MODE, unsafe_allow_html=True)
    else:
        st.markdown(BACKGROUND_CUSTOM_CSS_LIGHT_MODE, unsafe_allow_html=True)
