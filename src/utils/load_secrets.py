import os
import streamlit as st
from streamlit.errors import StreamlitAPIException


def load_env_vars():
    """Copy Streamlit secrets into the environment without overriding it."""
    try:
        secrets = dict(st.secrets.items())
    except (FileNotFoundError, StreamlitAPIException):
        # no secrets.toml; plain environment variables only
        return
    for k, v in secrets.items():
        if isinstance(v, (str, int, float)):
            os.environ.setdefault(k, str(v))
