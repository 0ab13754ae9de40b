import logging
import time
import streamlit as st
from contextlib import contextmanager

logger = logging.getLogger(__name__)


@contextmanager
def net_action(text: str):
    started = time.perf_counter()
    with st.spinner(text, show_time=True):
        yield
    logger.info(f"{text.rstrip('.')} took {time.perf_counter() - started:.2f}s")
