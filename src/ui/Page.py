import logging
import streamlit as st
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Page(ABC):
    """Abstract base class for the views that make up the app page."""

    @abstractmethod
    def render(self):
        pass

    def safe_render(self):
        """Render, surfacing any failure inline instead of breaking the page."""
        try:
            self.render()
        except Exception as e:
            logger.exception(f"{type(self).__name__} failed to render")
            st.error(str(e))
