import streamlit as st
from streamlit_folium import st_folium
from streamlit_js_eval import streamlit_js_eval
from clients.auth_client import AuthClient
from clients.s3_client import S3Client
from mapping.map_widget import FoliumMapWidget
from mapping.marker_synchronizer import MarkerSynchronizer
from models.models import PhotoUpload
from ui.find_card import render_find_card
from ui.net_action import net_action
from ui.Page import Page
from ui.state import add_created_find, select_find
from utils.constants import Keys, Label, MapConstants
from utils.format_utils import format_coords
from utils.geo_utils import location_request_js
from utils.rocks import ROCK_TYPES, label
from workflows.find_capture_workflow import CaptureState, FindCaptureWorkflow


class MapView(Page):
    """Shared map of finds plus the add-a-find flow."""

    def __init__(
        self,
        map_widget: FoliumMapWidget,
        marker_synchronizer: MarkerSynchronizer,
        capture_workflow: FindCaptureWorkflow,
        auth_client: AuthClient,
        s3_client: S3Client,
        location_timeout_ms: int,
    ):
        self.map_widget = map_widget
        self.marker_synchronizer = marker_synchronizer
        self.capture_workflow = capture_workflow
        self.auth_client = auth_client
        self.s3_client = s3_client
        self.location_timeout_ms = location_timeout_ms

    def _widget_key(self, key: Keys) -> str:
        return f"{key.value}_{st.session_state.capture_form_nonce}"

    def _next_form(self):
        st.session_state.capture_form_nonce += 1

    def _request_location(self):
        self._next_form()
        self.capture_workflow.request_location()

    def _cancel(self):
        self.capture_workflow.cancel()
        self._next_form()

    def _save(self):
        user_id = self.auth_client.user_id
        if user_id is None:
            return
        try:
            # the created find is applied before the spinner exits, since a
            # queued rerun can interrupt the script there
            with net_action("Saving find..."):
                self.capture_workflow.run({"user_id": user_id}, on_created=add_created_find)
                self._next_form()
                st.toast(Label.SAVED.value)
        except Exception:
            # the workflow keeps the form and shows the failure as its notice
            return

    def _close_selected(self):
        select_find(None)
        self.map_widget.reset_click()
        # a new map key drops the stale click st_folium would report again
        st.session_state.map_nonce += 1

    def _render_map(self):
        self.marker_synchronizer.reconcile(st.session_state.finds or [])
        out = st_folium(
            self.map_widget.build_map(),
            feature_group_to_add=self.map_widget.build_layer(),
            key=f"{Keys.MAP.value}_{st.session_state.map_nonce}",
            height=MapConstants.HEIGHT.value,
            use_container_width=True,
            returned_objects=["last_object_clicked"],
        )
        self.map_widget.dispatch_click((out or {}).get("last_object_clicked"))

    def _render_selected(self):
        find = st.session_state.selected_find
        if find is None:
            return
        render_find_card(find, self.s3_client, show_coords=False)
        st.button(Label.CLOSE_BUTTON.value, on_click=self._close_selected)

    def _render_awaiting_location(self):
        result = streamlit_js_eval(
            js_expressions=location_request_js(self.location_timeout_ms),
            key=self._widget_key(Keys.LOCATION_FIX),
        )
        if result is None:
            st.info("Getting your location...")
            st.button(Label.CANCEL_BUTTON.value, on_click=self._cancel)
            return
        self.capture_workflow.resolve_location(result)
        st.rerun()

    def _render_form(self):
        wf = self.capture_workflow
        with st.container(border=True):
            st.subheader(Label.NEW_FIND_TITLE.value)
            st.caption(Label.NEW_FIND_CAPTION.value)
            if wf.location is not None:
                st.caption(f":material/location_on: {format_coords(wf.location.lat, wf.location.lng)}")

            photo = st.file_uploader(
                Label.PHOTO_UPLOAD.value + Label.MANDATORY_FIELD_MARKER.value,
                type=["jpg", "jpeg", "png", "webp", "heic"],
                key=self._widget_key(Keys.PHOTO_UPLOAD),
            )
            rock_type = st.selectbox(
                Label.ROCK_TYPE.value,
                ROCK_TYPES,
                index=ROCK_TYPES.index(wf.rock_type),
                format_func=label,
                key=self._widget_key(Keys.ROCK_TYPE),
            )
            note = st.text_area(
                Label.NOTE.value,
                value=wf.note,
                placeholder=Label.NOTE_PLACEHOLDER.value,
                height=80,
                key=self._widget_key(Keys.NOTE),
            )
            wf.update_form(
                photo=PhotoUpload.from_uploaded_file(photo) if photo else None,
                rock_type=rock_type,
                note=note,
                clear_photo=photo is None,
            )

            if wf.notice:
                st.error(wf.notice)

            # saving runs to completion inside the Save callback, so the form is
            # never rendered mid-save; can_submit turns away a second submit
            cancel_col, save_col = st.columns(2)
            with cancel_col:
                st.button(
                    Label.CANCEL_BUTTON.value,
                    on_click=self._cancel,
                    use_container_width=True,
                )
            with save_col:
                st.button(
                    Label.SAVE_BUTTON.value,
                    on_click=self._save,
                    disabled=not wf.can_submit,
                    type="primary",
                    use_container_width=True,
                )

    def _render_capture(self):
        wf = self.capture_workflow
        if wf.state == CaptureState.IDLE:
            if wf.notice:
                st.warning(wf.notice)
            st.button(
                Label.ADD_FIND_BUTTON.value,
                on_click=self._request_location,
                type="primary",
                use_container_width=True,
            )
        elif wf.state == CaptureState.AWAITING_LOCATION:
            self._render_awaiting_location()
        else:
            self._render_form()

    def render(self):
        self._render_map()
        self._render_selected()
        self._render_capture()
