import logging
from typing import Optional
from urllib.parse import parse_qs
from supabase import AuthError, Client
from utils.errors import AuthFailureError

logger = logging.getLogger(__name__)


class AuthClient:
    """Session state for the signed-in user.

    `start()` reads the current session and subscribes to auth-state
    changes; afterwards `user_id` only changes through that subscription.
    `stop()` unsubscribes. Both are idempotent.
    """

    def __init__(self, supabase: Client, redirect_url: str):
        self.supabase = supabase
        self.redirect_url = redirect_url
        self.user_id: Optional[str] = None
        self._subscription = None

    @property
    def started(self) -> bool:
        return self._subscription is not None

    @property
    def is_signed_in(self) -> bool:
        return self.user_id is not None

    def start(self):
        if self.started:
            return
        session = self.supabase.auth.get_session()
        self._set_user(session)
        self._subscription = self.supabase.auth.on_auth_state_change(
            self._on_auth_state_change
        )

    def stop(self):
        if self._subscription is None:
            return
        self._subscription.unsubscribe()
        self._subscription = None

    def _on_auth_state_change(self, event, session):
        logger.info(f"Auth state changed: {event}")
        self._set_user(session)

    def _set_user(self, session):
        user = getattr(session, "user", None) if session else None
        self.user_id = str(user.id) if user else None

    def google_sign_in_url(self) -> str:
        try:
            res = self.supabase.auth.sign_in_with_oauth(
                {"provider": "google", "options": {"redirect_to": self.redirect_url}}
            )
        except AuthError as e:
            raise AuthFailureError(e.message) from e
        return res.url

    def send_magic_link(self, email: str):
        email = email.strip()
        if not email:
            raise AuthFailureError("Email is required.")
        try:
            self.supabase.auth.sign_in_with_otp(
                {"email": email, "options": {"email_redirect_to": self.redirect_url}}
            )
        except AuthError as e:
            logger.warning(f"Magic link request rejected: {e.message}")
            raise AuthFailureError(e.message) from e
        logger.info("Magic link sent")

    def restore_from_fragment(self, fragment: str | None) -> bool:
        """Install the session carried in an OAuth / magic-link redirect.

        Returns False when the fragment holds no tokens.
        """
        params = parse_qs((fragment or "").lstrip("#"))
        if "error_description" in params:
            raise AuthFailureError(params["error_description"][0])
        access_token = params.get("access_token", [None])[0]
        refresh_token = params.get("refresh_token", [None])[0]
        if not access_token or not refresh_token:
            return False
        try:
            res = self.supabase.auth.set_session(access_token, refresh_token)
        except AuthError as e:
            logger.warning(f"Redirect session rejected: {e.message}")
            raise AuthFailureError(e.message) from e
        self._set_user(res.session)
        return self.is_signed_in

    def sign_out(self):
        try:
            self.supabase.auth.sign_out()
        finally:
            self.user_id = None
            self.stop()
