from enum import Enum

STATE_KEYS = [
    "container",
    "finds",
    "selected_find",
    "capture_form_nonce",
    "map_nonce",
    "magic_link_sent",
    "auth_error",
]


class Label(Enum):
    APP_TITLE = "Rock - Fun"
    SIGN_IN_TITLE = "Rock Fun"
    SIGN_IN_SUBTITLE = "Find and share rocks on Michigan beaches."
    GOOGLE_BUTTON = "Continue with Google"
    EMAIL = "or email link"
    EMAIL_PLACEHOLDER = "you@email.com"
    MAGIC_LINK_BUTTON = "Send magic link"
    MAGIC_LINK_SENT = "Check your email for the sign-in link."
    SIGN_OUT_BUTTON = "Sign out"
    ADD_FIND_BUTTON = "+ Add a find"
    NEW_FIND_TITLE = "New Find"
    NEW_FIND_CAPTION = "Live photo + rock type + optional note."
    PHOTO_UPLOAD = "Photo (camera)"
    ROCK_TYPE = "Rock type"
    NOTE = "Note (optional)"
    NOTE_PLACEHOLDER = "Short note…"
    SAVE_BUTTON = "Save"
    CANCEL_BUTTON = "Cancel"
    CLOSE_BUTTON = "Close"
    REFRESH_BUTTON = "Refresh"
    SAVED = "Saved!"
    FEED_TITLE = "Recent Finds"
    FEED_EMPTY = "No finds yet."
    LOCATION_DENIED = "Need location permission to drop a pin."
    MANDATORY_FIELD_MARKER = "*"


class Keys(Enum):
    EMAIL = "sign_in_email"
    PHOTO_UPLOAD = "capture_photo"
    ROCK_TYPE = "capture_rock_type"
    NOTE = "capture_note"
    LOCATION_FIX = "capture_location_fix"
    AUTH_FRAGMENT = "auth_fragment"
    AUTH_FRAGMENT_CLEAR = "auth_fragment_clear"
    MAP = "finds_map"


class EnvConstants(Enum):
    SUPABASE_URL = "SUPABASE_URL"
    SUPABASE_ANON_KEY = "SUPABASE_ANON_KEY"
    S3_BUCKET_NAME = "S3_BUCKET_NAME"
    S3_ENDPOINT_URL = "S3_ENDPOINT_URL"
    AWS_REGION = "AWS_REGION"
    PHOTO_PUBLIC_BASE_URL = "PHOTO_PUBLIC_BASE_URL"
    APP_URL = "APP_URL"
    FEED_LIMIT = "FEED_LIMIT"
    LOCATION_TIMEOUT_MS = "LOCATION_TIMEOUT_MS"


class TableConstants(Enum):
    FINDS = "finds"
    CREATED_AT = "created_at"


class MapConstants(Enum):
    CENTER = (44.8, -85.5)
    ZOOM = 7
    HEIGHT = 520
    PIN_RADIUS = 9
    PIN_STROKE_COLOR = "white"
    PIN_STROKE_WEIGHT = 2
    CLICK_TOLERANCE_DEG = 1e-6
