import uuid
import mimetypes
from pathlib import Path
from slugify import slugify

DEFAULT_PHOTO_EXTENSION = "jpg"


def photo_extension(filename: str) -> str:
    ext = slugify(Path(filename or "").suffix.lstrip("."), separator="")
    return ext or DEFAULT_PHOTO_EXTENSION


def make_user_prefix(user_id: str) -> str:
    if not user_id or not user_id.strip():
        raise ValueError("User id cannot be empty.")
    return f"{user_id.strip()}/"


def make_photo_key(user_id: str, filename: str) -> str:
    """Build a fresh object key for a photo, namespaced by the owning user."""
    return f"{make_user_prefix(user_id)}{uuid.uuid4()}.{photo_extension(filename)}"


def detect_content_type(filename: str, fallback: str = "image/jpeg") -> str:
    ctype, _ = mimetypes.guess_type(filename)
    return ctype or fallback


def public_object_url(base_url: str, bucket: str, key: str) -> str:
    return f"{base_url.rstrip('/')}/{bucket}/{key.lstrip('/')}"
