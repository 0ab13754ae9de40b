import os
from dataclasses import dataclass

from utils.constants import EnvConstants
from utils.load_secrets import load_env_vars


def _env(name: EnvConstants, default: str = "") -> str:
    return os.getenv(name.value, default).strip()


@dataclass(frozen=True)
class Settings:
    supabase_url: str
    supabase_anon_key: str
    s3_bucket: str
    s3_endpoint_url: str
    aws_region: str
    photo_public_base_url: str
    app_url: str
    feed_limit: int
    location_timeout_ms: int

    def __init__(self):
        load_env_vars()
        supabase_url = _env(EnvConstants.SUPABASE_URL).rstrip("/")
        object.__setattr__(self, "supabase_url", supabase_url)
        object.__setattr__(
            self, "supabase_anon_key", _env(EnvConstants.SUPABASE_ANON_KEY)
        )
        object.__setattr__(
            self, "s3_bucket", _env(EnvConstants.S3_BUCKET_NAME, "rock-photos")
        )
        object.__setattr__(
            self,
            "s3_endpoint_url",
            _env(EnvConstants.S3_ENDPOINT_URL, f"{supabase_url}/storage/v1/s3"),
        )
        object.__setattr__(self, "aws_region", _env(EnvConstants.AWS_REGION, "us-east-1"))
        object.__setattr__(
            self,
            "photo_public_base_url",
            _env(
                EnvConstants.PHOTO_PUBLIC_BASE_URL,
                f"{supabase_url}/storage/v1/object/public",
            ),
        )
        object.__setattr__(
            self, "app_url", _env(EnvConstants.APP_URL, "http://localhost:8501")
        )
        object.__setattr__(
            self, "feed_limit", int(_env(EnvConstants.FEED_LIMIT, "100"))
        )
        object.__setattr__(
            self,
            "location_timeout_ms",
            int(_env(EnvConstants.LOCATION_TIMEOUT_MS, "10000")),
        )


SETTINGS = Settings()
