import io
import logging
import boto3
import streamlit as st
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError
from models.models import PhotoUpload
from utils.errors import UploadFailureError
from utils.s3_utils import make_photo_key, public_object_url

logger = logging.getLogger(__name__)


@st.cache_resource(show_spinner=False)
def _get_s3_client(endpoint_url: str | None, region: str | None):
    return boto3.client(
        "s3",
        endpoint_url=endpoint_url or None,
        region_name=region or None,
        config=Config(s3={"addressing_style": "path"}),
    )


class S3Client:
    """Photo storage on the Supabase S3-compatible endpoint."""

    def __init__(
        self,
        bucket: str,
        public_base_url: str,
        endpoint_url: str | None = None,
        region: str | None = None,
        s3=None,
    ):
        self.bucket = bucket
        assert self.bucket, "S3 bucket not found."
        self.public_base_url = public_base_url
        self.s3 = s3 or _get_s3_client(endpoint_url, region)

    def upload_photo(self, user_id: str, photo: PhotoUpload) -> str:
        """Upload under a fresh user-scoped key and return the key."""
        key = make_photo_key(user_id, photo.name)
        extra = {"ContentType": photo.content_type}
        try:
            self.s3.upload_fileobj(
                Fileobj=io.BytesIO(photo.data),
                Bucket=self.bucket,
                Key=key,
                ExtraArgs=extra,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Photo upload to {self.bucket}/{key} failed: {e}")
            raise UploadFailureError(f"Photo upload failed: {e}") from e
        logger.info(f"Uploaded photo {key} ({len(photo.data)} bytes)")
        return key

    def public_url(self, key: str) -> str:
        return public_object_url(self.public_base_url, self.bucket, key)
