# salon_api/media.py

import logging
import os
import uuid
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .config import Settings
from .errors import UploadFailed

logger = logging.getLogger(__name__)

KEY_PREFIX = "products"


def get_storage_client(settings: Settings):
    """Create an S3 client (works against R2, MinIO, or AWS itself)."""
    return boto3.client(
        "s3",
        endpoint_url=settings.storage_endpoint_url,
        aws_access_key_id=settings.storage_access_key_id,
        aws_secret_access_key=settings.storage_secret_access_key,
        region_name=settings.storage_region,
        config=Config(signature_version="s3v4"),
    )


class MediaStore:
    """Stores uploaded image bytes in a bucket and hands back a public URL."""

    def __init__(self, client, bucket: str, public_base_url: str):
        self.client = client
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "MediaStore":
        return cls(get_storage_client(settings), settings.storage_bucket, settings.public_base_url)

    def make_key(self, filename: Optional[str]) -> str:
        ext = os.path.splitext(filename or "")[1].lower()
        return f"{KEY_PREFIX}/{uuid.uuid4().hex}{ext}"

    def upload(
        self,
        data: bytes,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> str:
        key = self.make_key(filename)
        params = {"Bucket": self.bucket, "Key": key, "Body": data}
        if content_type:
            params["ContentType"] = content_type

        try:
            self.client.put_object(**params)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Upload of {key} to bucket {self.bucket} failed: {e}")
            raise UploadFailed(str(e))

        url = f"{self.public_base_url}/{key}"
        logger.info(f"Stored {len(data)} bytes at {url}")
        return url
