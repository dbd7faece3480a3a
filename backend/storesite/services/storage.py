"""S3 / MinIO presigned-URL helpers for image uploads.

All keys start with ``{schema_key}/uploads/``; the prefix is built here and
never accepted from the client.
"""

import logging
import uuid
from urllib.parse import quote, urlparse, urlunparse

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from storesite.core.config import settings
from storesite.core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

PRESIGN_UPLOAD_EXPIRES = 900  # 15 min
MAX_UPLOAD_SIZE = 5 * 1024 * 1024  # 5 MB

ALLOWED_CONTENT_TYPES = frozenset(
    {
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
    }
)


def _get_s3_client():  # type: ignore[no-untyped-def]
    config_kwargs: dict = {"signature_version": "s3v4"}
    if settings.S3_ENDPOINT_URL:
        config_kwargs["s3"] = {"addressing_style": "path"}
    kwargs: dict = {
        "service_name": "s3",
        "region_name": settings.AWS_REGION,
        "config": Config(**config_kwargs),
    }
    if settings.S3_ENDPOINT_URL:
        kwargs["endpoint_url"] = settings.S3_ENDPOINT_URL
    if settings.AWS_ACCESS_KEY_ID and settings.AWS_SECRET_ACCESS_KEY:
        kwargs["aws_access_key_id"] = settings.AWS_ACCESS_KEY_ID
        kwargs["aws_secret_access_key"] = settings.AWS_SECRET_ACCESS_KEY
    return boto3.client(**kwargs)


def _rewrite_presigned_url(url: str) -> str:
    """Swap scheme+netloc to S3_PUBLIC_ENDPOINT so browsers can reach MinIO."""
    if not settings.S3_PUBLIC_ENDPOINT:
        return url
    public = urlparse(settings.S3_PUBLIC_ENDPOINT)
    parsed = urlparse(url)
    return urlunparse(parsed._replace(scheme=public.scheme, netloc=public.netloc))


def build_upload_key(schema_key: str, file_name: str) -> str:
    """``{schema_key}/uploads/{uuid}-{safe_name}``."""
    safe_name = quote(file_name.strip().replace(" ", "_"), safe="._-")
    return f"{schema_key}/uploads/{uuid.uuid4()}-{safe_name}"


def public_url_for(key: str) -> str:
    if settings.S3_PUBLIC_ENDPOINT:
        return f"{settings.S3_PUBLIC_ENDPOINT.rstrip('/')}/{settings.S3_BUCKET}/{key}"
    return f"https://{settings.S3_BUCKET}.s3.{settings.AWS_REGION}.amazonaws.com/{key}"


def presign_put(
    key: str,
    content_type: str,
    expires: int = PRESIGN_UPLOAD_EXPIRES,
) -> str:
    """Generate a presigned PUT URL for uploading to S3."""
    if not settings.S3_BUCKET:
        raise ExternalServiceError("Uploads are not configured (S3_BUCKET is empty)", service="s3")
    try:
        client = _get_s3_client()
        url = client.generate_presigned_url(
            "put_object",
            Params={
                "Bucket": settings.S3_BUCKET,
                "Key": key,
                "ContentType": content_type,
            },
            ExpiresIn=expires,
        )
    except (BotoCoreError, ClientError) as exc:
        logger.error("Presigning %s failed: %s", key, exc)
        raise ExternalServiceError(f"Upload URL generation failed: {exc}", service="s3") from exc
    return _rewrite_presigned_url(url)
