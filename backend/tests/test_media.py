"""Presigned upload URLs (boto3 client mocked)."""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError
from httpx import AsyncClient

from storesite.core.exceptions import ExternalServiceError
from storesite.services import storage

PRESIGNED = "http://minio:9000/storefront/brown_feed_store/uploads/x?X-Amz-Signature=abc"


@pytest.fixture
def s3(monkeypatch) -> MagicMock:
    client = MagicMock()
    client.generate_presigned_url.return_value = PRESIGNED
    monkeypatch.setattr(storage.settings, "S3_BUCKET", "storefront")
    monkeypatch.setattr(storage.settings, "S3_PUBLIC_ENDPOINT", "http://localhost:9000")
    monkeypatch.setattr(storage, "_get_s3_client", lambda: client)
    return client


def test_upload_key_is_prefixed_and_sanitized():
    key = storage.build_upload_key("brown_feed_store", "store front.jpg")
    assert key.startswith("brown_feed_store/uploads/")
    assert key.endswith("-store_front.jpg")
    assert "/" not in key.removeprefix("brown_feed_store/uploads/")


def test_upload_key_cannot_escape_prefix():
    key = storage.build_upload_key("acme", "../../etc/passwd")
    assert key.startswith("acme/uploads/")
    assert "/" not in key.removeprefix("acme/uploads/")


def test_presign_rewrites_to_public_endpoint(s3: MagicMock):
    url = storage.presign_put("acme/uploads/a.png", "image/png")

    assert url.startswith("http://localhost:9000/storefront/")
    s3.generate_presigned_url.assert_called_once()
    params = s3.generate_presigned_url.call_args.kwargs["Params"]
    assert params == {"Bucket": "storefront", "Key": "acme/uploads/a.png", "ContentType": "image/png"}


def test_presign_without_bucket_fails(monkeypatch):
    monkeypatch.setattr(storage.settings, "S3_BUCKET", "")
    with pytest.raises(ExternalServiceError):
        storage.presign_put("acme/uploads/a.png", "image/png")


def test_presign_client_error_is_external(s3: MagicMock):
    s3.generate_presigned_url.side_effect = ClientError(
        {"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject"
    )
    with pytest.raises(ExternalServiceError) as exc_info:
        storage.presign_put("acme/uploads/a.png", "image/png")
    assert exc_info.value.service == "s3"


@pytest.mark.asyncio
async def test_upload_url_endpoint(client: AsyncClient, s3: MagicMock):
    resp = await client.post(
        "/api/v1/uploads/upload-url",
        json={"file_name": "logo.png", "content_type": "image/png", "size_bytes": 2048},
    )

    assert resp.status_code == 201
    data = resp.json()
    assert data["key"].startswith("brown_feed_store/uploads/")
    assert data["public_url"] == f"http://localhost:9000/storefront/{data['key']}"
    assert data["expires_in"] == storage.PRESIGN_UPLOAD_EXPIRES


@pytest.mark.asyncio
async def test_upload_url_rejects_non_image(client: AsyncClient, s3: MagicMock):
    resp = await client.post(
        "/api/v1/uploads/upload-url",
        json={"file_name": "notes.pdf", "content_type": "application/pdf", "size_bytes": 2048},
    )

    assert resp.status_code == 400
    assert "content_type must be one of" in resp.json()["detail"]
    s3.generate_presigned_url.assert_not_called()


@pytest.mark.asyncio
async def test_upload_url_rejects_oversized_file(client: AsyncClient, s3: MagicMock):
    resp = await client.post(
        "/api/v1/uploads/upload-url",
        json={
            "file_name": "hero.jpg",
            "content_type": "image/jpeg",
            "size_bytes": storage.MAX_UPLOAD_SIZE + 1,
        },
    )

    assert resp.status_code == 422
