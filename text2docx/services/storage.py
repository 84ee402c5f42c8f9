# text2docx/services/storage.py
"""Blob stores the generated documents are uploaded to.

Each store exposes ``async put(name, data, content_type) -> url``. Failures
are raised, never retried; the route turns them into a 500.
"""
import io
import logging
from pathlib import Path
from typing import Optional

import httpx
from minio import Minio
from starlette.concurrency import run_in_threadpool

from text2docx.config import Settings

logger = logging.getLogger(__name__)

class StorageError(RuntimeError):
    pass

class BlobStore:
    async def put(self, name: str, data: bytes, content_type: str) -> str:
        raise NotImplementedError

class VercelBlobStore(BlobStore):
    """Vercel Blob over its REST API (what the @vercel/blob `put` helper calls)."""

    def __init__(self, token: Optional[str], api_url: str, api_version: str = "7",
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.api_version = api_version
        self._transport = transport

    async def put(self, name: str, data: bytes, content_type: str) -> str:
        if not self.token:
            raise StorageError("BLOB_READ_WRITE_TOKEN is not set")
        headers = {
            "authorization": f"Bearer {self.token}",
            "x-api-version": self.api_version,
            "x-content-type": content_type,
            "x-add-random-suffix": "1",
        }
        async with httpx.AsyncClient(transport=self._transport) as client:
            resp = await client.put(f"{self.api_url}/", params={"pathname": name},
                                    content=data, headers=headers)
        if resp.status_code >= 400:
            raise StorageError(f"blob upload failed ({resp.status_code}): {resp.text}")
        url = resp.json().get("url")
        if not url:
            raise StorageError("blob upload returned no url")
        logger.info("Uploaded %s (%d bytes) to Vercel Blob", name, len(data))
        return url

class MinioBlobStore(BlobStore):
    """S3-compatible storage through the minio client; bucket is created on first upload."""

    def __init__(self, client: Minio, bucket: str, public_base_url: str):
        self.client = client
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/")

    def _put_sync(self, name: str, data: bytes, content_type: str):
        if not self.client.bucket_exists(self.bucket):
            self.client.make_bucket(self.bucket)
            logger.info("Created bucket: %s", self.bucket)
        self.client.put_object(self.bucket, name, io.BytesIO(data),
                               length=len(data), content_type=content_type)

    async def put(self, name: str, data: bytes, content_type: str) -> str:
        await run_in_threadpool(self._put_sync, name, data, content_type)
        logger.info("Uploaded %s (%d bytes) to bucket %s", name, len(data), self.bucket)
        return f"{self.public_base_url}/{self.bucket}/{name}"

class LocalBlobStore(BlobStore):
    """Writes into a directory the app serves under /files (development use)."""

    def __init__(self, root: str, public_base_url: str):
        self.root = Path(root)
        self.public_base_url = public_base_url.rstrip("/")

    def _write(self, name: str, data: bytes) -> Path:
        self.root.mkdir(parents=True, exist_ok=True)
        dest = self.root / Path(name).name
        dest.write_bytes(data)
        return dest

    async def put(self, name: str, data: bytes, content_type: str) -> str:
        dest = await run_in_threadpool(self._write, name, data)
        logger.info("Wrote %s (%d bytes)", dest, len(data))
        return f"{self.public_base_url}/files/{dest.name}"

def make_store(settings: Settings) -> BlobStore:
    if settings.blob_backend == "vercel":
        return VercelBlobStore(settings.blob_read_write_token, settings.blob_api_url,
                               settings.blob_api_version)
    if settings.blob_backend == "minio":
        client = Minio(
            settings.minio_endpoint,
            access_key=settings.minio_access_key,
            secret_key=settings.minio_secret_key,
            secure=settings.minio_secure,
        )
        return MinioBlobStore(client, settings.minio_bucket, settings.minio_base_url)
    return LocalBlobStore(settings.local_output_dir, settings.public_base_url)
