"""S3-compatible object storage (MinIO): implements the ObjectStorage interface.

Objects are addressed path-style so that a plain ``http://host:9000``
endpoint works without wildcard DNS:

    <public_base_url>/<bucket>/<key>
"""

import asyncio
import logging
from contextlib import AsyncExitStack
from typing import Any

import aioboto3
from aiobotocore.config import AioConfig
from botocore.exceptions import BotoCoreError, ClientError

from blockboard.application.interfaces.object_storage import ObjectStorage
from blockboard.domain.exceptions import StorageError

logger = logging.getLogger(__name__)

_MISSING_BUCKET_CODES = frozenset({"404", "NoSuchBucket", "NotFound"})
_MISSING_KEY_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


def _error_code(exc: ClientError) -> str | None:
    return exc.response.get("Error", {}).get("Code")


class S3ObjectStorage(ObjectStorage):
    """Infrastructure adapter for one bucket on an S3-compatible endpoint.

    A single aioboto3 client is opened on first use and shared by every
    request until ``close()``.
    """

    def __init__(
        self,
        *,
        endpoint_url: str,
        bucket: str,
        access_key: str,
        secret_key: str,
        region: str = "us-east-1",
        public_base_url: str | None = None,
        session: aioboto3.Session | None = None,
    ):
        self._endpoint_url = endpoint_url
        self._bucket = bucket
        self._access_key = access_key
        self._secret_key = secret_key
        self._region = region
        self._public_base_url = (public_base_url or endpoint_url).rstrip("/")
        self._session = session or aioboto3.Session()
        self._client: Any = None
        self._exit_stack: AsyncExitStack | None = None
        self._lock = asyncio.Lock()

    @property
    def bucket(self) -> str:
        return self._bucket

    async def _get_client(self) -> Any:
        if self._client is not None:
            return self._client
        async with self._lock:
            if self._client is None:
                stack = AsyncExitStack()
                self._client = await stack.enter_async_context(
                    self._session.client(
                        "s3",
                        endpoint_url=self._endpoint_url,
                        aws_access_key_id=self._access_key,
                        aws_secret_access_key=self._secret_key,
                        region_name=self._region,
                        config=AioConfig(s3={"addressing_style": "path"}),
                    )
                )
                self._exit_stack = stack
        return self._client

    def public_url(self, key: str) -> str:
        return f"{self._public_base_url}/{self._bucket}/{key}"

    async def ensure_bucket(self) -> None:
        client = await self._get_client()
        try:
            await client.head_bucket(Bucket=self._bucket)
            logger.debug("Bucket '%s' already exists", self._bucket)
            return
        except ClientError as exc:
            if _error_code(exc) not in _MISSING_BUCKET_CODES:
                raise StorageError(f"check bucket {self._bucket}") from exc
        except BotoCoreError as exc:
            raise StorageError(f"check bucket {self._bucket}") from exc

        params: dict[str, Any] = {"Bucket": self._bucket}
        if self._region != "us-east-1":
            params["CreateBucketConfiguration"] = {"LocationConstraint": self._region}
        try:
            await client.create_bucket(**params)
        except (ClientError, BotoCoreError) as exc:
            raise StorageError(f"create bucket {self._bucket}") from exc
        logger.info("Created bucket '%s'", self._bucket)

    async def put(self, key: str, content: bytes, content_type: str | None = None) -> str:
        params: dict[str, Any] = {"Bucket": self._bucket, "Key": key, "Body": content}
        if content_type:
            params["ContentType"] = content_type

        client = await self._get_client()
        try:
            await client.put_object(**params)
        except (ClientError, BotoCoreError) as exc:
            raise StorageError(f"upload object {key}") from exc
        logger.debug("Stored s3://%s/%s (%d bytes)", self._bucket, key, len(content))
        return self.public_url(key)

    async def exists(self, key: str) -> bool:
        client = await self._get_client()
        try:
            await client.head_object(Bucket=self._bucket, Key=key)
        except ClientError as exc:
            if _error_code(exc) in _MISSING_KEY_CODES:
                return False
            raise StorageError(f"check object {key}") from exc
        except BotoCoreError as exc:
            raise StorageError(f"check object {key}") from exc
        return True

    async def delete(self, key: str) -> None:
        """Delete ``key``. S3 reports success for keys that do not exist."""
        client = await self._get_client()
        try:
            await client.delete_object(Bucket=self._bucket, Key=key)
        except (ClientError, BotoCoreError) as exc:
            raise StorageError(f"delete object {key}") from exc
        logger.debug("Deleted s3://%s/%s", self._bucket, key)

    async def close(self) -> None:
        if self._exit_stack is not None:
            await self._exit_stack.aclose()
        self._exit_stack = None
        self._client = None
