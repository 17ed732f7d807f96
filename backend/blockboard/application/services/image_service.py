"""Image attachment use cases: forwards uploaded images to object storage.

Object layout:
    images/<owner_id>/<filename>

Re-uploading a file with the same name for the same owner overwrites the
previous object.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from blockboard.application.interfaces import ObjectStorage
from blockboard.domain.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class ImageUpload:
    """An image part read fully into memory."""

    filename: str
    content: bytes
    content_type: str | None = None


@dataclass
class UploadedImages:
    """Result of one upload call: ``created_keys`` did not exist beforehand."""

    urls: list[str] = field(default_factory=list)
    created_keys: list[str] = field(default_factory=list)


def image_key(owner_id: str, filename: str) -> str:
    """Object key for ``filename`` uploaded by ``owner_id``."""
    name = PurePosixPath(filename.replace("\\", "/")).name
    if not name or name in {".", ".."}:
        raise ValidationError(f"Invalid image filename: {filename!r}", field="image")
    return f"images/{owner_id}/{name}"


class ImageService:
    """Uploads and removes a user's images, preserving request order."""

    def __init__(self, storage: ObjectStorage):
        self._storage = storage

    async def upload_images(self, owner_id: str, images: Sequence[ImageUpload]) -> list[str]:
        """Upload every image in order and return their public URLs."""
        return (await self.upload_batch(owner_id, images)).urls

    async def upload_batch(self, owner_id: str, images: Sequence[ImageUpload]) -> UploadedImages:
        """Upload every image in order, remembering which keys are new.

        Stops at the first failed upload; objects created by this call are
        deleted before the StorageError propagates. Objects that were
        overwritten stay, since earlier records may still link to them.
        """
        keys = [image_key(owner_id, image.filename) for image in images]
        batch = UploadedImages()
        for key, image in zip(keys, images):
            try:
                is_new = not await self._storage.exists(key)
                url = await self._storage.put(key, image.content, image.content_type)
            except StorageError:
                logger.error("Upload of %s failed after %d image(s)", key, len(batch.urls))
                await self._delete_quietly(batch.created_keys)
                raise
            if is_new:
                batch.created_keys.append(key)
            batch.urls.append(url)
            logger.info("Uploaded image %s (%d bytes)", key, len(image.content))
        return batch

    async def delete_images(self, owner_id: str, filenames: Sequence[str]) -> list[str]:
        """Delete the named images of ``owner_id`` and return their former URLs."""
        urls: list[str] = []
        for filename in filenames:
            key = image_key(owner_id, filename)
            await self._storage.delete(key)
            urls.append(self._storage.public_url(key))
            logger.info("Deleted image %s", key)
        return urls

    async def discard(self, batch: UploadedImages) -> None:
        """Best-effort removal of the objects a failed request created."""
        await self._delete_quietly(batch.created_keys)

    async def _delete_quietly(self, keys: Sequence[str]) -> None:
        for key in dict.fromkeys(keys):
            try:
                await self._storage.delete(key)
            except StorageError:
                logger.exception("Could not remove orphaned object %s", key)
