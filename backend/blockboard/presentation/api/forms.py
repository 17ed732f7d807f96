"""Multipart helpers shared by the image endpoints."""

import logging

from starlette.datastructures import FormData, UploadFile

from blockboard.application.services import ImageUpload
from blockboard.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

IMAGE_FIELD = "image"


async def read_image_parts(form: FormData) -> list[ImageUpload]:
    """Read every ``image`` file part fully into memory, in arrival order.

    Parts with other names, and ``image`` parts without a filename, are ignored.
    """
    images: list[ImageUpload] = []
    for name, value in form.multi_items():
        if name != IMAGE_FIELD or not isinstance(value, UploadFile) or not value.filename:
            continue
        try:
            content = await value.read()
        except OSError as exc:
            logger.warning("Could not read upload part %r: %s", value.filename, exc)
            raise ValidationError(
                f"Could not read image {value.filename!r}", field=IMAGE_FIELD
            ) from exc
        images.append(
            ImageUpload(
                filename=value.filename,
                content=content,
                content_type=value.content_type,
            )
        )
    return images


def image_filenames(form: FormData) -> list[str]:
    """Filenames of the ``image`` parts, in arrival order."""
    return [
        value.filename
        for name, value in form.multi_items()
        if name == IMAGE_FIELD and isinstance(value, UploadFile) and value.filename
    ]


def text_fields(form: FormData, names: tuple[str, ...]) -> dict[str, str]:
    """Plain-text form fields among ``names`` (first value wins)."""
    fields: dict[str, str] = {}
    for name, value in form.multi_items():
        if name in names and isinstance(value, str) and name not in fields:
            fields[name] = value
    return fields
