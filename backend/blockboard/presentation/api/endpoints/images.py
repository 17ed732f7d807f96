"""Image upload/removal endpoints: multipart ``image`` parts."""

from fastapi import APIRouter, Depends, Request

from blockboard.application.schemas import ImageUrlsResponse, ResponseEnvelope
from blockboard.application.services import ImageService
from blockboard.domain.entities import User
from blockboard.infrastructure.dependencies import get_current_user, get_image_service
from blockboard.presentation.api.forms import image_filenames, read_image_parts

router = APIRouter(tags=["Images"])


@router.post("/upload_pic", response_model=ResponseEnvelope[ImageUrlsResponse])
async def upload_pictures(
    request: Request,
    current_user: User = Depends(get_current_user),
    service: ImageService = Depends(get_image_service),
) -> ResponseEnvelope[ImageUrlsResponse]:
    """Upload every ``image`` part under the caller's prefix.

    Returns one public URL per part, in the order the parts arrived.
    """
    async with request.form() as form:
        images = await read_image_parts(form)
    urls = await service.upload_images(current_user.id, images)
    return ResponseEnvelope[ImageUrlsResponse].success(
        data=ImageUrlsResponse(image_url=urls),
        message="Images uploaded successfully",
    )


@router.post("/delete_pic", response_model=ResponseEnvelope[ImageUrlsResponse])
async def delete_pictures(
    request: Request,
    current_user: User = Depends(get_current_user),
    service: ImageService = Depends(get_image_service),
) -> ResponseEnvelope[ImageUrlsResponse]:
    """Delete the caller's objects named by the ``image`` parts' filenames."""
    async with request.form() as form:
        filenames = image_filenames(form)
    urls = await service.delete_images(current_user.id, filenames)
    return ResponseEnvelope[ImageUrlsResponse].success(
        data=ImageUrlsResponse(image_url=urls),
        message="Images deleted successfully",
    )
