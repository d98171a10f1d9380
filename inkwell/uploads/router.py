"""
Image URL submission. Images are hosted elsewhere; we only check the URL.
"""
import logging

from fastapi import APIRouter, Depends

from inkwell.auth.dependencies import get_session_identity
from inkwell.auth.schemas import SessionIdentity
from inkwell.exceptions import ValidationException
from inkwell.posts.constants import INVALID_IMAGE_URL
from inkwell.uploads.schemas import ImageUrlResponse, ImageUrlSubmit
from inkwell.utils.urls import is_http_url

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Uploads"])


@router.post("/upload", response_model=ImageUrlResponse)
async def submit_image_url(
    payload: ImageUrlSubmit,
    identity: SessionIdentity = Depends(get_session_identity),
):
    """
    Accept an externally hosted image URL

    - **imageUrl**: absolute http(s) URL
    """
    if not payload.image_url:
        raise ValidationException("No image URL provided")
    if not is_http_url(payload.image_url):
        raise ValidationException(INVALID_IMAGE_URL)

    logger.debug("User %s submitted image URL", identity.user_id)
    return ImageUrlResponse(url=payload.image_url.strip())
