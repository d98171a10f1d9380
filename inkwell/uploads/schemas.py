from typing import Optional

from inkwell.models import CustomModel


class ImageUrlSubmit(CustomModel):
    image_url: Optional[str] = None


class ImageUrlResponse(CustomModel):
    url: str
