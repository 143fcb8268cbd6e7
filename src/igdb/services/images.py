"""URLs for images served by the IGDB image CDN."""

from ..models.image import ImageSize
from .errors import BlankImageIDError, PixelRatioError

IMAGE_URL = "https://images.igdb.com/igdb/image/upload/t_{size}{dpr}/{image_id}.jpg"


def sized_image_url(image_id: str, size: ImageSize, ratio: int = 1) -> str:
    """Return the URL of an image at the given size and display pixel ratio.

    The ratio multiplies the resolution of the image; 1 and 2 are supported.
    """
    if not image_id or not image_id.strip():
        raise BlankImageIDError(field="image_id", value=image_id)

    if ratio == 1:
        dpr = ""
    elif ratio == 2:
        dpr = "_2x"
    else:
        raise PixelRatioError(field="ratio", value=ratio)

    return IMAGE_URL.format(size=ImageSize(size).value, dpr=dpr, image_id=image_id)
