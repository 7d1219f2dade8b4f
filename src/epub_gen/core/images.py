"""Image type detection with Pillow."""

import io
import logging

from PIL import Image, UnidentifiedImageError

from epub_gen.errors import DecodeError

log = logging.getLogger(__name__)

# Pillow format name -> media subtype
SUPPORTED_FORMATS = {
    "PNG": "png",
    "JPEG": "jpeg",
    "GIF": "gif",
}


def sniff_image(data: bytes) -> str:
    """Return the media subtype (``png``, ``jpeg``, ``gif``) of ``data``.

    Raises:
        DecodeError: If the bytes are not a supported raster image. The
            Pillow error, if any, is chained as ``__cause__``.
    """
    try:
        img = Image.open(io.BytesIO(data))
        # Verify integrity without fully decoding
        img.verify()
        img_format = img.format or ""
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        log.debug("Image sniff failed: %s", e)
        raise DecodeError(f"Content is not a valid image: {e}") from e

    subtype = SUPPORTED_FORMATS.get(img_format)
    if subtype is None:
        raise DecodeError(f"Unsupported image format: {img_format or 'unknown'}")
    return subtype
