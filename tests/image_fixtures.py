"""Test image fixtures.

Minimal valid images generated with Pillow so they always decode.
"""

import io


def _create(fmt: str) -> bytes:
    from PIL import Image

    img = Image.new("RGB", (1, 1), color="white")
    buffer = io.BytesIO()
    img.save(buffer, format=fmt)
    return buffer.getvalue()


TINY_PNG = _create("PNG")
TINY_JPEG = _create("JPEG")
TINY_GIF = _create("GIF")
TINY_BMP = _create("BMP")

SVG_CONTENT = b'<svg xmlns="http://www.w3.org/2000/svg"><circle cx="50" cy="50" r="40"/></svg>'
TEXT_CONTENT = b"This is plain text, not an image."
