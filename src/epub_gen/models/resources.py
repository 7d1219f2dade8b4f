"""Data models for the files carried inside a book."""

from pydantic import BaseModel

XHTML_MEDIA_TYPE = "application/xhtml+xml"
CSS_MEDIA_TYPE = "text/css"
JAVASCRIPT_MEDIA_TYPE = "application/javascript"

FONT_MEDIA_TYPES = {
    ".otf": "application/vnd.ms-opentype",
    ".ttf": "application/font-sfnt",
    ".woff": "application/font-woff",
    ".woff2": "font/woff2",
}


class Image(BaseModel):
    """Raster image, with the subtype detected from its bytes."""

    id: str
    path: str
    contents: bytes
    subtype: str

    @property
    def media_type(self) -> str:
        return f"image/{self.subtype}"


class Stylesheet(BaseModel):
    """CSS stylesheet."""

    id: str
    path: str
    contents: str

    @property
    def media_type(self) -> str:
        return CSS_MEDIA_TYPE


class Script(BaseModel):
    """JavaScript file."""

    id: str
    path: str
    contents: str

    @property
    def media_type(self) -> str:
        return JAVASCRIPT_MEDIA_TYPE


class Font(BaseModel):
    """Embedded font file."""

    id: str
    path: str
    contents: bytes

    @property
    def media_type(self) -> str:
        suffix = self.path[self.path.rfind(".") :].lower()
        return FONT_MEDIA_TYPES[suffix]


class XhtmlDocument(BaseModel):
    """XHTML content document, a spine candidate."""

    id: str
    path: str
    contents: str
    order: int = 0  # Explicit spine position
    base_order: int  # Insertion index, breaks ties on ``order``

    @property
    def media_type(self) -> str:
        return XHTML_MEDIA_TYPE


def spine_order(documents: list[XhtmlDocument]) -> list[XhtmlDocument]:
    """Return documents in reading order.

    Sorted by explicit order, then by insertion index. The input list is
    left untouched.
    """
    return sorted(documents, key=lambda d: (d.order, d.base_order))
