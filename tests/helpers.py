"""Helpers for reading packaged books in tests."""

import io
import zipfile

from lxml import etree

OPF_NS = "http://www.idpf.org/2007/opf"
DC_NS = "http://purl.org/dc/elements/1.1/"
NCX_NS = "http://www.daisy.org/z3986/2005/ncx/"
XHTML_NS = "http://www.w3.org/1999/xhtml"


def open_zip(data: bytes) -> zipfile.ZipFile:
    return zipfile.ZipFile(io.BytesIO(data))


def read_entry(data: bytes, name: str) -> str:
    with open_zip(data) as zf:
        return zf.read(name).decode("utf-8")


def parse_entry(data: bytes, name: str) -> etree._Element:
    with open_zip(data) as zf:
        return etree.fromstring(zf.read(name))


def spine_ids(opf: etree._Element) -> list[str]:
    return [ref.get("idref") for ref in opf.iter(f"{{{OPF_NS}}}itemref")]


def manifest_items(opf: etree._Element) -> list[etree._Element]:
    return list(opf.iter(f"{{{OPF_NS}}}item"))


V2_XHTML = """<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.1//EN" "http://www.w3.org/TR/xhtml11/DTD/xhtml11.dtd">
<html xmlns="http://www.w3.org/1999/xhtml">
<head><title>{title}</title><link rel="stylesheet" type="text/css" href="../css/style.css" /></head>
<body><h1>{title}</h1><p>Some text.</p><img src="../images/cover.png" alt="" /></body>
</html>
"""


def make_xhtml(title: str) -> str:
    """An EPUB 2 style chapter linking the fixture stylesheet and image."""
    return V2_XHTML.format(title=title)
