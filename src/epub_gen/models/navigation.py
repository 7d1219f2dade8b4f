"""Data models for the table of contents."""

from pydantic import BaseModel, Field


class NavPoint(BaseModel):
    """Single entry in the table of contents.

    ``order`` sorts siblings when the TOC is rendered. Orders need not start
    at 1, may have gaps, and siblings with equal orders keep the order they
    were added in.
    """

    label: str
    href: str
    order: int = 0
    children: list["NavPoint"] = Field(default_factory=list)

    def add_navpoint(self, label: str, href: str, order: int) -> "NavPoint":
        """Add a child entry and return it.

        Child hrefs usually point into the parent's file (``ch1.xhtml#s2``);
        some readers require it.
        """
        child = NavPoint(label=label, href=href, order=order)
        self.children.append(child)
        return child


def sorted_level(navpoints: list[NavPoint]) -> list[NavPoint]:
    """Return one level of the tree in display order, without mutating it."""
    return sorted(navpoints, key=lambda n: n.order)


def tree_depth(navpoints: list[NavPoint]) -> int:
    """Return the number of levels in the tree (0 when empty)."""
    if not navpoints:
        return 0
    return 1 + max(tree_depth(n.children) for n in navpoints)
