"""Parsed view of a fetched page shared by all evaluators."""

from dataclasses import dataclass
from functools import cached_property
from typing import List

from bs4 import BeautifulSoup

from gym_audit.text_utils import collapse_whitespace


@dataclass(frozen=True)
class ImageElement:
    """Attributes of one <img> relevant to the imagery check."""
    src: str = ""
    srcset: str = ""
    alt: str = ""
    cls: str = ""
    loading: str = ""


@dataclass(frozen=True)
class Control:
    """A link or button, indexed in document order."""
    index: int
    tag: str
    text: str
    href: str = ""


def _attr(tag, name: str) -> str:
    value = tag.get(name)
    if value is None:
        return ""
    # bs4 returns multi-valued attributes such as class as lists
    if isinstance(value, list):
        value = " ".join(value)
    return value.strip()


class ParsedPage:
    """Parses HTML once and exposes the pieces the heuristics need.

    Absent elements and attributes come back as empty strings so callers
    never have to guard against None.
    """

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html or "", "html.parser")

    def _first_text(self, name: str) -> str:
        tag = self.soup.find(name)
        return collapse_whitespace(tag.get_text(" ")) if tag else ""

    @cached_property
    def title(self) -> str:
        return self._first_text("title")

    @cached_property
    def h1(self) -> str:
        return self._first_text("h1")

    @cached_property
    def meta_description(self) -> str:
        tag = self.soup.find("meta", attrs={"name": "description"})
        return _attr(tag, "content") if tag else ""

    @cached_property
    def body_text(self) -> str:
        """Whitespace-collapsed text of <body>.

        html.parser does not synthesize a <body> for bare documents, so
        without one every string outside <head>/<title> counts as body.
        """
        body = self.soup.body
        if body is not None:
            return collapse_whitespace(body.get_text(" "))
        strings = (
            s for s in self.soup.strings
            if s.find_parent(("head", "title")) is None
        )
        return collapse_whitespace(" ".join(strings))

    @cached_property
    def lower_body_text(self) -> str:
        return self.body_text.lower()

    @cached_property
    def headings(self) -> List[str]:
        return [
            collapse_whitespace(h.get_text(" "))
            for h in self.soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"])
        ]

    @cached_property
    def images(self) -> List[ImageElement]:
        return [
            ImageElement(
                src=_attr(img, "src"),
                srcset=_attr(img, "srcset"),
                alt=_attr(img, "alt"),
                cls=_attr(img, "class"),
                loading=_attr(img, "loading"),
            )
            for img in self.soup.find_all("img")
        ]

    @cached_property
    def controls(self) -> List[Control]:
        """Links and buttons in one document-order sequence."""
        return [
            Control(
                index=idx,
                tag=el.name,
                text=collapse_whitespace(el.get_text(" ")),
                href=_attr(el, "href") if el.name == "a" else "",
            )
            for idx, el in enumerate(self.soup.find_all(["a", "button"]))
        ]

    @property
    def anchors(self) -> List[Control]:
        return [c for c in self.controls if c.tag == "a"]

    def has_link_containing(self, fragment: str) -> bool:
        """True when any <a href> contains the fragment."""
        return any(fragment in a.href for a in self.anchors if a.href)
