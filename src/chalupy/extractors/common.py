"""Small BeautifulSoup helpers shared by the extractors."""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup, Tag


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "lxml")


def text_of(el: Optional[Tag]) -> str:
    """Visible text with whitespace collapsed."""
    if el is None:
        return ""
    return " ".join(el.get_text(" ", strip=True).split())


def first_text(root: Tag, selector: str) -> str:
    """Text of the first element matching selector that has any text."""
    for el in root.select(selector):
        text = text_of(el)
        if text:
            return text
    return ""


def first_attr(root: Tag, selector: str, *attrs: str) -> Optional[str]:
    """First non-empty value of any of attrs on the first element matching selector."""
    el = root.select_one(selector)
    if el is None:
        return None
    for attr in attrs:
        value = el.get(attr)
        if isinstance(value, list):
            value = " ".join(value)
        if value and value.strip():
            return value.strip()
    return None


def image_src(root: Tag, selector: str) -> Optional[str]:
    """Image URL, skipping inline placeholders of lazy-loaded images."""
    el = root.select_one(selector)
    if el is None:
        return None
    for attr in ("src", "data-src", "data-lazy-src"):
        value = el.get(attr)
        if isinstance(value, str) and value.strip() and not value.startswith("data:"):
            return value.strip()
    return None
