"""
Free-text sanitizer applied to user-supplied strings before they reach a query.

Mirrors WordPress' sanitize_text_field: tags are stripped (script/style with their
content), percent-encoded octets and control characters are removed, and
whitespace runs collapse to a single space.
"""
from __future__ import annotations
import re
from typing import Any, Callable
from bs4 import BeautifulSoup

Sanitizer = Callable[[Any], str]

_OCTETS = re.compile(r"%[a-fA-F0-9]{2}")
_CONTROL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_WHITESPACE = re.compile(r"[\r\n\t ]+")


def strip_all_tags(text: str) -> str:
    if "<" not in text:
        return text
    # get_text() decodes entities; pre-escape so they come back verbatim
    soup = BeautifulSoup(text.replace("&", "&amp;"), "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    return soup.get_text()


def sanitize_text_field(raw: Any) -> str:
    if raw is None:
        return ""
    text = strip_all_tags(str(raw))

    # "%%4141" leaves "%41" after one pass; repeat until stable
    while True:
        stripped = _OCTETS.sub("", text)
        if stripped == text:
            break
        text = stripped

    text = _CONTROL.sub("", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()


def resolve_sanitizer(sanitize: Sanitizer | None) -> Sanitizer:
    return sanitize if sanitize is not None else sanitize_text_field
