"""Slide deck text filters."""

import re
from typing import Callable

from markslides.config.models import (
    LINK_REL,
    LINK_TARGET,
    SECTION_CLASS,
    SLIDE_MARKER,
    FilterConfig,
)

# "<a" followed by a single whitespace character and the href attribute
ANCHOR_PATTERN = re.compile(r"<a\shref")


def split_slides(text: str, marker: str = SLIDE_MARKER) -> list[str]:
    """Split text on the slide marker, keeping empty segments."""
    return text.split(marker)


def wrap_slides(
    text: str,
    marker: str = SLIDE_MARKER,
    section_class: str = SECTION_CLASS,
) -> str:
    """
    Split text on the slide marker and wrap each segment in a section.

    Empty segments are kept, so an empty string yields one empty section.

    Args:
        text: HTML string
        marker: Literal slide separator
        section_class: Class attribute of each section

    Returns:
        Concatenated section wrappers, in source order
    """
    return "".join(
        f'<section class="{section_class}">{slide}</section>'
        for slide in split_slides(text, marker)
    )


def rewrite_anchors(
    text: str,
    target: str = LINK_TARGET,
    rel: str = LINK_REL,
) -> str:
    """
    Insert target and rel attributes into every anchor tag.

    Args:
        text: HTML string
        target: Value of the target attribute
        rel: Value of the rel attribute

    Returns:
        HTML with ``<a href`` rewritten to ``<a target=... rel=... href``
    """
    replacement = f'<a target="{target}" rel="{rel}" href'
    return ANCHOR_PATTERN.sub(lambda _: replacement, text)


def slides(text: str) -> str:
    """Wrap slides, then rewrite anchors in the wrapped output."""
    return rewrite_anchors(wrap_slides(text))


def make_slides_filter(config: FilterConfig) -> Callable[[str], str]:
    """Build a ``slides`` filter bound to the given configuration."""
    config.validate()

    def configured_slides(text: str) -> str:
        wrapped = wrap_slides(text, config.marker, config.section_class)
        return rewrite_anchors(wrapped, config.link_target, config.link_rel)

    return configured_slides
