"""Slide deck rendering: filters, Jinja2 environment and Markdown engine."""

from .engine import SlideRenderer
from .environment import FILTERS, create_environment, register_filters
from .filters import make_slides_filter, rewrite_anchors, slides, split_slides, wrap_slides

__all__ = [
    "SlideRenderer",
    "FILTERS",
    "create_environment",
    "register_filters",
    "make_slides_filter",
    "rewrite_anchors",
    "slides",
    "split_slides",
    "wrap_slides",
]
