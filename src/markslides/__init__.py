"""markslides: slide deck filters for Jinja2 templates."""

__version__ = "0.1.0"
__author__ = "markslides contributors"
__license__ = "MIT"

from markslides.config.models import FilterConfig, RenderConfig, TemplateConfig
from markslides.renderer import (
    FILTERS,
    SlideRenderer,
    create_environment,
    register_filters,
    slides,
)

__all__ = [
    "FilterConfig",
    "RenderConfig",
    "TemplateConfig",
    "SlideRenderer",
    "FILTERS",
    "create_environment",
    "register_filters",
    "slides",
    "__version__",
]
