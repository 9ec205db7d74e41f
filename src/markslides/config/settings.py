"""Application settings and configuration."""

import os

from markslides.config.models import TemplateConfig

# Cache settings
RENDER_CACHE_SIZE = int(os.getenv("MARKSLIDES_RENDER_CACHE_SIZE", "128"))  # Max rendered decks to cache

# Template defaults
DEFAULT_AUTOESCAPE = os.getenv("MARKSLIDES_AUTOESCAPE", "false").lower() in ("1", "true", "yes")

def get_default_template_config() -> TemplateConfig:
    """Get default Jinja2 environment configuration."""
    return TemplateConfig(autoescape=DEFAULT_AUTOESCAPE)


__all__ = [
    "RENDER_CACHE_SIZE",
    "DEFAULT_AUTOESCAPE",
    "get_default_template_config",
]
