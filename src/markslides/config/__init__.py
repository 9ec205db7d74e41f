"""Configuration for markslides."""

from .models import FilterConfig, RenderConfig, TemplateConfig

__all__ = ["FilterConfig", "RenderConfig", "TemplateConfig"]
