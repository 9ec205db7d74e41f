"""Jinja2 environment with the slide deck filters registered."""

import logging
from typing import Any, Callable

from jinja2 import BaseLoader, Environment
from markupsafe import Markup, soft_str

from markslides.config.models import FilterConfig, TemplateConfig
from markslides.config.settings import get_default_template_config
from markslides.renderer.filters import make_slides_filter, slides

logger = logging.getLogger(__name__)


def _template_filter(func: Callable[[str], str]) -> Callable[[Any], str]:
    """Adapt a string filter to template values.

    Undefined and other non-string values are coerced with ``soft_str``;
    output stays safe when the input was marked safe.
    """

    def template_filter(value: Any) -> str:
        result = func(str(soft_str(value)))
        if isinstance(value, Markup):
            return Markup(result)
        return result

    template_filter.__name__ = func.__name__
    template_filter.__doc__ = func.__doc__
    return template_filter


FILTERS: dict[str, Callable[[Any], str]] = {
    "slides": _template_filter(slides),
}


def register_filters(env: Environment, config: FilterConfig | None = None) -> Environment:
    """
    Register the slide deck filters on an environment.

    Args:
        env: Jinja2 environment to extend
        config: Optional filter configuration overriding the defaults

    Returns:
        The same environment, for chaining
    """
    if config is None:
        env.filters.update(FILTERS)
    else:
        env.filters["slides"] = _template_filter(make_slides_filter(config))

    logger.debug(f"Registered template filters: {', '.join(sorted(FILTERS))}")
    return env


def create_environment(
    loader: BaseLoader | None = None,
    template_config: TemplateConfig | None = None,
    filter_config: FilterConfig | None = None,
) -> Environment:
    """
    Create a Jinja2 environment with the slides filter available.

    Args:
        loader: Template loader, or None for ``from_string`` use only
        template_config: Environment options
        filter_config: Optional filter configuration

    Returns:
        Configured environment
    """
    template_config = template_config or get_default_template_config()
    env = Environment(
        loader=loader,
        autoescape=template_config.autoescape,
        trim_blocks=template_config.trim_blocks,
        lstrip_blocks=template_config.lstrip_blocks,
    )
    return register_filters(env, filter_config)
