"""
Test fixtures
=============
Shared Jinja2 environments and Markdown renderers.
"""

from __future__ import annotations

import pytest
from jinja2 import DictLoader

from markslides.config.models import RenderConfig, TemplateConfig
from markslides.renderer import SlideRenderer, create_environment

DECK_TEMPLATE = """\
<main class="deck">
{{ body|slides }}
</main>
"""


@pytest.fixture
def env():
    return create_environment(loader=DictLoader({"deck.html": DECK_TEMPLATE}))


@pytest.fixture
def autoescape_env():
    return create_environment(template_config=TemplateConfig(autoescape=True))


@pytest.fixture
def renderer():
    return SlideRenderer()


@pytest.fixture
def plain_renderer():
    """Renderer with no Markdown extensions besides the slides one."""
    return SlideRenderer(RenderConfig())
