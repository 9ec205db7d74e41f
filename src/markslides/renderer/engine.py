"""Markdown slide deck rendering engine."""

import logging
from functools import lru_cache

import markdown

from markslides.config.models import RenderConfig
from markslides.config.settings import RENDER_CACHE_SIZE
from markslides.renderer.extensions import SlidesExtension

logger = logging.getLogger(__name__)


class SlideRenderer:
    """Renders Markdown to a deck of HTML slide sections."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer with configuration."""
        self.config = config or RenderConfig.default()
        self.config.validate()
        self._md = self._create_markdown_instance()
        logger.debug(f"Slide renderer ready with {len(self.config.extensions)} extensions")

    def _create_markdown_instance(self) -> markdown.Markdown:
        """Create configured markdown instance."""
        filters = self.config.filters
        slides_extension = SlidesExtension(
            marker=filters.marker,
            section_class=filters.section_class,
            link_target=filters.link_target,
            link_rel=filters.link_rel,
        )
        return markdown.Markdown(
            extensions=[*self.config.extensions, slides_extension],
            extension_configs=self.config.extension_configs,
            output_format=self.config.output_format,
        )

    @lru_cache(maxsize=RENDER_CACHE_SIZE)
    def render(self, content: str) -> str:
        """
        Render Markdown content to deck HTML.

        Thematic breaks (``---``) separate slides.

        Args:
            content: Raw Markdown string

        Returns:
            Concatenated ``<section>`` elements
        """
        # Reset the markdown instance for fresh render
        self._md.reset()
        return self._md.convert(content)

    def render_slides(self, content: str) -> list[str]:
        """
        Render Markdown and return the inner HTML of each slide.

        Args:
            content: Raw Markdown string

        Returns:
            One HTML string per slide, in source order
        """
        self._md.reset()
        self._md.convert(content)
        return list(self._md.slides)
