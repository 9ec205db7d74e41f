"""Custom Markdown extensions for markslides."""

from markdown import Extension
from markdown.postprocessors import Postprocessor

from markslides.config.models import (
    LINK_REL,
    LINK_TARGET,
    SECTION_CLASS,
    SLIDE_MARKER,
    FilterConfig,
)
from markslides.renderer.filters import make_slides_filter, rewrite_anchors, split_slides


class SlidesPostprocessor(Postprocessor):
    """Split rendered HTML into slide sections and rewrite its links.

    The inner HTML of each slide is kept on ``md.slides`` until the next reset.
    """

    def __init__(self, md, config: FilterConfig) -> None:  # type: ignore
        super().__init__(md)
        self.config = config
        self._slides = make_slides_filter(config)

    def run(self, text: str) -> str:
        """Apply the slides filter to the serialized document."""
        self.md.slides = [
            rewrite_anchors(slide, self.config.link_target, self.config.link_rel)
            for slide in split_slides(text, self.config.marker)
        ]
        return self._slides(text)


class SlidesExtension(Extension):
    """Extension turning a rendered document into a slide deck."""

    def __init__(self, **kwargs):  # type: ignore
        self.config = {
            "marker": [SLIDE_MARKER, "Literal slide separator"],
            "section_class": [SECTION_CLASS, "Class of each section wrapper"],
            "link_target": [LINK_TARGET, "Anchor target attribute"],
            "link_rel": [LINK_REL, "Anchor rel attribute"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):  # type: ignore
        """Register the postprocessor."""
        self.md = md
        md.slides = []
        md.registerExtension(self)
        md.postprocessors.register(
            SlidesPostprocessor(md, FilterConfig(**self.getConfigs())),
            'slides',
            5  # Runs after raw HTML is restored
        )

    def reset(self) -> None:
        """Forget the slides of the previous document."""
        self.md.slides = []


def makeExtension(**kwargs):  # type: ignore
    """Create extension instance."""
    return SlidesExtension(**kwargs)
