"""Configuration models for markslides."""

from dataclasses import dataclass, field
from typing import Any

# Slide filter defaults
SLIDE_MARKER = "<hr>"
SECTION_CLASS = "slide"
LINK_TARGET = "_blank"
LINK_REL = "noopener noreferer"  # Kept verbatim


@dataclass
class FilterConfig:
    """Configuration for the ``slides`` filter."""

    marker: str = SLIDE_MARKER  # Literal slide separator
    section_class: str = SECTION_CLASS  # Class of the section wrapper
    link_target: str = LINK_TARGET  # Anchor target attribute
    link_rel: str = LINK_REL  # Anchor rel attribute

    def validate(self) -> None:
        """Validate configuration values."""
        if not self.marker:
            raise ValueError("Slide marker must not be empty")
        if not self.section_class:
            raise ValueError("Section class must not be empty")


@dataclass
class RenderConfig:
    """Configuration for the Markdown deck renderer."""

    extensions: list[str] = field(default_factory=list)  # Markdown extensions to enable
    extension_configs: dict[str, Any] = field(
        default_factory=dict
    )  # Extension-specific settings
    output_format: str = "html"  # "html" emits the bare <hr> marker
    filters: FilterConfig = field(default_factory=FilterConfig)

    def validate(self) -> None:
        """Validate configuration values."""
        if self.output_format not in ("html", "xhtml"):
            raise ValueError(f"Invalid output format: {self.output_format}")
        if self.output_format == "xhtml" and self.filters.marker == SLIDE_MARKER:
            raise ValueError('xhtml output writes "<hr />"; set filters.marker to match')
        self.filters.validate()

    @classmethod
    def default(cls) -> "RenderConfig":
        """Create default configuration for slide decks."""
        return cls(
            extensions=[
                # --- Core markdown extensions ---
                "markdown.extensions.abbr",
                "markdown.extensions.attr_list",
                "markdown.extensions.def_list",
                "markdown.extensions.sane_lists",
                "markdown.extensions.tables",
                "markdown.extensions.md_in_html",

                # --- pymdownx extensions ---
                "pymdownx.highlight",
                "pymdownx.inlinehilite",
                "pymdownx.superfences",
                "pymdownx.tasklist",
                "pymdownx.mark",
                "pymdownx.tilde",
            ],
            extension_configs={
                "pymdownx.highlight": {
                    "anchor_linenums": False,
                    "use_pygments": True,
                    "pygments_lang_class": True,
                },
                "pymdownx.tasklist": {
                    "custom_checkbox": True,
                },
            },
            output_format="html",
        )


@dataclass
class TemplateConfig:
    """Configuration for the Jinja2 environment."""

    autoescape: bool = False  # Escape variables not marked safe
    trim_blocks: bool = True  # Drop the newline after a block tag
    lstrip_blocks: bool = True  # Strip whitespace before a block tag
