"""
Filter tests
============
wrap_slides, rewrite_anchors, slides and make_slides_filter.
"""

from __future__ import annotations

import pytest

from markslides.config.models import FilterConfig
from markslides.renderer.filters import (
    make_slides_filter,
    rewrite_anchors,
    slides,
    split_slides,
    wrap_slides,
)

REWRITTEN = '<a target="_blank" rel="noopener noreferer" href'


class TestWrapSlides:
    def test_splits_on_marker(self):
        assert wrap_slides("a<hr>b") == (
            '<section class="slide">a</section><section class="slide">b</section>'
        )

    def test_no_marker_is_single_section(self):
        text = "<h1>Title</h1><p>body</p>"
        assert wrap_slides(text) == f'<section class="slide">{text}</section>'

    def test_empty_string(self):
        assert wrap_slides("") == '<section class="slide"></section>'

    def test_empty_segments_preserved(self):
        assert wrap_slides("<hr>a<hr><hr>") == (
            '<section class="slide"></section>'
            '<section class="slide">a</section>'
            '<section class="slide"></section>'
            '<section class="slide"></section>'
        )

    def test_only_literal_marker_splits(self):
        text = "a<hr />b<HR>c"
        assert wrap_slides(text) == f'<section class="slide">{text}</section>'

    def test_custom_marker_and_class(self):
        assert wrap_slides("a---b", marker="---", section_class="page") == (
            '<section class="page">a</section><section class="page">b</section>'
        )


class TestSplitSlides:
    def test_segments_before_wrapping(self):
        assert split_slides("<section>a</section><hr>b") == ["<section>a</section>", "b"]

    def test_empty_string(self):
        assert split_slides("") == [""]


class TestRewriteAnchors:
    def test_single_anchor(self):
        assert rewrite_anchors('<a href="x">') == (
            '<a target="_blank" rel="noopener noreferer" href="x">'
        )

    def test_all_anchors_rewritten(self):
        out = rewrite_anchors('<a href="x">1</a> and <a href="y">2</a>')
        assert out.count(REWRITTEN) == 2
        assert '<a href' not in out

    def test_any_single_whitespace(self):
        assert rewrite_anchors('<a\thref="x">') == f'{REWRITTEN}="x">'
        assert rewrite_anchors('<a\nhref="x">') == f'{REWRITTEN}="x">'

    def test_other_tags_untouched(self):
        text = '<a class="c" href="x"><abbr href="y"><area href="z">'
        assert rewrite_anchors(text) == text

    def test_no_anchors(self):
        assert rewrite_anchors("") == ""
        assert rewrite_anchors("plain text") == "plain text"

    def test_custom_attributes(self):
        out = rewrite_anchors('<a href="x">', target="deck", rel="noopener noreferrer")
        assert out == '<a target="deck" rel="noopener noreferrer" href="x">'

    def test_backslashes_in_values_kept_literal(self):
        out = rewrite_anchors('<a href="x">', rel=r"a\1")
        assert out == r'<a target="_blank" rel="a\1" href="x">'


class TestSlides:
    def test_composition(self):
        assert slides('a<hr><a href="x">') == (
            '<section class="slide">a</section>'
            f'<section class="slide">{REWRITTEN}="x"></section>'
        )

    def test_empty_string(self):
        assert slides("") == '<section class="slide"></section>'

    def test_rewrite_runs_after_wrapping(self):
        # the wrapper itself contains no anchors, so only source anchors change
        out = slides('<a href="1"><hr><a href="2">')
        assert out.count("<section") == 2
        assert out.count(REWRITTEN) == 2


class TestMakeSlidesFilter:
    def test_default_config_matches_slides(self):
        configured = make_slides_filter(FilterConfig())
        text = 'intro<hr><a href="x">link</a>'
        assert configured(text) == slides(text)

    def test_custom_config(self):
        configured = make_slides_filter(
            FilterConfig(marker="<!-- next -->", section_class="page", link_rel="noopener")
        )
        out = configured('a<!-- next --><a href="x">')
        assert out == (
            '<section class="page">a</section>'
            '<section class="page"><a target="_blank" rel="noopener" href="x"></section>'
        )

    @pytest.mark.parametrize("field", ["marker", "section_class"])
    def test_rejects_empty_values(self, field):
        with pytest.raises(ValueError):
            make_slides_filter(FilterConfig(**{field: ""}))
