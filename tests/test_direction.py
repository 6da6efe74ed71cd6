"""
Tests for bidi_styles.direction
"""

from bidi_styles.direction import DirectionResolver
from bidi_styles.rules import Declaration
from bidi_styles.values import Length


def _emit():
    return [Declaration("left", Length(0, ""))]


class TestDirectionResolver:
    def test_override_scoped_to_current_selector(self):
        override = DirectionResolver().with_rtl_override(".card", _emit)
        assert override.selector == '[dir="rtl"] .card'
        assert override.declarations == (Declaration("left", Length(0, "")),)

    def test_disabled_returns_none(self):
        resolver = DirectionResolver(rtl_enabled=False)
        assert resolver.rtl_enabled is False
        assert resolver.with_rtl_override(".card", _emit) is None

    def test_scope_is_idempotent(self):
        resolver = DirectionResolver()
        once = resolver.rtl_scope(".a, .b")
        assert once == '[dir="rtl"] .a, [dir="rtl"] .b'
        assert resolver.rtl_scope(once) == once
        assert resolver.in_rtl_scope(once)
        assert not resolver.in_rtl_scope(".a")

    def test_mixed_selector_list(self):
        resolver = DirectionResolver(rtl_selector=".rtl")
        assert resolver.rtl_selector == ".rtl"
        assert resolver.rtl_scope(".rtl .a, .b") == ".rtl .a, .rtl .b"
        assert not resolver.in_rtl_scope(".rtl .a, .b")

    def test_class_name_sharing_prefix_is_not_scoped(self):
        resolver = DirectionResolver(rtl_selector=".rtl")
        assert not resolver.in_rtl_scope(".rtl-card")
        assert resolver.rtl_scope(".rtl-card") == ".rtl .rtl-card"

    def test_context_in_middle_of_selector_not_rewrapped(self):
        resolver = DirectionResolver()
        selector = '.page [dir="rtl"] .card'
        assert resolver.in_rtl_scope(selector)
        assert resolver.rtl_scope(selector) == selector
        assert resolver.rtl_scope('.page > [dir="rtl"]') == '.page > [dir="rtl"]'
