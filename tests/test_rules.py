"""
Tests for bidi_styles.rules rendering
"""

from bidi_styles.rules import LTR, RTL, MediaCondition, ScopedRegion, render_region, render_rule_set
from bidi_styles.values import Length


class TestRenderRuleSet:
    def test_base_and_override(self, resolver):
        css = render_rule_set(resolver.padding(start="10px", end="20px"), ".card")
        assert css == (
            ".card {\n"
            "  padding-left: 10px;\n"
            "  padding-right: 20px;\n"
            "}\n"
            '[dir="rtl"] .card {\n'
            "  padding-right: 10px;\n"
            "  padding-left: 20px;\n"
            "}"
        )

    def test_multiple_parent_selectors(self, resolver):
        css = render_rule_set(resolver.margin(start="1px"), ".a, .b")
        assert css.splitlines()[0] == ".a, .b {"
        assert '[dir="rtl"] .a, [dir="rtl"] .b {' in css

    def test_modifier_rendered(self, resolver):
        css = render_rule_set(resolver.text_align("start", "!important"), "p")
        assert "text-align: start !important;" in css
        assert "text-align: left;" in css


class TestRenderRegion:
    def test_conditional_region(self, resolver):
        region = ScopedRegion(MediaCondition(min_width=Length(768, "px")), (resolver.padding("1rem", "1rem", "1rem", "1rem"),))
        assert render_region(region, ".card") == (
            "@media (min-width: 768px) {\n"
            "  .card {\n"
            "    padding: 1rem;\n"
            "  }\n"
            "}"
        )

    def test_unconditional_region(self, resolver, table):
        region = table.scope_up("xs", lambda: resolver.margin(top="0"))
        assert render_region(region, "h1") == "h1 {\n  margin-top: 0;\n}"

    def test_to_dict(self, table):
        region = table.scope_down("md", lambda: [])
        assert region.to_dict() == {"media": "@media (max-width: 991px)", "content": []}


class TestEffective:
    def test_rtl_applies_override(self, resolver):
        rule_set = resolver.padding(start="1rem")
        assert rule_set.effective(LTR) == {"padding-left": "1rem"}
        assert rule_set.effective(RTL) == {"padding-left": "initial", "padding-right": "1rem"}

    def test_to_dict(self, resolver):
        data = resolver.position(end="0", selector=".x").to_dict()
        assert data["declarations"] == [{"property": "right", "value": "0"}]
        assert data["override"]["selector"] == '[dir="rtl"] .x'
