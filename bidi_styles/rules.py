from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .values import Length, Value

LTR = "ltr"
RTL = "rtl"

INDENT = "  "


@dataclass(frozen=True)
class Declaration:
    property: str
    value: Value
    modifier: str = ""

    @property
    def value_text(self) -> str:
        if self.modifier:
            return f"{self.value} {self.modifier}"
        return str(self.value)

    def __str__(self) -> str:
        return f"{self.property}: {self.value_text};"


@dataclass(frozen=True)
class RuleSet:
    selector: str = "&"
    declarations: Tuple[Declaration, ...] = ()
    override: Optional["RuleSet"] = None

    def properties(self) -> List[str]:
        return [d.property for d in self.declarations]

    def effective(self, direction: str = LTR) -> Dict[str, str]:
        """Declarations that apply for an element laid out in ``direction``."""
        styles = {d.property: d.value_text for d in self.declarations}
        if direction == RTL and self.override is not None:
            styles.update(self.override.effective(LTR))
        return styles

    def to_dict(self) -> Dict[str, Any]:
        return {
            "selector": self.selector,
            "declarations": [
                {"property": d.property, "value": d.value_text} for d in self.declarations
            ],
            "override": self.override.to_dict() if self.override else None,
        }


@dataclass(frozen=True)
class MediaCondition:
    min_width: Optional[Length] = None
    max_width: Optional[Length] = None

    def __str__(self) -> str:
        parts = []
        if self.min_width is not None:
            parts.append(f"(min-width: {self.min_width})")
        if self.max_width is not None:
            parts.append(f"(max-width: {self.max_width})")
        return " and ".join(parts)


@dataclass(frozen=True)
class ScopedRegion:
    condition: Optional[MediaCondition]
    content: Tuple[RuleSet, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "media": f"@media {self.condition}" if self.condition else None,
            "content": [rule_set.to_dict() for rule_set in self.content],
        }


def _resolve_selector(selector: str, parent_selector: Optional[str]) -> str:
    if parent_selector is None:
        return selector
    return ", ".join(
        part.strip().replace("&", parent) if "&" in part else f"{parent} {part.strip()}"
        for parent in (p.strip() for p in parent_selector.split(","))
        for part in selector.split(",")
    )


def _render_block(selector: str, declarations: Tuple[Declaration, ...], depth: int) -> List[str]:
    pad = INDENT * depth
    lines = [f"{pad}{selector} {{"]
    lines.extend(f"{pad}{INDENT}{declaration}" for declaration in declarations)
    lines.append(f"{pad}}}")
    return lines


def _render_lines(rule_set: RuleSet, parent_selector: Optional[str], depth: int) -> List[str]:
    lines = []
    if rule_set.declarations:
        selector = _resolve_selector(rule_set.selector, parent_selector)
        lines.extend(_render_block(selector, rule_set.declarations, depth))
    if rule_set.override is not None:
        lines.extend(_render_lines(rule_set.override, parent_selector, depth))
    return lines


def render_rule_set(rule_set: RuleSet, parent_selector: Optional[str] = None) -> str:
    """Render a rule set and its right-to-left override as stylesheet text.

    ``&`` in selectors is replaced by ``parent_selector`` when one is given.
    """
    return "\n".join(_render_lines(rule_set, parent_selector, 0))


def render_region(region: ScopedRegion, parent_selector: Optional[str] = None) -> str:
    if region.condition is None:
        return "\n".join(render_rule_set(r, parent_selector) for r in region.content)
    lines = [f"@media {region.condition} {{"]
    for rule_set in region.content:
        lines.extend(_render_lines(rule_set, parent_selector, 1))
    lines.append("}")
    return "\n".join(lines)
