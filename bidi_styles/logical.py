import warnings
from typing import Dict, List, Optional, Tuple

import structlog

from .direction import DirectionResolver
from .errors import InvalidSideValue
from .rules import Declaration, RuleSet
from .values import AUTO, INITIAL, ZERO, Keyword, Value, coerce_side

logger = structlog.get_logger(__name__)

# property -> (shorthand, top, right, bottom, left)
SIDE_PROPERTIES: Dict[str, Tuple[Optional[str], str, str, str, str]] = {
    "padding": ("padding", "padding-top", "padding-right", "padding-bottom", "padding-left"),
    "margin": ("margin", "margin-top", "margin-right", "margin-bottom", "margin-left"),
    "position": (None, "top", "right", "bottom", "left"),
}

RADIUS_PROPERTIES = {
    "shorthand": "border-radius",
    "top-left": "border-top-left-radius",
    "top-right": "border-top-right-radius",
    "bottom-right": "border-bottom-right-radius",
    "bottom-left": "border-bottom-left-radius",
}

# logical text-align keyword -> physical keyword for older renderers
TEXT_ALIGN_PHYSICAL = {"start": "left", "end": "right"}


def _declare(out: List[Declaration], prop: str, value: Optional[Value]):
    if value is not None:
        out.append(Declaration(prop, value))


def _mirrored_pair(
    out: List[Declaration],
    start: Optional[Value],
    end: Optional[Value],
    left_prop: str,
    right_prop: str,
    reset: Value,
):
    # Under right-to-left, start lands on the right and end on the left.
    out.append(Declaration(right_prop, start if start is not None else reset))
    out.append(Declaration(left_prop, end if end is not None else reset))


class LogicalPropertyResolver:
    def __init__(self, direction: Optional[DirectionResolver] = None):
        self.direction = direction or DirectionResolver()

    def _sides(self, top, end, bottom, start, left, right, operation: str):
        if left is not None:
            start = self._deprecated_alias(operation, "left", "start", left, start)
        if right is not None:
            end = self._deprecated_alias(operation, "right", "end", right, end)
        return (
            coerce_side("top", top),
            coerce_side("end", end),
            coerce_side("bottom", bottom),
            coerce_side("start", start),
        )

    def _deprecated_alias(self, operation, alias, name, alias_value, value):
        if value is not None:
            raise InvalidSideValue(alias, alias_value, f"cannot be combined with {name!r}")
        warnings.warn(
            f"{operation}({alias}=...) is deprecated, use {name}=...",
            DeprecationWarning,
            stacklevel=4,
        )
        logger.warning("deprecated_parameter", operation=operation, parameter=alias, replacement=name)
        return alias_value

    def _box(self, prop, top, end, bottom, start, reset, selector) -> RuleSet:
        shorthand, top_prop, right_prop, bottom_prop, left_prop = SIDE_PROPERTIES[prop]

        if shorthand and top is not None and top == end == bottom == start:
            return RuleSet(selector, (Declaration(shorthand, top),))

        base: List[Declaration] = []
        _declare(base, left_prop, start)
        _declare(base, right_prop, end)
        _declare(base, top_prop, top)
        _declare(base, bottom_prop, bottom)

        override = None
        if start != end:

            def emit():
                mirrored: List[Declaration] = []
                _mirrored_pair(mirrored, start, end, left_prop, right_prop, reset)
                return mirrored

            override = self.direction.with_rtl_override(selector, emit)

        return RuleSet(selector, tuple(base), override)

    def spacing(
        self,
        property: str,
        top=None,
        end=None,
        bottom=None,
        start=None,
        selector: str = "&",
        left=None,
        right=None,
    ) -> RuleSet:
        if property not in ("padding", "margin"):
            raise InvalidSideValue("property", property, "expected 'padding' or 'margin'")
        sides = self._sides(top, end, bottom, start, left, right, property)
        return self._box(property, *sides, INITIAL, selector)

    def padding(self, top=None, end=None, bottom=None, start=None, selector: str = "&", **aliases) -> RuleSet:
        return self.spacing("padding", top, end, bottom, start, selector, **aliases)

    def margin(self, top=None, end=None, bottom=None, start=None, selector: str = "&", **aliases) -> RuleSet:
        return self.spacing("margin", top, end, bottom, start, selector, **aliases)

    def position(
        self, top=None, end=None, bottom=None, start=None, selector: str = "&", left=None, right=None
    ) -> RuleSet:
        sides = self._sides(top, end, bottom, start, left, right, "position")
        return self._box("position", *sides, AUTO, selector)

    def border_radius(
        self, top_start=None, top_end=None, bottom_end=None, bottom_start=None, selector: str = "&"
    ) -> RuleSet:
        top_start = coerce_side("top_start", top_start)
        top_end = coerce_side("top_end", top_end)
        bottom_end = coerce_side("bottom_end", bottom_end)
        bottom_start = coerce_side("bottom_start", bottom_start)

        if top_start is not None and top_start == top_end == bottom_end == bottom_start:
            return RuleSet(selector, (Declaration(RADIUS_PROPERTIES["shorthand"], top_start),))

        base: List[Declaration] = []
        _declare(base, RADIUS_PROPERTIES["top-left"], top_start)
        _declare(base, RADIUS_PROPERTIES["top-right"], top_end)
        _declare(base, RADIUS_PROPERTIES["bottom-right"], bottom_end)
        _declare(base, RADIUS_PROPERTIES["bottom-left"], bottom_start)

        override = None
        if top_start != top_end or bottom_start != bottom_end:

            def emit():
                mirrored: List[Declaration] = []
                if top_start != top_end:
                    _mirrored_pair(
                        mirrored, top_start, top_end,
                        RADIUS_PROPERTIES["top-left"], RADIUS_PROPERTIES["top-right"], ZERO,
                    )
                if bottom_start != bottom_end:
                    _mirrored_pair(
                        mirrored, bottom_start, bottom_end,
                        RADIUS_PROPERTIES["bottom-left"], RADIUS_PROPERTIES["bottom-right"], ZERO,
                    )
                return mirrored

            override = self.direction.with_rtl_override(selector, emit)

        return RuleSet(selector, tuple(base), override)

    def text_align(self, value, modifier: str = "", selector: str = "&") -> RuleSet:
        if not isinstance(modifier, str):
            raise InvalidSideValue("modifier", modifier, "expected a string suffix")
        keyword = coerce_side("value", value)
        if not isinstance(keyword, Keyword):
            raise InvalidSideValue("value", value, "text-align takes a keyword")
        modifier = modifier.strip()

        physical = TEXT_ALIGN_PHYSICAL.get(keyword.name)
        if physical is None:
            return RuleSet(selector, (Declaration("text-align", keyword, modifier),))
        return RuleSet(
            selector,
            (
                Declaration("text-align", Keyword(physical)),
                Declaration("text-align", keyword, modifier),
            ),
        )
