import re
from collections import OrderedDict
from typing import Dict, List, Optional, Tuple

from .breakpoints import BreakpointTable
from .logical import LogicalPropertyResolver
from .rules import RuleSet

# Bootstrap spacer scale ($spacer = 1rem)
SPACERS = {"0": "0", "1": ".25rem", "2": ".5rem", "3": "1rem", "4": "1.5rem", "5": "3rem"}

SPACING_PROPERTIES = {"m": "margin", "p": "padding"}

SPACING_SIDES = {
    "": ("top", "end", "bottom", "start"),
    "t": ("top",),
    "b": ("bottom",),
    "s": ("start",),
    "e": ("end",),
    "x": ("start", "end"),
    "y": ("top", "bottom"),
}

POSITION_OFFSETS = {"0": "0", "50": "50%", "100": "100%"}

RADII = {"0": "0", "1": ".25rem", "2": ".375rem", "3": ".5rem", "4": "1rem", "5": "2rem"}
DEFAULT_RADIUS = RADII["2"]

ROUNDED_CORNERS = {
    None: ("top_start", "top_end", "bottom_end", "bottom_start"),
    "top": ("top_start", "top_end"),
    "end": ("top_end", "bottom_end"),
    "bottom": ("bottom_end", "bottom_start"),
    "start": ("top_start", "bottom_start"),
}

SPACING_CLASS = re.compile(r"^(?P<prop>[mp])(?P<side>[tbsexy]?)-(?:(?P<bp>[a-z0-9]+)-)?(?P<size>[0-5]|auto)$")
POSITION_CLASS = re.compile(r"^(?P<side>top|bottom|start|end)-(?P<size>0|50|100)$")
ROUNDED_CLASS = re.compile(r"^rounded(?:-(?P<corner>top|end|bottom|start))?(?:-(?P<size>[0-5]))?$")
TEXT_ALIGN_CLASS = re.compile(r"^text-(?:(?P<bp>[a-z0-9]+)-)?(?P<align>start|end|center)$")

GroupKey = Tuple[Optional[str], str]


def _breakpoint(name: Optional[str], table: BreakpointTable) -> Tuple[bool, Optional[str]]:
    # Only names with a non-empty infix may appear inside a class name.
    if name is None:
        return True, None
    if name in table and table.infix(name) == f"-{name}":
        return True, name
    return False, None


def parse_utility_class(cls: str, table: BreakpointTable) -> Optional[Tuple[GroupKey, Dict[str, str]]]:
    """Map one utility class to ``((breakpoint, concern), {side: value})``."""
    match = SPACING_CLASS.match(cls)
    if match:
        prop = SPACING_PROPERTIES[match.group("prop")]
        size = match.group("size")
        if size == "auto" and prop == "padding":
            return None
        ok, bp = _breakpoint(match.group("bp"), table)
        if not ok:
            return None
        value = "auto" if size == "auto" else SPACERS[size]
        return (bp, prop), {side: value for side in SPACING_SIDES[match.group("side")]}

    match = POSITION_CLASS.match(cls)
    if match:
        return (None, "position"), {match.group("side"): POSITION_OFFSETS[match.group("size")]}

    match = ROUNDED_CLASS.match(cls)
    if match:
        size = match.group("size")
        value = RADII[size] if size is not None else DEFAULT_RADIUS
        return (None, "border-radius"), {corner: value for corner in ROUNDED_CORNERS[match.group("corner")]}

    match = TEXT_ALIGN_CLASS.match(cls)
    if match:
        ok, bp = _breakpoint(match.group("bp"), table)
        if not ok:
            return None
        return (bp, "text-align"), {"value": match.group("align")}

    return None


def group_classes(classes: List[str], table: BreakpointTable) -> "OrderedDict[GroupKey, Dict[str, str]]":
    groups: "OrderedDict[GroupKey, Dict[str, str]]" = OrderedDict()
    for cls in classes:
        parsed = parse_utility_class(cls, table)
        if parsed is None:
            continue
        key, sides = parsed
        groups.setdefault(key, {}).update(sides)
    return groups


def _resolve_group(concern: str, sides: Dict[str, str], resolver: LogicalPropertyResolver) -> RuleSet:
    if concern in ("padding", "margin"):
        return resolver.spacing(concern, **sides)
    if concern == "position":
        return resolver.position(**sides)
    if concern == "border-radius":
        return resolver.border_radius(**sides)
    return resolver.text_align(sides["value"])


def resolve_classes(
    classes: List[str], resolver: LogicalPropertyResolver, table: BreakpointTable
) -> "OrderedDict[Optional[str], List[RuleSet]]":
    """Resolve logical utility classes into rule sets keyed by breakpoint.

    Sides set by several classes for the same concern are merged first, later
    classes winning, so each concern produces a single rule set.
    """
    resolved: "OrderedDict[Optional[str], List[RuleSet]]" = OrderedDict()
    for (bp, concern), sides in group_classes(classes, table).items():
        resolved.setdefault(bp, []).append(_resolve_group(concern, sides, resolver))
    return resolved
