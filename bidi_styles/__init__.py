from .breakpoints import BreakpointEntry, BreakpointTable, load_breakpoint_table, validate
from .direction import DirectionResolver
from .errors import InvalidSideValue, InvalidValue, StyleError, StyleWarning, UnknownBreakpoint
from .logical import LogicalPropertyResolver
from .rules import Declaration, MediaCondition, RuleSet, ScopedRegion, render_region, render_rule_set
from .values import Keyword, Length

__all__ = [
    "BreakpointEntry",
    "BreakpointTable",
    "Declaration",
    "DirectionResolver",
    "InvalidSideValue",
    "InvalidValue",
    "Keyword",
    "Length",
    "LogicalPropertyResolver",
    "MediaCondition",
    "RuleSet",
    "ScopedRegion",
    "StyleError",
    "StyleWarning",
    "UnknownBreakpoint",
    "load_breakpoint_table",
    "render_region",
    "render_rule_set",
    "validate",
]
