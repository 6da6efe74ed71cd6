import pytest

from bidi_styles.breakpoints import BreakpointTable, DEFAULT_BREAKPOINTS
from bidi_styles.direction import DirectionResolver
from bidi_styles.logical import LogicalPropertyResolver


@pytest.fixture
def table():
    return BreakpointTable.parse(DEFAULT_BREAKPOINTS)


@pytest.fixture
def resolver():
    return LogicalPropertyResolver(DirectionResolver(rtl_enabled=True))


@pytest.fixture
def ltr_only_resolver():
    return LogicalPropertyResolver(DirectionResolver(rtl_enabled=False))


def pairs(rule_set):
    """(property, rendered value) tuples of a rule set's declarations."""
    return [(d.property, d.value_text) for d in rule_set.declarations]
