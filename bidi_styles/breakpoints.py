from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

import structlog

from . import errors
from .errors import InvalidBreakpointTable, StyleWarning, UnknownBreakpoint
from .rules import MediaCondition, RuleSet, ScopedRegion
from .values import Length, parse_length

logger = structlog.get_logger(__name__)

DEFAULT_BREAKPOINTS = "xs:0,sm:576px,md:768px,lg:992px,xl:1200px"

Emit = Callable[[], Union[RuleSet, Iterable[RuleSet]]]


@dataclass(frozen=True)
class BreakpointEntry:
    name: str
    min_width: Length


def _pixels(width: Length) -> Length:
    # same rule as numbers given to from_mapping
    if width.unit == "":
        return Length(width.value, "px")
    return width


def _emit(emit: Emit) -> Tuple[RuleSet, ...]:
    content = emit()
    if isinstance(content, RuleSet):
        return (content,)
    return tuple(content)


class BreakpointTable:
    """Ordered, immutable sequence of named minimum widths."""

    def __init__(self, entries: Sequence[BreakpointEntry]):
        self._entries: Tuple[BreakpointEntry, ...] = tuple(entries)
        self._index = {}
        for position, entry in enumerate(self._entries):
            if entry.name in self._index:
                raise InvalidBreakpointTable(f"Duplicate breakpoint name: {entry.name!r}")
            self._index[entry.name] = position

    @classmethod
    def from_mapping(cls, mapping: Union[Mapping, Iterable[Tuple[str, object]]]) -> "BreakpointTable":
        items = mapping.items() if isinstance(mapping, Mapping) else mapping
        return cls([BreakpointEntry(str(name), parse_length(width)) for name, width in items])

    @classmethod
    def parse(cls, text: str) -> "BreakpointTable":
        """Build a table from ``"xs:0,sm:576px,..."``; bare numbers are pixels."""
        pairs = []
        for chunk in text.split(","):
            chunk = chunk.strip()
            if not chunk:
                continue
            name, sep, width = chunk.partition(":")
            if not sep or not name.strip():
                raise InvalidBreakpointTable(f"Malformed breakpoint entry: {chunk!r}")
            pairs.append((name.strip(), _pixels(parse_length(width.strip()))))
        return cls.from_mapping(pairs)

    @property
    def entries(self) -> Tuple[BreakpointEntry, ...]:
        return self._entries

    def names(self) -> List[str]:
        return [entry.name for entry in self._entries]

    def __iter__(self) -> Iterator[BreakpointEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name) -> bool:
        return name in self._index

    def _position(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise UnknownBreakpoint(name) from None

    def width(self, name: str) -> Length:
        return self._entries[self._position(name)].min_width

    def min_width(self, name: str) -> Optional[Length]:
        width = self.width(name)
        return None if width.is_zero() else width

    def next_name(self, name: str) -> Optional[str]:
        position = self._position(name) + 1
        if position < len(self._entries):
            return self._entries[position].name
        return None

    def max_width(self, name: str) -> Optional[Length]:
        following = self.next_name(name)
        if following is None:
            return None
        return self.width(following).minus_resolution()

    def infix(self, name: str) -> str:
        return "" if self.min_width(name) is None else f"-{name}"

    def scope_up(self, name: str, emit: Emit) -> ScopedRegion:
        lower = self.min_width(name)
        condition = MediaCondition(min_width=lower) if lower is not None else None
        return ScopedRegion(condition, _emit(emit))

    def scope_down(self, name: str, emit: Emit) -> ScopedRegion:
        upper = self.max_width(name)
        condition = MediaCondition(max_width=upper) if upper is not None else None
        return ScopedRegion(condition, _emit(emit))

    def scope_between(self, lower: str, upper: str, emit: Emit) -> ScopedRegion:
        low = self.min_width(lower)
        high = self.max_width(upper)
        if low is None and high is None:
            return ScopedRegion(None, _emit(emit))
        return ScopedRegion(MediaCondition(low, high), _emit(emit))

    def scope_only(self, name: str, emit: Emit) -> ScopedRegion:
        return self.scope_between(name, name, emit)

    def validate(self) -> List[StyleWarning]:
        return validate(self)

    def __repr__(self) -> str:
        inner = ", ".join(f"{e.name}: {e.min_width}" for e in self._entries)
        return f"BreakpointTable({{{inner}}})"


def validate(table: BreakpointTable) -> List[StyleWarning]:
    """Check ascending order, a zero first width and that every upper bound
    can be computed. Never raises."""
    entries = table.entries
    if not entries:
        return [StyleWarning(errors.EMPTY_TABLE, "Breakpoint table has no entries")]

    found = []
    for previous, current in zip(entries, entries[1:]):
        if not previous.min_width.comparable_with(current.min_width):
            found.append(
                StyleWarning(
                    errors.NOT_COMPARABLE,
                    f"Breakpoint {current.name!r} ({current.min_width}) cannot be compared "
                    f"with {previous.name!r} ({previous.min_width})",
                    current.name,
                )
            )
        elif not previous.min_width < current.min_width:
            found.append(
                StyleWarning(
                    errors.NOT_ASCENDING,
                    f"Breakpoint {current.name!r} ({current.min_width}) is not greater than "
                    f"{previous.name!r} ({previous.min_width})",
                    current.name,
                )
            )

    # every width after the first is the upper bound of its predecessor
    for entry in entries[1:]:
        if not entry.min_width.has_resolution():
            found.append(
                StyleWarning(
                    errors.NO_RESOLUTION,
                    f"Breakpoint {entry.name!r} ({entry.min_width}) has no known resolution; "
                    "max-width queries below it will fail",
                    entry.name,
                )
            )

    first = entries[0]
    if not first.min_width.is_zero():
        found.append(
            StyleWarning(
                errors.NONZERO_START,
                f"First breakpoint {first.name!r} should start at 0, got {first.min_width}",
                first.name,
            )
        )
    return found


def load_breakpoint_table(source: Union[str, Mapping, Iterable[Tuple[str, object]], None] = None) -> BreakpointTable:
    if source is None:
        source = DEFAULT_BREAKPOINTS
    if isinstance(source, str):
        table = BreakpointTable.parse(source)
    else:
        table = BreakpointTable.from_mapping(source)

    for warning in validate(table):
        logger.warning("breakpoint_table_warning", kind=warning.kind, breakpoint=warning.subject, detail=warning.message)
    return table


def default_table() -> BreakpointTable:
    return BreakpointTable.parse(DEFAULT_BREAKPOINTS)

