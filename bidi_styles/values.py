import xml.dom
from dataclasses import dataclass
from typing import Optional, Union

from cssutils.css import PropertyValue

from .errors import InvalidSideValue, InvalidValue

_NUMERIC_TYPES = ("DIMENSION", "NUMBER", "PERCENTAGE")

# Smallest step below a width in the given unit; em/rem assume a 16px root.
RESOLUTION = {"": 1, "px": 1, "em": 0.0625, "rem": 0.0625}


def _number(value: float) -> Union[int, float]:
    value = float(value)
    return int(value) if value.is_integer() else value


@dataclass(frozen=True)
class Length:
    value: Union[int, float]
    unit: str = "px"

    def __post_init__(self):
        # zero is the same length in every unit
        if self.value == 0 and self.unit:
            object.__setattr__(self, "unit", "")

    def is_zero(self) -> bool:
        return self.value == 0

    def comparable_with(self, other: "Length") -> bool:
        return self.unit == other.unit or self.is_zero() or other.is_zero()

    def __lt__(self, other: "Length") -> bool:
        if not self.comparable_with(other):
            raise InvalidValue(f"Cannot compare {self} with {other}")
        return self.value < other.value

    def has_resolution(self) -> bool:
        return self.unit in RESOLUTION

    def minus_resolution(self) -> "Length":
        """Return the largest width strictly below this one."""
        if not self.has_resolution():
            raise InvalidValue(f"No resolution known for unit {self.unit!r} in {self}")
        return Length(_number(self.value - RESOLUTION[self.unit]), self.unit)

    def __str__(self) -> str:
        if self.is_zero():
            return "0"
        return f"{self.value}{self.unit}"


@dataclass(frozen=True)
class Keyword:
    name: str

    def __str__(self) -> str:
        return self.name


Value = Union[Length, Keyword]

AUTO = Keyword("auto")
INITIAL = Keyword("initial")
ZERO = Length(0, "")


def parse_value(text: str) -> Value:
    """Parse a single CSS value (``576px``, ``.25rem``, ``auto``) with cssutils."""
    text = text.strip()
    if not text:
        raise InvalidValue("Empty CSS value")
    try:
        items = list(PropertyValue(cssText=text))
    except xml.dom.DOMException as e:
        raise InvalidValue(f"Unparsable CSS value {text!r}: {e}") from e
    if len(items) != 1:
        raise InvalidValue(f"Expected a single CSS value, got {text!r}")

    item = items[0]
    if item.type in _NUMERIC_TYPES:
        unit = item.dimension or ""
        if item.type == "PERCENTAGE":
            unit = "%"
        return Length(_number(item.value), unit)
    if item.type == "IDENT":
        return Keyword(item.value)
    # calc(), var() and friends stay opaque
    return Keyword(item.cssText)


def parse_length(text: Union[str, int, float, Length]) -> Length:
    if isinstance(text, Length):
        return text
    if isinstance(text, bool):
        raise InvalidValue(f"Expected a CSS length, got {text!r}")
    if isinstance(text, (int, float)):
        return Length(_number(text), "px" if text else "")
    value = parse_value(str(text))
    if not isinstance(value, Length):
        raise InvalidValue(f"Expected a CSS length, got {text!r}")
    return value


def coerce_side(parameter: str, value) -> Optional[Value]:
    """Normalise a caller-supplied side value, failing eagerly on bad input."""
    if value is None or isinstance(value, (Length, Keyword)):
        return value
    if isinstance(value, bool):
        raise InvalidSideValue(parameter, value, "booleans are not CSS values")
    if isinstance(value, (int, float)):
        return parse_length(value)
    if isinstance(value, str):
        try:
            return parse_value(value)
        except InvalidValue as e:
            raise InvalidSideValue(parameter, value, str(e)) from e
    raise InvalidSideValue(parameter, value, f"unsupported type {type(value).__name__}")
