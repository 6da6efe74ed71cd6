from dataclasses import dataclass
from typing import Any, Dict, Optional


class StyleError(Exception):
    """Base class for contract violations raised by the resolvers."""


class UnknownBreakpoint(StyleError, KeyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown breakpoint: {name!r}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidValue(StyleError, ValueError):
    pass


class InvalidSideValue(InvalidValue):
    def __init__(self, parameter: str, value: Any, reason: str = "not a single CSS length or keyword"):
        self.parameter = parameter
        self.value = value
        super().__init__(f"Invalid value for {parameter!r}: {value!r} ({reason})")


class InvalidBreakpointTable(StyleError, ValueError):
    pass


# Warning kinds
NOT_COMPARABLE = "not_comparable"
NOT_ASCENDING = "not_ascending"
NONZERO_START = "nonzero_start"
NO_RESOLUTION = "no_resolution"
EMPTY_TABLE = "empty"
DEPRECATED_PARAMETER = "deprecated_parameter"


@dataclass(frozen=True)
class StyleWarning:
    kind: str
    message: str
    subject: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": self.message, "subject": self.subject}
