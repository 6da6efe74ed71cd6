import re
from typing import Callable, Iterable, Optional

from .rules import Declaration, RuleSet

DEFAULT_RTL_SELECTOR = '[dir="rtl"]'


class DirectionResolver:
    """Scopes mirrored declarations under a right-to-left context selector.

    ``rtl_enabled`` is fixed at construction; when it is off no override
    block is ever produced.
    """

    def __init__(self, rtl_enabled: bool = True, rtl_selector: str = DEFAULT_RTL_SELECTOR):
        self._rtl_enabled = bool(rtl_enabled)
        self._rtl_selector = rtl_selector.strip()
        # The context selector must stand as its own compound: `.rtl` matches
        # `.rtl .card` and `.page .rtl > .card` but not `.rtl-card`.
        self._scope_pattern = re.compile(
            r"(?:^|[\s>+~])" + re.escape(self._rtl_selector) + r"(?=$|[\s>+~])"
        )

    @property
    def rtl_enabled(self) -> bool:
        return self._rtl_enabled

    @property
    def rtl_selector(self) -> str:
        return self._rtl_selector

    def _part_in_rtl_scope(self, part: str) -> bool:
        return self._scope_pattern.search(part.strip()) is not None

    def in_rtl_scope(self, selector: str) -> bool:
        return all(self._part_in_rtl_scope(part) for part in selector.split(","))

    def rtl_scope(self, selector: str) -> str:
        parts = []
        for part in selector.split(","):
            part = part.strip()
            if self._part_in_rtl_scope(part):
                parts.append(part)
            else:
                parts.append(f"{self._rtl_selector} {part}")
        return ", ".join(parts)

    def with_rtl_override(
        self, selector: str, emit: Callable[[], Iterable[Declaration]]
    ) -> Optional[RuleSet]:
        if not self._rtl_enabled:
            return None
        return RuleSet(selector=self.rtl_scope(selector), declarations=tuple(emit()))
