"""
Settings for the bidi-styles service.

Values come from the environment (a local ``.env`` file is honoured) and are
frozen once loaded; resolvers receive them by injection.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .breakpoints import DEFAULT_BREAKPOINTS
from .direction import DEFAULT_RTL_SELECTOR

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (got {raw!r})")


@dataclass(frozen=True)
class Settings:
    rtl_enabled: bool = field(default_factory=lambda: env_flag("BIDI_RTL_ENABLED", True))
    rtl_selector: str = field(default_factory=lambda: os.getenv("BIDI_RTL_SELECTOR", DEFAULT_RTL_SELECTOR))
    breakpoints: str = field(default_factory=lambda: os.getenv("BIDI_BREAKPOINTS", DEFAULT_BREAKPOINTS))
    log_level: str = field(default_factory=lambda: os.getenv("BIDI_LOG_LEVEL", "INFO").upper())


def load_settings() -> Settings:
    load_dotenv()
    return Settings()
