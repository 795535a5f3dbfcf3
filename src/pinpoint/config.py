"""ContextVar-based debug configuration for pinpoint.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The Debugger reads the active config once at the start of each render.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from pinpoint.config import DebugConfig, debug_config_context

    with debug_config_context(DebugConfig(max_report_width=60)):
        print(format_cause(node))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable rendering and reporting configuration.

    Attributes:
        statement_terminator: Separator emitted after statements that do not
            close themselves, and in place of a missing loop/if body
        caret: Character used to underline the cause in reports
        max_report_width: Maximum width of the expression line in reports;
            longer expressions are windowed around the cause. None = unlimited

    """

    statement_terminator: str = ";"
    caret: str = "^"
    max_report_width: int | None = None

    def __post_init__(self) -> None:
        if len(self.caret) != 1:
            msg = f"caret must be a single character, got {self.caret!r}"
            raise ValueError(msg)
        if self.max_report_width is not None and self.max_report_width < 8:
            msg = f"max_report_width must be at least 8, got {self.max_report_width}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "DebugConfig":
        """Create DebugConfig from dictionary.

        Only includes keys that are valid DebugConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> DebugConfig.from_dict({"caret": "~", "colour": "red"}).caret
            '~'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: DebugConfig = DebugConfig()

_debug_config: ContextVar[DebugConfig] = ContextVar(
    "debug_config",
    default=_DEFAULT_CONFIG,
)


def get_debug_config() -> DebugConfig:
    """Get current debug configuration (thread-local)."""
    return _debug_config.get()


def set_debug_config(config: DebugConfig) -> None:
    """Set debug configuration for current context."""
    _debug_config.set(config)


def reset_debug_config() -> None:
    """Reset to default configuration."""
    _debug_config.set(_DEFAULT_CONFIG)


@contextmanager
def debug_config_context(config: DebugConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with debug_config_context(DebugConfig(statement_terminator=" ;")):
        ...     text = render(script)
        >>> # Automatically reset to previous config

    """
    previous = _debug_config.get()
    _debug_config.set(config)
    try:
        yield
    finally:
        _debug_config.set(previous)


__all__ = [
    "DebugConfig",
    "debug_config_context",
    "get_debug_config",
    "reset_debug_config",
    "set_debug_config",
]
