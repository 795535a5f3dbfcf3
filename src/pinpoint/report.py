"""Cause reports for error messages.

Formats the rebuilt expression with a caret underline beneath the cause:

    >>> print(format_cause(divisor))
    x / (a - a)
        ^^^^^^^

Long expressions are windowed around the cause when the active DebugConfig
sets ``max_report_width``; clipped ends are marked with ``...``.

Thread Safety:
    Pure functions; each call uses its own Debugger.

"""

from pinpoint.config import DebugConfig, debug_config_context, get_debug_config
from pinpoint.debugger import Debugger
from pinpoint.protocols import DebuggableNode

ELLIPSIS = "..."


def format_cause(node: DebuggableNode | None, *, config: DebugConfig | None = None) -> str:
    """Render the expression ``node`` belongs to and underline ``node``.

    Args:
        node: The cause to underline; None yields ""
        config: Config for this report (defaults to the active one)

    Returns:
        Two lines (expression, carets), or just the expression when the
        cause could not be located.

    """
    if node is None:
        return ""
    if config is None:
        config = get_debug_config()

    dbg = Debugger()
    with debug_config_context(config):
        found = dbg.debug(node)
    if not found:
        return dbg.data()

    text, start, end = clip(dbg.data(), dbg.start(), dbg.end(), config.max_report_width)
    underline = " " * start + config.caret * max(end - start, 1)
    return f"{text}\n{underline}"


def clip(text: str, start: int, end: int, width: int | None) -> tuple[str, int, int]:
    """Window ``text`` to ``width`` characters, keeping ``[start, end)`` in view.

    Returns the clipped text and the span shifted into it. A cause wider
    than the window is cut at its end.

    Example:
        >>> clip("0123456789abcdefghij", 10, 12, 12)
        ('...89abcd...', 5, 7)

    """
    if width is None or len(text) <= width:
        return text, start, end

    budget = width - 2 * len(ELLIPSIS)
    if end - start >= budget:
        lo = start
    else:
        lo = start - (budget - (end - start)) // 2
        lo = max(0, min(lo, len(text) - budget))
    hi = lo + budget

    prefix = ELLIPSIS if lo > 0 else ""
    suffix = ELLIPSIS if hi < len(text) else ""
    clipped = f"{prefix}{text[lo:hi]}{suffix}"
    return clipped, start - lo + len(prefix), min(end, hi) - lo + len(prefix)


__all__ = ["ELLIPSIS", "clip", "format_cause"]
