"""Package-scoped loggers.

Every pinpoint logger lives under the ``pinpoint`` namespace so an
application can turn render tracing on with a single
``logging.getLogger("pinpoint").setLevel(logging.DEBUG)``. Handlers are
never installed here.
"""

from __future__ import annotations

import logging

_NAMESPACE = "pinpoint"


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, nested under ``pinpoint.`` unless it already is.

    >>> get_logger("debugger").name
    'pinpoint.debugger'
    >>> get_logger("pinpoint.report").name
    'pinpoint.report'
    """
    if name != _NAMESPACE and not name.startswith(f"{_NAMESPACE}."):
        name = f"{_NAMESPACE}.{name}"
    return logging.getLogger(name)
