"""Logger factory for poorman_mocks.

Usage:
    from poorman_mocks.log import get_logger

    log = get_logger(__name__)
    log.debug("behavior.dispatch", mock="GreeterMock", member="greet")

Only debug events are emitted; configuring structlog (renderers, levels,
handlers) is left to the application or test session. Loggers stay lazy, so
configuration applied after import still takes effect.
"""

from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str, **context: Any) -> Any:
    """Return a structlog logger bound to a component name and context."""
    return structlog.get_logger(name, component=name, **context)
