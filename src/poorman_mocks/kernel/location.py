"""
Where was a behavior defined?

Argument mismatches surface at dispatch time, usually far from the line that
configured the offending behavior. This builds the hint that points back at it.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable


def describe_location(behavior: Callable[..., Any]) -> str:
    """Return a human readable hint about where ``behavior`` lives."""
    if isinstance(behavior, functools.partial):
        return describe_location(behavior.func)

    func = behavior.__func__ if inspect.ismethod(behavior) else behavior
    code = getattr(func, "__code__", None)
    module = getattr(func, "__module__", None) or type(behavior).__module__
    qualname = getattr(func, "__qualname__", None)

    if code is None or qualname is None:
        name = getattr(func, "__qualname__", None) or type(behavior).__qualname__
        return f"Look for usages of {module}.{name}"

    parts = qualname.split(".")
    anonymous = func.__name__ == "<lambda>" or "<locals>" in parts
    private = func.__name__.startswith("_") and not func.__name__.startswith("__")

    if anonymous or private:
        # Point at the closest named scope that encloses the behavior.
        enclosing = [p for p in parts[:-1] if not p.startswith("<")]
        if "<locals>" in parts:
            enclosing = parts[: parts.index("<locals>")]
        scope = ".".join([module, *enclosing])
        return f"The call is in {scope} ({code.co_filename}:{code.co_firstlineno})"

    return f"Look for usages of {module}.{qualname}"
