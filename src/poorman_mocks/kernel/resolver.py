"""
Member key resolution.

Turns a reference to a mock member into the MemberKey that both the
configuration API and the dispatcher agree on:

    mock.greet                  bound method     -> its function
    GreeterMock.greet           function         -> module.qualname + signature
    GreeterMock.name            property         -> the getter, kind=property
    GreeterMock.__getitem__     indexer          -> kind=indexer
    "greet(id)"                 literal key      -> kind=literal
"""

from __future__ import annotations

import functools
import inspect
import re
from typing import Any, Callable

from ..errors import ConstructionError
from .schema import MemberKey, MemberKind


# "greeting", "Greeter.greet", "Greeter.greet(id)"
_LITERAL_KEY = re.compile(r"[A-Za-z_][\w.]*(\(.*\))?")


def resolve_member_key(member: Any) -> MemberKey:
    """Resolve a member reference (or an explicit literal key) to a MemberKey."""
    if isinstance(member, MemberKey):
        return member

    if isinstance(member, str):
        name = member.strip()
        if name and not _LITERAL_KEY.fullmatch(name):
            raise ConstructionError(
                f"{member!r} is not a member key; pass a property through its "
                "class (MockClass.name), not its value read from an instance"
            )
        return MemberKey(name=name, kind=MemberKind.LITERAL)

    if isinstance(member, property):
        if member.fget is None:
            raise ConstructionError("A write-only property cannot be mocked")
        return _function_key(member.fget, MemberKind.PROPERTY)

    if isinstance(member, (staticmethod, classmethod)):
        member = member.__func__

    if inspect.ismethod(member):
        member = member.__func__

    if isinstance(member, functools.partialmethod):
        member = member.func

    if inspect.isfunction(member):
        kind = MemberKind.INDEXER if member.__name__ == "__getitem__" else MemberKind.METHOD
        return _function_key(member, kind)

    raise ConstructionError(
        f"The reference of type {type(member).__name__} does not identify a "
        "mockable member"
    )


def _function_key(func: Callable[..., Any], kind: MemberKind) -> MemberKey:
    func = inspect.unwrap(func)
    try:
        signature = str(inspect.signature(func))
    except (TypeError, ValueError):
        signature = "(...)"
    return MemberKey(
        name=f"{func.__module__}.{func.__qualname__}",
        kind=kind,
        signature=signature,
    )
