"""
Argument contracts: what a configured behavior is able to receive.

A contract is the ordered list of value descriptors (types) a behavior
declares for its positional parameters. At dispatch time the arguments a mock
member forwards are checked against it, and only the declared positions are
handed to the behavior, so a behavior may take fewer parameters than the
member it customizes.
"""

from __future__ import annotations

import functools
import inspect
import types
import typing
from typing import Any, Callable, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ConstructionError


class ArgumentContract(BaseModel):
    """Ordered descriptors for the positional arguments a behavior accepts."""

    descriptors: Tuple[Any, ...] = Field(default_factory=tuple)
    required: int = 0
    variadic: bool = False

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @classmethod
    def of(cls, *descriptors: Any) -> "ArgumentContract":
        """Build an explicit contract where every descriptor is required."""
        return cls(descriptors=tuple(descriptors), required=len(descriptors))

    @classmethod
    def from_callable(cls, behavior: Callable[..., Any]) -> "ArgumentContract":
        """Capture the contract from a callable's signature and annotations."""
        try:
            signature = inspect.signature(behavior)
        except (TypeError, ValueError):
            # Builtins and some C callables expose no signature: forward
            # everything unchecked.
            return cls(variadic=True)

        hints = _type_hints(behavior)
        descriptors = []
        required = 0
        variadic = False

        for param in signature.parameters.values():
            if param.kind == inspect.Parameter.VAR_POSITIONAL:
                variadic = True
                continue
            if param.kind == inspect.Parameter.VAR_KEYWORD:
                continue
            if param.kind == inspect.Parameter.KEYWORD_ONLY:
                if param.default is inspect.Parameter.empty:
                    raise ConstructionError(
                        f"Behavior parameter '{param.name}' is keyword-only and "
                        "has no default; mock members only pass positional arguments"
                    )
                continue

            annotation = hints.get(param.name, param.annotation)
            if annotation is inspect.Parameter.empty:
                annotation = Any
            elif isinstance(annotation, str):
                raise ConstructionError(
                    f"Cannot resolve annotation {annotation!r} of behavior "
                    f"parameter '{param.name}'; pass arg_types explicitly"
                )
            descriptors.append(annotation)
            if param.default is inspect.Parameter.empty:
                required += 1

        return cls(descriptors=tuple(descriptors), required=required, variadic=variadic)

    @property
    def arity(self) -> int:
        return len(self.descriptors)

    def mismatch(self, args: Sequence[Any], strict_none: bool = True) -> Optional[str]:
        """Return why ``args`` break this contract, or None when they satisfy it.

        Positions beyond the declared descriptors are never checked.
        """
        if len(args) < self.required:
            return f"expected at least {self.required} argument(s), got {len(args)}"

        for index, (value, descriptor) in enumerate(zip(args, self.descriptors)):
            if value is None and not strict_none:
                continue
            if not matches(value, descriptor):
                got = "None" if value is None else type(value).__name__
                return (
                    f"argument {index} expected {describe_type(descriptor)}, "
                    f"got {got}"
                )
        return None

    def forward(self, args: Sequence[Any]) -> Tuple[Any, ...]:
        """Trim ``args`` down to what the behavior declared."""
        if self.variadic:
            return tuple(args)
        return tuple(args[: len(self.descriptors)])


def matches(value: Any, descriptor: Any) -> bool:
    """isinstance() that understands the typing constructs found in annotations."""
    if descriptor is Any or descriptor is object:
        return True
    if descriptor is None or descriptor is type(None):
        return value is None

    if isinstance(descriptor, typing.TypeVar):
        if descriptor.__bound__ is not None:
            return matches(value, descriptor.__bound__)
        if descriptor.__constraints__:
            return any(matches(value, c) for c in descriptor.__constraints__)
        return True

    # typing.NewType
    supertype = getattr(descriptor, "__supertype__", None)
    if supertype is not None:
        return matches(value, supertype)

    origin = typing.get_origin(descriptor)
    if origin is typing.Annotated:
        return matches(value, typing.get_args(descriptor)[0])
    if origin is typing.Union or origin is types.UnionType:
        return any(matches(value, arg) for arg in typing.get_args(descriptor))
    if origin is typing.Literal:
        return value in typing.get_args(descriptor)
    if origin is not None:
        descriptor = origin

    if isinstance(descriptor, type):
        try:
            return isinstance(value, descriptor)
        except TypeError:
            return True

    # Descriptors with no runtime check (forward refs, non-runtime
    # protocols) accept anything.
    return True


def describe_type(descriptor: Any) -> str:
    if descriptor is None or descriptor is type(None):
        return "None"
    if isinstance(descriptor, type) and typing.get_origin(descriptor) is None:
        return descriptor.__name__
    return repr(descriptor)


def _type_hints(behavior: Callable[..., Any]) -> dict:
    # A partial keeps the parameter names of the function it wraps, so that
    # function's hints apply to the parameters left open.
    target = behavior
    while isinstance(target, functools.partial):
        target = target.func
    if not inspect.isroutine(target) and not inspect.isclass(target):
        call = getattr(type(target), "__call__", None)
        if inspect.isfunction(call):
            target = call

    try:
        return typing.get_type_hints(target, include_extras=True)
    except NameError as exc:
        raise ConstructionError(
            f"Cannot resolve the annotations of behavior {behavior!r}: {exc}; "
            "pass arg_types explicitly"
        ) from exc
    except (TypeError, AttributeError):
        return {}
