from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ConstructionError
from .contract import ArgumentContract


class MemberKind(str, Enum):
    METHOD = "method"
    PROPERTY = "property"
    INDEXER = "indexer"
    LITERAL = "literal"


class MemberKey(BaseModel):
    """Identifies exactly one mockable member of a mock class.

    ``name`` is the fully qualified member name, ``signature`` the text of its
    parameter list. Two keys are equal only when both match.
    """

    name: str
    kind: MemberKind = MemberKind.METHOD
    signature: str = ""

    model_config = ConfigDict(frozen=True)

    def __init__(self, **data: Any) -> None:
        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ConstructionError(
                "A member name must be provided and it must not be empty"
            )
        super().__init__(**data)

    @property
    def member_name(self) -> str:
        """Short member name (last dotted segment) for messages."""
        return self.name.rsplit(".", 1)[-1]

    def __str__(self) -> str:
        return f"{self.name}{self.signature}"


class BehaviorOptions(BaseModel):
    """Run options of a configured behavior, mutable after registration."""

    run_once: bool = False

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    def with_options(
        self,
        setter: Optional[Callable[[Any], Any]] = None,
        **options: Any,
    ) -> "BehaviorOptions":
        """Apply options and return self, so configuration calls can chain.

        Example:
            mock.add_behavior(mock.show, record).with_options(run_once=True)
            mock.set_behavior(mock.greet, hey).with_options(
                lambda o: setattr(o, "run_once", True)
            )
        """
        if setter is not None:
            setter(self)
        allowed = self.option_names()
        for name, value in options.items():
            if name not in allowed:
                raise ConstructionError(
                    f"Unknown behavior option '{name}'; expected one of "
                    f"{sorted(allowed)}"
                )
            setattr(self, name, value)
        return self

    @classmethod
    def option_names(cls) -> Tuple[str, ...]:
        return tuple(
            name for name, info in cls.model_fields.items() if not info.frozen
        )


class BehaviorEntry(BehaviorOptions):
    """A custom behavior bound to the member it customizes."""

    behavior: Callable[..., Any] = Field(frozen=True)
    member_key: MemberKey = Field(frozen=True)
    contract: ArgumentContract = Field(default_factory=ArgumentContract, frozen=True)

    def __init__(self, **data: Any) -> None:
        if not callable(data.get("behavior")):
            raise ConstructionError("The behavior must be a callable")
        if not isinstance(data.get("member_key"), MemberKey):
            raise ConstructionError("A member key must be provided")
        super().__init__(**data)

    @property
    def member_name(self) -> str:
        return self.member_key.member_name

    def invoke(self, args: Tuple[Any, ...]) -> Any:
        """Call the behavior with the arguments its contract accepts."""
        return self.behavior(*self.contract.forward(args))


class ReplacementBehavior(BehaviorEntry):
    """Runs instead of the member's default behavior; its result is returned."""


class AddedBehavior(BehaviorEntry):
    """Runs along with the default (or replacement) behavior."""

    run_after: bool = False
