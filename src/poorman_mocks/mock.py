"""
Mock: the base class for hand-written test doubles.

A poor man's mock of an interface is a class deriving from it that implements
default behavior good enough for most tests. Deriving from Mock as well lets a
single test add to, or replace, the behavior of any member on the fly instead
of writing yet another double:

    class GreeterMock(Mock, Greeter):
        def greet(self) -> str:
            return self.run_custom_behavior_or(lambda: "Howdy!", GreeterMock.greet)

        def show(self, id: int) -> None:
            self.run_custom_behavior_or(
                lambda: self.shown.append(id), GreeterMock.show, id
            )

    mock = GreeterMock()
    mock.set_behavior(mock.greet, lambda: "Hey!")
    mock.add_behavior(mock.show, lambda id: calls.append(id)).with_options(run_once=True)

Each overridable member's body is a single call to run_custom_behavior_or(),
passing its default logic, itself, and the arguments it received in order.
A member names itself through its class (GreeterMock.greet), not through
self: self.greet resolves to the most derived override, so an override that
delegates to super() would dispatch twice under the override's key.
Properties are configured through the class as well (GreeterMock.name), since
mock.name reads the property.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from .config import MockConfig
from .errors import ConstructionError
from .kernel.contract import ArgumentContract
from .kernel.dispatch import BehaviorDispatcher
from .kernel.resolver import resolve_member_key
from .kernel.schema import AddedBehavior, ReplacementBehavior
from .kernel.store import BehaviorStore
from .log import get_logger


log = get_logger(__name__)


class Mock:
    """Base class for mocks whose members can be customized at test time."""

    def __init__(self, config: Optional[MockConfig] = None) -> None:
        self._mock_config = config
        self._mock_dispatcher: Optional[BehaviorDispatcher] = None

    # Subclasses mixing Mock into an interface sometimes skip
    # super().__init__(), so everything below is created lazily.

    @property
    def mock_config(self) -> MockConfig:
        config = self.__dict__.get("_mock_config")
        if config is None:
            config = MockConfig.from_env()
            self._mock_config = config
        return config

    @property
    def behaviors(self) -> BehaviorStore:
        """The store of behaviors configured on this mock."""
        return self._dispatcher.store

    @property
    def _dispatcher(self) -> BehaviorDispatcher:
        dispatcher = self.__dict__.get("_mock_dispatcher")
        if dispatcher is None:
            dispatcher = BehaviorDispatcher(
                BehaviorStore(), type(self).__name__, self.mock_config
            )
            self._mock_dispatcher = dispatcher
        return dispatcher

    def add_behavior(
        self,
        member: Any,
        behavior: Callable[..., Any],
        run_after: bool = False,
        *,
        arg_types: Optional[Sequence[Any]] = None,
    ) -> AddedBehavior:
        """Run ``behavior`` along with the member's default (or replaced) logic.

        The behavior runs before it unless ``run_after`` is set. It may
        declare fewer parameters than the member; it receives the member's
        leading arguments. Adding again for the same member overwrites.
        """
        key = resolve_member_key(member)
        entry = AddedBehavior(
            behavior=behavior,
            member_key=key,
            contract=self._contract_for(behavior, arg_types),
            run_after=run_after,
        )
        self.behaviors.set_addition(entry)
        log.debug(
            "behavior.added",
            mock=type(self).__name__,
            member=str(key),
            run_after=run_after,
        )
        return entry

    def set_behavior(
        self,
        member: Any,
        behavior: Callable[..., Any],
        *,
        arg_types: Optional[Sequence[Any]] = None,
    ) -> ReplacementBehavior:
        """Run ``behavior`` instead of the member's default logic.

        Whatever ``behavior`` returns (None included) becomes the member's
        result. Setting again for the same member overwrites.
        """
        key = resolve_member_key(member)
        entry = ReplacementBehavior(
            behavior=behavior,
            member_key=key,
            contract=self._contract_for(behavior, arg_types),
        )
        self.behaviors.set_replacement(entry)
        log.debug("behavior.set", mock=type(self).__name__, member=str(key))
        return entry

    def run_custom_behavior_or(
        self,
        default: Callable[[], Any],
        member: Any,
        *args: Any,
    ) -> Any:
        """Run the custom behavior configured for ``member``, or ``default``.

        Meant to be the only statement of an overridable member. ``member`` is
        that member named through its class, ``args`` the arguments it
        received, in the same order.
        """
        return self._dispatcher.run(default, resolve_member_key(member), args)

    def _contract_for(
        self,
        behavior: Callable[..., Any],
        arg_types: Optional[Sequence[Any]],
    ) -> ArgumentContract:
        if not callable(behavior):
            raise ConstructionError("The behavior must be a callable")

        if arg_types is not None:
            contract = ArgumentContract.of(*arg_types)
        else:
            contract = ArgumentContract.from_callable(behavior)

        max_arity = self.mock_config.max_arity
        if max_arity is not None and contract.arity > max_arity:
            raise ConstructionError(
                f"The behavior declares {contract.arity} parameters; at most "
                f"{max_arity} are supported"
            )
        return contract
