"""
Behavior dispatch: decides what runs when a mock member is called.

    addition (before)  ->  replacement OR default  ->  addition (after)

Every configured behavior runs inside a scope that drops it from the store
once it has run, when it was registered as run-once, whether it returned or
raised. Exceptions from behaviors and defaults propagate untouched.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Sequence

from ..config import MockConfig
from ..errors import ArgumentMismatchError
from ..log import get_logger
from .location import describe_location
from .schema import BehaviorEntry, MemberKey
from .store import BehaviorStore


log = get_logger(__name__)


class BehaviorDispatcher:
    def __init__(
        self,
        store: BehaviorStore,
        owner_name: str,
        config: Optional[MockConfig] = None,
    ) -> None:
        self._store = store
        self._owner_name = owner_name
        self._config = config or MockConfig()

    @property
    def store(self) -> BehaviorStore:
        return self._store

    def run(
        self,
        default: Callable[[], Any],
        member_key: MemberKey,
        args: Sequence[Any] = (),
    ) -> Any:
        """Run the behaviors configured for ``member_key`` or ``default``.

        ``args`` must be exactly the arguments the member received, in
        declaration order; they are checked against each configured
        behavior's contract. ``default`` is called with no arguments and is
        never checked.
        """
        args = tuple(args)
        addition = self._store.addition_for(member_key)
        replacement = self._store.replacement_for(member_key)

        log.debug(
            "behavior.dispatch",
            mock=self._owner_name,
            member=str(member_key),
            added=addition is not None,
            replaced=replacement is not None,
        )

        if addition is not None and not addition.run_after:
            self._invoke(addition, args)

        if replacement is not None:
            result = self._invoke(replacement, args)
        else:
            result = default()

        if addition is not None and addition.run_after:
            self._invoke(addition, args)

        return result

    def _invoke(self, entry: BehaviorEntry, args: tuple) -> Any:
        with self._scoped(entry):
            if self._config.check_arguments:
                reason = entry.contract.mismatch(
                    args, strict_none=self._config.strict_none
                )
                if reason is not None:
                    raise ArgumentMismatchError(
                        member_name=entry.member_name,
                        mock_name=self._owner_name,
                        reason=reason,
                        location=describe_location(entry.behavior),
                    )
            return entry.invoke(args)

    @contextmanager
    def _scoped(self, entry: BehaviorEntry) -> Iterator[BehaviorEntry]:
        try:
            yield entry
        finally:
            if entry.run_once and self._store.remove(entry):
                log.debug(
                    "behavior.expired",
                    mock=self._owner_name,
                    member=str(entry.member_key),
                    kind=type(entry).__name__,
                )
