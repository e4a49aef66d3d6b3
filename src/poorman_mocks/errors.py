"""
Errors raised by the mocks themselves.

Anything a configured behavior (or a mock's default logic) raises is NOT
represented here: those exceptions pass through dispatch untouched, so tests
can assert on the exact exception object they arranged to be thrown.
"""

from __future__ import annotations

from typing import Optional


class MockError(Exception):
    """Base class for errors raised by the mock machinery."""


class ConstructionError(MockError, ValueError):
    """A configuration call was malformed (not callable, blank member, ...)."""


MISMATCH_TEMPLATE = (
    "The mock could not execute the custom behavior that was configured for "
    "the following operation: {member}. This is because the operation is "
    "being called with the wrong number or type of arguments ({reason}). "
    "To fix this, make sure that:\n\n"
    "1) {qualified} is calling {entry_point} with the same arguments passed "
    "to the operation, in the same order.\n\n"
    "2) the call that sets custom behavior for {qualified} is passing a "
    "function or lambda with the same signature as {member}. {location}."
)


class ArgumentMismatchError(MockError, TypeError):
    """A configured behavior cannot accept the arguments its member supplies.

    Raised at dispatch time, which may be far from where the behavior was
    configured, so the message carries the member, the mock type and a hint
    of where the behavior was defined.
    """

    def __init__(
        self,
        member_name: str,
        mock_name: str,
        reason: str,
        location: Optional[str] = None,
        entry_point: str = "run_custom_behavior_or",
    ) -> None:
        self.member_name = member_name
        self.mock_name = mock_name
        self.reason = reason
        self.location = location or "The behavior's location is unknown"
        message = MISMATCH_TEMPLATE.format(
            member=member_name,
            qualified=f"{mock_name}.{member_name}",
            entry_point=entry_point,
            reason=reason,
            location=self.location,
        )
        super().__init__(message)
