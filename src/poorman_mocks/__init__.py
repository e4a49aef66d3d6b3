"""
poorman-mocks: hand-written test doubles whose members can be customized
at test time.

Public API re-exports from mock, errors, config and kernel/.
"""
from .config import MockConfig
from .errors import ArgumentMismatchError, ConstructionError, MockError
from .kernel.contract import ArgumentContract
from .kernel.resolver import resolve_member_key
from .kernel.schema import (
    AddedBehavior,
    BehaviorEntry,
    BehaviorOptions,
    MemberKey,
    MemberKind,
    ReplacementBehavior,
)
from .kernel.store import BehaviorStore
from .mock import Mock

__all__ = [
    # Mock
    "Mock",
    "MockConfig",
    # Errors
    "MockError",
    "ConstructionError",
    "ArgumentMismatchError",
    # Behaviors
    "AddedBehavior",
    "ReplacementBehavior",
    "BehaviorEntry",
    "BehaviorOptions",
    "BehaviorStore",
    "ArgumentContract",
    # Member keys
    "MemberKey",
    "MemberKind",
    "resolve_member_key",
]

__version__ = "0.1.0"
