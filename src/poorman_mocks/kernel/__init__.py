"""
Kernel: the machinery behind Mock.

- schema: member keys and behavior entries
- contract: argument contracts and their validation
- resolver: member reference -> MemberKey
- store: per-mock behavior store
- dispatch: what runs when a mock member is called
- location: where a misconfigured behavior was defined
"""
from .contract import ArgumentContract
from .schema import (
    AddedBehavior,
    BehaviorEntry,
    BehaviorOptions,
    MemberKey,
    MemberKind,
    ReplacementBehavior,
)
from .resolver import resolve_member_key
from .store import BehaviorStore
from .dispatch import BehaviorDispatcher
from .location import describe_location

__all__ = [
    # Contract
    "ArgumentContract",
    # Schema
    "AddedBehavior",
    "BehaviorEntry",
    "BehaviorOptions",
    "MemberKey",
    "MemberKind",
    "ReplacementBehavior",
    # Resolver
    "resolve_member_key",
    # Store
    "BehaviorStore",
    # Dispatch
    "BehaviorDispatcher",
    "describe_location",
]
