from __future__ import annotations

from typing import Dict, Iterator, Optional, Union

from .schema import AddedBehavior, BehaviorEntry, MemberKey, ReplacementBehavior


class BehaviorStore:
    """Per-mock store of custom behaviors: at most one replacement and one
    addition per member. Registering again for a member overwrites."""

    def __init__(self) -> None:
        self._replacements: Dict[MemberKey, ReplacementBehavior] = {}
        self._additions: Dict[MemberKey, AddedBehavior] = {}

    def set_replacement(self, entry: ReplacementBehavior) -> None:
        self._replacements[entry.member_key] = entry

    def set_addition(self, entry: AddedBehavior) -> None:
        self._additions[entry.member_key] = entry

    def replacement_for(self, key: MemberKey) -> Optional[ReplacementBehavior]:
        return self._replacements.get(key)

    def addition_for(self, key: MemberKey) -> Optional[AddedBehavior]:
        return self._additions.get(key)

    def remove(self, entry: BehaviorEntry) -> bool:
        """Remove ``entry`` if it is still the one stored for its member.

        An entry registered while an older one was running (e.g. from inside
        the older behavior) must survive the older entry's run-once cleanup.
        """
        mapping: Dict[MemberKey, Union[ReplacementBehavior, AddedBehavior]]
        if isinstance(entry, AddedBehavior):
            mapping = self._additions
        else:
            mapping = self._replacements

        if mapping.get(entry.member_key) is entry:
            del mapping[entry.member_key]
            return True
        return False

    def clear(self) -> None:
        self._replacements.clear()
        self._additions.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._replacements or key in self._additions

    def __len__(self) -> int:
        return len(self._replacements) + len(self._additions)

    def __iter__(self) -> Iterator[BehaviorEntry]:
        yield from self._replacements.values()
        yield from self._additions.values()
