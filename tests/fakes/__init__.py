"""
Hand-written doubles used across the test suite.

MessageBoardMock is a poor man's mock of MessageBoard: every member is a
single run_custom_behavior_or() call, except a few deliberately broken members
that exercise argument validation.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from poorman_mocks import Mock, MockConfig


MESSAGES = (
    "Sssmokin'!!!",
    "Sssomebody stop me!!!",
    "It's party time!",
)


class MessageBoard(ABC):
    @property
    @abstractmethod
    def default_message(self) -> str: ...

    @abstractmethod
    def __getitem__(self, id: int) -> str: ...

    @abstractmethod
    def show_message(self) -> None: ...

    @abstractmethod
    def show_message_by_id(self, id: int) -> None: ...

    @abstractmethod
    def show_message_parts(
        self, id: int, second: Optional[str], third: str, fourth: str
    ) -> None: ...

    @abstractmethod
    def get_message(self) -> str: ...

    @abstractmethod
    def get_message_by_id(self, id: int) -> str: ...


class MessageBoardMock(Mock, MessageBoard):
    # Members name themselves through the class, never through self: self.x
    # would resolve to a subclass override and dispatch under its key.

    def __init__(self, config: Optional[MockConfig] = None) -> None:
        super().__init__(config)
        self.shown: List[str] = []

    @property
    def default_message(self) -> str:
        return self.run_custom_behavior_or(
            lambda: self[0], MessageBoardMock.default_message
        )

    def __getitem__(self, id: int) -> str:
        return self.run_custom_behavior_or(
            lambda: MESSAGES[-1] if id >= len(MESSAGES) else MESSAGES[id],
            MessageBoardMock.__getitem__,
            id,
        )

    def show_message(self) -> None:
        self.run_custom_behavior_or(
            lambda: self.shown.append(self.get_message()),
            MessageBoardMock.show_message,
        )

    def show_message_by_id(self, id: int) -> None:
        self.run_custom_behavior_or(
            lambda: self.shown.append(self[id]),
            MessageBoardMock.show_message_by_id,
            id,
        )

    def show_message_parts(
        self, id: int, second: Optional[str], third: str, fourth: str
    ) -> None:
        self.run_custom_behavior_or(
            lambda: self.shown.append(
                self[id] + (second or "") + third + fourth
            ),
            MessageBoardMock.show_message_parts,
            id,
            second,
            third,
            fourth,
        )

    def get_message(self) -> str:
        return self.run_custom_behavior_or(
            lambda: self[0], MessageBoardMock.get_message
        )

    def get_message_by_id(self, id: int) -> str:
        return self.run_custom_behavior_or(
            lambda: self[id], MessageBoardMock.get_message_by_id, id
        )

    # Broken on purpose

    def get_message_with_invalid_arg_count_pass_thru(self, id: int) -> str:
        # 'id' is not passed on
        return self.run_custom_behavior_or(
            lambda: self[id],
            MessageBoardMock.get_message_with_invalid_arg_count_pass_thru,
        )

    def get_message_with_excess_args_passed_thru(self, id: int) -> str:
        return self.run_custom_behavior_or(
            lambda: self[id],
            MessageBoardMock.get_message_with_excess_args_passed_thru,
            id,
            "excess",
            3.5,
        )

    def get_message_with_invalid_arg_pass_thru(self, id: int) -> str:
        return self.run_custom_behavior_or(
            lambda: self[id],
            MessageBoardMock.get_message_with_invalid_arg_pass_thru,
            str(id),
        )


class LoudMessageBoardMock(MessageBoardMock):
    """Same member names as MessageBoardMock, different members."""

    def get_message_by_id(self, id: int) -> str:
        return self.run_custom_behavior_or(
            lambda: self[id].upper(), LoudMessageBoardMock.get_message_by_id, id
        )


class EchoingMessageBoardMock(MessageBoardMock):
    """Overrides get_message_by_id by delegating to the base member."""

    def get_message_by_id(self, id: int) -> str:
        base = super().get_message_by_id
        return self.run_custom_behavior_or(
            lambda: base(id) + " " + base(id),
            EchoingMessageBoardMock.get_message_by_id,
            id,
        )


def record_flag(flag: bool) -> None:
    """A public function used as a (mis)configured behavior."""


def tag_message(tag: str, id: int) -> str:
    """A public function meant to be partially applied."""
    return f"{tag}:{id}"
