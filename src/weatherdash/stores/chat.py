"""
Chat history store. Append-only; cleared only as a whole.
"""

import time
from typing import Callable, Optional, Union

from weatherdash.models.chat import ChatMessage, Role
from weatherdash.stores.base import Store


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class ChatStore(Store):
    name = "chat"

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or _now_ms
        self._last_stamp = 0
        super().__init__()

    def _initial_state(self) -> dict:
        return {"messages": (), "loading": False}

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return self._get("messages")

    @property
    def loading(self) -> bool:
        return self._get("loading")

    def add_message(self, role: Union[Role, str], content: str) -> ChatMessage:
        # Clock-derived; bumped by 1ms when two messages land in the same tick.
        stamp = max(self._clock(), self._last_stamp + 1)
        self._last_stamp = stamp
        message = ChatMessage(id=stamp, role=Role(role), content=content, timestamp=stamp)
        self._set("messages", self.messages + (message,))
        return message

    def set_loading(self, value: bool) -> None:
        self._set("loading", value)

    def clear_messages(self) -> None:
        self._set("messages", ())
