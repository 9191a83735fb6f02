"""
Reactive state holder: named slots, setter-only mutation, change listeners.

Stores never do I/O. Callers resolve data through an API client first and then
apply it with a setter; every write fires the listeners with (store, slot, value).
"""

import copy
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

Listener = Callable[[str, str, Any], None]


class Store:
    name: str = "store"

    def __init__(self) -> None:
        self._listeners: list[Listener] = []
        self._state: dict[str, Any] = self._initial_state()

    def _initial_state(self) -> dict[str, Any]:
        raise NotImplementedError

    def _get(self, slot: str) -> Any:
        return self._state[slot]

    def _set(self, slot: str, value: Any) -> None:
        self._state[slot] = value
        for listener in list(self._listeners):
            listener(self.name, slot, value)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Add a change listener. Returns a function that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass
        return unsubscribe

    def snapshot(self) -> dict[str, Any]:
        return copy.copy(self._state)

    def reset(self) -> None:
        """Put every slot back to its initial value (listeners are told about each)."""
        for slot, value in self._initial_state().items():
            self._set(slot, value)

    def close(self) -> None:
        logger.debug("closing %s store (%d listeners)", self.name, len(self._listeners))
        self._listeners.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._state!r})"
