"""A minimal listener registry."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

L = TypeVar("L")


class ObserverSubject(Generic[L]):
    """Keeps listeners and calls a method on each of them in order."""

    def __init__(self) -> None:
        self._listeners: list[L] = []

    @property
    def listeners(self) -> tuple[L, ...]:
        return tuple(self._listeners)

    def register_listener(self, listener: L) -> None:
        self._listeners.append(listener)

    def unregister_listener(self, listener: L) -> None:
        """Remove a listener; raises ValueError if it was never registered."""
        self._listeners.remove(listener)

    def notify_listeners(self, method: str | Callable[..., Any], *args: Any) -> None:
        """Call ``method`` on every listener with ``args``.

        ``method`` is either the name of a listener method or a callable that
        takes the listener as its first argument.
        """
        for listener in tuple(self._listeners):
            if isinstance(method, str):
                getattr(listener, method)(*args)
            else:
                method(listener, *args)