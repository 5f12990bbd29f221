"""Change notification and cooperative cancellation for orchestrators."""

import asyncio
from collections.abc import Callable

Listener = Callable[[], None]


class Observable:
    """Base for state owners that notify listeners after each change."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self) -> None:
        for listener in list(self._listeners):
            listener()


class CancellationToken:
    """Flag checked by an operation after each of its suspension points."""

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class PendingOperation:
    """Handle to an in-flight operation: its token and the task running it."""

    def __init__(self, token: CancellationToken, task: asyncio.Task[None]) -> None:
        self.token = token
        self.task = task

    def cancel(self) -> None:
        self.token.cancel()
