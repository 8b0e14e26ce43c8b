"""Minimal connect/disconnect signal primitive."""

from typing import Any, Callable, List, Optional, Protocol

# Type alias for signal handlers
Handler = Callable[..., None]


class Disconnectable(Protocol):
    """Anything returned from ``connect`` that can be disconnected."""

    def disconnect(self) -> None: ...


class Connectable(Protocol):
    """Anything that repeatedly notifies a connected handler."""

    def connect(self, handler: Callable[..., Any]) -> Disconnectable: ...


class Connection:
    """Handle to a single signal connection."""

    def __init__(self, signal: "Signal", handler: Handler) -> None:
        self._signal: Optional[Signal] = signal
        self._handler = handler

    @property
    def connected(self) -> bool:
        """Whether the handler is still attached."""
        return self._signal is not None

    def disconnect(self) -> None:
        """Detach the handler. Safe to call more than once."""
        if self._signal is not None:
            self._signal._remove(self)
            self._signal = None


class Signal:
    """
    Simple repeated-notification source.

    Handlers are called in connection order. A handler disconnected while the
    signal is firing is not called for the remainder of that fire.
    """

    def __init__(self) -> None:
        """Initialize the signal with no connections."""
        self._connections: List[Connection] = []

    def connect(self, handler: Handler) -> Connection:
        """
        Connect a handler.

        Args:
            handler: Function called with the arguments passed to ``fire``

        Returns:
            Connection handle used to disconnect
        """
        connection = Connection(self, handler)
        self._connections.append(connection)
        return connection

    def fire(self, *args: Any) -> None:
        """
        Call every connected handler.

        Args:
            *args: Arguments forwarded to each handler
        """
        for connection in list(self._connections):
            if connection.connected:
                connection._handler(*args)

    def disconnect_all(self) -> None:
        """Disconnect every handler."""
        for connection in list(self._connections):
            connection.disconnect()

    @property
    def connection_count(self) -> int:
        """Return the number of live connections."""
        return len(self._connections)

    def _remove(self, connection: Connection) -> None:
        try:
            self._connections.remove(connection)
        except ValueError:
            pass
