"""Tests for Signal and Connection."""

from shake.signals import Signal


class TestSignal:
    """Tests for the Signal class."""

    def test_fire_calls_handlers(self, signal):
        """Test handlers receive fire arguments in connection order."""
        received = []
        signal.connect(lambda x: received.append(("a", x)))
        signal.connect(lambda x: received.append(("b", x)))
        signal.fire(5)
        assert received == [("a", 5), ("b", 5)]

    def test_disconnect(self, signal):
        """Test a disconnected handler is no longer called."""
        received = []
        connection = signal.connect(received.append)
        connection.disconnect()
        signal.fire(1)
        assert received == []
        assert not connection.connected
        assert signal.connection_count == 0

    def test_disconnect_twice(self, signal):
        """Test disconnect is idempotent."""
        connection = signal.connect(lambda: None)
        connection.disconnect()
        connection.disconnect()
        assert signal.connection_count == 0

    def test_disconnect_during_fire(self, signal):
        """Test a handler disconnected mid-fire is skipped."""
        received = []
        later = None

        def first():
            received.append("first")
            later.disconnect()

        signal.connect(first)
        later = signal.connect(lambda: received.append("later"))
        signal.fire()
        assert received == ["first"]

    def test_self_disconnect_during_fire(self):
        """Test a handler can disconnect itself while firing."""
        signal = Signal()
        calls = []
        holder = {}

        def once():
            calls.append(1)
            holder["connection"].disconnect()

        holder["connection"] = signal.connect(once)
        signal.fire()
        signal.fire()
        assert calls == [1]

    def test_disconnect_all(self, signal):
        """Test every connection is dropped."""
        first = signal.connect(lambda: None)
        second = signal.connect(lambda: None)
        signal.disconnect_all()
        assert not first.connected
        assert not second.connected
        assert signal.connection_count == 0
