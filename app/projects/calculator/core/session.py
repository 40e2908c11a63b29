"""
CalculatorSession - one user's calculator.

Holds the current state and applies events one at a time, in the order they
arrive. Input sources bind to it through subscribe(), which hands out a
dispatch callable that stops working once the subscription is released.
"""
import logging
import threading
from contextlib import contextmanager

from app.projects.calculator.core.events import InputEvent, event_for_key, reduce_event
from app.projects.calculator.core.state import IDENTITY, CalculatorState

logger = logging.getLogger(__name__)


class SubscriptionClosedError(RuntimeError):
    """Raised when a released subscription is used to dispatch."""


class CalculatorSession:
    def __init__(self, state: CalculatorState | None = None):
        self._state = state or IDENTITY
        self._lock = threading.Lock()

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def display(self) -> str:
        return self._state.display

    def dispatch(self, event: InputEvent) -> CalculatorState:
        """Apply one event and return the new state."""
        with self._lock:
            self._state = reduce_event(self._state, event)
            return self._state

    def press_key(self, key: str) -> CalculatorState | None:
        """Dispatch the event mapped to a key press. Returns None for unmapped keys."""
        event = event_for_key(key)
        if event is None:
            return None
        return self.dispatch(event)

    def reset(self) -> CalculatorState:
        return self.dispatch(InputEvent.clear())

    @contextmanager
    def subscribe(self):
        """
        Scoped input subscription.

            with session.subscribe() as send:
                send(InputEvent.digit("7"))

        After the block exits, calling send raises SubscriptionClosedError.
        """
        active = True

        def send(event: InputEvent) -> CalculatorState:
            if not active:
                raise SubscriptionClosedError("Input subscription has been released")
            return self.dispatch(event)

        try:
            yield send
        finally:
            active = False

    def to_dict(self) -> dict:
        return self._state.to_dict()

    @classmethod
    def from_dict(cls, data) -> "CalculatorSession":
        """Restore a session from stored data; bad data starts a fresh session."""
        if data is None:
            return cls()
        try:
            return cls(CalculatorState.from_dict(data))
        except ValueError as e:
            logger.warning(f"Discarding invalid calculator state: {e}")
            return cls()
