"""
Normalized input events for the calculator and the keyboard mapping.

The web layer turns button clicks and key presses into InputEvent values;
reduce_event routes them to the transitions in machine.py.
"""
from dataclasses import dataclass

from app.projects.calculator.core import machine
from app.projects.calculator.core.state import (
    DIVIDE,
    MULTIPLY,
    OPERATORS,
    CalculatorState,
)

DIGIT = "digit"
DECIMAL_POINT = "decimal_point"
OPERATOR = "operator"
EVALUATE = "evaluate"
CLEAR = "clear"

EVENT_KINDS = (DIGIT, DECIMAL_POINT, OPERATOR, EVALUATE, CLEAR)

DIGITS = "0123456789"

# ASCII spellings accepted for the two non-ASCII operator symbols
OPERATOR_ALIASES = {
    "*": MULTIPLY,
    "x": MULTIPLY,
    "/": DIVIDE,
}

EVALUATE_KEYS = ("Enter", "=")
CLEAR_KEYS = ("Escape", "c", "C")


class InvalidEventError(ValueError):
    """An event kind or payload the calculator does not accept."""


@dataclass(frozen=True)
class InputEvent:
    kind: str
    value: str | None = None

    @classmethod
    def digit(cls, value) -> "InputEvent":
        if not isinstance(value, str) or len(value) != 1 or value not in DIGITS:
            raise InvalidEventError(f"Digit must be a single character 0-9, got {value!r}")
        return cls(DIGIT, value)

    @classmethod
    def decimal_point(cls) -> "InputEvent":
        return cls(DECIMAL_POINT)

    @classmethod
    def operator(cls, value) -> "InputEvent":
        if not isinstance(value, str):
            raise InvalidEventError(f"Unsupported operator: {value!r}")
        symbol = OPERATOR_ALIASES.get(value, value)
        if symbol not in OPERATORS:
            raise InvalidEventError(f"Unsupported operator: {value!r}")
        return cls(OPERATOR, symbol)

    @classmethod
    def evaluate(cls) -> "InputEvent":
        return cls(EVALUATE)

    @classmethod
    def clear(cls) -> "InputEvent":
        return cls(CLEAR)

    @classmethod
    def from_payload(cls, payload) -> "InputEvent":
        """
        Build an event from a JSON body like {"type": "digit", "value": "7"}.
        Raises InvalidEventError for anything that is not one of the five kinds.
        """
        if not isinstance(payload, dict):
            raise InvalidEventError("Event must be a JSON object")
        kind = payload.get("type")
        if kind == DIGIT:
            return cls.digit(payload.get("value"))
        if kind == DECIMAL_POINT:
            return cls.decimal_point()
        if kind == OPERATOR:
            return cls.operator(payload.get("value"))
        if kind == EVALUATE:
            return cls.evaluate()
        if kind == CLEAR:
            return cls.clear()
        raise InvalidEventError(
            f"Unknown event type {kind!r}; expected one of {', '.join(EVENT_KINDS)}"
        )


def event_for_key(key) -> InputEvent | None:
    """Map a raw key name (as in KeyboardEvent.key) to an event, or None to ignore it."""
    if not isinstance(key, str):
        return None
    if len(key) == 1 and key in DIGITS:
        return InputEvent.digit(key)
    if key == ".":
        return InputEvent.decimal_point()
    if key in ("+", "-"):
        return InputEvent.operator(key)
    if key == "*":
        return InputEvent.operator(MULTIPLY)
    if key == "/":
        return InputEvent.operator(DIVIDE)
    if key in EVALUATE_KEYS:
        return InputEvent.evaluate()
    if key in CLEAR_KEYS:
        return InputEvent.clear()
    return None


def reduce_event(state: CalculatorState, event: InputEvent) -> CalculatorState:
    """Apply one event to a state."""
    if event.kind == DIGIT:
        return machine.digit_entry(state, event.value)
    if event.kind == DECIMAL_POINT:
        return machine.decimal_point_entry(state)
    if event.kind == OPERATOR:
        return machine.operator_select(state, event.value)
    if event.kind == EVALUATE:
        return machine.evaluate(state)
    if event.kind == CLEAR:
        return machine.clear(state)
    raise InvalidEventError(f"Unknown event type {event.kind!r}")
