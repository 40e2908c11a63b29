"""
Calculator state record.
One immutable value per step; transitions in machine.py return new instances.
"""
import math
from dataclasses import dataclass, replace

ADD = "+"
SUBTRACT = "-"
MULTIPLY = "×"
DIVIDE = "÷"

OPERATORS = (ADD, SUBTRACT, MULTIPLY, DIVIDE)


@dataclass(frozen=True)
class CalculatorState:
    display: str = "0"
    previous_value: float | None = None
    operator: str | None = None
    waiting_for_operand: bool = False

    def evolve(self, **changes) -> "CalculatorState":
        """Copy of this state with the given fields replaced."""
        return replace(self, **changes)

    @property
    def has_pending_operation(self) -> bool:
        return self.previous_value is not None and self.operator is not None

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict (NaN/inf stored as strings)."""
        return {
            "display": self.display,
            "previous_value": _number_to_json(self.previous_value),
            "operator": self.operator,
            "waiting_for_operand": self.waiting_for_operand,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CalculatorState":
        """
        Deserialize from a dict produced by to_dict().
        Raises ValueError if the data does not describe a valid state.
        """
        if not isinstance(data, dict):
            raise ValueError("State must be a mapping")
        display = data.get("display", "0")
        if not isinstance(display, str) or not display or display.count(".") > 1:
            raise ValueError(f"Invalid display value: {display!r}")
        operator = data.get("operator")
        if operator is not None and operator not in OPERATORS:
            raise ValueError(f"Invalid operator: {operator!r}")
        waiting = data.get("waiting_for_operand", False)
        if not isinstance(waiting, bool):
            raise ValueError("waiting_for_operand must be a boolean")
        return cls(
            display=display,
            previous_value=_number_from_json(data.get("previous_value")),
            operator=operator,
            waiting_for_operand=waiting,
        )


IDENTITY = CalculatorState()


def _number_to_json(value):
    if value is None or math.isfinite(value):
        return value
    return repr(value)


def _number_from_json(value):
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("previous_value must be a number")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str) and value in ("nan", "inf", "-inf"):
        return float(value)
    raise ValueError(f"Invalid previous_value: {value!r}")
