"""
Calculator transitions.

Each function takes the current CalculatorState (plus the input payload where
there is one) and returns the next state. They never raise: edge cases fall
back to a defined state, usually the unchanged input state.
"""
import math

from app.projects.calculator.core.arithmetic import (
    UnknownOperatorError,
    apply_operator,
    format_number,
    parse_display,
)
from app.projects.calculator.core.state import IDENTITY, CalculatorState


def digit_entry(state: CalculatorState, digit: str) -> CalculatorState:
    """Append a digit, or start a new number after an operator/evaluate."""
    if state.waiting_for_operand:
        return state.evolve(display=digit, waiting_for_operand=False)
    if state.display == "0":
        return state.evolve(display=digit)
    return state.evolve(display=state.display + digit)


def decimal_point_entry(state: CalculatorState) -> CalculatorState:
    """Add a decimal point; a second point in the same number is ignored."""
    if state.waiting_for_operand:
        return state.evolve(display="0.", waiting_for_operand=False)
    if "." not in state.display:
        return state.evolve(display=state.display + ".")
    return state


def operator_select(state: CalculatorState, op: str) -> CalculatorState:
    """
    Select the next operator.

    The first operator just captures the displayed operand. Any later one
    evaluates the pending operation immediately (strict left-to-right) and
    carries the result forward as the new left operand.
    """
    input_value = parse_display(state.display)

    if state.previous_value is None:
        return state.evolve(
            previous_value=input_value,
            operator=op,
            waiting_for_operand=True,
        )

    if state.operator:
        # A NaN left operand reads as 0 here, matching the web front end
        current_value = state.previous_value
        if math.isnan(current_value):
            current_value = 0.0
        try:
            result = apply_operator(state.operator, current_value, input_value)
        except UnknownOperatorError:
            return state
        return CalculatorState(
            display=format_number(result),
            previous_value=result,
            operator=op,
            waiting_for_operand=True,
        )

    return state


def evaluate(state: CalculatorState) -> CalculatorState:
    """Complete the pending operation; no-op when nothing is pending."""
    if not state.has_pending_operation:
        return state
    input_value = parse_display(state.display)
    try:
        result = apply_operator(state.operator, state.previous_value, input_value)
    except UnknownOperatorError:
        return state
    return CalculatorState(
        display=format_number(result),
        previous_value=None,
        operator=None,
        waiting_for_operand=True,
    )


def clear(state: CalculatorState | None = None) -> CalculatorState:
    return IDENTITY
