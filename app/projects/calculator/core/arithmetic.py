"""
Arithmetic and number/text conversion for the calculator.

Numbers are plain floats. Display text is produced and consumed the way a
browser does it (String(n) / parseFloat), so results look the same as on
the JavaScript front end: "10" rather than "10.0", "1e+21", "Infinity".
"""
import math
import re
from decimal import Decimal

from app.projects.calculator.core.state import ADD, DIVIDE, MULTIPLY, SUBTRACT

_LEADING_NUMBER = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


class UnknownOperatorError(ValueError):
    """Raised by apply_operator for a symbol outside the arithmetic table."""


def apply_operator(op: str, a: float, b: float) -> float:
    """Apply a binary operator. Division by zero yields 0."""
    if op == ADD:
        return a + b
    if op == SUBTRACT:
        return a - b
    if op == MULTIPLY:
        return a * b
    if op == DIVIDE:
        return a / b if b != 0 else 0.0
    raise UnknownOperatorError(f"Unknown operator: {op!r}")


def parse_display(text: str) -> float:
    """Parse the longest leading numeral in text; NaN if there is none."""
    match = _LEADING_NUMBER.match(text or "")
    if not match:
        return math.nan
    literal = match.group(1)
    if literal.lstrip("+-") == "Infinity":
        return -math.inf if literal.startswith("-") else math.inf
    return float(literal)


def format_number(value: float) -> str:
    """
    Default decimal text for a number.

    Uses the shortest digit string that round-trips, then lays it out with
    plain notation for 1e-7 < |value| < 1e21 and exponent notation otherwise.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to digits

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        exp = n - 1
        exp_text = f"e+{exp}" if exp >= 0 else f"e-{-exp}"
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = mantissa + exp_text
    return sign + body
