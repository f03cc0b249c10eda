import math
import operator
import re
from typing import Callable, Dict, Optional, Sequence

from .models import Message

ARITHMETIC_RE = re.compile(r"([0-9]+)\s*([+\-*/])\s*([0-9]+)")


def _divide(a: float, b: float) -> float:
    # x / 0 is undefined rather than an error
    if b == 0:
        return math.nan
    return a / b


OPERATORS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def last_message_text(messages: Sequence[Message]) -> str:
    """Lowercased content of the newest message, or "" for an empty history."""
    if not messages:
        return ""
    return messages[-1].content.lower()


def evaluate_arithmetic(text: str) -> Optional[float]:
    """
    Find the first ``<int> <op> <int>`` expression in `text` and compute it.

    Operands are doubles, so huge literals become ``inf`` instead of
    raising. Returns None when nothing can be extracted or the result is
    NaN (division by zero, ``inf - inf``).
    """
    match = ARITHMETIC_RE.search(text)
    if match is None:
        return None
    left, op, right = match.groups()
    try:
        result = OPERATORS[op](float(left), float(right))
    except (ValueError, ArithmeticError):
        return None
    if math.isnan(result):
        return None
    return result


def format_number(value: float) -> str:
    """
    Render a number the way ECMAScript's Number::toString does.

    Plain notation for 1e-6 <= |x| < 1e21, otherwise exponent form with an
    explicit sign and no zero padding: 1e-7, 1.5e+21.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr gives the shortest round-tripping digits
    mantissa, _, exp = repr(float(abs(value))).partition("e")
    whole, _, frac = mantissa.partition(".")
    raw = whole + frac
    point = len(whole) + (int(exp) if exp else 0)
    stripped = raw.lstrip("0")
    # value == 0.<digits> * 10**n
    n = point - (len(raw) - len(stripped))
    digits = stripped.rstrip("0")
    k = len(digits)

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits
    e = n - 1
    head = digits[0] + ("." + digits[1:] if k > 1 else "")
    return f"{sign}{head}e{'+' if e >= 0 else '-'}{abs(e)}"
