"""
Numeric helpers shared by the scoring modules.
"""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round a value with halves going toward positive infinity.

    Python's built-in round() uses banker's rounding, so 97.5 would become
    98 but 96.5 would become 96. Scores are displayed to users and must
    round the same way every time.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded value (an int when digits is 0)
    """
    factor = 10 ** digits
    rounded = math.floor(value * factor + 0.5)
    if digits == 0:
        return int(rounded)
    return rounded / factor
