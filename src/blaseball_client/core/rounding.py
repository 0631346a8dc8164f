"""Round-half-to-even at integer granularity.

Two interchangeable strategies implement IEEE-754 roundToIntegralTiesToEven:

- ``builtin`` hands the work to CPython's correctly rounded ``round(x, 0)``,
  which is implemented in C.
- ``portable`` is a pure-Python floor-and-compare algorithm.

Both return bit-identical results for every float, including exact ties,
negative values and signed zeros. The active strategy is chosen with the
BLASEBALL_ROUNDING environment variable, resolved once by
``configure_rounding`` (called on first use if nothing configured it earlier).
"""

from __future__ import annotations

import math
from typing import Callable, Optional

from ..config import get_rounding_name

RoundingStrategy = Callable[[float], float]

# Every float at or above this magnitude is already an integer.
_INTEGRAL_THRESHOLD = 2.0 ** 52


def round_builtin(x: float) -> float:
    if not math.isfinite(x):
        return x
    # round() may drop the sign of a zero result; IEEE keeps it.
    return math.copysign(round(x, 0), x)


def round_portable(x: float) -> float:
    if not math.isfinite(x) or abs(x) >= _INTEGRAL_THRESHOLD:
        return x
    floor = float(math.floor(x))
    # Exact unless -0.5 < x < 0, where every branch below yields zero anyway.
    frac = x - floor
    if frac > 0.5:
        result = floor + 1.0
    elif frac < 0.5:
        result = floor
    elif floor % 2.0 == 0.0:
        result = floor
    else:
        result = floor + 1.0
    return math.copysign(result, x)


STRATEGIES: dict[str, RoundingStrategy] = {
    "builtin": round_builtin,
    "portable": round_portable,
}


def get_rounding_strategy(name: str) -> RoundingStrategy:
    """Look up a rounding strategy by name ('builtin' or 'portable')."""
    try:
        return STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown rounding strategy: {name!r}. Use one of: {', '.join(sorted(STRATEGIES))}"
        ) from None


_active: Optional[RoundingStrategy] = None


def configure_rounding(name: Optional[str] = None) -> RoundingStrategy:
    """Select the strategy used by ``round_to_even``.

    With no name, BLASEBALL_ROUNDING is read. An unknown name raises
    ValueError here, at configuration time, and leaves the previous choice.
    """
    global _active
    strategy = get_rounding_strategy(name if name is not None else get_rounding_name())
    _active = strategy
    return strategy


def round_to_even(x: float) -> float:
    """Round to the nearest integer, ties to even, using the configured strategy."""
    strategy = _active if _active is not None else configure_rounding()
    return strategy(x)
