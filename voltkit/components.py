"""
Standard component values and resistor ratings.

Provides E24 snapping, standard wattage suggestions, tolerance bounds and
power dissipation for resistors.
"""

import math
from typing import NamedTuple, Optional

from voltkit.errors import ValidationError

# E24 base values (multiplied by decades to get full range)
# These are the standard IEC 60063 values per decade (1.0 to <10.0)
E24_BASE = [
    1.0, 1.1, 1.2, 1.3, 1.5, 1.6, 1.8, 2.0, 2.2, 2.4, 2.7, 3.0,
    3.3, 3.6, 3.9, 4.3, 4.7, 5.1, 5.6, 6.2, 6.8, 7.5, 8.2, 9.1,
]

# Standard resistor power ratings (Watts) offered for LED series resistors
LED_WATTAGES = [0.0625, 0.125, 0.25, 0.5, 1, 2, 3, 5, 10]

# Full range including power resistors
STANDARD_WATTAGES = LED_WATTAGES + [25, 50]

SAFETY_FACTOR = 2


class ToleranceBounds(NamedTuple):
    nominal: float
    min: float
    max: float


def nearest_e24(value: float) -> float:
    """
    Snap a resistance to the nearest E24 standard value.

    The value is normalized to a mantissa in [1, 10) and compared, by
    absolute difference, against the decade's E24 values and against the
    same values one decade up (10 … 91). The second scan catches mantissas
    such as 9.6 whose nearest standard value is 10.

    Returns 0 for zero, negative or non-finite input, and for values so
    small that their decade underflows.
    """
    if value <= 0 or not math.isfinite(value):
        return 0

    decade = math.floor(math.log10(value))
    multiplier = 10 ** decade
    if multiplier == 0:
        return 0
    normalized = value / multiplier

    nearest = E24_BASE[0]
    min_diff = abs(normalized - nearest)

    for e24 in E24_BASE:
        diff = abs(normalized - e24)
        if diff < min_diff:
            min_diff = diff
            nearest = e24

    for e24 in E24_BASE:
        scaled = e24 * 10
        diff = abs(normalized - scaled)
        if diff < min_diff:
            min_diff = diff
            nearest = scaled

    return nearest * multiplier


def _suggest(power: float, ratings) -> float:
    target = power * SAFETY_FACTOR
    for w in ratings:
        if w >= target:
            return w
    return ratings[-1]


def suggest_wattage(power: float) -> float:
    """Smallest LED-range rating ≥ 2× the dissipated power (10 W cap)."""
    return _suggest(power, LED_WATTAGES)


def suggest_resistor_wattage(power: float) -> float:
    """Smallest standard rating ≥ 2× the dissipated power (50 W cap)."""
    return _suggest(power, STANDARD_WATTAGES)


def with_tolerance(resistance: float, tolerance_percent: float) -> ToleranceBounds:
    """Nominal value with its min/max bounds for a ±tolerance."""
    factor = tolerance_percent / 100
    return ToleranceBounds(
        nominal=resistance,
        min=resistance * (1 - factor),
        max=resistance * (1 + factor),
    )


def power_dissipation(
    resistance: float,
    voltage: Optional[float] = None,
    current: Optional[float] = None,
) -> float:
    """P = V²/R if voltage is given, otherwise P = I²R."""
    if voltage is not None:
        return (voltage * voltage) / resistance
    if current is not None:
        return current * current * resistance
    raise ValidationError('Either voltage or current must be provided')
