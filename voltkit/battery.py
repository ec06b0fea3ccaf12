"""
Battery runtime estimation.

    Runtime (h)    = Capacity (mAh) / Load (mA) × efficiency
    Capacity (mAh) = Load (mA) × Runtime (h) / efficiency
    Load (mA)      = Capacity (mAh) × efficiency / Runtime (h)

Efficiency is a percentage in (0, 100] covering regulator losses and
usable-capacity derating.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List

from voltkit.errors import ValidationError
from voltkit.formatting import fixed, number_text

# Nominal capacity (mAh) and voltage (V). Reference data for prefilling inputs.
COMMON_BATTERIES: Dict[str, Dict[str, float]] = {
    'AA (alkaline)': {'capacity': 2500, 'voltage': 1.5},
    'AA (NiMH)': {'capacity': 2000, 'voltage': 1.2},
    'AAA (alkaline)': {'capacity': 1000, 'voltage': 1.5},
    'AAA (NiMH)': {'capacity': 750, 'voltage': 1.2},
    'C (alkaline)': {'capacity': 8000, 'voltage': 1.5},
    'D (alkaline)': {'capacity': 18000, 'voltage': 1.5},
    'PP3 (9V)': {'capacity': 500, 'voltage': 9.0},
    'CR2032': {'capacity': 220, 'voltage': 3.0},
    'LiPo 1S': {'capacity': 1000, 'voltage': 3.7},
    'LiPo 2S': {'capacity': 1000, 'voltage': 7.4},
    '18650 Li-ion': {'capacity': 2600, 'voltage': 3.7},
}


@dataclass
class BatteryLifeResult:
    hours: int
    minutes: int
    days: int
    formatted: str
    steps: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'hours': self.hours,
            'minutes': self.minutes,
            'days': self.days,
            'formatted': self.formatted,
            'steps': list(self.steps),
        }


def _check_capacity(capacity_mah: float) -> None:
    if not capacity_mah > 0:
        raise ValidationError('Battery capacity must be greater than 0 mAh')


def _check_load(load_current_ma: float) -> None:
    if not load_current_ma > 0:
        raise ValidationError('Load current must be greater than 0 mA')


def _check_runtime(runtime_hours: float) -> None:
    if not runtime_hours > 0:
        raise ValidationError('Runtime must be greater than 0 hours')


def _check_efficiency(efficiency: float) -> None:
    if not 0 < efficiency <= 100:
        raise ValidationError('Efficiency must be between 0 and 100 percent')


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def _format_runtime(days: int, hours: int, minutes: int) -> str:
    if days > 0:
        return f"{days} day{'s' if days > 1 else ''} {hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def calculate_battery_life(
    capacity_mah: float,
    load_current_ma: float,
    efficiency: float = 100,
) -> BatteryLifeResult:
    """
    Estimate how long a battery runs a constant load.

    ``days`` and ``formatted`` decompose the runtime into days, hours and
    minutes; ``hours`` is the total number of whole hours and ``minutes``
    the remainder.
    """
    _check_capacity(capacity_mah)
    _check_load(load_current_ma)
    _check_efficiency(efficiency)

    theoretical_hours = capacity_mah / load_current_ma
    efficiency_factor = efficiency / 100
    actual_hours = theoretical_hours * efficiency_factor

    if not math.isfinite(actual_hours):
        raise ValidationError('Runtime is too large to represent')

    total_hours = math.floor(actual_hours)
    minutes = _round_half_up((actual_hours - total_hours) * 60)
    if minutes == 60:
        total_hours += 1
        minutes = 0
    days, hours = divmod(total_hours, 24)

    formatted = _format_runtime(days, hours, minutes)

    steps = [
        f"Battery Capacity: {number_text(capacity_mah)} mAh",
        f"Load Current: {number_text(load_current_ma)} mA",
        f"Theoretical Runtime: {number_text(capacity_mah)} mAh ÷ {number_text(load_current_ma)} mA "
        f"= {fixed(theoretical_hours, 2)} hours",
    ]

    if efficiency < 100:
        steps.append(f"Efficiency Factor: {number_text(efficiency)}%")
        steps.append(
            f"Actual Runtime: {fixed(theoretical_hours, 2)} h × {number_text(efficiency_factor)} "
            f"= {fixed(actual_hours, 2)} hours"
        )

    steps.append(f"Final Runtime: {formatted}")

    return BatteryLifeResult(
        hours=total_hours,
        minutes=minutes,
        days=days,
        formatted=formatted,
        steps=steps,
    )


def calculate_required_capacity(
    load_current_ma: float,
    runtime_hours: float,
    efficiency: float = 100,
) -> float:
    """Capacity (mAh) needed to run ``load_current_ma`` for ``runtime_hours``."""
    _check_load(load_current_ma)
    _check_runtime(runtime_hours)
    _check_efficiency(efficiency)

    return (load_current_ma * runtime_hours) / (efficiency / 100)


def calculate_max_load_current(
    capacity_mah: float,
    runtime_hours: float,
    efficiency: float = 100,
) -> float:
    """Largest constant load (mA) that lasts ``runtime_hours``."""
    _check_capacity(capacity_mah)
    _check_runtime(runtime_hours)
    _check_efficiency(efficiency)

    return (capacity_mah * (efficiency / 100)) / runtime_hours
