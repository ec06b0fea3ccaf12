"""
LED current-limiting resistor calculator.

    V_source = V_R + V_LED
    R = (V_source - V_LED) / I

The ideal resistance is snapped to the nearest E24 value, the LED current is
recomputed for that standard part, and a power rating is suggested with a
2× safety margin.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List

from voltkit.components import SAFETY_FACTOR, nearest_e24, suggest_wattage
from voltkit.errors import DomainError, ValidationError
from voltkit.formatting import fixed, number_text
from voltkit.steps import DerivationStep, computed_step, formula_step, steps_to_dicts


@dataclass
class LEDResult:
    resistor_value: float
    nearest_e24: float
    actual_current: float
    power_dissipation: float
    suggested_wattage: float
    steps: List[DerivationStep] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'resistor_value': self.resistor_value,
            'nearest_e24': self.nearest_e24,
            'actual_current': self.actual_current,
            'power_dissipation': self.power_dissipation,
            'suggested_wattage': self.suggested_wattage,
            'steps': steps_to_dicts(self.steps),
        }


def led_resistor(v_source: float, v_forward: float, target_current: float) -> LEDResult:
    """
    Size the series resistor for an LED.

    Args:
        v_source: Supply voltage (V)
        v_forward: LED forward voltage (V)
        target_current: Desired LED current (A)

    Raises:
        ValidationError: non-positive supply or current, negative forward voltage.
        DomainError: forward voltage at or above the supply voltage.
    """
    if not all(math.isfinite(v) for v in (v_source, v_forward, target_current)):
        raise ValidationError('Values must be finite numbers')
    if v_source <= 0:
        raise ValidationError('Source voltage must be positive')
    if v_forward < 0:
        raise ValidationError('Forward voltage cannot be negative')
    if v_forward >= v_source:
        raise DomainError('Forward voltage must be less than source voltage')
    if target_current <= 0:
        raise ValidationError('Target current must be positive')

    steps: List[DerivationStep] = []

    steps.append(formula_step("Apply Kirchhoff's voltage law", 'V_source = V_resistor + V_LED'))

    v_resistor = v_source - v_forward
    steps.append(computed_step(
        'Calculate voltage across resistor',
        f'V_R = {number_text(v_source)}V - {number_text(v_forward)}V = {fixed(v_resistor, 2)}V',
        v_resistor,
        f'{fixed(v_resistor, 2)}V',
    ))

    steps.append(formula_step("Apply Ohm's law to find resistance", 'R = V_R / I'))

    resistor_value = v_resistor / target_current
    current_ma = target_current * 1000
    steps.append(computed_step(
        'Calculate resistance value',
        f'R = {fixed(v_resistor, 2)}V / {fixed(current_ma, 1)}mA = {fixed(resistor_value, 1)}Ω',
        resistor_value,
        f'{fixed(resistor_value, 1)}Ω',
    ))

    snapped = nearest_e24(resistor_value)
    steps.append(computed_step(
        'Select nearest E24 standard value',
        f'R_E24 = {number_text(snapped)}Ω',
        snapped,
        f'{number_text(snapped)}Ω',
    ))

    actual_current = v_resistor / snapped
    actual_ma = actual_current * 1000
    steps.append(computed_step(
        'Calculate actual current with standard resistor',
        f'I_actual = {fixed(v_resistor, 2)}V / {number_text(snapped)}Ω = {fixed(actual_ma, 2)}mA',
        actual_current,
        f'{fixed(actual_ma, 2)}mA',
    ))

    power = v_resistor * actual_current
    steps.append(computed_step(
        'Calculate power dissipated in resistor',
        f'P = V × I = {fixed(v_resistor, 2)}V × {fixed(actual_ma, 2)}mA = {fixed(power * 1000, 2)}mW',
        power,
        f'{fixed(power * 1000, 2)}mW',
    ))

    wattage = suggest_wattage(power)
    steps.append(computed_step(
        f'Recommended resistor wattage ({SAFETY_FACTOR}× safety margin)',
        f'P_rated ≥ {fixed(power * SAFETY_FACTOR * 1000, 1)}mW → Use {number_text(wattage)}W',
        wattage,
        f'{number_text(wattage)}W',
    ))

    return LEDResult(
        resistor_value=resistor_value,
        nearest_e24=snapped,
        actual_current=actual_current,
        power_dissipation=power,
        suggested_wattage=wattage,
        steps=steps,
    )
