"""
Resistive voltage divider, with and without a load on the output.

    V_out = V_in × R2 / (R1 + R2)

A load in parallel with R2 lowers the effective bottom leg:

    R2_eff = R2 ‖ R_load = (R2 × R_load) / (R2 + R_load)
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from voltkit.errors import ValidationError
from voltkit.formatting import fixed, number_text
from voltkit.steps import (
    DerivationStep,
    computed_step,
    formula_step,
    steps_to_dicts,
    substitution_step,
)

# Load should be at least this many times R2 for negligible loading
LOAD_RATIO_THRESHOLD = 10


@dataclass
class VoltageDividerResult:
    v_out: float
    steps: List[DerivationStep] = field(default_factory=list)
    v_out_loaded: Optional[float] = None
    load_effect: Optional[float] = None
    load_warning: Optional[str] = None

    def to_dict(self) -> Dict:
        data = {'v_out': self.v_out, 'steps': steps_to_dicts(self.steps)}
        if self.v_out_loaded is not None:
            data['v_out_loaded'] = self.v_out_loaded
            data['load_effect'] = self.load_effect
        if self.load_warning is not None:
            data['load_warning'] = self.load_warning
        return data


def voltage_divider(v_in: float, r1: float, r2: float) -> VoltageDividerResult:
    """Unloaded divider output voltage."""
    if v_in < 0:
        raise ValidationError('Input voltage cannot be negative')
    if r1 <= 0 or r2 <= 0:
        raise ValidationError('Resistor values must be positive')
    if not math.isfinite(r1) or not math.isfinite(r2):
        raise ValidationError('Resistor values must be finite numbers')

    steps: List[DerivationStep] = []
    n = number_text

    steps.append(formula_step('Voltage divider formula', 'V_out = V_in × R2 / (R1 + R2)'))
    steps.append(substitution_step(
        'Substitute values',
        f'V_out = {n(v_in)}V × {n(r2)}Ω / ({n(r1)}Ω + {n(r2)}Ω)',
    ))

    ratio = r2 / (r1 + r2)
    steps.append(computed_step(
        'Calculate divider ratio',
        f'R2 / (R1 + R2) = {n(r2)} / {n(r1 + r2)} = {fixed(ratio, 4)}',
        ratio,
        fixed(ratio, 4),
    ))

    v_out = v_in * ratio
    steps.append(computed_step(
        'Calculate output voltage',
        f'V_out = {n(v_in)}V × {fixed(ratio, 4)} = {fixed(v_out, 4)}V',
        v_out,
        f'{fixed(v_out, 4)}V',
    ))

    return VoltageDividerResult(v_out=v_out, steps=steps)


def voltage_divider_with_load(v_in: float, r1: float, r2: float, r_load: float) -> VoltageDividerResult:
    """
    Divider output with a load resistance across R2.

    Reports the unloaded and loaded outputs, the percentage drop caused by
    the load, and an advisory warning when R_load < 10 × R2.
    """
    if v_in < 0:
        raise ValidationError('Input voltage cannot be negative')
    if r1 <= 0 or r2 <= 0 or r_load <= 0:
        raise ValidationError('All resistance values must be positive')

    steps: List[DerivationStep] = []
    n = number_text

    steps.append(formula_step('Unloaded divider formula', 'V_out(unloaded) = V_in × R2 / (R1 + R2)'))

    v_unloaded = v_in * r2 / (r1 + r2)
    steps.append(computed_step(
        'Unloaded output voltage',
        f'V_out(unloaded) = {n(v_in)}V × {n(r2)}Ω / {n(r1 + r2)}Ω = {fixed(v_unloaded, 4)}V',
        v_unloaded,
        f'{fixed(v_unloaded, 4)}V',
    ))

    steps.append(formula_step(
        'With load, R2 is in parallel with R_load',
        'R2_eff = R2 || R_load = (R2 × R_load) / (R2 + R_load)',
    ))

    r2_eff = (r2 * r_load) / (r2 + r_load)
    steps.append(computed_step(
        'Calculate effective R2',
        f'R2_eff = ({n(r2)}Ω × {n(r_load)}Ω) / ({n(r2)}Ω + {n(r_load)}Ω) = {fixed(r2_eff, 2)}Ω',
        r2_eff,
        f'{fixed(r2_eff, 2)}Ω',
    ))

    steps.append(formula_step('Loaded divider formula', 'V_out(loaded) = V_in × R2_eff / (R1 + R2_eff)'))

    v_loaded = v_in * r2_eff / (r1 + r2_eff)
    steps.append(computed_step(
        'Calculate loaded output voltage',
        f'V_out(loaded) = {n(v_in)}V × {fixed(r2_eff, 2)}Ω / {fixed(r1 + r2_eff, 2)}Ω = {fixed(v_loaded, 4)}V',
        v_loaded,
        f'{fixed(v_loaded, 4)}V',
    ))

    # 0 V in gives 0 V out either way
    load_effect = (v_unloaded - v_loaded) / v_unloaded * 100 if v_unloaded else 0.0
    steps.append(computed_step(
        'Load effect (voltage drop)',
        f'Effect = ({fixed(v_unloaded, 4)}V - {fixed(v_loaded, 4)}V) / {fixed(v_unloaded, 4)}V × 100% '
        f'= {fixed(load_effect, 2)}%',
        load_effect,
        f'{fixed(load_effect, 2)}%',
    ))

    load_ratio = r_load / r2
    load_warning = None

    if load_ratio < LOAD_RATIO_THRESHOLD:
        load_warning = (
            f'Load resistance ({n(r_load)}Ω) is less than {LOAD_RATIO_THRESHOLD}× R2 ({n(r2)}Ω). '
            'Consider using a buffer or lower divider impedance.'
        )
        steps.append(computed_step(
            'Load ratio warning',
            f'R_load / R2 = {fixed(load_ratio, 2)} (recommended: >{LOAD_RATIO_THRESHOLD})',
            load_ratio,
            f'{fixed(load_ratio, 2)}×',
        ))
    else:
        steps.append(computed_step(
            f'Load ratio (good if >{LOAD_RATIO_THRESHOLD})',
            f'R_load / R2 = {fixed(load_ratio, 2)} ✓',
            load_ratio,
            f'{fixed(load_ratio, 2)}×',
        ))

    return VoltageDividerResult(
        v_out=v_unloaded,
        steps=steps,
        v_out_loaded=v_loaded,
        load_effect=load_effect,
        load_warning=load_warning,
    )
