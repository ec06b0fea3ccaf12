"""
RC circuit time constant, cutoff frequency and step response.

    τ   = R × C
    f_c = 1 / (2π × τ)
    V(t) = V_in × (1 − e^(−t/τ))
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np

from voltkit.errors import ValidationError
from voltkit.formatting import exponential, fixed, number_text
from voltkit.steps import DerivationStep, computed_step, formula_step, steps_to_dicts

# Percent of final value reached after n time constants, n = 1..5
RISE_PERCENTAGES = [63.2, 86.5, 95.0, 98.2, 99.3]


@dataclass(frozen=True)
class RiseTime:
    percent: float
    time: float
    voltage: float


@dataclass
class RCResult:
    time_constant: float
    cutoff_frequency: float
    rise_times: List[RiseTime]
    steps: List[DerivationStep] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'time_constant': self.time_constant,
            'cutoff_frequency': self.cutoff_frequency,
            'rise_times': [
                {'percent': rt.percent, 'time': rt.time, 'voltage': rt.voltage}
                for rt in self.rise_times
            ],
            'steps': steps_to_dicts(self.steps),
        }


def _validate_rc(resistance: float, capacitance: float) -> None:
    if resistance <= 0:
        raise ValidationError('Resistance must be positive')
    if capacitance <= 0:
        raise ValidationError('Capacitance must be positive')
    if not math.isfinite(resistance) or not math.isfinite(capacitance):
        raise ValidationError('Values must be finite numbers')


def _time_constant(resistance: float, capacitance: float) -> float:
    _validate_rc(resistance, capacitance)
    tau = resistance * capacitance
    if tau == 0 or not math.isfinite(tau) or not math.isfinite(1 / tau):
        raise ValidationError('Time constant is outside the representable range')
    return tau


def rc_time_constant(resistance: float, capacitance: float, v_in: float = 1.0) -> RCResult:
    """
    Calculate the RC time constant, -3dB frequency and 1τ..5τ rise points.

    Args:
        resistance: R (Ω)
        capacitance: C (F)
        v_in: Step amplitude (V), used for the absolute rise voltages only.
    """
    tau = _time_constant(resistance, capacitance)

    steps: List[DerivationStep] = []

    steps.append(formula_step('Time constant formula', 'τ = R × C'))

    steps.append(computed_step(
        'Calculate time constant',
        f'τ = {number_text(resistance)}Ω × {number_text(capacitance)}F = {exponential(tau, 4)}s',
        tau,
        f'{exponential(tau, 4)}s',
    ))

    steps.append(formula_step('Cutoff frequency formula (−3dB point)', 'f_c = 1 / (2π × τ)'))

    f_c = 1 / (2 * math.pi * tau)
    steps.append(computed_step(
        'Calculate cutoff frequency',
        f'f_c = 1 / (2π × {exponential(tau, 4)}s) = {fixed(f_c, 2)}Hz',
        f_c,
        f'{fixed(f_c, 2)}Hz',
    ))

    steps.append(formula_step(
        'Step response: V(t) = V_in × (1 − e^(−t/τ))',
        'At t = nτ, voltage reaches specific percentages',
    ))

    rise_times = []
    for n, percent in enumerate(RISE_PERCENTAGES, start=1):
        time = tau * n
        rise_times.append(RiseTime(percent=percent, time=time, voltage=v_in * (1 - math.exp(-n))))
        steps.append(computed_step(
            f'At t = {n}τ',
            f'V = {fixed(percent, 1)}% of V_in (t = {exponential(time, 3)}s)',
            time,
            f'{fixed(percent, 1)}%',
        ))

    return RCResult(time_constant=tau, cutoff_frequency=f_c, rise_times=rise_times, steps=steps)


def rc_voltage_at_time(resistance: float, capacitance: float, time: float, v_in: float = 1.0) -> float:
    """Capacitor voltage ``time`` seconds into a charging step."""
    tau = _time_constant(resistance, capacitance)
    return v_in * (1 - math.exp(-time / tau))


def rc_time_to_voltage(
    resistance: float,
    capacitance: float,
    target_voltage: float,
    v_in: float = 1.0,
) -> float:
    """Time for the capacitor to charge to ``target_voltage``; inf if never reached."""
    if target_voltage >= v_in:
        return math.inf
    tau = _time_constant(resistance, capacitance)
    return -tau * math.log(1 - target_voltage / v_in)


def rc_step_response(
    resistance: float,
    capacitance: float,
    v_in: float = 1.0,
    num_tau: float = 5.0,
    num_points: int = 200,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample the charging curve from t = 0 to ``num_tau`` time constants.

    Returns:
        (times, voltages) as numpy arrays of length ``num_points``.
    """
    tau = _time_constant(resistance, capacitance)
    if num_points < 2:
        raise ValidationError('num_points must be at least 2')

    t = np.linspace(0.0, num_tau * tau, num_points)
    v = v_in * (1 - np.exp(-t / tau))
    return t, v
