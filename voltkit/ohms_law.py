"""
Ohm's law and power solver.

    V = I × R
    P = V × I = V² / R = I² × R

Given any two of voltage, current, resistance and power, derives the other
two.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from voltkit.errors import ValidationError
from voltkit.formatting import fixed, number_text
from voltkit.steps import DerivationStep, computed_step, steps_to_dicts, substitution_step

QUANTITIES = ('voltage', 'current', 'resistance', 'power')


@dataclass
class OhmsLawResult:
    voltage: float
    current: float
    resistance: float
    power: float
    steps: List[DerivationStep] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'voltage': self.voltage,
            'current': self.current,
            'resistance': self.resistance,
            'power': self.power,
            'steps': steps_to_dicts(self.steps),
        }


def _n(x: float) -> str:
    return number_text(x)


def ohms_law(
    known: Optional[Mapping[str, float]] = None,
    *,
    voltage: Optional[float] = None,
    current: Optional[float] = None,
    resistance: Optional[float] = None,
    power: Optional[float] = None,
) -> OhmsLawResult:
    """
    Solve V, I, R and P from exactly two known values.

    Known values may be passed as keywords or as a mapping, e.g.
    ohms_law({'voltage': 12, 'resistance': 1000}).

    Raises:
        ValidationError: wrong number of knowns, or a value outside the
            range allowed for that pair.
    """
    given = {
        'voltage': voltage,
        'current': current,
        'resistance': resistance,
        'power': power,
    }
    if known:
        for name, value in known.items():
            if name not in given:
                raise ValidationError('Must provide exactly two known values')
            given[name] = value

    pair = frozenset(name for name, value in given.items() if value is not None)
    if len(pair) != 2:
        raise ValidationError('Must provide exactly two known values')

    for name in pair:
        if math.isnan(given[name]):
            raise ValidationError(f'{name.capitalize()} must be a number')

    v, i, r, p = (given[name] for name in QUANTITIES)
    steps: List[DerivationStep] = []

    if pair == {'voltage', 'current'}:
        if v < 0 or i < 0:
            raise ValidationError('Voltage and current must be non-negative')

        steps.append(substitution_step('Given voltage and current', f'V = {_n(v)}V, I = {_n(i)}A'))

        r = v / i if i > 0 else math.inf
        steps.append(computed_step(
            "Calculate resistance (Ohm's Law)",
            f'R = V / I = {_n(v)}V / {_n(i)}A = {fixed(r, 4)}Ω',
            r,
            f'{fixed(r, 4)}Ω',
        ))

        p = v * i
        steps.append(computed_step(
            'Calculate power',
            f'P = V × I = {_n(v)}V × {_n(i)}A = {fixed(p, 4)}W',
            p,
            f'{fixed(p, 4)}W',
        ))

    elif pair == {'voltage', 'resistance'}:
        if v < 0 or r <= 0:
            raise ValidationError('Voltage must be non-negative, resistance must be positive')

        steps.append(substitution_step('Given voltage and resistance', f'V = {_n(v)}V, R = {_n(r)}Ω'))

        i = v / r
        steps.append(computed_step(
            "Calculate current (Ohm's Law)",
            f'I = V / R = {_n(v)}V / {_n(r)}Ω = {fixed(i, 6)}A',
            i,
            f'{fixed(i, 6)}A',
        ))

        p = (v * v) / r
        steps.append(computed_step(
            'Calculate power',
            f'P = V² / R = {_n(v)}² / {_n(r)} = {fixed(p, 4)}W',
            p,
            f'{fixed(p, 4)}W',
        ))

    elif pair == {'current', 'resistance'}:
        if i < 0 or r <= 0:
            raise ValidationError('Current must be non-negative, resistance must be positive')

        steps.append(substitution_step('Given current and resistance', f'I = {_n(i)}A, R = {_n(r)}Ω'))

        v = i * r
        steps.append(computed_step(
            "Calculate voltage (Ohm's Law)",
            f'V = I × R = {_n(i)}A × {_n(r)}Ω = {fixed(v, 4)}V',
            v,
            f'{fixed(v, 4)}V',
        ))

        p = i * i * r
        steps.append(computed_step(
            'Calculate power',
            f'P = I² × R = {_n(i)}² × {_n(r)} = {fixed(p, 4)}W',
            p,
            f'{fixed(p, 4)}W',
        ))

    elif pair == {'voltage', 'power'}:
        if v <= 0 or p < 0:
            raise ValidationError('Voltage must be positive, power must be non-negative')

        steps.append(substitution_step('Given voltage and power', f'V = {_n(v)}V, P = {_n(p)}W'))

        i = p / v
        steps.append(computed_step(
            'Calculate current',
            f'I = P / V = {_n(p)}W / {_n(v)}V = {fixed(i, 6)}A',
            i,
            f'{fixed(i, 6)}A',
        ))

        r = (v * v) / p if p > 0 else math.inf
        steps.append(computed_step(
            'Calculate resistance',
            f'R = V² / P = {_n(v)}² / {_n(p)} = {fixed(r, 4)}Ω',
            r,
            f'{fixed(r, 4)}Ω',
        ))

    elif pair == {'current', 'power'}:
        if i <= 0 or p < 0:
            raise ValidationError('Current must be positive, power must be non-negative')

        steps.append(substitution_step('Given current and power', f'I = {_n(i)}A, P = {_n(p)}W'))

        v = p / i
        steps.append(computed_step(
            'Calculate voltage',
            f'V = P / I = {_n(p)}W / {_n(i)}A = {fixed(v, 4)}V',
            v,
            f'{fixed(v, 4)}V',
        ))

        r = p / (i * i)
        steps.append(computed_step(
            'Calculate resistance',
            f'R = P / I² = {_n(p)} / {_n(i)}² = {fixed(r, 4)}Ω',
            r,
            f'{fixed(r, 4)}Ω',
        ))

    elif pair == {'resistance', 'power'}:
        if r <= 0 or p < 0:
            raise ValidationError('Resistance must be positive, power must be non-negative')

        steps.append(substitution_step('Given resistance and power', f'R = {_n(r)}Ω, P = {_n(p)}W'))

        v = math.sqrt(p * r)
        steps.append(computed_step(
            'Calculate voltage',
            f'V = √(P × R) = √({_n(p)} × {_n(r)}) = {fixed(v, 4)}V',
            v,
            f'{fixed(v, 4)}V',
        ))

        i = math.sqrt(p / r)
        steps.append(computed_step(
            'Calculate current',
            f'I = √(P / R) = √({_n(p)} / {_n(r)}) = {fixed(i, 6)}A',
            i,
            f'{fixed(i, 6)}A',
        ))

    else:
        raise ValidationError('Must provide exactly two known values')

    return OhmsLawResult(voltage=v, current=i, resistance=r, power=p, steps=steps)
