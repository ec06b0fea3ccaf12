"""
Series/parallel reduction for resistors, capacitors and inductors.

Resistors and inductors add in series and add reciprocally in parallel.
Capacitors invert that pattern:

    R_series = R1 + R2 + ...        1/R_parallel = 1/R1 + 1/R2 + ...
    L_series = L1 + L2 + ...        1/L_parallel = 1/L1 + 1/L2 + ...
    1/C_series = 1/C1 + 1/C2 + ...  C_parallel = C1 + C2 + ...

Two call surfaces share the same reduction:

- combine() returns a value plus DerivationStep records. An empty list is
  the "nothing entered yet" state and yields 0 with no steps.
- equivalent() returns value/unit/formatted text plus plain-string steps and
  treats an empty list as an error.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, Union

from voltkit.errors import ValidationError
from voltkit.formatting import exponential, fixed, number_text
from voltkit.steps import (
    DerivationStep,
    computed_step,
    formula_step,
    steps_to_dicts,
    substitution_step,
)


class ComponentKind(str, Enum):
    RESISTOR = "resistor"
    CAPACITOR = "capacitor"
    INDUCTOR = "inductor"


class Configuration(str, Enum):
    SERIES = "series"
    PARALLEL = "parallel"


@dataclass(frozen=True)
class _KindInfo:
    symbol: str        # R, C, L
    unit: str          # Ω, F, H
    label: str         # "Resistor"
    quantity: str      # "resistance"
    exponential: bool  # derivation numbers in exponential notation
    plural: str        # "resistors"
    series_note: str = ''


_KINDS: Dict[ComponentKind, _KindInfo] = {
    ComponentKind.RESISTOR: _KindInfo('R', 'Ω', 'Resistor', 'resistance', False, 'resistors'),
    ComponentKind.CAPACITOR: _KindInfo('C', 'F', 'Capacitor', 'capacitance', True, 'capacitors'),
    ComponentKind.INDUCTOR: _KindInfo(
        'L', 'H', 'Inductor', 'inductance', True, 'inductors',
        series_note=' (assuming no mutual coupling)',
    ),
}

# Topologies where reciprocals add
_RECIPROCAL = {
    (ComponentKind.RESISTOR, Configuration.PARALLEL),
    (ComponentKind.INDUCTOR, Configuration.PARALLEL),
    (ComponentKind.CAPACITOR, Configuration.SERIES),
}

# Topologies where a zero value is rejected outright
_ZERO_FORBIDDEN = {
    (ComponentKind.CAPACITOR, Configuration.SERIES): 'Capacitor values cannot be zero (would block DC)',
    (ComponentKind.INDUCTOR, Configuration.PARALLEL): 'Inductor values cannot be zero',
}


@dataclass
class CombinationResult:
    value: float
    steps: List[DerivationStep] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {'value': self.value, 'steps': steps_to_dicts(self.steps)}


@dataclass
class EquivalentResult:
    value: float
    unit: str
    formatted: str
    steps: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'value': self.value,
            'unit': self.unit,
            'formatted': self.formatted,
            'steps': list(self.steps),
        }


KindLike = Union[ComponentKind, str]
ConfigLike = Union[Configuration, str]


def _coerce(kind: KindLike, configuration: ConfigLike) -> Tuple[ComponentKind, Configuration]:
    try:
        kind = ComponentKind(kind)
    except ValueError:
        raise ValidationError(
            f"Unknown component kind '{kind}'. Must be one of: {[k.value for k in ComponentKind]}"
        )
    try:
        configuration = Configuration(configuration)
    except ValueError:
        raise ValidationError(
            f"Unknown configuration '{configuration}'. Must be one of: {[c.value for c in Configuration]}"
        )
    return kind, configuration


def _reduce(values: Sequence[float], reciprocal: bool) -> Tuple[float, Optional[float]]:
    """Return (total, reciprocal_sum). reciprocal_sum is None for direct sums."""
    if not reciprocal:
        return sum(values), None
    reciprocal_sum = sum(1.0 / v for v in values)
    return 1.0 / reciprocal_sum, reciprocal_sum


# --- DerivationStep surface ---

def combine(kind: KindLike, configuration: ConfigLike, values: Sequence[float]) -> CombinationResult:
    """
    Combine component values in series or parallel.

    Args:
        kind: 'resistor', 'capacitor' or 'inductor'
        configuration: 'series' or 'parallel'
        values: component values in base SI units (Ω, F, H)

    Returns:
        CombinationResult with the equivalent value and derivation steps.

    Raises:
        ValidationError: negative, non-finite, or forbidden zero values.
    """
    kind, configuration = _coerce(kind, configuration)
    info = _KINDS[kind]
    values = list(values)

    if not values:
        return CombinationResult(0, [])

    zero_message = _ZERO_FORBIDDEN.get((kind, configuration))
    for v in values:
        if v < 0:
            raise ValidationError(f'{info.label} values cannot be negative')
        if not math.isfinite(v):
            raise ValidationError(f'{info.label} values must be finite numbers')
        if zero_message and v == 0:
            raise ValidationError(zero_message)

    if kind is ComponentKind.RESISTOR and configuration is Configuration.PARALLEL:
        if any(v == 0 for v in values):
            return CombinationResult(0, [computed_step(
                'Any resistor at 0Ω shorts the parallel combination',
                'R_total = 0Ω',
                0,
                '0Ω',
            )])

    if len(values) == 1:
        v = values[0]
        return CombinationResult(v, [computed_step(
            f'Single {info.label.lower()}',
            f'{info.symbol} = {number_text(v)}{info.unit}',
            v,
            f'{number_text(v)}{info.unit}',
        )])

    reciprocal = (kind, configuration) in _RECIPROCAL
    total_name = f'{info.symbol}_total'
    total, reciprocal_sum = _reduce(values, reciprocal)

    def show(x: float) -> str:
        return exponential(x, 4) if info.exponential else number_text(x)

    steps: List[DerivationStep] = []

    if not reciprocal:
        names = ' + '.join(f'{info.symbol}{i + 1}' for i in range(len(values)))
        numbers = ' + '.join(number_text(v) for v in values)
        steps.append(formula_step(
            f'{configuration.value.capitalize()} {info.plural} add directly{info.series_note}',
            f'{total_name} = {names}',
        ))
        steps.append(substitution_step('Substitute values', f'{total_name} = {numbers}'))
        steps.append(computed_step(
            'Calculate sum',
            f'{total_name} = {show(total)}{info.unit}',
            total,
            f'{show(total)}{info.unit}',
        ))
        return CombinationResult(total, steps)

    names = ' + '.join(f'1/{info.symbol}{i + 1}' for i in range(len(values)))
    numbers = ' + '.join(f'1/{number_text(v)}' for v in values)
    steps.append(formula_step(
        f'For {configuration.value} {info.plural}, reciprocals add',
        f'1/{total_name} = {names}',
    ))
    steps.append(substitution_step('Substitute values', f'1/{total_name} = {numbers}'))

    if info.exponential:
        recip_text = exponential(reciprocal_sum, 4)
        final_formula = f'{total_name} = {exponential(total, 4)}{info.unit}'
        final_text = f'{exponential(total, 4)}{info.unit}'
    else:
        recip_text = fixed(reciprocal_sum, 6)
        final_formula = f'{total_name} = 1/{recip_text} = {fixed(total, 2)}{info.unit}'
        final_text = f'{fixed(total, 2)}{info.unit}'

    steps.append(computed_step(
        'Calculate sum of reciprocals',
        f'1/{total_name} = {recip_text}',
        reciprocal_sum,
        recip_text,
    ))
    steps.append(computed_step('Take reciprocal for final result', final_formula, total, final_text))

    return CombinationResult(total, steps)


def sum_series(resistors: Sequence[float]) -> CombinationResult:
    """R_total = R1 + R2 + ... + Rn"""
    return combine(ComponentKind.RESISTOR, Configuration.SERIES, resistors)


def parallel(resistors: Sequence[float]) -> CombinationResult:
    """1/R_total = 1/R1 + 1/R2 + ... + 1/Rn"""
    return combine(ComponentKind.RESISTOR, Configuration.PARALLEL, resistors)


def series_capacitance(capacitors: Sequence[float]) -> CombinationResult:
    return combine(ComponentKind.CAPACITOR, Configuration.SERIES, capacitors)


def parallel_capacitance(capacitors: Sequence[float]) -> CombinationResult:
    return combine(ComponentKind.CAPACITOR, Configuration.PARALLEL, capacitors)


def series_inductance(inductors: Sequence[float]) -> CombinationResult:
    return combine(ComponentKind.INDUCTOR, Configuration.SERIES, inductors)


def parallel_inductance(inductors: Sequence[float]) -> CombinationResult:
    return combine(ComponentKind.INDUCTOR, Configuration.PARALLEL, inductors)


# --- Plain-string surface ---

def scientific_text(value: float) -> str:
    """4 decimals in range, '× 10^' exponent form outside 1e-6..1e6."""
    if value == 0:
        return '0'
    abs_value = abs(value)
    if abs_value < 1e-6 or abs_value > 1e6:
        mantissa, exp = exponential(value, 4).split('e')
        return f"{mantissa} × 10^{int(exp)}"
    return fixed(value, 4)


def equivalent(kind: KindLike, configuration: ConfigLike, values: Sequence[float]) -> EquivalentResult:
    """
    Equivalent value of a series/parallel group, with plain-text steps.

    Unlike combine(), an empty list is rejected and zero is rejected for every
    reciprocal topology (a shorted resistor is an error here, not 0Ω).
    """
    kind, configuration = _coerce(kind, configuration)
    info = _KINDS[kind]
    values = list(values)
    quantity = info.quantity
    eq_name = f'{info.symbol}_eq'

    if not values:
        raise ValidationError(f'At least one {quantity} value required')

    reciprocal = (kind, configuration) in _RECIPROCAL
    if reciprocal and any(v == 0 for v in values):
        raise ValidationError(f'{quantity.capitalize()} values cannot be zero')

    for v in values:
        if v < 0 or not math.isfinite(v):
            raise ValidationError(f'{quantity.capitalize()} values must be positive finite numbers')

    total, reciprocal_sum = _reduce(values, reciprocal)

    if kind is ComponentKind.RESISTOR:
        text = fixed(total, 4)
        if reciprocal:
            steps = [
                f"Reciprocal sum: {' + '.join(f'1/{number_text(v)}' for v in values)}",
                f'1/{eq_name} = {fixed(reciprocal_sum, 6)}',
                f'{eq_name} = {text} Ω',
            ]
        else:
            steps = [
                f"Sum of all resistances: {' + '.join(number_text(v) for v in values)} = {text} Ω",
            ]
        return EquivalentResult(total, 'Ω', f'{text} Ω', steps)

    text = scientific_text(total)
    unit = info.unit

    if kind is ComponentKind.CAPACITOR:
        if reciprocal:
            steps = [
                'Series capacitances (reciprocals add):',
                f'1/{eq_name} = {fixed(reciprocal_sum, 6)}',
                f'{eq_name} = {text} {unit}',
            ]
        else:
            steps = [
                'Parallel capacitances add directly:',
                f"{eq_name} = {' + '.join(number_text(v) for v in values)} = {text} {unit}",
            ]
    else:
        if reciprocal:
            steps = [
                'Parallel inductances (reciprocals add, no mutual inductance):',
                f'1/{eq_name} = {fixed(reciprocal_sum, 6)}',
                f'{eq_name} = {text} {unit}',
            ]
        else:
            steps = [
                'Series inductances add directly (no mutual inductance):',
                f"{eq_name} = {' + '.join(scientific_text(v) for v in values)} = {text} {unit}",
            ]

    return EquivalentResult(total, unit, f'{text} {unit}', steps)


def equivalent_resistance_series(resistances: Sequence[float]) -> EquivalentResult:
    return equivalent(ComponentKind.RESISTOR, Configuration.SERIES, resistances)


def equivalent_resistance_parallel(resistances: Sequence[float]) -> EquivalentResult:
    return equivalent(ComponentKind.RESISTOR, Configuration.PARALLEL, resistances)


def equivalent_capacitance_series(capacitances: Sequence[float]) -> EquivalentResult:
    return equivalent(ComponentKind.CAPACITOR, Configuration.SERIES, capacitances)


def equivalent_capacitance_parallel(capacitances: Sequence[float]) -> EquivalentResult:
    return equivalent(ComponentKind.CAPACITOR, Configuration.PARALLEL, capacitances)


def equivalent_inductance_series(inductances: Sequence[float]) -> EquivalentResult:
    return equivalent(ComponentKind.INDUCTOR, Configuration.SERIES, inductances)


def equivalent_inductance_parallel(inductances: Sequence[float]) -> EquivalentResult:
    return equivalent(ComponentKind.INDUCTOR, Configuration.PARALLEL, inductances)
