"""
Resistor color code encode/decode for 4-band and 5-band resistors.

4-band: digit, digit, multiplier, tolerance
5-band: digit, digit, digit, multiplier (+ temperature coefficient), tolerance

Color names are case-insensitive; both "grey" and "gray" are accepted.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from voltkit.errors import DomainError, ValidationError
from voltkit.formatting import number_text

# Significant-digit and multiplier colors
COLORS: Dict[str, int] = {
    'black': 0,
    'brown': 1,
    'red': 2,
    'orange': 3,
    'yellow': 4,
    'green': 5,
    'blue': 6,
    'violet': 7,
    'grey': 8,
    'gray': 8,  # US spelling
    'white': 9,
}

TOLERANCE_COLORS: Dict[str, str] = {
    'brown': '±1%',
    'red': '±2%',
    'orange': '±0.05%',
    'yellow': '±0.1%',
    'green': '±0.5%',
    'blue': '±0.25%',
    'violet': '±0.1%',
    'grey': '±0.05%',
    'gray': '±0.05%',
    'gold': '±5%',
    'silver': '±10%',
}

# Read from the multiplier band of 5-band codes
TEMP_COEFF_COLORS: Dict[str, str] = {
    'brown': '100 ppm/K',
    'red': '50 ppm/K',
    'orange': '15 ppm/K',
    'yellow': '25 ppm/K',
    'green': '20 ppm/K',
    'blue': '10 ppm/K',
    'violet': '5 ppm/K',
}

# Digit → color name. Later spellings win, so 8 encodes as "gray".
_DIGIT_COLORS: Dict[int, str] = {digit: name for name, digit in COLORS.items()}

MAX_EXPONENT = 7


@dataclass
class ColorCodeResult:
    value: float
    tolerance: str
    formatted: str
    bands: List[str]
    temp_coeff: Optional[str] = None

    def to_dict(self) -> Dict:
        data = {
            'value': self.value,
            'tolerance': self.tolerance,
            'formatted': self.formatted,
            'bands': list(self.bands),
        }
        if self.temp_coeff is not None:
            data['temp_coeff'] = self.temp_coeff
        return data


@dataclass
class EncodeResult:
    colors: List[str]
    formatted: str
    resistance: float

    def to_dict(self) -> Dict:
        return {'colors': list(self.colors), 'formatted': self.formatted, 'resistance': self.resistance}


def _decode(colors: Sequence[str], digit_count: int) -> ColorCodeResult:
    band_count = digit_count + 2
    if len(colors) < band_count:
        raise ValidationError(f'{band_count}-band resistor requires exactly {band_count} colors')

    bands = [c.lower() for c in colors[:band_count]]
    value_bands = bands[:digit_count + 1]
    tolerance_band = bands[-1]

    if not all(b in COLORS for b in value_bands):
        ordinal = 'three' if band_count == 4 else 'four'
        raise ValidationError(f'Invalid color in first {ordinal} bands')

    if tolerance_band not in TOLERANCE_COLORS:
        raise ValidationError('Invalid tolerance color')

    digits = [COLORS[b] for b in value_bands[:digit_count]]
    if digits[0] == 0:
        raise ValidationError('First band cannot be black')

    mantissa = 0
    for d in digits:
        mantissa = mantissa * 10 + d

    multiplier_band = value_bands[-1]
    value = float(mantissa * 10 ** COLORS[multiplier_band])

    return ColorCodeResult(
        value=value,
        tolerance=TOLERANCE_COLORS[tolerance_band],
        formatted=f'{number_text(value)} Ω',
        bands=[c.lower() for c in colors],
        temp_coeff=TEMP_COEFF_COLORS.get(multiplier_band) if digit_count == 3 else None,
    )


def decode_4band(colors: Sequence[str]) -> ColorCodeResult:
    """
    Decode a 4-band code.

    Example:
        decode_4band(['brown', 'red', 'red', 'gold']) → 1200 Ω ±5%
    """
    return _decode(colors, 2)


def decode_5band(colors: Sequence[str]) -> ColorCodeResult:
    """Decode a 5-band code, including the temperature coefficient if the multiplier band has one."""
    return _decode(colors, 3)


def _tolerance_color(tolerance: str) -> str:
    for name, tol in TOLERANCE_COLORS.items():
        if tol == tolerance:
            return name
    raise ValidationError('Invalid tolerance value')


def _encode(resistance: float, tolerance: str, digit_count: int) -> EncodeResult:
    band_count = digit_count + 2
    tolerance_color = _tolerance_color(tolerance)

    if not math.isfinite(resistance) or resistance <= 0:
        raise DomainError(f'Cannot encode resistance value with {band_count}-band colors')

    upper = 10 ** digit_count
    lower = 10 ** (digit_count - 1)

    # Normalize to digit_count significant digits: [10, 100) or [100, 1000)
    exponent = 0
    mantissa = resistance
    while mantissa >= upper and exponent < MAX_EXPONENT:
        mantissa /= 10
        exponent += 1
    while mantissa < lower and exponent > 0:
        mantissa *= 10
        exponent -= 1

    if digit_count == 2:
        digits = [math.floor(mantissa / 10), math.floor(mantissa % 10)]
    else:
        digits = [
            math.floor(mantissa / 100),
            math.floor((mantissa % 100) / 10),
            math.floor(mantissa % 10),
        ]

    if not 1 <= digits[0] <= 9:
        raise DomainError(f'Cannot encode resistance value with {band_count}-band colors')

    colors = [_DIGIT_COLORS[d] for d in digits]
    colors.append(_DIGIT_COLORS[exponent])
    colors.append(tolerance_color)

    return EncodeResult(colors=colors, formatted='-'.join(colors), resistance=resistance)


def encode_4band(resistance: float, tolerance: str) -> EncodeResult:
    """
    Encode a resistance as a 4-band code with two significant digits.

    Example:
        encode_4band(4700, '±5%').colors → ['yellow', 'violet', 'red', 'gold']
    """
    return _encode(resistance, tolerance, 2)


def encode_5band(resistance: float, tolerance: str) -> EncodeResult:
    """Encode a resistance as a 5-band code with three significant digits."""
    return _encode(resistance, tolerance, 3)


def is_valid_color(color: str) -> bool:
    color = color.lower()
    return color in COLORS or color in TOLERANCE_COLORS


def get_color_list() -> List[str]:
    return list(COLORS.keys())


def get_tolerance_color_list() -> List[str]:
    return list(TOLERANCE_COLORS.keys())
