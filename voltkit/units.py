"""
Engineering value parser and unit converter.

Parses free-form text such as "4.7k", "220nF", "10kΩ" or "1.5e3" into an
SI-expanded number plus an optional canonical unit. Parse failures are
returned as ParseError values rather than raised, so a form can show them
next to the offending field.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from voltkit.errors import ValidationError
from voltkit.formatting import format_si, precision

SI_PREFIXES: Dict[str, float] = {
    'T': 1e12,
    'G': 1e9,
    'M': 1e6,
    'k': 1e3,
    'K': 1e3,   # capital K accepted for kilo
    '': 1.0,
    'm': 1e-3,
    'u': 1e-6,
    'µ': 1e-6,  # micro sign
    'μ': 1e-6,  # greek mu
    'n': 1e-9,
    'p': 1e-12,
    'f': 1e-15,
}

UNIT_ALIASES: Dict[str, str] = {
    'ohm': 'Ω',
    'ohms': 'Ω',
    'Ω': 'Ω',
    'R': 'Ω',
    'F': 'F',
    'farad': 'F',
    'farads': 'F',
    'H': 'H',
    'henry': 'H',
    'henries': 'H',
    'henrys': 'H',
    'V': 'V',
    'volt': 'V',
    'volts': 'V',
    'A': 'A',
    'amp': 'A',
    'amps': 'A',
    'ampere': 'A',
    'amperes': 'A',
    'W': 'W',
    'watt': 'W',
    'watts': 'W',
    'Hz': 'Hz',
    'hertz': 'Hz',
}

# number, optional SI prefix, optional unit token
_VALUE_RE = re.compile(
    r'^([+-]?\d*\.?\d+(?:[eE][+-]?\d+)?)\s*([TGMkKmuµμnpf]?)\s*(\w*|Ω)?$',
    re.ASCII,
)

_SPLIT_RE = re.compile(r'[,\s]+')


@dataclass(frozen=True)
class ParsedValue:
    value: float
    unit: Optional[str]
    raw: str

    def to_dict(self) -> Dict:
        return {'value': self.value, 'unit': self.unit, 'raw': self.raw}


@dataclass(frozen=True)
class ParseError:
    message: str
    raw: str
    type: str = field(default='error', init=False)

    def to_dict(self) -> Dict:
        return {'type': self.type, 'message': self.message, 'raw': self.raw}


ParseOutcome = Union[ParsedValue, ParseError]


def _normalize_unit(unit: str) -> Optional[str]:
    if not unit:
        return None
    return UNIT_ALIASES.get(unit.lower()) or UNIT_ALIASES.get(unit) or unit


def _apply_prefix(base: float, multiplier: float) -> float:
    if multiplier < 1:
        # Divide by the exact power of ten so "100u" reads back as 1e-4
        return base / round(1 / multiplier)
    return base * multiplier


def parse_value(text: str) -> ParseOutcome:
    """
    Parse a value with optional SI prefix and unit.

    Examples:
        parse_value('4.7k')   → ParsedValue(4700.0, None, '4.7k')
        parse_value('220nF')  → ParsedValue(2.2e-07, 'F', '220nF')
        parse_value('10kohm') → ParsedValue(10000.0, 'Ω', '10kohm')
        parse_value('')       → ParseError('Input cannot be empty', '')
    """
    raw = text.strip()

    if not raw:
        return ParseError('Input cannot be empty', raw)

    match = _VALUE_RE.match(raw)
    if not match:
        return ParseError(
            f'Invalid format: "{raw}". Use formats like "4.7k", "220nF", "10kΩ"',
            raw,
        )

    num_str, prefix, unit_str = match.groups()
    base_value = float(num_str)

    if not math.isfinite(base_value):
        return ParseError('Value must be a finite number', raw)

    value = _apply_prefix(base_value, SI_PREFIXES.get(prefix, 1.0))

    if not math.isfinite(value):
        return ParseError('Resulting value is too large or invalid', raw)

    return ParsedValue(value, _normalize_unit(unit_str or ''), raw)


def parse_multiple_values(text: str) -> List[ParseOutcome]:
    """Parse a comma- or whitespace-separated list; each token stands alone."""
    return [parse_value(part) for part in _SPLIT_RE.split(text) if part]


def is_parse_error(outcome: ParseOutcome) -> bool:
    return isinstance(outcome, ParseError)


def validate_positive(value: float, field_name: str) -> Optional[str]:
    """Return an error message if ``value`` is not strictly positive."""
    if value < 0:
        return f"{field_name} cannot be negative"
    if value == 0:
        return f"{field_name} cannot be zero"
    return None


def validate_non_negative(value: float, field_name: str) -> Optional[str]:
    if value < 0:
        return f"{field_name} cannot be negative"
    return None


# --- Unit converter ---

QUANTITY_UNITS: Dict[str, Dict[str, str]] = {
    'resistance':  {'symbol': 'Ω',  'name': 'Ohms'},
    'capacitance': {'symbol': 'F',  'name': 'Farads'},
    'inductance':  {'symbol': 'H',  'name': 'Henries'},
    'voltage':     {'symbol': 'V',  'name': 'Volts'},
    'current':     {'symbol': 'A',  'name': 'Amperes'},
    'power':       {'symbol': 'W',  'name': 'Watts'},
    'frequency':   {'symbol': 'Hz', 'name': 'Hertz'},
}

CONVERSION_PREFIXES = [
    ('T', 1e12, 'Tera'),
    ('G', 1e9, 'Giga'),
    ('M', 1e6, 'Mega'),
    ('k', 1e3, 'Kilo'),
    ('', 1.0, 'Base'),
    ('m', 1e-3, 'Milli'),
    ('µ', 1e-6, 'Micro'),
    ('n', 1e-9, 'Nano'),
    ('p', 1e-12, 'Pico'),
]


@dataclass(frozen=True)
class PrefixConversion:
    prefix: str
    name: str
    multiplier: float
    value: float
    display: str


@dataclass
class UnitConversion:
    base_value: float
    symbol: str
    formatted: str
    conversions: List[PrefixConversion]

    def to_dict(self) -> Dict:
        return {
            'base_value': self.base_value,
            'symbol': self.symbol,
            'formatted': self.formatted,
            'conversions': [
                {
                    'prefix': c.prefix,
                    'name': c.name,
                    'multiplier': c.multiplier,
                    'value': c.value,
                    'display': c.display,
                }
                for c in self.conversions
            ],
        }


def convert_units(text: str, quantity: str = 'resistance') -> UnitConversion:
    """
    Express an entered value in every SI prefix from tera down to pico.

    Raises ValidationError if the text does not parse or the quantity is
    unknown.
    """
    if quantity not in QUANTITY_UNITS:
        raise ValidationError(
            f"Unknown quantity '{quantity}'. Must be one of: {list(QUANTITY_UNITS.keys())}"
        )

    parsed = parse_value(text)
    if isinstance(parsed, ParseError):
        raise ValidationError(parsed.message)

    symbol = QUANTITY_UNITS[quantity]['symbol']
    base_value = parsed.value

    conversions = []
    for prefix, multiplier, name in CONVERSION_PREFIXES:
        scaled = base_value / multiplier
        conversions.append(PrefixConversion(
            prefix=prefix,
            name=name,
            multiplier=multiplier,
            value=scaled,
            display=f"{precision(scaled, 6)} {prefix}{symbol}",
        ))

    return UnitConversion(
        base_value=base_value,
        symbol=symbol,
        formatted=format_si(base_value, 4, symbol),
        conversions=conversions,
    )
