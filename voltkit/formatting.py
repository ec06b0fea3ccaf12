"""
SI-prefix formatting and number-to-text helpers.

format_si() is the display formatter used for every headline result.
The lower-level helpers (number_text, fixed, exponential, precision) produce
the exact number text that appears inside derivation formulas, so their
output is part of the result contract:

    number_text(4700.0)       → '4700'
    number_text(1e-7)         → '1e-7'
    fixed(0.0012345, 6)       → '0.001235'
    exponential(2.2e-7, 4)    → '2.2000e-7'
    precision(4700, 10)       → '4700.000000'
"""

import math
from decimal import Decimal

# SI prefix table, smallest first. A magnitude belongs to the largest
# threshold it meets.
_SI_PREFIXES = [
    (1e-15, 'f'),
    (1e-12, 'p'),
    (1e-9,  'n'),
    (1e-6,  'µ'),
    (1e-3,  'm'),
    (1e0,   ''),
    (1e3,   'k'),
    (1e6,   'M'),
    (1e9,   'G'),
    (1e12,  'T'),
]

INVALID = 'Invalid'


def _non_finite_text(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    return 'Infinity' if value > 0 else '-Infinity'


def _short_exponent(text: str) -> str:
    """'1.5e-07' → '1.5e-7', '1.50e+00' → '1.50e+0'."""
    mantissa, exp = text.split('e')
    sign = '-' if exp.startswith('-') else '+'
    return f"{mantissa}e{sign}{int(exp.lstrip('+-'))}"


def number_text(value: float) -> str:
    """
    Shortest text that reads back as the same float.

    Whole numbers print without a decimal point; magnitudes from 1e-6 up to
    1e21 print in positional notation, everything else in exponential form.
    """
    if not math.isfinite(value):
        return _non_finite_text(value)
    if value == 0:
        return '0'

    sign = '-' if value < 0 else ''
    dec = Decimal(repr(abs(float(value)))).normalize()
    _, digit_tuple, exp = dec.as_tuple()
    digits = ''.join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exp + k  # position of the decimal point relative to the digits

    if k <= n <= 21:
        body = digits + '0' * (n - k)
    elif 0 < n <= 21:
        body = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        body = f"0.{'0' * -n}{digits}"
    else:
        e = n - 1
        body = digits[0]
        if k > 1:
            body += '.' + digits[1:]
        body += f"e{'+' if e >= 0 else '-'}{abs(e)}"

    return sign + body


def fixed(value: float, digits: int) -> str:
    """Fixed-point text with exactly ``digits`` decimals."""
    if not math.isfinite(value):
        return _non_finite_text(value)
    return f"{value:.{digits}f}"


def exponential(value: float, digits: int) -> str:
    """Exponential text with ``digits`` fractional mantissa digits."""
    if not math.isfinite(value):
        return _non_finite_text(value)
    return _short_exponent(f"{value:.{digits}e}")


def precision(value: float, sig_figs: int) -> str:
    """
    Text with ``sig_figs`` significant digits, trailing zeros kept.

    Positional notation is used while the decimal exponent lies in
    [-6, sig_figs); exponential notation otherwise.
    """
    if not math.isfinite(value):
        return _non_finite_text(value)
    if value == 0:
        return '0' if sig_figs == 1 else '0.' + '0' * (sig_figs - 1)

    rounded = f"{value:.{sig_figs - 1}e}"
    exp = int(rounded.split('e')[1])
    if exp < -6 or exp >= sig_figs:
        return _short_exponent(rounded)
    return f"{value:.{sig_figs - 1 - exp}f}"


def format_si(value: float, sig_figs: int = 3, unit: str = '') -> str:
    """
    Format a value with an SI prefix.

    Examples:
        format_si(4700, 2, 'Ω')   → '4.7kΩ'
        format_si(220e-9, 3, 'F') → '220nF'
        format_si(0, 3, 'V')      → '0 V'
        format_si(nan)            → 'Invalid'
    """
    if not math.isfinite(value):
        return INVALID

    if value == 0:
        return f"0 {unit}" if unit else '0'

    abs_value = abs(value)

    for scale, prefix in reversed(_SI_PREFIXES):
        if abs_value >= scale:
            scaled = value / scale
            # Round, then read back, so trailing zeros disappear
            rounded = float(precision(scaled, sig_figs))
            return f"{number_text(rounded)}{prefix}{unit}"

    # Smaller than femto: scientific notation
    text = exponential(value, sig_figs - 1)
    return f"{text} {unit}" if unit else text


def format_raw(value: float, precision_digits: int = 10) -> str:
    """Full-precision text with ``precision_digits`` significant digits."""
    if not math.isfinite(value):
        return INVALID
    return precision(value, precision_digits)


def format_number(value: float, unit: str = '', sigfigs: int = 3, raw: bool = False) -> str:
    """
    Display formatter for results.

    SI-prefixed by default. With ``raw=True`` the value is shown to 10
    significant digits with trailing zeros removed and no prefix.
    """
    if raw:
        if not math.isfinite(value):
            return INVALID
        return number_text(float(precision(value, 10)))
    return format_si(value, sigfigs, unit)
