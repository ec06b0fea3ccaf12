"""
VoltKit Compute Engine

Engineering value parsing, SI formatting and closed-form circuit
calculators (series/parallel combination, LED resistor sizing, Ohm's law,
RC time constants, voltage dividers, battery life, resistor color codes).

Every calculator returns its result together with an ordered derivation
trail so the numbers can be audited step by step.
"""

from voltkit.errors import CalculationError, ValidationError, DomainError
from voltkit.steps import DerivationStep, StepKind
from voltkit.units import (
    ParsedValue, ParseError, parse_value, parse_multiple_values, is_parse_error, convert_units,
)
from voltkit.formatting import format_si, format_raw, format_number
from voltkit.components import nearest_e24, suggest_wattage, with_tolerance, power_dissipation
from voltkit.combination import ComponentKind, Configuration, combine, equivalent
from voltkit.led import led_resistor
from voltkit.ohms_law import ohms_law
from voltkit.rc_circuit import rc_time_constant, rc_voltage_at_time, rc_time_to_voltage, rc_step_response
from voltkit.voltage_divider import voltage_divider, voltage_divider_with_load
from voltkit.battery import (
    COMMON_BATTERIES, calculate_battery_life, calculate_required_capacity, calculate_max_load_current,
)
from voltkit.color_code import decode_4band, decode_5band, encode_4band, encode_5band

__version__ = "0.1.0"
