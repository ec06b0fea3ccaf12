"""
Tests for the Ohm's law / power solver.

Validates:
1. All six known-value pairs
2. Cross-consistency of the derived quantities
3. Boundary behavior (zero current, zero power)
4. Input validation
"""

import math

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from voltkit.errors import ValidationError
from voltkit.ohms_law import ohms_law


class TestPairs:
    """Each pair of knowns solves the other two."""

    def test_voltage_resistance(self):
        """12V across 1kΩ → 12mA, 144mW."""
        result = ohms_law(voltage=12, resistance=1000)
        assert result.current == pytest.approx(0.012)
        assert result.power == pytest.approx(0.144)

    def test_voltage_current(self):
        result = ohms_law(voltage=5, current=0.5)
        assert result.resistance == pytest.approx(10)
        assert result.power == pytest.approx(2.5)

    def test_current_resistance(self):
        result = ohms_law(current=0.02, resistance=220)
        assert result.voltage == pytest.approx(4.4)
        assert result.power == pytest.approx(0.088)

    def test_voltage_power(self):
        result = ohms_law(voltage=12, power=6)
        assert result.current == pytest.approx(0.5)
        assert result.resistance == pytest.approx(24)

    def test_current_power(self):
        result = ohms_law(current=2, power=8)
        assert result.voltage == pytest.approx(4)
        assert result.resistance == pytest.approx(2)

    def test_resistance_power(self):
        result = ohms_law(resistance=100, power=1)
        assert result.voltage == pytest.approx(10)
        assert result.current == pytest.approx(0.1)

    def test_mapping_form(self):
        result = ohms_law({'voltage': 12, 'resistance': 1000})
        assert result.current == pytest.approx(0.012)


class TestConsistency:

    @pytest.mark.parametrize('known', [
        {'voltage': 9, 'current': 0.3},
        {'voltage': 9, 'resistance': 30},
        {'current': 0.3, 'resistance': 30},
        {'voltage': 9, 'power': 2.7},
        {'current': 0.3, 'power': 2.7},
        {'resistance': 30, 'power': 2.7},
    ])
    def test_every_pair_agrees(self, known):
        """Any pair of 9V / 0.3A / 30Ω / 2.7W reproduces the other two."""
        result = ohms_law(known)
        assert result.voltage == pytest.approx(9)
        assert result.current == pytest.approx(0.3)
        assert result.resistance == pytest.approx(30)
        assert result.power == pytest.approx(2.7)
        assert result.voltage == pytest.approx(result.current * result.resistance)
        assert result.power == pytest.approx(result.voltage * result.current)


class TestBoundaries:

    def test_zero_current_gives_infinite_resistance(self):
        result = ohms_law(voltage=10, current=0)
        assert math.isinf(result.resistance)
        assert result.power == 0
        assert result.steps[1].formatted == 'InfinityΩ'

    def test_zero_power_gives_infinite_resistance(self):
        result = ohms_law(voltage=10, power=0)
        assert math.isinf(result.resistance)
        assert result.current == 0

    def test_zero_voltage_allowed_with_resistance(self):
        result = ohms_law(voltage=0, resistance=100)
        assert result.current == 0
        assert result.power == 0


class TestSteps:

    def test_three_steps(self):
        result = ohms_law(voltage=12, resistance=1000)
        assert len(result.steps) == 3
        assert result.steps[0].formula == 'V = 12V, R = 1000Ω'
        assert result.steps[1].formula == 'I = V / R = 12V / 1000Ω = 0.012000A'
        assert result.steps[2].formula == 'P = V² / R = 12² / 1000 = 0.1440W'

    def test_first_step_is_narrative(self):
        result = ohms_law(current=1, power=1)
        assert result.steps[0].is_narrative
        assert result.steps[0].result == 0

    def test_to_dict(self):
        data = ohms_law(voltage=1, current=1).to_dict()
        assert data['resistance'] == 1
        assert len(data['steps']) == 3


class TestValidation:

    def test_one_known(self):
        with pytest.raises(ValidationError, match='exactly two'):
            ohms_law(voltage=5)

    def test_three_knowns(self):
        with pytest.raises(ValidationError, match='exactly two'):
            ohms_law(voltage=5, current=1, resistance=5)

    def test_unknown_quantity(self):
        with pytest.raises(ValidationError):
            ohms_law({'voltage': 5, 'charge': 1})

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            ohms_law(voltage=float('nan'), current=1)

    def test_negative_voltage(self):
        with pytest.raises(ValidationError, match='non-negative'):
            ohms_law(voltage=-1, current=1)

    def test_zero_resistance(self):
        with pytest.raises(ValidationError, match='resistance must be positive'):
            ohms_law(voltage=5, resistance=0)

    def test_zero_current_with_power(self):
        with pytest.raises(ValidationError, match='Current must be positive'):
            ohms_law(current=0, power=1)

    def test_negative_power(self):
        with pytest.raises(ValidationError, match='power must be non-negative'):
            ohms_law(resistance=10, power=-1)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
