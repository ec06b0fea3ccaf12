"""
Tests for the RC time constant calculator.

Validates:
1. τ = RC and f_c = 1/(2πτ)
2. The 1τ..5τ rise table
3. Charging-curve helpers and numpy step response
4. Input validation
"""

import math

import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from voltkit.errors import ValidationError
from voltkit.rc_circuit import (
    RISE_PERCENTAGES,
    rc_time_constant,
    rc_voltage_at_time,
    rc_time_to_voltage,
    rc_step_response,
)


class TestTimeConstant:
    """Test τ and cutoff frequency."""

    def test_1k_1u(self):
        """1kΩ × 1µF → τ = 1ms, f_c ≈ 159.15Hz."""
        result = rc_time_constant(1000, 1e-6)
        assert result.time_constant == pytest.approx(1e-3)
        assert result.cutoff_frequency == pytest.approx(159.154943, rel=1e-6)

    def test_product_identity(self):
        """f_c × τ = 1/(2π) for any R, C."""
        for r, c in [(10, 1e-9), (4700, 220e-9), (1e6, 1e-3)]:
            result = rc_time_constant(r, c)
            assert result.cutoff_frequency * result.time_constant == pytest.approx(1 / (2 * math.pi))

    def test_rise_table(self):
        result = rc_time_constant(1000, 1e-6, v_in=5)
        assert [rt.percent for rt in result.rise_times] == RISE_PERCENTAGES
        assert result.rise_times[0].time == pytest.approx(1e-3)
        assert result.rise_times[4].time == pytest.approx(5e-3)
        assert result.rise_times[0].voltage == pytest.approx(5 * (1 - math.exp(-1)))

    def test_rise_voltages_track_percentages(self):
        result = rc_time_constant(1000, 1e-6, v_in=1)
        for rt in result.rise_times:
            assert rt.voltage * 100 == pytest.approx(rt.percent, abs=0.1)


class TestSteps:

    def test_step_count(self):
        """2 τ steps, 2 f_c steps, 1 step-response header, 5 rise points."""
        assert len(rc_time_constant(1000, 1e-6).steps) == 10

    def test_step_text(self):
        steps = rc_time_constant(1000, 1e-6).steps
        assert steps[0].formula == 'τ = R × C'
        assert steps[1].formatted == '1.0000e-3s'
        assert steps[3].formatted == '159.15Hz'
        assert steps[5].description == 'At t = 1τ'
        assert steps[5].formatted == '63.2%'
        assert steps[9].formatted == '99.3%'

    def test_to_dict(self):
        data = rc_time_constant(1000, 1e-6).to_dict()
        assert len(data['rise_times']) == 5
        assert set(data['rise_times'][0]) == {'percent', 'time', 'voltage'}


class TestChargingCurve:

    def test_voltage_at_one_tau(self):
        v = rc_voltage_at_time(1000, 1e-6, 1e-3, v_in=10)
        assert v == pytest.approx(10 * (1 - math.exp(-1)))

    def test_time_to_half(self):
        t = rc_time_to_voltage(1000, 1e-6, 0.5, v_in=1)
        assert t == pytest.approx(1e-3 * math.log(2))

    def test_time_to_voltage_inverts_voltage_at_time(self):
        t = rc_time_to_voltage(4700, 100e-9, 3.0, v_in=5)
        assert rc_voltage_at_time(4700, 100e-9, t, v_in=5) == pytest.approx(3.0)

    def test_never_reaches_input(self):
        assert math.isinf(rc_time_to_voltage(1000, 1e-6, 1.0, v_in=1))
        assert math.isinf(rc_time_to_voltage(1000, 1e-6, 2.0, v_in=1))


class TestStepResponse:

    def test_shape_and_endpoints(self):
        t, v = rc_step_response(1000, 1e-6, v_in=5, num_points=101)
        assert t.shape == v.shape == (101,)
        assert t[0] == 0
        assert t[-1] == pytest.approx(5e-3)
        assert v[0] == 0
        assert v[-1] == pytest.approx(5 * (1 - math.exp(-5)))

    def test_monotonic(self):
        _, v = rc_step_response(1000, 1e-6)
        assert np.all(np.diff(v) > 0)

    def test_too_few_points(self):
        with pytest.raises(ValidationError):
            rc_step_response(1000, 1e-6, num_points=1)


class TestValidation:

    def test_zero_resistance(self):
        with pytest.raises(ValidationError, match='Resistance must be positive'):
            rc_time_constant(0, 1e-6)

    def test_negative_capacitance(self):
        with pytest.raises(ValidationError, match='Capacitance must be positive'):
            rc_time_constant(1000, -1e-6)

    def test_infinite(self):
        with pytest.raises(ValidationError, match='finite'):
            rc_time_constant(math.inf, 1e-6)

    def test_time_constant_underflow(self):
        """R × C rounding to 0 has no cutoff frequency."""
        with pytest.raises(ValidationError, match='representable range'):
            rc_time_constant(1e-200, 1e-200)

    def test_time_constant_overflow(self):
        with pytest.raises(ValidationError, match='representable range'):
            rc_time_constant(1e200, 1e200)

    def test_subnormal_time_constant(self):
        with pytest.raises(ValidationError, match='representable range'):
            rc_time_constant(1e-160, 1e-150)

    def test_helpers_share_the_range_check(self):
        with pytest.raises(ValidationError, match='representable range'):
            rc_voltage_at_time(1e-200, 1e-200, 1.0)
        with pytest.raises(ValidationError, match='representable range'):
            rc_step_response(1e-200, 1e-200)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
