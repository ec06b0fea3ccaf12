"""Circuit routes — LED resistor, Ohm's law, RC time constant, voltage divider."""

from fastapi import APIRouter

from voltkit.errors import CalculationError
from voltkit.formatting import format_si
from voltkit.led import led_resistor
from voltkit.ohms_law import QUANTITIES, ohms_law
from voltkit.rc_circuit import rc_time_constant
from voltkit.voltage_divider import voltage_divider, voltage_divider_with_load
from voltkit_api.fields import (
    fail,
    finite_or_none,
    parse_field,
    parse_optional_field,
    reject,
    step_models,
)
from voltkit_api.models import (
    LEDRequest,
    LEDResponse,
    OhmsLawRequest,
    OhmsLawResponse,
    RCRequest,
    RCResponse,
    RiseTimeModel,
    VoltageDividerRequest,
    VoltageDividerResponse,
)

router = APIRouter()


@router.post("/led-resistor", response_model=LEDResponse)
async def led_resistor_endpoint(request: LEDRequest):
    """Size an LED series resistor, snapped to E24."""
    v_source = parse_field(request.v_source, "Source voltage")
    v_forward = parse_field(request.v_forward, "Forward voltage")
    target_current = parse_field(request.target_current, "Target current")

    try:
        result = led_resistor(v_source, v_forward, target_current)
    except CalculationError as e:
        raise reject(e, "LED resistor")
    except Exception:
        raise fail("LED resistor")

    return LEDResponse(
        resistor_value=result.resistor_value,
        nearest_e24=result.nearest_e24,
        actual_current=result.actual_current,
        power_dissipation=result.power_dissipation,
        suggested_wattage=result.suggested_wattage,
        formatted_resistor=format_si(result.nearest_e24, 3, "Ω"),
        steps=step_models(result.steps),
    )


@router.post("/ohms-law", response_model=OhmsLawResponse)
async def ohms_law_endpoint(request: OhmsLawRequest):
    """Solve V, I, R and P from any two of them."""
    known = {}
    for name in QUANTITIES:
        value = parse_optional_field(getattr(request, name), name.capitalize())
        if value is not None:
            known[name] = value

    try:
        result = ohms_law(known)
    except CalculationError as e:
        raise reject(e, "Ohm's law")
    except Exception:
        raise fail("Ohm's law")

    return OhmsLawResponse(
        voltage=finite_or_none(result.voltage),
        current=finite_or_none(result.current),
        resistance=finite_or_none(result.resistance),
        power=finite_or_none(result.power),
        steps=step_models(result.steps),
    )


@router.post("/rc-time-constant", response_model=RCResponse)
async def rc_time_constant_endpoint(request: RCRequest):
    """τ, cutoff frequency and the 1τ..5τ rise table."""
    resistance = parse_field(request.resistance, "Resistance")
    capacitance = parse_field(request.capacitance, "Capacitance")
    v_in = parse_field(request.v_in, "Input voltage")

    try:
        result = rc_time_constant(resistance, capacitance, v_in)
    except CalculationError as e:
        raise reject(e, "RC time constant")
    except Exception:
        raise fail("RC time constant")

    return RCResponse(
        time_constant=result.time_constant,
        cutoff_frequency=result.cutoff_frequency,
        formatted_time_constant=format_si(result.time_constant, 3, "s"),
        formatted_cutoff=format_si(result.cutoff_frequency, 3, "Hz"),
        rise_times=[
            RiseTimeModel(percent=rt.percent, time=rt.time, voltage=rt.voltage)
            for rt in result.rise_times
        ],
        steps=step_models(result.steps),
    )


@router.post("/voltage-divider", response_model=VoltageDividerResponse)
async def voltage_divider_endpoint(request: VoltageDividerRequest):
    """Divider output, optionally with a load across R2."""
    v_in = parse_field(request.v_in, "Input voltage")
    r1 = parse_field(request.r1, "R1")
    r2 = parse_field(request.r2, "R2")
    r_load = parse_optional_field(request.r_load, "Load resistance")

    try:
        if r_load is None:
            result = voltage_divider(v_in, r1, r2)
        else:
            result = voltage_divider_with_load(v_in, r1, r2, r_load)
    except CalculationError as e:
        raise reject(e, "Voltage divider")
    except Exception:
        raise fail("Voltage divider")

    return VoltageDividerResponse(
        v_out=result.v_out,
        steps=step_models(result.steps),
        v_out_loaded=result.v_out_loaded,
        load_effect=result.load_effect,
        load_warning=result.load_warning,
    )
