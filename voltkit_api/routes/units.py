"""Unit routes — value parsing and SI prefix conversion."""

from fastapi import APIRouter

from voltkit.errors import CalculationError
from voltkit.units import convert_units, is_parse_error, parse_multiple_values, parse_value
from voltkit_api.fields import fail, reject
from voltkit_api.models import (
    ConvertRequest,
    ConvertResponse,
    ParseRequest,
    ParseResponse,
    ParseResultModel,
    PrefixConversionModel,
)

router = APIRouter()


@router.post("/parse", response_model=ParseResponse)
async def parse_endpoint(request: ParseRequest):
    """Parse one or more engineering values.

    Parse failures are part of the response, one entry per token, so a
    batch with a bad token still returns 200.
    """
    outcomes = parse_multiple_values(request.text) or [parse_value(request.text)]

    results = []
    for outcome in outcomes:
        if is_parse_error(outcome):
            results.append(ParseResultModel(raw=outcome.raw, error=outcome.message))
        else:
            results.append(ParseResultModel(raw=outcome.raw, value=outcome.value, unit=outcome.unit))

    return ParseResponse(results=results)


@router.post("/convert", response_model=ConvertResponse)
async def convert_endpoint(request: ConvertRequest):
    """Show a value in every SI prefix of its quantity."""
    try:
        conversion = convert_units(request.value, request.quantity.value)
    except CalculationError as e:
        raise reject(e, "Conversion")
    except Exception:
        raise fail("Conversion")

    return ConvertResponse(
        base_value=conversion.base_value,
        symbol=conversion.symbol,
        formatted=conversion.formatted,
        conversions=[
            PrefixConversionModel(
                prefix=c.prefix,
                name=c.name,
                multiplier=c.multiplier,
                value=c.value,
                display=c.display,
            )
            for c in conversion.conversions
        ],
    )
