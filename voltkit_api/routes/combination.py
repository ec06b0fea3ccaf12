"""Combination routes — series/parallel R, C and L."""

from fastapi import APIRouter

from voltkit.combination import ComponentKind, combine, equivalent
from voltkit.errors import CalculationError
from voltkit.formatting import format_si
from voltkit_api.fields import fail, parse_field_list, reject, step_models
from voltkit_api.models import (
    CombineRequest,
    CombineResponse,
    EquivalentResponse,
)

router = APIRouter()

# Values shown before anything has been entered
DEFAULT_VALUES = {
    ComponentKind.RESISTOR: ["4.7k", "10k", "2.2k"],
    ComponentKind.CAPACITOR: ["100n", "100n", "100n"],
    ComponentKind.INDUCTOR: ["1m", "1m", "1m"],
}

_SYMBOLS = {
    ComponentKind.RESISTOR: ("R", "Ω"),
    ComponentKind.CAPACITOR: ("C", "F"),
    ComponentKind.INDUCTOR: ("L", "H"),
}


def _parse_values(request: CombineRequest) -> list:
    texts = request.values if request.values is not None else DEFAULT_VALUES[request.kind]
    symbol, _ = _SYMBOLS[request.kind]
    return parse_field_list(texts, symbol)


@router.post("/combine", response_model=CombineResponse)
async def combine_endpoint(request: CombineRequest):
    """Combine components with a step-by-step derivation."""
    values = _parse_values(request)
    _, unit = _SYMBOLS[request.kind]

    try:
        result = combine(request.kind.value, request.configuration.value, values)
    except CalculationError as e:
        raise reject(e, "Combination")
    except Exception:
        raise fail("Combination")

    return CombineResponse(
        value=result.value,
        formatted=format_si(result.value, request.sig_figs, unit),
        steps=step_models(result.steps),
    )


@router.post("/equivalent", response_model=EquivalentResponse)
async def equivalent_endpoint(request: CombineRequest):
    """Equivalent value with plain-text steps; an empty list is an error here."""
    values = _parse_values(request)

    try:
        result = equivalent(request.kind.value, request.configuration.value, values)
    except CalculationError as e:
        raise reject(e, "Equivalent")
    except Exception:
        raise fail("Equivalent")

    return EquivalentResponse(**result.to_dict())
