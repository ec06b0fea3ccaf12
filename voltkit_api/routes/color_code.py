"""Color code routes — decode and encode resistor bands."""

from fastapi import APIRouter

from voltkit.color_code import (
    decode_4band,
    decode_5band,
    encode_4band,
    encode_5band,
    get_color_list,
    get_tolerance_color_list,
)
from voltkit.errors import CalculationError
from voltkit_api.fields import fail, parse_field, reject
from voltkit_api.models import (
    BandCount,
    ColorDecodeRequest,
    ColorDecodeResponse,
    ColorEncodeRequest,
    ColorEncodeResponse,
    ColorListResponse,
)

router = APIRouter()

_DECODERS = {BandCount.FOUR: decode_4band, BandCount.FIVE: decode_5band}
_ENCODERS = {BandCount.FOUR: encode_4band, BandCount.FIVE: encode_5band}


@router.post("/color-code/decode", response_model=ColorDecodeResponse)
async def decode_endpoint(request: ColorDecodeRequest):
    """Read the resistance, tolerance and (5-band) temperature coefficient from band colors."""
    try:
        result = _DECODERS[request.bands](request.colors)
    except CalculationError as e:
        raise reject(e, "Color code decode")
    except Exception:
        raise fail("Color code decode")

    return ColorDecodeResponse(**result.to_dict())


@router.post("/color-code/encode", response_model=ColorEncodeResponse)
async def encode_endpoint(request: ColorEncodeRequest):
    """Band colors for a resistance and tolerance."""
    resistance = parse_field(request.resistance, "Resistance")

    try:
        result = _ENCODERS[request.bands](resistance, request.tolerance)
    except CalculationError as e:
        raise reject(e, "Color code encode")
    except Exception:
        raise fail("Color code encode")

    return ColorEncodeResponse(**result.to_dict())


@router.get("/color-code/colors", response_model=ColorListResponse)
async def list_colors():
    return ColorListResponse(colors=get_color_list(), tolerance_colors=get_tolerance_color_list())
