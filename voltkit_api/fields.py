"""Request field parsing shared by the calculator routes."""

import logging
import math
from typing import List, Optional, Sequence

from fastapi import HTTPException

from voltkit.errors import CalculationError
from voltkit.steps import DerivationStep
from voltkit.units import is_parse_error, parse_value
from voltkit_api.models import DerivationStepModel

logger = logging.getLogger(__name__)


def parse_field(text: str, label: str) -> float:
    """Parse one raw text field, rejecting the request with a 400 on failure."""
    outcome = parse_value(text)
    if is_parse_error(outcome):
        logger.info("Rejected field %s=%r: %s", label, text, outcome.message)
        raise HTTPException(status_code=400, detail=f"{label}: {outcome.message}")
    return outcome.value


def parse_optional_field(text: Optional[str], label: str) -> Optional[float]:
    """Blank or missing fields are treated as not given."""
    if text is None or not text.strip():
        return None
    return parse_field(text, label)


def parse_field_list(texts: Sequence[str], label: str) -> List[float]:
    """Parse each entry; the first failing entry is reported as label1, label2, ..."""
    return [parse_field(text, f"{label}{i + 1}") for i, text in enumerate(texts)]


def reject(error: CalculationError, route: str) -> HTTPException:
    """Log a rejected calculation and build the 400 response for it."""
    logger.info("%s rejected: %s", route, error)
    return HTTPException(status_code=400, detail=str(error))


def fail(route: str) -> HTTPException:
    """Log an unexpected failure with its traceback and build a 500 response."""
    logger.error("%s failed", route, exc_info=True)
    return HTTPException(status_code=500, detail=f"{route} calculation failed. Please try again.")


def finite_or_none(value: float) -> Optional[float]:
    """JSON has no Infinity; unbounded results (e.g. R with zero current) go out as null."""
    return value if math.isfinite(value) else None


def step_models(steps: Sequence[DerivationStep]) -> List[DerivationStepModel]:
    models = []
    for step in steps:
        data = step.to_dict()
        data["result"] = finite_or_none(step.result)
        models.append(DerivationStepModel(**data))
    return models

