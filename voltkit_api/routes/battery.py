"""Battery routes — runtime, required capacity, maximum load."""

from fastapi import APIRouter, HTTPException

from voltkit.battery import (
    COMMON_BATTERIES,
    calculate_battery_life,
    calculate_max_load_current,
    calculate_required_capacity,
)
from voltkit.errors import CalculationError
from voltkit_api.fields import fail, reject
from voltkit_api.models import (
    BatteryInfo,
    BatteryLifeModel,
    BatteryListResponse,
    BatteryRequest,
    BatteryResponse,
    BatterySolve,
)

router = APIRouter()

# Inputs each solve mode needs
_REQUIRED = {
    BatterySolve.RUNTIME: ("capacity_mah", "load_current_ma"),
    BatterySolve.CAPACITY: ("load_current_ma", "runtime_hours"),
    BatterySolve.LOAD_CURRENT: ("capacity_mah", "runtime_hours"),
}


@router.post("/battery-life", response_model=BatteryResponse)
async def battery_life_endpoint(request: BatteryRequest):
    """Solve for runtime, required capacity or maximum load current."""
    for name in _REQUIRED[request.solve]:
        if getattr(request, name) is None:
            raise HTTPException(status_code=400, detail=f"{name} is required to solve for {request.solve.value}")

    try:
        if request.solve is BatterySolve.RUNTIME:
            result = calculate_battery_life(request.capacity_mah, request.load_current_ma, request.efficiency)
            return BatteryResponse(solve=request.solve, runtime=BatteryLifeModel(**result.to_dict()))

        if request.solve is BatterySolve.CAPACITY:
            capacity = calculate_required_capacity(
                request.load_current_ma, request.runtime_hours, request.efficiency,
            )
            return BatteryResponse(solve=request.solve, capacity_mah=capacity)

        load = calculate_max_load_current(request.capacity_mah, request.runtime_hours, request.efficiency)
        return BatteryResponse(solve=request.solve, load_current_ma=load)
    except CalculationError as e:
        raise reject(e, "Battery life")
    except Exception:
        raise fail("Battery life")


@router.get("/batteries", response_model=BatteryListResponse)
async def list_batteries():
    """Nominal capacity and voltage of common cells, for prefilling inputs."""
    batteries = [
        BatteryInfo(name=name, capacity=spec["capacity"], voltage=spec["voltage"])
        for name, spec in COMMON_BATTERIES.items()
    ]
    return BatteryListResponse(batteries=batteries, total=len(batteries))
