"""Pydantic models for VoltKit API requests and responses."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from voltkit.combination import ComponentKind, Configuration


# --- Enums ---

class Quantity(str, Enum):
    RESISTANCE = "resistance"
    CAPACITANCE = "capacitance"
    INDUCTANCE = "inductance"
    VOLTAGE = "voltage"
    CURRENT = "current"
    POWER = "power"
    FREQUENCY = "frequency"


class BatterySolve(str, Enum):
    RUNTIME = "runtime"
    CAPACITY = "capacity"
    LOAD_CURRENT = "load_current"


class BandCount(int, Enum):
    FOUR = 4
    FIVE = 5


# --- Shared ---

class DerivationStepModel(BaseModel):
    description: str
    formula: str
    result: Optional[float] = 0.0
    formatted: str = ""
    kind: str = "computed"


# --- Parsing / conversion ---

class ParseRequest(BaseModel):
    text: str = Field(..., description="One value ('4.7k') or a comma/space separated list")


class ParseResultModel(BaseModel):
    raw: str
    value: Optional[float] = None
    unit: Optional[str] = None
    error: Optional[str] = None


class ParseResponse(BaseModel):
    results: list[ParseResultModel]


class ConvertRequest(BaseModel):
    value: str = Field("4.7k", description="Value with optional SI prefix")
    quantity: Quantity = Quantity.RESISTANCE


class PrefixConversionModel(BaseModel):
    prefix: str
    name: str
    multiplier: float
    value: float
    display: str


class ConvertResponse(BaseModel):
    base_value: float
    symbol: str
    formatted: str
    conversions: list[PrefixConversionModel]


# --- Combination ---

class CombineRequest(BaseModel):
    kind: ComponentKind = ComponentKind.RESISTOR
    configuration: Configuration = Configuration.SERIES
    values: Optional[list[str]] = Field(None, description="Component values; defaults depend on kind")
    sig_figs: int = Field(3, ge=1, le=10)


class CombineResponse(BaseModel):
    value: float
    formatted: str
    steps: list[DerivationStepModel]


class EquivalentResponse(BaseModel):
    value: float
    unit: str
    formatted: str
    steps: list[str]


# --- Circuit calculators ---

class LEDRequest(BaseModel):
    v_source: str = Field("5", description="Supply voltage (V)")
    v_forward: str = Field("2.0", description="LED forward voltage (V)")
    target_current: str = Field("20m", description="Desired LED current (A)")


class LEDResponse(BaseModel):
    resistor_value: float
    nearest_e24: float
    actual_current: float
    power_dissipation: float
    suggested_wattage: float
    formatted_resistor: str
    steps: list[DerivationStepModel]


class OhmsLawRequest(BaseModel):
    """Exactly two of the four fields must be given."""
    voltage: Optional[str] = None
    current: Optional[str] = None
    resistance: Optional[str] = None
    power: Optional[str] = None


class OhmsLawResponse(BaseModel):
    """Unbounded results (resistance with zero current or zero power) are null."""
    voltage: Optional[float]
    current: Optional[float]
    resistance: Optional[float]
    power: Optional[float]
    steps: list[DerivationStepModel]


class RCRequest(BaseModel):
    resistance: str = Field("10k", description="R (Ω)")
    capacitance: str = Field("100n", description="C (F)")
    v_in: str = Field("1", description="Step amplitude (V)")


class RiseTimeModel(BaseModel):
    percent: float
    time: float
    voltage: float


class RCResponse(BaseModel):
    time_constant: float
    cutoff_frequency: float
    formatted_time_constant: str
    formatted_cutoff: str
    rise_times: list[RiseTimeModel]
    steps: list[DerivationStepModel]


class VoltageDividerRequest(BaseModel):
    v_in: str = "12"
    r1: str = "10k"
    r2: str = "10k"
    r_load: Optional[str] = Field(None, description="Load across R2; omit for an unloaded divider")


class VoltageDividerResponse(BaseModel):
    v_out: float
    steps: list[DerivationStepModel]
    v_out_loaded: Optional[float] = None
    load_effect: Optional[float] = None
    load_warning: Optional[str] = None


# --- Battery ---

class BatteryRequest(BaseModel):
    """Plain numbers: capacity in mAh, current in mA, runtime in hours."""
    solve: BatterySolve = BatterySolve.RUNTIME
    capacity_mah: Optional[float] = 2000
    load_current_ma: Optional[float] = 100
    runtime_hours: Optional[float] = 8
    efficiency: float = 100


class BatteryLifeModel(BaseModel):
    hours: int
    minutes: int
    days: int
    formatted: str
    steps: list[str]


class BatteryResponse(BaseModel):
    solve: BatterySolve
    runtime: Optional[BatteryLifeModel] = None
    capacity_mah: Optional[float] = None
    load_current_ma: Optional[float] = None


class BatteryInfo(BaseModel):
    name: str
    capacity: float
    voltage: float


class BatteryListResponse(BaseModel):
    batteries: list[BatteryInfo]
    total: int


# --- Color code ---

class ColorDecodeRequest(BaseModel):
    bands: BandCount = BandCount.FOUR
    colors: list[str] = Field(default_factory=lambda: ["brown", "red", "red", "gold"])


class ColorDecodeResponse(BaseModel):
    value: float
    tolerance: str
    formatted: str
    bands: list[str]
    temp_coeff: Optional[str] = None


class ColorEncodeRequest(BaseModel):
    bands: BandCount = BandCount.FOUR
    resistance: str = "1000"
    tolerance: str = "±5%"


class ColorEncodeResponse(BaseModel):
    colors: list[str]
    formatted: str
    resistance: float


class ColorListResponse(BaseModel):
    colors: list[str]
    tolerance_colors: list[str]
