from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Region(BaseModel):
    city: Optional[str] = None
    district: Optional[str] = None


class VehicleInfo(BaseModel):
    brand: Optional[str] = None
    model: Optional[str] = None


class PartLine(BaseModel):
    category: Optional[str] = None
    brand: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)


class ScoringInput(BaseModel):
    """Partial vehicle / region / parts description. Every field is optional."""

    mileage: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)  # km
    region: Optional[Region] = None
    vehicle: Optional[VehicleInfo] = None
    parts: Optional[list[PartLine]] = None


class IndexResult(BaseModel):
    """Scores are 0-100 integers; JSON uses the camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    overall_risk: int
    durability_index: int
    cost_pressure_index: int
    supply_stress_index: int
    confidence: int
    reasons: list[str]
