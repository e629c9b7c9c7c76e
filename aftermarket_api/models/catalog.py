"""Fixture records served by the mock parts API.

Field names are kept exactly as the frontend consumes them: supplier and
offer payloads are camelCase, OEM catalog and cross-reference rows are
snake_case.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Supplier(_CamelModel):
    supplier_id: str
    supplier_name: str
    country: str


class SupplierOffer(_CamelModel):
    offer_id: str
    supplier_id: str
    supplier_name: str
    part_master_id: str
    price: int | float
    currency: str = "TRY"
    min_order_qty: int = 1
    pack_qty: int = 1
    stock: int = 0
    lead_days: int = 0
    last_updated: str  # ISO-8601
    is_verified: bool = False
    trust_score: int = 0


class OemCatalogItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    oem_brand: str
    oem_part_number: str  # as printed, e.g. "34 11 6 789 123"
    part_name: str
    category: str
    last_updated: str
    source: str = "API"


class CrossReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    oem_pn: str  # digits only
    brand: str
    pn: str
    quality: str  # "OEM" or "OES"


# ---------------------------------------------------------------------------
# Fleet rental
# ---------------------------------------------------------------------------


class Fleet(_CamelModel):
    fleet_id: str
    name: str
    tax_number: str
    address: str
    contact_person: str
    contact_phone: str
    created_at: str
    updated_at: str


class FleetVehicle(_CamelModel):
    vehicle_id: str
    fleet_id: str
    plate_number: str
    brand: str
    model: str
    year: int
    vin: str
    current_mileage: int
    status: str  # ACTIVE, MAINTENANCE, OUT_OF_SERVICE, RETIRED
    next_maintenance_km: int
    next_maintenance_date: str


class RentalContract(_CamelModel):
    contract_id: str
    fleet_id: str
    vehicle_id: str
    customer_name: str
    start_date: str
    end_date: str
    daily_rate: int
    monthly_rate: int
    km_limit: int
    deposit_amount: int
    status: str
    created_by: str
    created_at: str
    updated_at: str
