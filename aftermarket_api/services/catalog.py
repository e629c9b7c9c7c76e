"""Lookups over the fixture store.

All queries are linear scans of small in-memory tuples and return lists in
fixture order.
"""

import re
from typing import Optional

from aftermarket_api.models.catalog import (
    CrossReference,
    FleetVehicle,
    OemCatalogItem,
    RentalContract,
    SupplierOffer,
)
from aftermarket_api.services.fixtures import FixtureStore

_NON_DIGITS = re.compile(r"\D")


def filter_catalog_by_brand(
    store: FixtureStore, brand: Optional[str] = None
) -> list[OemCatalogItem]:
    """OEM catalog items, optionally filtered by brand (case-insensitive, exact)."""
    if not brand:
        return list(store.oem_catalog)
    wanted = brand.lower()
    return [item for item in store.oem_catalog if item.oem_brand.lower() == wanted]


def normalize_oem_part_number(value: str) -> str:
    """Strip spacing and punctuation: '34 11 6 789 123' -> '34116789123'."""
    return _NON_DIGITS.sub("", value)


def find_cross_references(
    store: FixtureStore, oem_part_number: str
) -> list[CrossReference]:
    normalized = normalize_oem_part_number(oem_part_number)
    return [ref for ref in store.cross_references if ref.oem_pn == normalized]


def filter_offers(
    store: FixtureStore, part_master_id: Optional[str] = None
) -> list[SupplierOffer]:
    if not part_master_id:
        return list(store.offers)
    return [o for o in store.offers if o.part_master_id == part_master_id]


def find_offer(store: FixtureStore, offer_id: str) -> SupplierOffer | None:
    return next((o for o in store.offers if o.offer_id == offer_id), None)


def find_fleet_vehicles(store: FixtureStore, fleet_id: str) -> list[FleetVehicle]:
    return [v for v in store.fleet_vehicles if v.fleet_id == fleet_id]


def find_fleet_contracts(store: FixtureStore, fleet_id: str) -> list[RentalContract]:
    return [c for c in store.rental_contracts if c.fleet_id == fleet_id]
