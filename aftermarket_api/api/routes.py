"""FastAPI route definitions for the mock parts API."""

import json
from typing import Annotated, Any, Optional

from fastapi import APIRouter, Depends, Query, Request

from aftermarket_api.api.deps import get_store, require_tenant
from aftermarket_api.api.errors import ApiError, not_found
from aftermarket_api.services.catalog import (
    filter_catalog_by_brand,
    filter_offers,
    find_cross_references,
    find_fleet_contracts,
    find_fleet_vehicles,
    find_offer,
)
from aftermarket_api.services.fixtures import FixtureStore
from aftermarket_api.utils.timestamps import iso_now

router = APIRouter()

Store = Annotated[FixtureStore, Depends(get_store)]
Tenant = Annotated[str, Depends(require_tenant)]


def _dump(records) -> list[dict[str, Any]]:
    return [r.model_dump(by_alias=True) for r in records]


# ---------------------------------------------------------------------------
# OEM catalog
# ---------------------------------------------------------------------------


@router.get("/oem/catalog")
async def get_oem_catalog(store: Store, brand: Optional[str] = None):
    """OEM catalog items, optionally narrowed to one brand."""
    items = filter_catalog_by_brand(store, brand)
    return {
        "success": True,
        "items": _dump(items),
        "count": len(items),
        "timestamp": iso_now(),
    }


@router.post("/oem/ingest")
async def ingest_oem_items(request: Request):
    """Acknowledge an ingest batch. Nothing is stored; counts echo the input."""
    raw = await request.body()
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ApiError(400, {"success": False, "error": str(e)})

    if payload is None:
        raise ApiError(400, {"success": False, "error": "Request body is null"})

    items = payload.get("items") if isinstance(payload, dict) else None
    count = len(items) if isinstance(items, list) else 0

    return {
        "success": True,
        "created_parts": count,
        "created_mappings": count,
        "stats": {
            "created": count,
            "mapped": count,
            "errors": 0,
        },
        "timestamp": iso_now(),
    }


# ---------------------------------------------------------------------------
# Suppliers / Part master
# ---------------------------------------------------------------------------


@router.get("/suppliers")
async def get_suppliers(store: Store):
    return {
        "success": True,
        "suppliers": _dump(store.suppliers),
        "timestamp": iso_now(),
    }


@router.get("/part-master/catalog")
async def get_part_master_catalog():
    """The canonical part master is never populated by the mock."""
    return {
        "success": True,
        "parts": [],
        "message": "Canonical Part Master. Use POST /api/oem/ingest to populate.",
        "timestamp": iso_now(),
    }


# ---------------------------------------------------------------------------
# Cross-reference mapping
# ---------------------------------------------------------------------------


@router.get("/oem-mapping")
async def get_oem_mapping(
    store: Store,
    oem_part_number: Annotated[Optional[str], Query(alias="oemPartNumber")] = None,
):
    """Aftermarket equivalents for an OEM part number (digits compared only)."""
    if not oem_part_number:
        raise ApiError(400, {"success": False, "message": "Missing oemPartNumber"})

    mappings = find_cross_references(store, oem_part_number)
    return {
        "success": True,
        "oemPartNumber": oem_part_number,
        "mappings": _dump(mappings),
        "count": len(mappings),
        "timestamp": iso_now(),
    }


# ---------------------------------------------------------------------------
# Supplier offers
# ---------------------------------------------------------------------------


@router.get("/offers")
async def get_offers(
    store: Store,
    part_master_id: Annotated[Optional[str], Query(alias="partMasterId")] = None,
):
    offers = filter_offers(store, part_master_id)
    return {
        "success": True,
        "data": _dump(offers),
        "count": len(offers),
        "timestamp": iso_now(),
    }


@router.get("/offers/{offer_id}")
async def get_offer(offer_id: str, store: Store):
    offer = find_offer(store, offer_id)
    if offer is None:
        raise not_found(f"Offer {offer_id} not found")
    return {
        "success": True,
        "data": offer.model_dump(by_alias=True),
        "timestamp": iso_now(),
    }


# ---------------------------------------------------------------------------
# Fleet rental (tenant-scoped)
# ---------------------------------------------------------------------------


@router.get("/fleet")
async def get_fleets(store: Store, tenant: Tenant):
    return _dump(store.fleets)


@router.get("/fleet/{fleet_id}/vehicles")
async def get_fleet_vehicles(fleet_id: str, store: Store, tenant: Tenant):
    return _dump(find_fleet_vehicles(store, fleet_id))


@router.get("/fleet/{fleet_id}/contracts")
async def get_fleet_contracts(fleet_id: str, store: Store, tenant: Tenant):
    return _dump(find_fleet_contracts(store, fleet_id))
