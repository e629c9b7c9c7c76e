"""Read-only fixture store for the mock parts API.

The store is built once and handed to the app factory, so request handlers
never touch module-level lists and tests can inject their own data.
"""

import logging
from dataclasses import dataclass, field

from aftermarket_api.models.catalog import (
    CrossReference,
    Fleet,
    FleetVehicle,
    OemCatalogItem,
    RentalContract,
    Supplier,
    SupplierOffer,
)
from aftermarket_api.services import seed
from aftermarket_api.utils.timestamps import iso_now

logger = logging.getLogger(__name__)

FIXTURE_SETS: tuple[str, ...] = ("basic", "full")


@dataclass(frozen=True)
class FixtureStore:
    """Immutable in-memory tables served by the mock API."""

    suppliers: tuple[Supplier, ...] = ()
    oem_catalog: tuple[OemCatalogItem, ...] = ()
    cross_references: tuple[CrossReference, ...] = ()
    offers: tuple[SupplierOffer, ...] = ()
    fleets: tuple[Fleet, ...] = ()
    fleet_vehicles: tuple[FleetVehicle, ...] = ()
    rental_contracts: tuple[RentalContract, ...] = ()
    name: str = field(default="custom")


def _catalog(rows: list[dict], loaded_at: str) -> tuple[OemCatalogItem, ...]:
    return tuple(
        OemCatalogItem(**{"last_updated": loaded_at, **row}) for row in rows
    )


def load_fixtures(variant: str = "full") -> FixtureStore:
    """Build one of the named fixture sets.

    ``basic`` is the minimal mock data (suppliers, one BMW catalog
    item, two cross-references). ``full`` adds the VW/Ford catalog items, all
    cross-references, supplier offers and the fleet rental tables.
    """
    if variant not in FIXTURE_SETS:
        raise ValueError(
            f"Unknown fixture set '{variant}'. Expected one of: {', '.join(FIXTURE_SETS)}"
        )

    loaded_at = iso_now()
    suppliers = tuple(Supplier.model_validate(r) for r in seed.SUPPLIERS)

    if variant == "basic":
        store = FixtureStore(
            name=variant,
            suppliers=suppliers,
            oem_catalog=_catalog(seed.OEM_CATALOG[:1], loaded_at),
            cross_references=tuple(
                CrossReference(**r) for r in seed.CROSS_REFERENCES[:2]
            ),
        )
    else:
        store = FixtureStore(
            name=variant,
            suppliers=suppliers,
            oem_catalog=_catalog(seed.OEM_CATALOG, loaded_at),
            cross_references=tuple(CrossReference(**r) for r in seed.CROSS_REFERENCES),
            offers=tuple(SupplierOffer.model_validate(r) for r in seed.OFFERS),
            fleets=tuple(Fleet.model_validate(r) for r in seed.FLEETS),
            fleet_vehicles=tuple(
                FleetVehicle.model_validate(r) for r in seed.FLEET_VEHICLES
            ),
            rental_contracts=tuple(
                RentalContract.model_validate(r) for r in seed.RENTAL_CONTRACTS
            ),
        )

    logger.info(
        "Loaded fixture set '%s': %d suppliers, %d catalog items, %d cross-refs, %d offers",
        variant,
        len(store.suppliers),
        len(store.oem_catalog),
        len(store.cross_references),
        len(store.offers),
    )
    return store
