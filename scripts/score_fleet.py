#!/usr/bin/env python
"""Score every fixture fleet vehicle with the risk index engine.

Usage:
    python scripts/score_fleet.py [FLEET-ID]
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from aftermarket_api.services.catalog import find_fleet_vehicles
from aftermarket_api.services.fixtures import load_fixtures
from aftermarket_api.services.index_engine import compute_indexes


def _region(address: str) -> dict[str, str]:
    # Fleet addresses read "City, District, Street"
    city, _, rest = address.partition(",")
    district = rest.split(",")[0].strip()
    return {"city": city.strip(), "district": district}


def main():
    store = load_fixtures("full")
    fleet_ids = sys.argv[1:] or [f.fleet_id for f in store.fleets]

    for fleet_id in fleet_ids:
        fleet = next((f for f in store.fleets if f.fleet_id == fleet_id), None)
        if fleet is None:
            print(f"Error: unknown fleet {fleet_id}")
            sys.exit(1)

        print(f"\n{fleet.fleet_id} - {fleet.name}")
        print(f"{'=' * 70}")
        for vehicle in find_fleet_vehicles(store, fleet_id):
            result = compute_indexes(
                {
                    "mileage": vehicle.current_mileage,
                    "region": _region(fleet.address),
                    "vehicle": {"brand": vehicle.brand, "model": vehicle.model},
                }
            )
            print(
                f"  {vehicle.plate_number:<10} {vehicle.brand:<14} {vehicle.model:<9} "
                f"risk={result.overall_risk:>3} durability={result.durability_index:>3} "
                f"supply={result.supply_stress_index:>3} confidence={result.confidence}%"
            )
            for reason in result.reasons:
                print(f"      - {reason}")


if __name__ == "__main__":
    main()
