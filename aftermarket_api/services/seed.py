"""Seed rows for the mock parts API.

Plain dict rows keyed the way the frontend reads them. Two fixture sets are
built from these in ``aftermarket_api.services.fixtures``:

  basic  suppliers, one BMW catalog item, two cross-references
  full   everything below
"""

from __future__ import annotations

from typing import Any

Row = dict[str, Any]

# ---------------------------------------------------------------------------
# Suppliers
# ---------------------------------------------------------------------------

SUPPLIERS: list[Row] = [
    {"supplierId": "SUP-001", "supplierName": "Martaş Otomotiv", "country": "Turkey"},
    {"supplierId": "SUP-002", "supplierName": "Bosch Distribütör", "country": "Turkey"},
    {"supplierId": "SUP-003", "supplierName": "Mann-Filter Türkiye", "country": "Turkey"},
]

# ---------------------------------------------------------------------------
# OEM catalog (last_updated is stamped at load time)
# ---------------------------------------------------------------------------

OEM_CATALOG: list[Row] = [
    {
        "id": "CAT-BMW-001",
        "oem_brand": "BMW",
        "oem_part_number": "34 11 6 789 123",
        "part_name": "Brake Pad Front Left",
        "category": "BRAKE_SYSTEM",
        "source": "API",
    },
    {
        "id": "CAT-VW-001",
        "oem_brand": "Volkswagen",
        "oem_part_number": "8K0 615 301 D",
        "part_name": "Brake Pad Rear Axle",
        "category": "BRAKE_SYSTEM",
        "source": "API",
    },
    {
        "id": "CAT-FORD-001",
        "oem_brand": "Ford",
        "oem_part_number": "DG-511",
        "part_name": "Spark Plug Standard",
        "category": "IGNITION",
        "source": "API",
    },
]

# ---------------------------------------------------------------------------
# Cross-references (oem_pn is digits only)
# ---------------------------------------------------------------------------

CROSS_REFERENCES: list[Row] = [
    {"oem_pn": "34116789123", "brand": "Bosch", "pn": "BP-BMW-320-FRONT", "quality": "OES"},
    {"oem_pn": "34116789123", "brand": "Brembo", "pn": "BRM-SERIES-BM", "quality": "OEM"},
    {"oem_pn": "34116789123", "brand": "Textar", "pn": "TX-2354201", "quality": "OES"},
    {"oem_pn": "34116789123", "brand": "ATE", "pn": "AT-13646201321", "quality": "OES"},
]


# ---------------------------------------------------------------------------
# Supplier offers
# ---------------------------------------------------------------------------


def _offer(
    offer_id: str,
    supplier_id: str,
    supplier_name: str,
    part_master_id: str,
    price: int,
    min_order_qty: int,
    pack_qty: int,
    stock: int,
    lead_days: int,
    day: str,
    is_verified: bool,
    trust_score: int,
) -> Row:
    return {
        "offerId": offer_id,
        "supplierId": supplier_id,
        "supplierName": supplier_name,
        "partMasterId": part_master_id,
        "price": price,
        "currency": "TRY",
        "minOrderQty": min_order_qty,
        "packQty": pack_qty,
        "stock": stock,
        "leadDays": lead_days,
        "lastUpdated": f"{day}T00:00:00.000Z",
        "isVerified": is_verified,
        "trustScore": trust_score,
    }


_MARTAS = ("SUP-001", "Martaş Otomotiv")
_BOSCH = ("SUP-002", "Bosch Türkiye")
_MANN = ("SUP-003", "Mann-Filter Türkiye")

OFFERS: list[Row] = [
    # BRAKE_PAD_FRONT_001
    _offer("OFF-001", *_MARTAS, "PM-0001", 2450, 1, 4, 85, 2, "2025-02-20", True, 95),
    _offer("OFF-002", *_BOSCH, "PM-0001", 2100, 1, 4, 120, 1, "2025-02-19", True, 98),
    _offer("OFF-003", *_MARTAS, "PM-0001", 1850, 2, 4, 200, 2, "2025-02-18", True, 88),
    # FILTER_OIL_001
    _offer("OFF-004", *_MANN, "PM-0002", 890, 1, 6, 500, 3, "2025-02-20", True, 92),
    _offer("OFF-005", *_BOSCH, "PM-0002", 750, 1, 6, 0, 5, "2025-02-19", True, 96),
    _offer("OFF-006", *_MARTAS, "PM-0002", 380, 3, 6, 1000, 1, "2025-02-20", False, 70),
    # SPARK_PLUG_001
    _offer("OFF-007", *_BOSCH, "PM-0003", 450, 1, 10, 300, 1, "2025-02-20", True, 97),
    _offer("OFF-008", *_MARTAS, "PM-0003", 380, 1, 8, 450, 2, "2025-02-20", True, 90),
    _offer("OFF-009", *_MANN, "PM-0003", 220, 5, 10, 2000, 1, "2025-02-18", True, 82),
    _offer("OFF-010", *_MARTAS, "PM-0003", 120, 10, 10, 5000, 1, "2025-02-15", False, 65),
]

# ---------------------------------------------------------------------------
# Fleet rental
# ---------------------------------------------------------------------------

FLEETS: list[Row] = [
    {
        "fleetId": "FLEET-001",
        "name": "Marmara Filo",
        "taxNumber": "1234567890",
        "address": "İstanbul, Beyoğlu, Şişli Cad. No:45",
        "contactPerson": "Ahmet Yılmaz",
        "contactPhone": "+90-212-555-1001",
        "createdAt": "2023-01-15T10:00:00Z",
        "updatedAt": "2026-02-20T14:30:00Z",
    },
    {
        "fleetId": "FLEET-002",
        "name": "Anadolu Teknoloji",
        "taxNumber": "1234567891",
        "address": "Ankara, Çankaya, Turan Güneş Bulvarı No:120",
        "contactPerson": "Fatih Kaya",
        "contactPhone": "+90-312-555-2002",
        "createdAt": "2023-02-10T10:00:00Z",
        "updatedAt": "2026-02-22T09:15:00Z",
    },
    {
        "fleetId": "FLEET-003",
        "name": "Ege Sales & Logistics",
        "taxNumber": "1234567892",
        "address": "İzmir, Konak, Alsancak Cad. No:88",
        "contactPerson": "Zeynep Arslan",
        "contactPhone": "+90-232-555-3003",
        "createdAt": "2023-03-05T10:00:00Z",
        "updatedAt": "2026-02-21T16:45:00Z",
    },
]

_VEHICLE_KEYS = (
    "vehicleId",
    "fleetId",
    "plateNumber",
    "brand",
    "model",
    "year",
    "vin",
    "currentMileage",
    "status",
    "nextMaintenanceKm",
    "nextMaintenanceDate",
)

FLEET_VEHICLES: list[Row] = [
    dict(zip(_VEHICLE_KEYS, row))
    for row in [
        ("VEH-001-001", "FLEET-001", "34 MR 001", "Hyundai", "i10", 2021, "KMHEC4A46BU123401", 45200, "ACTIVE", 47000, "2026-03-10"),
        ("VEH-001-002", "FLEET-001", "34 MR 002", "Ford", "Focus", 2020, "WF0UXXWPDC8P12345", 78500, "MAINTENANCE", 80000, "2026-02-28"),
        ("VEH-001-003", "FLEET-001", "34 MR 003", "Volkswagen", "Passat", 2019, "WVW33C3DZ9E054321", 125300, "ACTIVE", 130000, "2026-04-15"),
        ("VEH-001-004", "FLEET-001", "34 MR 004", "Renault", "Clio", 2022, "VF19R7GFPA1234567", 32100, "ACTIVE", 35000, "2026-03-25"),
        ("VEH-001-005", "FLEET-001", "34 MR 005", "Mercedes-Benz", "Sprinter", 2018, "WDB9050151V123456", 198700, "ACTIVE", 200000, "2026-03-01"),
        ("VEH-002-001", "FLEET-002", "06 AN 001", "Toyota", "Corolla", 2022, "JTDKRFVE7M3065432", 28900, "ACTIVE", 32000, "2026-04-10"),
        ("VEH-002-002", "FLEET-002", "06 AN 002", "Kia", "Sportage", 2021, "KNALN4D46M5789012", 52400, "ACTIVE", 55000, "2026-03-20"),
        ("VEH-002-003", "FLEET-002", "06 AN 003", "Honda", "Civic", 2020, "JHMFK7C64LS345678", 89200, "ACTIVE", 92000, "2026-03-05"),
        ("VEH-002-004", "FLEET-002", "06 AN 004", "Peugeot", "308", 2021, "VPLCR4AXXL3901234", 38500, "OUT_OF_SERVICE", 40000, "2026-03-15"),
        ("VEH-002-005", "FLEET-002", "06 AN 005", "Skoda", "Octavia", 2022, "TMBF73FX8K3567890", 15600, "ACTIVE", 18000, "2026-05-01"),
        ("VEH-003-001", "FLEET-003", "35 EG 001", "Opel", "Astra", 2019, "W0L0AHM84K2234567", 156800, "ACTIVE", 160000, "2026-03-22"),
        ("VEH-003-002", "FLEET-003", "35 EG 002", "Nissan", "Qashqai", 2020, "VSNPN7GFLFY345678", 98400, "MAINTENANCE", 100000, "2026-02-26"),
        ("VEH-003-003", "FLEET-003", "35 EG 003", "BMW", "X3", 2018, "WBADT42452G890123", 182200, "ACTIVE", 185000, "2026-04-05"),
        ("VEH-003-004", "FLEET-003", "35 EG 004", "Fiat", "Doblo", 2021, "ZFFAB41F311234567", 64700, "ACTIVE", 67000, "2026-03-18"),
        ("VEH-003-005", "FLEET-003", "35 EG 005", "Chevrolet", "Trax", 2022, "3G1DA1E35C3234567", 22300, "RETIRED", 25000, "2026-06-01"),
    ]
]

RENTAL_CONTRACTS: list[Row] = [
    {
        "contractId": "CNT-001-001",
        "fleetId": "FLEET-001",
        "vehicleId": "VEH-001-001",
        "customerName": "Şentürk Lojistik A.Ş.",
        "startDate": "2026-01-20",
        "endDate": "2026-06-30",
        "dailyRate": 1250,
        "monthlyRate": 27500,
        "kmLimit": 15000,
        "depositAmount": 50000,
        "status": "ACTIVE",
        "createdBy": "ahmet.yilmaz",
        "createdAt": "2026-01-18T10:00:00Z",
        "updatedAt": "2026-02-22T14:00:00Z",
    },
    {
        "contractId": "CNT-001-002",
        "fleetId": "FLEET-001",
        "vehicleId": "VEH-001-002",
        "customerName": "Kurtuluş Turizm",
        "startDate": "2026-02-01",
        "endDate": "2026-04-15",
        "dailyRate": 1800,
        "monthlyRate": 39600,
        "kmLimit": 8000,
        "depositAmount": 75000,
        "status": "ACTIVE",
        "createdBy": "ahmet.yilmaz",
        "createdAt": "2026-01-28T09:30:00Z",
        "updatedAt": "2026-02-20T11:00:00Z",
    },
    {
        "contractId": "CNT-001-003",
        "fleetId": "FLEET-001",
        "vehicleId": "VEH-001-003",
        "customerName": "Demiryolu İşletmeleri",
        "startDate": "2025-11-10",
        "endDate": "2026-05-10",
        "dailyRate": 3200,
        "monthlyRate": 70400,
        "kmLimit": 20000,
        "depositAmount": 150000,
        "status": "ACTIVE",
        "createdBy": "ahmet.yilmaz",
        "createdAt": "2025-11-05T14:00:00Z",
        "updatedAt": "2026-02-15T09:00:00Z",
    },
    {
        "contractId": "CNT-002-001",
        "fleetId": "FLEET-002",
        "vehicleId": "VEH-002-001",
        "customerName": "ENKA İnşaat",
        "startDate": "2026-02-01",
        "endDate": "2026-12-31",
        "dailyRate": 1100,
        "monthlyRate": 24200,
        "kmLimit": 12000,
        "depositAmount": 40000,
        "status": "ACTIVE",
        "createdBy": "fatih.kaya",
        "createdAt": "2026-01-25T11:00:00Z",
        "updatedAt": "2026-02-18T15:00:00Z",
    },
    {
        "contractId": "CNT-003-001",
        "fleetId": "FLEET-003",
        "vehicleId": "VEH-003-001",
        "customerName": "Turist Rehberleri Birliği",
        "startDate": "2026-01-20",
        "endDate": "2026-09-20",
        "dailyRate": 1500,
        "monthlyRate": 33000,
        "kmLimit": 18000,
        "depositAmount": 70000,
        "status": "ACTIVE",
        "createdBy": "zeynep.arslan",
        "createdAt": "2026-01-12T12:00:00Z",
        "updatedAt": "2026-02-21T14:30:00Z",
    },
]
