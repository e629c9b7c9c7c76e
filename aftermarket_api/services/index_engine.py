"""Risk index engine for vehicle / parts data.

Produces four 0-100 indices (overall risk, durability, cost pressure,
supply stress), a confidence percentage and a short list of Turkish
explanations for the UI. Pure and deterministic: no I/O, no state.

Reason order matters. Rules append in a fixed sequence (durability, cost,
supply, brand, district, padding) and the list is then cut to the first
MAX_REASONS entries, so earlier rules win when too many fire.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from aftermarket_api.models.scoring import IndexResult, ScoringInput

# =============================================================================
# Constants
# =============================================================================

DEFAULT_DURABILITY: int = 85
MIN_DURABILITY: int = 20
KM_PER_DURABILITY_POINT: int = 10_000
CRITICAL_MILEAGE_KM: int = 100_000
SEVERE_MILEAGE_KM: int = 150_000

DEFAULT_COST_PRESSURE: int = 30
VARIETY_POINTS_PER_PART: int = 5
MAX_VARIETY_POINTS: int = 40
PRICE_POINTS_DIVISOR: int = 100
MAX_PRICE_POINTS: int = 30
HIGH_UNIT_PRICE: int = 3000  # TRY
HIGH_VARIETY_COUNT: int = 5

DEFAULT_SUPPLY_STRESS: int = 35
UNLISTED_CITY_SUPPLY_STRESS: int = 38
LARGE_ORDER_PART_COUNT: int = 10
LARGE_ORDER_SUPPLY_PENALTY: int = 15

# Overall risk weights: inverted durability, cost pressure, supply stress
WEIGHT_WEAR: float = 0.35
WEIGHT_COST: float = 0.25
WEIGHT_SUPPLY: float = 0.40

TRACKED_FIELDS: int = 6
MIN_REASONS: int = 3
MAX_REASONS: int = 6


@dataclass(frozen=True)
class Adjustment:
    """A keyed index adjustment with an optional explanation."""

    value: int
    reason_template: str | None = None

    def reason(self, key: str) -> str | None:
        if self.reason_template is None:
            return None
        return self.reason_template.format(key=key)


# Matching is exact: "İstanbul" with the dotted capital, as entered in the UI.
CITY_SUPPLY_STRESS: dict[str, Adjustment] = {
    "İstanbul": Adjustment(
        60,
        "İstanbul bölgesinde tedarik stok seviyeleri kritik seviyede bulunmaktadır.",
    ),
    "Ankara": Adjustment(45),
    "İzmir": Adjustment(40),
}

# value is added to overall risk
BRAND_RISK: dict[str, Adjustment] = {
    "Ford": Adjustment(
        8,
        "{key} markaları tarihsel olarak şanzıman sorunları göstermektedir.",
    ),
    "BMW": Adjustment(
        0,
        "{key} modelleri bileşen çeşitliliği nedeniyle yüksek bakım maliyetine "
        "maruz kalabilir.",
    ),
}

REASON_SEVERE_MILEAGE = (
    "Yüksek kilometre ({km} km) parça ömrünü ciddi şekilde azaltmaktadır."
)
REASON_CRITICAL_MILEAGE = "Kilometre sayısı ({km} km) kritik eşiğe yaklaşmaktadır."
REASON_HIGH_UNIT_COST = (
    "Yüksek birim parça maliyetleri (ort. {price} ₺) işletme maliyetini artırmaktadır."
)
REASON_HIGH_VARIETY = (
    "Geniş yedek parça çeşitliliği ({count} kategori) envanter yönetimini "
    "karmaşık hale getirmektedir."
)
REASON_DISTRICT = (
    "{city} ilinin {district} ilçesinde bölgesel talepte değişim gözlenmektedir."
)
DISTRICT_CITY_PLACEHOLDER = "Seçili"

REASON_MAINTENANCE_PROGRAM = "Genel teknisyen bakım programı önerilmektedir."
REASON_DATA_INSUFFICIENT = (
    "Sayısal veri eksikliği nedeniyle tam analiz yapmak mümkün olmamıştır."
)
REASON_PERIODIC_UPDATE = (
    "Periyodik endeks güncellemesi ile daha kesin öngörüler alınabilecektir."
)


# =============================================================================
# Helpers
# =============================================================================


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (Python's round() is banker's)."""
    return math.floor(value + 0.5)


def clamp_score(value: float) -> int:
    return max(0, min(100, round_half_up(value)))


def format_km(mileage: float) -> str:
    """Group thousands with commas: 160000 -> '160,000', 1234.5 -> '1,234.5'."""
    if float(mileage).is_integer():
        return f"{int(mileage):,}"
    return f"{mileage:,.3f}".rstrip("0").rstrip(".")


def _confidence(data: ScoringInput) -> int:
    region = data.region
    vehicle = data.vehicle
    present = sum(
        1
        for signal in (
            data.mileage,
            region.city if region else None,
            region.district if region else None,
            vehicle.brand if vehicle else None,
            vehicle.model if vehicle else None,
            data.parts,
        )
        if signal
    )
    return round_half_up(present / TRACKED_FIELDS * 100)


# =============================================================================
# Individual indices, each returning (score, reasons)
# =============================================================================


def durability_index(mileage: float | None) -> tuple[int, list[str]]:
    """Durability drops one point per full 10,000 km, floored at 20."""
    if not mileage:
        return DEFAULT_DURABILITY, []

    degradation = math.floor(mileage / KM_PER_DURABILITY_POINT)
    score = max(MIN_DURABILITY, DEFAULT_DURABILITY - degradation)

    reasons: list[str] = []
    if mileage > SEVERE_MILEAGE_KM:
        reasons.append(REASON_SEVERE_MILEAGE.format(km=format_km(mileage)))
    elif mileage > CRITICAL_MILEAGE_KM:
        reasons.append(REASON_CRITICAL_MILEAGE.format(km=format_km(mileage)))
    return score, reasons


def cost_pressure_index(prices: list[float]) -> tuple[float, list[str]]:
    """Cost pressure from part variety and average unit price.

    Returns the unrounded score; the overall composite uses it as-is.
    """
    if not prices:
        return float(DEFAULT_COST_PRESSURE), []

    count = len(prices)
    average_price = sum(prices) / count
    variety_factor = min(count * VARIETY_POINTS_PER_PART, MAX_VARIETY_POINTS)
    price_factor = min(average_price / PRICE_POINTS_DIVISOR, MAX_PRICE_POINTS)
    score = min(100.0, DEFAULT_COST_PRESSURE + variety_factor + price_factor)

    reasons: list[str] = []
    if average_price > HIGH_UNIT_PRICE:
        reasons.append(REASON_HIGH_UNIT_COST.format(price=f"{average_price:.0f}"))
    if count > HIGH_VARIETY_COUNT:
        reasons.append(REASON_HIGH_VARIETY.format(count=count))
    return score, reasons


def supply_stress_index(city: str | None, part_count: int) -> tuple[int, list[str]]:
    reasons: list[str] = []
    if not city:
        score = DEFAULT_SUPPLY_STRESS
    elif city in CITY_SUPPLY_STRESS:
        adjustment = CITY_SUPPLY_STRESS[city]
        score = adjustment.value
        reason = adjustment.reason(city)
        if reason:
            reasons.append(reason)
    else:
        score = UNLISTED_CITY_SUPPLY_STRESS

    if part_count > LARGE_ORDER_PART_COUNT:
        score = min(100, score + LARGE_ORDER_SUPPLY_PENALTY)
    return score, reasons


def _pad_reasons(reasons: list[str]) -> list[str]:
    padded = list(reasons)
    if not padded:
        padded.append(REASON_MAINTENANCE_PROGRAM)
    if len(padded) == 1:
        padded.append(REASON_DATA_INSUFFICIENT)
    if len(padded) < MIN_REASONS:
        padded.append(REASON_PERIODIC_UPDATE)
    return padded[:MAX_REASONS]


# =============================================================================
# Public entry point
# =============================================================================


def compute_indexes(data: ScoringInput | Mapping[str, Any]) -> IndexResult:
    """Score a vehicle / region / parts description.

    Missing fields are treated as "no signal" and fall back to defaults, so
    this never fails on partial input. A raw mapping is validated into a
    ScoringInput first (pydantic raises on wrongly typed values).
    """
    if not isinstance(data, ScoringInput):
        data = ScoringInput.model_validate(data)

    region = data.region
    city = region.city if region else None
    district = region.district if region else None
    brand = data.vehicle.brand if data.vehicle else None
    parts = data.parts or []

    reasons: list[str] = []

    durability, durability_reasons = durability_index(data.mileage)
    reasons.extend(durability_reasons)

    cost, cost_reasons = cost_pressure_index([p.price or 0 for p in parts])
    reasons.extend(cost_reasons)

    supply, supply_reasons = supply_stress_index(city, len(parts))
    reasons.extend(supply_reasons)

    overall = clamp_score(
        (100 - durability) * WEIGHT_WEAR
        + cost * WEIGHT_COST
        + supply * WEIGHT_SUPPLY
    )

    if brand and brand in BRAND_RISK:
        adjustment = BRAND_RISK[brand]
        overall = min(100, overall + adjustment.value)
        reason = adjustment.reason(brand)
        if reason:
            reasons.append(reason)

    if district:
        reasons.append(
            REASON_DISTRICT.format(
                city=city or DISTRICT_CITY_PLACEHOLDER,
                district=district,
            )
        )

    return IndexResult(
        overall_risk=overall,
        durability_index=clamp_score(durability),
        cost_pressure_index=clamp_score(cost),
        supply_stress_index=clamp_score(supply),
        confidence=_confidence(data),
        reasons=_pad_reasons(reasons),
    )
