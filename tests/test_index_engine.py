"""Tests for the risk index engine."""

import pytest
from pydantic import ValidationError

from aftermarket_api.models.scoring import ScoringInput
from aftermarket_api.services.index_engine import (
    REASON_DATA_INSUFFICIENT,
    REASON_MAINTENANCE_PROGRAM,
    REASON_PERIODIC_UPDATE,
    compute_indexes,
    cost_pressure_index,
    durability_index,
    format_km,
    round_half_up,
    supply_stress_index,
)

ISTANBUL_REASON = (
    "İstanbul bölgesinde tedarik stok seviyeleri kritik seviyede bulunmaktadır."
)
FORD_REASON = "Ford markaları tarihsel olarak şanzıman sorunları göstermektedir."


def _parts(count: int, price: float | None = 100) -> list[dict]:
    return [{"category": f"CAT-{i}", "price": price} for i in range(count)]


# ---------------------------------------------------------------------------
# Empty / defaults
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_empty_input_uses_defaults(self):
        result = compute_indexes({})
        assert result.durability_index == 85
        assert result.cost_pressure_index == 30
        assert result.supply_stress_index == 35
        assert result.confidence == 0

    def test_empty_input_gets_three_padding_reasons_in_order(self):
        result = compute_indexes(ScoringInput())
        assert result.reasons == [
            REASON_MAINTENANCE_PROGRAM,
            REASON_DATA_INSUFFICIENT,
            REASON_PERIODIC_UPDATE,
        ]

    def test_empty_input_overall_risk(self):
        # 15*0.35 + 30*0.25 + 35*0.40 = 26.75
        assert compute_indexes({}).overall_risk == 27

    def test_json_uses_camel_case(self):
        dumped = compute_indexes({}).model_dump(by_alias=True)
        assert set(dumped) == {
            "overallRisk",
            "durabilityIndex",
            "costPressureIndex",
            "supplyStressIndex",
            "confidence",
            "reasons",
        }


# ---------------------------------------------------------------------------
# Durability
# ---------------------------------------------------------------------------


class TestDurability:
    def test_approaching_critical_threshold(self):
        result = compute_indexes({"mileage": 120000})
        assert result.durability_index == 73
        assert "Kilometre sayısı (120,000 km) kritik eşiğe yaklaşmaktadır." in result.reasons
        assert not any("ciddi şekilde" in r for r in result.reasons)

    def test_severe_wear(self):
        result = compute_indexes({"mileage": 160000})
        assert result.durability_index == 69
        assert (
            "Yüksek kilometre (160,000 km) parça ömrünü ciddi şekilde azaltmaktadır."
            in result.reasons
        )
        assert not any("kritik eşiğe" in r for r in result.reasons)

    def test_exactly_150000_is_not_severe(self):
        _, reasons = durability_index(150000)
        assert len(reasons) == 1
        assert "kritik eşiğe" in reasons[0]

    def test_exactly_100000_has_no_reason(self):
        score, reasons = durability_index(100000)
        assert score == 75
        assert reasons == []

    def test_floor_at_20(self):
        score, _ = durability_index(2_000_000)
        assert score == 20

    def test_partial_10k_does_not_degrade(self):
        score, _ = durability_index(9999)
        assert score == 85

    def test_zero_mileage_counts_as_absent(self):
        result = compute_indexes({"mileage": 0})
        assert result.durability_index == 85
        assert result.confidence == 0

    def test_negative_mileage_rejected(self):
        with pytest.raises(ValidationError):
            compute_indexes({"mileage": -5})

    @pytest.mark.parametrize("mileage", [float("inf"), float("nan")])
    def test_non_finite_mileage_rejected(self, mileage):
        with pytest.raises(ValidationError):
            ScoringInput(mileage=mileage)

    def test_non_finite_price_rejected(self):
        with pytest.raises(ValidationError):
            compute_indexes({"parts": [{"category": "BRAKE", "price": float("inf")}]})


# ---------------------------------------------------------------------------
# Cost pressure
# ---------------------------------------------------------------------------


class TestCostPressure:
    def test_single_cheap_part(self):
        # 30 + 5 + 1
        score, reasons = cost_pressure_index([100])
        assert score == 36
        assert reasons == []

    def test_factors_are_capped(self):
        # variety capped at 40, price capped at 30
        score, _ = cost_pressure_index([10000] * 12)
        assert score == 100

    def test_high_unit_cost_reason(self):
        _, reasons = cost_pressure_index([3500, 3600])
        assert reasons == [
            "Yüksek birim parça maliyetleri (ort. 3550 ₺) işletme maliyetini artırmaktadır."
        ]

    def test_high_variety_reason(self):
        _, reasons = cost_pressure_index([10] * 6)
        assert len(reasons) == 1
        assert "(6 kategori)" in reasons[0]

    def test_missing_price_counts_as_zero(self):
        result = compute_indexes({"parts": [{"category": "BRAKE"}, {"price": 1000}]})
        # avg 500 -> 30 + 10 + 5
        assert result.cost_pressure_index == 45

    def test_fractional_cost_is_rounded(self):
        # avg 250 -> 30 + 5 + 2.5 = 37.5
        result = compute_indexes({"parts": [{"price": 250}]})
        assert result.cost_pressure_index == 38


# ---------------------------------------------------------------------------
# Supply stress
# ---------------------------------------------------------------------------


class TestSupplyStress:
    def test_istanbul(self):
        result = compute_indexes({"region": {"city": "İstanbul"}})
        assert result.supply_stress_index == 60
        assert ISTANBUL_REASON in result.reasons
        # (100-85)*0.35 + 30*0.25 + 60*0.40 = 36.75
        assert result.overall_risk == 37

    @pytest.mark.parametrize(
        "city,expected",
        [("Ankara", 45), ("İzmir", 40), ("Bursa", 38), (None, 35), ("", 35)],
    )
    def test_city_table(self, city, expected):
        score, reasons = supply_stress_index(city, 0)
        assert score == expected
        assert reasons == []

    def test_city_match_is_exact(self):
        # Dotless capital I and lowercase spellings are not the listed city
        assert supply_stress_index("Istanbul", 0)[0] == 38
        assert supply_stress_index("istanbul", 0)[0] == 38

    def test_many_parts_add_stress(self):
        score, _ = supply_stress_index("Ankara", 11)
        assert score == 60

    def test_ten_parts_add_nothing(self):
        score, _ = supply_stress_index("Ankara", 10)
        assert score == 45


# ---------------------------------------------------------------------------
# Brand / district
# ---------------------------------------------------------------------------


class TestBrandAndRegion:
    def test_ford_adds_eight(self):
        base = compute_indexes({"mileage": 50000})
        ford = compute_indexes({"mileage": 50000, "vehicle": {"brand": "Ford"}})
        assert ford.overall_risk == base.overall_risk + 8

    def test_ford_reason_precedes_district(self):
        result = compute_indexes(
            {
                "region": {"city": "Ankara", "district": "Çankaya"},
                "vehicle": {"brand": "Ford"},
            }
        )
        assert result.reasons[0] == FORD_REASON
        assert result.reasons[1] == (
            "Ankara ilinin Çankaya ilçesinde bölgesel talepte değişim gözlenmektedir."
        )

    def test_ford_on_worst_case_vehicle(self):
        result = compute_indexes(
            {
                "mileage": 2_000_000,
                "region": {"city": "İstanbul"},
                "vehicle": {"brand": "Ford"},
                "parts": _parts(20, 10000),
            }
        )
        # 80*0.35 + 100*0.25 + 75*0.40 = 83, plus 8
        assert result.overall_risk == 91

    def test_bmw_reason_without_score_change(self):
        base = compute_indexes({})
        bmw = compute_indexes({"vehicle": {"brand": "BMW"}})
        assert bmw.overall_risk == base.overall_risk
        assert bmw.reasons[0].startswith("BMW modelleri")

    def test_other_brand_no_adjustment(self):
        result = compute_indexes({"vehicle": {"brand": "Toyota"}})
        assert result.overall_risk == compute_indexes({}).overall_risk
        assert result.reasons[0] == REASON_MAINTENANCE_PROGRAM

    def test_district_without_city_uses_placeholder(self):
        result = compute_indexes({"region": {"district": "Kadıköy"}})
        assert result.reasons[0] == (
            "Seçili ilinin Kadıköy ilçesinde bölgesel talepte değişim gözlenmektedir."
        )


# ---------------------------------------------------------------------------
# Confidence / padding / truncation
# ---------------------------------------------------------------------------


class TestConfidenceAndReasons:
    def test_full_confidence(self):
        result = compute_indexes(
            {
                "mileage": 1,
                "region": {"city": "Ankara", "district": "Çankaya"},
                "vehicle": {"brand": "Fiat", "model": "Doblo"},
                "parts": [{"price": 1}],
            }
        )
        assert result.confidence == 100

    def test_partial_confidence_rounds(self):
        # 1/6 -> 16.67
        assert compute_indexes({"vehicle": {"model": "Clio"}}).confidence == 17

    def test_empty_parts_list_not_counted(self):
        assert compute_indexes({"parts": []}).confidence == 0

    def test_single_reason_padded_to_three(self):
        result = compute_indexes({"region": {"city": "İstanbul"}})
        assert result.reasons == [
            ISTANBUL_REASON,
            REASON_DATA_INSUFFICIENT,
            REASON_PERIODIC_UPDATE,
        ]

    def test_two_reasons_get_periodic_update_only(self):
        result = compute_indexes({"mileage": 160000, "region": {"city": "İstanbul"}})
        assert result.reasons[2] == REASON_PERIODIC_UPDATE
        assert len(result.reasons) == 3

    def test_truncated_to_six_in_append_order(self):
        result = compute_indexes(
            {
                "mileage": 160000,
                "region": {"city": "İstanbul", "district": "Beşiktaş"},
                "vehicle": {"brand": "Ford", "model": "Focus"},
                "parts": _parts(12, 5000),
            }
        )
        assert len(result.reasons) == 6
        assert "ciddi şekilde" in result.reasons[0]
        assert "birim parça" in result.reasons[1]
        assert "kategori" in result.reasons[2]
        assert result.reasons[3] == ISTANBUL_REASON
        assert result.reasons[4] == FORD_REASON
        assert "Beşiktaş" in result.reasons[5]

    def test_six_reasons_get_no_padding(self):
        result = compute_indexes(
            {
                "mileage": 160000,
                "region": {"city": "İstanbul", "district": "Beşiktaş"},
                "vehicle": {"brand": "BMW"},
                "parts": _parts(12, 5000),
            }
        )
        assert len(result.reasons) == 6
        assert result.reasons[4].startswith("BMW modelleri")
        assert REASON_PERIODIC_UPDATE not in result.reasons

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"mileage": 999999999},
            {"parts": _parts(50, 1_000_000)},
            {"region": {"city": "İstanbul", "district": "Fatih"}, "vehicle": {"brand": "Ford"}},
            {"mileage": 45200, "vehicle": {"brand": "Hyundai", "model": "i10"}},
        ],
    )
    def test_results_stay_in_bounds(self, payload):
        result = compute_indexes(payload)
        for value in (
            result.overall_risk,
            result.durability_index,
            result.cost_pressure_index,
            result.supply_stress_index,
            result.confidence,
        ):
            assert isinstance(value, int)
            assert 0 <= value <= 100
        assert 3 <= len(result.reasons) <= 6


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestHelpers:
    def test_round_half_up(self):
        assert round_half_up(36.5) == 37
        assert round_half_up(26.5) == 27
        assert round_half_up(26.49) == 26

    def test_format_km(self):
        assert format_km(160000) == "160,000"
        assert format_km(1234.5) == "1,234.5"
        assert format_km(1_000_000.0) == "1,000,000"
