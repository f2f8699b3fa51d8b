"""
Vendor Allocation Scoring Tests

Covers the multiplicative scorer, share normalization and order
projection, including the all-zero degenerate case and rounding drift.
"""

import pytest

from routing_engine.core.entities import PeakWindow, SimulationScenario, VendorHealth
from routing_engine.simulation.scoring import (
    allocate,
    normalize_scores,
    project_orders,
    score_vendor,
)

from .factories import make_vendor


# ============================================================================
# SCORER
# ============================================================================

class TestScoreVendor:
    """Each adjustment multiplies the vendor weight independently."""

    def test_neutral_scenario_returns_weight(self, business_hours):
        assert score_vendor(make_vendor(weight=50), business_hours) == pytest.approx(50)

    def test_region_match_and_mismatch(self):
        scenario = SimulationScenario(volume=100, region_focus="US West")
        assert score_vendor(make_vendor(region="US West"), scenario) == pytest.approx(57.5)
        assert score_vendor(make_vendor(region="EU Central"), scenario) == pytest.approx(41.0)

    def test_specialization_match_and_mismatch(self):
        match = SimulationScenario(volume=100, specialization="apparel")
        miss = SimulationScenario(volume=100, specialization="embroidery")
        assert score_vendor(make_vendor(), match) == pytest.approx(60.0)
        assert score_vendor(make_vendor(), miss) == pytest.approx(45.0)

    def test_overnight_penalizes_east_regions_only(self):
        scenario = SimulationScenario(volume=100, peak_window=PeakWindow.OVERNIGHT)
        assert score_vendor(make_vendor(region="US East"), scenario) == pytest.approx(46.0)
        assert score_vendor(make_vendor(region="US West"), scenario) == pytest.approx(50.0)

    def test_overnight_exposure_flag_overrides_region_label(self):
        scenario = SimulationScenario(volume=100, peak_window=PeakWindow.OVERNIGHT)
        exposed = make_vendor(region="APAC", overnight_exposed=True)
        sheltered = make_vendor(region="US East", overnight_exposed=False)
        assert score_vendor(exposed, scenario) == pytest.approx(46.0)
        assert score_vendor(sheltered, scenario) == pytest.approx(50.0)

    def test_off_peak_boost(self):
        scenario = SimulationScenario(volume=100, peak_window=PeakWindow.OFF_PEAK)
        assert score_vendor(make_vendor(), scenario) == pytest.approx(52.5)

    @pytest.mark.parametrize("health,expected", [
        (VendorHealth.HEALTHY, 50.0),
        (VendorHealth.WARNING, 42.5),
        (VendorHealth.CRITICAL, 30.0),
    ])
    def test_health_penalty(self, business_hours, health, expected):
        assert score_vendor(make_vendor(health=health), business_hours) == pytest.approx(expected)

    @pytest.mark.parametrize("load,expected", [
        (75.0, 50.0),
        (80.0, 41.0),
        (88.0, 41.0),
        (95.0, 34.0),
    ])
    def test_load_throttling_boundaries(self, business_hours, load, expected):
        vendor = make_vendor(current_load_percent=load)
        assert score_vendor(vendor, business_hours) == pytest.approx(expected)

    def test_critical_overloaded_vendor(self, business_hours):
        vendor = make_vendor(weight=100, health=VendorHealth.CRITICAL, current_load_percent=95)
        assert score_vendor(vendor, business_hours) == pytest.approx(40.8)

    def test_score_never_negative(self, business_hours):
        assert score_vendor(make_vendor(weight=-10), business_hours) == 0.0


# ============================================================================
# NORMALIZER
# ============================================================================

class TestNormalizeScores:

    def test_shares_sum_to_one(self):
        shares = normalize_scores([57.5, 41.0, 34.0, 12.25])
        assert sum(shares) == pytest.approx(1.0)

    def test_all_zero_scores_keep_raw_values(self):
        assert normalize_scores([0.0, 0.0]) == [0.0, 0.0]

    def test_no_vendors(self):
        assert normalize_scores([]) == []


class TestProjectOrders:

    def test_expected_and_expedite_orders(self):
        scenario = SimulationScenario(volume=1000, expedite_percent=10)
        assert project_orders(0.6, scenario) == (600, 60)

    def test_halves_round_up(self):
        scenario = SimulationScenario(volume=5, expedite_percent=50)
        assert project_orders(0.5, scenario) == (3, 2)

    def test_no_expedite(self):
        scenario = SimulationScenario(volume=1000, expedite_percent=0)
        assert project_orders(0.25, scenario) == (250, 0)


class TestAllocate:

    def test_sixty_forty_split(self, business_hours):
        vendors = [
            make_vendor(id="a", weight=60),
            make_vendor(id="b", weight=40),
        ]
        allocations = allocate(vendors, business_hours)

        assert [a.vendor_id for a in allocations] == ["a", "b"]
        assert allocations[0].share == pytest.approx(0.6)
        assert allocations[1].share == pytest.approx(0.4)
        assert allocations[0].expected_orders == 600
        assert allocations[1].expected_orders == 400

    def test_single_depressed_vendor_takes_all_volume(self, business_hours):
        vendor = make_vendor(weight=100, health=VendorHealth.CRITICAL, current_load_percent=95)
        allocation, = allocate([vendor], business_hours)

        assert allocation.score == pytest.approx(40.8)
        assert allocation.share == pytest.approx(1.0)
        assert allocation.expected_orders == business_hours.volume

    def test_rounding_drift_within_vendor_count(self):
        scenario = SimulationScenario(volume=1001)
        vendors = [make_vendor(id=f"v{i}", weight=10) for i in range(3)]
        allocations = allocate(vendors, scenario)

        total = sum(a.expected_orders for a in allocations)
        assert abs(total - scenario.volume) <= len(vendors)

    def test_degenerate_zero_scores(self, business_hours):
        vendors = [make_vendor(id="a", weight=0), make_vendor(id="b", weight=0)]
        allocations = allocate(vendors, business_hours)

        assert [a.share for a in allocations] == [0.0, 0.0]
        assert [a.expected_orders for a in allocations] == [0, 0]

    def test_repeated_allocation_is_identical(self, business_hours):
        vendors = [
            make_vendor(id="a", weight=55, health=VendorHealth.WARNING),
            make_vendor(id="b", weight=45, current_load_percent=82),
        ]
        assert allocate(vendors, business_hours) == allocate(vendors, business_hours)
