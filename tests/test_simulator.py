"""
Routing Simulation Tests

End-to-end scenario evaluation: per-vendor results, failover names,
scenario aggregates, determinism and storable runs.
"""

import pytest

from routing_engine.core.entities import RoutingPolicy, SimulationScenario, VendorHealth
from routing_engine.errors import InvalidScenarioError
from routing_engine.simulation.simulator import (
    RoutingSimulator,
    ScenarioSummary,
    simulate,
    summarize,
)

from .factories import FIXED_NOW, make_vendor


@pytest.fixture
def simulator(clock) -> RoutingSimulator:
    return RoutingSimulator(clock=clock)


class TestSimulate:

    def test_results_follow_vendor_order(self, three_vendor_policy, business_hours):
        results = simulate(three_vendor_policy, business_hours)
        assert [r.vendor_id for r in results] == ["vp-1", "vp-2", "vp-3"]

    def test_shares_sum_to_one(self, three_vendor_policy, business_hours):
        three_vendor_policy.vendors[1].health = VendorHealth.WARNING
        three_vendor_policy.vendors[2].current_load_percent = 91
        results = simulate(three_vendor_policy, business_hours)
        assert sum(r.share for r in results) == pytest.approx(1.0)

    def test_fallback_names(self, three_vendor_policy, business_hours):
        results = simulate(three_vendor_policy, business_hours)
        assert [r.fallback_vendor for r in results] == ["Summit", "Harbor", None]

    def test_breach_probabilities_in_range(self, three_vendor_policy):
        scenario = SimulationScenario(volume=5000, target_sla=30, failure_rate=90, expedite_percent=100)
        for result in simulate(three_vendor_policy, scenario):
            assert 0.0 <= result.breach_probability <= 1.0

    def test_invalid_target_sla(self, three_vendor_policy):
        with pytest.raises(InvalidScenarioError):
            simulate(three_vendor_policy, SimulationScenario(volume=100, target_sla=0))

    def test_empty_policy(self, business_hours):
        assert simulate(RoutingPolicy(id="empty"), business_hours) == []


class TestSummarize:

    def test_aggregates(self, three_vendor_policy, business_hours):
        three_vendor_policy.vendors[2].sla_minutes = 400
        results = simulate(three_vendor_policy, business_hours)
        summary = summarize(results)

        assert summary.projected_orders == sum(r.expected_orders for r in results)
        assert summary.expedite_orders == sum(r.expedite_orders for r in results)
        assert abs(summary.projected_orders - business_hours.volume) <= len(results)
        assert summary.average_breach_probability == pytest.approx(
            sum(r.breach_probability for r in results) / 3
        )
        assert summary.highest_risk_vendor_id == "vp-3"

    def test_no_results(self):
        assert summarize([]) == ScenarioSummary()


class TestRoutingSimulator:

    def test_evaluation_is_deterministic(self, simulator, three_vendor_policy, business_hours):
        first = simulator.evaluate(three_vendor_policy, business_hours)
        second = simulator.evaluate(three_vendor_policy, business_hours)
        assert first == second

    def test_run_snapshot(self, simulator, three_vendor_policy, business_hours):
        run = simulator.run(three_vendor_policy, business_hours, name="Baseline")

        assert run.name == "Baseline"
        assert run.policy_id == "policy-1"
        assert run.created_at == FIXED_NOW
        assert len(run.results) == 3

    def test_run_default_name(self, simulator, three_vendor_policy, business_hours):
        assert simulator.run(three_vendor_policy, business_hours).name == "US Web scenario"

    def test_run_to_dict(self, simulator, three_vendor_policy, business_hours):
        payload = simulator.run(three_vendor_policy, business_hours).to_dict()

        assert payload["policyId"] == "policy-1"
        assert payload["scenario"]["peakWindow"] == "business_hours"
        assert payload["scenario"]["targetSla"] == 240
        assert payload["results"][0]["vendorId"] == "vp-1"
        assert payload["results"][0]["fallbackVendor"] == "Summit"
        assert set(payload["summary"]) == {
            "projectedOrders",
            "expediteOrders",
            "averageBreachProbability",
            "highestRiskVendorId",
        }
        assert payload["createdAt"] == FIXED_NOW.isoformat()

    def test_scenario_a_split(self, simulator, business_hours):
        policy = RoutingPolicy(
            id="policy-a",
            vendors=[
                make_vendor(id="a", weight=60, failover_priority=1),
                make_vendor(id="b", weight=40, failover_priority=2),
            ],
        )
        results, _ = simulator.evaluate(policy, business_hours)
        assert [r.share for r in results] == pytest.approx([0.6, 0.4])

    def test_run_to_dict_keeps_out_of_range_inputs(self, simulator, three_vendor_policy):
        scenario = SimulationScenario(volume=100, target_sla=200, failure_rate=250, expedite_percent=140)
        payload = simulator.run(three_vendor_policy, scenario).to_dict()

        assert payload["scenario"]["failureRate"] == 250
        assert payload["scenario"]["expeditePercent"] == 140
        assert [r["breachProbability"] for r in payload["results"]] == [1.0, 1.0, 1.0]
