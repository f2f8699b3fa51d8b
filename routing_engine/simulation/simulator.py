"""
Routing Simulation Engine

Evaluates a routing policy against a demand scenario:
- Scores vendors and normalizes them into allocation shares
- Projects SLA minutes and breach probability per vendor
- Resolves each vendor's next failover rung
- Aggregates scenario-level totals and the highest-risk vendor

Evaluation is a pure function of (policy, scenario): repeated runs yield
identical results, so callers may memoize on that pair.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from ..core.entities import RoutingPolicy, SimulationResult, SimulationScenario
from ..core.schemas import SimulationResultRecord, SimulationScenarioRecord
from ..orchestration.failover import fallback_for, highest_risk
from .risk import project_sla, validate_scenario
from .scoring import allocate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioSummary:
    """Scenario-level aggregates over all vendor results."""
    projected_orders: int = 0
    expedite_orders: int = 0
    average_breach_probability: float = 0.0
    highest_risk_vendor_id: Optional[str] = None


@dataclass
class SimulationRun:
    """
    Snapshot of one evaluation for the host to store.

    Holds the scenario and the results it produced; the engine itself
    never persists it.
    """
    name: str = ""
    policy_id: str = ""
    scenario: SimulationScenario = None
    results: list = field(default_factory=list)
    summary: ScenarioSummary = field(default_factory=ScenarioSummary)
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "policyId": self.policy_id,
            "scenario": SimulationScenarioRecord.from_entity(self.scenario).model_dump(
                mode="json", by_alias=True
            ),
            "results": [
                SimulationResultRecord.from_entity(r).model_dump(mode="json", by_alias=True)
                for r in self.results
            ],
            "summary": {
                "projectedOrders": self.summary.projected_orders,
                "expediteOrders": self.summary.expedite_orders,
                "averageBreachProbability": self.summary.average_breach_probability,
                "highestRiskVendorId": self.summary.highest_risk_vendor_id,
            },
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


def simulate(policy: RoutingPolicy, scenario: SimulationScenario) -> list[SimulationResult]:
    """Per-vendor results for a policy under a scenario, in vendor list order."""
    validate_scenario(scenario)

    vendors = policy.vendors
    results = []
    for vendor, allocation in zip(vendors, allocate(vendors, scenario)):
        projection = project_sla(vendor, scenario)
        fallback = fallback_for(vendor, vendors)
        results.append(SimulationResult(
            vendor_id=vendor.id,
            vendor_name=vendor.name,
            score=allocation.score,
            share=allocation.share,
            expected_orders=allocation.expected_orders,
            expedite_orders=allocation.expedite_orders,
            projected_sla_minutes=projection.projected_sla_minutes,
            breach_probability=projection.breach_probability,
            fallback_vendor=fallback.name if fallback else None
        ))
    return results


def summarize(results: list) -> ScenarioSummary:
    """Aggregate totals, mean breach probability and the riskiest vendor."""
    if not results:
        return ScenarioSummary()

    riskiest = highest_risk(results)
    return ScenarioSummary(
        projected_orders=sum(r.expected_orders for r in results),
        expedite_orders=sum(r.expedite_orders for r in results),
        average_breach_probability=sum(r.breach_probability for r in results) / len(results),
        highest_risk_vendor_id=riskiest.vendor_id
    )


class RoutingSimulator:
    """
    Runs scenarios against routing policies.

    The clock only stamps SimulationRun snapshots; results never depend
    on it.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock

    def evaluate(
        self,
        policy: RoutingPolicy,
        scenario: SimulationScenario
    ) -> tuple[list[SimulationResult], ScenarioSummary]:
        """Evaluate a scenario, returning vendor results and aggregates."""
        results = simulate(policy, scenario)
        summary = summarize(results)
        logger.info(
            "Simulated policy %s: %d vendors, %d orders, mean breach %.3f",
            policy.id, len(results), summary.projected_orders,
            summary.average_breach_probability
        )
        return results, summary

    def run(
        self,
        policy: RoutingPolicy,
        scenario: SimulationScenario,
        name: str = ""
    ) -> SimulationRun:
        """Evaluate a scenario and package it as a storable snapshot."""
        results, summary = self.evaluate(policy, scenario)
        return SimulationRun(
            name=name or f"{policy.name} scenario",
            policy_id=policy.id,
            scenario=scenario,
            results=results,
            summary=summary,
            created_at=self._clock()
        )
