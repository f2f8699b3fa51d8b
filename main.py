#!/usr/bin/env python3
"""
Routing Policy Simulator - Main Demo

This script walks a sample routing policy through the engine:
1. Simulates a demand scenario (allocation, SLA risk, failover)
2. Raises SLA alerts for the riskiest vendors
3. Balances weights by capacity
4. Stages a sync through the policy change gate
"""

from routing_engine.config.settings import configure_logging, get_settings
from routing_engine.core.entities import PeakWindow
from routing_engine.core.schemas import RoutingPolicyRecord
from routing_engine.core.status import status_tone
from routing_engine.metrics.alerts import SlaAlertEngine, alert_summary
from routing_engine.orchestration.approval import AuditTrail
from routing_engine.orchestration.balancer import apply_balance
from routing_engine.orchestration.failover import describe_fallback, fallback_for
from routing_engine.orchestration.gate import PolicyChangeGate
from routing_engine.simulation.simulator import RoutingSimulator


SAMPLE_POLICY = {
    "id": "policy-us-web",
    "name": "US Web Orders",
    "channel": "web",
    "region": "North America",
    "status": "active",
    "slaMinutes": 240,
    "maxLagMinutes": 30,
    "failoverStrategy": "cascading",
    "allowPartialFulfillment": True,
    "orchestrationStatus": "pending",
    "slaTargets": [
        {"metric": "fulfillment_minutes", "targetValue": 240, "threshold": 300, "warningThreshold": 260},
    ],
    "vendorProfiles": [
        {
            "id": "vp-1", "name": "Atlas Print East", "region": "US East",
            "specializations": ["apparel", "dtg"], "weight": 45, "capacityPerHour": 220,
            "currentLoadPercent": 62, "slaMinutes": 210, "failoverPriority": 1,
            "health": "healthy", "autoPauseThreshold": 90,
        },
        {
            "id": "vp-2", "name": "Summit Fulfillment", "region": "US West",
            "specializations": ["apparel", "embroidery"], "weight": 35, "capacityPerHour": 160,
            "currentLoadPercent": 81, "slaMinutes": 260, "failoverPriority": 2,
            "health": "warning", "autoPauseThreshold": 80,
        },
        {
            "id": "vp-3", "name": "Harbor Goods", "region": "US Central",
            "specializations": ["accessories"], "weight": 15, "capacityPerHour": 90,
            "currentLoadPercent": 93, "slaMinutes": 320, "failoverPriority": 3,
            "health": "critical", "autoPauseThreshold": 85,
        },
    ],
    "auditTrail": [],
}


def run_simulation_demo(policy, settings):
    """Evaluate the default scenario plus an overnight apparel rush."""
    simulator = RoutingSimulator()
    scenario = settings.scenario_defaults.to_scenario()

    print("=" * 60)
    print("SCENARIO: Default assumptions")
    print("=" * 60)
    print(f"  Volume: {scenario.volume} orders, target SLA {scenario.target_sla:g} min")
    print(f"  Expedite: {scenario.expedite_percent:g}%, failure rate {scenario.failure_rate:g}%")
    print()

    run = simulator.run(policy, scenario, name="Default assumptions")
    print_results(policy, run)

    rush = settings.scenario_defaults.model_copy(update={
        "volume": 2500,
        "specialization": "apparel",
        "peak_window": PeakWindow.OVERNIGHT,
        "target_sla": 220,
        "failure_rate": 4,
    }).to_scenario()

    print("=" * 60)
    print("SCENARIO: Overnight apparel rush")
    print("=" * 60)
    rush_run = simulator.run(policy, rush, name="Overnight apparel rush")
    print_results(policy, rush_run)

    return rush_run


def print_results(policy, run):
    print(f"{'Vendor':<22}{'Share':>8}{'Orders':>8}{'Exp.':>6}{'SLA':>6}{'Risk':>7}  Fallback")
    print("-" * 70)
    for vendor, result in zip(policy.vendors, run.results):
        fallback = describe_fallback(policy.failover_strategy, fallback_for(vendor, policy.vendors))
        print(
            f"{result.vendor_name:<22}{result.share:>8.1%}{result.expected_orders:>8}"
            f"{result.expedite_orders:>6}{result.projected_sla_minutes:>6}"
            f"{result.breach_probability:>7.1%}  {fallback}"
        )
    summary = run.summary
    print("-" * 70)
    print(f"  Projected orders: {summary.projected_orders}")
    print(f"  Expedite orders: {summary.expedite_orders}")
    print(f"  Average breach probability: {summary.average_breach_probability:.1%}")
    print(f"  Highest risk vendor: {summary.highest_risk_vendor_id}")
    print()


def run_alert_demo(policy, run, settings):
    alerts = SlaAlertEngine(settings).evaluate(policy, run.results)
    summary = alert_summary(alerts)

    print("=" * 60)
    print(f"SLA ALERTS ({summary['total']})")
    print("=" * 60)
    for alert in alerts:
        print(f"  [{alert.severity.value.upper():<8}] {alert.message}")
    print()


def run_governance_demo(policy, settings):
    trail = AuditTrail()
    gate = PolicyChangeGate(settings)

    print("=" * 60)
    print("GOVERNANCE")
    print("=" * 60)

    label, _ = status_tone(policy.orchestration_status)
    print(f"  Orchestration status: {label}")
    print(f"  Weight total before balancing: {policy.total_weight():g}%")

    decision = gate.stage_sync(policy)
    print(f"  Stage sync: {'allowed' if decision.allowed else 'blocked'} ({decision.message})")

    apply_balance(policy)
    weights = ", ".join(f"{v.name} {v.weight:g}%" for v in policy.vendors)
    print(f"  Balanced by capacity: {weights}")

    entry = trail.stage_change(
        policy,
        summary="Rebalance weights by hourly capacity",
        actor="ops.lead",
        role="operations"
    )
    decision = gate.stage_sync(policy)
    print(f"  Stage sync: {'allowed' if decision.allowed else 'blocked'} ({decision.message})")

    trail.approve(policy, entry.id, reviewer="routing.admin")
    decision = gate.stage_sync(policy)
    print(f"  Stage sync: {'allowed' if decision.allowed else 'blocked'} ({decision.message})")

    label, _ = status_tone(policy.orchestration_status)
    print(f"  Orchestration status: {label}")
    print()


def main():
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings)

    print()
    print("+" + "=" * 58 + "+")
    print(f"|{settings.app_name.upper():^58}|")
    print("+" + "=" * 58 + "+")
    print()

    policy = RoutingPolicyRecord.model_validate(SAMPLE_POLICY).to_entity()

    run = run_simulation_demo(policy, settings)
    run_alert_demo(policy, run, settings)
    run_governance_demo(policy, settings)

    print("=" * 60)
    print("DEMONSTRATION COMPLETE")
    print("=" * 60)
    print()


if __name__ == "__main__":
    main()
