"""
SLA Risk Estimation

Projects each vendor's fulfillment time under a scenario and estimates
the probability it misses the scenario's SLA target.

Breach probability sums three independent terms, clamped to [0, 1]:
- Relative overshoot of the projected SLA against the target
- Externally reported failure rate
- Load-driven congestion (current load / 260)
"""

from dataclasses import dataclass

from ..core.entities import PeakWindow, SimulationScenario, VendorProfile
from ..core.numbers import clamp, round_half_up
from ..errors import InvalidScenarioError


EXPEDITE_MODIFIER = 0.88
CONGESTION_DIVISOR = 260.0

PEAK_MODIFIERS = {
    PeakWindow.BUSINESS_HOURS: 1.0,
    PeakWindow.OVERNIGHT: 1.05,
    PeakWindow.OFF_PEAK: 0.95,
}


@dataclass(frozen=True)
class SlaProjection:
    """Projected fulfillment time and breach likelihood for one vendor."""
    projected_sla_minutes: int
    breach_probability: float


def validate_scenario(scenario: SimulationScenario) -> None:
    """Reject scenarios the estimator cannot evaluate."""
    if scenario.target_sla <= 0:
        raise InvalidScenarioError(
            f"Scenario target SLA must be positive, got {scenario.target_sla}"
        )


def project_sla(vendor: VendorProfile, scenario: SimulationScenario) -> SlaProjection:
    """Project a vendor's SLA minutes and breach probability for a scenario."""
    validate_scenario(scenario)

    expedite_modifier = EXPEDITE_MODIFIER if scenario.expedite_percent > 0 else 1.0
    peak_modifier = PEAK_MODIFIERS[scenario.peak_window]
    projected = max(1, round_half_up(vendor.sla_minutes * expedite_modifier * peak_modifier))

    overshoot = (projected - scenario.target_sla) / scenario.target_sla
    failure = scenario.failure_rate / 100
    congestion = vendor.current_load_percent / CONGESTION_DIVISOR

    return SlaProjection(
        projected_sla_minutes=projected,
        breach_probability=clamp(overshoot + failure + congestion)
    )
