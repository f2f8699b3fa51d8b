"""
Routing Simulation

Scenario evaluation for routing policies:
- Vendor allocation scoring and share normalization
- SLA projection and breach probability
- Scenario aggregates and storable simulation runs
"""

from .scoring import (
    Allocation,
    score_vendor,
    normalize_scores,
    project_orders,
    allocate
)
from .risk import (
    SlaProjection,
    project_sla,
    validate_scenario
)
from .simulator import (
    RoutingSimulator,
    ScenarioSummary,
    SimulationRun,
    simulate,
    summarize
)

__all__ = [
    "Allocation",
    "score_vendor",
    "normalize_scores",
    "project_orders",
    "allocate",
    "SlaProjection",
    "project_sla",
    "validate_scenario",
    "RoutingSimulator",
    "ScenarioSummary",
    "SimulationRun",
    "simulate",
    "summarize"
]
