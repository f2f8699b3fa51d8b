"""
Core Routing Entities

Policies, vendor profiles, audit entries and scenario records, plus the
boundary schemas the host record source is validated against.
"""

from .entities import (
    ALL,
    VendorHealth,
    PolicyStatus,
    FailoverStrategy,
    OrchestrationStatus,
    AuditStatus,
    PeakWindow,
    SlaTargetMetric,
    VendorProfile,
    AuditEntry,
    SlaTarget,
    RoutingPolicy,
    SimulationScenario,
    SimulationResult
)
from .status import status_tone

__all__ = [
    "ALL",
    "VendorHealth",
    "PolicyStatus",
    "FailoverStrategy",
    "OrchestrationStatus",
    "AuditStatus",
    "PeakWindow",
    "SlaTargetMetric",
    "VendorProfile",
    "AuditEntry",
    "SlaTarget",
    "RoutingPolicy",
    "SimulationScenario",
    "SimulationResult",
    "status_tone"
]
