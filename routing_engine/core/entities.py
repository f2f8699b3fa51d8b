"""
Routing Policy Entities

The in-memory records the engine computes over. The host application
loads these from its record source; the engine never persists them.

Entities:
- VendorProfile: a vendor's capacity, health and priority within one policy
- AuditEntry: a staged, reviewable change to a policy
- SlaTarget: a service level target attached to a policy
- RoutingPolicy: the named configuration owning vendors and audit trail
- SimulationScenario: hypothetical demand assumptions
- SimulationResult: per-vendor output of one scenario evaluation
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


ALL = "all"


class VendorHealth(Enum):
    """Operational health reported for a vendor."""
    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"


class PolicyStatus(Enum):
    """Lifecycle status of a routing policy."""
    DRAFT = "draft"
    ACTIVE = "active"
    RETIRED = "retired"


class FailoverStrategy(Enum):
    """How volume moves when a vendor cannot absorb load."""
    CASCADING = "cascading"
    PARALLEL = "parallel"
    ROUND_ROBIN = "round_robin"


class OrchestrationStatus(Enum):
    """Sync state of a policy with the external orchestrator."""
    SYNCED = "synced"
    PENDING = "pending"
    ERROR = "error"


class AuditStatus(Enum):
    """Review state of an audit entry. APPROVED and REJECTED are terminal."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PeakWindow(Enum):
    """Demand window the scenario models."""
    BUSINESS_HOURS = "business_hours"
    OFF_PEAK = "off_peak"
    OVERNIGHT = "overnight"


class SlaTargetMetric(Enum):
    """Metric an SLA target is expressed against."""
    FULFILLMENT_MINUTES = "fulfillment_minutes"
    BREACH_PROBABILITY = "breach_probability"


@dataclass
class VendorProfile:
    """
    A vendor's participation in one routing policy.

    failover_priority is an ordering key only: lower values are earlier
    fallbacks and ties resolve by list order. weight need not sum to 100
    across the policy except when staging a sync.
    """
    id: str = ""
    name: str = ""
    vendor_id: Optional[str] = None
    region: str = ""
    specialization: frozenset = field(default_factory=frozenset)

    # Allocation
    weight: float = 0.0
    capacity_per_hour: float = 0.0
    current_load_percent: float = 0.0

    # Service
    sla_minutes: float = 0.0
    failover_priority: int = 1
    health: VendorHealth = VendorHealth.HEALTHY
    auto_pause_threshold: float = 100.0
    last_incident_at: Optional[datetime] = None

    # Explicit overnight exposure; None falls back to the region label
    overnight_exposed: Optional[bool] = None

    def __post_init__(self):
        self.specialization = frozenset(self.specialization)

    def is_overnight_exposed(self) -> bool:
        if self.overnight_exposed is not None:
            return self.overnight_exposed
        return "East" in self.region

    def is_over_auto_pause(self) -> bool:
        return self.current_load_percent > self.auto_pause_threshold


@dataclass
class AuditEntry:
    """
    A recorded, reviewable change to a routing policy.

    Created pending; moved to approved or rejected once by a reviewer.
    Entries are never deleted.
    """
    id: str = ""
    summary: str = ""
    actor: str = ""
    role: str = ""
    status: AuditStatus = AuditStatus.PENDING
    timestamp: Optional[datetime] = None
    notes: Optional[str] = None

    # Review
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None

    def is_pending(self) -> bool:
        return self.status == AuditStatus.PENDING


@dataclass
class SlaTarget:
    """Service level target attached to a policy."""
    metric: SlaTargetMetric = SlaTargetMetric.FULFILLMENT_MINUTES
    target_value: Optional[float] = None
    threshold: Optional[float] = None
    warning_threshold: Optional[float] = None
    unit: str = "minutes"


@dataclass
class RoutingPolicy:
    """
    A named routing configuration for one channel/region combination.

    The policy exclusively owns its vendor profiles and audit trail.
    """
    id: str = ""
    name: str = ""
    channel: str = ""
    region: str = ""
    description: str = ""
    status: PolicyStatus = PolicyStatus.DRAFT
    effective_at: Optional[datetime] = None

    # Targets
    sla_minutes: float = 0.0
    max_lag_minutes: float = 0.0
    sla_targets: list = field(default_factory=list)

    # Failover
    failover_strategy: FailoverStrategy = FailoverStrategy.CASCADING
    allow_partial_fulfillment: bool = False

    # Orchestration
    orchestration_status: OrchestrationStatus = OrchestrationStatus.PENDING
    orchestration_last_sync: Optional[datetime] = None

    vendors: list = field(default_factory=list)
    audit_trail: list = field(default_factory=list)

    created_by: Optional[str] = None
    updated_by: Optional[str] = None

    def total_weight(self) -> float:
        return sum(v.weight for v in self.vendors)

    def pending_audits(self) -> list:
        return [entry for entry in self.audit_trail if entry.is_pending()]

    def get_vendor(self, vendor_id: str) -> Optional[VendorProfile]:
        for vendor in self.vendors:
            if vendor.id == vendor_id:
                return vendor
        return None


@dataclass(frozen=True)
class SimulationScenario:
    """
    Hypothetical demand assumptions for one evaluation.

    region_focus and specialization accept the sentinel "all".
    target_sla must be positive before risk projection.
    """
    volume: int = 0
    region_focus: str = ALL
    specialization: str = ALL
    target_sla: float = 240.0
    expedite_percent: float = 0.0
    failure_rate: float = 0.0
    peak_window: PeakWindow = PeakWindow.BUSINESS_HOURS


@dataclass(frozen=True)
class SimulationResult:
    """Per-vendor output of a scenario evaluation. Recomputed, never stored."""
    vendor_id: str
    vendor_name: str
    score: float
    share: float
    expected_orders: int
    expedite_orders: int
    projected_sla_minutes: int
    breach_probability: float
    fallback_vendor: Optional[str] = None
