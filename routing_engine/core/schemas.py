"""
Pydantic Schemas for Record Source Payloads

The host application supplies policies and scenarios as camelCase records
from its data API. These schemas validate ranges at the boundary and
convert to the engine's entities, so the computation layer can treat its
inputs as already validated. Results are serialized back the same way.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .entities import (
    ALL,
    AuditEntry,
    AuditStatus,
    FailoverStrategy,
    OrchestrationStatus,
    PeakWindow,
    PolicyStatus,
    RoutingPolicy,
    SimulationResult,
    SimulationScenario,
    SlaTarget,
    SlaTargetMetric,
    VendorHealth,
    VendorProfile,
)


class RecordModel(BaseModel):
    """Base for camelCase records; snake_case names are accepted too."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore"
    )


# =============================================================================
# Policy Records
# =============================================================================

class VendorProfileRecord(RecordModel):
    """A vendor profile row attached to a routing policy."""
    id: str
    name: str = ""
    vendor_id: Optional[str] = None
    region: str = ""
    specialization: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("specialization", "specializations")
    )
    weight: float = Field(ge=0.0, le=100.0)
    capacity_per_hour: float = Field(ge=0.0)
    current_load_percent: float = Field(ge=0.0, le=100.0)
    sla_minutes: float = Field(ge=0.0)
    failover_priority: int = Field(ge=1)
    health: VendorHealth = VendorHealth.HEALTHY
    auto_pause_threshold: float = Field(default=100.0, ge=0.0, le=100.0)
    last_incident_at: Optional[datetime] = None
    overnight_exposed: Optional[bool] = None

    def to_entity(self) -> VendorProfile:
        return VendorProfile(
            id=self.id,
            name=self.name,
            vendor_id=self.vendor_id,
            region=self.region,
            specialization=frozenset(self.specialization),
            weight=self.weight,
            capacity_per_hour=self.capacity_per_hour,
            current_load_percent=self.current_load_percent,
            sla_minutes=self.sla_minutes,
            failover_priority=self.failover_priority,
            health=self.health,
            auto_pause_threshold=self.auto_pause_threshold,
            last_incident_at=self.last_incident_at,
            overnight_exposed=self.overnight_exposed
        )


class AuditEntryRecord(RecordModel):
    """A routing policy audit row."""
    id: str
    summary: str
    actor: str
    role: str
    status: AuditStatus = AuditStatus.PENDING
    timestamp: datetime
    notes: Optional[str] = None

    def to_entity(self) -> AuditEntry:
        return AuditEntry(
            id=self.id,
            summary=self.summary,
            actor=self.actor,
            role=self.role,
            status=self.status,
            timestamp=self.timestamp,
            notes=self.notes
        )


class SlaTargetRecord(RecordModel):
    """A service level target row."""
    metric: SlaTargetMetric = SlaTargetMetric.FULFILLMENT_MINUTES
    target_value: Optional[float] = None
    threshold: Optional[float] = None
    warning_threshold: Optional[float] = None
    unit: str = "minutes"

    def to_entity(self) -> SlaTarget:
        return SlaTarget(
            metric=self.metric,
            target_value=self.target_value,
            threshold=self.threshold,
            warning_threshold=self.warning_threshold,
            unit=self.unit
        )


class RoutingPolicyRecord(RecordModel):
    """A routing policy with its vendor profiles, audit trail and targets."""
    id: str
    name: str
    channel: str = ""
    region: str = ""
    description: str = ""
    status: PolicyStatus = PolicyStatus.DRAFT
    effective_at: Optional[datetime] = None
    sla_minutes: float = Field(default=0.0, ge=0.0)
    max_lag_minutes: float = Field(default=0.0, ge=0.0)
    failover_strategy: FailoverStrategy = FailoverStrategy.CASCADING
    allow_partial_fulfillment: bool = False
    orchestration_status: OrchestrationStatus = OrchestrationStatus.PENDING
    orchestration_last_sync: Optional[datetime] = None
    vendors: List[VendorProfileRecord] = Field(
        default_factory=list,
        validation_alias=AliasChoices("vendors", "vendorProfiles")
    )
    audit_trail: List[AuditEntryRecord] = Field(
        default_factory=list,
        validation_alias=AliasChoices("auditTrail", "audit_trail", "auditEntries")
    )
    sla_targets: List[SlaTargetRecord] = Field(default_factory=list)
    created_by: Optional[str] = None
    updated_by: Optional[str] = None

    def to_entity(self) -> RoutingPolicy:
        return RoutingPolicy(
            id=self.id,
            name=self.name,
            channel=self.channel,
            region=self.region,
            description=self.description,
            status=self.status,
            effective_at=self.effective_at,
            sla_minutes=self.sla_minutes,
            max_lag_minutes=self.max_lag_minutes,
            sla_targets=[t.to_entity() for t in self.sla_targets],
            failover_strategy=self.failover_strategy,
            allow_partial_fulfillment=self.allow_partial_fulfillment,
            orchestration_status=self.orchestration_status,
            orchestration_last_sync=self.orchestration_last_sync,
            vendors=[v.to_entity() for v in self.vendors],
            audit_trail=[a.to_entity() for a in self.audit_trail],
            created_by=self.created_by,
            updated_by=self.updated_by
        )


# =============================================================================
# Scenario and Result Records
# =============================================================================

class SimulationScenarioRecord(RecordModel):
    """Scenario inputs as entered by an operator."""
    volume: int = Field(ge=0)
    region_focus: str = ALL
    specialization: str = ALL
    target_sla: float = Field(gt=0.0)
    expedite_percent: float = Field(default=0.0, ge=0.0, le=100.0)
    failure_rate: float = Field(default=0.0, ge=0.0, le=100.0)
    peak_window: PeakWindow = PeakWindow.BUSINESS_HOURS

    def to_entity(self) -> SimulationScenario:
        return SimulationScenario(
            volume=self.volume,
            region_focus=self.region_focus,
            specialization=self.specialization,
            target_sla=self.target_sla,
            expedite_percent=self.expedite_percent,
            failure_rate=self.failure_rate,
            peak_window=self.peak_window
        )

    @classmethod
    def from_entity(cls, scenario: SimulationScenario) -> "SimulationScenarioRecord":
        # Outbound only: scenarios the engine accepted are not re-validated
        return cls.model_construct(
            volume=scenario.volume,
            region_focus=scenario.region_focus,
            specialization=scenario.specialization,
            target_sla=scenario.target_sla,
            expedite_percent=scenario.expedite_percent,
            failure_rate=scenario.failure_rate,
            peak_window=scenario.peak_window
        )


class SimulationResultRecord(RecordModel):
    """Serialized per-vendor simulation output."""
    vendor_id: str
    vendor_name: str
    share: float = Field(ge=0.0)
    expected_orders: int
    expedite_orders: int
    projected_sla_minutes: int
    breach_probability: float = Field(ge=0.0, le=1.0)
    fallback_vendor: Optional[str] = None

    @classmethod
    def from_entity(cls, result: SimulationResult) -> "SimulationResultRecord":
        return cls.model_construct(
            vendor_id=result.vendor_id,
            vendor_name=result.vendor_name,
            share=result.share,
            expected_orders=result.expected_orders,
            expedite_orders=result.expedite_orders,
            projected_sla_minutes=result.projected_sla_minutes,
            breach_probability=result.breach_probability,
            fallback_vendor=result.fallback_vendor
        )
