"""
Policy Change Gate

Decides whether a routing policy may be staged as synced for the
external orchestrator to pick up. Staging requires:
1. Vendor weights summing to 100 within tolerance
2. No audit entries awaiting review

A blocked sync is reported as a structured decision, not raised; the
policy is left untouched. Staging does not contact the orchestrator.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from ..config.settings import EngineSettings, get_settings
from ..core.entities import OrchestrationStatus, RoutingPolicy

logger = logging.getLogger(__name__)


class SyncRejection(Enum):
    """Why a sync could not be staged."""
    WEIGHTS_NOT_NORMALIZED = "weights_not_normalized"
    PENDING_APPROVALS = "pending_approvals_outstanding"


@dataclass(frozen=True)
class SyncDecision:
    """Outcome of a stage-sync request."""
    allowed: bool
    reason: Optional[SyncRejection] = None
    message: str = ""
    weight_total: float = 0.0
    pending_count: int = 0


class PolicyChangeGate:
    """Gates promotion of a routing policy to the synced state."""

    def __init__(
        self,
        settings: EngineSettings = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.settings = settings or get_settings()
        self._clock = clock

    def check(self, policy: RoutingPolicy) -> SyncDecision:
        """Evaluate the sync preconditions without changing the policy."""
        weight_total = policy.total_weight()
        pending_count = len(policy.pending_audits())

        if abs(100 - weight_total) > self.settings.weight_tolerance:
            return SyncDecision(
                allowed=False,
                reason=SyncRejection.WEIGHTS_NOT_NORMALIZED,
                message=f"Weights total {weight_total:.2f}%, must equal 100%",
                weight_total=weight_total,
                pending_count=pending_count
            )

        if pending_count:
            return SyncDecision(
                allowed=False,
                reason=SyncRejection.PENDING_APPROVALS,
                message=f"{pending_count} pending approval(s) outstanding",
                weight_total=weight_total,
                pending_count=pending_count
            )

        return SyncDecision(
            allowed=True,
            message="Ready to sync",
            weight_total=weight_total,
            pending_count=0
        )

    def stage_sync(self, policy: RoutingPolicy) -> SyncDecision:
        """Mark the policy synced if the preconditions hold."""
        decision = self.check(policy)
        if not decision.allowed:
            logger.warning("Sync blocked for policy %s: %s", policy.id, decision.message)
            return decision

        policy.orchestration_status = OrchestrationStatus.SYNCED
        policy.orchestration_last_sync = self._clock()
        logger.info("Staged sync for policy %s", policy.id)
        return decision
