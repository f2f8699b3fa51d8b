"""
Policy Orchestration

Failover sequencing, capacity-based weight balancing, the policy audit
trail, and the gate that stages a policy as synced for the orchestrator.
"""

from .failover import (
    failover_chain,
    fallback_for,
    describe_fallback,
    highest_risk
)
from .balancer import (
    auto_balance,
    apply_balance
)
from .approval import (
    AuditTrail,
    find_entry,
    review_summary
)
from .gate import (
    PolicyChangeGate,
    SyncDecision,
    SyncRejection
)

__all__ = [
    "failover_chain",
    "fallback_for",
    "describe_fallback",
    "highest_risk",
    "auto_balance",
    "apply_balance",
    "AuditTrail",
    "find_entry",
    "review_summary",
    "PolicyChangeGate",
    "SyncDecision",
    "SyncRejection"
]
