"""
Policy Audit Trail - Reviewer Approval

Operators stage changes to a routing policy as audit entries; reviewers
approve or reject them. The trail gates promotion of the policy to the
orchestrator: nothing syncs while an entry is pending.

Transitions:
- (new) -> pending, timestamped at creation
- pending -> approved | rejected, by an explicit reviewer action
- approved and rejected are terminal; entries are never deleted
"""

import logging
from datetime import datetime
from typing import Callable, Optional
from uuid import uuid4

from ..core.entities import AuditEntry, AuditStatus, RoutingPolicy
from ..errors import AuditEntryNotFoundError, AuditTransitionError

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid4().hex


class AuditTrail:
    """
    Stages and reviews audit entries on a routing policy.

    The clock and id factory are injected so that entry timestamps and
    identifiers are deterministic under test.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = _new_id
    ):
        self._clock = clock
        self._id_factory = id_factory

    def stage_change(
        self,
        policy: RoutingPolicy,
        summary: str,
        actor: str,
        role: str,
        notes: Optional[str] = None
    ) -> AuditEntry:
        """Record a proposed change as a pending entry on the policy."""
        entry = AuditEntry(
            id=self._id_factory(),
            summary=summary,
            actor=actor,
            role=role,
            status=AuditStatus.PENDING,
            timestamp=self._clock(),
            notes=notes
        )
        policy.audit_trail.append(entry)
        logger.info("Staged audit entry %s on policy %s by %s", entry.id, policy.id, actor)
        return entry

    def approve(
        self,
        policy: RoutingPolicy,
        entry_id: str,
        reviewer: str,
        notes: Optional[str] = None
    ) -> AuditEntry:
        """Approve a pending entry."""
        return self._review(policy, entry_id, AuditStatus.APPROVED, reviewer, notes)

    def reject(
        self,
        policy: RoutingPolicy,
        entry_id: str,
        reviewer: str,
        notes: Optional[str] = None
    ) -> AuditEntry:
        """Reject a pending entry."""
        return self._review(policy, entry_id, AuditStatus.REJECTED, reviewer, notes)

    def _review(
        self,
        policy: RoutingPolicy,
        entry_id: str,
        status: AuditStatus,
        reviewer: str,
        notes: Optional[str]
    ) -> AuditEntry:
        entry = find_entry(policy, entry_id)
        if not entry.is_pending():
            raise AuditTransitionError(
                f"Audit entry {entry_id} is already {entry.status.value}"
            )

        entry.status = status
        entry.reviewed_by = reviewer
        entry.reviewed_at = self._clock()
        if notes:
            entry.notes = notes

        logger.info("Audit entry %s %s by %s", entry_id, status.value, reviewer)
        return entry


def find_entry(policy: RoutingPolicy, entry_id: str) -> AuditEntry:
    for entry in policy.audit_trail:
        if entry.id == entry_id:
            return entry
    raise AuditEntryNotFoundError(entry_id)


def review_summary(policy: RoutingPolicy) -> dict:
    """Counts of audit entries by status."""
    summary = {status.value: 0 for status in AuditStatus}
    for entry in policy.audit_trail:
        summary[entry.status.value] += 1
    return summary
