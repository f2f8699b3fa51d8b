"""
Status Presentation

Label and tone lookups for the finite status sets the host displays as
badges. Every enum member must appear in its table.
"""

from .entities import AuditStatus, OrchestrationStatus, VendorHealth


HEALTH_TONES = {
    VendorHealth.HEALTHY: ("Healthy", "success"),
    VendorHealth.WARNING: ("Warning", "attention"),
    VendorHealth.CRITICAL: ("Critical", "critical"),
}

AUDIT_TONES = {
    AuditStatus.PENDING: ("Pending", "attention"),
    AuditStatus.APPROVED: ("Approved", "success"),
    AuditStatus.REJECTED: ("Rejected", "critical"),
}

ORCHESTRATION_TONES = {
    OrchestrationStatus.SYNCED: ("Synced", "success"),
    OrchestrationStatus.PENDING: ("Pending sync", "attention"),
    OrchestrationStatus.ERROR: ("Sync error", "critical"),
}

_TABLES = {
    VendorHealth: HEALTH_TONES,
    AuditStatus: AUDIT_TONES,
    OrchestrationStatus: ORCHESTRATION_TONES,
}


def status_tone(status) -> tuple[str, str]:
    """Return (label, tone) for a health, audit or orchestration status."""
    table = _TABLES.get(type(status))
    if table is None:
        raise TypeError(f"No presentation table for {type(status).__name__}")
    return table[status]
