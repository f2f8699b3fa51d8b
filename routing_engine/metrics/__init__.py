"""
Metrics and Alerting

SLA risk alerts raised from simulation results.
"""

from .alerts import (
    AlertSeverity,
    AlertKind,
    SlaAlert,
    SlaAlertEngine,
    alert_summary
)

__all__ = [
    "AlertSeverity",
    "AlertKind",
    "SlaAlert",
    "SlaAlertEngine",
    "alert_summary"
]
