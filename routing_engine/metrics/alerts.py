"""
SLA Alert Engine

Checks simulation results against breach thresholds, the policy's SLA
targets and each vendor's auto-pause threshold. Alerts are advisory:
they never change allocation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..config.settings import EngineSettings, get_settings
from ..core.entities import RoutingPolicy, SlaTargetMetric


class AlertSeverity(Enum):
    """Alert severity levels."""
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class AlertKind(Enum):
    """What an alert was raised against."""
    BREACH_RISK = "breach_risk"
    SLA_TARGET = "sla_target"
    AUTO_PAUSE = "auto_pause"


SEVERITY_ORDER = {
    AlertSeverity.CRITICAL: 0,
    AlertSeverity.WARNING: 1,
    AlertSeverity.INFO: 2,
}


@dataclass
class SlaAlert:
    """An alert for one vendor in one simulation."""
    vendor_id: str
    vendor_name: str = ""
    kind: AlertKind = AlertKind.BREACH_RISK
    severity: AlertSeverity = AlertSeverity.WARNING
    message: str = ""
    current_value: float = 0.0
    threshold: float = 0.0
    context: dict = field(default_factory=dict)


def _tier(value: float, critical: Optional[float], warning: Optional[float]) -> Optional[tuple]:
    """(severity, threshold) for the highest tier the value exceeds."""
    if critical is not None and value > critical:
        return AlertSeverity.CRITICAL, critical
    if warning is not None and value > warning:
        return AlertSeverity.WARNING, warning
    return None


class SlaAlertEngine:
    """
    Evaluates simulation results for SLA risk.

    Raises alerts when:
    - Breach probability reaches the configured warning/alert thresholds
    - Projected minutes or breach probability exceed a policy SLA target
    - A vendor's current load is above its auto-pause threshold
    """

    def __init__(self, settings: EngineSettings = None):
        self.settings = settings or get_settings()

    def evaluate(self, policy: RoutingPolicy, results: list) -> list[SlaAlert]:
        """Alerts for every result, critical first, then in vendor order."""
        alerts = []
        for result in results:
            alerts.extend(self._breach_alerts(result))
            alerts.extend(self._target_alerts(policy, result))

        for vendor in policy.vendors:
            if vendor.is_over_auto_pause():
                alerts.append(SlaAlert(
                    vendor_id=vendor.id,
                    vendor_name=vendor.name,
                    kind=AlertKind.AUTO_PAUSE,
                    severity=AlertSeverity.WARNING,
                    message=(
                        f"{vendor.name} load {vendor.current_load_percent:.0f}% is above "
                        f"auto-pause threshold {vendor.auto_pause_threshold:.0f}%; "
                        "auto-pause recommended"
                    ),
                    current_value=vendor.current_load_percent,
                    threshold=vendor.auto_pause_threshold
                ))

        alerts.sort(key=lambda a: SEVERITY_ORDER[a.severity])
        return alerts

    def _breach_alerts(self, result) -> list[SlaAlert]:
        probability = result.breach_probability
        if probability >= self.settings.breach_alert_threshold:
            severity, threshold = AlertSeverity.CRITICAL, self.settings.breach_alert_threshold
        elif probability >= self.settings.breach_warning_threshold:
            severity, threshold = AlertSeverity.WARNING, self.settings.breach_warning_threshold
        else:
            return []

        return [SlaAlert(
            vendor_id=result.vendor_id,
            vendor_name=result.vendor_name,
            kind=AlertKind.BREACH_RISK,
            severity=severity,
            message=f"{result.vendor_name} breach risk {probability:.0%} (threshold {threshold:.0%})",
            current_value=probability,
            threshold=threshold
        )]

    def _target_alerts(self, policy: RoutingPolicy, result) -> list[SlaAlert]:
        alerts = []
        for target in policy.sla_targets:
            if target.metric == SlaTargetMetric.FULFILLMENT_MINUTES:
                value = result.projected_sla_minutes
            else:
                value = result.breach_probability

            tier = _tier(value, target.threshold, target.warning_threshold)
            if tier is None:
                continue

            severity, threshold = tier
            alerts.append(SlaAlert(
                vendor_id=result.vendor_id,
                vendor_name=result.vendor_name,
                kind=AlertKind.SLA_TARGET,
                severity=severity,
                message=(
                    f"{result.vendor_name} {target.metric.value} {value:g} exceeds "
                    f"{threshold:g} {target.unit}"
                ),
                current_value=value,
                threshold=threshold,
                context={"metric": target.metric.value, "target_value": target.target_value}
            ))
        return alerts


def alert_summary(alerts: list) -> dict:
    """Counts of alerts by severity and kind."""
    return {
        "total": len(alerts),
        "by_severity": {
            severity.value: sum(1 for a in alerts if a.severity == severity)
            for severity in AlertSeverity
        },
        "by_kind": {
            kind.value: sum(1 for a in alerts if a.kind == kind)
            for kind in AlertKind
        },
    }
