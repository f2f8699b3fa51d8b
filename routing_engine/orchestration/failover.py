"""
Failover Sequencing

Orders vendors by declared failover priority and resolves the next rung
of the cascade for each vendor. Lower priority values fall back earlier;
equal priorities keep their original list order.
"""

from typing import Optional

from ..core.entities import FailoverStrategy, VendorProfile


PARALLEL_FALLBACK_LABEL = "Distribute to remaining vendors"
NO_FALLBACK_LABEL = "None"


def failover_chain(vendors: list) -> list[VendorProfile]:
    """Vendors in cascade order (stable on ties)."""
    return sorted(vendors, key=lambda v: v.failover_priority)


def fallback_for(vendor: VendorProfile, vendors: list) -> Optional[VendorProfile]:
    """
    The vendor with the smallest priority strictly greater than this one's.

    Returns None at the last rung. The answer depends only on priorities,
    never on the scenario or the policy's failover strategy.
    """
    candidate = None
    for other in vendors:
        if other.failover_priority <= vendor.failover_priority:
            continue
        if candidate is None or other.failover_priority < candidate.failover_priority:
            candidate = other
    return candidate


def describe_fallback(strategy: FailoverStrategy, fallback: Optional[VendorProfile]) -> str:
    """Display label for a vendor's fallback under the policy strategy."""
    if strategy == FailoverStrategy.PARALLEL:
        return PARALLEL_FALLBACK_LABEL
    if fallback is None:
        return NO_FALLBACK_LABEL
    return fallback.name


def highest_risk(results: list):
    """Result with the greatest breach probability; first occurrence wins ties."""
    best = None
    for result in results:
        if best is None or result.breach_probability > best.breach_probability:
            best = result
    return best
