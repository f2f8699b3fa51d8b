"""
Weight Balancing

Operator-invoked normalization of static policy weights proportional to
vendor capacity. Independent of the scenario scorer.
"""

import logging
from dataclasses import replace

from ..core.numbers import round_half_up

logger = logging.getLogger(__name__)


def auto_balance(vendors: list) -> list:
    """
    Return copies of vendors with weights proportional to capacity per hour.

    Each weight is rounded independently; the rounding drift is applied in
    full to the last vendor in list order. If that would push its weight
    below zero it floors at 0 and the total stays above 100.
    """
    if not vendors:
        return []

    total_capacity = sum(v.capacity_per_hour for v in vendors) or 1
    balanced = [
        replace(v, weight=round_half_up(v.capacity_per_hour / total_capacity * 100))
        for v in vendors
    ]

    correction = 100 - sum(v.weight for v in balanced)
    last = balanced[-1]
    balanced[-1] = replace(last, weight=max(0, last.weight + correction))

    total = sum(v.weight for v in balanced)
    if total != 100:
        logger.warning(
            "Balanced weights total %s; correction %s floored last vendor %s at 0",
            total, correction, last.id
        )
    else:
        logger.info("Balanced %d vendor weights by capacity", len(balanced))
    return balanced


def apply_balance(policy) -> None:
    """Replace a policy's vendor list with its capacity-balanced weights."""
    policy.vendors = auto_balance(policy.vendors)
