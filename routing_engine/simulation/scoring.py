"""
Vendor Allocation Scoring

Scores each vendor's desirability under a demand scenario and normalizes
the scores into allocation shares and projected order counts.

Every adjustment is an independent multiplier on the vendor's policy
weight, so the order they are applied in does not matter:
- Region affinity
- Specialization affinity
- Peak window
- Health penalty
- Load throttling
"""

import logging
from dataclasses import dataclass

from ..core.entities import (
    ALL,
    PeakWindow,
    SimulationScenario,
    VendorHealth,
    VendorProfile,
)
from ..core.numbers import round_half_up

logger = logging.getLogger(__name__)


REGION_MATCH = 1.15
REGION_MISMATCH = 0.82
SPECIALIZATION_MATCH = 1.20
SPECIALIZATION_MISMATCH = 0.90
OVERNIGHT_EXPOSED = 0.92
OFF_PEAK_BOOST = 1.05

HEALTH_MULTIPLIERS = {
    VendorHealth.HEALTHY: 1.0,
    VendorHealth.WARNING: 0.85,
    VendorHealth.CRITICAL: 0.60,
}

# (load above, multiplier), checked in order
LOAD_THROTTLES = [
    (88.0, 0.68),
    (75.0, 0.82),
]


def score_vendor(vendor: VendorProfile, scenario: SimulationScenario) -> float:
    """Relative desirability of a vendor under a scenario, never negative."""
    score = vendor.weight

    if scenario.region_focus != ALL:
        score *= REGION_MATCH if scenario.region_focus == vendor.region else REGION_MISMATCH

    if scenario.specialization != ALL:
        if scenario.specialization in vendor.specialization:
            score *= SPECIALIZATION_MATCH
        else:
            score *= SPECIALIZATION_MISMATCH

    if scenario.peak_window == PeakWindow.OVERNIGHT:
        if vendor.is_overnight_exposed():
            score *= OVERNIGHT_EXPOSED
    elif scenario.peak_window == PeakWindow.OFF_PEAK:
        score *= OFF_PEAK_BOOST

    score *= HEALTH_MULTIPLIERS[vendor.health]

    for load_above, multiplier in LOAD_THROTTLES:
        if vendor.current_load_percent > load_above:
            score *= multiplier
            break

    return max(0.0, score)


@dataclass(frozen=True)
class Allocation:
    """Normalized share of scenario volume for one vendor."""
    vendor_id: str
    score: float
    share: float
    expected_orders: int
    expedite_orders: int


def normalize_scores(scores: list) -> list[float]:
    """
    Convert raw scores into allocation shares.

    When every score is zero the denominator is treated as 1, so each
    share equals its own (zero) score.
    """
    total = sum(scores)
    if total == 0:
        if scores:
            logger.warning("All %d vendor scores are zero; shares collapse to raw scores", len(scores))
        total = 1.0
    return [score / total for score in scores]


def project_orders(share: float, scenario: SimulationScenario) -> tuple[int, int]:
    """
    Expected and expedite order counts for a share of scenario volume.

    Counts are rounded per vendor, so their sum across a policy may drift
    from the scenario volume by up to one order per vendor.
    """
    expected = round_half_up(share * scenario.volume)
    expedite = round_half_up(expected * scenario.expedite_percent / 100)
    return expected, expedite


def allocate(vendors: list, scenario: SimulationScenario) -> list[Allocation]:
    """Score and normalize every vendor in list order."""
    scores = [score_vendor(vendor, scenario) for vendor in vendors]
    allocations = []
    for vendor, score, share in zip(vendors, scores, normalize_scores(scores)):
        expected, expedite = project_orders(share, scenario)
        logger.debug(
            "Vendor %s scored %.4f, share %.4f, %d orders",
            vendor.id, score, share, expected
        )
        allocations.append(Allocation(
            vendor_id=vendor.id,
            score=score,
            share=share,
            expected_orders=expected,
            expedite_orders=expedite
        ))
    return allocations
