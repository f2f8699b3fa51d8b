"""Shared fixtures for routing engine tests."""

from itertools import count

import pytest

from routing_engine.config.settings import EngineSettings
from routing_engine.core.entities import PeakWindow, RoutingPolicy, SimulationScenario

from .factories import FIXED_NOW, make_vendor


@pytest.fixture
def business_hours() -> SimulationScenario:
    """Neutral scenario: no region, specialization or peak adjustments."""
    return SimulationScenario(
        volume=1000,
        target_sla=240,
        expedite_percent=10,
        failure_rate=2,
        peak_window=PeakWindow.BUSINESS_HOURS,
    )


@pytest.fixture
def three_vendor_policy() -> RoutingPolicy:
    return RoutingPolicy(
        id="policy-1",
        name="US Web",
        vendors=[
            make_vendor(id="vp-1", name="Atlas", weight=50, failover_priority=1, capacity_per_hour=200),
            make_vendor(id="vp-2", name="Summit", weight=30, failover_priority=2, capacity_per_hour=120),
            make_vendor(id="vp-3", name="Harbor", weight=20, failover_priority=3, capacity_per_hour=80),
        ],
    )


@pytest.fixture
def settings() -> EngineSettings:
    return EngineSettings(_env_file=None)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def id_factory():
    counter = count(1)
    return lambda: f"audit-{next(counter)}"
