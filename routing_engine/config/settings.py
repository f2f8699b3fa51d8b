"""
Settings Management with Pydantic

Provides type-safe configuration for the routing engine with:
- Environment variable support (ROUTING_ prefix)
- Validation
- Default scenario assumptions for new simulations
"""

import logging
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.entities import ALL, PeakWindow, SimulationScenario


class ScenarioDefaults(BaseModel):
    """Scenario values offered before an operator edits the simulation."""
    volume: int = Field(default=1000, ge=0)
    region_focus: str = ALL
    specialization: str = ALL
    target_sla: float = Field(default=240.0, gt=0.0)
    expedite_percent: float = Field(default=10.0, ge=0.0, le=100.0)
    failure_rate: float = Field(default=2.0, ge=0.0, le=100.0)
    peak_window: PeakWindow = PeakWindow.BUSINESS_HOURS

    def to_scenario(self) -> SimulationScenario:
        return SimulationScenario(
            volume=self.volume,
            region_focus=self.region_focus,
            specialization=self.specialization,
            target_sla=self.target_sla,
            expedite_percent=self.expedite_percent,
            failure_rate=self.failure_rate,
            peak_window=self.peak_window
        )


class EngineSettings(BaseSettings):
    """Main engine settings."""
    model_config = SettingsConfigDict(
        env_prefix="ROUTING_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore"
    )

    # Application
    app_name: str = "Routing Policy Simulator"
    log_level: str = "INFO"

    # Policy change gate
    weight_tolerance: float = Field(default=0.1, ge=0.0)

    # SLA alerting
    breach_alert_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    breach_warning_threshold: float = Field(default=0.25, ge=0.0, le=1.0)

    scenario_defaults: ScenarioDefaults = Field(default_factory=ScenarioDefaults)


@lru_cache()
def get_settings() -> EngineSettings:
    """Get cached settings instance."""
    return EngineSettings()


def configure_logging(settings: EngineSettings = None) -> None:
    """Configure root logging from settings. Intended for entry points only."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
