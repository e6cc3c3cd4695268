from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    MINOR = "minor"
    MODERATE = "moderate"
    SEVERE = "severe"
    CRITICAL = "critical"

    @classmethod
    def normalize(cls, value: "Severity | str | None") -> "Severity":
        raw = str(getattr(value, "value", value) or "").strip().lower()
        for item in cls:
            if item.value == raw:
                return item
        raise ValueError(f"Unsupported severity: {value}")


@dataclass(frozen=True)
class HealthEventDefinition:
    id: str
    title: str
    description: str
    severity: Severity
    base_cost: float
    health_impact: int
    recovery_time_days: int | None = None
    stress_impact: int | None = None
    wealth_multiplier: float | None = None
    requires_hospitalization: bool = False
    chronic_effect: bool = False
    preventable: bool = False
    special_effects: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "severity", Severity.normalize(self.severity))
        if not float(self.base_cost) > 0:
            raise ValueError(f"Health event {self.id} must have a positive base cost")
        if not isinstance(self.special_effects, tuple):
            object.__setattr__(self, "special_effects", tuple(self.special_effects or ()))

    @property
    def is_critical(self) -> bool:
        return self.severity is Severity.CRITICAL
