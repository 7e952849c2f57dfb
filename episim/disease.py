"""Disease parameters and their loading from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import yaml

from episim.custom_types import validate_percentage
from episim.random_wrapper import RandomWrapper

_DAY_FIELDS = (
    "regular_transmission_start_day",
    "high_transmission_start_day",
    "last_day",
    "asymptomatic_last_day",
    "mild_infected_last_day",
)
_PERCENT_FIELDS = (
    "regular_transmission_rate",
    "high_transmission_rate",
    "death_rate",
    "percentage_asymptomatic_population",
    "percentage_severe_infected_population",
)
_HOUR_FIELDS = ("exposed_duration", "pre_symptomatic_duration")


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


@dataclass(frozen=True)
class Disease:
    """Parameters describing how a disease progresses and spreads."""

    regular_transmission_start_day: int
    high_transmission_start_day: int
    last_day: int
    asymptomatic_last_day: int
    mild_infected_last_day: int
    regular_transmission_rate: float
    high_transmission_rate: float
    death_rate: float
    percentage_asymptomatic_population: float
    percentage_severe_infected_population: float
    exposed_duration: int
    pre_symptomatic_duration: int

    def __post_init__(self) -> None:
        for name in _PERCENT_FIELDS:
            validate_percentage(getattr(self, name))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Disease":
        """Build a Disease from a mapping of its field names; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise ValueError("disease definition must be a mapping")
        values: dict[str, Any] = {}
        for name in _DAY_FIELDS + _HOUR_FIELDS:
            values[name] = int(_require(data, name))
        for name in _PERCENT_FIELDS:
            values[name] = float(_require(data, name))
        return cls(**values)

    @classmethod
    def load(cls, config_file_path: str, disease_name: str) -> "Disease":
        """Read a YAML file mapping disease names to parameters and return the named one."""
        with open(config_file_path, encoding="utf-8") as handle:
            raw = yaml.safe_load(handle)
        if not isinstance(raw, Mapping):
            raise ValueError("Failed to parse disease config file")
        diseases = {name: cls.from_dict(entry) for name, entry in raw.items()}
        try:
            return diseases[disease_name]
        except KeyError:
            raise KeyError(f"Failed to find disease {disease_name!r}") from None

    def get_current_transmission_rate(self, infection_day: int) -> float:
        """Transmission rate on the given day of infection."""
        if self.regular_transmission_start_day < infection_day <= self.high_transmission_start_day:
            return self.regular_transmission_rate
        if self.high_transmission_start_day < infection_day <= self.last_day:
            return self.high_transmission_rate
        return 0.0

    def is_to_be_hospitalized(self, infection_day: int) -> bool:
        """Whether the infection has reached the high-transmission phase."""
        return self.get_current_transmission_rate(infection_day) >= self.high_transmission_rate

    def is_to_be_deceased(self, rng: RandomWrapper) -> bool:
        """Draw whether an agent dies, according to the death rate."""
        return rng.gen_bool(self.death_rate)


@dataclass(frozen=True)
class DiseaseOverride:
    """Disease parameters that replace the defaults for part of the population."""

    population_param: str
    values: list[str] = field(default_factory=list)
    disease: Disease | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DiseaseOverride":
        """Build an override from its serialised mapping."""
        if not isinstance(data, Mapping):
            raise ValueError("disease override must be a mapping")
        return cls(
            population_param=str(_require(data, "population_param")),
            values=[str(v) for v in _require(data, "values")],
            disease=Disease.from_dict(_require(data, "disease")),
        )