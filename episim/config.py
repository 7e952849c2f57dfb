"""Simulation configuration: population, geography, interventions and starting infections."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from episim.custom_types import validate_percentage
from episim.disease import Disease, DiseaseOverride


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a mapping")
    return data


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _count(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def _percentage(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    return validate_percentage(value)


def _flag(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean, got {value!r}")
    return value


def _single_variant(data: Any, what: str) -> tuple[str, Mapping[str, Any]]:
    mapping = _mapping(data, what)
    if len(mapping) != 1:
        raise ValueError(f"{what} must have exactly one variant key, got {list(mapping)!r}")
    ((tag, body),) = mapping.items()
    return tag, _mapping(body, f"{what} {tag}")


@dataclass(frozen=True)
class GeographyParameters:
    """Size of the square grid and the share of the population the hospital can hold."""

    grid_size: int
    hospital_beds_percentage: float

    def __post_init__(self) -> None:
        validate_percentage(self.hospital_beds_percentage)


def _parse_geography(data: Any) -> GeographyParameters:
    mapping = _mapping(data, "geography_parameters")
    return GeographyParameters(
        grid_size=_count(_require(mapping, "grid_size"), "grid_size"),
        hospital_beds_percentage=_percentage(
            _require(mapping, "hospital_beds_percentage"), "hospital_beds_percentage"
        ),
    )


@dataclass(frozen=True)
class VaccinateConfig:
    """Vaccinate a share of susceptible citizens at a given hour."""

    at_hour: int
    percent: float

    def __post_init__(self) -> None:
        validate_percentage(self.percent)


@dataclass(frozen=True)
class LockdownConfig:
    """Lock the city down once infections reach a threshold."""

    at_number_of_infections: int
    essential_workers_population: float

    def __post_init__(self) -> None:
        validate_percentage(self.essential_workers_population)


@dataclass(frozen=True)
class BuildNewHospitalConfig:
    """Enlarge the hospital when the spread rate passes a threshold."""

    spread_rate_threshold: int


InterventionConfig = Union[VaccinateConfig, LockdownConfig, BuildNewHospitalConfig]


def parse_intervention(data: Any) -> InterventionConfig:
    """Parse an intervention written as ``{"<Kind>": {...}}``."""
    tag, body = _single_variant(data, "intervention")
    if tag == "Vaccinate":
        return VaccinateConfig(
            at_hour=_count(_require(body, "at_hour"), "at_hour"),
            percent=_percentage(_require(body, "percent"), "percent"),
        )
    if tag == "Lockdown":
        return LockdownConfig(
            at_number_of_infections=_count(
                _require(body, "at_number_of_infections"), "at_number_of_infections"
            ),
            essential_workers_population=_percentage(
                _require(body, "essential_workers_population"), "essential_workers_population"
            ),
        )
    if tag == "BuildNewHospital":
        return BuildNewHospitalConfig(
            spread_rate_threshold=_count(
                _require(body, "spread_rate_threshold"), "spread_rate_threshold"
            )
        )
    raise ValueError(f"unknown intervention {tag!r}")


@dataclass(frozen=True)
class CsvPopulation:
    """Population read from a CSV file with the given columns."""

    file: str
    cols: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class AutoPopulation:
    """Population generated from a size and a few proportions."""

    number_of_agents: int
    public_transport_percentage: float
    working_percentage: float

    def __post_init__(self) -> None:
        validate_percentage(self.public_transport_percentage)
        validate_percentage(self.working_percentage)


Population = Union[CsvPopulation, AutoPopulation]


def parse_population(data: Any) -> Population:
    """Parse a population written as ``{"Csv": {...}}`` or ``{"Auto": {...}}``."""
    tag, body = _single_variant(data, "population")
    if tag == "Csv":
        file = _require(body, "file")
        cols = _require(body, "cols")
        if not isinstance(file, str):
            raise ValueError("file must be a string")
        if not isinstance(cols, list) or not all(isinstance(c, str) for c in cols):
            raise ValueError("cols must be a list of strings")
        return CsvPopulation(file=file, cols=list(cols))
    if tag == "Auto":
        return AutoPopulation(
            number_of_agents=_count(_require(body, "number_of_agents"), "number_of_agents"),
            public_transport_percentage=_percentage(
                _require(body, "public_transport_percentage"), "public_transport_percentage"
            ),
            working_percentage=_percentage(
                _require(body, "working_percentage"), "working_percentage"
            ),
        )
    raise ValueError(f"unknown population kind {tag!r}")


@dataclass(frozen=True)
class StartingInfections:
    """How many citizens start in each infected or exposed state."""

    infected_mild_asymptomatic: int = 0
    infected_mild_symptomatic: int = 0
    infected_severe: int = 0
    exposed: int = 1

    def total(self) -> int:
        """All citizens that start infected or exposed."""
        return self.total_infected() + self.exposed

    def total_infected(self) -> int:
        """Citizens that start infected, whatever the severity."""
        return self.infected_mild_asymptomatic + self.infected_mild_symptomatic + self.infected_severe

    @classmethod
    def from_dict(cls, data: Any) -> "StartingInfections":
        """Build from a mapping holding all four counts."""
        mapping = _mapping(data, "starting_infections")
        return cls(
            **{
                name: _count(_require(mapping, name), name)
                for name in (
                    "infected_mild_asymptomatic",
                    "infected_mild_symptomatic",
                    "infected_severe",
                    "exposed",
                )
            }
        )


@dataclass
class Config:
    """A complete description of one simulation run."""

    population: Population
    disease: Disease | None
    geography_parameters: GeographyParameters
    disease_overrides: list[DiseaseOverride]
    hours: int
    interventions: list[InterventionConfig]
    output_file: str | None = None
    enable_citizen_state_messages: bool = True
    starting_infections: StartingInfections = field(default_factory=StartingInfections)

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Build a configuration from its JSON mapping; unknown keys are ignored."""
        mapping = _mapping(data, "config")
        raw_disease = mapping.get("disease")
        disease = None if raw_disease is None else Disease.from_dict(raw_disease)

        raw_overrides = mapping.get("disease_overrides", [])
        if not isinstance(raw_overrides, list):
            raise ValueError("disease_overrides must be a list")
        raw_interventions = _require(mapping, "interventions")
        if not isinstance(raw_interventions, list):
            raise ValueError("interventions must be a list")

        output_file = mapping.get("output_file")
        if output_file is not None and not isinstance(output_file, str):
            raise ValueError("output_file must be a string")

        raw_start = mapping.get("starting_infections")
        starting = StartingInfections() if raw_start is None else StartingInfections.from_dict(raw_start)

        return cls(
            population=parse_population(_require(mapping, "population")),
            disease=disease,
            geography_parameters=_parse_geography(_require(mapping, "geography_parameters")),
            disease_overrides=[DiseaseOverride.from_dict(item) for item in raw_overrides],
            hours=_count(_require(mapping, "hours"), "hours"),
            interventions=[parse_intervention(item) for item in raw_interventions],
            output_file=output_file,
            enable_citizen_state_messages=_flag(
                mapping.get("enable_citizen_state_messages", False), "enable_citizen_state_messages"
            ),
            starting_infections=starting,
        )

    @classmethod
    def read(cls, filename: str) -> "Config":
        """Load a configuration from a JSON file."""
        with open(filename, encoding="utf-8") as handle:
            return cls.from_dict(json.load(handle))

    def require_disease(self) -> Disease:
        """The configured disease; raises ValueError when none is set."""
        if self.disease is None:
            raise ValueError("configuration has no disease")
        return self.disease