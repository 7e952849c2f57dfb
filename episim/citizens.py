"""Work status, population file records and the inputs for building citizens."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Mapping, Sequence

from episim.area import Area
from episim.config import StartingInfections
from episim.point import Point


class WorkKind(enum.Enum):
    """What kind of work, if any, a citizen does."""

    NORMAL = "Normal"
    ESSENTIAL = "Essential"
    HOSPITAL_STAFF = "HospitalStaff"
    NA = "NA"


@dataclass(frozen=True)
class WorkStatus:
    """A citizen's work kind; hospital staff also carry the hour their shift started."""

    kind: WorkKind
    work_start_at: int | None = None

    def __post_init__(self) -> None:
        if self.kind is WorkKind.HOSPITAL_STAFF:
            if self.work_start_at is None:
                raise ValueError("hospital staff need a work start hour")
            if self.work_start_at < 0:
                raise ValueError("work start hour must not be negative")
        elif self.work_start_at is not None:
            raise ValueError(f"{self.kind.value} work status takes no work start hour")


def parse_bool(value: str) -> bool:
    """Map the strings ``True`` and ``False`` to booleans; anything else is an error."""
    if value == "True":
        return True
    if value == "False":
        return False
    raise ValueError(f"invalid value {value!r}, expected True or False")


@dataclass(frozen=True)
class PopulationRecord:
    """One line of a population CSV file."""

    ind: int
    age: str
    working: bool
    pub_transport: bool

    @classmethod
    def from_row(cls, row: Mapping[str, str]) -> "PopulationRecord":
        """Build from a CSV row keyed by column name; other columns are ignored."""
        try:
            raw_ind = row["ind"]
            age = row["age"]
            working = row["working"]
            pub_transport = row["pub_transport"]
        except KeyError as missing:
            raise ValueError(f"missing field {missing.args[0]!r}") from None
        try:
            ind = int(raw_ind)
        except (TypeError, ValueError):
            raise ValueError(f"ind must be a non-negative integer, got {raw_ind!r}") from None
        if ind < 0:
            raise ValueError(f"ind must be a non-negative integer, got {raw_ind!r}")
        return cls(
            ind=ind,
            age=str(age),
            working=parse_bool(working),
            pub_transport=parse_bool(pub_transport),
        )


@dataclass(frozen=True)
class CitizensData:
    """Everything needed to generate the citizens of one region."""

    region: str
    number_of_agents: int
    home_locations: Sequence[Area]
    work_locations: Sequence[Area]
    public_transport_locations: Sequence[Point]
    public_transport_percentage: float
    working_percentage: float
    starting_infections: StartingInfections