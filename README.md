# episim

Building blocks for an agent-based epidemic simulation on a square grid.
Citizens live in houses, work in offices, ride public transport and are
taken to hospital; a disease model describes how infections spread.

## Modules

- `episim.disease` – `Disease` parameters (transmission windows and rates,
  death rate, asymptomatic and severe shares, exposure durations) and
  `DiseaseOverride`. `Disease.load` reads a YAML file that maps disease
  names to parameters and returns the named one; `Disease.from_dict` builds
  one from a mapping. Percentages outside [0, 1] raise `ValueError`.
- `episim.config` – the simulation `Config`, read from JSON with
  `Config.read` or built with `Config.from_dict`. It holds the population
  (`CsvPopulation` or `AutoPopulation`, parsed by `parse_population` from
  `{"Csv": {...}}` or `{"Auto": {...}}`), `GeographyParameters`,
  `StartingInfections` (one exposed citizen by default) and a list of
  interventions (`VaccinateConfig`, `LockdownConfig`,
  `BuildNewHospitalConfig`, parsed by `parse_intervention`).
  `Config.require_disease` returns the disease or raises `ValueError`.
- `episim.point` – `Point`, a grid cell; points add up and
  `Point.neighbors()` yields the eight surrounding cells row by row.
- `episim.area` – `Area`, an inclusive rectangle with a location id of at
  most 16 bytes (checked by `location_id`). Areas compare and hash by their
  corners only. They iterate their points in row order, test `contains`,
  give `neighbors_of` a point, `random_point`, `random_points` and
  `number_of_cells`. `area_factory` tiles a rectangle with equal squares,
  dropping partial tiles.
- `episim.geography` – `define_geography(grid_size, engine_id, home_size,
  office_size)` splits the grid from left to right into housing, transport,
  work and hospital areas and tiles houses and offices. `Grid` tracks house
  and office occupancy, places agents at start points in their homes,
  finds houses and offices with free space, resizes or enlarges the
  hospital, and `to_dict` gives its serialisable part.
- `episim.citizens` – `WorkKind` and `WorkStatus` (hospital staff carry the
  hour their shift started), `PopulationRecord` rows from a population CSV
  (`parse_bool` accepts only `True` and `False`), and `CitizensData`.
- `episim.location_map` – `CitizenLocationMap`, which records which
  citizen stands on which cell, tells whether cells are vacant or inside the
  grid, moves agents, finds a free hospital bed or sends the citizen home,
  selects free starting cells in an area, and locks or unlocks the city by
  setting citizens' `isolated` flag.
- `episim.geojson_service` – `GeoJsonService` loads and checks a GeoJSON
  document and writes it back as compact JSON.
- `episim.random_wrapper` – `RandomWrapper`, the random source passed
  wherever a function takes `rng`; give it a seed for repeatable runs.
- `episim.custom_types` – numeric aliases and `validate_percentage`.

## Examples

Load a disease and ask for its transmission rate on a given day of infection:

```python
from episim.disease import Disease

small_pox = Disease.load("config/diseases.yaml", "small_pox")
small_pox.get_current_transmission_rate(12)
small_pox.is_to_be_hospitalized(22)
```

Read a simulation configuration:

```python
from episim.config import Config

config = Config.read("config/default.json")
disease = config.require_disease()
config.starting_infections.total()
```

Lay out a grid and look at its areas:

```python
from episim.geography import define_geography
from episim.point import Point

grid = define_geography(100, "engine1", home_size=2, office_size=3)
grid.housing_area.contains(Point(0, 0))   # True
grid.resize_hospital(1000, 0.02, 0.01, "engine1")
grid.hospital_area.end_offset             # Point(x=89, y=3)
```

Points add up and know their eight neighbours:

```python
from episim.point import Point

Point(1, 1) + Point(1, 1)        # Point(x=2, y=2)
list(Point(1, 1).neighbors())    # the surrounding cells, row by row
```

Random choices are repeatable with a seeded `RandomWrapper`:

```python
from episim.area import Area
from episim.point import Point
from episim.random_wrapper import RandomWrapper

area = Area("engine1", Point(0, 0), Point(5, 5))
area.random_points(9, RandomWrapper(seed=42))
```

## What the package does not do

It provides the pieces of a simulation, not a running one. There is no
hour-by-hour simulation loop, no citizen routine or disease state machine,
no interventions being applied over time, no travel or commuting between
regions, no output of counts to files or messages, and no command-line tool.