"""Numeric aliases shared across the simulation and percentage validation."""

Hour = int
Count = int
Day = int
Size = int
CoOrdinate = int
Percentage = float


def validate_percentage(value: float) -> float:
    """Return ``value`` if it lies in the closed interval [0, 1], else raise ValueError."""
    number = float(value)
    if not 0.0 <= number <= 1.0:
        raise ValueError(f"percentage value needs to be between 0 to 1, got {value!r}")
    return number