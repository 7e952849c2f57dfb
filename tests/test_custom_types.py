import pytest

from episim.custom_types import validate_percentage


@pytest.mark.parametrize("value", [0.0, 0.25, 0.5, 1.0])
def test_accepts_values_in_range(value):
    assert validate_percentage(value) == value


def test_accepts_integer_bounds_as_floats():
    assert validate_percentage(1) == 1.0
    assert validate_percentage(0) == 0.0


@pytest.mark.parametrize("value", [-0.1, 1.5, -3, 2])
def test_rejects_values_out_of_range(value):
    with pytest.raises(ValueError, match="between 0 to 1"):
        validate_percentage(value)