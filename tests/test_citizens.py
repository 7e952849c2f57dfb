import pytest

from episim.area import Area
from episim.citizens import (
    CitizensData,
    PopulationRecord,
    WorkKind,
    WorkStatus,
    parse_bool,
)
from episim.config import StartingInfections
from episim.point import Point


def test_parse_bool_accepts_capitalised_words():
    assert parse_bool("True") is True
    assert parse_bool("False") is False


@pytest.mark.parametrize("value", ["true", "false", "1", "", "TRUE"])
def test_parse_bool_rejects_other_values(value):
    with pytest.raises(ValueError):
        parse_bool(value)


def test_population_record_from_row():
    record = PopulationRecord.from_row(
        {"ind": "7", "age": "60-64", "sex": "F", "working": "True", "pub_transport": "False"}
    )
    assert record == PopulationRecord(ind=7, age="60-64", working=True, pub_transport=False)


def test_population_record_rejects_bad_boolean():
    with pytest.raises(ValueError):
        PopulationRecord.from_row({"ind": "1", "age": "20-24", "working": "yes", "pub_transport": "False"})


def test_population_record_rejects_missing_column():
    with pytest.raises(ValueError):
        PopulationRecord.from_row({"ind": "1", "age": "20-24", "working": "True"})


def test_population_record_rejects_negative_index():
    with pytest.raises(ValueError):
        PopulationRecord.from_row({"ind": "-1", "age": "20-24", "working": "True", "pub_transport": "True"})


def test_hospital_staff_keeps_start_hour():
    status = WorkStatus(WorkKind.HOSPITAL_STAFF, work_start_at=9)
    assert status.work_start_at == 9
    assert status == WorkStatus(WorkKind.HOSPITAL_STAFF, 9)
    assert status != WorkStatus(WorkKind.HOSPITAL_STAFF, 10)


def test_hospital_staff_requires_start_hour():
    with pytest.raises(ValueError):
        WorkStatus(WorkKind.HOSPITAL_STAFF)


def test_other_statuses_take_no_start_hour():
    with pytest.raises(ValueError):
        WorkStatus(WorkKind.NORMAL, work_start_at=3)
    assert WorkStatus(WorkKind.NA).work_start_at is None


def test_citizens_data_holds_inputs():
    homes = [Area("engine1", Point(0, 0), Point(2, 2))]
    offices = [Area("engine1", Point(5, 0), Point(6, 2))]
    transport = [Point(5, 0), Point(5, 1)]
    infections = StartingInfections(0, 0, 0, 1)
    data = CitizensData("engine1", 4, homes, offices, transport, 0.5, 0.5, infections)
    assert data.region == "engine1"
    assert data.number_of_agents == 4
    assert data.home_locations == homes
    assert data.work_locations == offices
    assert data.public_transport_locations == transport
    assert data.starting_infections.total() == 1