"""Tests for vehicle rendering."""

import json

import pytest
from pydantic import ValidationError

from vehicle_docs import (
    Airplane,
    Car,
    JSONSerializer,
    Ship,
    XMLSerializer,
    render_vehicle,
    sample_vehicles,
    serialize,
)

BMW_XML = (
    "<vehicle>\n"
    "  <type>Car</type>\n"
    "  <name>BMW G30</name>\n"
    "  <manufacturer>BMW</manufacturer>\n"
    "  <weight>1600.000000</weight>\n"
    "  <power>252.000000</power>\n"
    "  <year>2020</year>\n"
    "  <car_specific>\n"
    "    <doors>4</doors>\n"
    "    <passenger_seats>5</passenger_seats>\n"
    "    <fuel_type>petrol</fuel_type>\n"
    "    <engine_volume>2.000000</engine_volume>\n"
    "  </car_specific>\n"
    "</vehicle>\n"
)

BMW_JSON = (
    "{\n"
    "\n"
    '"vehicle": {\n'
    '  "type": "Car",\n'
    '  "name": "BMW G30",\n'
    '  "manufacturer": "BMW",\n'
    '  "weight": 1600.000000,\n'
    '  "power": 252.000000,\n'
    '  "year": 2020,\n'
    '  "car_specific": {\n'
    '    "doors": 4,\n'
    '    "passenger_seats": 5,\n'
    '    "fuel_type": "petrol",\n'
    '    "engine_volume": 2.000000\n'
    "  }\n"
    "}\n"
    "}"
)


@pytest.fixture
def bmw():
    return Car(
        name="BMW G30",
        manufacturer="BMW",
        weight=1600,
        power=252,
        year=2020,
        doors=4,
        passenger_seats=5,
        fuel_type="petrol",
        engine_volume=2.0,
    )


def test_car_as_xml(bmw):
    serializer = XMLSerializer()
    render_vehicle(bmw, serializer)
    assert serializer.build() == BMW_XML


def test_car_as_json(bmw):
    serializer = JSONSerializer()
    render_vehicle(bmw, serializer)
    output = serializer.build()

    assert output == BMW_JSON
    assert ",\n  }" not in output
    assert json.loads(output)["vehicle"]["car_specific"] == {
        "doors": 4,
        "passenger_seats": 5,
        "fuel_type": "petrol",
        "engine_volume": 2.0,
    }


def test_airplane_as_json_is_valid_json():
    airplane = sample_vehicles()[1]
    data = json.loads(serialize(airplane, "json"))

    assert data == {
        "vehicle": {
            "type": "Airplane",
            "name": "Boeing 747-400",
            "manufacturer": "Boeing",
            "weight": 180000.0,
            "power": 240000.0,
            "year": 1988,
            "airplane_specific": {
                "wingspan": 64,
                "max_altitude": 13700,
                "passenger_capacity": 416,
                "max_speed": 988.0,
            },
        }
    }


def test_ship_as_xml():
    ship = sample_vehicles()[2]
    lines = serialize(ship, "xml").splitlines()

    assert lines[0] == "<vehicle>"
    assert lines[1] == "  <type>Ship</type>"
    assert lines[7:13] == [
        "  <ship_specific>",
        "    <length>294.000000</length>",
        "    <displacement>90000.000000</displacement>",
        "    <crew_capacity>1000</crew_capacity>",
        "    <propulsion_type>diesel-electric</propulsion_type>",
        "  </ship_specific>",
    ]
    assert lines[-1] == "</vehicle>"


@pytest.mark.parametrize("format_type", ["xml", "json"])
def test_rendering_is_deterministic(format_type):
    for vehicle in sample_vehicles():
        assert serialize(vehicle, format_type) == serialize(vehicle, format_type)


def test_common_fields_come_first_in_fixed_order():
    for vehicle in sample_vehicles():
        lines = serialize(vehicle, "xml").splitlines()
        tags = [line.strip().split(">")[0].lstrip("<") for line in lines[1:7]]
        assert tags == ["type", "name", "manufacturer", "weight", "power", "year"]


def test_vehicles_are_immutable(bmw):
    with pytest.raises(ValidationError):
        bmw.doors = 2


def test_unknown_fields_are_rejected():
    with pytest.raises(ValidationError):
        Ship(
            name="Boat",
            manufacturer="Yard",
            weight=1,
            power=1,
            year=2000,
            length=10,
            displacement=5,
            crew_capacity=2,
            propulsion_type="sail",
            masts=3,
        )


def test_missing_fields_are_rejected():
    with pytest.raises(ValidationError):
        Airplane(name="Glider", manufacturer="Schleicher", weight=300, power=0, year=2001)
