"""Reference vehicles used when no fleet file is given."""

from typing import List

from .models import Airplane, Car, Ship, Vehicle


def sample_vehicles() -> List[Vehicle]:
    return [
        Car(
            name="BMW G30",
            manufacturer="BMW",
            weight=1600,
            power=252,
            year=2020,
            doors=4,
            passenger_seats=5,
            fuel_type="petrol",
            engine_volume=2.0,
        ),
        Airplane(
            name="Boeing 747-400",
            manufacturer="Boeing",
            weight=180000,
            power=240000,
            year=1988,
            wingspan=64,
            max_altitude=13700,
            passenger_capacity=416,
            max_speed=988,
        ),
        Ship(
            name="MS Queen Victoria",
            manufacturer="Fincantieri",
            weight=90000000,
            power=120000,
            year=2007,
            length=294,
            displacement=90000,
            crew_capacity=1000,
            propulsion_type="diesel-electric",
        ),
    ]
