"""Vehicle records that describe themselves to a serializer."""

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from .serializers.base import BaseSerializer


class Vehicle(BaseModel, ABC):
    """Common vehicle attributes. Subclasses add their own specific block."""

    name: str = Field(description="Display name")
    manufacturer: str = Field(description="Manufacturer name")
    weight: float = Field(description="Weight")
    power: float = Field(description="Power rating")
    year: int = Field(description="Production year")

    model_config = {"frozen": True, "extra": "forbid"}

    @abstractmethod
    def serialize(self, serializer: BaseSerializer) -> None:
        """
        Describe this vehicle to a serializer.

        Args:
            serializer: Serializer that receives the fields and blocks
        """
        pass

    def _serialize_common(self, serializer: BaseSerializer, type_name: str) -> None:
        serializer.add_field("type", type_name)
        serializer.add_field("name", self.name)
        serializer.add_field("manufacturer", self.manufacturer)
        serializer.add_field("weight", self.weight)
        serializer.add_field("power", self.power)
        serializer.add_field("year", self.year)


class Car(Vehicle):
    doors: int
    passenger_seats: int
    fuel_type: str
    engine_volume: float

    def serialize(self, serializer: BaseSerializer) -> None:
        serializer.add_block("vehicle")
        self._serialize_common(serializer, "Car")

        serializer.add_block("car_specific")
        serializer.add_field("doors", self.doors)
        serializer.add_field("passenger_seats", self.passenger_seats)
        serializer.add_field("fuel_type", self.fuel_type)
        serializer.add_field("engine_volume", self.engine_volume)
        serializer.end_block()

        serializer.end_block()


class Airplane(Vehicle):
    wingspan: int
    max_altitude: int
    passenger_capacity: int
    max_speed: float

    def serialize(self, serializer: BaseSerializer) -> None:
        serializer.add_block("vehicle")
        self._serialize_common(serializer, "Airplane")

        serializer.add_block("airplane_specific")
        serializer.add_field("wingspan", self.wingspan)
        serializer.add_field("max_altitude", self.max_altitude)
        serializer.add_field("passenger_capacity", self.passenger_capacity)
        serializer.add_field("max_speed", self.max_speed)
        serializer.end_block()

        serializer.end_block()


class Ship(Vehicle):
    length: float
    displacement: float
    crew_capacity: int
    propulsion_type: str

    def serialize(self, serializer: BaseSerializer) -> None:
        serializer.add_block("vehicle")
        self._serialize_common(serializer, "Ship")

        serializer.add_block("ship_specific")
        serializer.add_field("length", self.length)
        serializer.add_field("displacement", self.displacement)
        serializer.add_field("crew_capacity", self.crew_capacity)
        serializer.add_field("propulsion_type", self.propulsion_type)
        serializer.end_block()

        serializer.end_block()
