"""vehicle-docs - Render vehicles as XML or JSON documents through pluggable serializers."""

__version__ = "0.1.0"

from .main import (
    render_vehicle,
    serialize,
    serialize_all,
)
from .errors import UnsupportedFormatError
from .models import Vehicle, Car, Airplane, Ship
from .serializers import BaseSerializer, XMLSerializer, JSONSerializer
from .services import SerializerFactory, VehicleFactory, create_serializer
from .config import DriverConfig
from .fleet import load_fleet, save_fleet
from .samples import sample_vehicles

__all__ = [
    "render_vehicle",
    "serialize",
    "serialize_all",
    "create_serializer",
    "UnsupportedFormatError",
    # Vehicles
    "Vehicle",
    "Car",
    "Airplane",
    "Ship",
    "sample_vehicles",
    # Serializers
    "BaseSerializer",
    "XMLSerializer",
    "JSONSerializer",
    # Factories
    "SerializerFactory",
    "VehicleFactory",
    # Configuration and fleets
    "DriverConfig",
    "load_fleet",
    "save_fleet",
]
