"""Factories for serializers and vehicles."""

import logging
from typing import Any, Dict, List, Mapping, Type

from .errors import UnsupportedFormatError
from .models import Airplane, Car, Ship, Vehicle
from .serializers import JSONSerializer, XMLSerializer
from .serializers.base import BaseSerializer

logger = logging.getLogger(__name__)


class SerializerFactory:
    """Factory for creating serializer instances."""

    _SERIALIZERS: Dict[str, Type[BaseSerializer]] = {
        "xml": XMLSerializer,
        "json": JSONSerializer,
    }

    @classmethod
    def create_serializer(cls, format_type: str) -> BaseSerializer:
        """
        Create a fresh serializer for one document.

        Args:
            format_type: Exact, case-sensitive format name ("xml" or "json")

        Returns:
            New serializer instance

        Raises:
            UnsupportedFormatError: If format_type is not supported
        """
        serializer_class = cls._SERIALIZERS.get(format_type)
        if not serializer_class:
            logger.warning(f"Unsupported format requested: {format_type!r}")
            raise UnsupportedFormatError(format_type)

        logger.debug(f"Creating {serializer_class.__name__} for format: {format_type}")
        return serializer_class()

    @classmethod
    def get_supported_formats(cls) -> List[str]:
        """Get the supported format names, sorted."""
        return sorted(cls._SERIALIZERS)


def create_serializer(format_type: str) -> BaseSerializer:
    """Shortcut for SerializerFactory.create_serializer."""
    return SerializerFactory.create_serializer(format_type)


class VehicleFactory:
    """Factory for building vehicles from plain mappings (e.g. parsed YAML)."""

    _VEHICLES: Dict[str, Type[Vehicle]] = {
        "Car": Car,
        "Airplane": Airplane,
        "Ship": Ship,
    }

    @classmethod
    def create_vehicle(cls, data: Mapping[str, Any]) -> Vehicle:
        """
        Create a vehicle from a mapping with a "type" key.

        Args:
            data: Vehicle fields plus "type" naming the variant ("Car", "Airplane", "Ship")

        Returns:
            Validated vehicle instance

        Raises:
            ValueError: If the type is missing or unknown
            pydantic.ValidationError: If the fields do not match the variant
        """
        fields = dict(data)
        type_name = fields.pop("type", None)

        vehicle_class = cls._VEHICLES.get(type_name) if isinstance(type_name, str) else None
        if not vehicle_class:
            raise ValueError(f"Unknown vehicle type: {type_name}")

        return vehicle_class(**fields)
