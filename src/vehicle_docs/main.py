"""Main API for rendering vehicles into documents."""

import logging
from typing import Iterable, List

from .models import Vehicle
from .serializers import BaseSerializer
from .services import SerializerFactory

logger = logging.getLogger(__name__)


def render_vehicle(vehicle: Vehicle, serializer: BaseSerializer) -> None:
    """
    Describe a vehicle to a serializer.

    Args:
        vehicle: Vehicle to render
        serializer: Serializer instance (e.g., XMLSerializer())
    """
    vehicle.serialize(serializer)


def serialize(vehicle: Vehicle, format_type: str) -> str:
    """
    Render one vehicle into a finished document.

    Args:
        vehicle: Vehicle to render
        format_type: Format name ("xml" or "json")

    Returns:
        Document string

    Raises:
        UnsupportedFormatError: If format_type is not supported
    """
    serializer = SerializerFactory.create_serializer(format_type)
    render_vehicle(vehicle, serializer)
    return serializer.build()


def serialize_all(vehicles: Iterable[Vehicle], format_type: str) -> List[str]:
    """Render each vehicle into its own document, using a new serializer per vehicle."""
    documents = [serialize(vehicle, format_type) for vehicle in vehicles]
    logger.debug(f"Serialized {len(documents)} vehicles as {format_type}")
    return documents
