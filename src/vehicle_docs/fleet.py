"""Loading vehicle fleets from YAML files."""

import logging
from pathlib import Path
from typing import List, Union

import yaml

from .models import Vehicle
from .services import VehicleFactory

logger = logging.getLogger(__name__)


def load_fleet(path: Union[str, Path]) -> List[Vehicle]:
    """
    Load vehicles from a YAML fleet file.

    The file holds a top-level "vehicles" list; each entry is a mapping with a
    "type" key ("Car", "Airplane" or "Ship") and that variant's fields.

    Args:
        path: Path to the YAML file

    Returns:
        Vehicles in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the document has no "vehicles" list or an entry is invalid
    """
    path = Path(path)

    with open(path, encoding="utf-8") as f:
        document = yaml.safe_load(f)

    entries = document.get("vehicles") if isinstance(document, dict) else None
    if not isinstance(entries, list):
        raise ValueError(f"Fleet file {path} must contain a 'vehicles' list")

    vehicles = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Fleet entry {index} in {path} is not a mapping")
        vehicles.append(VehicleFactory.create_vehicle(entry))

    logger.info(f"Loaded {len(vehicles)} vehicles from {path}")
    return vehicles


def save_fleet(vehicles: List[Vehicle], path: Union[str, Path]) -> None:
    """Write vehicles to a YAML fleet file readable by load_fleet."""
    entries = [
        {"type": vehicle.__class__.__name__, **vehicle.model_dump()} for vehicle in vehicles
    ]
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump({"vehicles": entries}, f, sort_keys=False)
