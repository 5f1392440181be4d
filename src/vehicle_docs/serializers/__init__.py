"""Document serializers."""

from .xml import XMLSerializer
from .json import JSONSerializer
from .base import BaseSerializer

__all__ = [
    "XMLSerializer",
    "JSONSerializer",
    "BaseSerializer",
]
