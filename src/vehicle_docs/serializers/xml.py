"""XML-style serializer."""

from .base import BaseSerializer, Scalar


class XMLSerializer(BaseSerializer):
    """
    Writes each field as an element on its own line.

    Output has no XML declaration and no root element beyond the blocks the
    caller opens. Values are written as-is, without escaping.
    """

    def _write_field(self, name: str, value: Scalar) -> None:
        text = value if isinstance(value, str) else self._format_number(value)
        self._content.append(f"{self._indent()}<{name}>{text}</{name}>\n")

    def _write_block_start(self, name: str) -> None:
        self._content.append(f"{self._indent()}<{name}>\n")

    def _write_block_end(self, name: str) -> None:
        self._content.append(f"{self._indent()}</{name}>\n")
