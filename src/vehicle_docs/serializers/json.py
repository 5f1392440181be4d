"""JSON-style serializer."""

from .base import BaseSerializer, Scalar


class JSONSerializer(BaseSerializer):
    """
    Writes the document as a single top-level JSON object.

    Strings are quoted without escaping, numbers are written bare.
    """

    def __init__(self):
        super().__init__()
        self._needs_comma = False

    def _start_entry(self) -> None:
        if self._needs_comma:
            self._content.append(",")
        self._content.append("\n")
        self._needs_comma = True

    def _write_field(self, name: str, value: Scalar) -> None:
        text = f'"{value}"' if isinstance(value, str) else self._format_number(value)
        self._start_entry()
        self._content.append(f'{self._indent()}"{name}": {text}')

    def _write_block_start(self, name: str) -> None:
        self._start_entry()
        self._content.append(f'{self._indent()}"{name}": {{')
        # first entry of the new block takes no leading comma
        self._needs_comma = False

    def _write_block_end(self, name: str) -> None:
        self._content.append(f"\n{self._indent()}}}")
        self._needs_comma = True

    def _finalize(self, content: str) -> str:
        return "{\n" + content + "\n}"
