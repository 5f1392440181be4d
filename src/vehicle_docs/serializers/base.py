"""Base serializer interface."""

from abc import ABC, abstractmethod
from typing import List, Tuple, Union

Scalar = Union[str, int, float]

INDENT_WIDTH = 2
FLOAT_FORMAT = "{:.6f}"


class BaseSerializer(ABC):
    """
    Abstract base class for document serializers.

    Holds the open-block stack and the output buffer. Subclasses only decide
    how fields and block boundaries are written; the stack discipline lives
    here so every format closes blocks the same way.
    """

    def __init__(self):
        self._blocks: List[str] = []
        self._content: List[str] = []

    @property
    def depth(self) -> int:
        """Current nesting level, equal to the number of open blocks."""
        return len(self._blocks)

    @property
    def open_blocks(self) -> Tuple[str, ...]:
        """Names of the open blocks, innermost last."""
        return tuple(self._blocks)

    def add_field(self, name: str, value: Scalar) -> None:
        """
        Append a scalar field at the current nesting level.

        Args:
            name: Field name. Duplicates are allowed and all of them are written.
            value: String, integer or float value

        Raises:
            TypeError: If value is not a str, int or float
        """
        self._write_field(name, value)

    def add_block(self, name: str) -> None:
        """Open a named block; following fields are nested inside it."""
        self._write_block_start(name)
        self._blocks.append(name)

    def end_block(self) -> None:
        """Close the innermost open block. Does nothing if no block is open."""
        if not self._blocks:
            return
        name = self._blocks.pop()
        self._write_block_end(name)

    def build(self) -> str:
        """
        Close any open blocks and return the finished document.

        A serializer is single-use; create a new one for every document.
        """
        while self._blocks:
            self.end_block()
        return self._finalize("".join(self._content))

    def get_format_name(self) -> str:
        """Get the name of the format this serializer handles."""
        return self.__class__.__name__.replace("Serializer", "").lower()

    def _indent(self) -> str:
        return " " * (self.depth * INDENT_WIDTH)

    def _format_number(self, value: Scalar) -> str:
        # bool is an int subclass but not a supported field type
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(
                f"Unsupported field value type: {type(value).__name__}"
            )
        if isinstance(value, float):
            return FLOAT_FORMAT.format(value)
        return str(value)

    @abstractmethod
    def _write_field(self, name: str, value: Scalar) -> None:
        """Write one field at the current depth."""
        pass

    @abstractmethod
    def _write_block_start(self, name: str) -> None:
        """Write the opening of a block; called before the block is pushed."""
        pass

    @abstractmethod
    def _write_block_end(self, name: str) -> None:
        """Write the closing of a block; called after the block is popped."""
        pass

    def _finalize(self, content: str) -> str:
        return content
