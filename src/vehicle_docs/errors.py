"""Exceptions raised by vehicle_docs."""


class UnsupportedFormatError(ValueError):
    """Raised when a serializer is requested for an unknown format name."""

    def __init__(self, format_name: str):
        self.format_name = format_name
        super().__init__(f"Unsupported format: {format_name}")
