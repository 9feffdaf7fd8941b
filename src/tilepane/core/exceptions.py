"""Errors raised by the pane rendering core."""


class InvalidDimensions(ValueError):
    """Raised when a map is constructed with a non-positive width or height."""

    def __init__(self, width: int, height: int):
        super().__init__(f"Map dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
