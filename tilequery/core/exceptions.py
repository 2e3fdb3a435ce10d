"""
TileQuery Exceptions

Exception hierarchy for error handling.
"""


class TileQueryError(Exception):
    """Base exception for TileQuery"""

    pass


class InvalidQuery(TileQueryError):
    """Raster request is malformed"""

    pass


class InvalidViewport(InvalidQuery):
    """Viewport width or height is not a positive finite number"""

    pass


class InvalidBox(InvalidQuery):
    """Query box is non-finite, inverted or has zero area"""

    pass


class OutOfBounds(TileQueryError):
    """Query box lies entirely outside the pyramid's root extent"""

    pass


class PyramidConfigError(TileQueryError):
    """Tile pyramid configuration is invalid"""

    pass
