"""
Tests for exceptions
"""

import pytest

from tilequery.core.exceptions import (
    InvalidBox,
    InvalidQuery,
    InvalidViewport,
    OutOfBounds,
    PyramidConfigError,
    TileQueryError,
)


class TestExceptions:
    """Test exception hierarchy"""

    def test_base_exception(self):
        """Test TileQueryError"""
        with pytest.raises(TileQueryError):
            raise TileQueryError("Test error")

    def test_invalid_query(self):
        """Test InvalidQuery inherits from TileQueryError"""
        with pytest.raises(TileQueryError):
            raise InvalidQuery("Bad request")

    def test_invalid_viewport(self):
        """Test InvalidViewport is an InvalidQuery"""
        with pytest.raises(InvalidQuery):
            raise InvalidViewport("w must be positive")

        with pytest.raises(TileQueryError):
            raise InvalidViewport("w must be positive")

    def test_invalid_box(self):
        """Test InvalidBox is an InvalidQuery"""
        with pytest.raises(InvalidQuery):
            raise InvalidBox("inverted box")

    def test_out_of_bounds(self):
        """Test OutOfBounds is not an InvalidQuery"""
        assert issubclass(OutOfBounds, TileQueryError)
        assert not issubclass(OutOfBounds, InvalidQuery)

    def test_pyramid_config_error(self):
        """Test PyramidConfigError inherits from TileQueryError"""
        with pytest.raises(TileQueryError):
            raise PyramidConfigError("bad pyramid")

    def test_exception_messages(self):
        """Test exception messages are preserved"""
        msg = "Custom error message"

        try:
            raise InvalidBox(msg)
        except InvalidBox as e:
            assert str(e) == msg
