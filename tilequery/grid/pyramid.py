"""
Tile Pyramid

Multi-resolution set of pre-rendered tiles covering a fixed root extent.
Depth 0 is a single tile over the whole extent; each extra depth level halves
tile width and height, giving a 2^depth x 2^depth grid.
"""

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Tuple

from tilequery.core.exceptions import PyramidConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TilePyramid:
    """
    Immutable description of a tile pyramid.

    Attributes:
        ullon: Upper-left longitude of the root extent
        ullat: Upper-left latitude of the root extent
        lrlon: Lower-right longitude of the root extent
        lrlat: Lower-right latitude of the root extent
        max_depth: Deepest available zoom level
        tile_size: Pixels along one side of a tile image
        name: Human-readable identifier
        extension: Image file extension used in tile ids

    Tile ids follow "d{depth}_x{x}_y{y}.{extension}" where x grows eastward
    and y grows southward from the upper-left corner of the root extent.

    Examples:
        >>> pyramid = BUILTIN_PYRAMIDS["berkeley"]
        >>> pyramid.tile_id(2, 1, 3)
        'd2_x1_y3.png'
        >>> pyramid.tiles_per_side(3)
        8
    """

    ullon: float
    ullat: float
    lrlon: float
    lrlat: float
    max_depth: int = 7
    tile_size: int = 256
    name: str = ""
    extension: str = "png"

    def __post_init__(self):
        coords = (self.ullon, self.ullat, self.lrlon, self.lrlat)
        if not all(math.isfinite(c) for c in coords):
            raise PyramidConfigError(f"Root extent must be finite, got {coords}")
        if not self.ullon < self.lrlon:
            raise PyramidConfigError(
                f"Root ullon ({self.ullon}) must be west of lrlon ({self.lrlon})"
            )
        if not self.ullat > self.lrlat:
            raise PyramidConfigError(
                f"Root ullat ({self.ullat}) must be north of lrlat ({self.lrlat})"
            )
        if not math.isfinite(self.width) or not math.isfinite(self.height):
            raise PyramidConfigError(f"Root extent span overflows: {coords}")
        for field_name in ("max_depth", "tile_size"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise PyramidConfigError(f"{field_name} must be an integer, got {value!r}")
        if self.max_depth < 0:
            raise PyramidConfigError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.tile_size <= 0:
            raise PyramidConfigError(f"tile_size must be positive, got {self.tile_size}")

    @property
    def width(self) -> float:
        """Longitudinal span of the root extent"""
        return self.lrlon - self.ullon

    @property
    def height(self) -> float:
        """Latitudinal span of the root extent"""
        return self.ullat - self.lrlat

    def tiles_per_side(self, depth: int) -> int:
        return 1 << depth

    def tile_width(self, depth: int) -> float:
        return self.width / self.tiles_per_side(depth)

    def tile_height(self, depth: int) -> float:
        return self.height / self.tiles_per_side(depth)

    def lon_dpp(self, depth: int = 0) -> float:
        """
        Longitudinal distance per pixel of a tile at the given depth

        Args:
            depth: Zoom level (0 = coarsest)

        Returns:
            Degrees of longitude covered by one tile pixel
        """
        return self.tile_width(depth) / self.tile_size

    def tile_id(self, depth: int, x: int, y: int) -> str:
        """Format the file name of a tile"""
        return f"d{depth}_x{x}_y{y}.{self.extension}"

    def parse_tile_id(self, tile_id: str) -> Tuple[int, int, int]:
        """
        Parse a tile id back into grid coordinates

        Args:
            tile_id: Tile identifier (e.g., "d7_x86_y31.png")

        Returns:
            (depth, x, y)

        Raises:
            ValueError: If the id does not follow the naming convention
        """
        suffix = f".{self.extension}"
        if not tile_id.endswith(suffix):
            raise ValueError(f"Invalid tile ID '{tile_id}': expected '{suffix}' suffix")

        parts = tile_id[: -len(suffix)].split("_")
        if len(parts) != 3:
            raise ValueError(f"Invalid tile ID format: {tile_id}")

        try:
            values = []
            for part, prefix in zip(parts, ("d", "x", "y")):
                digits = part[1:]
                if not part.startswith(prefix) or not (digits.isascii() and digits.isdigit()):
                    raise ValueError(f"expected '{prefix}<digits>' component, got '{part}'")
                values.append(int(digits))
        except ValueError as e:
            raise ValueError(f"Invalid tile ID '{tile_id}': {e}") from e

        depth, x, y = values
        return (depth, x, y)

    def tile_bounds(self, depth: int, x: int, y: int) -> Tuple[float, float, float, float]:
        """
        Get geographic bounds of one tile

        Args:
            depth: Zoom level
            x: Column index (west to east)
            y: Row index (north to south)

        Returns:
            (ullon, ullat, lrlon, lrlat) of the tile

        Raises:
            ValueError: If depth or indices fall outside the pyramid
        """
        if not 0 <= depth <= self.max_depth:
            raise ValueError(f"Depth {depth} outside pyramid range 0..{self.max_depth}")
        tiles = self.tiles_per_side(depth)
        if x < 0 or x >= tiles or y < 0 or y >= tiles:
            raise ValueError(f"Tile coordinates out of range for depth {depth}: ({x},{y})")

        tile_w = self.tile_width(depth)
        tile_h = self.tile_height(depth)
        return (
            self.ullon + x * tile_w,
            self.ullat - y * tile_h,
            self.ullon + (x + 1) * tile_w,
            self.ullat - (y + 1) * tile_h,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "ullon": self.ullon,
            "ullat": self.ullat,
            "lrlon": self.lrlon,
            "lrlat": self.lrlat,
            "max_depth": self.max_depth,
            "tile_size": self.tile_size,
            "extension": self.extension,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TilePyramid":
        try:
            return cls(
                ullon=float(data["ullon"]),
                ullat=float(data["ullat"]),
                lrlon=float(data["lrlon"]),
                lrlat=float(data["lrlat"]),
                max_depth=int(data.get("max_depth", 7)),
                tile_size=int(data.get("tile_size", 256)),
                name=data.get("name", ""),
                extension=data.get("extension", "png"),
            )
        except KeyError as e:
            raise PyramidConfigError(f"Missing pyramid field: {e}") from e
        except (TypeError, ValueError) as e:
            raise PyramidConfigError(f"Invalid pyramid field: {e}") from e

    def __repr__(self):
        return (
            f"<TilePyramid: {self.name or 'unnamed'}>\n"
            f"  Extent: ({self.ullon}, {self.ullat}) - ({self.lrlon}, {self.lrlat})\n"
            f"  Depths: 0..{self.max_depth}\n"
            f"  Tile size: {self.tile_size}px"
        )


# Reference pyramid for the Berkeley street map tile set
BUILTIN_PYRAMIDS = {
    "berkeley": TilePyramid(
        ullon=-122.2998046875,
        ullat=37.892195547244356,
        lrlon=-122.2119140625,
        lrlat=37.82280243352756,
        max_depth=7,
        tile_size=256,
        name="berkeley",
    ),
}

DEFAULT_PYRAMID = BUILTIN_PYRAMIDS["berkeley"]


def load_pyramid(path: str | Path) -> TilePyramid:
    """
    Load a pyramid description from a JSON file

    Args:
        path: JSON file holding the fields of TilePyramid.to_dict()

    Returns:
        TilePyramid
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise PyramidConfigError(f"Cannot read pyramid file {path}: {e}") from e

    if not isinstance(data, dict):
        raise PyramidConfigError(f"Pyramid file {path} must hold a JSON object")

    data.setdefault("name", path.stem)
    pyramid = TilePyramid.from_dict(data)
    logger.info("Loaded tile pyramid %s from %s", pyramid.name, path)
    return pyramid


def get_pyramid(name_or_path: str | None = None) -> TilePyramid:
    """Resolve a built-in pyramid name or a JSON file path"""
    if not name_or_path:
        return DEFAULT_PYRAMID
    if name_or_path in BUILTIN_PYRAMIDS:
        return BUILTIN_PYRAMIDS[name_or_path]
    if Path(name_or_path).exists():
        return load_pyramid(name_or_path)
    raise PyramidConfigError(
        f"Unknown pyramid '{name_or_path}'. "
        f"Built-in pyramids: {', '.join(sorted(BUILTIN_PYRAMIDS))}"
    )
