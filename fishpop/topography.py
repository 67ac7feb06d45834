"""Procedurally generated lake-bottom maps with depth bands and vegetation."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field

from fishpop.perlin import Perlin

DEPTH_MIN = 0.0
DEPTH_MAX = 15.0
NOISE_MIN = -1.0
NOISE_LAND_MIN = NOISE_MIN + 0.5
NOISE_MAX = 1.0

_BLUE, _GREEN, _RED, _YELLOW = 34, 32, 31, 33


def _paint(text: str, colour: int) -> str:
    return f"\x1b[{colour}m{text}\x1b[0m"


class DepthRangeName(enum.Enum):
    SUPER_SHALLOW = "░"
    SHALLOW = "▒"
    MID_DEPTH = "▓"
    DEEP = "█"


class Vegetation(enum.Enum):
    GRASS = "„"
    REEDS = "¥"
    MATS = "¬"

    def __str__(self) -> str:
        return _paint(self.value, _GREEN)


class Structure(enum.Enum):
    CHUNK_ROCK = ("¤", _RED)
    BOULDER = ("®", _RED)
    TIMBER = ("˜", _YELLOW)
    BRUSH = ("×", _YELLOW)

    def __str__(self) -> str:
        symbol, colour = self.value
        return _paint(symbol, colour)


class BottomComposition(enum.Enum):
    MUD = enum.auto()
    HARD = enum.auto()
    GRAVEL = enum.auto()


@dataclass(frozen=True)
class VegetationRate:
    vegetation: Vegetation
    rate: float
    adjacency_rate: float


@dataclass(frozen=True)
class DepthRange:
    """A band of depths and the chance of each vegetation growing there."""

    min_depth: float
    max_depth: float
    vegetation_rates: tuple[VegetationRate, ...]
    name: DepthRangeName

    def get_vegetation_rate(self, vegetation: Vegetation, adjacent: bool) -> float:
        """Growth chance for ``vegetation``, higher when a neighbour already has it."""
        for entry in self.vegetation_rates:
            if entry.vegetation is vegetation:
                return entry.adjacency_rate if adjacent else entry.rate
        raise ValueError(f"no rate for {vegetation.name} in {self.name.name}")

    def __str__(self) -> str:
        return _paint(self.name.value, _BLUE)


def _rates(grass, reeds, mats) -> tuple[VegetationRate, ...]:
    return (
        VegetationRate(Vegetation.GRASS, *grass),
        VegetationRate(Vegetation.REEDS, *reeds),
        VegetationRate(Vegetation.MATS, *mats),
    )


DEPTH_RANGES: tuple[DepthRange, ...] = (
    DepthRange(
        DEPTH_MIN, 5.0,
        _rates((0.1, 0.45), (0.2, 0.75), (0.1, 0.75)),
        DepthRangeName.SUPER_SHALLOW,
    ),
    DepthRange(
        5.0, 7.0,
        _rates((0.2, 0.65), (0.2, 0.4), (0.2, 0.75)),
        DepthRangeName.SHALLOW,
    ),
    DepthRange(
        7.0, 10.0,
        _rates((0.12, 0.45), (0.0, 0.0), (0.12, 0.45)),
        DepthRangeName.MID_DEPTH,
    ),
    DepthRange(
        10.0, DEPTH_MAX,
        _rates((0.05, 0.20), (0.0, 0.0), (0.05, 0.20)),
        DepthRangeName.DEEP,
    ),
)


@dataclass(frozen=True)
class NoiseDepth:
    """A raw noise sample; low values are land."""

    value: float

    def is_land(self) -> bool:
        return self.value < NOISE_LAND_MIN


@dataclass(frozen=True)
class Depth:
    """A water depth in the range [DEPTH_MIN, DEPTH_MAX]."""

    value: float

    @classmethod
    def from_noise(cls, noise_depth: NoiseDepth) -> Depth:
        """Map a water noise sample linearly onto the depth range."""
        if noise_depth.is_land():
            raise ValueError(f"noise value {noise_depth.value} is land, not water")
        fraction = (noise_depth.value - NOISE_LAND_MIN) / (NOISE_MAX - NOISE_LAND_MIN)
        return cls(fraction * (DEPTH_MAX - DEPTH_MIN) + DEPTH_MIN)

    def depth_range(self) -> DepthRange:
        """The first depth band that contains this depth."""
        for band in DEPTH_RANGES:
            if band.min_depth <= self.value <= band.max_depth:
                return band
        raise ValueError(f"depth {self.value} lies outside every depth range")

    def __str__(self) -> str:
        return str(self.depth_range())


@dataclass(frozen=True)
class LandRegion:
    def __str__(self) -> str:
        return "#"


@dataclass(frozen=True)
class WaterRegion:
    bottom: BottomComposition
    vegetation: Vegetation | None
    structure: Structure | None
    depth: Depth

    def has_vegetation_type(self, vegetation_type: Vegetation) -> bool:
        return self.vegetation is vegetation_type

    def __str__(self) -> str:
        if self.vegetation is not None:
            return str(self.vegetation)
        if self.structure is not None:
            return str(self.structure)
        return str(self.depth)


Region = LandRegion | WaterRegion


class AdjacencyDirection(enum.Enum):
    UP = enum.auto()
    LEFT = enum.auto()


def get_adjacent(
    regions: list[Region], width: int, x: int, y: int, direction: AdjacencyDirection
) -> Region | None:
    """The already generated neighbour above or to the left, or None at an edge."""
    if direction is AdjacencyDirection.UP:
        if y == 0:
            return None
        index = (y - 1) * width + x
    else:
        if x == 0:
            return None
        index = y * width + x - 1
    if index >= len(regions):
        raise IndexError(f"no region generated at ({x}, {y}) neighbour index {index}")
    return regions[index]


def generate(seed: int, width: int, height: int, scale: float) -> list[Region]:
    """Generate a row-major grid of regions from seeded noise."""
    rng = random.Random(seed)
    noise = Perlin(seed)
    kinds = list(Vegetation)
    regions: list[Region] = []

    for y in range(height):
        for x in range(width):
            noise_depth = NoiseDepth(noise.get((x * scale, y * scale)))
            if noise_depth.is_land():
                regions.append(LandRegion())
                continue

            depth = Depth.from_noise(noise_depth)
            up = get_adjacent(regions, width, x, y, AdjacencyDirection.UP)
            left = get_adjacent(regions, width, x, y, AdjacencyDirection.LEFT)
            veg_type = kinds[rng.randrange(3)]

            neighbour = up if up is not None else left
            adjacent = isinstance(neighbour, WaterRegion) and neighbour.has_vegetation_type(veg_type)
            rate = depth.depth_range().get_vegetation_rate(veg_type, adjacent)

            roll = rng.randint(0, 100) / 100.0
            vegetation = veg_type if roll <= rate else None
            regions.append(WaterRegion(BottomComposition.HARD, vegetation, None, depth))

    return regions


@dataclass
class TopographicMap:
    """A generated map of ``width`` by ``height`` regions."""

    seed: int
    width: int
    height: int
    scale: float
    regions: list[Region] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("map dimensions must not be negative")
        self.regions = generate(self.seed, self.width, self.height, self.scale)

    def region_at(self, x: int, y: int) -> Region:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} map")
        return self.regions[y * self.width + x]

    def render(self) -> str:
        """The map as text, one line per row, each line ending in a newline."""
        return "".join(
            "".join(str(region) for region in self.regions[row * self.width:(row + 1) * self.width]) + "\n"
            for row in range(self.height)
        )

    def __str__(self) -> str:
        return self.render()