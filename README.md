# fishpop

`fishpop` has two parts:

- **Fish population simulation** (`fishpop.simulation`). This is a seeded, reproducible model. On each tick every living
  fish ages by one and may die at random. A fish also dies once its age passes ten.
  When the living population falls below a threshold, a batch of new fish is spawned.
- **Lake topography maps** (`fishpop.topography`, `fishpop.perlin`). These are procedural grids built from seeded
  Perlin noise. Each cell is either land or water. A water cell falls into one of four depth bands and may carry
  vegetation. Vegetation is more likely to grow when the cell above, or the cell to the left, already has the same kind.

The package uses only the standard library.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install ".[test]"
```

## Drawing a map

```
fishpop
```

This command prints a map with ANSI terminal colours. The default map is 96×64 cells, with seed 42 and noise scale 0.12.

| Option | Default | Meaning |
|--------|---------|---------|
| `--seed` | `42` | Seed for the noise and the vegetation rolls |
| `--width` | `96` | Number of columns (must not be negative) |
| `--height` | `64` | Number of rows (must not be negative) |
| `--scale` | `0.12` | Noise coordinates per cell |

Each character in the output stands for one cell:

| Symbol | Meaning |
|--------|---------|
| `#` | land |
| `░ ▒ ▓ █` | water: super-shallow, shallow, mid-depth, deep |
| `„` | grass |
| `¥` | reeds |
| `¬` | mats |

The same options always give the same map.

## Using the library

### Topography

```python
from fishpop.topography import TopographicMap, WaterRegion

lake = TopographicMap(seed=42, width=96, height=64, scale=0.12)
print(lake.render())

cell = lake.region_at(10, 5)  # LandRegion or WaterRegion
if isinstance(cell, WaterRegion):
    print(cell.depth.value, cell.depth.depth_range().name, cell.vegetation)
```

- `render()` returns one line per row. Each line ends in a newline.
- `region_at(x, y)` raises `IndexError` for coordinates outside the map.
- `generate(seed, width, height, scale)` returns the grid as a flat, row-major list of regions.
- `Depth.from_noise(NoiseDepth(value))` maps a water noise value onto depths 0 to 15. It raises `ValueError` for a land value, which is any value below -0.5.
- `DepthRange.get_vegetation_rate(vegetation, adjacent)` gives the growth chance for one band.
- `DEPTH_RANGES` holds the four bands.

### Noise

```python
from fishpop.perlin import Perlin

noise = Perlin(seed=7)
value = noise.get((1.5, 2.25))  # in [-1, 1]; 0 on integer lattice points
```

### Population simulation

```python
from fishpop.simulation import FishSimulation

sim = FishSimulation(initial_count=20, death_rate=0.1, spawn_threshold=10, spawn_count=5, seed=42)
for _ in range(50):
    sim.step()

print(sim.population_count())
print([fish.id for fish in sim.alive_fish()])
print(sim.history_json())
```

- You can change `death_rate`, `spawn_threshold` and `spawn_count` on the object between steps.
- A `death_rate` outside `[0, 1]` makes `step()` raise `ValueError`.
- `history` records the living population after every tick. Its first entry is the initial count.
- `spawn_fish(count)` adds fish by hand.

## What the package does not do

The population simulation is a library only:

- There is no command or interactive screen for it.
- There is no timed autoplay and no chart.
- Any stepping loop or display is up to you.

The maps do not use `Structure` or the bottom types other than `HARD`. Generated water cells never carry structure.

## Running the tests

```
pytest
```