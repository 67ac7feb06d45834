"""A seeded fish population model with age limits and threshold spawning."""

from __future__ import annotations

import json
import random
from dataclasses import dataclass

MAX_AGE = 10


@dataclass
class Fish:
    """A single fish, identified by a unique id."""

    id: int
    age: int = 0
    alive: bool = True

    def step(self, rng: random.Random, death_rate: float) -> None:
        """Age the fish by one tick; it may die at random or of old age."""
        if not 0.0 <= death_rate <= 1.0:
            raise ValueError(f"death rate must lie in [0, 1], got {death_rate}")
        self.age += 1
        died_by_chance = rng.random() < death_rate
        if died_by_chance or self.age > MAX_AGE:
            self.alive = False


class FishSimulation:
    """A population that loses fish each tick and spawns new ones when it runs low."""

    def __init__(
        self,
        initial_count: int,
        death_rate: float,
        spawn_threshold: int,
        spawn_count: int,
        seed: int,
    ) -> None:
        if initial_count < 0:
            raise ValueError("initial count must not be negative")
        self.rng = random.Random(seed)
        self.fish: list[Fish] = [Fish(fish_id) for fish_id in range(initial_count)]
        self.next_id = initial_count
        self.death_rate = death_rate
        self.spawn_threshold = spawn_threshold
        self.spawn_count = spawn_count
        self.history: list[int] = [initial_count]

    def step(self) -> None:
        """Advance every living fish one tick, spawn if needed, record the population."""
        for fish in self.fish:
            if fish.alive:
                fish.step(self.rng, self.death_rate)

        if self.population_count() < self.spawn_threshold:
            self.spawn_fish(self.spawn_count)
        self.history.append(self.population_count())

    def spawn_fish(self, count: int) -> None:
        """Add ``count`` newborn fish with fresh ids."""
        for _ in range(count):
            self.fish.append(Fish(self.next_id))
            self.next_id += 1

    def alive_fish(self) -> list[Fish]:
        """The fish that are still alive, in order of creation."""
        return [fish for fish in self.fish if fish.alive]

    def population_count(self) -> int:
        """Number of living fish."""
        return sum(1 for fish in self.fish if fish.alive)

    def history_json(self) -> str:
        """The population history as a compact JSON array."""
        return json.dumps(self.history, separators=(",", ":"))