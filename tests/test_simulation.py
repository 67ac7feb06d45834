import json
import random

import pytest

from fishpop.simulation import Fish, FishSimulation


def test_new_fish_is_young_and_alive():
    fish = Fish(3)
    assert (fish.id, fish.age, fish.alive) == (3, 0, True)


def test_fish_dies_of_old_age_after_ten_steps():
    rng = random.Random(0)
    fish = Fish(0)
    for _ in range(10):
        fish.step(rng, 0.0)
    assert fish.alive
    fish.step(rng, 0.0)
    assert not fish.alive
    assert fish.age == 11


def test_certain_death_rate_kills_immediately():
    fish = Fish(0)
    fish.step(random.Random(1), 1.0)
    assert not fish.alive
    assert fish.age == 1


@pytest.mark.parametrize("rate", [-0.1, 1.5])
def test_invalid_death_rate_is_rejected(rate):
    with pytest.raises(ValueError):
        Fish(0).step(random.Random(0), rate)


def test_initial_state():
    sim = FishSimulation(20, 0.1, 10, 5, 42)
    assert sim.population_count() == 20
    assert sim.history == [20]
    assert sim.history_json() == "[20]"
    assert [f.id for f in sim.alive_fish()] == list(range(20))


def test_mass_death_triggers_spawning():
    sim = FishSimulation(20, 1.0, 10, 5, 7)
    sim.step()
    assert sim.population_count() == 5
    assert sim.next_id == 25
    assert [f.id for f in sim.alive_fish()] == [20, 21, 22, 23, 24]
    assert sim.history == [20, 5]


def test_no_spawning_above_threshold():
    sim = FishSimulation(20, 0.0, 1, 5, 7)
    sim.step()
    assert sim.history == [20, 20]
    assert sim.next_id == 20


def test_spawn_fish_assigns_consecutive_ids():
    sim = FishSimulation(2, 0.1, 1, 1, 0)
    sim.spawn_fish(3)
    assert [f.id for f in sim.fish] == [0, 1, 2, 3, 4]
    assert sim.next_id == 5


def test_history_grows_with_each_step_and_matches_json():
    sim = FishSimulation(20, 0.3, 10, 5, 99)
    for _ in range(15):
        sim.step()
    assert len(sim.history) == 16
    assert sim.history[-1] == sim.population_count()
    assert json.loads(sim.history_json()) == sim.history
    assert all(f.alive for f in sim.alive_fish())


def test_same_seed_gives_same_history():
    first = FishSimulation(20, 0.2, 10, 5, 42)
    second = FishSimulation(20, 0.2, 10, 5, 42)
    for _ in range(30):
        first.step()
        second.step()
    assert first.history == second.history


def test_negative_initial_count_is_rejected():
    with pytest.raises(ValueError):
        FishSimulation(-1, 0.1, 10, 5, 0)