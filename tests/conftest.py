"""Shared fixtures: deterministic random sources and engine builders."""

import random

import pytest

from marrow_grow import GrowthEngine, Selections


class ScriptedRandom(random.Random):
    """random() replays *script*, then returns *default* forever.

    Overriding random() routes uniform(), randint() and choice() through it too.
    """

    def __init__(self, script=(), default=0.99, seed=7):
        super().__init__(seed)
        self.script = list(script)
        self.default = default

    def random(self):
        if self.script:
            return self.script.pop(0)
        return self.default


def make_selections(seed="crypt-cookies", soil="bone-dust", defense="grower",
                    sprout="basic", vegetative="basic", flowering="basic"):
    return Selections(
        seed=seed,
        soil=soil,
        defense=defense,
        feeding_schedule={
            "sprout": sprout,
            "vegetative": vegetative,
            "flowering": flowering,
        },
    )


@pytest.fixture
def calm_rng():
    """Never fails the lights, never rolls a hazard."""
    return ScriptedRandom()


@pytest.fixture
def outcomes():
    return {"complete": [], "died": []}


@pytest.fixture
def make_engine(outcomes):
    def build(rng=None, selections=None, **kwargs):
        return GrowthEngine(
            selections or make_selections(),
            on_complete=outcomes["complete"].append,
            on_plant_died=lambda: outcomes["died"].append(True),
            rng=rng if rng is not None else ScriptedRandom(),
            **kwargs,
        )

    return build
