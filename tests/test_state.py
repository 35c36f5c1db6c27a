"""Tests for selections validation and GameState construction."""

import pytest

from marrow_grow import GrowConfig, SelectionError, Selections, Stage, create

from conftest import make_selections


def test_create_initial_values():
    state = create(make_selections())
    assert (state.health, state.water, state.light, state.nutrients, state.stress) == (
        100.0, 80.0, 100.0, 80.0, 0.0,
    )
    assert state.growth_stage is Stage.SPROUT
    assert state.stage_time == 0
    assert state.total_growth_time == 144
    assert not state.is_growing
    assert not state.is_paused
    assert state.game_speed == 1
    assert state.active_event is None
    assert state.lights_on
    assert (state.pest_penalty, state.raider_penalty, state.potency_boost) == (1.0, 1.0, 1.0)
    assert state.final_potency is None
    assert state.final_yield is None


def test_feeding_schedule_from_selections():
    state = create(make_selections(sprout="potent", vegetative="growth", flowering="cosmic"))
    assert [p.water_times for p in state.feeding_schedule] == [2, 3, 4]
    assert [p.nutrient_mix for p in state.feeding_schedule] == ["potent", "growth", "cosmic"]
    assert not any(p.applied for p in state.feeding_schedule)
    assert state.plan(Stage.FLOWERING).nutrient_mix == "cosmic"


def test_config_water_times():
    state = create(make_selections(), GrowConfig(water_times=(1, 0, 5)))
    assert [p.water_times for p in state.feeding_schedule] == [1, 0, 5]


def test_selection_fields_exposed():
    state = create(make_selections(defense="hound"))
    assert state.seed_type == "crypt-cookies"
    assert state.soil_type == "bone-dust"
    assert state.defense_type == "hound"


@pytest.mark.parametrize("field_name", ["seed", "soil", "defense"])
def test_missing_selection_rejected(field_name):
    selections = make_selections(**{field_name: None})
    with pytest.raises(SelectionError) as exc:
        create(selections)
    assert exc.value.field_name == field_name


def test_missing_schedule_rejected():
    selections = Selections(seed="crypt-cookies", soil="bone-dust", defense="grower")
    with pytest.raises(SelectionError):
        create(selections)


def test_unknown_ids_rejected():
    with pytest.raises(SelectionError):
        create(make_selections(soil="lava"))
    with pytest.raises(SelectionError):
        create(make_selections(flowering="rocket-fuel"))


def test_selection_error_is_value_error():
    with pytest.raises(ValueError):
        create(make_selections(seed=None))


def test_unset_stage_mix_allowed():
    state = create(make_selections(vegetative=None))
    assert state.plan(Stage.VEGETATIVE).nutrient_mix is None


def test_from_dict_wire_shape():
    selections = Selections.from_dict({
        "seed": "bone-blossom",
        "soil": "magic-moss",
        "defense": "vault",
        "feedingSchedule": {"sprout": "basic", "vegetative": "growth", "flowering": "potent"},
    })
    assert selections.seed == "bone-blossom"
    assert selections.mix_for(Stage.VEGETATIVE) == "growth"
    assert selections.mix_for(Stage.HARVEST) is None
