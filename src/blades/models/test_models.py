"""
Tests for record coercion at the model boundary.
"""

from src.blades.models import (
    Character,
    Crew,
    Effect,
    Position,
    RollConfiguration,
    RollRequest,
    RollType,
    Skill,
)


def test_skill_effective_value_is_clamped_to_min():
    assert Skill(value=0, min=1).effective_value == 1
    assert Skill(value=2, min=1).effective_value == 2


def test_skill_ratings_are_coerced():
    assert Skill(value="2").value == 2
    assert Skill(value=None).value == 0
    assert Skill(value="bad", min="1").effective_value == 1


def test_character_from_sheet_data():
    character = Character.model_validate({
        "id": "char_1",
        "attributes": {
            "insight": {"bonus": "1", "skills": {"hunt": {"value": 2}}},
        },
        "stress": {"value": 4},
        "crew": [{"id": "crew_1"}],
    })

    assert character.attributes["insight"].bonus == 1
    assert character.skill_names() == ["hunt"]
    assert character.stress.max == 9
    assert character.crew[0].id == "crew_1"


def test_crew_defaults_and_tier_coercion():
    crew = Crew.model_validate({"id": "crew_1", "tier": "three", "scoundrel": {"mastery": None}})

    assert crew.tier == 0
    assert crew.scoundrel.mastery is False
    assert crew.scoundrel.add_stress == 0
    assert Crew(id="crew_2", tier=-1).tier == 0


def test_roll_configuration_from_form_values():
    config = RollConfiguration.model_validate({
        "mod": "-2",
        "rollSelection": "acquireAsset",
        "pos": "controlled",
        "fx": "limited",
        "extraThreats": "9",
        "qty": "12",
        "tier": "3",
        "note": None,
    })

    assert config.modifier == -2
    assert config.roll_type is RollType.ACQUIRE_ASSET
    assert config.position is Position.CONTROLLED
    assert config.effect is Effect.LIMITED
    assert config.extra_threats == 5
    assert config.quantity == 10
    assert config.tier == 3
    assert config.note == ""


def test_roll_configuration_defaults():
    config = RollConfiguration.model_validate({"pos": "reckless", "fx": "", "mod": "+9"})

    assert config.roll_type is None
    assert config.position is Position.RISKY
    assert config.effect is Effect.STANDARD
    assert config.modifier == 3
    assert config.quantity is None
    assert config.tier is None


def test_roll_request_stores_plain_values():
    request = RollRequest(dice_count=2, label="hunt", position=Position.RISKY, effect=Effect.GREAT)

    assert request.position == "risky"
    assert request.effect == "great"
    assert request.model_dump()["position"] == "risky"


def test_crew_mastery_reads_any_host_value_as_a_flag():
    assert Crew.model_validate({"id": "c", "tier": 1, "scoundrel": {"mastery": "x"}}).scoundrel.mastery is True
    assert Crew.model_validate({"id": "c", "scoundrel": {"mastery": 0}}).scoundrel.mastery is False
    assert Crew.model_validate({"id": "c", "scoundrel": {"mastery": ""}}).scoundrel.mastery is False


def test_clocks_coerce_unparsable_segments():
    character = Character.model_validate({
        "id": "a",
        "stress": {"value": "lots", "max": 9},
        "trauma": {"value": "2", "max": None},
        "healing": {"value": 1, "min": "?"},
    })

    assert character.stress.value == 0
    assert character.stress.max == 9
    assert character.trauma.value == 2
    assert character.trauma.max == 0
    assert character.healing.min == 0
