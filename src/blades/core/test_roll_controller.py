"""
Tests for wiring a character to a roll flow.
"""

import asyncio

import pytest

from src.blades.config.settings import Settings
from src.blades.core import CharacterNotFoundError, initialize_roll_controller
from src.blades.models import ResolutionStatus
from src.blades.testing import RecordingEvaluator, ScriptedDialog, build_character


@pytest.fixture
def character(registry, crew):
    character = build_character(skills={"insight": {"hunt": 2}}, stress=1, crew_id=crew.id)
    registry.add(character)
    return character


def test_begin_roll_by_id(registry, character):
    evaluator = RecordingEvaluator()
    controller = initialize_roll_controller(registry, ScriptedDialog({"mod": "1"}), evaluator, Settings())

    outcome = asyncio.run(controller.begin_roll(character.id, "hunt"))

    assert outcome is not None
    assert evaluator.requests[0].dice_count == 3
    assert controller.last_flow.status is ResolutionStatus.RESOLVED


def test_each_roll_gets_a_fresh_flow(registry, character):
    controller = initialize_roll_controller(registry, ScriptedDialog({}), RecordingEvaluator(), Settings())

    asyncio.run(controller.begin_roll(character, "hunt"))
    first = controller.last_flow
    asyncio.run(controller.begin_roll(character, "hunt"))

    assert controller.last_flow is not first


def test_unknown_character_raises(registry, crew):
    controller = initialize_roll_controller(registry, ScriptedDialog({}), RecordingEvaluator(), Settings())

    with pytest.raises(CharacterNotFoundError):
        asyncio.run(controller.begin_roll("char_nobody", "hunt"))
    with pytest.raises(CharacterNotFoundError):
        asyncio.run(controller.begin_roll(crew.id, "hunt"))


def test_settings_toggles_reach_the_flow(registry, character):
    dialog = ScriptedDialog({})
    settings = Settings(action_roll_enabled=False, threat_roll_enabled=True)
    controller = initialize_roll_controller(registry, dialog, RecordingEvaluator(), settings)

    asyncio.run(controller.begin_roll(character, "hunt"))
    offered = [o.value for o in dialog.specs[0].get_input("rollSelection").options]

    assert "actionRoll" not in offered
    assert "threatRoll" in offered


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("BLADES_THREAT_ROLL_ENABLED", "false")
    monkeypatch.setenv("BLADES_LOG_LEVEL", "DEBUG")
    settings = Settings()

    assert settings.threat_roll_enabled is False
    assert settings.action_roll_enabled is True
    assert settings.log_level == "DEBUG"
