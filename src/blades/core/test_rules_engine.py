"""
Tests for request dispatch and the reference d6 pool evaluator.
"""

import asyncio
import random

import pytest

from src.blades.core import BladesRulesEngine, RollRequestDispatcher
from src.blades.models import OutcomeType, Position, RollRequest


class FixedRandom(random.Random):
    """Returns scripted die faces in order."""

    def __init__(self, faces):
        super().__init__()
        self.faces = list(faces)

    def randint(self, a, b):
        return self.faces.pop(0)


def evaluate(faces, dice_count):
    engine = BladesRulesEngine(rng=FixedRandom(faces))
    return asyncio.run(engine.evaluate(RollRequest(dice_count=dice_count, label="hunt")))


def test_dispatch_forwards_everything(dispatcher, evaluator):
    outcome = asyncio.run(dispatcher.dispatch(3, "hunt", Position.RISKY, "great", "note", 2, None))
    request = evaluator.requests[0]

    assert request.dice_count == 3
    assert request.label == "hunt"
    assert request.position == "risky"
    assert request.effect == "great"
    assert request.note == "note"
    assert request.extra_payload == 2
    assert request.tier is None
    assert outcome.request is request


def test_dispatch_does_not_validate(dispatcher, evaluator):
    asyncio.run(dispatcher.dispatch(-2, "BITD.AcquireAsset", tier=0))
    assert evaluator.requests[0].dice_count == -2


def test_dispatch_uses_given_evaluator():
    engine = BladesRulesEngine(rng=FixedRandom([6]))
    outcome = asyncio.run(RollRequestDispatcher(engine).dispatch(1, "sway"))
    assert outcome.outcome is OutcomeType.SUCCESS


@pytest.mark.parametrize("faces, outcome", [
    ([2, 6, 3], OutcomeType.SUCCESS),
    ([5, 1, 4], OutcomeType.PARTIAL),
    ([1, 3, 2], OutcomeType.FAILURE),
    ([6, 2, 6], OutcomeType.CRITICAL),
])
def test_pool_keeps_highest(faces, outcome):
    result = evaluate(faces, 3)

    assert result.dice == faces
    assert result.result == max(faces)
    assert result.outcome is outcome
    assert result.critical is (outcome is OutcomeType.CRITICAL)


@pytest.mark.parametrize("dice_count", [0, -2])
def test_zero_dice_keeps_lowest_of_two(dice_count):
    result = evaluate([6, 4], dice_count)

    assert result.dice == [6, 4]
    assert result.result == 4
    assert result.outcome is OutcomeType.PARTIAL


def test_zero_dice_never_crits():
    result = evaluate([6, 6], 0)

    assert result.outcome is OutcomeType.SUCCESS
    assert result.critical is False
