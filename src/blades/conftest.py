"""Shared fixtures."""

import pytest

from src.blades.core import (
    AttributePoolCalculator,
    CrewModifierResolver,
    InMemoryRegistry,
    RollRequestDispatcher,
)
from src.blades.models import Crew, ScoundrelTraits
from src.blades.testing import RecordingEvaluator


@pytest.fixture
def crew() -> Crew:
    return Crew(id="crew_test", name="Test Crew", tier=2, scoundrel=ScoundrelTraits())


@pytest.fixture
def registry(crew) -> InMemoryRegistry:
    return InMemoryRegistry([crew])


@pytest.fixture
def resolver(registry) -> CrewModifierResolver:
    return CrewModifierResolver(registry)


@pytest.fixture
def calculator(resolver) -> AttributePoolCalculator:
    return AttributePoolCalculator(resolver)


@pytest.fixture
def evaluator() -> RecordingEvaluator:
    return RecordingEvaluator()


@pytest.fixture
def dispatcher(evaluator) -> RollRequestDispatcher:
    return RollRequestDispatcher(evaluator)
