"""Sheet builders and scripted collaborators for tests."""

from typing import Any, Dict, List

from src.blades.core import FormDialog, RollEvaluator
from src.blades.models import (
    AttributeBlock,
    Character,
    CrewLink,
    FormSpec,
    OutcomeType,
    RollOutcome,
    RollRequest,
    Skill,
    StressClock,
)


class ScriptedDialog(FormDialog):
    """Answers with fixed values (merged over the form defaults), or cancels when values is None."""

    def __init__(self, values: Dict[str, Any] | None = None, use_defaults: bool = True):
        self.values = values
        self.use_defaults = use_defaults
        self.specs: List[FormSpec] = []

    async def present(self, spec: FormSpec) -> Dict[str, Any] | None:
        self.specs.append(spec)
        if self.values is None:
            return None
        submitted = spec.defaults() if self.use_defaults else {}
        submitted.update(self.values)
        return submitted


class RecordingEvaluator(RollEvaluator):
    """Keeps every request; always reports a partial success on a 4."""

    def __init__(self):
        self.requests: List[RollRequest] = []

    async def evaluate(self, request: RollRequest) -> RollOutcome:
        self.requests.append(request)
        return RollOutcome(request=request, dice=[4], result=4, outcome=OutcomeType.PARTIAL)


def build_character(
    skills: Dict[str, Dict[str, int]] | None = None,
    bonuses: Dict[str, int] | None = None,
    stress: int = 0,
    crew_id: str | None = None,
) -> Character:
    """Character with the three core attributes. `skills` maps attribute -> {skill: rating}."""
    skills = skills or {}
    bonuses = bonuses or {}
    attributes = {}
    for name in ("insight", "prowess", "resolve"):
        attributes[name] = AttributeBlock(
            bonus=bonuses.get(name, 0),
            skills={skill: Skill(value=value) for skill, value in skills.get(name, {}).items()},
        )
    return Character(
        id="char_test",
        name="Test",
        attributes=attributes,
        stress=StressClock(value=stress, max=9),
        crew=[CrewLink(id=crew_id)] if crew_id else [],
    )
