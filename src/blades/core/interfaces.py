"""Collaborators the roll core consumes but does not implement."""

from abc import ABC, abstractmethod
from typing import Any, Dict

from src.blades.models import Character, Crew, FormSpec, RollOutcome, RollRequest


class CharacterRegistry(ABC):
    """Read-only access to the host's character and crew records."""

    @abstractmethod
    def lookup(self, entity_id: str) -> Character | Crew | None:
        """Return the record stored under `entity_id`, or None"""
        pass


class FormDialog(ABC):
    """
    Shows a form and waits for the user.
    This is the only point where a roll flow suspends.
    """

    @abstractmethod
    async def present(self, spec: FormSpec) -> Dict[str, Any] | None:
        """Return the submitted field values, or None if cancelled or dismissed"""
        pass


class RollEvaluator(ABC):
    """Throws the dice for a finished request. Opaque to the core."""

    @abstractmethod
    async def evaluate(self, request: RollRequest) -> RollOutcome:
        pass
