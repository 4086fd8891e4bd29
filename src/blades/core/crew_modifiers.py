import logging

from src.blades.core.interfaces import CharacterRegistry
from src.blades.models import Character, Crew, CrewModifiers
from src.blades.utils.numbers import to_int, to_number

logger = logging.getLogger(__name__)

# ============================================================
# CREW MODIFIERS
# ============================================================

class CrewModifierResolver:
    """
    Reads what a character's crew contributes: tier, mastery, and the
    stress/trauma bonuses from scoundrel upgrades.

    The crew is looked up on every call, so upgrades bought by the crew
    show up immediately on every member's sheet.
    """

    def __init__(self, registry: CharacterRegistry):
        self.registry = registry

    def get_crew(self, character: Character) -> Crew | None:
        """The crew referenced by the character's first crew link, if it can be found."""
        if not character.crew:
            return None
        link = character.crew[0]
        if not link.id:
            return None

        crew = self.registry.lookup(link.id)
        if crew is None:
            logger.debug("Crew %s linked from %s not found", link.id, character.id)
            return None
        if not isinstance(crew, Crew):
            logger.warning("Record %s linked as crew of %s is not a crew", link.id, character.id)
            return None
        return crew

    def resolve(self, character: Character) -> CrewModifiers:
        """Never fails: no crew means neutral modifiers."""
        crew = self.get_crew(character)
        if crew is None:
            return CrewModifiers.neutral()

        traits = crew.scoundrel
        return CrewModifiers(
            tier=to_int(crew.tier),
            mastery=bool(traits.mastery),
            add_stress=to_number(traits.add_stress),
            add_trauma=to_number(traits.add_trauma),
        )

    def get_tier(self, character: Character) -> int:
        return self.resolve(character).tier

    def get_max_stress(self, character: Character) -> float:
        return character.stress.max + self.resolve(character).add_stress

    def get_max_trauma(self, character: Character) -> float:
        return character.trauma.max + self.resolve(character).add_trauma

    def has_mastery(self, character: Character) -> bool:
        return self.resolve(character).mastery

    def get_healing_min(self, character: Character) -> int:
        # Healing can't be ticked below the floor set by effects.
        return max(character.healing.value, character.healing.min)
