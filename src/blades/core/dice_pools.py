import logging
from typing import Dict, List, Tuple

from src.blades.core.crew_modifiers import CrewModifierResolver
from src.blades.models import (
    CORE_ATTRIBUTES,
    DEFAULT_SKILL_MAX,
    MASTERY_SKILL_MAX,
    VICE_POOL,
    Character,
    DicePoolMap,
    SkillBounds,
)

logger = logging.getLogger(__name__)

# ============================================================
# DICE POOLS
# ============================================================

class AttributePoolCalculator:
    """
    Turns a character sheet into dice counts.

    Attribute pool = attribute bonus + 1 for every rated skill under it.
    Skill pool = the skill's rating.
    Vice pool = the lowest of insight, prowess and resolve.
    """

    def __init__(self, crew_modifiers: CrewModifierResolver):
        self.crew = crew_modifiers

    def compute_dice_pools(self, character: Character) -> DicePoolMap:
        """Builds a fresh pool map. Callers may keep or mutate it freely."""
        pools: DicePoolMap = {}

        for attribute_name, block in character.attributes.items():
            pools[attribute_name] = block.bonus
            for skill_name, skill in block.skills.items():
                rating = skill.effective_value
                pools[skill_name] = rating
                # +1d to the attribute for every skill with at least one dot
                if rating > 0:
                    pools[attribute_name] += 1

        # Computed once all attributes are known so iteration order can't matter.
        pools[VICE_POOL] = min(pools.get(name, 0) for name in CORE_ATTRIBUTES)

        logger.debug("Dice pools for %s: %s", character.id, pools)
        return pools

    def get_roll_data(self, character: Character) -> Dict[str, DicePoolMap]:
        return {"dice_amount": self.compute_dice_pools(character)}

    def compute_skill_bounds(self, character: Character) -> Dict[str, Dict[str, SkillBounds]]:
        """
        Rating and dot limits for every skill, as the sheet should display them.
        Ratings are raised to their minimum; the maximum is 3, or 4 once the
        crew has mastery. Does not touch the character or any dice count.
        """
        skill_max = MASTERY_SKILL_MAX if self.crew.has_mastery(character) else DEFAULT_SKILL_MAX
        return {
            attribute_name: {
                skill_name: SkillBounds(value=skill.effective_value, min=skill.min, max=skill_max)
                for skill_name, skill in block.skills.items()
            }
            for attribute_name, block in character.attributes.items()
        }

    def is_action(self, character: Character, name: str) -> bool:
        """Skills are actions; attributes (and anything else) are resistance rolls."""
        return name in character.skill_names()

    def list_actions(self, character: Character) -> List[Tuple[str, List[Tuple[str, str]]]]:
        """
        Grouped (value, label) options for picking what to roll.
        One group per attribute: the attribute's resistance roll first, then its skills.
        """
        groups = []
        for attribute_name, block in character.attributes.items():
            options = [(attribute_name, f"{attribute_name} (Resist)")]
            options.extend((skill_name, skill_name) for skill_name in block.skills)
            groups.append((f"{attribute_name} Actions", options))
        return groups
