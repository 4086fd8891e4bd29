"""
Sample crew utility for trying out the roll dialog.
"""
from src.blades.core.registry import InMemoryRegistry
from src.blades.models import (
    AttributeBlock,
    Character,
    Crew,
    CrewLink,
    HealingClock,
    ScoundrelTraits,
    Skill,
    StressClock,
    TraumaClock,
)


def create_sample_crew() -> InMemoryRegistry:
    """
    Creates a registry holding Silver (a Lurk) and the Lampblacks crew.

    Returns:
        InMemoryRegistry: characters and crew, linked and ready to roll
    """

    # ==================== CREW ====================

    lampblacks = Crew(
        id="crew_lampblacks",
        name="The Lampblacks",
        tier=2,
        scoundrel=ScoundrelTraits(mastery=False, add_stress=1, add_trauma=0),
    )

    # ==================== CHARACTER ====================

    silver = Character(
        id="char_silver",
        name="Silver",
        attributes={
            "insight": AttributeBlock(
                bonus=0,
                skills={
                    "hunt": Skill(value=0),
                    "study": Skill(value=1),
                    "survey": Skill(value=2),
                    "tinker": Skill(value=0),
                },
            ),
            "prowess": AttributeBlock(
                bonus=0,
                skills={
                    "finesse": Skill(value=2),
                    "prowl": Skill(value=2, min=1),
                    "skirmish": Skill(value=0),
                    "wreck": Skill(value=0),
                },
            ),
            "resolve": AttributeBlock(
                bonus=0,
                skills={
                    "attune": Skill(value=0),
                    "command": Skill(value=0),
                    "consort": Skill(value=1),
                    "sway": Skill(value=0),
                },
            ),
        },
        stress=StressClock(value=3, max=9),
        trauma=TraumaClock(value=1, max=4),
        healing=HealingClock(value=0, min=0, max=4),
        crew=[CrewLink(id=lampblacks.id, name=lampblacks.name)],
    )

    return InMemoryRegistry([lampblacks, silver])
