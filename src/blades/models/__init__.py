from .schemas import (
    Position,
    Effect,
    RollType,
    OutcomeType,
    VICE_POOL,
    CORE_ATTRIBUTES,
    THREAT_POSITIONS,
    MODIFIER_RANGE,
    MAX_EXTRA_THREATS,
    MAX_ENGAGEMENT_DICE,
    MAX_TIER_CHOICE,
    DEFAULT_SKILL_MAX,
    MASTERY_SKILL_MAX,
    ROLL_LABELS,
)

from .state import (
    StressClock,
    TraumaClock,
    HealingClock,
    Skill,
    AttributeBlock,
    CrewLink,
    Character,
    ScoundrelTraits,
    Crew,
)

from .actions import (
    DicePoolMap,
    CrewModifiers,
    SkillBounds,
    ResolutionStatus,
    FormOption,
    FormField,
    FormSpec,
    RollConfiguration,
    RollRequest,
    RollOutcome,
)

__all__ = [
    # Schemas
    "Position",
    "Effect",
    "RollType",
    "OutcomeType",
    "VICE_POOL",
    "CORE_ATTRIBUTES",
    "THREAT_POSITIONS",
    "MODIFIER_RANGE",
    "MAX_EXTRA_THREATS",
    "MAX_ENGAGEMENT_DICE",
    "MAX_TIER_CHOICE",
    "DEFAULT_SKILL_MAX",
    "MASTERY_SKILL_MAX",
    "ROLL_LABELS",

    # State
    "StressClock",
    "TraumaClock",
    "HealingClock",
    "Skill",
    "AttributeBlock",
    "CrewLink",
    "Character",
    "ScoundrelTraits",
    "Crew",

    # Actions
    "DicePoolMap",
    "CrewModifiers",
    "SkillBounds",
    "ResolutionStatus",
    "FormOption",
    "FormField",
    "FormSpec",
    "RollConfiguration",
    "RollRequest",
    "RollOutcome",
]
