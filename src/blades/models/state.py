import logging
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from src.blades.models.schemas import DEFAULT_SKILL_MAX
from src.blades.utils.numbers import to_int, to_number

logger = logging.getLogger(__name__)


# ============================================================
# CLOCKS: bounded trackers owned by the host sheet
# ============================================================
class Clock(BaseModel):
    """Base for sheet trackers. Unparsable segments read as 0."""
    value: int = 0

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_segments(cls, v):
        return to_int(v)

class StressClock(Clock):
    max: int = 9
class TraumaClock(Clock):
    max: int = 4
class HealingClock(Clock):
    min: int = 0
    max: int = 4


# ============================================================
# CHARACTER
# ============================================================
class Skill(BaseModel):
    """A trained action rated in dots."""
    value: int = 0
    min: int = 0
    max: int = DEFAULT_SKILL_MAX        # Sheet data only; compute_skill_bounds derives the cap from crew mastery

    @field_validator("value", "min", mode="before")
    @classmethod
    def _coerce_rating(cls, v):
        # Broken sheet data counts as an untrained skill rather than poisoning the pool.
        if v not in (None, "") and to_number(v, None) is None:
            logger.warning("Unparsable skill rating %r treated as 0", v)
        return to_int(v)

    @property
    def effective_value(self) -> int:
        """Rating after applying the configured minimum."""
        return max(self.value, self.min)

class AttributeBlock(BaseModel):
    """An attribute (insight, prowess, resolve...) and the skills grouped under it."""
    bonus: int = 0
    skills: Dict[str, Skill] = Field(default_factory=dict)

    @field_validator("bonus", mode="before")
    @classmethod
    def _coerce_bonus(cls, v):
        return to_int(v)

class CrewLink(BaseModel):          # Reference from a character sheet to its crew.
    id: str
    name: str | None = None

class Character(BaseModel):
    id: str
    name: str = ""
    attributes: Dict[str, AttributeBlock] = Field(default_factory=dict)
    stress: StressClock = Field(default_factory=StressClock)
    trauma: TraumaClock = Field(default_factory=TraumaClock)
    healing: HealingClock = Field(default_factory=HealingClock)
    crew: List[CrewLink] = Field(default_factory=list)

    def skill_names(self) -> List[str]:
        return [skill for block in self.attributes.values() for skill in block.skills]


# ============================================================
# CREW
# ============================================================
class ScoundrelTraits(BaseModel):
    """Crew upgrades that modify every member's sheet."""
    mastery: bool = False
    add_stress: float = 0
    add_trauma: float = 0

    @field_validator("add_stress", "add_trauma", mode="before")
    @classmethod
    def _coerce_bonus(cls, v):
        return to_number(v)

    @field_validator("mastery", mode="before")
    @classmethod
    def _coerce_mastery(cls, v):
        return bool(v)

class Crew(BaseModel):
    id: str
    name: str = ""
    tier: int = 0
    scoundrel: ScoundrelTraits = Field(default_factory=ScoundrelTraits)

    @field_validator("tier", mode="before")
    @classmethod
    def _coerce_tier(cls, v):
        return max(0, to_int(v))
