import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from src.blades.models.schemas import (
    Effect,
    MAX_ENGAGEMENT_DICE,
    MAX_EXTRA_THREATS,
    MODIFIER_RANGE,
    OutcomeType,
    Position,
    RollType,
    THREAT_POSITIONS,
)
from src.blades.utils.numbers import clamp, to_int

logger = logging.getLogger(__name__)

# Attribute/skill name -> dice count, plus the reserved vice entry. Rebuilt on every computation.
DicePoolMap = Dict[str, int]


# ============================================================
# DERIVED VALUES
# ============================================================
@dataclass(frozen=True)
class CrewModifiers:
    """What a linked crew contributes to a member's sheet."""
    tier: int = 0
    mastery: bool = False
    add_stress: float = 0
    add_trauma: float = 0

    @classmethod
    def neutral(cls) -> "CrewModifiers":
        return cls()

@dataclass(frozen=True)
class SkillBounds:                  # Clamped rating and dot limits shown on the sheet.
    value: int
    min: int
    max: int


# ============================================================
# ROLL CONFIGURATION
# ============================================================
class ResolutionStatus(Enum):
    """Current state of a roll configuration flow"""
    IDLE = "idle"                                       # Nothing asked yet
    AWAITING_CONFIRMATION = "awaiting_confirmation"     # Dialog is open
    RESOLVED = "resolved"                               # Request dispatched
    CANCELLED = "cancelled"                             # Dialog dismissed, nothing dispatched

class FormOption(BaseModel):
    value: str
    label: str
class FormField(BaseModel):
    """One input of the roll dialog."""
    name: str
    label: str
    kind: str = "select"                # "select" | "radio" | "text"
    options: List[FormOption] = []
    default: Any = None
class FormSpec(BaseModel):
    """Everything a FormDialog needs to render the roll dialog."""
    title: str
    inputs: List[FormField] = []
    ok_label: str = "BITD.Roll"
    cancel_label: str = "Close"

    def get_input(self, name: str) -> FormField | None:
        return next((f for f in self.inputs if f.name == name), None)

    def defaults(self) -> Dict[str, Any]:
        """The values a user confirming without touching anything would submit."""
        return {f.name: f.default for f in self.inputs if f.default is not None}

class RollConfiguration(BaseModel):
    """
    Values submitted by the roll dialog, keyed by form field name.
    Unparsable numbers fall back to 0 and unknown choices to their defaults.
    """
    modifier: int = Field(0, alias="mod")
    roll_type: RollType | None = Field(None, alias="rollSelection")
    position: Position = Field(Position.RISKY, alias="pos")
    effect: Effect = Field(Effect.STANDARD, alias="fx")
    threat_position: Position = Field(Position.RISKY, alias="pos2")
    extra_threats: int = Field(0, alias="extraThreats")
    quantity: int | None = Field(None, alias="qty")
    tier: int | None = None
    note: str = ""

    class Config:
        populate_by_name = True

    @field_validator("modifier", mode="before")
    @classmethod
    def _coerce_modifier(cls, v):
        return clamp(to_int(v), *MODIFIER_RANGE)

    @field_validator("extra_threats", mode="before")
    @classmethod
    def _coerce_threats(cls, v):
        return clamp(to_int(v), 0, MAX_EXTRA_THREATS)

    @field_validator("quantity", mode="before")
    @classmethod
    def _coerce_quantity(cls, v):
        if v is None:
            return None
        return clamp(to_int(v), 0, MAX_ENGAGEMENT_DICE)

    @field_validator("tier", mode="before")
    @classmethod
    def _coerce_tier(cls, v):
        return None if v is None else to_int(v)

    @field_validator("roll_type", mode="before")
    @classmethod
    def _coerce_roll_type(cls, v):
        if v in (None, ""):
            return None
        try:
            return RollType(v)
        except ValueError:
            logger.warning("Unknown roll selection %r ignored", v)
            return None

    @field_validator("position", mode="before")
    @classmethod
    def _coerce_position(cls, v):
        return v if v in [p.value for p in Position] else Position.RISKY

    @field_validator("threat_position", mode="before")
    @classmethod
    def _coerce_threat_position(cls, v):
        return v if v in [p.value for p in THREAT_POSITIONS] else Position.RISKY

    @field_validator("effect", mode="before")
    @classmethod
    def _coerce_effect(cls, v):
        return v if v in [e.value for e in Effect] else Effect.STANDARD

    @field_validator("note", mode="before")
    @classmethod
    def _coerce_note(cls, v):
        return "" if v is None else str(v)


# ============================================================
# ROLL STRUCTURES
# ============================================================
class RollRequest(BaseModel):
    """A fully specified roll, ready for a RollEvaluator."""
    dice_count: int                                 # May be zero or negative, evaluator decides
    label: str                                      # Skill/attribute name or roll-type label
    position: Position | str = ""                   # "" when not an action/threat roll
    effect: Effect | str = ""
    note: str = ""
    extra_payload: int | None = None                # Threat count, stress, or tier
    tier: int | None = None                         # Crew tier, acquire-asset only

    class Config:
        use_enum_values = True

class RollOutcome(BaseModel):
    """Result of evaluating a RollRequest"""
    request: RollRequest
    dice: List[int]                                 # Every die thrown
    result: int                                     # The die that counts
    outcome: OutcomeType
    critical: bool = False
