from enum import Enum
# Enum Classes
class Position(str, Enum):          # Situational risk of an action roll.
    CONTROLLED = "controlled"
    RISKY = "risky"
    DESPERATE = "desperate"
class Effect(str, Enum):            # Expected magnitude of an action roll.
    LIMITED = "limited"
    STANDARD = "standard"
    GREAT = "great"
class RollType(str, Enum):          # Mutually exclusive roll selections offered by the roll dialog.
    ACTION = "actionRoll"               # --Pool    --Position/Effect
    THREAT = "threatRoll"               # --Pool    --Position/Threats
    FORTUNE = "fortune"                 # --Pool
    GATHER_INFO = "gatherInfo"          # --Pool
    INDULGE_VICE = "indulgeVice"        # --Vice pool   --Stress
    ENGAGEMENT = "engagement"           # --Chosen quantity
    ACQUIRE_ASSET = "acquireAsset"      # --Crew tier
class OutcomeType(str, Enum):       # Result bands of a d6 pool.
    CRITICAL = "critical"
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILURE = "failure"


# Constants
VICE_POOL = "BITD.Vice"                                 # Reserved dice pool key
CORE_ATTRIBUTES = ("insight", "prowess", "resolve")     # Vice pool is the lowest of these
THREAT_POSITIONS = (Position.RISKY, Position.DESPERATE)

MODIFIER_RANGE = (-3, 3)
MAX_EXTRA_THREATS = 5
MAX_ENGAGEMENT_DICE = 10
MAX_TIER_CHOICE = 4
DEFAULT_SKILL_MAX = 3
MASTERY_SKILL_MAX = 4

# Labels forwarded with a roll request.
ROLL_LABELS = {
    RollType.THREAT: "BITD.ThreatRoll",
    RollType.FORTUNE: "BITD.Fortune",
    RollType.GATHER_INFO: "BITD.GatherInformation",
    RollType.INDULGE_VICE: VICE_POOL,
    RollType.ENGAGEMENT: "BITD.Engagement",
    RollType.ACQUIRE_ASSET: "BITD.AcquireAsset",
}
