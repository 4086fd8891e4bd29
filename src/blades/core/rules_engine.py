import logging
import random
from typing import List

from src.blades.core.interfaces import RollEvaluator
from src.blades.models import OutcomeType, RollOutcome, RollRequest

logger = logging.getLogger(__name__)

# ============================================================
# RULES ENGINE
# ============================================================

class BladesRulesEngine(RollEvaluator):
    """
    Reference evaluator for d6 pools: throw the pool, keep the highest die.
    With zero (or fewer) dice, throw two and keep the lowest.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def roll_pool(self, dice_count: int) -> List[int]:
        """Throws `dice_count` d6, or two when the pool is empty."""
        count = dice_count if dice_count > 0 else 2
        return [self.rng.randint(1, 6) for _ in range(count)]

    def read_pool(self, dice: List[int], zero_dice: bool) -> tuple[int, OutcomeType, bool]:
        """
        Reads thrown dice:
            6 -> success, 4-5 -> partial, 1-3 -> failure
            two or more 6s -> critical (never on a zero-dice roll)
        """
        result = min(dice) if zero_dice else max(dice)
        critical = not zero_dice and dice.count(6) >= 2

        if critical:
            outcome = OutcomeType.CRITICAL
        elif result == 6:
            outcome = OutcomeType.SUCCESS
        elif result >= 4:
            outcome = OutcomeType.PARTIAL
        else:
            outcome = OutcomeType.FAILURE
        return result, outcome, critical

    async def evaluate(self, request: RollRequest) -> RollOutcome:
        zero_dice = request.dice_count <= 0
        dice = self.roll_pool(request.dice_count)
        result, outcome, critical = self.read_pool(dice, zero_dice)

        logger.debug("Rolled %s for %s -> %s", dice, request.label, outcome.value)
        return RollOutcome(
            request=request,
            dice=dice,
            result=result,
            outcome=outcome,
            critical=critical,
        )
