import logging

from src.blades.core.interfaces import RollEvaluator
from src.blades.models import Effect, Position, RollOutcome, RollRequest

logger = logging.getLogger(__name__)


class RollRequestDispatcher:
    """
    Packages a chosen dice count and its context into a RollRequest and hands it
    to the evaluator. Nothing is validated or interpreted here.
    """

    def __init__(self, evaluator: RollEvaluator):
        self.evaluator = evaluator

    async def dispatch(
        self,
        dice_count: int,
        label: str,
        position: Position | str = "",
        effect: Effect | str = "",
        note: str = "",
        extra_payload: int | None = None,
        tier: int | None = None,
    ) -> RollOutcome:
        request = RollRequest(
            dice_count=dice_count,
            label=label,
            position=position,
            effect=effect,
            note=note,
            extra_payload=extra_payload,
            tier=tier,
        )
        logger.info(
            "Dispatching roll: %s %dd position=%s effect=%s payload=%s tier=%s",
            request.label,
            request.dice_count,
            request.position or "-",
            request.effect or "-",
            request.extra_payload,
            request.tier,
        )
        return await self.evaluator.evaluate(request)
