import logging
from typing import Any, List

from src.blades.core.crew_modifiers import CrewModifierResolver
from src.blades.core.dice_pools import AttributePoolCalculator
from src.blades.core.dispatcher import RollRequestDispatcher
from src.blades.core.exceptions import RollConfigurationError
from src.blades.core.interfaces import FormDialog
from src.blades.models import (
    MAX_ENGAGEMENT_DICE,
    MAX_EXTRA_THREATS,
    MAX_TIER_CHOICE,
    MODIFIER_RANGE,
    ROLL_LABELS,
    THREAT_POSITIONS,
    VICE_POOL,
    Character,
    DicePoolMap,
    Effect,
    FormField,
    FormOption,
    FormSpec,
    Position,
    ResolutionStatus,
    RollConfiguration,
    RollOutcome,
    RollType,
)
from src.blades.utils.numbers import clamp, to_int, to_number

logger = logging.getLogger(__name__)

# Roll types that are always offered for an action, in dialog order.
ALWAYS_OFFERED = (
    RollType.FORTUNE,
    RollType.GATHER_INFO,
    RollType.INDULGE_VICE,
    RollType.ENGAGEMENT,
    RollType.ACQUIRE_ASSET,
)


def sanitize_default_dice(default_dice: Any) -> int:
    """Whole number of dice in 0..10; anything unparsable is 0."""
    number = to_number(default_dice)
    return clamp(int(number // 1), 0, MAX_ENGAGEMENT_DICE)


def dice_modifier_options(low: int, high: int) -> List[FormOption]:
    """Options like "-3d" ... "+0d" ... "+3d"."""
    return [
        FormOption(value=str(i), label=f"{'+' if i >= 0 else ''}{i}d")
        for i in range(low, high + 1)
    ]


class RollConfigurationStateMachine:
    """
    One roll, from picking the roll type to dispatching the request.

        IDLE -> AWAITING_CONFIRMATION -> RESOLVED | CANCELLED

    The dialog is the only suspension point. A dismissed dialog ends the flow
    in CANCELLED with nothing dispatched. A machine is used once; start a new
    one for the next roll.
    """

    def __init__(
        self,
        character: Character,
        calculator: AttributePoolCalculator,
        crew_modifiers: CrewModifierResolver,
        dialog: FormDialog,
        dispatcher: RollRequestDispatcher,
        action_roll_enabled: bool = True,
        threat_roll_enabled: bool = True,
    ):
        self.character = character
        self.calculator = calculator
        self.crew = crew_modifiers
        self.dialog = dialog
        self.dispatcher = dispatcher
        self.action_roll_enabled = action_roll_enabled
        self.threat_roll_enabled = threat_roll_enabled

        self.status = ResolutionStatus.IDLE
        self.configuration: RollConfiguration | None = None
        self.outcome: RollOutcome | None = None

    # ------------------------------------------------------------
    # Roll type selection
    # ------------------------------------------------------------
    def enabled_roll_types(self) -> List[RollType]:
        offered = []
        if self.action_roll_enabled:
            offered.append(RollType.ACTION)
        if self.threat_roll_enabled:
            offered.append(RollType.THREAT)
        offered.extend(ALWAYS_OFFERED)
        return offered

    def default_roll_type(self) -> RollType:
        return self.enabled_roll_types()[0]

    def build_form(self, target_name: str, is_action: bool, default_dice: int, tier: int) -> FormSpec:
        """The dialog for this roll. Resistance rolls only ask for a modifier and a note."""
        low, high = MODIFIER_RANGE
        inputs = [
            FormField(name="mod", label="BITD.Modifier", options=dice_modifier_options(low, high), default="0"),
        ]

        if is_action:
            inputs.append(FormField(
                name="rollSelection",
                label="Roll Types",
                kind="radio",
                options=[FormOption(value=t.value, label=t.value) for t in self.enabled_roll_types()],
                default=self.default_roll_type().value,
            ))
            if self.action_roll_enabled:
                inputs.append(FormField(
                    name="pos",
                    label="BITD.Position",
                    options=[FormOption(value=p.value, label=p.value) for p in Position],
                    default=Position.RISKY.value,
                ))
                inputs.append(FormField(
                    name="fx",
                    label="BITD.Effect",
                    options=[FormOption(value=e.value, label=e.value) for e in Effect],
                    default=Effect.STANDARD.value,
                ))
            if self.threat_roll_enabled:
                inputs.append(FormField(
                    name="pos2",
                    label="BITD.Position",
                    options=[FormOption(value=p.value, label=p.value) for p in THREAT_POSITIONS],
                    default=Position.RISKY.value,
                ))
                inputs.append(FormField(
                    name="extraThreats",
                    label="BITD.ExtraThreats",
                    options=[FormOption(value=str(i), label=str(i)) for i in range(MAX_EXTRA_THREATS + 1)],
                    default="0",
                ))
            inputs.append(FormField(
                name="qty",
                label="BITD.RollNumberOfDice",
                options=[FormOption(value=str(i), label=f"{i}d") for i in range(MAX_ENGAGEMENT_DICE + 1)],
                default=str(default_dice),
            ))
            inputs.append(FormField(
                name="tier",
                label="BITD.CrewTier",
                options=[FormOption(value=str(i), label=str(i)) for i in range(MAX_TIER_CHOICE + 1)],
                default=str(tier),
            ))

        inputs.append(FormField(name="note", label="BITD.Notes", kind="text", default=""))
        return FormSpec(title=f"Roll {target_name}".strip(), inputs=inputs, ok_label="Roll")

    # ------------------------------------------------------------
    # Flow
    # ------------------------------------------------------------
    async def begin_roll(self, target_name: str, default_dice: Any = 0) -> RollOutcome | None:
        """
        Asks for the roll configuration and dispatches the resulting request.

        Args:
            target_name: Skill, attribute, or "" for a plain one-die roll.
            default_dice: Preselected quantity for an engagement roll.

        Returns:
            The evaluator's outcome, or None if the dialog was dismissed.
        """
        if self.status is not ResolutionStatus.IDLE:
            raise RollConfigurationError(f"Roll flow already {self.status.value}")

        default_dice = sanitize_default_dice(default_dice)
        is_action = self.calculator.is_action(self.character, target_name)
        tier = self.crew.get_tier(self.character)
        spec = self.build_form(target_name, is_action, default_dice, tier)

        self.status = ResolutionStatus.AWAITING_CONFIRMATION
        values = await self.dialog.present(spec)
        if values is None:
            self.status = ResolutionStatus.CANCELLED
            logger.info("Roll for %s on %s cancelled", self.character.id, target_name or "-")
            return None

        self.configuration = RollConfiguration.model_validate(values)
        pools = self.calculator.compute_dice_pools(self.character)

        if is_action:
            self.outcome = await self._dispatch_selection(target_name, self.configuration, pools, default_dice, tier)
        else:
            self.outcome = await self._dispatch_resistance(target_name, self.configuration, pools)
        return self.outcome

    def _selected_roll_type(self, config: RollConfiguration) -> RollType:
        selected = config.roll_type
        if selected is None:
            return self.default_roll_type()
        if selected not in self.enabled_roll_types():
            logger.warning("Roll type %s is disabled, using %s", selected.value, self.default_roll_type().value)
            return self.default_roll_type()
        return selected

    def _stress(self) -> int:
        return to_int(self.character.stress.value)

    async def _dispatch_resistance(self, target_name: str, config: RollConfiguration, pools: DicePoolMap) -> RollOutcome:
        # No target at all rolls a single die.
        base = pools.get(target_name, 0) if target_name else 1
        self.status = ResolutionStatus.RESOLVED
        return await self.dispatcher.dispatch(
            base + config.modifier, target_name, "", "", config.note, self._stress()
        )

    async def _dispatch_selection(
        self,
        target_name: str,
        config: RollConfiguration,
        pools: DicePoolMap,
        default_dice: int,
        tier: int,
    ) -> RollOutcome:
        roll_type = self._selected_roll_type(config)
        action_dice = pools.get(target_name, 0) + config.modifier
        note = config.note
        self.status = ResolutionStatus.RESOLVED

        match roll_type:
            case RollType.ACTION:
                return await self.dispatcher.dispatch(
                    action_dice, target_name, config.position, config.effect, note, self._stress()
                )
            case RollType.THREAT:
                return await self.dispatcher.dispatch(
                    action_dice, ROLL_LABELS[roll_type], config.threat_position, "", note, config.extra_threats
                )
            case RollType.FORTUNE | RollType.GATHER_INFO:
                return await self.dispatcher.dispatch(action_dice, ROLL_LABELS[roll_type], "", "", note)
            case RollType.INDULGE_VICE:
                vice_dice = pools.get(VICE_POOL, 0) + config.modifier
                return await self.dispatcher.dispatch(
                    vice_dice, ROLL_LABELS[roll_type], "", "", note, self._stress()
                )
            case RollType.ENGAGEMENT:
                quantity = default_dice if config.quantity is None else config.quantity
                return await self.dispatcher.dispatch(quantity, ROLL_LABELS[roll_type], "", "", note)
            case RollType.ACQUIRE_ASSET:
                asset_tier = tier if config.tier is None else config.tier
                return await self.dispatcher.dispatch(
                    asset_tier + config.modifier, ROLL_LABELS[roll_type], "", "", note, asset_tier, asset_tier
                )
            case _:
                raise RollConfigurationError(f"Unhandled roll type: {roll_type}")
