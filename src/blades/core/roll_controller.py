import logging
from typing import Any

from src.blades.config.settings import Settings, settings as default_settings
from src.blades.core.crew_modifiers import CrewModifierResolver
from src.blades.core.dice_pools import AttributePoolCalculator
from src.blades.core.dispatcher import RollRequestDispatcher
from src.blades.core.exceptions import CharacterNotFoundError
from src.blades.core.interfaces import CharacterRegistry, FormDialog
from src.blades.core.roll_configuration import RollConfigurationStateMachine
from src.blades.models import Character, RollOutcome

logger = logging.getLogger(__name__)


class RollController:
    """
    Entry point for a character sheet's roll buttons.
    Each roll gets its own state machine, so flows never share state.
    """

    def __init__(
        self,
        registry: CharacterRegistry,
        crew_modifiers: CrewModifierResolver,
        calculator: AttributePoolCalculator,
        dialog: FormDialog,
        dispatcher: RollRequestDispatcher,
        settings: Settings | None = None,
    ):
        self.registry = registry
        self.crew = crew_modifiers
        self.calculator = calculator
        self.dialog = dialog
        self.dispatcher = dispatcher
        self.settings = settings or default_settings
        self.last_flow: RollConfigurationStateMachine | None = None

    def get_character(self, character: Character | str) -> Character:
        if isinstance(character, Character):
            return character
        record = self.registry.lookup(character)
        if not isinstance(record, Character):
            raise CharacterNotFoundError(f"No character with id {character!r}")
        return record

    def new_flow(self, character: Character) -> RollConfigurationStateMachine:
        return RollConfigurationStateMachine(
            character=character,
            calculator=self.calculator,
            crew_modifiers=self.crew,
            dialog=self.dialog,
            dispatcher=self.dispatcher,
            action_roll_enabled=self.settings.action_roll_enabled,
            threat_roll_enabled=self.settings.threat_roll_enabled,
        )

    async def begin_roll(self, character: Character | str, target_name: str, default_dice: Any = 0) -> RollOutcome | None:
        """Runs one roll flow; None means the player dismissed the dialog."""
        sheet = self.get_character(character)
        flow = self.new_flow(sheet)
        self.last_flow = flow
        logger.debug("Starting roll flow for %s on %s", sheet.id, target_name or "-")
        return await flow.begin_roll(target_name, default_dice)
