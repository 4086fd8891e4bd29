from src.blades.config.settings import Settings
from src.blades.core.crew_modifiers import CrewModifierResolver
from src.blades.core.dice_pools import AttributePoolCalculator
from src.blades.core.dispatcher import RollRequestDispatcher
from src.blades.core.exceptions import BladesError, RollConfigurationError, CharacterNotFoundError
from src.blades.core.interfaces import CharacterRegistry, FormDialog, RollEvaluator
from src.blades.core.registry import InMemoryRegistry
from src.blades.core.roll_configuration import RollConfigurationStateMachine
from src.blades.core.roll_controller import RollController
from src.blades.core.rules_engine import BladesRulesEngine


def initialize_roll_controller(
    registry: CharacterRegistry,
    dialog: FormDialog,
    evaluator: RollEvaluator | None = None,
    settings: Settings | None = None,
) -> RollController:
    """Instantiate all roll components and return the RollController."""

    # Initialize core systems
    crew_modifiers = CrewModifierResolver(registry)
    calculator = AttributePoolCalculator(crew_modifiers)
    dispatcher = RollRequestDispatcher(evaluator or BladesRulesEngine())
    # Create and return the roll controller
    controller = RollController(
        registry=registry,
        crew_modifiers=crew_modifiers,
        calculator=calculator,
        dialog=dialog,
        dispatcher=dispatcher,
        settings=settings,
    )

    return controller

__all__ = [
    'BladesError',
    'RollConfigurationError',
    'CharacterNotFoundError',
    'CharacterRegistry',
    'FormDialog',
    'RollEvaluator',
    'InMemoryRegistry',
    'CrewModifierResolver',
    'AttributePoolCalculator',
    'RollRequestDispatcher',
    'RollConfigurationStateMachine',
    'RollController',
    'BladesRulesEngine',
    'initialize_roll_controller'
]
