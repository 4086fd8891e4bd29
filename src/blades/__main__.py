"""Entry point for the roll dialog console."""

import asyncio

from src.blades.config.settings import settings
from src.blades.utils.logging import setup_logging
from src.blades.core import initialize_roll_controller, RollController
from src.blades.dialogs import ConsoleFormDialog
from src.blades.models import Character, RollOutcome
from src.blades.scenarios import create_sample_crew


# ─────────────────────────────────────────────────────────────────────────────
# Roll Loop
# ─────────────────────────────────────────────────────────────────────────────
def get_player_input() -> str | None:
    """Get input from the player, handling EOF and interrupts."""
    try:
        text = input("\nRoll what? > ").strip()
        return text if text else None
    except (EOFError, KeyboardInterrupt):
        return "quit"


def describe_outcome(outcome: RollOutcome | None) -> str:
    if outcome is None:
        return "(Roll cancelled)"
    request = outcome.request
    dice = " ".join(str(d) for d in outcome.dice)
    line = f"{request.label}: {request.dice_count}d -> [{dice}] {outcome.result} {outcome.outcome.value.upper()}"
    if request.position or request.effect:
        line += f" ({request.position or '-'} / {request.effect or '-'})"
    if request.note:
        line += f" \"{request.note}\""
    return line


def print_sheet(controller: RollController, character: Character) -> None:
    pools = controller.calculator.compute_dice_pools(character)
    print(f"{character.name}  stress {character.stress.value}/{controller.crew.get_max_stress(character):g}"
          f"  trauma {character.trauma.value}/{controller.crew.get_max_trauma(character):g}")
    for group, options in controller.calculator.list_actions(character):
        print(f"  {group}: " + ", ".join(f"{label} {pools.get(value, 0)}d" for value, label in options))


def roll_loop(controller: RollController, character: Character) -> None:
    """Main loop - roll until quit."""

    while True:
        player_input = get_player_input()

        if player_input is None:
            print("(Type a skill or attribute, 'sheet', or 'quit')")
            continue

        command_lower = player_input.lower()

        if command_lower in ("quit", "exit", "q"):
            print("Stay out of the Ink Rakes.")
            break

        if command_lower == "sheet":
            print_sheet(controller, character)
            continue

        # "roll" on its own throws a single die
        target = "" if command_lower == "roll" else command_lower
        outcome = asyncio.run(controller.begin_roll(character, target))
        print(describe_outcome(outcome))


def main() -> None:
    """Main entry point."""
    # Setup logging
    logger = setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        enable_color=settings.enable_color,
    )

    logger.info("Starting roll console")
    logger.debug(f"Configuration: {settings}")

    registry = create_sample_crew()
    character = registry.characters()[0]
    controller = initialize_roll_controller(registry, ConsoleFormDialog(), settings=settings)
    print(f"Rolling for {character.name}. Type 'sheet' to see dice pools.")
    print_sheet(controller, character)
    roll_loop(controller, character)


if __name__ == "__main__":
    main()
