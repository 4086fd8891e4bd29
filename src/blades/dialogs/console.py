"""Terminal implementation of the roll dialog."""

import asyncio
import logging
from typing import Any, Callable, Dict

from src.blades.core.interfaces import FormDialog
from src.blades.models import FormField, FormSpec

logger = logging.getLogger(__name__)

CANCEL_WORDS = ("cancel", "close", "q")


class DialogCancelled(Exception):
    """Raised internally when the player backs out of a prompt."""


class ConsoleFormDialog(FormDialog):
    """
    Asks each form field in turn on the terminal.

    Blank answers keep the field's default. Typing "cancel" (or EOF) at any
    prompt dismisses the whole dialog, as does answering the final prompt
    with "n" or the cancel label.
    """

    def __init__(
        self,
        prompt: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.prompt = prompt
        self.output = output

    async def present(self, spec: FormSpec) -> Dict[str, Any] | None:
        self.output(f"\n== {spec.title} ==")
        values: Dict[str, Any] = {}
        try:
            for field in spec.inputs:
                values[field.name] = await self._ask(field)
            answer = (await self._read(f"{spec.ok_label}? [Y/n/{spec.cancel_label}] ")).lower()
        except DialogCancelled:
            logger.debug("Dialog %r dismissed", spec.title)
            return None

        if answer in ("n", "no", spec.cancel_label.lower()):
            return None
        return values

    async def _read(self, text: str) -> str:
        try:
            answer = await asyncio.to_thread(self.prompt, text)
        except EOFError:
            raise DialogCancelled()
        answer = answer.strip()
        if answer.lower() in CANCEL_WORDS:
            raise DialogCancelled()
        return answer

    async def _ask(self, field: FormField) -> Any:
        if field.options:
            choices = ", ".join(
                option.value if option.value == option.label else f"{option.value}={option.label}"
                for option in field.options
            )
            self.output(f"{field.label}: {choices}")

        allowed = [option.value for option in field.options]
        while True:
            default = "" if field.default is None else f" [{field.default}]"
            answer = await self._read(f"{field.name}{default}: ")
            if not answer:
                return field.default
            if not allowed or answer in allowed:
                return answer
            self.output(f"'{answer}' is not one of: {', '.join(allowed)}")
