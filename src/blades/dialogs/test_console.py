"""
Tests for the terminal roll dialog.
"""

import asyncio

from src.blades.dialogs import ConsoleFormDialog
from src.blades.models import FormField, FormOption, FormSpec


def make_spec():
    return FormSpec(
        title="Roll hunt",
        inputs=[
            FormField(
                name="mod",
                label="BITD.Modifier",
                options=[FormOption(value=str(i), label=f"{i}d") for i in range(-1, 2)],
                default="0",
            ),
            FormField(name="note", label="BITD.Notes", kind="text", default=""),
        ],
        ok_label="Roll",
    )


def scripted(answers):
    answers = list(answers)
    output = []

    def prompt(text):
        if not answers:
            raise EOFError
        return answers.pop(0)

    return ConsoleFormDialog(prompt=prompt, output=output.append), output


def test_blank_answers_keep_defaults():
    dialog, _ = scripted(["", "", ""])
    assert asyncio.run(dialog.present(make_spec())) == {"mod": "0", "note": ""}


def test_answers_are_returned():
    dialog, _ = scripted(["1", "quietly", "y"])
    assert asyncio.run(dialog.present(make_spec())) == {"mod": "1", "note": "quietly"}


def test_invalid_choice_is_asked_again():
    dialog, output = scripted(["7", "-1", "", ""])

    assert asyncio.run(dialog.present(make_spec()))["mod"] == "-1"
    assert any("'7' is not one of" in line for line in output)


def test_cancel_word_dismisses():
    dialog, _ = scripted(["cancel"])
    assert asyncio.run(dialog.present(make_spec())) is None


def test_declining_confirmation_dismisses():
    dialog, _ = scripted(["", "", "n"])
    assert asyncio.run(dialog.present(make_spec())) is None


def test_eof_dismisses():
    dialog, _ = scripted(["1"])
    assert asyncio.run(dialog.present(make_spec())) is None


def test_cancel_label_declines_confirmation():
    spec = make_spec()
    spec.cancel_label = "Abort"
    prompts = []
    answers = ["", "", "abort"]

    def prompt(text):
        prompts.append(text)
        return answers.pop(0)

    dialog = ConsoleFormDialog(prompt=prompt, output=lambda line: None)

    assert asyncio.run(dialog.present(spec)) is None
    assert prompts[-1] == "Roll? [Y/n/Abort] "
