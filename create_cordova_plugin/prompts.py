"""Interactive collection of plugin metadata.

Asks the plugin author a fixed sequence of questions with questionary and
returns a validated :class:`~create_cordova_plugin.models.AnswerSet`.
"""

from __future__ import annotations

from typing import Any

import questionary

from .models import AnswerSet, Platform, is_valid_android_package, is_valid_plugin_id
from .utils import print_banner

WELCOME_MESSAGE = "Welcome to the Cordova Plugin initializer tool!"

DEFAULT_ANSWERS: dict[str, Any] = {
    "id": "cordova-plugin-sample",
    "name": "Cordova Sample Plugin",
    "description": "A sample Cordova plugin.",
    "license": "MIT",
    "author": "",
    "platforms": [Platform.IOS, Platform.ANDROID],
    "api_name": "SamplePlugin",
    "android_package": "com.example.sampleplugin",
}


class PromptCancelledError(Exception):
    """Raised when the user aborts the interactive session."""


# ---------------------------------------------------------------------------
# Validators (questionary expects ``True`` or an error message)
# ---------------------------------------------------------------------------


def validate_plugin_id(value: str) -> bool | str:
    if is_valid_plugin_id(value):
        return True
    return "Use lowercase letters and digits, with segments joined by '-' or '.'"


def validate_android_package(value: str) -> bool | str:
    if is_valid_android_package(value):
        return True
    return "Use lowercase dot-separated segments that each start with a letter (e.g. com.example.app)"


# ---------------------------------------------------------------------------
# Prompt construction
# ---------------------------------------------------------------------------


def platform_choices() -> list[questionary.Choice | questionary.Separator]:
    """Build the grouped checkbox choices for the platform prompt."""
    choices: list[questionary.Choice | questionary.Separator] = []
    group = None
    for platform in Platform:
        if platform.group != group:
            group = platform.group
            choices.append(questionary.Separator(group))
        choices.append(
            questionary.Choice(
                platform.label,
                value=platform.value,
                checked=platform in DEFAULT_ANSWERS["platforms"],
            )
        )
    return choices


def _ask(question: questionary.Question) -> Any:
    """Ask *question*, turning an interrupt into :class:`PromptCancelledError`."""
    try:
        return question.unsafe_ask()
    except (KeyboardInterrupt, EOFError) as exc:
        raise PromptCancelledError("prompt cancelled by user") from exc


def gather_plugin_info() -> AnswerSet:
    """Gather the information used to create the plugin structure and files.

    Returns:
        The validated answers.

    Raises:
        PromptCancelledError: If the user cancels any prompt.
    """
    print_banner(WELCOME_MESSAGE)

    answers: dict[str, Any] = {
        "id": _ask(
            questionary.text(
                "ID (npm package & directory name):",
                default=DEFAULT_ANSWERS["id"],
                validate=validate_plugin_id,
            )
        ),
        "name": _ask(questionary.text("Readable Name:", default=DEFAULT_ANSWERS["name"])),
        "description": _ask(
            questionary.text("Description:", default=DEFAULT_ANSWERS["description"])
        ),
        "license": _ask(
            questionary.text("License (SPDX format):", default=DEFAULT_ANSWERS["license"])
        ),
        "author": _ask(questionary.text("Author:", default=DEFAULT_ANSWERS["author"])),
        "platforms": _ask(
            questionary.checkbox("Supported Platform:", choices=platform_choices())
        ),
        "api_name": _ask(questionary.text("API Name:", default=DEFAULT_ANSWERS["api_name"])),
    }

    # Android needs a package name for the native source location.
    if Platform.ANDROID.value in answers["platforms"]:
        answers["android_package"] = _ask(
            questionary.text(
                "Android Package Name:",
                default=DEFAULT_ANSWERS["android_package"],
                validate=validate_android_package,
            )
        )

    return AnswerSet(**answers)
