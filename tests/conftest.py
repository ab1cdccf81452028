"""Shared pytest fixtures for the create-cordova-plugin test suite.

Provides reusable fixtures for:
- Answer sets for the common platform selections
- A generator configuration rooted in a temporary directory
- A stub TemplateRenderer that records render calls
- Patched questionary prompts with scripted answers
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from create_cordova_plugin.config import GeneratorConfig
from create_cordova_plugin.models import AnswerSet
from create_cordova_plugin.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Answer sets
# ---------------------------------------------------------------------------

BASE_ANSWERS: dict[str, Any] = {
    "id": "cordova-plugin-sample",
    "name": "Cordova Sample Plugin",
    "description": "A sample Cordova plugin.",
    "license": "MIT",
    "author": "",
    "api_name": "SamplePlugin",
}


@pytest.fixture
def ios_answers() -> AnswerSet:
    """Answers selecting only iOS."""
    return AnswerSet(**BASE_ANSWERS, platforms=["ios"])


@pytest.fixture
def android_answers() -> AnswerSet:
    """Answers selecting only Android."""
    return AnswerSet(
        **BASE_ANSWERS,
        platforms=["android"],
        android_package="com.example.sampleplugin",
    )


@pytest.fixture
def all_platform_answers() -> AnswerSet:
    """Answers selecting every platform, with an author set."""
    return AnswerSet(
        **{**BASE_ANSWERS, "author": "Jane Doe"},
        platforms=["android", "ios", "electron"],
        android_package="com.example.sampleplugin",
    )


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def generator_config(tmp_path: Path) -> GeneratorConfig:
    """Configuration that generates into a temporary directory."""
    return GeneratorConfig(root_dir=tmp_path)


# ---------------------------------------------------------------------------
# Renderer stub
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_renderer() -> MagicMock:
    """A mock TemplateRenderer that returns a marker line per template."""
    renderer = MagicMock(spec=TemplateRenderer)

    def mock_render(template_id, context):
        name = getattr(template_id, "value", template_id)
        return f"// Rendered from {name}   \n\n\n"

    renderer.render = MagicMock(side_effect=mock_render)
    return renderer


# ---------------------------------------------------------------------------
# Scripted prompts
# ---------------------------------------------------------------------------

def _question(value: Any) -> MagicMock:
    question = MagicMock()
    if isinstance(value, BaseException):
        question.unsafe_ask.side_effect = value
    else:
        question.unsafe_ask.return_value = value
    return question


@pytest.fixture
def scripted_prompts():
    """Patch questionary so each prompt returns a scripted answer.

    Usage:
        def test_something(scripted_prompts):
            with scripted_prompts({"ID (npm package & directory name):": "my-plugin"}) as calls:
                answers = gather_plugin_info()

    Prompts missing from the script answer with their default.  Values that
    are exceptions are raised from ``unsafe_ask``.  ``calls`` records
    ``(kind, message, kwargs)`` for every prompt created.
    """

    def _factory(script: dict[str, Any], platforms: list[str] | None = None):
        calls: list[tuple[str, str, dict[str, Any]]] = []

        def fake_text(message: str, **kwargs: Any) -> MagicMock:
            calls.append(("text", message, kwargs))
            return _question(script.get(message, kwargs.get("default", "")))

        def fake_checkbox(message: str, **kwargs: Any) -> MagicMock:
            calls.append(("checkbox", message, kwargs))
            if message in script:
                return _question(script[message])
            return _question(list(platforms if platforms is not None else ["android", "ios"]))

        class _Patched:
            def __enter__(self):
                self._patches = [
                    patch("create_cordova_plugin.prompts.questionary.text", side_effect=fake_text),
                    patch(
                        "create_cordova_plugin.prompts.questionary.checkbox",
                        side_effect=fake_checkbox,
                    ),
                    patch("create_cordova_plugin.prompts.print_banner"),
                ]
                for p in self._patches:
                    p.start()
                return calls

            def __exit__(self, *exc_info):
                for p in reversed(self._patches):
                    p.stop()
                return False

        return _Patched()

    return _factory
