"""Native source generation for each supported platform.

Each generator renders one platform template and writes it into the
platform directory from the :class:`LocationPlan`.  Electron additionally
gets its own ``package.json``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from ..models import AnswerSet, Platform
from ..utils import format_and_write_file
from .locations import LocationPlan
from .manifest import electron_manifest, write_manifest
from .templates import TemplateId, TemplateRenderer


class AndroidGenerator:
    """Writes ``<apiName>.kt`` into the Android package directory."""

    platform = Platform.ANDROID

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(
        self,
        plan: LocationPlan,
        answers: AnswerSet,
        context: dict[str, Any],
    ) -> list[Path]:
        # The platform directory is the package location, not src/android.
        content = self.renderer.render(TemplateId.ANDROID, context)
        out = plan.platform_dir(self.platform) / f"{answers.api_name}.kt"
        return [await format_and_write_file(out, content)]


class IosGenerator:
    """Writes ``<apiName>.swift`` into ``src/ios``."""

    platform = Platform.IOS

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(
        self,
        plan: LocationPlan,
        answers: AnswerSet,
        context: dict[str, Any],
    ) -> list[Path]:
        content = self.renderer.render(TemplateId.IOS, context)
        out = plan.platform_dir(self.platform) / f"{answers.api_name}.swift"
        return [await format_and_write_file(out, content)]


class ElectronGenerator:
    """Writes ``package.json`` and ``index.js`` into ``src/electron``."""

    platform = Platform.ELECTRON

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(
        self,
        plan: LocationPlan,
        answers: AnswerSet,
        context: dict[str, Any],
    ) -> list[Path]:
        platform_dir = plan.platform_dir(self.platform)
        manifest_path = await write_manifest(platform_dir, electron_manifest(answers))

        content = self.renderer.render(TemplateId.ELECTRON, context)
        index_path = await format_and_write_file(platform_dir / "index.js", content)
        return [manifest_path, index_path]


PlatformGenerator = Union[AndroidGenerator, IosGenerator, ElectronGenerator]

_GENERATORS: dict[Platform, type[PlatformGenerator]] = {
    Platform.ANDROID: AndroidGenerator,
    Platform.IOS: IosGenerator,
    Platform.ELECTRON: ElectronGenerator,
}


def get_platform_generator(
    platform: Platform | str, renderer: TemplateRenderer
) -> PlatformGenerator:
    """Return the generator for *platform*, sharing *renderer*."""
    return _GENERATORS[Platform(platform)](renderer)
