"""Main scaffolding orchestrator.

Takes an ``AnswerSet`` and generates a complete Cordova plugin directory:
``package.json``, ``plugin.xml``, the frontend API in ``www/`` and the
native sources for each selected platform.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from ..config import GeneratorConfig
from ..models import AnswerSet, Platform
from ..utils import format_and_write_file
from .locations import LocationPlan, materialize_locations, plan_locations
from .manifest import plugin_manifest, write_manifest
from .platforms import get_platform_generator
from .templates import TemplateId, TemplateRenderer, build_render_context

# Native sources are written in this order; each step is independent.
PLATFORM_ORDER: tuple[Platform, ...] = (Platform.IOS, Platform.ANDROID, Platform.ELECTRON)


class GenerationResult(BaseModel):
    """Outcome of a successful generation run."""

    plugin_dir: Path
    plan: LocationPlan
    files: list[Path] = Field(default_factory=list, description="Written files, in write order")


class PluginGenerator:
    """Scaffolding orchestrator.

    Given the collected answers, generates:
    - the plugin ``package.json`` with its ``cordova`` section
    - ``plugin.xml`` with one ``<platform>`` block per selected platform
    - ``www/<apiName>.js`` frontend API
    - Kotlin, Swift and Electron service stubs for the selected platforms
    """

    def __init__(self, answers: AnswerSet, config: Optional[GeneratorConfig] = None) -> None:
        self.answers = answers
        self.config = config or GeneratorConfig()
        self.renderer = TemplateRenderer(self.config.template_dir)
        self.context = build_render_context(answers)

    # -- Public API --------------------------------------------------------

    async def generate(self) -> GenerationResult:
        """Generate the complete plugin structure.

        Steps run strictly one after another; a failure aborts the run and
        may leave a partially populated directory behind.

        Returns:
            The plugin directory, the location plan and the written files.
        """
        # 1. Derive every location from the answers
        plan = plan_locations(self.answers, self.config.root_dir)

        # 2. Create all directories
        await materialize_locations(plan)

        files: list[Path] = []

        # 3. <plugin>/package.json
        files.append(await write_manifest(plan.plugin_dir, plugin_manifest(self.answers)))

        # 4. plugin.xml
        files.append(await self.generate_plugin_xml(plan))

        # 5. Frontend API
        files.append(await self.generate_frontend_api(plan))

        # 6. Native sources for the selected platforms
        for platform in PLATFORM_ORDER:
            if self.answers.has_platform(platform):
                generator = get_platform_generator(platform, self.renderer)
                files.extend(await generator.generate(plan, self.answers, self.context))

        return GenerationResult(plugin_dir=plan.plugin_dir, plan=plan, files=files)

    async def generate_plugin_xml(self, plan: LocationPlan) -> Path:
        """Render ``plugin.xml`` into the plugin root."""
        content = self.renderer.render(TemplateId.PLUGIN_XML, self.context)
        return await format_and_write_file(plan.plugin_dir / "plugin.xml", content)

    async def generate_frontend_api(self, plan: LocationPlan) -> Path:
        """Render the JavaScript API the app calls into ``www/``."""
        content = self.renderer.render(TemplateId.API, self.context)
        return await format_and_write_file(plan.www_dir / f"{self.answers.api_name}.js", content)
