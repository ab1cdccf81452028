"""create-cordova-plugin configuration.

Typed configuration for a generation run.  Process-wide state (the current
working directory, the packaged template location) is captured here once and
then passed explicitly through the scaffolder, so the core never reads it
implicitly.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "templates"


class GeneratorConfig(BaseModel):
    """Settings for a single scaffolding run.

    Attributes:
        root_dir: Directory the plugin folder is created in.
        template_dir: Directory holding the ``.j2`` template assets.
    """

    root_dir: Path = Field(default_factory=Path.cwd)
    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            CORDOVA_PLUGIN_ROOT_DIR, CORDOVA_PLUGIN_TEMPLATE_DIR.
        """
        kwargs: dict[str, Path] = {}
        if os.environ.get("CORDOVA_PLUGIN_ROOT_DIR"):
            kwargs["root_dir"] = Path(os.environ["CORDOVA_PLUGIN_ROOT_DIR"])
        if os.environ.get("CORDOVA_PLUGIN_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["CORDOVA_PLUGIN_TEMPLATE_DIR"])
        return cls(**kwargs)
