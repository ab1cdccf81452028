"""On-disk layout of a generated plugin.

``plan_locations`` derives every directory the scaffolder writes into from
the answers and a root directory; ``materialize_locations`` creates them.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from ..models import AnswerSet, Platform
from ..utils import ensure_dir


def platform_key(platform: Platform | str) -> str:
    """Return the location key for *platform*, e.g. ``platformAndroid``.

    Only the first letter is upper-cased (``ios`` -> ``platformIos``).
    """
    name = platform.value if isinstance(platform, Platform) else platform
    return f"platform{name[:1].upper()}{name[1:]}"


class LocationPlan(BaseModel):
    """Absolute paths of every directory of the plugin being generated.

    All paths are descendants of ``plugin_dir``.  For Android the platform
    directory is the package location, e.g.
    ``<plugin>/src/android/com/example/sampleplugin``.
    """

    model_config = ConfigDict(frozen=True)

    plugin_dir: Path
    src_dir: Path
    www_dir: Path
    platform_dirs: dict[str, Path]

    def as_dict(self) -> dict[str, Path]:
        """Return a ``{logical name: path}`` mapping, base locations first."""
        return {
            "pluginDir": self.plugin_dir,
            "srcDir": self.src_dir,
            "wwwDir": self.www_dir,
            **self.platform_dirs,
        }

    def platform_dir(self, platform: Platform | str) -> Path:
        """Return the directory planned for *platform*.

        Raises:
            KeyError: If the platform was not selected.
        """
        return self.platform_dirs[platform_key(platform)]


def plan_locations(answers: AnswerSet, root_dir: str | Path) -> LocationPlan:
    """Derive the plugin layout for *answers* under *root_dir*."""
    plugin_dir = (Path(root_dir) / answers.id).resolve()
    src_dir = plugin_dir / "src"
    www_dir = plugin_dir / "www"

    platform_dirs: dict[str, Path] = {}
    for platform in answers.platforms:
        if platform is Platform.ANDROID:
            platform_dir = src_dir.joinpath(platform.value, *answers.android_package.split("."))
        else:
            platform_dir = src_dir / platform.value
        platform_dirs[platform_key(platform)] = platform_dir

    return LocationPlan(
        plugin_dir=plugin_dir,
        src_dir=src_dir,
        www_dir=www_dir,
        platform_dirs=platform_dirs,
    )


async def materialize_locations(plan: LocationPlan) -> list[Path]:
    """Create every planned directory, one after another.

    Existing directories are left untouched.  Any other filesystem error
    (permission denied, a file in the way) propagates.

    Returns:
        The directories, in creation order.
    """
    created: list[Path] = []
    for path in plan.as_dict().values():
        created.append(await ensure_dir(path))
    return created
