"""Pydantic v2 models for the answers collected from the plugin author.

Defines the supported target platforms and the validated, immutable
``AnswerSet`` that every downstream scaffolding step consumes.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Validation patterns
# ---------------------------------------------------------------------------

PLUGIN_ID_PATTERN = re.compile(r"^[a-z0-9]+(?:[-.][a-z0-9]+)*$")
ANDROID_PACKAGE_PATTERN = re.compile(r"^[a-z][a-z0-9_]*(\.[a-z][a-z0-9_]*)*$")


def is_valid_plugin_id(value: str) -> bool:
    """Return ``True`` if *value* is a valid plugin id / npm package name."""
    return bool(PLUGIN_ID_PATTERN.match(value))


def is_valid_android_package(value: str) -> bool:
    """Return ``True`` if *value* is a lowercase, dot-separated Java package."""
    return bool(ANDROID_PACKAGE_PATTERN.match(value))


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Platform(str, Enum):
    """Target platforms a generated plugin can support."""
    ANDROID = "android"
    IOS = "ios"
    ELECTRON = "electron"

    @property
    def label(self) -> str:
        """Human-readable name shown in the platform prompt."""
        return _PLATFORM_LABELS[self]

    @property
    def group(self) -> str:
        """Display group the platform is listed under."""
        return _PLATFORM_GROUPS[self]


_PLATFORM_LABELS: dict[Platform, str] = {
    Platform.ANDROID: "Android",
    Platform.IOS: "iOS",
    Platform.ELECTRON: "Electron",
}

_PLATFORM_GROUPS: dict[Platform, str] = {
    Platform.ANDROID: "Mobile",
    Platform.IOS: "Mobile",
    Platform.ELECTRON: "Desktop",
}


# ---------------------------------------------------------------------------
# Answer set
# ---------------------------------------------------------------------------

class AnswerSet(BaseModel):
    """The validated plugin configuration gathered from the user."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Plugin id, also the npm package and directory name")
    name: str = Field(default="", description="Readable plugin name")
    description: str = Field(default="", description="Short plugin description")
    license: str = Field(default="MIT", description="SPDX license identifier")
    author: str = Field(default="", description="Plugin author")
    platforms: list[Platform] = Field(
        default_factory=list, description="Supported platforms, in selection order"
    )
    api_name: str = Field(..., description="Name used for generated classes and files")
    android_package: Optional[str] = Field(
        default=None, description="Android package name, only set when Android is selected"
    )

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: str) -> str:
        if not is_valid_plugin_id(value):
            raise ValueError(
                f"invalid plugin id {value!r}: use lowercase alphanumeric segments "
                "joined by '-' or '.'"
            )
        return value

    @field_validator("platforms")
    @classmethod
    def _dedupe_platforms(cls, value: list[Platform]) -> list[Platform]:
        seen: list[Platform] = []
        for platform in value:
            if platform not in seen:
                seen.append(platform)
        return seen

    @model_validator(mode="before")
    @classmethod
    def _drop_unused_android_package(cls, data: Any) -> Any:
        # The package name is only meaningful when Android is a target.
        if not isinstance(data, dict):
            return data
        selected = [str(getattr(p, "value", p)) for p in data.get("platforms") or []]
        if Platform.ANDROID.value not in selected:
            data = {k: v for k, v in data.items() if k != "android_package"}
        return data

    @model_validator(mode="after")
    def _check_android_package(self) -> "AnswerSet":
        if Platform.ANDROID not in self.platforms:
            return self
        if self.android_package is None:
            raise ValueError("android_package is required when Android is selected")
        if not is_valid_android_package(self.android_package):
            raise ValueError(f"invalid Android package name {self.android_package!r}")
        return self

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def android_package_path(self) -> Optional[str]:
        """The Android package as a ``/``-separated path, e.g. ``com/example/app``."""
        if self.android_package is None:
            return None
        return "/".join(self.android_package.split("."))

    def has_platform(self, platform: Platform) -> bool:
        return platform in self.platforms
