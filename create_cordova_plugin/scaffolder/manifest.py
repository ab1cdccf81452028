"""``package.json`` generation for the plugin and its Electron service.

The plugin manifest and the Electron manifest share the same base fields;
only the name, keywords and the ``cordova`` section differ.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from ..models import AnswerSet
from ..utils import format_and_write_file

MANIFEST_FILENAME = "package.json"
PLUGIN_VERSION = "1.0.0"
BASE_KEYWORDS: list[str] = ["cordova", "plugin"]
ELECTRON_KEYWORDS: list[str] = ["electron", "native"]


# ---------------------------------------------------------------------------
# Manifest document
# ---------------------------------------------------------------------------


class ManifestDocument(BaseModel):
    """The fields written to a generated ``package.json``, in output order."""

    name: str
    version: str = Field(default=PLUGIN_VERSION)
    description: str = Field(default="")
    main: str = Field(default="index.js")
    keywords: list[str] = Field(default_factory=lambda: list(BASE_KEYWORDS))
    author: str = Field(default="")
    license: str = Field(default="")
    cordova: dict[str, Any] = Field(default_factory=dict)


def build_base_manifest(answers: AnswerSet) -> ManifestDocument:
    """Build the fields shared by every manifest of the plugin."""
    return ManifestDocument(
        name=answers.id,
        description=answers.description,
        author=answers.author,
        license=answers.license,
    )


def plugin_manifest(answers: AnswerSet) -> ManifestDocument:
    """Manifest for the plugin root, listing the id and selected platforms."""
    return build_base_manifest(answers).model_copy(
        update={
            "cordova": {
                "id": answers.id,
                "platforms": [p.value for p in answers.platforms],
            }
        }
    )


def electron_manifest(answers: AnswerSet) -> ManifestDocument:
    """Manifest for ``src/electron``, naming the service the frontend calls."""
    base = build_base_manifest(answers)
    return base.model_copy(
        update={
            "name": f"{base.name}-electron",
            "keywords": [*base.keywords, *ELECTRON_KEYWORDS],
            "cordova": {"serviceName": answers.api_name},
        }
    )


# ---------------------------------------------------------------------------
# Manifest file builder
# ---------------------------------------------------------------------------


class PackageManifest:
    """A ``package.json`` file in *directory*, held in memory until saved."""

    def __init__(self, directory: str | Path, data: dict[str, Any] | None = None) -> None:
        self.directory = Path(directory)
        self._data: dict[str, Any] = dict(data or {})

    @property
    def path(self) -> Path:
        return self.directory / MANIFEST_FILENAME

    @property
    def content(self) -> dict[str, Any]:
        return self._data

    @classmethod
    def create(cls, directory: str | Path, data: dict[str, Any]) -> "PackageManifest":
        """Start a new manifest with *data*, ignoring any file already on disk."""
        return cls(directory, data)

    @classmethod
    def load(cls, directory: str | Path) -> "PackageManifest":
        """Read the existing ``package.json`` in *directory*.

        Raises:
            FileNotFoundError: If there is no manifest in *directory*.
            json.JSONDecodeError: If the manifest is not valid JSON.
        """
        path = Path(directory) / MANIFEST_FILENAME
        return cls(directory, json.loads(path.read_text(encoding="utf-8")))

    def update(self, data: dict[str, Any]) -> "PackageManifest":
        """Shallow-merge *data* into the manifest."""
        self._data.update(data)
        return self

    async def save(self) -> Path:
        """Write the manifest as 2-space indented JSON and return its path."""
        content = json.dumps(self._data, indent=2, ensure_ascii=False)
        return await format_and_write_file(self.path, content)


async def write_manifest(directory: str | Path, document: ManifestDocument) -> Path:
    """Create ``package.json`` in *directory* from *document*."""
    manifest = PackageManifest.create(directory, document.model_dump())
    return await manifest.save()
