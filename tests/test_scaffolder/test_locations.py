"""Tests for the plugin location planner and directory materializer.

Covers:
- platform_key naming
- plan_locations for each platform selection
- Android package directory derivation
- Descendant invariant
- materialize_locations (idempotent creation, error propagation)
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from create_cordova_plugin.models import AnswerSet, Platform
from create_cordova_plugin.scaffolder.locations import (
    LocationPlan,
    materialize_locations,
    plan_locations,
    platform_key,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# platform_key
# ---------------------------------------------------------------------------


class TestPlatformKey:
    def test_enum(self):
        assert platform_key(Platform.ANDROID) == "platformAndroid"
        assert platform_key(Platform.IOS) == "platformIos"
        assert platform_key(Platform.ELECTRON) == "platformElectron"

    def test_string(self):
        assert platform_key("ios") == "platformIos"

    def test_only_first_letter_upper_cased(self):
        assert platform_key("webOS") == "platformWebOS"


# ---------------------------------------------------------------------------
# plan_locations
# ---------------------------------------------------------------------------


class TestPlanLocations:
    def test_base_locations(self, ios_answers, tmp_path):
        plan = plan_locations(ios_answers, tmp_path)
        assert plan.plugin_dir == (tmp_path / "cordova-plugin-sample").resolve()
        assert plan.src_dir == plan.plugin_dir / "src"
        assert plan.www_dir == plan.plugin_dir / "www"

    def test_plugin_dir_is_absolute(self, ios_answers, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        plan = plan_locations(ios_answers, ".")
        assert plan.plugin_dir.is_absolute()
        assert plan.plugin_dir.name == "cordova-plugin-sample"

    @pytest.mark.parametrize("plugin_id", ["a", "cordova-plugin-x", "my.plugin-2"])
    def test_plugin_dir_ends_with_id(self, plugin_id, tmp_path):
        answers = AnswerSet(id=plugin_id, api_name="X")
        plan = plan_locations(answers, tmp_path)
        assert plan.plugin_dir.name == plugin_id
        assert plan.src_dir.parent == plan.plugin_dir
        assert plan.www_dir.parent == plan.plugin_dir

    def test_ios_dir(self, ios_answers, tmp_path):
        plan = plan_locations(ios_answers, tmp_path)
        assert plan.platform_dirs == {"platformIos": plan.src_dir / "ios"}

    def test_android_dir_is_package_path(self, android_answers, tmp_path):
        plan = plan_locations(android_answers, tmp_path)
        expected = plan.src_dir / "android" / "com" / "example" / "sampleplugin"
        assert plan.platform_dir(Platform.ANDROID) == expected

    @pytest.mark.parametrize("package", ["app", "com.example", "org.my_company.app2.sub"])
    def test_android_dir_uses_path_separator(self, package, tmp_path):
        answers = AnswerSet(
            id="p", api_name="P", platforms=["android"], android_package=package
        )
        plan = plan_locations(answers, tmp_path)
        expected = str(plan.src_dir / "android") + os.sep + package.replace(".", os.sep)
        assert str(plan.platform_dir("android")) == expected

    def test_electron_dir(self, tmp_path):
        answers = AnswerSet(id="p", api_name="P", platforms=["electron"])
        plan = plan_locations(answers, tmp_path)
        assert plan.platform_dir(Platform.ELECTRON) == plan.src_dir / "electron"

    def test_unselected_platform_lookup_raises(self, ios_answers, tmp_path):
        plan = plan_locations(ios_answers, tmp_path)
        with pytest.raises(KeyError):
            plan.platform_dir(Platform.ANDROID)

    def test_as_dict_order(self, all_platform_answers, tmp_path):
        plan = plan_locations(all_platform_answers, tmp_path)
        assert list(plan.as_dict()) == [
            "pluginDir",
            "srcDir",
            "wwwDir",
            "platformAndroid",
            "platformIos",
            "platformElectron",
        ]

    def test_all_paths_descend_from_plugin_dir(self, all_platform_answers, tmp_path):
        plan = plan_locations(all_platform_answers, tmp_path)
        for path in plan.as_dict().values():
            assert path == plan.plugin_dir or plan.plugin_dir in path.parents

    def test_plan_is_frozen(self, ios_answers, tmp_path):
        plan = plan_locations(ios_answers, tmp_path)
        with pytest.raises(ValidationError):
            plan.plugin_dir = tmp_path


# ---------------------------------------------------------------------------
# materialize_locations
# ---------------------------------------------------------------------------


class TestMaterializeLocations:
    @pytest.mark.asyncio
    async def test_creates_all_directories(self, all_platform_answers, tmp_path):
        plan = plan_locations(all_platform_answers, tmp_path)
        created = await materialize_locations(plan)
        assert created == list(plan.as_dict().values())
        for path in created:
            assert path.is_dir()

    @pytest.mark.asyncio
    async def test_only_selected_platforms(self, ios_answers, tmp_path):
        plan = plan_locations(ios_answers, tmp_path)
        await materialize_locations(plan)
        assert (plan.src_dir / "ios").is_dir()
        assert not (plan.src_dir / "android").exists()
        assert not (plan.src_dir / "electron").exists()

    @pytest.mark.asyncio
    async def test_idempotent(self, android_answers, tmp_path):
        plan = plan_locations(android_answers, tmp_path)
        await materialize_locations(plan)
        marker = plan.platform_dir(Platform.ANDROID) / "keep.txt"
        marker.write_text("x", encoding="utf-8")
        await materialize_locations(plan)
        assert marker.read_text(encoding="utf-8") == "x"

    @pytest.mark.asyncio
    async def test_file_collision_propagates(self, ios_answers, tmp_path):
        plan = plan_locations(ios_answers, tmp_path)
        plan.plugin_dir.mkdir(parents=True)
        (plan.plugin_dir / "www").write_text("not a directory", encoding="utf-8")
        with pytest.raises(FileExistsError):
            await materialize_locations(plan)

    @pytest.mark.asyncio
    async def test_returns_paths(self, ios_answers, tmp_path):
        plan = LocationPlan(
            plugin_dir=tmp_path / "p",
            src_dir=tmp_path / "p" / "src",
            www_dir=tmp_path / "p" / "www",
            platform_dirs={},
        )
        created = await materialize_locations(plan)
        assert created == [tmp_path / "p", tmp_path / "p" / "src", tmp_path / "p" / "www"]
        assert all(isinstance(p, Path) for p in created)
