"""
Tests for Project Checks.

This test suite covers:
1. App config existence
2. Public directory sync
3. Entry file discovery and plugin counting
4. TypeScript project validation
"""

import tempfile
from pathlib import Path

import pytest

from flexcheck.checks.app import check_app_config, sync_public_dir
from flexcheck.checks.plugin_count import PluginCountValidator, count_plugin_loads
from flexcheck.checks.typescript import TypeScriptProjectValidator
from flexcheck.config.paths import TemplatePaths
from flexcheck.errors import (
    ConfigurationMissing,
    FileSyncFailure,
    NoEntryFile,
    PluginLoadCountError,
    ToolchainNotInstalled,
)
from flexcheck.fs import FileSystem


class TestAppConfig:
    """Test the app config check."""

    def test_missing_app_config_fails(self):
        """Should fail with ConfigurationMissing when appConfig.js is absent."""
        with tempfile.TemporaryDirectory() as tmpdir:
            app_config = Path(tmpdir) / "public" / "appConfig.js"

            result = check_app_config(FileSystem(), app_config)

            assert isinstance(result.failure, ConfigurationMissing)
            assert result.failure.path == app_config

    def test_present_app_config_passes(self):
        """Should pass when appConfig.js exists."""
        with tempfile.TemporaryDirectory() as tmpdir:
            app_config = Path(tmpdir) / "appConfig.js"
            app_config.write_text("var appConfig = {};")

            assert check_app_config(FileSystem(), app_config).passed


class TestPublicDirSync:
    """Test copying index.html into public/."""

    def test_copies_template(self):
        """Should copy the bundled index.html."""
        with tempfile.TemporaryDirectory() as tmpdir:
            public = Path(tmpdir) / "public"
            public.mkdir()
            target = public / "index.html"

            result = sync_public_dir(FileSystem(), TemplatePaths().index_html, target)

            assert result.passed
            assert target.read_text() == TemplatePaths().index_html.read_text()

    @pytest.mark.parametrize("allow_skip", [False, True])
    def test_copy_failure_is_fatal(self, allow_skip):
        """A failed copy should fail even when allow_skip is set."""
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "missing-dir" / "index.html"

            result = sync_public_dir(
                FileSystem(), TemplatePaths().index_html, target, allow_skip
            )

            assert isinstance(result.failure, FileSyncFailure)
            assert result.failure.allow_skip is allow_skip


class TestPluginCount:
    """Test the loadPlugin count check."""

    def _write_index(self, tmpdir: str, ext: str, content: str) -> Path:
        src = Path(tmpdir) / "src"
        src.mkdir(exist_ok=True)
        (src / f"index.{ext}").write_text(content)
        return src / "index"

    def test_count_plugin_loads(self):
        """Should count non-overlapping marker occurrences."""
        assert count_plugin_loads("") == 0
        assert count_plugin_loads("FlexPlugin.loadPlugin(MyPlugin);") == 1
        assert count_plugin_loads("loadPluginloadPlugin // loadPlugin") == 3

    def test_zero_plugins_fails(self):
        """No loadPlugin call should fail with count 0."""
        with tempfile.TemporaryDirectory() as tmpdir:
            src_index = self._write_index(tmpdir, "js", "import React from 'react';")

            result = PluginCountValidator(FileSystem(), src_index).validate()

            assert isinstance(result.failure, PluginLoadCountError)
            assert result.failure.count == 0

    def test_one_plugin_passes(self):
        """Exactly one loadPlugin call should pass."""
        with tempfile.TemporaryDirectory() as tmpdir:
            src_index = self._write_index(
                tmpdir, "js", "FlexPlugin.loadPlugin(SamplePlugin);\n"
            )

            assert PluginCountValidator(FileSystem(), src_index).validate().passed

    def test_three_plugins_fails_with_count(self):
        """Three loadPlugin calls should fail reporting 3."""
        with tempfile.TemporaryDirectory() as tmpdir:
            content = "\n".join(f"FlexPlugin.loadPlugin(P{i});" for i in range(3))
            src_index = self._write_index(tmpdir, "tsx", content)

            result = PluginCountValidator(FileSystem(), src_index).validate()

            assert isinstance(result.failure, PluginLoadCountError)
            assert result.failure.count == 3
            assert "3" in str(result.failure)

    def test_marker_in_comment_is_counted(self):
        """The scan is textual: a commented-out call still counts."""
        with tempfile.TemporaryDirectory() as tmpdir:
            content = "// FlexPlugin.loadPlugin(Old);\nFlexPlugin.loadPlugin(New);\n"
            src_index = self._write_index(tmpdir, "js", content)

            result = PluginCountValidator(FileSystem(), src_index).validate()

            assert result.failure.count == 2

    def test_extension_probe_order(self):
        """The first existing extension in js, jsx, ts, tsx order wins."""
        with tempfile.TemporaryDirectory() as tmpdir:
            self._write_index(tmpdir, "tsx", "no plugin here")
            src_index = self._write_index(tmpdir, "jsx", "loadPlugin(A);")

            validator = PluginCountValidator(FileSystem(), src_index)

            assert validator.find_entry_file().name == "index.jsx"
            assert validator.validate().passed

    def test_no_entry_file_raises(self):
        """A missing entry file is a raised configuration error."""
        with tempfile.TemporaryDirectory() as tmpdir:
            src_index = Path(tmpdir) / "src" / "index"

            with pytest.raises(NoEntryFile, match="No index file"):
                PluginCountValidator(FileSystem(), src_index).validate()


class TestTypeScriptProject:
    """Test TypeScript project validation."""

    def _validator(self, app_dir: Path) -> TypeScriptProjectValidator:
        return TypeScriptProjectValidator(
            FileSystem(),
            app_dir,
            app_dir / "node_modules",
            app_dir / "tsconfig.json",
            TemplatePaths().ts_config,
        )

    def _install_typescript(self, app_dir: Path) -> None:
        ts_dir = app_dir / "node_modules" / "typescript"
        ts_dir.mkdir(parents=True)
        (ts_dir / "package.json").write_text('{"version": "4.9.5"}')

    def test_javascript_project_passes(self):
        """Projects without TypeScript sources need nothing."""
        with tempfile.TemporaryDirectory() as tmpdir:
            app_dir = Path(tmpdir)
            (app_dir / "src").mkdir()
            (app_dir / "src" / "index.js").write_text("")

            result = self._validator(app_dir).validate()

            assert result.passed
            assert not (app_dir / "tsconfig.json").exists()

    def test_declaration_files_and_node_modules_are_ignored(self):
        """.d.ts files and node_modules sources do not make a TypeScript project."""
        with tempfile.TemporaryDirectory() as tmpdir:
            app_dir = Path(tmpdir)
            (app_dir / "src").mkdir()
            (app_dir / "src" / "types.d.ts").write_text("")
            (app_dir / "node_modules" / "lib").mkdir(parents=True)
            (app_dir / "node_modules" / "lib" / "index.ts").write_text("")

            validator = self._validator(app_dir)

            assert not validator.has_typescript_files()
            assert validator.validate().passed

    def test_typescript_not_installed_fails(self):
        """TypeScript sources without the typescript module should fail."""
        with tempfile.TemporaryDirectory() as tmpdir:
            app_dir = Path(tmpdir)
            (app_dir / "src").mkdir()
            (app_dir / "src" / "index.tsx").write_text("")

            result = self._validator(app_dir).validate()

            assert isinstance(result.failure, ToolchainNotInstalled)

    def test_existing_tsconfig_is_kept(self):
        """An existing tsconfig.json should not be touched."""
        with tempfile.TemporaryDirectory() as tmpdir:
            app_dir = Path(tmpdir)
            (app_dir / "src").mkdir()
            (app_dir / "src" / "index.ts").write_text("")
            (app_dir / "tsconfig.json").write_text("{}")
            self._install_typescript(app_dir)

            result = self._validator(app_dir).validate()

            assert result.passed
            assert result.notices == []
            assert (app_dir / "tsconfig.json").read_text() == "{}"

    def test_missing_tsconfig_is_created(self):
        """A missing tsconfig.json should be created from the template."""
        with tempfile.TemporaryDirectory() as tmpdir:
            app_dir = Path(tmpdir)
            (app_dir / "src").mkdir()
            (app_dir / "src" / "index.ts").write_text("")
            self._install_typescript(app_dir)

            result = self._validator(app_dir).validate()

            assert result.passed
            assert len(result.notices) == 1
            assert (app_dir / "tsconfig.json").read_text() == (
                TemplatePaths().ts_config.read_text()
            )
