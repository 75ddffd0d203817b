"""Tests for ZkmakeSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from zkmake.config.settings import ZkmakeSettings


class TestZkmakeSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = ZkmakeSettings.from_cli(cwd=tmp_path)
        assert settings.cwd == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.make.on_existing == "edit"
        assert settings.make.seek_heading is True
        assert settings.zk.command == "zk"
        assert settings.zk.marker == ".zk"
        assert settings.new.edit is True
        assert settings.new.extra == {}

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ZkmakeSettings.from_cli(cwd=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "zkmake.toml").write_text(
            '[make]\non_existing = "warn"\n[zk]\ncommand = "/usr/local/bin/zk"\n'
        )
        settings = ZkmakeSettings.from_cli(cwd=tmp_path)
        assert settings.make.on_existing == "warn"
        assert settings.zk.command == "/usr/local/bin/zk"
        assert settings.make.seek_heading is True  # default preserved

    def test_new_note_table(self, tmp_path: Path) -> None:
        (tmp_path / "zkmake.toml").write_text(
            '[new]\ndir = "inbox"\nedit = false\n[new.extra]\nsource = "editor"\n'
        )
        settings = ZkmakeSettings.from_cli(cwd=tmp_path)
        assert settings.new.dir == "inbox"
        assert settings.new.edit is False
        assert settings.new.extra == {"source": "editor"}

    def test_walks_up_from_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "zkmake.toml").write_text('[make]\non_existing = "nothing"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = ZkmakeSettings.from_cli(cwd=nested)
        assert settings.make.on_existing == "nothing"
        assert settings.config_path == tmp_path / "zkmake.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[zk]\nmarker = ".notebook"\n')
        settings = ZkmakeSettings.from_cli(config_path=str(custom), cwd=tmp_path)
        assert settings.zk.marker == ".notebook"
        assert settings.config_path == custom

    def test_missing_explicit_config_is_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "zkmake.toml").write_text('[make]\non_existing = "warn"\n')
        with pytest.raises(click.BadParameter, match="config file not found"):
            ZkmakeSettings.from_cli(config_path=str(tmp_path / "nope.toml"), cwd=tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "zkmake.toml").write_text("[make\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ZkmakeSettings.from_cli(cwd=tmp_path)

    def test_invalid_policy(self, tmp_path: Path) -> None:
        (tmp_path / "zkmake.toml").write_text('[make]\non_existing = "explode"\n')
        with pytest.raises(Exception):
            ZkmakeSettings.from_cli(cwd=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "zkmake.toml").write_text('[make]\non_existing = "warn"\n')
        monkeypatch.setenv("ZKMAKE_MAKE__ON_EXISTING", "nothing")
        settings = ZkmakeSettings.from_cli(cwd=tmp_path)
        assert settings.make.on_existing == "nothing"

    def test_cli_flags_override_everything(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ZKMAKE_QUIET", "false")
        settings = ZkmakeSettings.from_cli(cwd=tmp_path, quiet=True)
        assert settings.quiet is True
