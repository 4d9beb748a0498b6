"""Tests for models and settings."""

from pathlib import Path

from skills_ws import BUNDLED_CATALOG
from skills_ws.config import InstallerSettings
from skills_ws.models import InstallReport, SkillDescriptor


class TestModels:
    def test_short_description(self, tmp_path: Path):
        skill = SkillDescriptor(name="x", description="abcdef", source_path=tmp_path)
        assert skill.short_description(3) == "abc"
        assert skill.short_description(50) == "abcdef"

    def test_report_count(self, tmp_path: Path):
        report = InstallReport(target=tmp_path, installed=["a", "a"], skipped=["b"])
        assert report.count == 2


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch, tmp_path: Path):
        monkeypatch.delenv("SKILLS_WS_CATALOG", raising=False)
        monkeypatch.delenv("SKILLS_WS_TARGET", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.chdir(tmp_path)
        settings = InstallerSettings.from_env()
        assert settings.catalog_root == BUNDLED_CATALOG
        assert settings.home == tmp_path
        assert settings.cwd == tmp_path
        assert settings.target_override is None

    def test_env_overrides(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SKILLS_WS_CATALOG", str(tmp_path / "cat"))
        monkeypatch.setenv("SKILLS_WS_TARGET", str(tmp_path / "dest"))
        settings = InstallerSettings.from_env()
        assert settings.catalog_root == tmp_path / "cat"
        assert settings.target_override == tmp_path / "dest"

    def test_arguments_beat_env(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SKILLS_WS_CATALOG", str(tmp_path / "cat"))
        settings = InstallerSettings.from_env(catalog_root=tmp_path / "cli")
        assert settings.catalog_root == tmp_path / "cli"
