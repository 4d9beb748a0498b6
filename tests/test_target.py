"""Tests for install target resolution."""

from pathlib import Path

import pytest

from skills_ws.config import InstallerSettings
from skills_ws.errors import TargetUnwritable
from skills_ws.target import (
    candidate_paths,
    default_target,
    ensure_target,
    resolve_install_target,
    resolve_target,
)


class TestCandidates:
    def test_fixed_order(self, project: Path, home: Path):
        assert candidate_paths(project, home) == [
            project / ".claude" / "skills",
            project / "skills",
            home / "openclaw" / "skills",
            home / ".claude" / "skills",
        ]

    def test_default_is_claude_home(self, home: Path):
        assert default_target(home) == home / ".claude" / "skills"


class TestResolveTarget:
    """Test candidate probing and fallback creation."""

    def test_earlier_candidate_wins(self, project: Path, home: Path):
        """When two candidates exist the earlier one is chosen."""
        (project / "skills").mkdir()
        (home / "openclaw" / "skills").mkdir(parents=True)
        target = resolve_target(candidate_paths(project, home), default_target(home))
        assert target == project / "skills"

    def test_project_claude_beats_generic(self, project: Path, home: Path):
        (project / "skills").mkdir()
        (project / ".claude" / "skills").mkdir(parents=True)
        target = resolve_target(candidate_paths(project, home), default_target(home))
        assert target == project / ".claude" / "skills"

    def test_file_candidate_is_ignored(self, project: Path, home: Path):
        """A plain file named like a candidate is not an install directory."""
        (project / "skills").write_text("")
        (home / "openclaw" / "skills").mkdir(parents=True)
        target = resolve_target(candidate_paths(project, home), default_target(home))
        assert target == home / "openclaw" / "skills"

    def test_fallback_created(self, project: Path, home: Path):
        """With no candidate present the default is created with parents."""
        fallback = default_target(home)
        assert not fallback.exists()
        target = resolve_target(candidate_paths(project, home), fallback)
        assert target == fallback
        assert fallback.is_dir()

    def test_fallback_blocked_by_file(self, project: Path, home: Path):
        (home / ".claude").write_text("")
        with pytest.raises(TargetUnwritable):
            resolve_target(candidate_paths(project, home), default_target(home))

    def test_fallback_permission_denied(self, project: Path, home: Path, monkeypatch):
        def deny(self, *args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(Path, "mkdir", deny)
        with pytest.raises(TargetUnwritable, match="Permission denied"):
            resolve_target(candidate_paths(project, home), default_target(home))


class TestEnsureTarget:
    def test_existing_directory(self, tmp_path: Path):
        assert ensure_target(tmp_path) == tmp_path

    def test_path_is_a_file(self, tmp_path: Path):
        f = tmp_path / "skills"
        f.write_text("")
        with pytest.raises(TargetUnwritable, match="not a directory"):
            ensure_target(f)


class TestResolveInstallTarget:
    def test_override_skips_probing(self, tmp_path: Path, project: Path, home: Path):
        (project / "skills").mkdir()
        override = tmp_path / "custom" / "skills"
        settings = InstallerSettings(
            catalog_root=tmp_path, home=home, cwd=project, target_override=override
        )
        assert resolve_install_target(settings) == override
        assert override.is_dir()

    def test_probes_without_override(self, tmp_path: Path, project: Path, home: Path):
        (project / "skills").mkdir()
        settings = InstallerSettings(catalog_root=tmp_path, home=home, cwd=project)
        assert resolve_install_target(settings) == project / "skills"
