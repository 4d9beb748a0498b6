"""Runtime settings for the installer.

Home and working directories are resolved once here and passed down, so the
catalog reader and target resolver never consult the environment directly.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from . import BUNDLED_CATALOG

CATALOG_ENV = "SKILLS_WS_CATALOG"
TARGET_ENV = "SKILLS_WS_TARGET"


def _default_catalog_root() -> Path:
    """Resolve the catalog root, respecting the SKILLS_WS_CATALOG env var.

    Returns:
        Path: Directory holding one sub-directory per skill.
    """
    env = os.environ.get(CATALOG_ENV)
    if env:
        return Path(env).expanduser()
    return BUNDLED_CATALOG


def _default_target_override() -> Optional[Path]:
    env = os.environ.get(TARGET_ENV)
    if env:
        return Path(env).expanduser()
    return None


class InstallerSettings(BaseModel):
    """Where skills are read from and where candidate targets are looked for."""

    catalog_root: Path = Field(description="Directory containing skill folders")
    home: Path = Field(description="User home, used for per-user candidate targets")
    cwd: Path = Field(description="Project directory, used for project-local targets")
    target_override: Optional[Path] = Field(
        default=None, description="Explicit install directory; skips candidate probing"
    )

    @classmethod
    def from_env(
        cls,
        catalog_root: Optional[Path] = None,
        target_override: Optional[Path] = None,
    ) -> "InstallerSettings":
        """Build settings from the process environment.

        Explicit arguments (from CLI options) win over environment variables.
        """
        return cls(
            catalog_root=(catalog_root or _default_catalog_root()).expanduser(),
            home=Path.home(),
            cwd=Path.cwd(),
            target_override=target_override or _default_target_override(),
        )
