"""Install target resolution.

Candidates are probed in a fixed order so an already initialised
project-local folder wins over the per-user ones. When none exists the
per-user Claude folder is created.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .config import InstallerSettings
from .errors import TargetUnwritable

logger = logging.getLogger("skills_ws.target")


def candidate_paths(cwd: Path, home: Path) -> list[Path]:
    """Known skill folders, most specific first.

    Args:
        cwd: Project directory the installer runs in.
        home: The user's home directory.

    Returns:
        list[Path]: Candidates in probe order.
    """
    return [
        cwd / ".claude" / "skills",
        cwd / "skills",
        home / "openclaw" / "skills",
        home / ".claude" / "skills",
    ]


def default_target(home: Path) -> Path:
    """Directory created when no candidate exists."""
    return home / ".claude" / "skills"


def ensure_target(path: Path) -> Path:
    """Create ``path`` and its parents if needed.

    Raises:
        TargetUnwritable: If the directory cannot be created, or a non-directory
            is in the way.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except FileExistsError as exc:
        raise TargetUnwritable(path, "exists and is not a directory") from exc
    except OSError as exc:
        raise TargetUnwritable(path, exc.strerror or str(exc)) from exc
    return path


def resolve_target(candidates: Iterable[Path], fallback: Path) -> Path:
    """Pick the install directory for this run.

    Args:
        candidates: Paths to probe, in order.
        fallback: Directory to create when no candidate exists.

    Returns:
        Path: An existing directory.

    Raises:
        TargetUnwritable: If the fallback cannot be created.
    """
    for candidate in candidates:
        if candidate.is_dir():
            logger.debug("Using existing skills folder %s", candidate)
            return candidate
        logger.debug("No skills folder at %s", candidate)

    logger.debug("Creating default skills folder %s", fallback)
    return ensure_target(fallback)


def resolve_install_target(settings: InstallerSettings) -> Path:
    """Resolve the target for a run from its settings.

    An explicit override is created if missing; otherwise the standard
    candidates are probed.
    """
    if settings.target_override is not None:
        return ensure_target(settings.target_override)
    return resolve_target(
        candidate_paths(settings.cwd, settings.home),
        default_target(settings.home),
    )
