"""Exceptions raised by the skills-ws installer."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SkillsWsError(Exception):
    """Base class for installer errors that end a run."""


class CatalogUnavailable(SkillsWsError):
    """Raised when the catalog root is missing or cannot be listed."""

    def __init__(self, root: Path, reason: str = "") -> None:
        self.root = root
        message = f"Skill catalog unavailable: {root}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class TargetUnwritable(SkillsWsError):
    """Raised when the install directory cannot be created or used."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        message = f"Cannot use install directory: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class SkillNotFound(SkillsWsError):
    """Raised when a single named skill is required but not in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Skill not found: {name}")


class ManifestError(SkillsWsError):
    """Raised when a SKILL.md frontmatter block cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid manifest {path}: {reason}")


class CopyIOError(SkillsWsError):
    """Raised when copying a skill's files fails part way through."""

    def __init__(self, name: str, orig_exc: Optional[OSError] = None) -> None:
        self.name = name
        self.orig_exc = orig_exc
        message = f"Failed to copy skill '{name}'"
        if orig_exc is not None:
            message += f": {orig_exc}"
        super().__init__(message)
