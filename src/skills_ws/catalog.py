"""Skill catalog reader.

Catalog layout:
    <catalog_root>/
        seo-geo/
            SKILL.md            # frontmatter with at least `description:`
            references/
        web3-wallets/
            SKILL.md
        drafts/                 # no SKILL.md, not a skill
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

import yaml

from . import MANIFEST_FILE
from .errors import CatalogUnavailable, ManifestError
from .models import SkillDescriptor

logger = logging.getLogger("skills_ws.catalog")

_DESCRIPTION_RE = re.compile(r"""^description:\s*["']?(.+?)["']?\s*$""", re.MULTILINE)


def extract_description(text: str) -> str:
    """Pull the ``description:`` value out of a manifest.

    Args:
        text: Full SKILL.md contents.

    Returns:
        str: The first matching description with surrounding quotes removed,
        or an empty string when there is none.
    """
    match = _DESCRIPTION_RE.search(text)
    return match.group(1) if match else ""


def list_skills(catalog_root: Path) -> list[SkillDescriptor]:
    """List every skill under the catalog root.

    Sub-directories without a SKILL.md are not skills and are left out.

    Args:
        catalog_root: Directory holding one folder per skill.

    Returns:
        list[SkillDescriptor]: Skills sorted by name, which is also the order
        numbered selections refer to.

    Raises:
        CatalogUnavailable: If the root is missing or cannot be listed.
    """
    if not catalog_root.is_dir():
        raise CatalogUnavailable(catalog_root, "not a directory")

    try:
        entries = list(catalog_root.iterdir())
    except OSError as exc:
        raise CatalogUnavailable(catalog_root, exc.strerror or str(exc)) from exc

    skills: list[SkillDescriptor] = []
    for entry in entries:
        manifest = entry / MANIFEST_FILE
        if not entry.is_dir() or not manifest.is_file():
            continue
        try:
            text = manifest.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise CatalogUnavailable(catalog_root, f"cannot read {manifest}: {exc}") from exc
        skills.append(
            SkillDescriptor(
                name=entry.name,
                description=extract_description(text),
                source_path=entry.resolve(),
            )
        )

    logger.debug("Found %d skills in %s", len(skills), catalog_root)
    return sorted(skills, key=lambda s: s.name)


def find_skill(skills: list[SkillDescriptor], name: str) -> Optional[SkillDescriptor]:
    """Look up a skill by exact name."""
    for skill in skills:
        if skill.name == name:
            return skill
    return None


def read_frontmatter(manifest: Path) -> dict:
    """Parse the leading ``---`` block of a SKILL.md as YAML.

    Args:
        manifest: Path to the SKILL.md file.

    Returns:
        dict: Frontmatter fields, empty when the file has no frontmatter.

    Raises:
        ManifestError: If the block is not valid YAML or not a mapping.
    """
    content = manifest.read_text(encoding="utf-8", errors="replace")
    if not content.startswith("---"):
        return {}

    parts = content.split("---", 2)
    if len(parts) < 3:
        raise ManifestError(manifest, "missing closing ---")

    try:
        raw = yaml.safe_load(parts[1])
    except yaml.YAMLError as exc:
        raise ManifestError(manifest, str(exc)) from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ManifestError(manifest, f"frontmatter must be a mapping, got {type(raw).__name__}")
    return raw


def skill_files(skill: SkillDescriptor) -> list[str]:
    """Relative paths of every file a skill ships, sorted."""
    root = skill.source_path
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())
