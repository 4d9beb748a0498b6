"""Shared fixtures: a small on-disk skill catalog."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest


def make_skill(root: Path, name: str, description: str = "", extra: dict[str, str] | None = None) -> Path:
    """Create ``root/name`` with a SKILL.md and any extra files (relative path -> text)."""
    skill_dir = root / name
    skill_dir.mkdir(parents=True)
    frontmatter = f"name: {name}\n"
    if description:
        frontmatter += f'description: "{description}"\n'
    (skill_dir / "SKILL.md").write_text(f"---\n{frontmatter}---\n\n# {name}\n")
    for rel, text in (extra or {}).items():
        path = skill_dir / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
    return skill_dir


@pytest.fixture
def catalog_root(tmp_path: Path) -> Path:
    """Catalog with three skills, one folder without a manifest, and a stray file."""
    root = tmp_path / "catalog"
    root.mkdir()
    make_skill(root, "gamma", "Third skill")
    make_skill(
        root,
        "alpha",
        "First skill",
        extra={
            "references/guide.md": "# Guide\n",
            "scripts/run.sh": "#!/bin/sh\necho alpha\n",
        },
    )
    make_skill(root, "beta", "Second skill")
    (root / "notes").mkdir()
    (root / "notes" / "README.md").write_text("not a skill\n")
    (root / "index.json").write_text("{}")
    return root


@pytest.fixture
def home(tmp_path: Path) -> Path:
    d = tmp_path / "home"
    d.mkdir()
    return d


@pytest.fixture
def project(tmp_path: Path) -> Path:
    d = tmp_path / "project"
    d.mkdir()
    return d


@pytest.fixture
def manifest_text() -> str:
    return dedent("""\
        ---
        name: seo-geo
        description: 'SEO audits for "answer engines"'
        category: marketing
        version: 1.2.0
        ---

        # SEO
        """)
