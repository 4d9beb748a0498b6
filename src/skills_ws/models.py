"""skills-ws data models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class SkillDescriptor(BaseModel):
    """One installable skill found in the catalog.

    Built fresh from the catalog directory on every run and never persisted.
    """

    name: str = Field(description="Directory name under the catalog root")
    description: str = Field(default="", description="Summary from the SKILL.md frontmatter")
    source_path: Path = Field(description="Absolute path to the skill directory")

    def short_description(self, width: int) -> str:
        """Description cut to at most ``width`` characters."""
        return self.description[:width]


class InstallReport(BaseModel):
    """Outcome of one install batch."""

    target: Path
    installed: list[str] = Field(default_factory=list, description="Names copied, in request order")
    skipped: list[str] = Field(default_factory=list, description="Requested names not in the catalog")

    @property
    def count(self) -> int:
        """Number of skill copies performed."""
        return len(self.installed)
