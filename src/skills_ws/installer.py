"""Copy engine: put selected skills into the install target.

A batch runs in three stages: the caller gathers the selection, the target
is resolved, then skills are copied one at a time in request order. Names
missing from the catalog are skipped; a failed copy ends the batch.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable, Optional, Sequence

from .catalog import find_skill
from .errors import CopyIOError
from .models import InstallReport, SkillDescriptor
from .report import Reporter

logger = logging.getLogger("skills_ws.installer")


def _copy_tree(src: Path, dest: Path) -> None:
    """Copy ``src`` into ``dest`` file by file, stopping at the first error."""
    dest.mkdir(parents=True, exist_ok=True)
    for entry in sorted(src.iterdir()):
        out = dest / entry.name
        if entry.is_dir():
            _copy_tree(entry, out)
        else:
            logger.debug("copy %s -> %s", entry, out)
            shutil.copy2(entry, out)


def install_skill(skill: SkillDescriptor, target: Path) -> int:
    """Copy one skill's directory tree into ``target/<name>``.

    Existing files at the same relative path are overwritten in place, so
    reinstalling is idempotent. Nothing is rolled back if the copy fails.

    Args:
        skill: The catalog entry to copy.
        target: The resolved install directory.

    Returns:
        int: Number of skills copied (always 1).

    Raises:
        CopyIOError: If any directory or file cannot be written.
    """
    dest = target / skill.name
    try:
        _copy_tree(skill.source_path, dest)
    except OSError as exc:
        raise CopyIOError(skill.name, exc) from exc
    return 1


def install_selection(
    selection: Sequence[str],
    skills: Sequence[SkillDescriptor],
    target: Path,
    reporter: Reporter,
) -> InstallReport:
    """Install each requested name, in order.

    Args:
        selection: Requested names; may contain duplicates and unknown names.
        skills: The catalog.
        target: The resolved install directory.
        reporter: Sink for per-name notices.

    Returns:
        InstallReport: What was copied and what was skipped.

    Raises:
        CopyIOError: On the first copy failure; later names are not attempted.
    """
    report = InstallReport(target=target)
    for name in selection:
        skill = find_skill(list(skills), name)
        if skill is None:
            logger.debug("Skipping %s: not in catalog", name)
            report.skipped.append(name)
            reporter.skipped(name)
            continue
        install_skill(skill, target)
        report.installed.append(name)
    return report


def run_install(
    selection: Sequence[str],
    skills: Sequence[SkillDescriptor],
    resolve: Callable[[], Path],
    reporter: Reporter,
) -> Optional[InstallReport]:
    """Resolve the target and install a selection.

    An empty selection is a successful no-op: the target is not resolved and
    nothing is created.

    Args:
        selection: Names from :mod:`skills_ws.selection`.
        skills: The catalog.
        resolve: Returns the install directory; may raise ``TargetUnwritable``.
        reporter: Output sink.

    Returns:
        InstallReport, or None when nothing was selected.
    """
    if not selection:
        reporter.nothing_selected()
        return None

    target = resolve()
    reporter.target(target)

    report = install_selection(selection, skills, target, reporter)
    reporter.finished(report)
    return report
