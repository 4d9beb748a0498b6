"""skills-ws CLI: install agent skills from the terminal.

Commands:
    (none)      Interactive picker: choose skills by number or name
    list        Show the skill catalog (alias: ls)
    install     Install named skills, or `all` (alias: add)
    info        Show a skill's manifest fields and files
    help        Print a usage summary
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import MANIFEST_FILE, __version__
from .catalog import find_skill, list_skills, read_frontmatter, skill_files
from .config import InstallerSettings
from .errors import SkillNotFound, SkillsWsError
from .installer import run_install
from .models import SkillDescriptor
from .report import ConsoleReporter, print_banner, print_catalog, print_usage
from .selection import resolve_names, resolve_selection
from .target import resolve_install_target

console = Console()
err_console = Console(stderr=True)

PROMPT_HINT = "Enter numbers or names (comma-separated), or 'all':"


class AliasedGroup(click.Group):
    """Command group that also accepts short aliases (``ls``, ``add``)."""

    ALIASES = {"ls": "list", "add": "install"}

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.ALIASES.get(cmd_name, cmd_name))

    def resolve_command(self, ctx, args):
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name if cmd else None, cmd, args


def _fail(exc: Exception) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    sys.exit(1)


def _load_catalog(settings: InstallerSettings) -> list[SkillDescriptor]:
    try:
        return list_skills(settings.catalog_root)
    except SkillsWsError as exc:
        _fail(exc)


def _install(settings: InstallerSettings, selection: Sequence[str], skills: list[SkillDescriptor]) -> None:
    reporter = ConsoleReporter(console)
    try:
        run_install(selection, skills, lambda: resolve_install_target(settings), reporter)
    except SkillsWsError as exc:
        _fail(exc)


def _pick_interactively(settings: InstallerSettings, skills: list[SkillDescriptor]) -> None:
    """Show the numbered catalog, read one line, install what it names."""
    print_catalog(console, skills, numbered=True)
    console.print(f"\n  [yellow]{escape(PROMPT_HINT)}[/yellow]")
    try:
        raw = console.input("  [cyan]>[/cyan] ")
    except EOFError:
        raw = ""
    selection = resolve_selection(raw, [s.name for s in skills])
    _install(settings, selection, skills)


@click.group(
    cls=AliasedGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, prog_name="skills-ws")
@click.option(
    "--catalog",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Skill catalog directory (default: SKILLS_WS_CATALOG or the bundled catalog).",
)
@click.option(
    "--target",
    type=click.Path(dir_okay=True, file_okay=False, path_type=Path),
    default=None,
    help="Install into this directory instead of probing the usual skill folders.",
)
@click.option("--no-banner", is_flag=True, help="Skip the logo.")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(
    ctx: click.Context,
    catalog: Optional[Path],
    target: Optional[Path],
    no_banner: bool,
    verbose: bool,
) -> None:
    """skills-ws — agent skills for AI.

    Run without a command to pick skills interactively.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )

    settings = InstallerSettings.from_env(catalog_root=catalog, target_override=target)
    ctx.obj = settings
    ctx.call_on_close(lambda: console.show_cursor(True))

    if not no_banner:
        print_banner(console)

    if ctx.invoked_subcommand is None:
        skills = _load_catalog(settings)
        _pick_interactively(settings, skills)


@main.command("list")
@click.pass_obj
def list_cmd(settings: InstallerSettings) -> None:
    """Show the skill catalog."""
    skills = _load_catalog(settings)
    print_catalog(console, skills)
    console.print(f"\n  [dim]{len(skills)} skills | skills-ws install <name>[/dim]\n")


@main.command()
@click.argument("names", nargs=-1)
@click.pass_obj
def install(settings: InstallerSettings, names: tuple[str, ...]) -> None:
    """Install skills by name, or `all` of them.

    Without NAMES, shows the interactive picker.
    """
    skills = _load_catalog(settings)
    if not names:
        _pick_interactively(settings, skills)
        return
    _install(settings, resolve_names(names, [s.name for s in skills]), skills)


@main.command()
@click.argument("name")
@click.pass_obj
def info(settings: InstallerSettings, name: str) -> None:
    """Show a skill's manifest fields and the files it ships."""
    skills = _load_catalog(settings)
    skill = find_skill(skills, name)
    try:
        if skill is None:
            raise SkillNotFound(name)
        fields = read_frontmatter(skill.source_path / MANIFEST_FILE)
    except SkillsWsError as exc:
        _fail(exc)

    console.print(f"\n[cyan bold]{escape(skill.name)}[/cyan bold]")
    if skill.description:
        console.print(f"  {escape(skill.description)}")
    console.print(f"  Source: {escape(str(skill.source_path))}")

    extra = {k: v for k, v in fields.items() if k not in ("name", "description")}
    if extra:
        console.print("\n  [bold]Manifest:[/bold]")
        for key, value in extra.items():
            console.print(f"    {escape(str(key))}: {escape(str(value))}")

    console.print("\n  [bold]Files:[/bold]")
    for rel in skill_files(skill):
        console.print(f"    {escape(rel)}")


@main.command("help")
@click.pass_obj
def help_cmd(settings: InstallerSettings) -> None:
    """Print a usage summary."""
    skills = _load_catalog(settings)
    print_usage(console, len(skills))


if __name__ == "__main__":
    main()
