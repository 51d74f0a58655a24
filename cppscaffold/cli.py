# cppscaffold/cli.py
"""
cppscaffold command-line interface.

Usage::

    cppscaffold -name demo [-type executable|library] [-lang cpp|c]
                [-std 17] [-pkgmgr vcpkg] [-git ask|yes|no] [-v]

Every flag also accepts the double-dash spelling (``--name``). Validation,
environment and I/O failures surface as ``ScaffoldError`` (a
``ClickException``), so Click prints ``Error: <Category>: <message>`` and
exits with status 1.

Tests (or embedding tools) may pass ``obj={"toolchain": ...}`` to
``CliRunner.invoke`` to replace the real cmake/git/vcpkg calls.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.tree import Tree

from cppscaffold import __version__
from cppscaffold.config import Settings
from cppscaffold.descriptor import build_descriptor
from cppscaffold.generator import (
    GenerationResult,
    generate_project,
    initialize_version_control,
    wants_version_control,
)
from cppscaffold.log_manager import get_logger
from cppscaffold.profiles import ARTIFACT_PROFILES, LANGUAGE_PROFILES
from cppscaffold.renderer import TemplateRenderer
from cppscaffold.toolchain import SubprocessToolchain, Toolchain

__all__ = ["cli", "main"]

GIT_PROMPT = "Do you want to initialize Git version control? (y/n)"


def _print_summary(result: GenerationResult) -> None:
    """Render the generated files as a tree."""
    tree = Tree(f"📁 {result.root.name}")
    for path in sorted(result.files):
        try:
            rel = path.relative_to(result.root)
        except ValueError:
            rel = path
        tree.add(rel.as_posix())
    Console().print(tree)


def _resolve_git_choice(git: str) -> bool:
    if git == "yes":
        return True
    if git == "no":
        return False
    try:
        answer = click.prompt(GIT_PROMPT, default="", show_default=False)
    except click.Abort:
        # stdin closed (CI, < /dev/null): same as an empty answer.
        click.echo()
        answer = ""
    return wants_version_control(answer)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-name", "--name", "name", default="", help="Name of the project (required).")
@click.option(
    "-type",
    "--type",
    "project_type",
    default="executable",
    show_default=True,
    help=f"Project type ({', '.join(ARTIFACT_PROFILES)}).",
)
@click.option(
    "-lang",
    "--lang",
    "lang",
    default="cpp",
    show_default=True,
    help=f"Programming language ({', '.join(LANGUAGE_PROFILES)}).",
)
@click.option(
    "-std",
    "--std",
    "standard",
    default="11",
    show_default=True,
    help="Language standard (e.g., 11, 14, 17 for C++).",
)
@click.option(
    "-pkgmgr",
    "--pkgmgr",
    "pkgmgr",
    default=None,
    help="Package manager (only vcpkg is currently supported).",
)
@click.option(
    "-git",
    "--git",
    "git",
    type=click.Choice(["ask", "yes", "no"]),
    default="ask",
    show_default=True,
    help="Initialize a Git repository without prompting (yes/no).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__, "--version", prog_name="cppscaffold")
@click.pass_context
def cli(
    ctx: click.Context,
    name: str,
    project_type: str,
    lang: str,
    standard: str,
    pkgmgr: Optional[str],
    git: str,
    verbose: bool,
) -> None:
    """🧱 Scaffold a new CMake-based C/C++ project."""
    settings: Settings = (ctx.obj or {}).get("settings") or Settings.from_env()
    get_logger(
        level=logging.DEBUG if verbose else settings.log_level,
        log_to_file=settings.log_file,
    )

    toolchain: Toolchain = (ctx.obj or {}).get("toolchain") or SubprocessToolchain(settings)
    base_dir: Path = Path((ctx.obj or {}).get("base_dir") or Path.cwd())
    renderer = TemplateRenderer()

    descriptor = build_descriptor(
        name=name,
        artifact_type=project_type,
        language=lang,
        standard=standard,
        package_manager=pkgmgr,
        toolchain=toolchain,
        preset_generator=settings.preset_generator,
    )

    click.secho(f"📂 Initializing project: {descriptor.name}", fg="green")
    result = generate_project(descriptor, toolchain, renderer=renderer, base_dir=base_dir)

    if _resolve_git_choice(git):
        initialize_version_control(descriptor, result, toolchain, renderer=renderer)
    else:
        click.echo("Skipped Git initialization.")

    _print_summary(result)
    click.secho(f"👉 Next: cd {descriptor.name} && cmake -S . -B build", fg="blue")


def main() -> None:
    """Console-script entry point."""
    cli()


if __name__ == "__main__":
    main()
