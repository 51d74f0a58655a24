# cppscaffold/generator.py
"""
Single-pass project generation.

:func:`generate_project` materializes a validated descriptor into a
directory tree, and :func:`initialize_version_control` optionally turns that
tree into a git repository. Both report failures by raising
:class:`~cppscaffold.errors.ScaffoldError` subclasses; callers decide
whether that ends the process.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import click

from cppscaffold.descriptor import ProjectDescriptor
from cppscaffold.errors import ExternalToolError
from cppscaffold.log_manager import get_logger
from cppscaffold.profiles import PROJECT_STRUCTURE
from cppscaffold.renderer import CMAKE_LISTS, TemplateRenderer
from cppscaffold.scaffold import create_directories, write_files
from cppscaffold.toolchain import VCPKG_DIR, Toolchain

__all__ = [
    "GenerationResult",
    "generate_project",
    "initialize_version_control",
    "wants_version_control",
]

logger = get_logger("cppscaffold.generator")


@dataclass
class GenerationResult:
    """What a generation pass left on disk."""

    root: Path
    files: List[Path] = field(default_factory=list)
    vcpkg_bootstrapped: bool = False
    vcs_initialized: bool = False
    vcs_files_staged: bool = False


def generate_project(
    descriptor: ProjectDescriptor,
    toolchain: Toolchain,
    renderer: Optional[TemplateRenderer] = None,
    base_dir: Optional[Path] = None,
) -> GenerationResult:
    """Create the project tree for ``descriptor`` under ``base_dir``.

    Steps, in order:

    1. create ``src/``, ``include/`` and ``build/`` (existing ones are fine);
    2. write ``CMakeLists.txt``;
    3. on the vcpkg path, bootstrap vcpkg unless ``<root>/vcpkg`` exists;
    4. write the remaining files (vcpkg manifest and presets, sources).

    Raises
    ------
    FileWriteError
        If a directory or file cannot be written.
    ExternalToolError
        If the vcpkg bootstrap sequence fails.
    """
    renderer = renderer or TemplateRenderer()
    root = Path(base_dir or Path.cwd()) / descriptor.name
    files = renderer.render_project(descriptor)

    result = GenerationResult(root=root)
    create_directories(root, PROJECT_STRUCTURE)

    manifest = {CMAKE_LISTS: files.pop(CMAKE_LISTS)}
    result.files.extend(write_files(root, manifest))

    if descriptor.uses_vcpkg:
        if (root / VCPKG_DIR).exists():
            logger.info("vcpkg already present in %s, skipping bootstrap", root)
        else:
            click.secho("📦 Cloning and bootstrapping vcpkg...", fg="cyan")
            toolchain.bootstrap_package_manager(root)
            result.vcpkg_bootstrapped = True

    result.files.extend(write_files(root, files))

    click.secho(f"✅ Project {descriptor.name} created successfully.", fg="green")
    return result


def wants_version_control(answer: Optional[str]) -> bool:
    """Interpret the answer to the git prompt (``y``/``yes``, any case)."""
    return (answer or "").strip().lower() in ("y", "yes")


def initialize_version_control(
    descriptor: ProjectDescriptor,
    result: GenerationResult,
    toolchain: Toolchain,
    renderer: Optional[TemplateRenderer] = None,
) -> GenerationResult:
    """Run ``git init``, write the ignore/attributes files and stage them.

    A failing ``git init`` propagates :class:`ExternalToolError`. A failing
    ``git add`` is only logged: the repository and files already exist, so
    the run still counts as a success.
    """
    renderer = renderer or TemplateRenderer()
    root = result.root

    toolchain.init_repository(root)
    result.vcs_initialized = True

    vcs_files = renderer.render_vcs_files(descriptor)
    result.files.extend(write_files(root, vcs_files))

    try:
        toolchain.add_files(root, list(vcs_files))
    except ExternalToolError as exc:
        logger.warning("Could not add %s to git: %s", ", ".join(vcs_files), exc.message)
        click.secho(f"⚠️  Error adding {'/'.join(vcs_files)} to Git: {exc.message}", fg="yellow")
        return result

    result.vcs_files_staged = True
    click.secho(
        "✅ Git repository initialized successfully with .gitignore and .gitattributes.",
        fg="green",
    )
    return result
