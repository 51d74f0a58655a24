# cppscaffold/renderer.py
"""
Template rendering for cppscaffold.

:class:`TemplateRenderer` turns a :class:`ProjectDescriptor` into the text of
every generated file. Rendering is pure: the same descriptor always yields
byte-identical output, and nothing here touches the filesystem beyond
loading the bundled Jinja2 templates.

Templates run under ``StrictUndefined``. A template that references a field
the context does not provide raises :class:`jinja2.UndefinedError`; that is a
bug in the templates, so it is deliberately not converted into a
user-facing :class:`~cppscaffold.errors.ScaffoldError`.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from cppscaffold.descriptor import ProjectDescriptor
from cppscaffold.log_manager import get_logger

__all__ = [
    "TemplateRenderer",
    "TEMPLATE_DIR",
    "GITIGNORE",
    "GITATTRIBUTES",
    "VCPKG_MANIFEST",
    "CMAKE_PRESETS",
]

logger = get_logger("cppscaffold.renderer")

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

# Output names of the generated files, relative to the project root.
CMAKE_LISTS = "CMakeLists.txt"
VCPKG_MANIFEST = "vcpkg.json"
CMAKE_PRESETS = "CMakePresets.json"
GITIGNORE = ".gitignore"
GITATTRIBUTES = ".gitattributes"

VCPKG_TOOLCHAIN_FILE = "vcpkg/scripts/buildsystems/vcpkg.cmake"


def _dump_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, indent=2) + "\n"


class TemplateRenderer:
    """Render the generated files of a project.

    Parameters
    ----------
    template_dir : Optional[os.PathLike]
        Folder holding the ``*.j2`` templates. Defaults to the templates
        shipped with the package.
    """

    def __init__(self, template_dir: Optional[os.PathLike] = None) -> None:
        self.template_dir = Path(template_dir) if template_dir is not None else TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def _context(self, descriptor: ProjectDescriptor) -> Dict[str, Any]:
        language = descriptor.language_profile
        return {
            "project": descriptor,
            "language": language,
            "artifact": descriptor.artifact_profile,
            "main_source": f"src/main.{descriptor.file_ext}",
        }

    def render_template(self, template_file: str, descriptor: ProjectDescriptor) -> str:
        template = self.env.get_template(template_file)
        return template.render(self._context(descriptor))

    # ------------------------------------------------------------------
    # Individual artifacts
    # ------------------------------------------------------------------

    def render_cmake_lists(self, descriptor: ProjectDescriptor) -> str:
        return self.render_template("CMakeLists.txt.j2", descriptor)

    def render_vcpkg_manifest(self) -> str:
        """Render an empty vcpkg manifest; dependencies are added by the user."""
        return _dump_json({"dependencies": []})

    def render_cmake_presets(self, descriptor: ProjectDescriptor) -> str:
        """Render ``CMakePresets.json`` with a single Debug configure preset."""
        toolchain_file = VCPKG_TOOLCHAIN_FILE if descriptor.uses_vcpkg else ""
        presets = {
            "version": 3,
            "configurePresets": [
                {
                    "name": f"{descriptor.name}-Debug",
                    "generator": descriptor.preset_generator,
                    "binaryDir": "${sourceDir}/build/${presetName}",
                    "cacheVariables": {
                        "CMAKE_BUILD_TYPE": "Debug",
                        "CMAKE_TOOLCHAIN_FILE": toolchain_file,
                    },
                },
            ],
        }
        return _dump_json(presets)

    # ------------------------------------------------------------------
    # File sets
    # ------------------------------------------------------------------

    def render_project(self, descriptor: ProjectDescriptor) -> Dict[str, str]:
        """Return ``{relative path: content}`` for the project files.

        The mapping is ordered the way files are written: the build
        manifest, the package-manager files (vcpkg only), then the starter
        sources.
        """
        language = descriptor.language_profile
        files: Dict[str, str] = {CMAKE_LISTS: self.render_cmake_lists(descriptor)}

        if descriptor.uses_vcpkg:
            files[VCPKG_MANIFEST] = self.render_vcpkg_manifest()
            files[CMAKE_PRESETS] = self.render_cmake_presets(descriptor)

        files[f"src/main.{descriptor.file_ext}"] = self.render_template(
            language.main_template, descriptor
        )
        if language.precompiled_header:
            files[language.precompiled_header] = self.render_template("pch.hpp.j2", descriptor)

        logger.debug("Rendered %d project files for %s", len(files), descriptor.name)
        return files

    def render_vcs_files(self, descriptor: ProjectDescriptor) -> Dict[str, str]:
        """Return the ``.gitignore`` and ``.gitattributes`` contents."""
        return {
            GITIGNORE: self.render_template("gitignore.j2", descriptor),
            GITATTRIBUTES: self.render_template("gitattributes.j2", descriptor),
        }
