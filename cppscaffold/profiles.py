# cppscaffold/profiles.py
"""
Generation profiles for cppscaffold.

The scaffolder's per-language and per-artifact decisions live here as plain
data tables instead of being scattered across template conditionals. The
descriptor derives its CMake language tag and file extension from
:data:`LANGUAGE_PROFILES`; the renderer reads the standard directive, the
precompiled-header switch and the starter files from the same row, and picks
the CMake target command from :data:`ARTIFACT_PROFILES`.

Adding a language or artifact type means adding one row to the matching
table; the ``Literal`` aliases keep the keys in sync for type checkers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple

__all__ = [
    "Language",
    "ArtifactType",
    "LanguageProfile",
    "ArtifactProfile",
    "LANGUAGE_PROFILES",
    "ARTIFACT_PROFILES",
    "PACKAGE_MANAGERS",
    "PROJECT_STRUCTURE",
    "DEFAULT_PRESET_GENERATOR",
]

Language = Literal["c", "cpp"]
ArtifactType = Literal["executable", "library"]


@dataclass(frozen=True)
class LanguageProfile:
    """Everything that changes between C and C++ projects."""

    cmake_lang: str
    file_ext: str
    standard_variable: str
    #: Extra ``set(...)`` lines emitted after the standard directive.
    extra_settings: Tuple[str, ...]
    #: Precompiled header, relative to the project root (None: no PCH).
    precompiled_header: Optional[str]
    #: Template used for ``src/main.<ext>``.
    main_template: str


@dataclass(frozen=True)
class ArtifactProfile:
    """CMake command that declares the build target."""

    cmake_command: str


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

#: Keyed by the ``-lang`` flag value.
LANGUAGE_PROFILES: Dict[Language, LanguageProfile] = {
    "cpp": LanguageProfile(
        cmake_lang="CXX",
        file_ext="cpp",
        standard_variable="CMAKE_CXX_STANDARD",
        extra_settings=(
            "set(CMAKE_CXX_STANDARD_REQUIRED ON)",
            "set(CMAKE_PCH_ENABLED ON)",
        ),
        precompiled_header="include/pch.hpp",
        main_template="main.cpp.j2",
    ),
    "c": LanguageProfile(
        cmake_lang="C",
        file_ext="c",
        standard_variable="CMAKE_C_STANDARD",
        extra_settings=(),
        precompiled_header=None,
        main_template="main.c.j2",
    ),
}

#: Keyed by the ``-type`` flag value.
ARTIFACT_PROFILES: Dict[ArtifactType, ArtifactProfile] = {
    "executable": ArtifactProfile(cmake_command="add_executable"),
    "library": ArtifactProfile(cmake_command="add_library"),
}

#: Supported package managers. Only vcpkg is wired up.
PACKAGE_MANAGERS: Tuple[str, ...] = ("vcpkg",)

#: Generator written into CMakePresets.json unless configured otherwise.
DEFAULT_PRESET_GENERATOR = "Visual Studio 17 2022"

#: Directory tree created under the new project root.
PROJECT_STRUCTURE: Tuple[str, ...] = ("src", "include", "build")
