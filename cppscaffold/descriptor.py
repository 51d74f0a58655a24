# cppscaffold/descriptor.py
"""
Project descriptor construction.

:func:`build_descriptor` turns raw flag values into a validated, immutable
:class:`ProjectDescriptor`. Validation runs in a fixed order (name, language,
type, package manager, then the CMake version probe) and stops at the first
failure. Nothing here touches the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, cast

from cppscaffold.errors import ConfigError
from cppscaffold.profiles import (
    ARTIFACT_PROFILES,
    DEFAULT_PRESET_GENERATOR,
    LANGUAGE_PROFILES,
    PACKAGE_MANAGERS,
    ArtifactProfile,
    ArtifactType,
    Language,
    LanguageProfile,
)

if TYPE_CHECKING:
    from cppscaffold.toolchain import Toolchain

__all__ = ["ProjectDescriptor", "build_descriptor"]

# Values of -pkgmgr that mean "no package manager".
_NO_PACKAGE_MANAGER = ("", "none")


@dataclass(frozen=True)
class ProjectDescriptor:
    """Validated configuration for one generation run.

    ``cmake_lang`` and ``file_ext`` are derived from ``language`` and cannot
    be passed in.
    """

    name: str
    artifact_type: ArtifactType
    language: Language
    standard: str
    cmake_version: str
    package_manager: Optional[str] = None
    preset_generator: str = DEFAULT_PRESET_GENERATOR

    @property
    def language_profile(self) -> LanguageProfile:
        return LANGUAGE_PROFILES[self.language]

    @property
    def artifact_profile(self) -> ArtifactProfile:
        return ARTIFACT_PROFILES[self.artifact_type]

    @property
    def cmake_lang(self) -> str:
        return self.language_profile.cmake_lang

    @property
    def file_ext(self) -> str:
        return self.language_profile.file_ext

    @property
    def uses_vcpkg(self) -> bool:
        return self.package_manager == "vcpkg"


def _normalize_package_manager(value: Optional[str]) -> Optional[str]:
    """Map the -pkgmgr flag to ``None`` or a supported identifier."""
    token = (value or "").strip().lower()
    if token in _NO_PACKAGE_MANAGER:
        return None
    if token not in PACKAGE_MANAGERS:
        raise ConfigError("unsupported package manager")
    return token


def build_descriptor(
    name: Optional[str],
    artifact_type: str,
    language: str,
    standard: str,
    package_manager: Optional[str],
    toolchain: Toolchain,
    preset_generator: str = DEFAULT_PRESET_GENERATOR,
) -> ProjectDescriptor:
    """Validate raw inputs and probe CMake to build a descriptor.

    Parameters
    ----------
    name, artifact_type, language, standard, package_manager
        Raw flag values.
    toolchain
        Capability used for the CMake version probe. The probe runs last,
        only once every user-supplied value is valid.
    preset_generator
        Generator written into ``CMakePresets.json`` on the vcpkg path.

    Raises
    ------
    ConfigError
        For a missing name or an unsupported language, type or package
        manager.
    ToolchainError
        If the CMake version cannot be detected.
    """
    name = (name or "").strip()
    if not name:
        raise ConfigError("missing name")

    language = (language or "").strip().lower()
    if language not in LANGUAGE_PROFILES:
        raise ConfigError("unsupported language")

    artifact_type = (artifact_type or "").strip().lower()
    if artifact_type not in ARTIFACT_PROFILES:
        raise ConfigError("unsupported project type")

    pkgmgr = _normalize_package_manager(package_manager)

    cmake_version = toolchain.probe_cmake_version()

    return ProjectDescriptor(
        name=name,
        artifact_type=cast(ArtifactType, artifact_type),
        language=cast(Language, language),
        standard=str(standard).strip(),
        cmake_version=cmake_version,
        package_manager=pkgmgr,
        preset_generator=preset_generator,
    )
