# cppscaffold/config.py
"""
Runtime settings for cppscaffold.

Settings come from the process environment, optionally seeded from a
``.env`` file in the working directory. Shell exports always win over
``.env`` values.

Environment variables
---------------------
CPPSCAFFOLD_CMAKE
    CMake executable used for the version probe (default ``cmake``).
CPPSCAFFOLD_GIT
    Git executable used for cloning vcpkg and initializing repositories
    (default ``git``).
CPPSCAFFOLD_VCPKG_URL
    Repository cloned into ``<project>/vcpkg``.
CPPSCAFFOLD_PRESET_GENERATOR
    Generator written to ``CMakePresets.json`` (default
    ``Visual Studio 17 2022``).
CPPSCAFFOLD_LOG_LEVEL
    Logger level name (default ``WARNING``; ``-v`` forces ``DEBUG``).
CPPSCAFFOLD_LOG_FILE
    Optional path for a UTF-8 log file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from cppscaffold.profiles import DEFAULT_PRESET_GENERATOR

__all__ = ["Settings", "DEFAULT_VCPKG_URL"]

DEFAULT_VCPKG_URL = "https://github.com/Microsoft/vcpkg.git"


def _env(environ: Mapping[str, str], key: str, default: str) -> str:
    value = environ.get(key, "").strip()
    return value or default


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one invocation."""

    cmake_executable: str = "cmake"
    git_executable: str = "git"
    vcpkg_url: str = DEFAULT_VCPKG_URL
    preset_generator: str = DEFAULT_PRESET_GENERATOR
    log_level: int = logging.WARNING
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (default: ``.env`` + ``os.environ``)."""
        if environ is None:
            load_dotenv(override=False)
            environ = os.environ

        level_name = _env(environ, "CPPSCAFFOLD_LOG_LEVEL", "WARNING").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            # Unknown level names resolve to "Level X" strings.
            level = logging.WARNING

        return cls(
            cmake_executable=_env(environ, "CPPSCAFFOLD_CMAKE", "cmake"),
            git_executable=_env(environ, "CPPSCAFFOLD_GIT", "git"),
            vcpkg_url=_env(environ, "CPPSCAFFOLD_VCPKG_URL", DEFAULT_VCPKG_URL),
            preset_generator=_env(
                environ, "CPPSCAFFOLD_PRESET_GENERATOR", DEFAULT_PRESET_GENERATOR
            ),
            log_level=level,
            log_file=environ.get("CPPSCAFFOLD_LOG_FILE") or None,
        )
