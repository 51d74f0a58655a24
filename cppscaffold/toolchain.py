# cppscaffold/toolchain.py
"""
External tool capabilities for cppscaffold.

The generator never calls ``subprocess`` directly. It talks to a
:class:`Toolchain`, which exposes the four things a run needs from the
outside world:

- ``probe_cmake_version``: ``cmake --version`` parsed to ``X.Y.Z``
- ``init_repository``: ``git init``
- ``add_files``: ``git add <paths>``
- ``bootstrap_package_manager``: clone vcpkg, run its bootstrap script and
  create an application manifest

:class:`SubprocessToolchain` is the real implementation. Tests substitute a
fake that records calls instead of running binaries.

Every command blocks until completion. A non-zero exit, or an executable
that cannot be started, raises :class:`ExternalToolError`; nothing is
retried.
"""

from __future__ import annotations

import os
import re
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence

from packaging.version import InvalidVersion, Version

from cppscaffold.config import Settings
from cppscaffold.errors import ExternalToolError, ToolchainError
from cppscaffold.log_manager import get_logger

__all__ = [
    "Toolchain",
    "SubprocessToolchain",
    "parse_cmake_version",
    "vcpkg_bootstrap_script",
    "vcpkg_executable",
]

logger = get_logger("cppscaffold.toolchain")

_CMAKE_VERSION_RE = re.compile(r"cmake version (\d+\.\d+\.\d+)")

VCPKG_DIR = "vcpkg"


def parse_cmake_version(output: str) -> str:
    """Extract ``X.Y.Z`` from ``cmake --version`` output.

    Raises
    ------
    ToolchainError
        If the output does not contain ``cmake version X.Y.Z``.
    """
    match = _CMAKE_VERSION_RE.search(output or "")
    if not match:
        raise ToolchainError("version detection failed: unable to parse CMake version")
    token = match.group(1)
    try:
        Version(token)
    except InvalidVersion as exc:
        raise ToolchainError(f"version detection failed: {exc}") from exc
    return token


def vcpkg_bootstrap_script(vcpkg_root: Path, platform_name: Optional[str] = None) -> Path:
    """Return the bootstrap script for the current platform."""
    platform_name = platform_name or os.name
    script = "bootstrap-vcpkg.bat" if platform_name == "nt" else "bootstrap-vcpkg.sh"
    return vcpkg_root / script


def vcpkg_executable(vcpkg_root: Path, platform_name: Optional[str] = None) -> Path:
    platform_name = platform_name or os.name
    return vcpkg_root / ("vcpkg.exe" if platform_name == "nt" else "vcpkg")


class Toolchain(ABC):
    """Capability interface over cmake, git and vcpkg."""

    @abstractmethod
    def probe_cmake_version(self) -> str:
        """Return the installed CMake version as ``X.Y.Z``."""

    @abstractmethod
    def init_repository(self, root: Path) -> None:
        """Initialize a git repository in ``root``."""

    @abstractmethod
    def add_files(self, root: Path, paths: Sequence[str]) -> None:
        """Stage ``paths`` (relative to ``root``) in the repository."""

    @abstractmethod
    def bootstrap_package_manager(self, root: Path) -> None:
        """Fetch and bootstrap vcpkg under ``root/vcpkg``."""


class SubprocessToolchain(Toolchain):
    """:class:`Toolchain` backed by real executables."""

    def __init__(self, settings: Optional[Settings] = None, platform_name: Optional[str] = None) -> None:
        self.settings = settings or Settings()
        self.platform_name = platform_name or os.name

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------

    def _run(self, cmd: List[str], cwd: Optional[Path] = None, what: str = "") -> subprocess.CompletedProcess:
        """Run ``cmd`` to completion, raising ExternalToolError on failure."""
        what = what or cmd[0]
        logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd or ".")
        try:
            proc = subprocess.run(
                cmd,
                cwd=str(cwd) if cwd else None,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise ExternalToolError(f"{what} failed: {exc}", command=cmd) from exc

        if proc.returncode != 0:
            stderr = (proc.stderr or "").strip()
            logger.debug("%s exited with %s: %s", cmd[0], proc.returncode, stderr)
            detail = f": {stderr}" if stderr else ""
            raise ExternalToolError(
                f"{what} failed (exit code {proc.returncode}){detail}",
                command=cmd,
                returncode=proc.returncode,
                stderr=stderr,
            )
        return proc

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    def probe_cmake_version(self) -> str:
        cmd = [self.settings.cmake_executable, "--version"]
        try:
            proc = self._run(cmd, what="cmake --version")
        except ExternalToolError as exc:
            raise ToolchainError(f"version detection failed: {exc.message}") from exc
        version = parse_cmake_version(proc.stdout)
        logger.debug("Detected CMake %s", version)
        return version

    def init_repository(self, root: Path) -> None:
        self._run([self.settings.git_executable, "init"], cwd=root, what="git init")

    def add_files(self, root: Path, paths: Sequence[str]) -> None:
        self._run([self.settings.git_executable, "add", *paths], cwd=root, what="git add")

    def bootstrap_package_manager(self, root: Path) -> None:
        root = Path(root).resolve()
        vcpkg_root = root / VCPKG_DIR
        self._run(
            [self.settings.git_executable, "clone", self.settings.vcpkg_url, str(vcpkg_root)],
            what="cloning vcpkg",
        )
        script = vcpkg_bootstrap_script(vcpkg_root, self.platform_name)
        self._run([str(script)], cwd=vcpkg_root, what="bootstrapping vcpkg")
        self._run(
            [str(vcpkg_executable(vcpkg_root, self.platform_name)), "new", "--application"],
            cwd=root,
            what="creating vcpkg manifest",
        )
