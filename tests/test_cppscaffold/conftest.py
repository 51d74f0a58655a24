# tests/test_cppscaffold/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pytest

from cppscaffold.config import Settings
from cppscaffold.descriptor import ProjectDescriptor
from cppscaffold.toolchain import Toolchain


class FakeToolchain(Toolchain):
    """Records capability calls instead of running cmake/git/vcpkg."""

    def __init__(
        self,
        version: str = "3.28.1",
        probe_error: Optional[Exception] = None,
        init_error: Optional[Exception] = None,
        add_error: Optional[Exception] = None,
        bootstrap_error: Optional[Exception] = None,
    ) -> None:
        self.version = version
        self.probe_error = probe_error
        self.init_error = init_error
        self.add_error = add_error
        self.bootstrap_error = bootstrap_error
        self.calls: List[Tuple] = []

    def probe_cmake_version(self) -> str:
        self.calls.append(("probe",))
        if self.probe_error:
            raise self.probe_error
        return self.version

    def init_repository(self, root: Path) -> None:
        self.calls.append(("init", Path(root)))
        if self.init_error:
            raise self.init_error
        (Path(root) / ".git").mkdir(exist_ok=True)

    def add_files(self, root: Path, paths: Sequence[str]) -> None:
        self.calls.append(("add", Path(root), tuple(paths)))
        if self.add_error:
            raise self.add_error

    def bootstrap_package_manager(self, root: Path) -> None:
        self.calls.append(("bootstrap", Path(root)))
        if self.bootstrap_error:
            raise self.bootstrap_error
        (Path(root) / "vcpkg").mkdir(parents=True, exist_ok=True)

    def names(self) -> List[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def fake_toolchain() -> FakeToolchain:
    return FakeToolchain()


@pytest.fixture
def make_descriptor():
    """Factory for descriptors with sensible defaults."""
    def _factory(**overrides) -> ProjectDescriptor:
        data = dict(
            name="demo",
            artifact_type="executable",
            language="cpp",
            standard="17",
            cmake_version="3.28.1",
            package_manager=None,
        )
        data.update(overrides)
        return ProjectDescriptor(**data)
    return _factory


@pytest.fixture
def cli_obj(tmp_path, fake_toolchain):
    """``obj`` for CliRunner.invoke: fake tools, tmp_path as base dir, fixed settings."""
    return {
        "toolchain": fake_toolchain,
        "base_dir": tmp_path,
        "settings": Settings(),
    }


@pytest.fixture
def make_toolchain():
    """Build a FakeToolchain with custom failures."""
    return FakeToolchain
