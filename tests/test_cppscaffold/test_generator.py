"""
Tests for cppscaffold.generator: the single generation pass and the Git step.
"""

from __future__ import annotations

import pytest

from cppscaffold.errors import ExternalToolError, FileWriteError
from cppscaffold.generator import (
    generate_project,
    initialize_version_control,
    wants_version_control,
)


def test_generate_cpp_executable(tmp_path, make_descriptor, fake_toolchain):
    result = generate_project(make_descriptor(), fake_toolchain, base_dir=tmp_path)

    root = tmp_path / "demo"
    assert result.root == root
    for sub in ("src", "include", "build"):
        assert (root / sub).is_dir()
    assert (root / "CMakeLists.txt").exists()
    assert (root / "src" / "main.cpp").exists()
    assert (root / "include" / "pch.hpp").exists()
    assert result.files[0] == root / "CMakeLists.txt"
    assert fake_toolchain.calls == []
    assert not result.vcpkg_bootstrapped


def test_generate_twice_into_existing_tree(tmp_path, make_descriptor, fake_toolchain):
    d = make_descriptor(language="c")
    generate_project(d, fake_toolchain, base_dir=tmp_path)
    (tmp_path / "demo" / "src" / "main.c").write_text("edited", encoding="utf-8")

    generate_project(d, fake_toolchain, base_dir=tmp_path)

    assert "printf" in (tmp_path / "demo" / "src" / "main.c").read_text(encoding="utf-8")


def test_generate_vcpkg_bootstraps_once(tmp_path, make_descriptor, fake_toolchain):
    d = make_descriptor(package_manager="vcpkg")

    first = generate_project(d, fake_toolchain, base_dir=tmp_path)
    second = generate_project(d, fake_toolchain, base_dir=tmp_path)

    assert first.vcpkg_bootstrapped is True
    assert second.vcpkg_bootstrapped is False
    assert fake_toolchain.names() == ["bootstrap"]
    assert (tmp_path / "demo" / "vcpkg.json").exists()
    assert (tmp_path / "demo" / "CMakePresets.json").exists()


def test_bootstrap_failure_aborts_before_sources(tmp_path, make_descriptor, make_toolchain):
    tc = make_toolchain(bootstrap_error=ExternalToolError("cloning vcpkg failed (exit code 128)"))
    with pytest.raises(ExternalToolError):
        generate_project(make_descriptor(package_manager="vcpkg"), tc, base_dir=tmp_path)

    root = tmp_path / "demo"
    assert (root / "CMakeLists.txt").exists()
    assert not (root / "vcpkg.json").exists()
    assert not (root / "src" / "main.cpp").exists()


def test_generate_fails_when_root_is_a_file(tmp_path, make_descriptor, fake_toolchain):
    (tmp_path / "demo").write_text("", encoding="utf-8")
    with pytest.raises(FileWriteError):
        generate_project(make_descriptor(), fake_toolchain, base_dir=tmp_path)


# -----------------------------
# Version control
# -----------------------------

@pytest.mark.parametrize("answer, expected", [
    ("y", True), ("Y", True), (" yes \n", True), ("YES", True),
    ("n", False), ("", False), ("no", False), ("yep", False), (None, False),
])
def test_wants_version_control(answer, expected):
    assert wants_version_control(answer) is expected


def test_initialize_version_control(tmp_path, make_descriptor, fake_toolchain):
    d = make_descriptor()
    result = generate_project(d, fake_toolchain, base_dir=tmp_path)

    initialize_version_control(d, result, fake_toolchain)

    root = tmp_path / "demo"
    assert (root / ".gitignore").exists()
    assert (root / ".gitattributes").exists()
    assert fake_toolchain.calls == [
        ("init", root),
        ("add", root, (".gitignore", ".gitattributes")),
    ]
    assert result.vcs_initialized and result.vcs_files_staged


def test_git_init_failure_propagates(tmp_path, make_descriptor, make_toolchain):
    tc = make_toolchain(init_error=ExternalToolError("git init failed (exit code 1)"))
    d = make_descriptor()
    result = generate_project(d, tc, base_dir=tmp_path)

    with pytest.raises(ExternalToolError):
        initialize_version_control(d, result, tc)
    assert not (tmp_path / "demo" / ".gitignore").exists()


def test_git_add_failure_only_warns(tmp_path, make_descriptor, make_toolchain, capsys):
    tc = make_toolchain(add_error=ExternalToolError("git add failed (exit code 128)"))
    d = make_descriptor()
    result = generate_project(d, tc, base_dir=tmp_path)

    initialize_version_control(d, result, tc)

    assert result.vcs_initialized is True
    assert result.vcs_files_staged is False
    assert (tmp_path / "demo" / ".gitignore").exists()
    assert "Error adding .gitignore/.gitattributes to Git" in capsys.readouterr().out
