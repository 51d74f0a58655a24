"""
cppscaffold: CMake project scaffolding for C and C++.

Creates the folder layout, CMakeLists.txt, starter sources, optional vcpkg
manifest/presets and an optional Git repository for a new project.
"""

__version__ = "1.0.0"
__license__ = "Apache-2.0"

from .cli import cli

__all__ = ["cli"]
