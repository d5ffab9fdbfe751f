"""Compilation des exemples en JavaScript / example bundles."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from sitegen import config
from sitegen.catalog import Example
from sitegen.commands import run_command
from sitegen.config import SitePaths


class Compiler(Protocol):
    def build(self, output: Path, package: str) -> None: ...


class GopherJSCompiler:
    def __init__(self, executable: str = config.COMPILER, build_tag: str = config.COMPILER_BUILD_TAG):
        self.executable = executable
        self.build_tag = build_tag

    def argv(self, output: Path, package: str) -> list[str]:
        return [self.executable, "build", "--tags", self.build_tag, "-m", "-o", str(output), package]

    def build(self, output: Path, package: str) -> None:
        run_command(self.argv(output, package))


def bundle_path(paths: SitePaths, example: Example) -> Path:
    return paths.examples_dir / f"{example.name}.js"


def package_path(example: Example, prefix: str = config.PACKAGE_PREFIX) -> str:
    return f"{prefix}/{example.name}"


def build_example(compiler: Compiler, paths: SitePaths, example: Example) -> Path:
    out = bundle_path(paths, example)
    compiler.build(out, package_path(example))
    return out
