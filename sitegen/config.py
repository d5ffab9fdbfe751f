"""Configuration centralisée du générateur de site.

FR: Constantes du site; chaque valeur peut être surchargée par une variable
d'environnement SITEGEN_<NOM>.
EN: Site constants; each value can be overridden with a SITEGEN_<NAME>
environment variable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

VERSION = "0.9.0"


def _env(name: str, default: str) -> str:
    return os.environ.get(f"SITEGEN_{name}", default).strip() or default


SITE_URL = _env("SITE_URL", "https://hajimehoshi.github.io/ebiten/")
COPYRIGHT_OWNER = _env("COPYRIGHT_OWNER", "Hajime Hoshi")

# Output tree
OUTPUT_DIRNAME = _env("OUTPUT_DIRNAME", "public")
EXAMPLES_DIRNAME = "examples"
RESOURCES_DIRNAME = "_resources"
IMAGES_DIRNAME = "images"
INDEX_FILENAME = "index.html"

# Source control
VERSION_TAG_PREFIX = "v"
VERSION_FILE = _env("VERSION_FILE", "version.txt")
DEV_BRANCH = _env("DEV_BRANCH", "master")
LICENSE_FILENAME = "LICENSE"

# Compiler (GopherJS)
COMPILER = _env("COMPILER", "gopherjs")
COMPILER_BUILD_TAG = "example"
PACKAGE_PREFIX = _env("PACKAGE_PREFIX", "github.com/hajimehoshi/ebiten/examples")

# Templates
INDEX_TEMPLATE = "index.tmpl.html"
EXAMPLE_CONTENT_TEMPLATE = "examplecontent.tmpl.html"
EXAMPLE_TEMPLATE = "example.tmpl.html"
DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@dataclass(frozen=True)
class SitePaths:
    """Emplacements résolus une seule fois / paths resolved once per build."""

    repo_root: Path
    out_dir: Path
    templates_dir: Path = DEFAULT_TEMPLATES_DIR

    @property
    def examples_dir(self) -> Path:
        return self.out_dir / EXAMPLES_DIRNAME

    @property
    def resources_dir(self) -> Path:
        return self.examples_dir / RESOURCES_DIRNAME

    @property
    def shared_images_dir(self) -> Path:
        # Copied in from resources_src on every build.
        return self.resources_dir / IMAGES_DIRNAME

    @property
    def resources_src(self) -> Path:
        return self.repo_root / EXAMPLES_DIRNAME / RESOURCES_DIRNAME

    @property
    def example_sources_dir(self) -> Path:
        return self.repo_root / EXAMPLES_DIRNAME

    @property
    def thumbnails_dir(self) -> Path:
        return self.out_dir / IMAGES_DIRNAME / EXAMPLES_DIRNAME

    @property
    def index_path(self) -> Path:
        return self.out_dir / INDEX_FILENAME

    @property
    def license_path(self) -> Path:
        return self.repo_root / LICENSE_FILENAME


def default_paths(docs_dir: Path) -> SitePaths:
    """Layout used when the script runs from the repository's docs directory."""
    docs_dir = docs_dir.resolve()
    return SitePaths(repo_root=docs_dir.parent, out_dir=docs_dir / OUTPUT_DIRNAME)
