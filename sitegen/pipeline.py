"""Enchaînement du build / build orchestration.

Clear -> RenderHome -> ResetExamplesDir -> CopyResources
-> for each example: RenderContent -> Build -> RenderFullPage -> Done.

The first error aborts the build; files already written stay on disk.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from jinja2 import TemplateError

from sitegen import config
from sitegen.builder import Compiler, build_example
from sitegen.catalog import Catalog
from sitegen.commands import BuildError
from sitegen.config import SitePaths
from sitegen.fs_scan import Copier, clear, copy_resources, create_examples_dir
from sitegen.logging_utils import info, progress, warn
from sitegen.render import PageRenderer, TemplateRenderer
from sitegen.thumbnails import check_thumbnails
from sitegen.versions import SourceControl, VersionInfo, resolve_versions

_COPYRIGHT_RE = re.compile(r"Copyright\s+(?:\(c\)\s+|©\s*)?(\d{4})")


def license_year(license_path: Path) -> int:
    try:
        text = license_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise BuildError(f"cannot read {license_path}: {e}") from e
    m = _COPYRIGHT_RE.search(text)
    if m is None:
        raise BuildError(f"no copyright year in {license_path}")
    return int(m.group(1))


def make_copyright(year: int, owner: str = config.COPYRIGHT_OWNER) -> str:
    return f"© {year} {owner}"


@dataclass(frozen=True)
class BuildContext:
    site_url: str
    copyright: str
    versions: VersionInfo
    paths: SitePaths


def load_context(scm: SourceControl, paths: SitePaths, site_url: str = config.SITE_URL) -> BuildContext:
    """Resolve everything the pages need before any file is touched."""
    versions = resolve_versions(scm)
    info(f"Versions: stable={versions.stable!r} dev={versions.dev!r}")
    return BuildContext(
        site_url=site_url,
        copyright=make_copyright(license_year(paths.license_path)),
        versions=versions,
        paths=paths,
    )


class Stage(Enum):
    CLEAR = "clear"
    RENDER_HOME = "render home page"
    RESET_EXAMPLES_DIR = "reset examples directory"
    COPY_RESOURCES = "copy resources"
    RENDER_CONTENT = "render example content"
    BUILD = "build example"
    RENDER_PAGE = "render example page"
    DONE = "done"


class BuildAborted(BuildError):
    def __init__(self, stage: Stage, cause: Exception, example: str | None = None):
        self.stage = stage
        self.cause = cause
        self.example = example
        where = stage.value if example is None else f"{stage.value} ({example})"
        super().__init__(f"{where}: {cause}")


class SiteBuild:
    def __init__(self, ctx: BuildContext, catalog: Catalog, *, compiler: Compiler, copier: Copier,
                 templates: TemplateRenderer | None = None):
        self.ctx = ctx
        self.catalog = catalog
        self.compiler = compiler
        self.copier = copier
        self.pages = PageRenderer(
            templates or TemplateRenderer(ctx.paths.templates_dir),
            site_url=ctx.site_url,
            copyright=ctx.copyright,
            versions=ctx.versions,
            paths=ctx.paths,
        )
        self.stage = Stage.CLEAR
        self.current: str | None = None

    def _enter(self, stage: Stage, example: str | None = None) -> None:
        self.stage = stage
        self.current = example

    def run(self) -> None:
        try:
            self._run()
        except (BuildError, OSError, TemplateError) as e:
            raise BuildAborted(self.stage, e, self.current) from e

    def _run(self) -> None:
        paths = self.ctx.paths

        self._enter(Stage.CLEAR)
        clear(paths)

        self._enter(Stage.RENDER_HOME)
        self.pages.render_home(self.catalog)
        for issue in check_thumbnails(self.catalog, paths.thumbnails_dir):
            warn(issue.message)

        self._enter(Stage.RESET_EXAMPLES_DIR)
        create_examples_dir(paths)

        self._enter(Stage.COPY_RESOURCES)
        copy_resources(self.copier, paths)

        examples = self.catalog.all_examples()
        for i, e in enumerate(examples, start=1):
            progress("Examples", i, len(examples), e.name)
            self._enter(Stage.RENDER_CONTENT, e.name)
            self.pages.render_content(e)
            self._enter(Stage.BUILD, e.name)
            build_example(self.compiler, paths, e)
            self._enter(Stage.RENDER_PAGE, e.name)
            self.pages.render_page(e)

        self._enter(Stage.DONE)
        info(f"Site written to {paths.out_dir}")
