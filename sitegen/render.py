"""Rendu des pages HTML avec Jinja2 / page rendering."""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Any, Callable, Mapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from sitegen import config
from sitegen.catalog import Catalog, Example, example_source
from sitegen.comment import TEMPLATE_FUNCS
from sitegen.commands import BuildError
from sitegen.config import SitePaths
from sitegen.versions import VersionInfo


class RenderError(BuildError):
    pass


class TemplateRenderer:
    """Loads templates from one directory and renders them with a function table."""

    def __init__(self, templates_dir: Path, funcs: Mapping[str, Callable] = TEMPLATE_FUNCS):
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        self.env.globals.update(funcs)
        self.env.filters.update(funcs)

    def render(self, template_name: str, data: Mapping[str, Any]) -> str:
        try:
            return self.env.get_template(template_name).render(**data)
        except TemplateError as e:
            raise RenderError(f"{template_name}: {e}") from e


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(content)


def example_content_path(paths: SitePaths, example: Example) -> Path:
    return paths.examples_dir / f"{example.name}.content.html"


def example_page_path(paths: SitePaths, example: Example) -> Path:
    return paths.examples_dir / f"{example.name}.html"


class PageRenderer:
    def __init__(self, templates: TemplateRenderer, *, site_url: str, copyright: str,
                 versions: VersionInfo, paths: SitePaths):
        self.templates = templates
        self.site_url = site_url
        self.copyright = copyright
        self.versions = versions
        self.paths = paths

    def _example_data(self, example: Example) -> dict:
        return {
            "name": example.name,
            "thumb_width": example.thumb_width,
            "thumb_height": example.thumb_height,
            "width": example.width,
            "height": example.height,
            # Called from the template, so the file is read only when shown.
            "source": partial(example_source, example, self.paths.example_sources_dir),
        }

    def render_home(self, catalog: Catalog) -> Path:
        data = {
            "url": self.site_url,
            "copyright": self.copyright,
            "stable_version": self.versions.stable,
            "dev_version": self.versions.dev,
            "versions": self.versions.summary(),
            "graphics_examples": catalog.graphics,
            "input_examples": catalog.input,
            "audio_examples": catalog.audio,
            "games_examples": catalog.games,
        }
        out = self.paths.index_path
        _write_text(out, self.templates.render(config.INDEX_TEMPLATE, data))
        return out

    def render_content(self, example: Example) -> Path:
        data = {
            "copyright": self.copyright,
            "example": self._example_data(example),
        }
        out = example_content_path(self.paths, example)
        _write_text(out, self.templates.render(config.EXAMPLE_CONTENT_TEMPLATE, data))
        return out

    def render_page(self, example: Example) -> Path:
        data = {
            "url": self.site_url,
            "copyright": self.copyright,
            "example": self._example_data(example),
        }
        out = example_page_path(self.paths, example)
        _write_text(out, self.templates.render(config.EXAMPLE_TEMPLATE, data))
        return out
