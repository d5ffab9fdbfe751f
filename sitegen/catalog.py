"""Catalogue des exemples / example gallery catalog.

Order within and across the categories is the display order.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

COMMENT_FOR_2048 = "// Please read examples/2048/main.go and examples/2048/2048/*.go"
COMMENT_FOR_BLOCKS = (
    "// Please read examples/blocks/main.go and examples/blocks/blocks/*.go\n"
    "// NOTE: If Gamepad API is available in your browswer, you can use gamepads. Try it out!"
)

# Multi-file examples: no single main.go worth showing.
SPECIAL_SOURCES = {
    "2048": COMMENT_FOR_2048,
    "blocks": COMMENT_FOR_BLOCKS,
}

TAB_WIDTH = 8


@dataclass(frozen=True)
class Example:
    name: str
    thumb_width: int
    thumb_height: int
    screen_width: int = 0
    screen_height: int = 0

    @property
    def width(self) -> int:
        if self.screen_width == 0:
            return self.thumb_width * 2
        return self.screen_width

    @property
    def height(self) -> int:
        if self.screen_height == 0:
            return self.thumb_height * 2
        return self.screen_height


@dataclass(frozen=True)
class Catalog:
    graphics: tuple[Example, ...] = ()
    input: tuple[Example, ...] = ()
    audio: tuple[Example, ...] = ()
    games: tuple[Example, ...] = ()

    def all_examples(self) -> list[Example]:
        return [*self.graphics, *self.input, *self.audio, *self.games]


def strip_header(text: str) -> str:
    """Drop everything up to and including the first blank line.

    Without a blank line the whole text counts as header.
    """
    head, sep, rest = text.partition("\n\n")
    if not sep:
        return ""
    return rest


def expand_tabs(text: str) -> str:
    return text.replace("\t", " " * TAB_WIDTH)


def source_path(example: Example, sources_dir: Path) -> Path:
    return sources_dir / example.name / "main.go"


def example_source(example: Example, sources_dir: Path) -> str:
    """Display text for an example; read from disk on every call."""
    special = SPECIAL_SOURCES.get(example.name)
    if special is not None:
        return special
    text = source_path(example, sources_dir).read_text(encoding="utf-8", errors="replace")
    return expand_tabs(strip_header(text))


def _std(name: str, w: int = 320, h: int = 240, **kw) -> Example:
    return Example(name=name, thumb_width=w, thumb_height=h, **kw)


GAMES = (
    _std("2048", 210, 300),
    _std("blocks", 256, 240),
)

GRAPHICS = (
    _std("alphablending"),
    _std("flood"),
    _std("font"),
    _std("highdpi"),
    _std("hsv"),
    _std("hue"),
    _std("infinitescroll"),
    _std("life"),
    _std("mandelbrot", 320, 320, screen_width=640, screen_height=640),
    _std("masking"),
    _std("mosaic"),
    _std("noise"),
    _std("paint"),
    _std("perspective"),
    _std("rotate"),
    _std("sprites"),
    _std("tiles", 240, 240),
)

INPUT = (
    _std("gamepad"),
    _std("keyboard"),
    _std("typewriter"),
)

AUDIO = (
    _std("audio"),
    _std("piano"),
    _std("sinewave"),
)

CATALOG = Catalog(graphics=GRAPHICS, input=INPUT, audio=AUDIO, games=GAMES)
EMPTY_CATALOG = Catalog()
