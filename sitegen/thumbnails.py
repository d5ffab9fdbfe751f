"""Vérification des vignettes / thumbnail sanity check (Pillow).

Never fatal: the home page only links to the thumbnails.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from sitegen.catalog import Catalog, Example


@dataclass(frozen=True)
class ThumbnailIssue:
    name: str
    message: str


def thumbnail_path(images_dir: Path, example: Example) -> Path:
    return images_dir / f"{example.name}.png"


def check_thumbnail(images_dir: Path, example: Example) -> ThumbnailIssue | None:
    path = thumbnail_path(images_dir, example)
    if not path.exists():
        return ThumbnailIssue(example.name, f"missing thumbnail {path}")
    try:
        with Image.open(path) as im:
            size = im.size
    except OSError as e:
        return ThumbnailIssue(example.name, f"unreadable thumbnail {path} ({e})")
    expected = (example.thumb_width, example.thumb_height)
    if size != expected:
        return ThumbnailIssue(
            example.name,
            f"thumbnail {path} is {size[0]}x{size[1]}, expected {expected[0]}x{expected[1]}",
        )
    return None


def check_thumbnails(catalog: Catalog, images_dir: Path) -> list[ThumbnailIssue]:
    if not images_dir.is_dir():
        return []
    issues = []
    for e in catalog.all_examples():
        issue = check_thumbnail(images_dir, e)
        if issue is not None:
            issues.append(issue)
    return issues
