"""Couche disque: nettoyage et préparation du dossier de sortie.

FR: Parcours du dossier de sortie avec élagage (comme find_final_jpgs).
EN: Output tree walk with pruning, examples dir reset, resource copy.
"""

from __future__ import annotations

import os
import shutil
from enum import Enum
from pathlib import Path
from typing import Callable, Protocol

from sitegen.commands import run_command
from sitegen.config import SitePaths
from sitegen.logging_utils import dbg


class WalkAction(Enum):
    CONTINUE = "continue"
    DELETE = "delete"
    DELETE_SUBTREE = "delete-subtree"
    SKIP_SUBTREE = "skip-subtree"


Visitor = Callable[[Path], WalkAction]


def _raise(err: OSError) -> None:
    raise err


def _apply(path: Path, action: WalkAction) -> bool:
    """Carry out action on path; True when the walk should descend into it."""
    if action is WalkAction.CONTINUE:
        return True
    if action is WalkAction.SKIP_SUBTREE:
        return False
    dbg(f"remove {path}")
    if action is WalkAction.DELETE_SUBTREE and path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.is_dir() and not path.is_symlink():
        path.rmdir()
    else:
        path.unlink()
    return False


def walk_tree(root: Path, visit: Visitor) -> None:
    """Visit root, then every entry below it in sorted order.

    Entries that are deleted or skipped are not descended into. Any OSError,
    including a missing root, aborts the walk.
    """
    root.lstat()
    if not _apply(root, visit(root)) or not root.is_dir():
        return
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        d = Path(dirpath)
        kept = []
        for name in sorted(dirnames):
            if _apply(d / name, visit(d / name)):
                kept.append(name)
        dirnames[:] = kept
        for name in sorted(filenames):
            _apply(d / name, visit(d / name))


def is_backup_path(path: Path) -> bool:
    return path.name.endswith("~")


def is_generated_html(path: Path) -> bool:
    return path.name.endswith(".html")


def is_shared_images_dir(path: Path, paths: SitePaths) -> bool:
    return path == paths.shared_images_dir


def clear_visitor(paths: SitePaths) -> Visitor:
    def visit(path: Path) -> WalkAction:
        if is_backup_path(path):
            return WalkAction.SKIP_SUBTREE
        if is_generated_html(path):
            return WalkAction.DELETE
        if is_shared_images_dir(path, paths):
            return WalkAction.DELETE_SUBTREE
        return WalkAction.CONTINUE

    return visit


def clear(paths: SitePaths) -> None:
    """Remove generated html files and the copied shared images."""
    walk_tree(paths.out_dir, clear_visitor(paths))


def create_examples_dir(paths: SitePaths) -> None:
    if paths.examples_dir.exists():
        shutil.rmtree(paths.examples_dir)
    paths.examples_dir.mkdir(mode=0o755, parents=True)


class Copier(Protocol):
    def copy_tree(self, src: Path, dst: Path) -> None: ...


class ShellCopier:
    """Copier backed by `cp -R`."""

    def copy_tree(self, src: Path, dst: Path) -> None:
        run_command(["cp", "-R", str(src), str(dst)])


def copy_resources(copier: Copier, paths: SitePaths) -> None:
    copier.copy_tree(paths.resources_src, paths.resources_dir)
