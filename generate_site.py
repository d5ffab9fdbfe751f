#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Régénère le site public: page d'accueil + galerie d'exemples.

Run from the repository's docs directory (or pass --docs-dir). Needs git,
gopherjs and cp on PATH.
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from sitegen import config
from sitegen.builder import GopherJSCompiler
from sitegen.catalog import CATALOG
from sitegen.commands import BuildError
from sitegen.config import SitePaths, default_paths
from sitegen.fs_scan import ShellCopier
from sitegen.logging_utils import error, info
from sitegen.pipeline import SiteBuild, load_context
from sitegen.versions import GitRepository


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Build the project website and example gallery")
    ap.add_argument("--docs-dir", type=Path, default=Path(os.getcwd()))
    ap.add_argument("--repo-root", type=Path, default=None)
    ap.add_argument("--out-dir", type=Path, default=None)
    ap.add_argument("--templates-dir", type=Path, default=None)
    ap.add_argument("--site-url", default=config.SITE_URL)
    return ap.parse_args(argv)


def resolve_paths(args: argparse.Namespace) -> SitePaths:
    paths = default_paths(args.docs_dir)
    return SitePaths(
        repo_root=(args.repo_root or paths.repo_root).resolve(),
        out_dir=(args.out_dir or paths.out_dir).resolve(),
        templates_dir=(args.templates_dir or paths.templates_dir).resolve(),
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    paths = resolve_paths(args)
    info(f"sitegen {config.VERSION}: {paths.repo_root} -> {paths.out_dir}")

    try:
        ctx = load_context(GitRepository(paths.repo_root), paths, site_url=args.site_url)
        SiteBuild(ctx, CATALOG, compiler=GopherJSCompiler(), copier=ShellCopier()).run()
    except BuildError as e:
        error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
