from __future__ import annotations

from pathlib import Path

import pytest

import generate_site
from conftest import FakeSourceControl


def test_resolve_paths_defaults(tmp_path: Path) -> None:
    docs = tmp_path / "_docs"
    docs.mkdir()
    paths = generate_site.resolve_paths(generate_site.parse_args(["--docs-dir", str(docs)]))
    assert paths.repo_root == tmp_path.resolve()
    assert paths.out_dir == docs.resolve() / "public"


def test_main_returns_nonzero_on_fatal_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    scm = FakeSourceControl()
    scm.fail_on.add("tag")
    monkeypatch.setattr(generate_site, "GitRepository", lambda root: scm)

    assert generate_site.main(["--docs-dir", str(tmp_path / "_docs")]) == 1
    assert "not a git repository" in capsys.readouterr().err
