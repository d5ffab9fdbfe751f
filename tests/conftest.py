from __future__ import annotations

from pathlib import Path

import pytest

from sitegen.commands import CommandError
from sitegen.config import SitePaths


class FakeSourceControl:
    """In-memory git: tags -> commit time, (ref, path) -> content."""

    def __init__(self, tags: dict[str, int] | None = None, files: dict[tuple[str, str], bytes] | None = None):
        self.tags = dict(tags or {})
        self.files = dict(files or {})
        self.fail_on: set[str] = set()
        self.timestamp_queries: list[str] = []

    def list_tags(self) -> list[str]:
        if "tag" in self.fail_on:
            raise CommandError(["git", "tag"], 128, "fatal: not a git repository")
        return list(self.tags)

    def commit_timestamp(self, ref: str) -> int:
        self.timestamp_queries.append(ref)
        if "log" in self.fail_on:
            raise CommandError(["git", "log", ref], 128, "fatal: bad revision")
        return self.tags[ref]

    def read_file_at_ref(self, ref: str, path: str) -> bytes:
        try:
            return self.files[(ref, path)]
        except KeyError:
            raise CommandError(["git", "show", f"{ref}:{path}"], 128, f"fatal: path '{path}' does not exist") from None


class FakeCompiler:
    def __init__(self, fail_on: str | None = None):
        self.calls: list[tuple[Path, str]] = []
        self.fail_on = fail_on

    def build(self, output: Path, package: str) -> None:
        self.calls.append((output, package))
        if self.fail_on and package.endswith("/" + self.fail_on):
            raise CommandError(["gopherjs", "build", package], 1, "compile error")
        output.write_text("// bundle\n", encoding="utf-8")


class FakeCopier:
    def __init__(self):
        self.calls: list[tuple[Path, Path]] = []

    def copy_tree(self, src: Path, dst: Path) -> None:
        self.calls.append((src, dst))


def write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline="\n")


@pytest.fixture
def site_paths(tmp_path: Path) -> SitePaths:
    repo = tmp_path / "repo"
    write(repo / "LICENSE", "Copyright 2014 Hajime Hoshi\n\nApache License\n")
    out = repo / "_docs" / "public"
    out.mkdir(parents=True)
    return SitePaths(repo_root=repo, out_dir=out)


@pytest.fixture
def fake_scm() -> FakeSourceControl:
    return FakeSourceControl(files={("master", "version.txt"): b"1.5.0-alpha\n"})
