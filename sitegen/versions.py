"""Résolution des versions stable/dev depuis l'historique git.

EN: The stable version comes from the `v<rest>` tag whose commit is the most
recent; the dev version is the content of the version marker file on the
development branch.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from sitegen import config
from sitegen.commands import BuildError, run_command
from sitegen.logging_utils import dbg


class SourceControl(Protocol):
    def list_tags(self) -> Sequence[str]: ...

    def commit_timestamp(self, ref: str) -> int: ...

    def read_file_at_ref(self, ref: str, path: str) -> bytes: ...


class GitRepository:
    """SourceControl backed by the git executable."""

    def __init__(self, root: Path, git: str = "git"):
        self.root = root
        self.git = git

    def _git(self, *args: str) -> bytes:
        return run_command([self.git, *args], cwd=self.root)

    def list_tags(self) -> list[str]:
        out = self._git("tag").decode("utf-8", errors="replace")
        return [t for t in out.split("\n") if t.strip()]

    def commit_timestamp(self, ref: str) -> int:
        out = self._git("log", ref, "-1", "--format=%ct").decode("utf-8", errors="replace").strip()
        try:
            return int(out)
        except ValueError as e:
            raise BuildError(f"git log {ref}: unexpected commit time {out!r}") from e

    def read_file_at_ref(self, ref: str, path: str) -> bytes:
        return self._git("show", f"{ref}:{path}")


@dataclass(frozen=True)
class VersionInfo:
    stable: str = ""
    dev: str = ""

    def summary(self) -> str:
        return f"v{self.stable} (dev: v{self.dev})"


def is_version_tag(tag: str) -> bool:
    """True for `v` followed by one or more characters.

    No digit is required after the prefix: `vendor-import` is a candidate too.
    """
    return tag.startswith(config.VERSION_TAG_PREFIX) and len(tag) > len(config.VERSION_TAG_PREFIX)


def tag_version(tag: str) -> str:
    return tag[len(config.VERSION_TAG_PREFIX):]


def resolve_stable(scm: SourceControl) -> str:
    """Version of the matching tag with the latest commit time, or "".

    Ties keep the tag listed first.
    """
    best = ""
    best_time: int | None = None
    for tag in scm.list_tags():
        tag = tag.strip()
        if not is_version_tag(tag):
            continue
        t = scm.commit_timestamp(tag)
        dbg(f"tag {tag}: {t}")
        if best_time is not None and t <= best_time:
            continue
        best_time = t
        best = tag_version(tag)
    return best


def resolve_dev(scm: SourceControl, ref: str = config.DEV_BRANCH, path: str = config.VERSION_FILE) -> str:
    return scm.read_file_at_ref(ref, path).decode("utf-8", errors="replace").strip()


def resolve_versions(scm: SourceControl) -> VersionInfo:
    return VersionInfo(stable=resolve_stable(scm), dev=resolve_dev(scm))
