from __future__ import annotations

import pytest

from conftest import FakeSourceControl
from sitegen.commands import CommandError
from sitegen.versions import VersionInfo, is_version_tag, resolve_dev, resolve_stable, resolve_versions


def test_stable_is_tag_with_latest_commit() -> None:
    scm = FakeSourceControl(tags={"v1.0": 100, "v2.0": 200, "v0.9": 50})
    assert resolve_stable(scm) == "2.0"


def test_stable_tie_keeps_first_listed() -> None:
    scm = FakeSourceControl(tags={"v1.1": 300, "v1.2": 300, "v1.0": 100})
    assert resolve_stable(scm) == "1.1"


def test_stable_ignores_non_version_tags() -> None:
    scm = FakeSourceControl(tags={"release-3": 900, "v": 800, "v1.3.0": 10})
    assert resolve_stable(scm) == "1.3.0"
    assert scm.timestamp_queries == ["v1.3.0"]


def test_stable_without_matching_tag_is_empty() -> None:
    assert resolve_stable(FakeSourceControl(tags={"foo": 1, "bar": 2})) == ""
    assert resolve_stable(FakeSourceControl()) == ""


def test_stable_tag_listing_failure_is_fatal() -> None:
    scm = FakeSourceControl(tags={"v1.0": 1})
    scm.fail_on.add("tag")
    with pytest.raises(CommandError):
        resolve_stable(scm)


def test_stable_timestamp_failure_is_fatal() -> None:
    scm = FakeSourceControl(tags={"v1.0": 1})
    scm.fail_on.add("log")
    with pytest.raises(CommandError, match="bad revision"):
        resolve_stable(scm)


def test_is_version_tag() -> None:
    assert is_version_tag("v1")
    assert is_version_tag("v1.2.3-rc1")
    assert not is_version_tag("v")
    assert not is_version_tag("1.0")
    assert not is_version_tag("")


def test_dev_version_is_trimmed_marker_file(fake_scm: FakeSourceControl) -> None:
    assert resolve_dev(fake_scm) == "1.5.0-alpha"


def test_dev_version_read_failure_is_fatal() -> None:
    with pytest.raises(CommandError, match="version.txt"):
        resolve_dev(FakeSourceControl())


def test_resolve_versions(fake_scm: FakeSourceControl) -> None:
    fake_scm.tags = {"v1.4.0": 10}
    info = resolve_versions(fake_scm)
    assert info == VersionInfo(stable="1.4.0", dev="1.5.0-alpha")
    assert info.summary() == "v1.4.0 (dev: v1.5.0-alpha)"


def test_dev_version_tolerates_non_utf8_bytes() -> None:
    scm = FakeSourceControl(files={("master", "version.txt"): b"1.5\xff\n"})
    assert resolve_dev(scm) == "1.5�"


def test_version_tag_needs_no_digit_after_prefix() -> None:
    # Any non-empty remainder qualifies, so non-release v-tags compete too.
    assert is_version_tag("vendor-import")
    scm = FakeSourceControl(tags={"v1.0": 100, "vendor-import": 200})
    assert resolve_stable(scm) == "endor-import"
