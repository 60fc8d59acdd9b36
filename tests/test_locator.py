import os
import stat

import pytest

from kubegather.core.config import GatherSettings
from kubegather.core.errors import (
    AmbiguousRootError,
    BundleNotADirectoryError,
    ResourceReadError,
    RootDepthExceededError,
)
from kubegather.core.locator import BundleLocator

from conftest import skip_as_root


def nest(base, depth):
    path = base
    for i in range(depth):
        path = path / f"wrapper-{i}"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.mark.parametrize("depth", [0, 1, 2, 5, 20])
def test_version_marker_found_through_single_child_chain(tmp_path, depth):
    target = nest(tmp_path / "start", depth)
    (target / "version").write_text("4.16\n")

    root = BundleLocator().locate(tmp_path / "start")
    assert root.path == target.resolve()


def test_marker_directories_identify_root(tmp_path):
    target = nest(tmp_path / "start", 2)
    (target / "namespaces").mkdir()
    (target / "cluster-scoped-resources").mkdir()

    assert BundleLocator().locate(tmp_path / "start").path == target.resolve()


def test_namespaces_alone_is_not_a_root(tmp_path):
    (tmp_path / "namespaces").mkdir()
    # The lone namespaces dir is the only child; it has no children itself.
    with pytest.raises(AmbiguousRootError) as exc:
        BundleLocator().locate(tmp_path)
    assert exc.value.candidates == 0


def test_version_directory_is_not_a_marker(tmp_path):
    (tmp_path / "version").mkdir()
    with pytest.raises(AmbiguousRootError):
        BundleLocator().locate(tmp_path)


def test_realistic_bundle(bundle_top, bundle_dir):
    assert BundleLocator().locate(bundle_top).path == bundle_dir.resolve()


def test_root_itself_is_accepted(bundle_dir):
    assert BundleLocator().locate(bundle_dir).path == bundle_dir.resolve()


def test_files_beside_the_wrapper_are_ignored(tmp_path):
    target = nest(tmp_path, 1)
    (tmp_path / "must-gather.tar.gz").write_bytes(b"\x1f\x8b")
    (tmp_path / "README").write_text("notes")
    (target / "version").write_text("4.16\n")

    assert BundleLocator().locate(tmp_path).path == target.resolve()


def test_two_wrappers_at_one_level_are_ambiguous(tmp_path):
    (tmp_path / "first" / "inner").mkdir(parents=True)
    (tmp_path / "second").mkdir()
    (tmp_path / "first" / "inner" / "version").write_text("4.16\n")

    with pytest.raises(AmbiguousRootError) as exc:
        BundleLocator().locate(tmp_path)
    assert exc.value.candidates == 2
    assert exc.value.code == "AMBIGUOUS_ROOT"


def test_ambiguity_is_detected_below_the_start(tmp_path):
    level = nest(tmp_path, 2)
    (level / "a").mkdir()
    (level / "b").mkdir()

    with pytest.raises(AmbiguousRootError) as exc:
        BundleLocator().locate(tmp_path)
    assert exc.value.path == level.resolve()


def test_empty_directory_has_no_root(tmp_path):
    with pytest.raises(AmbiguousRootError) as exc:
        BundleLocator().locate(tmp_path)
    assert exc.value.candidates == 0


def test_missing_path(tmp_path):
    with pytest.raises(BundleNotADirectoryError):
        BundleLocator().locate(tmp_path / "missing")


def test_file_path(tmp_path):
    target = tmp_path / "version"
    target.write_text("4.16\n")
    with pytest.raises(BundleNotADirectoryError):
        BundleLocator().locate(target)


def test_depth_limit(tmp_path):
    target = nest(tmp_path, 5)
    (target / "version").write_text("4.16\n")

    locator = BundleLocator(GatherSettings(max_root_depth=3))
    with pytest.raises(RootDepthExceededError) as exc:
        locator.locate(tmp_path)
    assert exc.value.max_depth == 3

    assert BundleLocator(GatherSettings(max_root_depth=5)).locate(tmp_path).path == target.resolve()


@pytest.mark.skipif(os.name == "nt", reason="POSIX symlinks")
def test_symlink_cycle_hits_depth_limit(tmp_path):
    loop_dir = tmp_path / "loop"
    loop_dir.mkdir()
    os.symlink(loop_dir, loop_dir / "again", target_is_directory=True)

    with pytest.raises(RootDepthExceededError):
        BundleLocator(GatherSettings(max_root_depth=10)).locate(tmp_path)


def test_invalid_depth_setting_falls_back_to_default():
    assert GatherSettings(max_root_depth="deep").max_root_depth == 64
    assert GatherSettings(max_root_depth=-1).max_root_depth == 64


@skip_as_root
def test_unsearchable_wrapper_is_a_read_error(tmp_path, lock):
    target = nest(tmp_path, 1)
    (target / "version").write_text("4.16\n")
    expected = target.resolve() / "version"
    lock(target, stat.S_IRUSR | stat.S_IWUSR)

    with pytest.raises(ResourceReadError) as exc:
        BundleLocator().locate(tmp_path)
    assert exc.value.code == "READ_ERROR"
    assert exc.value.path == expected


@skip_as_root
def test_unlistable_wrapper_is_a_read_error(tmp_path, lock):
    target = nest(tmp_path, 2)
    (target / "version").write_text("4.16\n")
    wrapper = (tmp_path / "wrapper-0").resolve()
    lock(wrapper, stat.S_IWUSR | stat.S_IXUSR)

    with pytest.raises(ResourceReadError) as exc:
        BundleLocator().locate(tmp_path)
    assert exc.value.path == wrapper
