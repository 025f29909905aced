import pytest

from nvmfab.filters import (
    ctrls_filter,
    namespace_filter,
    paths_filter,
    scan_ctrl_namespace_paths,
    scan_ctrl_namespaces,
    scan_ctrls,
    scan_subsystem_namespaces,
    scan_subsystems,
    subsys_filter,
)


def _populate(directory, names):
    for name in names:
        (directory / name).mkdir()
    return directory


@pytest.mark.parametrize(
    "name, expected",
    [
        ("nvme0n1", True),
        ("nvme12n3", True),
        ("nvme0n1p1", True),
        ("nvme0c0n1", False),
        ("nvme0", False),
        (".nvme0n1", False),
        ("sda", False),
    ],
)
def test_namespace_filter(name, expected):
    assert namespace_filter(name) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("nvme0c0n1", True),
        ("nvme1c2n3", True),
        ("nvme0n1", False),
        ("nvme0", False),
        (".nvme0c0n1", False),
    ],
)
def test_paths_filter(name, expected):
    assert paths_filter(name) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("nvme0", True),
        ("nvme17", True),
        ("nvme0n1", False),
        ("nvme0c0n1", False),
        ("nvme-fabrics", False),
        ("nvme-subsys0", False),
        (".nvme0", False),
        ("loop0", False),
    ],
)
def test_ctrls_filter(name, expected):
    assert ctrls_filter(name) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("nvme-subsys0", True),
        ("nvme-subsys42", True),
        ("nvme-subsys", False),
        ("nvme0", False),
        (".nvme-subsys0", False),
    ],
)
def test_subsys_filter(name, expected):
    assert subsys_filter(name) is expected


def test_filters_are_mutually_exclusive():
    names = ["nvme0", "nvme0n1", "nvme0c0n1", "nvme-subsys0"]
    for name in names:
        hits = [
            f(name)
            for f in (ctrls_filter, paths_filter, subsys_filter)
        ]
        assert sum(hits) <= 1


def test_scan_subsystems_sorted_and_filtered(tmp_path):
    _populate(tmp_path, ["nvme-subsys1", "nvme-subsys0", "other", ".hidden"])
    assert scan_subsystems(tmp_path) == ["nvme-subsys0", "nvme-subsys1"]


def test_scan_ctrls(tmp_path):
    _populate(tmp_path, ["nvme1", "nvme0", "nvme0n1", "nvme-fabrics", "nvme0c0n1"])
    assert scan_ctrls(tmp_path) == ["nvme0", "nvme1"]


def test_scan_subsystem_namespaces(tmp_path):
    _populate(tmp_path, ["nvme0n2", "nvme0n1", "nvme0", "subsysnqn"])
    assert scan_subsystem_namespaces(tmp_path) == ["nvme0n1", "nvme0n2"]


def test_scan_ctrl_namespace_paths(tmp_path):
    _populate(tmp_path, ["nvme0c0n1", "nvme0n1", "device", "nvme0c0n2"])
    assert scan_ctrl_namespace_paths(tmp_path) == ["nvme0c0n1", "nvme0c0n2"]


def test_scan_ctrl_namespaces(tmp_path):
    _populate(tmp_path, ["nvme0c0n1", "nvme0n1", "device"])
    assert scan_ctrl_namespaces(tmp_path) == ["nvme0n1"]


def test_scan_empty_directory(tmp_path):
    assert scan_ctrls(tmp_path) == []


def test_scan_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        scan_subsystems(tmp_path / "absent")