"""Name filters and directory scans for NVMe sysfs entries."""

import os
import re

__all__ = [
    "CTRL_SYSFS_DIR",
    "NS_SYSFS_DIR",
    "SUBSYS_SYSFS_DIR",
    "namespace_filter",
    "paths_filter",
    "ctrls_filter",
    "subsys_filter",
    "scan_subsystems",
    "scan_ctrls",
    "scan_subsystem_namespaces",
    "scan_ctrl_namespace_paths",
    "scan_ctrl_namespaces",
]

CTRL_SYSFS_DIR = "/sys/class/nvme"
NS_SYSFS_DIR = "/sys/block"
SUBSYS_SYSFS_DIR = "/sys/class/nvme-subsystem"

# A decimal conversion as scanf reads it: optional blanks, optional sign.
_INT = r"\s*[+-]?\d+"

_NAMESPACE = re.compile(rf"nvme{_INT}n{_INT}")
_PATH = re.compile(rf"nvme{_INT}c{_INT}n{_INT}")
_CTRL = re.compile(rf"nvme{_INT}")
_SUBSYS = re.compile(rf"nvme-subsys{_INT}")


def _visible(name: str) -> bool:
    return not name.startswith(".")


def namespace_filter(name: str) -> bool:
    """Return True for namespace entries such as ``nvme0n1``."""
    return _visible(name) and "nvme" in name and bool(_NAMESPACE.match(name))


def paths_filter(name: str) -> bool:
    """Return True for namespace path entries such as ``nvme0c1n1``."""
    return _visible(name) and "nvme" in name and bool(_PATH.match(name))


def ctrls_filter(name: str) -> bool:
    """Return True for controller entries such as ``nvme0``.

    Path and namespace entries are excluded.
    """
    if not _visible(name) or "nvme" not in name:
        return False
    if _PATH.match(name) or _NAMESPACE.match(name):
        return False
    return bool(_CTRL.match(name))


def subsys_filter(name: str) -> bool:
    """Return True for subsystem entries such as ``nvme-subsys0``."""
    return _visible(name) and "nvme-subsys" in name and bool(_SUBSYS.match(name))


def _scan(directory, predicate) -> list[str]:
    return sorted(name for name in os.listdir(directory) if predicate(name))


def scan_subsystems(sysfs_dir=SUBSYS_SYSFS_DIR) -> list[str]:
    """List the subsystem entries under ``sysfs_dir``, sorted by name."""
    return _scan(sysfs_dir, subsys_filter)


def scan_ctrls(sysfs_dir=CTRL_SYSFS_DIR) -> list[str]:
    """List the controller entries under ``sysfs_dir``, sorted by name."""
    return _scan(sysfs_dir, ctrls_filter)


def scan_subsystem_namespaces(subsys_dir) -> list[str]:
    """List the namespace entries of a subsystem directory, sorted by name."""
    return _scan(subsys_dir, namespace_filter)


def scan_ctrl_namespace_paths(ctrl_dir) -> list[str]:
    """List the namespace path entries of a controller directory, sorted."""
    return _scan(ctrl_dir, paths_filter)


def scan_ctrl_namespaces(ctrl_dir) -> list[str]:
    """List the namespace entries of a controller directory, sorted."""
    return _scan(ctrl_dir, namespace_filter)