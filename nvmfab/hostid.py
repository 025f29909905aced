"""Reading and generating the host NQN and host identifier."""

import os
import re
import uuid
from typing import Optional

__all__ = [
    "HOSTNQN_FILE",
    "HOSTID_FILE",
    "PATH_UUID_IBM",
    "PATH_DMI_ENTRIES",
    "PATH_DMI_PROD_UUID",
    "dmi_raw_to_uuid",
    "uuid_from_product_uuid",
    "uuid_from_dmi_entries",
    "uuid_from_device_tree",
    "uuid_from_dmi",
    "hostnqn_generate",
    "hostnqn_from_file",
    "hostid_from_file",
]

SYSCONFDIR = "/etc"
HOSTNQN_FILE = f"{SYSCONFDIR}/nvme/hostnqn"
HOSTID_FILE = f"{SYSCONFDIR}/nvme/hostid"

PATH_UUID_IBM = "/proc/device-tree/ibm,partition-uuid"
PATH_DMI_ENTRIES = "/sys/firmware/dmi/entries"
PATH_DMI_PROD_UUID = "/sys/class/dmi/id/product_uuid"

_UUID_SIZE = 37  # 36 characters plus terminator
_NQN_SIZE = 223
_HOSTID_SIZE = 37
_DMI_READ = 512
_NQN_PREFIX = "nqn.2014-08.org.nvmexpress:uuid:"
_LEADING_INT = re.compile(rb"\s*([+-]?\d+)")


def dmi_raw_to_uuid(raw: bytes) -> str:
    """Format the system UUID of a raw SMBIOS type 1 entry.

    The first three UUID fields are stored little-endian.
    """
    u = bytes(raw)[8:24]
    if len(u) != 16:
        raise ValueError("DMI entry too short for a system UUID")
    order = (3, 2, 1, 0, 5, 4, 7, 6)
    head = "".join(f"{u[i]:02x}" for i in order)
    return (
        f"{head[:8]}-{head[8:12]}-{head[12:16]}-"
        f"{u[8]:02x}{u[9]:02x}-{u[10:16].hex()}"
    )


def _read(path, size: int) -> Optional[bytes]:
    try:
        with open(path, "rb") as f:
            return f.read(size)
    except OSError:
        return None


def uuid_from_product_uuid(path=PATH_DMI_PROD_UUID) -> Optional[str]:
    """Read the system UUID from the DMI product_uuid file, or None."""
    try:
        with open(path, "rb") as f:
            line = f.readline()
    except OSError:
        return None
    if len(line) != _UUID_SIZE:
        return None
    return line[: _UUID_SIZE - 1].decode(errors="replace")


def uuid_from_dmi_entries(path=PATH_DMI_ENTRIES) -> Optional[str]:
    """Find the system UUID among the raw DMI entries, or None."""
    try:
        names = sorted(os.listdir(path))
    except OSError:
        return None
    for name in names:
        if name.startswith("."):
            continue
        entry = os.path.join(path, name)
        kind = _read(os.path.join(entry, "type"), _DMI_READ)
        if kind is None:
            continue
        match = _LEADING_INT.match(kind)
        if not match or int(match.group(1)) != 1:
            continue
        raw = _read(os.path.join(entry, "raw"), _DMI_READ)
        if raw is None or len(raw) < 24:
            continue
        return dmi_raw_to_uuid(raw)
    return None


def uuid_from_device_tree(path=PATH_UUID_IBM) -> Optional[str]:
    """Read the partition UUID from the device tree, or None."""
    data = _read(path, _UUID_SIZE - 1)
    if data is None:
        return None
    text = data.split(b"\0", 1)[0]
    return text.decode(errors="replace") if text else None


def uuid_from_dmi(
    product_uuid_path=PATH_DMI_PROD_UUID, dmi_entries_path=PATH_DMI_ENTRIES
) -> Optional[str]:
    """Read the system UUID from product_uuid, falling back to DMI entries."""
    return uuid_from_product_uuid(product_uuid_path) or uuid_from_dmi_entries(
        dmi_entries_path
    )


def hostnqn_generate(
    product_uuid_path=PATH_DMI_PROD_UUID,
    dmi_entries_path=PATH_DMI_ENTRIES,
    device_tree_path=PATH_UUID_IBM,
) -> str:
    """Generate a host NQN from the machine UUID or a random one."""
    system_uuid = uuid_from_dmi(product_uuid_path, dmi_entries_path)
    if system_uuid is None:
        system_uuid = uuid_from_device_tree(device_tree_path)
    if system_uuid is None:
        system_uuid = str(uuid.uuid4())
    return f"{_NQN_PREFIX}{system_uuid}"


def _read_first_line(path, size: int) -> Optional[str]:
    data = _read(path, size - 1)
    if data is None:
        return None
    text = data.split(b"\0", 1)[0]
    if not text:
        return None
    return text.split(b"\n", 1)[0].decode(errors="replace")


def hostnqn_from_file(path=HOSTNQN_FILE) -> Optional[str]:
    """Read the host NQN from its configuration file, or None."""
    return _read_first_line(path, _NQN_SIZE)


def hostid_from_file(path=HOSTID_FILE) -> Optional[str]:
    """Read the host identifier from its configuration file, or None."""
    return _read_first_line(path, _HOSTID_SIZE)