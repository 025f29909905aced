"""Helpers for presenting NVMe-MI data: hex dumps and field decoders."""

from enum import IntEnum
from typing import Optional

__all__ = [
    "SmbusFreq",
    "hexdump",
    "sec_proto_description",
    "smbus_freq_str",
    "smbus_freq_val",
]

_ROW_LEN = 16
_HEX_WIDTH = _ROW_LEN * len("00 ")


class SmbusFreq(IntEnum):
    """SMBus/I2C access frequency of a management endpoint port."""

    FREQ_100KHZ = 0x1
    FREQ_400KHZ = 0x2
    FREQ_1MHZ = 0x3


_SMBUS_FREQS = {
    SmbusFreq.FREQ_100KHZ: "100k",
    SmbusFreq.FREQ_400KHZ: "400k",
    SmbusFreq.FREQ_1MHZ: "1M",
}

_SEC_PROTOS = {
    0x00: "Security protocol information",
    0xEA: "NVMe",
    0xEC: "JEDEC Universal Flash Storage",
    0xED: "SDCard TrustedFlash Security",
    0xEE: "IEEE 1667",
    0xEF: "ATA Device Server Password Security",
}


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def hexdump(data: bytes) -> str:
    """Format ``data`` as a hex dump, 16 bytes per line.

    Each line holds the offset, the bytes in hex and their printable
    characters, and ends with a newline.
    """
    raw = bytes(data)
    lines = []
    for offset in range(0, len(raw), _ROW_LEN):
        row = raw[offset : offset + _ROW_LEN]
        hex_part = "".join(f"{b:02x} " for b in row)
        chars = "".join(_printable(b) for b in row)
        lines.append(f"{offset:08x}  {hex_part:<{_HEX_WIDTH}} |{chars}|\n")
    return "".join(lines)


def sec_proto_description(proto_id: int) -> str:
    """Describe a security protocol identifier."""
    name = _SEC_PROTOS.get(proto_id)
    if name is not None:
        return name
    if proto_id >= 0xF0:
        return "Vendor specific"
    return "unknown"


def smbus_freq_str(freq: int) -> Optional[str]:
    """Return the short name of an SMBus frequency, or None if unknown."""
    try:
        return _SMBUS_FREQS.get(SmbusFreq(freq))
    except ValueError:
        return None


def smbus_freq_val(name: str) -> SmbusFreq:
    """Return the SMBus frequency named ``name`` (``100k``, ``400k`` or ``1M``).

    Raises ``ValueError`` for any other name.
    """
    for freq, label in _SMBUS_FREQS.items():
        if label == name:
            return freq
    raise ValueError(f"unknown SMBus freq {name}. Try 100k, 400k or 1M")