"""Fabrics connection options and decoders for discovery log page fields."""

from dataclasses import dataclass, fields
from enum import IntEnum, IntFlag
from typing import Optional

__all__ = [
    "DEF_CTRL_LOSS_TMO",
    "TrType",
    "AdrFam",
    "SubType",
    "Treq",
    "EFlags",
    "SecType",
    "PrType",
    "QpType",
    "Cms",
    "FabricsConfig",
    "default_config",
    "trtype_str",
    "adrfam_str",
    "subtype_str",
    "treq_str",
    "eflags_str",
    "sectype_str",
    "prtype_str",
    "qptype_str",
    "cms_str",
]

# Default to 600 seconds of reconnect attempts before giving up.
DEF_CTRL_LOSS_TMO = 600

_UNRECOGNIZED = "unrecognized"


class TrType(IntEnum):
    """Transport type."""

    RDMA = 1
    FC = 2
    TCP = 3
    LOOP = 254


class AdrFam(IntEnum):
    """Address family."""

    PCI = 0
    IP4 = 1
    IP6 = 2
    IB = 3
    FC = 4


class SubType(IntEnum):
    """Subsystem type of a discovery log entry."""

    DISC = 1
    NVME = 2
    CURR = 3


class Treq(IntFlag):
    """Transport requirements."""

    NOT_SPECIFIED = 0
    REQUIRED = 1
    NOT_REQUIRED = 2
    DISABLE_SQFLOW = 4


class EFlags(IntFlag):
    """Entry flags of a discovery log entry."""

    NONE = 0
    DUPRETINFO = 1 << 0
    EPCSD = 1 << 1
    NCC = 1 << 2


class SecType(IntEnum):
    """TCP security type."""

    NONE = 0
    TLS = 1
    TLS13 = 2


class PrType(IntEnum):
    """RDMA provider type."""

    NOT_SPECIFIED = 1
    IB = 2
    ROCE = 3
    ROCEV2 = 4
    IWARP = 5


class QpType(IntEnum):
    """RDMA queue pair service type."""

    CONNECTED = 1
    DATAGRAM = 2


class Cms(IntEnum):
    """RDMA connection management service."""

    RDMA_CM = 1


@dataclass
class FabricsConfig:
    """Options for a fabrics initiator connection.

    A field holding its default value counts as "not set".
    """

    host_traddr: Optional[str] = None
    host_iface: Optional[str] = None
    queue_size: int = 0
    nr_io_queues: int = 0
    reconnect_delay: int = 0
    ctrl_loss_tmo: int = DEF_CTRL_LOSS_TMO
    fast_io_fail_tmo: int = 0
    keep_alive_tmo: int = 0
    nr_write_queues: int = 0
    nr_poll_queues: int = 0
    tos: int = -1
    duplicate_connect: bool = False
    disable_sqflow: bool = False
    hdr_digest: bool = False
    data_digest: bool = False
    tls: bool = False

    def merge(self, other: "FabricsConfig") -> "FabricsConfig":
        """Fill every field still at its default from ``other``; return self."""
        for f in fields(self):
            if getattr(self, f.name) == f.default:
                setattr(self, f.name, getattr(other, f.name))
        return self

    def update(self, other: "FabricsConfig") -> "FabricsConfig":
        """Overwrite fields with every non-default value of ``other``; return self."""
        for f in fields(self):
            value = getattr(other, f.name)
            if value != f.default:
                setattr(self, f.name, value)
        return self


def default_config() -> FabricsConfig:
    """Return a configuration holding the default values."""
    return FabricsConfig()


_TRTYPES = {
    TrType.RDMA: "rdma",
    TrType.FC: "fc",
    TrType.TCP: "tcp",
    TrType.LOOP: "loop",
}

_ADRFAMS = {
    AdrFam.PCI: "pci",
    AdrFam.IP4: "ipv4",
    AdrFam.IP6: "ipv6",
    AdrFam.IB: "infiniband",
    AdrFam.FC: "fibre-channel",
}

_SUBTYPES = {
    SubType.DISC: "discovery subsystem referral",
    SubType.NVME: "nvme subsystem",
    SubType.CURR: "current discovery subsystem",
}

_TREQS = {
    Treq.NOT_SPECIFIED: "not specified",
    Treq.REQUIRED: "required",
    Treq.NOT_REQUIRED: "not required",
    Treq.DISABLE_SQFLOW: "not specified, sq flow control disable supported",
}

_EPCSD = "explicit discovery connections"
_DUP = "duplicate discovery information"
_NCC = "no cdc connectivity"

_EFLAGS = {
    EFlags.NONE: "not specified",
    EFlags.EPCSD: _EPCSD,
    EFlags.DUPRETINFO: _DUP,
    EFlags.EPCSD | EFlags.DUPRETINFO: f"{_EPCSD}, {_DUP}",
    EFlags.NCC: _NCC,
    EFlags.EPCSD | EFlags.NCC: f"{_EPCSD}, {_NCC}",
    EFlags.DUPRETINFO | EFlags.NCC: f"{_DUP}, {_NCC}",
    EFlags.EPCSD | EFlags.DUPRETINFO | EFlags.NCC: f"{_EPCSD}, {_DUP}, {_NCC}",
}

_SECTYPES = {
    SecType.NONE: "none",
    SecType.TLS: "tls",
    SecType.TLS13: "tls13",
}

_PRTYPES = {
    PrType.NOT_SPECIFIED: "not specified",
    PrType.IB: "infiniband",
    PrType.ROCE: "roce",
    PrType.ROCEV2: "roce-v2",
    PrType.IWARP: "iwarp",
}

_QPTYPES = {
    QpType.CONNECTED: "connected",
    QpType.DATAGRAM: "datagram",
}

_CMS = {
    Cms.RDMA_CM: "rdma-cm",
}


def _lookup(table, value: int) -> str:
    return table.get(int(value), _UNRECOGNIZED)


def trtype_str(trtype: int) -> str:
    """Decode the transport type field."""
    return _lookup(_TRTYPES, trtype)


def adrfam_str(adrfam: int) -> str:
    """Decode the address family field."""
    return _lookup(_ADRFAMS, adrfam)


def subtype_str(subtype: int) -> str:
    """Decode the subsystem type field."""
    return _lookup(_SUBTYPES, subtype)


def treq_str(treq: int) -> str:
    """Decode the transport requirements field."""
    return _lookup(_TREQS, treq)


def eflags_str(eflags: int) -> str:
    """Decode the entry flags field."""
    return _lookup(_EFLAGS, eflags)


def sectype_str(sectype: int) -> str:
    """Decode the TCP security type field."""
    return _lookup(_SECTYPES, sectype)


def prtype_str(prtype: int) -> str:
    """Decode the RDMA provider type field."""
    return _lookup(_PRTYPES, prtype)


def qptype_str(qptype: int) -> str:
    """Decode the RDMA QP service type field."""
    return _lookup(_QPTYPES, qptype)


def cms_str(cm: int) -> str:
    """Decode the RDMA connection management service field."""
    return _lookup(_CMS, cm)