"""NVMe over Fabrics helpers: connect options, field decoding, host ids and sysfs scans."""

__version__ = "1.1.0"

__all__ = [
    "byteorder",
    "config",
    "filters",
    "hostid",
    "mi_util",
    "strutil",
]