# nvmfab

Helpers for NVMe over Fabrics on Linux, in plain Python with no dependencies
outside the standard library.

## Modules

- `nvmfab.config`: `FabricsConfig` is a dataclass of fabrics connect options
  (`host_traddr`, `host_iface`, queue counts, timeouts, `tos`, digests, `tls`
  and so on). `default_config()` returns the defaults (`ctrl_loss_tmo` 600,
  `tos` -1, everything else unset). `merge(other)` fills every field still at
  its default from `other`; `update(other)` overwrites fields with every
  non-default value of `other`. Both return the config itself.
  `trtype_str`, `adrfam_str`, `subtype_str`, `treq_str`, `eflags_str`,
  `sectype_str`, `prtype_str`, `qptype_str` and `cms_str` decode discovery log
  entry fields into text, giving `"unrecognized"` for unknown values. The
  enums `TrType`, `AdrFam`, `SubType`, `Treq`, `EFlags`, `SecType`, `PrType`,
  `QpType` and `Cms` name the field values.
- `nvmfab.hostid`: `hostnqn_generate()` builds a host NQN of the form
  `nqn.2014-08.org.nvmexpress:uuid:<uuid>` from the DMI product UUID, the raw
  DMI entries or the device-tree partition UUID, falling back to a random
  UUID. `hostnqn_from_file()` and `hostid_from_file()` read the first line of
  `/etc/nvme/hostnqn` and `/etc/nvme/hostid`, returning `None` when absent.
  Every path can be passed in, and `dmi_raw_to_uuid` formats the UUID of a
  raw SMBIOS type 1 entry.
- `nvmfab.filters`: `namespace_filter`, `paths_filter`, `ctrls_filter` and
  `subsys_filter` recognise sysfs entry names such as `nvme0n1`, `nvme0c1n1`,
  `nvme0` and `nvme-subsys0`. `scan_subsystems`, `scan_ctrls`,
  `scan_subsystem_namespaces`, `scan_ctrl_namespace_paths` and
  `scan_ctrl_namespaces` list the matching entries of a directory, sorted.
- `nvmfab.byteorder`: `bswap_16/32/64`, and `le*_to_cpu`, `be*_to_cpu`,
  `cpu_to_le*`, `cpu_to_be*` to decode and encode fixed-width integers.
- `nvmfab.strutil`: `strcount`, `strstarts`, `strends`.
- `nvmfab.mi_util`: `hexdump` formats bytes 16 per line with offsets and
  printable characters; `sec_proto_description` names security protocol ids;
  `SmbusFreq`, `smbus_freq_str` and `smbus_freq_val` map SMBus frequencies to
  and from `"100k"`, `"400k"` and `"1M"`.

## Example

```python
from nvmfab.config import default_config, FabricsConfig, trtype_str
from nvmfab.hostid import hostnqn_generate
from nvmfab.mi_util import hexdump

cfg = default_config()
cfg.merge(FabricsConfig(nr_io_queues=4))
print(cfg.nr_io_queues)       # 4
print(trtype_str(3))          # "tcp"
print(hostnqn_generate())
print(hexdump(b"NVMe-oF"), end="")
```

## What it does not do

The package does not parse IP addresses for fabrics transports, build the
connect option string, or connect controllers through `/dev/nvme-fabrics`.
It has no command-line program and sends no commands to devices; it covers
configuration, field decoding, host identifiers and sysfs name scanning.

## Tests

```
pip install -e .[test]
pytest
```