import pytest

from nvmfab.mi_util import (
    SmbusFreq,
    hexdump,
    sec_proto_description,
    smbus_freq_str,
    smbus_freq_val,
)


def test_hexdump_empty():
    assert hexdump(b"") == ""


def test_hexdump_short_row_content():
    out = hexdump(b"AB")
    assert out.startswith("00000000  41 42 ")
    assert out.endswith(" |AB|\n")
    assert out.count("\n") == 1


def test_hexdump_nonprintable_replaced():
    out = hexdump(bytes([0x00, 0x41, 0x7F, 0x20]))
    assert out.endswith("|.A. |\n")


def test_hexdump_rows_and_offsets():
    data = bytes(range(40))
    lines = hexdump(data).splitlines()
    assert len(lines) == 3
    assert [line[:8] for line in lines] == ["00000000", "00000010", "00000020"]


def test_hexdump_hex_column_aligned():
    data = bytes(range(0x30, 0x30 + 20))
    lines = hexdump(data).splitlines()
    # the hex column is padded so that the character column starts in the same place
    assert lines[0].index("|") == lines[1].index("|")


def test_hexdump_roundtrip_hex():
    data = bytes(range(256))
    recovered = bytearray()
    for line in hexdump(data).splitlines():
        hex_part = line[10:].split("|", 1)[0]
        recovered.extend(bytes.fromhex(hex_part))
    assert bytes(recovered) == data


@pytest.mark.parametrize(
    "proto_id, expected",
    [
        (0x00, "Security protocol information"),
        (0xEA, "NVMe"),
        (0xEC, "JEDEC Universal Flash Storage"),
        (0xED, "SDCard TrustedFlash Security"),
        (0xEE, "IEEE 1667"),
        (0xEF, "ATA Device Server Password Security"),
        (0xF0, "Vendor specific"),
        (0xFF, "Vendor specific"),
        (0x01, "unknown"),
        (0xEB, "unknown"),
    ],
)
def test_sec_proto_description(proto_id, expected):
    assert sec_proto_description(proto_id) == expected


@pytest.mark.parametrize(
    "freq, name",
    [
        (SmbusFreq.FREQ_100KHZ, "100k"),
        (SmbusFreq.FREQ_400KHZ, "400k"),
        (SmbusFreq.FREQ_1MHZ, "1M"),
    ],
)
def test_smbus_freq_names(freq, name):
    assert smbus_freq_str(freq) == name
    assert smbus_freq_val(name) is freq


def test_smbus_freq_roundtrip_all():
    for freq in SmbusFreq:
        assert smbus_freq_val(smbus_freq_str(freq)) is freq


def test_smbus_freq_str_unknown():
    assert smbus_freq_str(max(SmbusFreq) + 1) is None


def test_smbus_freq_val_unknown():
    with pytest.raises(ValueError):
        smbus_freq_val("2M")


def test_smbus_freq_val_case_sensitive():
    with pytest.raises(ValueError):
        smbus_freq_val("1m")